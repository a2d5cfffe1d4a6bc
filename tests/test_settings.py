"""Tests for environment-driven client settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from appctl.infra.settings import ClientSettings


class TestClientSettings:
    def test_prefixed_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("APPCTL_API_BASE_URL", "https://api.example.test/")
        monkeypatch.setenv("APPCTL_ACCESS_TOKEN", "tok")
        settings = ClientSettings()
        assert settings.access_token == "tok"
        assert settings.graphql_url == "https://api.example.test/graphql"

    def test_fly_token_alias(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("APPCTL_ACCESS_TOKEN", raising=False)
        monkeypatch.setenv("FLY_API_TOKEN", "fly-tok")
        assert ClientSettings().access_token == "fly-tok"

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            ClientSettings(http_timeout_seconds=0)
