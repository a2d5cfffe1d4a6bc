"""Tests for the per-invocation command context."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from appctl.cli.console import console, output
from appctl.cli.context import CommandContext
from appctl.exceptions import AppNameRequiredError, PersistenceError


class TestCommandContext:
    def test_app_flag_wins_over_file(
        self, make_context: Callable[..., CommandContext], tmp_path: Path,
    ) -> None:
        (tmp_path / "fly.toml").write_text('app = "fromfile"\n', encoding="utf-8")
        assert make_context(app_name="flag").require_app_name() == "flag"

    def test_explicit_config_file(
        self, make_context: Callable[..., CommandContext], tmp_path: Path,
    ) -> None:
        custom = tmp_path / "staging.toml"
        custom.write_text('app = "staging-app"\n', encoding="utf-8")
        assert make_context(config_file=custom).require_app_name() == "staging-app"

    def test_file_without_app_key(
        self, make_context: Callable[..., CommandContext], tmp_path: Path,
    ) -> None:
        (tmp_path / "fly.toml").write_text("kill_timeout = 5\n", encoding="utf-8")
        with pytest.raises(AppNameRequiredError):
            make_context().require_app_name()

    def test_broken_file_is_persistence_error(
        self, make_context: Callable[..., CommandContext], tmp_path: Path,
    ) -> None:
        (tmp_path / "fly.toml").write_text("app = ", encoding="utf-8")
        with pytest.raises(PersistenceError):
            make_context().require_app_name()

    def test_json_flag_reaches_render_options(
        self, make_context: Callable[..., CommandContext],
    ) -> None:
        options = make_context(json_output=True).render_options(vertical=True)
        assert options.as_json is True
        assert options.vertical is True

    def test_status_lines_follow_output_mode(
        self, make_context: Callable[..., CommandContext],
    ) -> None:
        assert make_context().status is output
        assert make_context(json_output=True).status is console
