"""Tests for result rendering."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

from appctl.cli.render import Renderer, RenderOptions, _format_deploy, _format_status


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------

class TestHelpers:
    def test_known_status_is_coloured(self) -> None:
        assert _format_status("running") == "[green]running[/green]"

    def test_unknown_status_passes_through(self) -> None:
        assert _format_status("migrating") == "migrating"

    def test_empty_status(self) -> None:
        assert _format_status("") == "—"

    def test_deploy_version(self, app_factory: Callable[..., Any]) -> None:
        assert _format_deploy(app_factory(deployed=True, version=7)) == "v7"
        assert _format_deploy(app_factory(deployed=False, version=7)) == "—"


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------

class TestRenderer:
    def test_list_table(
        self, app_factory: Callable[..., Any], capsys: pytest.CaptureFixture[str],
    ) -> None:
        Renderer().render([app_factory(name="alpha"), app_factory(name="beta")])
        out = capsys.readouterr().out
        assert "NAME" in out
        assert "alpha" in out
        assert "beta" in out

    def test_hidden_header(
        self, app_factory: Callable[..., Any], capsys: pytest.CaptureFixture[str],
    ) -> None:
        Renderer().render([app_factory()], RenderOptions(hide_header=True))
        assert "NAME" not in capsys.readouterr().out

    def test_vertical_single_app(
        self, app_factory: Callable[..., Any], capsys: pytest.CaptureFixture[str],
    ) -> None:
        Renderer().render(app_factory(), RenderOptions(hide_header=True, vertical=True))
        out = capsys.readouterr().out
        assert "Owner" in out
        assert "acme" in out

    def test_json(
        self, app_factory: Callable[..., Any], capsys: pytest.CaptureFixture[str],
    ) -> None:
        Renderer().render([app_factory()], RenderOptions(as_json=True))
        data = json.loads(capsys.readouterr().out)
        assert data[0]["name"] == "myapp"
        assert data[0]["organization"]["slug"] == "acme"
