"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from appctl import __version__
from appctl.cli import exit_codes
from appctl.cli.app import main
from appctl.exceptions import (
    AppctlError,
    AppNameRequiredError,
    ConflictingInputError,
    EnvironmentError,
    InvalidInputError,
    NotFoundError,
    OperationCancelled,
    OrganizationResolutionError,
    PersistenceError,
    SessionRequiredError,
    TransportError,
    with_prefix,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidInputError,
            AppNameRequiredError,
            ConflictingInputError,
            OrganizationResolutionError,
            OperationCancelled,
            TransportError,
            NotFoundError,
            PersistenceError,
            SessionRequiredError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[AppctlError]
    ) -> None:
        assert issubclass(exc_class, AppctlError)

    def test_not_found_is_a_transport_error(self) -> None:
        assert issubclass(NotFoundError, TransportError)

    def test_hint_is_stored(self) -> None:
        err = AppctlError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert AppctlError("boom").hint is None

    def test_with_prefix_keeps_class_and_hint(self) -> None:
        original = NotFoundError("Could not find app", hint="check the name")
        wrapped = with_prefix(original, "Error fetching app")
        assert isinstance(wrapped, NotFoundError)
        assert str(wrapped) == "Error fetching app: Could not find app"
        assert wrapped.hint == "check the name"
        assert wrapped.__cause__ is original


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self) -> None:
        assert main([]) == exit_codes.SUCCESS

    def test_apps_without_subcommand_prints_help(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main(["apps"]) == exit_codes.SUCCESS
        assert "destroy" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_destroy_requires_name(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["apps", "destroy"])
        assert exc_info.value.code == 2

    def test_missing_token_requires_session(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: object,
    ) -> None:
        monkeypatch.delenv("APPCTL_ACCESS_TOKEN", raising=False)
        monkeypatch.delenv("FLY_API_TOKEN", raising=False)
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SessionRequiredError):
            main(["apps", "list"])

    @pytest.mark.parametrize(
        ("argv", "handler"),
        [
            (["apps", "list"], "run_apps_list"),
            (["app", "ls"], "run_apps_list"),
            (["apps", "pause"], "run_apps_pause"),
            (["apps", "resume"], "run_apps_resume"),
            (["apps", "restart"], "run_apps_restart"),
        ],
    )
    def test_routes_to_handler(
        self, monkeypatch: pytest.MonkeyPatch, argv: list[str], handler: str,
    ) -> None:
        from appctl.cli import app as app_module
        from appctl.cli import apps

        seen: list[str] = []
        monkeypatch.setattr(
            app_module, "_build_context", lambda args: SimpleNamespace(client=MagicMock()),
        )
        monkeypatch.setattr(
            apps, handler, lambda ctx: seen.append(handler) or exit_codes.SUCCESS,
        )
        assert main(argv) == exit_codes.SUCCESS
        assert seen == [handler]


# ---------------------------------------------------------------------------
# Process error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run_cli(self, monkeypatch: pytest.MonkeyPatch, exc: BaseException) -> int:
        from appctl.cli import app as app_module

        def _boom() -> int:
            raise exc

        monkeypatch.setattr(app_module, "main", _boom)
        with pytest.raises(SystemExit) as exc_info:
            app_module.cli()
        return int(exc_info.value.code)

    def test_known_error_exits_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = self._run_cli(monkeypatch, TransportError("boom", hint="retry"))
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "boom" in err
        assert "retry" in err

    def test_keyboard_interrupt_exits_130(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert self._run_cli(monkeypatch, KeyboardInterrupt()) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error_exits_two(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert self._run_cli(monkeypatch, RuntimeError("bug")) == exit_codes.UNEXPECTED_ERROR
