"""Shared pytest fixtures and configuration for the appctl test suite.

Guidelines
----------
* No internet access in any test.
* The control plane is mocked at the client boundary (``MagicMock``) or
  at the HTTP boundary (``httpx.MockTransport``).
* Prompts are answered by a scripted prompter — never a real terminal.
* Config files are written under ``tmp_path`` only.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from appctl.cli.context import CommandContext
from appctl.core.models import Application, Organization


class ScriptedPrompter:
    """Prompter that replays canned answers and records every question.

    Each answer list is consumed in order; an answer that is an
    exception instance is raised instead of returned.
    """

    def __init__(
        self,
        *,
        text: Sequence[Any] = (),
        confirm: Sequence[Any] = (),
        select: Sequence[Any] = (),
    ) -> None:
        self._answers: dict[str, list[Any]] = {
            "text": list(text),
            "confirm": list(confirm),
            "select": list(select),
        }
        self.calls: list[tuple[str, str]] = []
        self.warnings: list[str] = []
        self.select_choices: list[list[tuple[str, str]]] = []

    def _next(self, kind: str, message: str) -> Any:
        self.calls.append((kind, message))
        queue = self._answers[kind]
        if not queue:
            raise AssertionError(f"unexpected {kind} prompt: {message}")
        answer = queue.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def text(self, message: str, *, default: str = "") -> str:
        return self._next("text", message)

    def confirm(self, message: str, *, default: bool = False) -> bool:
        return self._next("confirm", message)

    def select(self, message: str, choices: Sequence[tuple[str, str]]) -> str:
        self.select_choices.append(list(choices))
        return self._next("select", message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


ACME = Organization(id="acme-org-id", slug="acme", name="Acme Corp")
OTHER = Organization(id="other-org-id", slug="other", name="Other Inc")


@pytest.fixture()
def orgs() -> list[Organization]:
    return [ACME, OTHER]


@pytest.fixture()
def client(orgs: list[Organization]) -> MagicMock:
    """Control-plane client double with two accessible organizations."""
    mock = MagicMock()
    mock.list_organizations.return_value = list(orgs)
    return mock


@pytest.fixture()
def make_prompter() -> Callable[..., ScriptedPrompter]:
    return ScriptedPrompter


@pytest.fixture()
def make_context(
    client: MagicMock, tmp_path: Path,
) -> Callable[..., CommandContext]:
    """Build a :class:`CommandContext` rooted in ``tmp_path``."""

    def _factory(prompter: ScriptedPrompter | None = None, **overrides: Any) -> CommandContext:
        fields: dict[str, Any] = {
            "client": client,
            "prompter": prompter or ScriptedPrompter(),
            "working_dir": tmp_path,
        }
        fields.update(overrides)
        return CommandContext(**fields)

    return _factory


def make_app(**overrides: Any) -> Application:
    defaults: dict[str, Any] = {
        "name": "myapp",
        "status": "pending",
        "organization": ACME,
        "id": "myapp",
        "definition": {"kill_timeout": 5},
    }
    defaults.update(overrides)
    return Application(**defaults)


@pytest.fixture()
def app_factory() -> Callable[..., Application]:
    return make_app
