"""Interactive prompts for the CLI layer, backed by questionary.

:class:`QuestionaryPrompter` satisfies
:class:`~appctl.core.protocols.Prompter`.  questionary's ``ask()``
returns ``None`` when the user presses Ctrl+C or Esc; every prompt here
turns that into :class:`~appctl.exceptions.OperationCancelled`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from appctl.cli.console import console
from appctl.exceptions import EnvironmentError, OperationCancelled


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _answered(answer: Any, message: str) -> Any:
    if answer is None:
        raise OperationCancelled(f"Prompt cancelled: {message}")
    return answer


class QuestionaryPrompter:
    """Terminal prompter used by every interactive command."""

    def text(self, message: str, *, default: str = "") -> str:
        questionary = _import_questionary()
        answer = questionary.text(message, default=default).ask()
        return str(_answered(answer, message))

    def confirm(self, message: str, *, default: bool = False) -> bool:
        questionary = _import_questionary()
        answer = questionary.confirm(message, default=default).ask()
        return bool(_answered(answer, message))

    def select(self, message: str, choices: Sequence[tuple[str, str]]) -> str:
        questionary = _import_questionary()
        answer = questionary.select(
            message,
            choices=[
                questionary.Choice(title=label, value=value)
                for label, value in choices
            ],
            use_arrow_keys=True,
            use_shortcuts=False,
        ).ask()
        return str(_answered(answer, message))

    def warn(self, message: str) -> None:
        console.print(f"[bold red]{message}[/bold red]")
