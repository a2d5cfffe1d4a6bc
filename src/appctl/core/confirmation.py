"""Confirmation gate for destructive or mutating commands."""

from __future__ import annotations

from appctl.core.protocols import Prompter
from appctl.exceptions import OperationCancelled


def confirm_action(
    prompter: Prompter,
    *,
    warning: str,
    question: str,
    skip: bool = False,
) -> bool:
    """Return ``True`` when the caller may proceed.

    With *skip* set (``--yes``) nothing is shown.  Otherwise *warning* is
    displayed followed by a yes/no *question* defaulting to "no".  A
    negative answer or an aborted prompt both return ``False``: declining
    is a successful no-op, never an error.
    """
    if skip:
        return True

    prompter.warn(warning)
    try:
        return prompter.confirm(question, default=False)
    except OperationCancelled:
        return False
