"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and the CLI
must satisfy.  Core code depends ONLY on these protocols — never on
concrete implementations — preserving the dependency inversion
principle and letting tests inject scripted fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from appctl.core.models import Application, Organization


class ControlPlaneClient(Protocol):
    """Contract for the remote control-plane API.

    Every method may raise :class:`~appctl.exceptions.TransportError`;
    lookups of missing resources raise
    :class:`~appctl.exceptions.NotFoundError`.
    """

    def list_applications(self) -> list[Application]:
        ...  # pragma: no cover

    def get_application(self, name: str) -> Application:
        ...  # pragma: no cover

    def create_application(self, name: str, org_id: str) -> Application:
        """Create an app owned by *org_id*.  An empty *name* asks the
        platform to generate one."""
        ...  # pragma: no cover

    def delete_application(self, name: str) -> None:
        ...  # pragma: no cover

    def move_application(self, name: str, org_id: str) -> Application:
        ...  # pragma: no cover

    def pause_application(self, name: str) -> Application:
        ...  # pragma: no cover

    def resume_application(self, name: str) -> Application:
        ...  # pragma: no cover

    def restart_application(self, name: str) -> Application:
        ...  # pragma: no cover

    def list_organizations(self) -> list[Organization]:
        ...  # pragma: no cover


class Prompter(Protocol):
    """Contract for interactive user prompts.

    Every prompt raises :class:`~appctl.exceptions.OperationCancelled`
    when the user aborts it (Ctrl+C / Esc), so callers can tell a
    cancellation apart from a data error.
    """

    def text(self, message: str, *, default: str = "") -> str:
        """Ask for free text; may return an empty string."""
        ...  # pragma: no cover

    def confirm(self, message: str, *, default: bool = False) -> bool:
        ...  # pragma: no cover

    def select(self, message: str, choices: Sequence[tuple[str, str]]) -> str:
        """Ask for one of *choices* given as ``(label, value)`` pairs and
        return the chosen value."""
        ...  # pragma: no cover

    def warn(self, message: str) -> None:
        """Show a warning right before a confirmation question."""
        ...  # pragma: no cover


class ConfigPathResolver(Protocol):
    """Return the default app config file path for a working directory."""

    def __call__(self, working_dir: Path) -> Path:
        ...  # pragma: no cover
