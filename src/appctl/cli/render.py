"""Rendering of command results for the CLI layer.

This module is responsible for:

* Rendering application lists as a Rich table.
* Rendering a single application as a vertical key/value table.
* Dumping either as JSON when ``--json`` is given.

All display-related logic lives here — no business logic, no remote
calls.
"""

from __future__ import annotations

import dataclasses
import json
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from appctl.cli.console import output
from appctl.core.models import Application, AppStatus
from appctl.exceptions import EnvironmentError


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for result rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Display options for :meth:`Renderer.render`."""

    hide_header: bool = False
    vertical: bool = False
    as_json: bool = False


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

_STATUS_STYLES: dict[str, str] = {
    AppStatus.RUNNING.value: "green",
    AppStatus.PENDING.value: "yellow",
    AppStatus.PAUSED.value: "yellow",
    AppStatus.SUSPENDED.value: "yellow",
    AppStatus.DEAD.value: "red",
}


def _format_status(status: str) -> str:
    """Colour known states; pass unknown ones through verbatim."""
    if not status:
        return "—"
    style = _STATUS_STYLES.get(status.lower())
    return f"[{style}]{status}[/{style}]" if style else status


def _format_owner(app: Application) -> str:
    return app.organization.slug if app.organization else "—"


def _format_deploy(app: Application) -> str:
    if not app.deployed or app.version is None:
        return "—"
    return f"v{app.version}"


def _app_rows(app: Application) -> list[tuple[str, str]]:
    """Key/value rows for the vertical single-app view."""
    return [
        ("Name", app.name),
        ("Owner", _format_owner(app)),
        ("Status", _format_status(app.status)),
        ("Version", _format_deploy(app)),
        ("Hostname", app.hostname or "—"),
    ]


def _to_jsonable(result: Application | Sequence[Application]) -> Any:
    if isinstance(result, Application):
        return dataclasses.asdict(result)
    return [dataclasses.asdict(app) for app in result]


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------

class Renderer:
    """Pure sink turning results into terminal output on stdout."""

    def render(
        self,
        result: Application | Sequence[Application],
        options: RenderOptions | None = None,
    ) -> None:
        options = options or RenderOptions()

        if options.as_json:
            # Plain print: JSON brackets must not be parsed as Rich markup.
            print(json.dumps(_to_jsonable(result), indent=2), file=sys.stdout)
            return

        if isinstance(result, Application):
            if options.vertical:
                self._render_vertical(result, options)
            else:
                self._render_list([result], options)
            return

        self._render_list(result, options)

    @staticmethod
    def _render_list(apps: Sequence[Application], options: RenderOptions) -> None:
        table_class = _import_rich_table()
        table = table_class(
            show_header=not options.hide_header,
            header_style="bold magenta",
            border_style="dim",
        )
        table.add_column("NAME", justify="left", min_width=10)
        table.add_column("OWNER", justify="left")
        table.add_column("STATUS", justify="left")
        table.add_column("LATEST DEPLOY", justify="right")

        for app in apps:
            table.add_row(
                app.name,
                _format_owner(app),
                _format_status(app.status),
                _format_deploy(app),
            )
        output.print(table)

    @staticmethod
    def _render_vertical(app: Application, options: RenderOptions) -> None:
        table_class = _import_rich_table()
        table = table_class(
            show_header=not options.hide_header,
            box=None,
            pad_edge=False,
        )
        table.add_column("Field", style="bold cyan")
        table.add_column("Value")
        for label, value in _app_rows(app):
            table.add_row(label, value)
        output.print(table)
