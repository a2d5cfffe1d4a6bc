"""CLI application entry point and command routing for appctl.

This module is the **sole error boundary** for the entire application.
It catches :class:`~appctl.exceptions.AppctlError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — commands are delegated to
  :mod:`appctl.cli.apps`, which composes the core layer.
* This module is the only place that builds the per-invocation
  :class:`~appctl.cli.context.CommandContext` and the only place that
  translates between the domain world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from appctl.cli import exit_codes
from appctl.cli.console import console
from appctl.exceptions import AppctlError
from appctl.version import __version__

if TYPE_CHECKING:
    from appctl.cli.context import CommandContext

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Supported commands::

        appctl apps list
        appctl apps create [NAME] [--name N] [--org SLUG] [-p PORT] [--builder B]
        appctl apps destroy NAME [-y]
        appctl apps move NAME [--org SLUG] [-y]
        appctl apps pause | resume | restart
    """
    parser = argparse.ArgumentParser(
        prog="appctl",
        description="Manage applications on the platform.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("-j", "--json", action="store_true", help="Render results as JSON.")
    parser.add_argument("-a", "--app", default="", help="App name to operate on.")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to the app config file (default: ./fly.toml).",
    )

    commands = parser.add_subparsers(dest="command")
    apps = commands.add_parser(
        "apps",
        aliases=["app"],
        help="Manage apps.",
        description="List, create, destroy, move, pause, resume and restart apps.",
    )
    apps_commands = apps.add_subparsers(dest="apps_command")

    apps_commands.add_parser("list", aliases=["ls"], help="List applications.")

    create = apps_commands.add_parser("create", help="Create a new application.")
    create.add_argument("positional_name", nargs="?", default=None, metavar="NAME")
    create.add_argument("--name", default=None, help="The app name to use.")
    create.add_argument("--org", default=None, help="The organization that will own the app.")
    create.add_argument(
        "-p",
        "--port",
        default=None,
        help="Internal port on application to connect to external services.",
    )
    create.add_argument(
        "--builder",
        default=None,
        help="The Cloud Native Buildpacks builder to use when deploying the app.",
    )

    destroy = apps_commands.add_parser("destroy", help="Permanently destroy an app.")
    destroy.add_argument("app_name", metavar="NAME")
    destroy.add_argument("-y", "--yes", action="store_true", help="Accept all confirmations.")

    move = apps_commands.add_parser("move", help="Move an app to another organization.")
    move.add_argument("app_name", metavar="NAME")
    move.add_argument("-y", "--yes", action="store_true", help="Accept all confirmations.")
    move.add_argument("--org", default=None, help="The organization to move the app to.")

    apps_commands.add_parser("pause", help="Pause the selected app.")
    apps_commands.add_parser("resume", help="Resume the selected app.")
    apps_commands.add_parser("restart", help="Restart the selected app.")

    # Keep a handle for "appctl apps" without a sub-command.
    parser.set_defaults(_apps_parser=apps)
    return parser


# ---------------------------------------------------------------------------
# Context construction
# ---------------------------------------------------------------------------

def _build_context(args: argparse.Namespace) -> CommandContext:
    """Create the control-plane client, prompter and context for one run.

    Raises :class:`~appctl.exceptions.SessionRequiredError` when no
    access token is configured.
    """
    from appctl.cli.context import CommandContext
    from appctl.cli.prompts import QuestionaryPrompter
    from appctl.infra.graphql_client import GraphQLControlPlaneClient
    from appctl.infra.settings import ClientSettings

    client = GraphQLControlPlaneClient(ClientSettings())
    return CommandContext(
        client=client,
        prompter=QuestionaryPrompter(),
        config_file=args.config,
        app_name=args.app,
        json_output=args.json,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _select_handler(args: argparse.Namespace) -> Callable[..., int]:
    """Bind the parsed arguments to the matching :mod:`appctl.cli.apps` handler."""
    from appctl.cli import apps

    command = args.apps_command
    if command in ("list", "ls"):
        return apps.run_apps_list
    if command == "create":
        return lambda ctx: apps.run_apps_create(
            ctx,
            args.positional_name,
            name=args.name,
            org=args.org,
            port=args.port,
            builder=args.builder,
        )
    if command == "destroy":
        return lambda ctx: apps.run_apps_destroy(ctx, args.app_name, yes=args.yes)
    if command == "move":
        return lambda ctx: apps.run_apps_move(ctx, args.app_name, org=args.org, yes=args.yes)
    if command == "pause":
        return apps.run_apps_pause
    if command == "resume":
        return apps.run_apps_resume
    if command == "restart":
        return apps.run_apps_restart
    raise AssertionError(f"unhandled apps command {command!r}")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the appctl CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    from appctl.cli.log_setup import configure_logging

    configure_logging(verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.apps_command is None:
        args._apps_parser.print_help()
        return exit_codes.SUCCESS

    handler = _select_handler(args)
    ctx = _build_context(args)
    logger.debug("Running apps %s", args.apps_command)
    try:
        return handler(ctx)
    finally:
        close = getattr(ctx.client, "close", None)
        if callable(close):
            close()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except AppctlError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
