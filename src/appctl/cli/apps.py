"""``appctl apps`` — one handler per application operation.

Each handler is a short linear pipeline: resolve parameters, resolve the
organization and/or confirm where needed, call exactly one remote
mutation or query, then report.  Handlers return an exit code;
:func:`absorb_cancellation` turns a user-aborted prompt into a clean
no-op exit while every other :class:`~appctl.exceptions.AppctlError`
propagates to the error boundary in :mod:`appctl.cli.app`.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import ParamSpec

from appctl.cli import exit_codes
from appctl.cli.console import console
from appctl.cli.context import CommandContext
from appctl.core.confirmation import confirm_action
from appctl.core.models import AppConfig, Build
from appctl.core.org_selector import select_organization
from appctl.core.params import resolve_create_params, resolve_target_params
from appctl.exceptions import OperationCancelled, TransportError, with_prefix
from appctl.infra.app_config_file import write_app_config

logger = logging.getLogger(__name__)

P = ParamSpec("P")


def absorb_cancellation(handler: Callable[P, int]) -> Callable[P, int]:
    """Map :class:`OperationCancelled` to a successful exit."""

    @functools.wraps(handler)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> int:
        try:
            return handler(*args, **kwargs)
        except OperationCancelled as exc:
            logger.debug("Cancelled: %s", exc)
            console.print("[yellow]Cancelled.[/yellow]")
            return exit_codes.SUCCESS

    return wrapper


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------

def run_apps_list(ctx: CommandContext) -> int:
    apps = ctx.client.list_applications()
    ctx.renderer.render(apps, ctx.render_options())
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------

@absorb_cancellation
def run_apps_create(
    ctx: CommandContext,
    positional_name: str | None = None,
    *,
    name: str | None = None,
    org: str | None = None,
    port: str | None = None,
    builder: str | None = None,
) -> int:
    """Create an app and write its config file.

    Flow:
    1. Validate the port and the name sources, prompting for a name if
       none was given.
    2. Resolve the owning organization.
    3. Create the app remotely.
    4. Merge the returned identity and definition into a fresh config.
    5. Write the config, only now that the app exists remotely.
    """
    params = resolve_create_params(
        positional_name,
        name=name,
        org=org,
        port=port,
        builder=builder,
        prompter=ctx.prompter,
    )
    if not params.name_from_prompt:
        ctx.status.print(f"Selected App Name: {params.app_name}")

    organization = select_organization(ctx.client, ctx.prompter, params.org_slug).unwrap()

    app = ctx.client.create_application(params.app_name, organization.id)
    logger.debug("Created app %s in %s", app.name, organization.slug)

    config = AppConfig(build=Build(builder=params.builder) if params.builder else None)
    config.adopt(app)
    if params.internal_port is not None:
        config.set_internal_port(params.internal_port)

    ctx.status.print("New app created")
    ctx.renderer.render(app, ctx.render_options(hide_header=True, vertical=True))

    path = ctx.resolve_config_path(ctx.config_file or ctx.working_dir)
    write_app_config(path, config)
    ctx.status.print(f"Wrote config file {path}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# destroy
# ---------------------------------------------------------------------------

@absorb_cancellation
def run_apps_destroy(ctx: CommandContext, app_name: str, *, yes: bool = False) -> int:
    params = resolve_target_params(app_name, yes=yes)

    if not confirm_action(
        ctx.prompter,
        warning="Destroying an app is not reversible.",
        question=f"Destroy app {params.app_name}?",
        skip=params.skip_confirmation,
    ):
        return exit_codes.SUCCESS

    ctx.client.delete_application(params.app_name)
    ctx.status.print(f"Destroyed app {params.app_name}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# move
# ---------------------------------------------------------------------------

@absorb_cancellation
def run_apps_move(
    ctx: CommandContext,
    app_name: str,
    *,
    org: str | None = None,
    yes: bool = False,
) -> int:
    params = resolve_target_params(app_name, org=org, yes=yes)

    organization = select_organization(ctx.client, ctx.prompter, params.org_slug).unwrap()

    try:
        app = ctx.client.get_application(params.app_name)
    except TransportError as exc:
        raise with_prefix(exc, "Error fetching app") from exc

    current = app.organization.slug if app.organization else "unknown"
    if not confirm_action(
        ctx.prompter,
        warning="Are you sure you want to move this app?",
        question=f"Move {params.app_name} from {current} to {organization.slug}?",
        skip=params.skip_confirmation,
    ):
        return exit_codes.SUCCESS

    try:
        ctx.client.move_application(params.app_name, organization.id)
    except TransportError as exc:
        raise with_prefix(exc, "Failed to move app") from exc

    ctx.status.print(f"Successfully moved {params.app_name} to {organization.slug}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# pause / resume / restart
# ---------------------------------------------------------------------------

def run_apps_pause(ctx: CommandContext) -> int:
    app = ctx.client.pause_application(ctx.require_app_name())
    ctx.status.print(f"{app.name} is now {app.status}")
    return exit_codes.SUCCESS


def run_apps_resume(ctx: CommandContext) -> int:
    app = ctx.client.resume_application(ctx.require_app_name())
    ctx.status.print(f"{app.name} is now {app.status}")
    return exit_codes.SUCCESS


def run_apps_restart(ctx: CommandContext) -> int:
    app = ctx.client.restart_application(ctx.require_app_name())
    ctx.status.print(f"{app.name} is being restarted")
    return exit_codes.SUCCESS
