"""Parameter resolution — merges arguments, flags and prompts.

Each resolver turns the raw positional arguments and flag values of one
command into a frozen parameter set from :mod:`appctl.core.models`, or
raises a typed error.  Nothing is mutated on failure; the only side
effect is the interactive name prompt, performed through an injected
:class:`~appctl.core.protocols.Prompter`.
"""

from __future__ import annotations

import logging
import re

from appctl.core.models import CreateParams, TargetParams
from appctl.core.protocols import Prompter
from appctl.exceptions import ConflictingInputError, InvalidInputError

logger = logging.getLogger(__name__)

NAME_PROMPT = "App Name (leave blank to use an auto-generated name)"

_PORT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_port(raw: str | None) -> int | None:
    """Parse a ``--port`` value as a base-10 integer.

    ``None`` and the empty string mean "no port".  Anything else that is
    not a plain ASCII integer raises :class:`InvalidInputError` naming the
    value verbatim; there is no silent coercion to zero.  Underscores,
    surrounding whitespace and non-ASCII digits are rejected even though
    ``int()`` would take them.
    """
    if raw is None or raw == "":
        return None
    if _PORT_PATTERN.fullmatch(raw) is None:
        raise InvalidInputError(
            f"-p ports must be numeric, got {raw!r}",
            hint="Pass the internal port as a number, e.g. --port 8080",
        )
    return int(raw)


def resolve_app_name(
    positional: str | None,
    flag: str | None,
    prompter: Prompter,
) -> tuple[str, bool]:
    """Pick the app name from the positional argument, ``--name``, or a prompt.

    Returns ``(name, prompted)``.  Supplying both sources is a
    :class:`ConflictingInputError` even when they are equal.
    """
    positional = positional or ""
    flag = flag or ""

    if positional and flag:
        raise ConflictingInputError(
            f"two app names specified {positional} and {flag}. "
            "Select and specify only one",
        )

    name = flag or positional
    if name:
        return name, False

    # Empty input is allowed: the platform generates a name.
    return prompter.text(NAME_PROMPT).strip(), True


def resolve_create_params(
    positional_name: str | None,
    *,
    name: str | None,
    org: str | None,
    port: str | None,
    builder: str | None,
    prompter: Prompter,
) -> CreateParams:
    """Resolve everything ``apps create`` needs.

    Validation happens before the name prompt, so a malformed port or a
    name conflict never reaches the user as a question.
    """
    internal_port = parse_port(port)
    app_name, prompted = resolve_app_name(positional_name, name, prompter)

    params = CreateParams(
        app_name=app_name,
        org_slug=org or "",
        internal_port=internal_port,
        builder=builder or "",
        name_from_prompt=prompted,
    )
    logger.debug("Resolved create parameters: %s", params)
    return params


def resolve_target_params(
    app_name: str,
    *,
    org: str | None = None,
    yes: bool = False,
) -> TargetParams:
    """Resolve parameters for commands acting on a named app."""
    if not app_name.strip():
        raise InvalidInputError("An app name is required.")
    return TargetParams(app_name=app_name, org_slug=org or "", skip_confirmation=yes)
