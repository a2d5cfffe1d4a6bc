"""Core layer — parameter resolution, organization selection, confirmation.

Rules
-----
* No ``print()`` calls; user interaction goes through a ``Prompter``.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from appctl.core.confirmation import confirm_action
from appctl.core.models import (
    AppConfig,
    Application,
    AppStatus,
    Build,
    CreateParams,
    Organization,
    TargetParams,
)
from appctl.core.org_selector import OrgResolution, Outcome, select_organization
from appctl.core.params import parse_port, resolve_create_params, resolve_target_params
from appctl.core.protocols import ConfigPathResolver, ControlPlaneClient, Prompter

__all__: list[str] = [
    "AppConfig",
    "AppStatus",
    "Application",
    "Build",
    "ConfigPathResolver",
    "ControlPlaneClient",
    "CreateParams",
    "OrgResolution",
    "Organization",
    "Outcome",
    "Prompter",
    "TargetParams",
    "confirm_action",
    "parse_port",
    "resolve_create_params",
    "resolve_target_params",
    "select_organization",
]
