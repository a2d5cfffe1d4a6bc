"""Domain models for appctl.

Remote-side entities (:class:`Organization`, :class:`Application`) are
**frozen** dataclasses — immutable value objects returned by the control
plane.  :class:`AppConfig` is the one mutable model: it is assembled
locally during ``apps create`` and then written to disk.
"""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Organization
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Organization:
    """An account-scoping entity that owns applications."""

    id: str
    """Opaque identifier used by mutations."""

    slug: str
    """Unique, human-readable handle used for lookup."""

    name: str = ""
    """Display name, or empty when the control plane omits it."""


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

class AppStatus(str, enum.Enum):
    """Known application states.  Unknown values are kept as raw strings."""

    PENDING = "pending"
    RUNNING = "running"
    DEAD = "dead"
    PAUSED = "paused"
    SUSPENDED = "suspended"


@dataclass(frozen=True, slots=True)
class Application:
    """A deployable unit managed on the remote platform."""

    name: str
    """Platform-wide unique application name."""

    status: str = ""
    """Current state as reported by the control plane."""

    organization: Organization | None = None
    """Owning organization, when the query requested it."""

    id: str = ""
    hostname: str = ""
    version: int | None = None
    deployed: bool = False

    definition: dict[str, Any] = field(default_factory=dict)
    """Opaque config definition carried through from the remote side."""


# ---------------------------------------------------------------------------
# Local app configuration
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Build:
    """Build descriptor attached to an app config."""

    builder: str


@dataclass(slots=True)
class AppConfig:
    """Local descriptor of an application's deployment settings.

    ``definition`` is an opaque mapping owned by the platform; the only
    key this tool ever touches is ``services[0].internal_port``.
    """

    app_name: str = ""
    build: Build | None = None
    definition: dict[str, Any] = field(default_factory=dict)

    def set_internal_port(self, port: int) -> None:
        """Set the internal port on the first service of the definition.

        A definition without services gets a single TCP service so the
        requested port is never dropped.
        """
        services = self.definition.get("services")
        if isinstance(services, list) and services and isinstance(services[0], dict):
            services[0]["internal_port"] = port
            return
        self.definition["services"] = [{"internal_port": port, "protocol": "tcp"}]

    def adopt(self, app: Application) -> None:
        """Take over the identity and definition of a created *app*."""
        self.app_name = app.name
        self.definition = copy.deepcopy(app.definition)


# ---------------------------------------------------------------------------
# Resolved parameter sets (per invocation, ephemeral)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CreateParams:
    """Everything ``apps create`` needs before it talks to the control plane."""

    app_name: str
    """Requested name.  Empty means "let the platform generate one"."""

    org_slug: str = ""
    internal_port: int | None = None
    builder: str = ""

    name_from_prompt: bool = False
    """True when the name was typed at the interactive prompt."""


@dataclass(frozen=True, slots=True)
class TargetParams:
    """Parameters of commands that act on one named app (destroy, move)."""

    app_name: str
    org_slug: str = ""
    skip_confirmation: bool = False
