"""Custom exception hierarchy for appctl.

All exceptions that cross layer boundaries must inherit from
:class:`AppctlError`.  Raw third-party exceptions (httpx, OS errors,
TOML decoding errors) must NEVER propagate beyond the infrastructure
layer — they must be caught and re-raised as a typed subclass defined
here.

Hierarchy
---------
AppctlError
├── InvalidInputError
│   └── AppNameRequiredError
├── ConflictingInputError
├── OrganizationResolutionError
├── OperationCancelled
├── TransportError
│   └── NotFoundError
├── PersistenceError
├── SessionRequiredError
└── EnvironmentError
"""

from __future__ import annotations


class AppctlError(Exception):
    """Base exception for all appctl errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parameter resolution --------------------------------------------------

class InvalidInputError(AppctlError):
    """Raised when a supplied value is malformed (e.g. a non-numeric port)."""


class AppNameRequiredError(InvalidInputError):
    """Raised when a command needs an app but none could be determined."""


class ConflictingInputError(AppctlError):
    """Raised when mutually exclusive parameters are both supplied."""


# --- Organization selection ------------------------------------------------

class OrganizationResolutionError(AppctlError):
    """Raised when no organization could be resolved for the operation."""


# --- Interaction -----------------------------------------------------------

class OperationCancelled(AppctlError):
    """Raised when the user aborts an interactive prompt.

    Not a failure: the command boundary absorbs it and exits cleanly
    without having performed any mutation.
    """


# --- Remote control plane --------------------------------------------------

class TransportError(AppctlError):
    """Raised when a control-plane call fails."""


class NotFoundError(TransportError):
    """Raised when the control plane reports a missing resource."""


class SessionRequiredError(AppctlError):
    """Raised when no access token is available for the control plane."""


# --- Local files -----------------------------------------------------------

class PersistenceError(AppctlError):
    """Raised when the local app config file cannot be read or written."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(AppctlError):
    """Raised when a required runtime dependency is not available."""


def with_prefix(exc: AppctlError, prefix: str) -> AppctlError:
    """Return a copy of *exc* whose message starts with *prefix*.

    The exception class and hint are preserved so that callers can
    still distinguish e.g. :class:`NotFoundError` after wrapping.
    """
    wrapped = type(exc)(f"{prefix}: {exc}", hint=exc.hint)
    wrapped.__cause__ = exc
    return wrapped
