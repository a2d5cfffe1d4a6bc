"""Infrastructure layer — external system integration.

This layer wraps all interaction with the control-plane API, the
environment and the local filesystem.  Every raw third-party exception
must be caught here and re-raised as an
:class:`~appctl.exceptions.AppctlError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from appctl.infra.app_config_file import (
    DEFAULT_CONFIG_FILE,
    load_app_config,
    resolve_config_file_from_path,
    write_app_config,
)
from appctl.infra.graphql_client import GraphQLControlPlaneClient
from appctl.infra.settings import ClientSettings

__all__: list[str] = [
    "DEFAULT_CONFIG_FILE",
    "ClientSettings",
    "GraphQLControlPlaneClient",
    "load_app_config",
    "resolve_config_file_from_path",
    "write_app_config",
]
