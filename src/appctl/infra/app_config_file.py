"""Reading and writing the local app config file (``fly.toml``).

The on-disk document is the app's opaque ``definition`` at the top
level, plus ``app = "<name>"`` and an optional ``[build]`` table.  Writes
go through a temporary file in the target directory followed by
``os.replace``, so a failed write never leaves a truncated file behind.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from appctl.core.models import AppConfig, Build
from appctl.exceptions import PersistenceError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "fly.toml"


def resolve_config_file_from_path(path: Path) -> Path:
    """Return the config file path for *path*.

    A directory (typically the working directory) resolves to the
    default file inside it; anything else is taken as the file itself.
    """
    if path.is_dir():
        return path / DEFAULT_CONFIG_FILE
    return path


def config_to_document(config: AppConfig) -> dict[str, Any]:
    """Flatten *config* into the TOML document layout."""
    document: dict[str, Any] = {
        key: value for key, value in config.definition.items()
        if key not in ("app", "build")
    }
    document = {"app": config.app_name, **document}
    if config.build is not None and config.build.builder:
        document["build"] = {"builder": config.build.builder}
    return _drop_none(document)


def document_to_config(document: dict[str, Any]) -> AppConfig:
    """Inverse of :func:`config_to_document`."""
    definition = dict(document)
    app_name = str(definition.pop("app", "") or "")
    build_raw = definition.pop("build", None)
    build: Build | None = None
    if isinstance(build_raw, dict) and build_raw.get("builder"):
        build = Build(builder=str(build_raw["builder"]))
    return AppConfig(app_name=app_name, build=build, definition=definition)


def load_app_config(path: Path) -> AppConfig:
    """Read and parse the app config at *path*.

    Raises
    ------
    PersistenceError
        When the file cannot be read or is not valid TOML.
    """
    try:
        with path.open("rb") as fh:
            document = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise PersistenceError(
            f"Invalid app config {path}: {exc}",
            hint="Fix the TOML syntax or remove the file.",
        ) from exc
    except OSError as exc:
        raise PersistenceError(f"Could not read app config {path}: {exc}") from exc
    return document_to_config(document)


def write_app_config(path: Path, config: AppConfig) -> Path:
    """Serialize *config* to *path*, replacing any existing file atomically.

    Returns the path written.

    Raises
    ------
    PersistenceError
        On any I/O failure, or when the definition holds a value TOML
        cannot represent.  No partially written file is left at *path*.
    """
    document = config_to_document(config)
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent,
        )
        with os.fdopen(fd, "wb") as fh:
            tomli_w.dump(document, fh)
        # mkstemp creates 0600; keep the mode a plain open() would give.
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
        tmp_name = None
    except (OSError, TypeError) as exc:
        raise PersistenceError(
            f"Could not write app config {path}: {exc}",
            hint="The app exists remotely; re-create the config file by hand.",
        ) from exc
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)

    logger.debug("Wrote app config for %s to %s", config.app_name, path)
    return path


def _target_mode(path: Path) -> int:
    """Mode of the existing file at *path*, or the umask default for a new one."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _drop_none(value: Any) -> Any:
    # TOML has no null.
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_none(v) for v in value if v is not None]
    return value
