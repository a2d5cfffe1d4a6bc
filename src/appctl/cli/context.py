"""Per-invocation command context.

Everything a command needs from its surroundings — the control-plane
client, the prompter, the renderer, the working directory and the
ambient app selection — travels in one :class:`CommandContext` built by
the entry point.  There is no module-level mutable state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from appctl.cli.console import ConsoleProxy, console, output
from appctl.cli.render import Renderer, RenderOptions
from appctl.core.protocols import ConfigPathResolver, ControlPlaneClient, Prompter
from appctl.exceptions import AppNameRequiredError
from appctl.infra.app_config_file import (
    DEFAULT_CONFIG_FILE,
    load_app_config,
    resolve_config_file_from_path,
)

logger = logging.getLogger(__name__)


@dataclass
class CommandContext:
    client: ControlPlaneClient
    prompter: Prompter
    renderer: Renderer = field(default_factory=Renderer)
    working_dir: Path = field(default_factory=Path.cwd)
    config_file: Path | None = None
    """Explicit ``--config`` path; ``None`` means "resolve from working_dir"."""

    app_name: str = ""
    """Explicit ``--app`` selection."""

    json_output: bool = False
    resolve_config_path: ConfigPathResolver = resolve_config_file_from_path

    def render_options(self, *, hide_header: bool = False, vertical: bool = False) -> RenderOptions:
        return RenderOptions(
            hide_header=hide_header,
            vertical=vertical,
            as_json=self.json_output,
        )

    @property
    def status(self) -> ConsoleProxy:
        """Sink for human status lines; stderr when stdout carries JSON."""
        return console if self.json_output else output

    def require_app_name(self) -> str:
        """Return the ambient app: ``--app`` first, then the app config file.

        Raises
        ------
        AppNameRequiredError
            When neither source names an app.
        """
        if self.app_name:
            return self.app_name

        path = self.config_file or self.resolve_config_path(self.working_dir)
        if path.is_file():
            config = load_app_config(path)
            if config.app_name:
                logger.debug("Using app %s from %s", config.app_name, path)
                return config.app_name

        raise AppNameRequiredError(
            f"We couldn't find a {DEFAULT_CONFIG_FILE} nor an app specified by the -a flag.",
            hint="Pass --app NAME or run the command inside an app directory.",
        )
