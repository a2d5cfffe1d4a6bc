"""Process-wide logging configuration.

Library modules only ever call ``logging.getLogger(__name__)``; handlers
are attached here, once, by the CLI entry point.
"""

from __future__ import annotations

import logging

_FORMAT = "%(name)s: %(message)s"


def configure_logging(*, verbose: bool = False) -> None:
    """Route ``appctl`` log records to stderr.

    WARNING and above by default, DEBUG with ``--verbose``.  Uses Rich's
    handler when Rich is importable.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s " + _FORMAT))
    else:
        from appctl.cli.console import get_rich_console

        handler = RichHandler(
            console=get_rich_console(stderr=True),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter(_FORMAT))

    root = logging.getLogger("appctl")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
