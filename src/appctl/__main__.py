"""Allow ``python -m appctl`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m appctl`` behaves identically to the ``appctl``
console script.
"""

from __future__ import annotations

from appctl.cli.app import cli

if __name__ == "__main__":
    cli()
