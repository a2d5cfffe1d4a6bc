"""appctl — command-line front-end for managing platform applications.

Built as a thin orchestration layer over the platform's GraphQL control
plane, with a strict layered architecture.
"""

from appctl.version import __version__

__all__: list[str] = ["__version__"]
