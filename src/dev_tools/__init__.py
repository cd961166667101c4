"""dev-tools — small developer utilities: base64 and UUID generation.

Built with a strict core / infra / cli layered architecture.
"""

from dev_tools.version import __version__

__all__: list[str] = ["__version__"]
