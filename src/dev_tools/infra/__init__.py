"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem, the process
standard streams, the system clipboard, and the OS random source.  Every
raw exception must be caught here and re-raised as a
:class:`~dev_tools.exceptions.DevToolsError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing rendering (no Rich).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from dev_tools.infra.clipboard import ClipboardStatus, PyperclipClipboard, detect_clipboard
from dev_tools.infra.output_writer import OutputWriter
from dev_tools.infra.randomness import (
    CryptoRandomSource,
    FastRandomSource,
    entropy_available,
    random_source_for,
)
from dev_tools.infra.streams import FileSource, StdinSource

__all__: list[str] = [
    "ClipboardStatus",
    "CryptoRandomSource",
    "FastRandomSource",
    "FileSource",
    "OutputWriter",
    "PyperclipClipboard",
    "StdinSource",
    "detect_clipboard",
    "entropy_available",
    "random_source_for",
]
