"""Protocols (interfaces) consumed by the core layer.

These define the narrow read contracts that infrastructure adapters
must satisfy.  Core code depends ONLY on these protocols — never on
concrete implementations — so the clipboard and the process streams
can be swapped for fakes in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileReader(Protocol):
    """Contract for whole-file reads."""

    def read(self, path: Path) -> bytes:
        """Return the full contents of *path*.

        Raises
        ------
        InputReadError
            When the file cannot be read.
        """
        ...  # pragma: no cover


class StdinReader(Protocol):
    """Contract for the process standard input."""

    def is_interactive(self) -> bool:
        """Return ``True`` when stdin is a character device (a terminal).

        Raises
        ------
        InputReadError
            When the stream cannot be inspected.
        """
        ...  # pragma: no cover

    def read(self) -> bytes:
        """Read stdin to end-of-stream.

        Raises
        ------
        InputReadError
            When reading fails.
        """
        ...  # pragma: no cover


class ClipboardReader(Protocol):
    """Contract for the system clipboard."""

    def read(self) -> bytes:
        """Return the clipboard contents, ``b""`` when empty.

        Raises
        ------
        ClipboardError
            When the clipboard backend fails.
        """
        ...  # pragma: no cover


class RandomBytes(Protocol):
    """Contract for a source of random bytes."""

    def read(self, size: int) -> bytes:
        """Return *size* random bytes.

        Raises
        ------
        EntropyUnavailableError
            When the underlying source cannot produce bytes.
        """
        ...  # pragma: no cover
