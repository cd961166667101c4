"""Infrastructure: file and standard-input readers.

Satisfy :class:`~dev_tools.core.protocols.FileReader` and
:class:`~dev_tools.core.protocols.StdinReader`.  Every ``OSError`` is
re-raised as :class:`~dev_tools.exceptions.InputReadError` naming the
source that failed.
"""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path
from typing import BinaryIO

from dev_tools.exceptions import InputReadError


class FileSource:
    """Reads whole files from disk."""

    def read(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as exc:
            raise InputReadError(
                f"failed to read file {path}: {exc.strerror or exc}",
            ) from exc


class StdinSource:
    """Reads the process standard input as bytes.

    Parameters
    ----------
    stream:
        Binary stream to use instead of ``sys.stdin.buffer``.  The default
        is looked up lazily so test harnesses that swap ``sys.stdin`` are
        honoured.
    """

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self._stream: BinaryIO | None = stream

    def _resolve(self) -> BinaryIO:
        if self._stream is not None:
            return self._stream
        if sys.stdin is None:
            raise InputReadError("failed to stat stdin: stdin is closed")
        return getattr(sys.stdin, "buffer", sys.stdin)

    def is_interactive(self) -> bool:
        """Return ``True`` when stdin is a character device (a terminal)."""
        stream = self._resolve()
        try:
            mode = os.fstat(stream.fileno()).st_mode
        except (OSError, ValueError) as exc:
            raise InputReadError(f"failed to stat stdin: {exc}") from exc
        return stat.S_ISCHR(mode)

    def read(self) -> bytes:
        stream = self._resolve()
        try:
            return stream.read()
        except (OSError, ValueError) as exc:
            raise InputReadError(f"failed to read text from stdin: {exc}") from exc
