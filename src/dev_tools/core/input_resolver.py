"""Input resolution policy for commands that consume bytes.

The resolver decides *which* source to read; the sources themselves live
in the infrastructure layer and are injected through the protocols in
:mod:`dev_tools.core.protocols`.

Priority (first match wins)
---------------------------
1. explicit text (argv bytes that are not UTF-8 pass through unchanged)
2. file path
3. piped / redirected stdin
4. non-empty clipboard
5. :class:`~dev_tools.exceptions.NoInputError`
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from dev_tools.core.protocols import ClipboardReader, FileReader, StdinReader
from dev_tools.exceptions import NoInputError


class InputSource(Enum):
    """Which source ended up supplying the bytes."""

    TEXT = "text"
    FILE = "file"
    STDIN = "stdin"
    CLIPBOARD = "clipboard"


class InputResolver:
    """Pick the first available input source and read it.

    Parameters
    ----------
    files, stdin, clipboard:
        Concrete readers satisfying the corresponding protocols.
    """

    def __init__(
        self,
        files: FileReader,
        stdin: StdinReader,
        clipboard: ClipboardReader,
    ) -> None:
        self._files: FileReader = files
        self._stdin: StdinReader = stdin
        self._clipboard: ClipboardReader = clipboard

    def resolve(self, text: str = "", path: Path | None = None) -> bytes:
        """Return the input bytes.  See :meth:`resolve_with_source`."""
        data, _ = self.resolve_with_source(text, path)
        return data

    def resolve_with_source(
        self,
        text: str = "",
        path: Path | None = None,
    ) -> tuple[bytes, InputSource]:
        """Return the input bytes and the source they came from.

        Raises
        ------
        InputReadError
            When the file or stdin cannot be read.
        ClipboardError
            When the clipboard backend fails.
        NoInputError
            When no source yields any input.
        """
        if text:
            return os.fsencode(text), InputSource.TEXT

        if path is not None:
            return self._files.read(path), InputSource.FILE

        if not self._stdin.is_interactive():
            return self._stdin.read(), InputSource.STDIN

        content = self._clipboard.read()
        if content:
            return content, InputSource.CLIPBOARD

        raise NoInputError(
            "no input provided",
            hint="Pass -t TEXT, -in FILE, pipe data on stdin, or copy text to the clipboard.",
        )
