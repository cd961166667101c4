"""Infrastructure: write command results to a file and standard output."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO

from dev_tools.exceptions import OutputError


class OutputWriter:
    """Copy result bytes to stdout, and to a file when a path is given.

    Parameters
    ----------
    stdout:
        Binary stream to use instead of ``sys.stdout.buffer``.  Looked up
        lazily, like :class:`~dev_tools.infra.streams.StdinSource`.
    """

    def __init__(self, stdout: BinaryIO | None = None) -> None:
        self._stdout: BinaryIO | None = stdout

    def _resolve(self) -> BinaryIO:
        if self._stdout is not None:
            return self._stdout
        if sys.stdout is None:
            raise OutputError("failed to write output to stdout: stdout is closed")
        return getattr(sys.stdout, "buffer", sys.stdout)

    def write(self, path: Path | None, data: bytes) -> None:
        """Write *data* to *path* (if any), then to stdout.

        The file is created or truncated with the default mode.

        Raises
        ------
        OutputError
            When either write fails.  A file failure aborts before stdout
            is touched.
        """
        if path is not None:
            try:
                path.write_bytes(data)
            except OSError as exc:
                raise OutputError(
                    f"failed to write data to file {path}: {exc.strerror or exc}",
                ) from exc

        stream = self._resolve()
        try:
            stream.write(data)
            stream.flush()
        except (OSError, ValueError) as exc:
            raise OutputError(f"failed to write output to stdout: {exc}") from exc
