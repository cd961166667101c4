"""Shared pytest fixtures and configuration for the dev-tools test suite.

Guidelines
----------
* No test reads the real clipboard or the real stdin.
* Handlers receive fake collaborators through ``CommandContext``.
* stdout is captured in a ``BytesIO`` handed to the ``OutputWriter``.
* The ``DEBUG`` environment variable is cleared for every test.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any

import pytest

from dev_tools.cli.context import CommandContext
from dev_tools.core.cancellation import CancelToken
from dev_tools.infra.output_writer import OutputWriter
from dev_tools.infra.streams import FileSource


class FakeStdin:
    """In-memory :class:`StdinReader`."""

    def __init__(self, data: bytes = b"", *, interactive: bool = True) -> None:
        self.data = data
        self.interactive = interactive
        self.reads = 0

    def is_interactive(self) -> bool:
        return self.interactive

    def read(self) -> bytes:
        self.reads += 1
        return self.data


class FakeClipboard:
    """In-memory :class:`ClipboardReader`, optionally failing."""

    def __init__(self, data: bytes = b"", *, error: Exception | None = None) -> None:
        self.data = data
        self.error = error
        self.reads = 0

    def read(self) -> bytes:
        self.reads += 1
        if self.error is not None:
            raise self.error
        return self.data


@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DEBUG", raising=False)


@pytest.fixture
def stdout_buffer() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def make_context(stdout_buffer: io.BytesIO) -> Callable[..., CommandContext]:
    """Factory building a :class:`CommandContext` around fakes.

    Keyword arguments: ``stdin_data``, ``interactive``, ``clipboard_data``,
    ``clipboard_error``, ``token``.  The real :class:`FileSource` is kept
    so tests can use ``tmp_path`` files.
    """

    def _make(**overrides: Any) -> CommandContext:
        return CommandContext(
            token=overrides.get("token") or CancelToken(),
            files=FileSource(),
            stdin=FakeStdin(
                overrides.get("stdin_data", b""),
                interactive=overrides.get("interactive", True),
            ),
            clipboard=FakeClipboard(
                overrides.get("clipboard_data", b""),
                error=overrides.get("clipboard_error"),
            ),
            writer=OutputWriter(stdout_buffer),
        )

    return _make
