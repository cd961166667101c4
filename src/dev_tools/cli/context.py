"""Execution context handed to every command handler.

Bundles the cancellation token with the I/O collaborators so handlers
never reach for process globals, and tests can swap any of them for a
fake.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from dev_tools.config import Settings
from dev_tools.core.cancellation import CancelToken
from dev_tools.core.input_resolver import InputResolver
from dev_tools.core.protocols import ClipboardReader, FileReader, StdinReader
from dev_tools.infra.clipboard import PyperclipClipboard
from dev_tools.infra.output_writer import OutputWriter
from dev_tools.infra.streams import FileSource, StdinSource


@dataclass(frozen=True, slots=True)
class CommandContext:
    token: CancelToken
    files: FileReader
    stdin: StdinReader
    clipboard: ClipboardReader
    writer: OutputWriter
    settings: Settings = field(default_factory=Settings)

    @classmethod
    def default(
        cls,
        token: CancelToken | None = None,
        settings: Settings | None = None,
    ) -> CommandContext:
        """Wire the real filesystem, stdin, clipboard and stdout."""
        return cls(
            token=token if token is not None else CancelToken(),
            files=FileSource(),
            stdin=StdinSource(),
            clipboard=PyperclipClipboard(),
            writer=OutputWriter(),
            settings=settings if settings is not None else Settings(),
        )

    def input_resolver(self) -> InputResolver:
        return InputResolver(self.files, self.stdin, self.clipboard)
