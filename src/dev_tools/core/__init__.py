"""Core / service layer — pure logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem, stream, or clipboard I/O.
* No imports from ``cli`` or ``infra``.
"""

from dev_tools.core.cancellation import CancelToken
from dev_tools.core.input_resolver import InputResolver, InputSource
from dev_tools.core.models import (
    Base64Options,
    CodecMode,
    RandomSource,
    UuidOptions,
    UuidVersion,
)
from dev_tools.core.protocols import ClipboardReader, FileReader, RandomBytes, StdinReader
from dev_tools.core.uuid_generator import UuidGenerator

__all__: list[str] = [
    "Base64Options",
    "CancelToken",
    "ClipboardReader",
    "CodecMode",
    "FileReader",
    "InputResolver",
    "InputSource",
    "RandomBytes",
    "RandomSource",
    "StdinReader",
    "UuidGenerator",
    "UuidOptions",
    "UuidVersion",
]
