"""Domain models for dev-tools.

Option models are **frozen** dataclasses resolved once from parsed
arguments.  Mutually exclusive choices are expressed as enumerations so
that an invocation always has exactly one active mode, version and
randomness source.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Selections
# ---------------------------------------------------------------------------

class CodecMode(enum.Enum):
    """Direction of the base64 transformation."""

    ENCODE = "encode"
    DECODE = "decode"


class UuidVersion(enum.Enum):
    """UUID layout to generate."""

    V4 = 4
    V7 = 7


class RandomSource(enum.Enum):
    """Where random bits for UUID generation come from."""

    FAST = "fast"
    """Non-cryptographic PRNG.  Never fails."""

    CRYPTO = "crypto"
    """OS cryptographically secure generator.  May be unavailable."""


# ---------------------------------------------------------------------------
# Per-command options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Base64Options:
    """Resolved options of the ``base64`` command."""

    mode: CodecMode = CodecMode.ENCODE
    text: str = ""
    """Literal input.  Empty means "not given"."""

    input_path: Path | None = None
    output_path: Path | None = None
    """Optional file that receives a copy of the output."""


@dataclass(frozen=True, slots=True)
class UuidOptions:
    """Resolved options of the ``uuid`` command."""

    version: UuidVersion = UuidVersion.V4
    source: RandomSource = RandomSource.FAST
