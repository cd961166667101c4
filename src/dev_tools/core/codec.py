"""Unpadded standard-alphabet base64.

The stdlib codec always pads, so encoding strips the trailing ``=`` and
decoding validates the unpadded text up front before re-padding it for
:func:`base64.b64decode`.
"""

from __future__ import annotations

import base64
import binascii

from dev_tools.core.models import CodecMode
from dev_tools.exceptions import CodecError

_ALPHABET: frozenset[int] = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)
_IGNORED: bytes = b"\r\n"


def encode(data: bytes) -> bytes:
    """Encode *data* without padding or line breaks."""
    return base64.b64encode(data).rstrip(b"=")


def decode(data: bytes) -> bytes:
    """Decode unpadded base64 *data*.

    Carriage returns and newlines are skipped.  Anything else outside the
    standard alphabet, ``=`` included, is rejected.

    Raises
    ------
    CodecError
        On an illegal byte or a length that no unpadded encoding produces.
    """
    cleaned = bytearray()
    for offset, byte in enumerate(data):
        if byte in _IGNORED:
            continue
        if byte not in _ALPHABET:
            raise CodecError(
                f"failed to decode content: illegal base64 data at input byte {offset}"
                f" ({_describe(byte)})",
            )
        cleaned.append(byte)

    if len(cleaned) % 4 == 1:
        raise CodecError(
            f"failed to decode content: invalid length {len(cleaned)}"
            " for unpadded base64",
            hint="Unpadded base64 never has a length of 4n+1; the input is truncated.",
        )

    padded = bytes(cleaned) + b"=" * (-len(cleaned) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except binascii.Error as exc:
        raise CodecError(f"failed to decode content: {exc}") from exc


def transform(data: bytes, mode: CodecMode) -> bytes:
    """Apply *mode* to *data*."""
    if mode is CodecMode.DECODE:
        return decode(data)
    return encode(data)


def _describe(byte: int) -> str:
    if 0x20 <= byte < 0x7F:
        return repr(chr(byte))
    return f"0x{byte:02x}"
