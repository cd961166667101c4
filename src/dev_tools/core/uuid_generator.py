"""UUID v4 / v7 construction from an injected random byte source.

The stdlib only ships ``uuid4`` (always backed by ``os.urandom``) and
gained ``uuid7`` late, so both layouts are assembled here from raw bytes.
That keeps the choice of randomness source in the caller's hands.
"""

from __future__ import annotations

import time
import uuid
from collections.abc import Callable

from dev_tools.core.models import UuidVersion
from dev_tools.core.protocols import RandomBytes

_UUID_SIZE: int = 16
_MS_MASK: int = (1 << 48) - 1
_SEQ_BITS: int = 12
_SEQ_MASK: int = (1 << _SEQ_BITS) - 1


class UuidGenerator:
    """Generate canonical UUID strings.

    Parameters
    ----------
    randomness:
        Any object satisfying the :class:`RandomBytes` protocol.
    clock:
        Returns the current Unix time in nanoseconds.  Injected for tests.
    """

    def __init__(
        self,
        randomness: RandomBytes,
        *,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        self._randomness: RandomBytes = randomness
        self._clock: Callable[[], int] = clock
        self._last_v7: int = -1

    def generate(self, version: UuidVersion) -> str:
        """Return a 36-character lower-case hyphenated UUID."""
        if version is UuidVersion.V7:
            return str(self.v7())
        return str(self.v4())

    def v4(self) -> uuid.UUID:
        raw = bytearray(self._randomness.read(_UUID_SIZE))
        raw[6] = (raw[6] & 0x0F) | 0x40
        raw[8] = (raw[8] & 0x3F) | 0x80
        return uuid.UUID(bytes=bytes(raw))

    def v7(self) -> uuid.UUID:
        """Build a time-ordered UUID.

        Layout: 48-bit Unix milliseconds, version ``7``, a 12-bit
        sub-millisecond sequence, variant ``10``, 62 random bits.  The
        millisecond and sequence fields together form a counter that only
        moves forward, so values from one generator sort in creation
        order even when the clock stalls or steps back.
        """
        millis, seq = self._next_v7_time()
        raw = bytearray(self._randomness.read(_UUID_SIZE))
        raw[0:6] = (millis & _MS_MASK).to_bytes(6, "big")
        raw[6] = 0x70 | (seq >> 8)
        raw[7] = seq & 0xFF
        raw[8] = (raw[8] & 0x3F) | 0x80
        return uuid.UUID(bytes=bytes(raw))

    def _next_v7_time(self) -> tuple[int, int]:
        nanos = self._clock()
        millis = nanos // 1_000_000
        # Fraction of the current millisecond scaled into 12 bits.
        seq = (nanos - millis * 1_000_000) >> 8
        stamp = (millis << _SEQ_BITS) + seq
        if stamp <= self._last_v7:
            stamp = self._last_v7 + 1
        self._last_v7 = stamp
        return stamp >> _SEQ_BITS, stamp & _SEQ_MASK
