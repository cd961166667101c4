"""Infrastructure: random byte sources for identifier generation."""

from __future__ import annotations

import os
import random

from dev_tools.core.models import RandomSource
from dev_tools.core.protocols import RandomBytes
from dev_tools.exceptions import EntropyUnavailableError


class FastRandomSource:
    """Mersenne-Twister backed bytes.  Fast, never fails, not secret."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng: random.Random = random.Random(seed)

    def read(self, size: int) -> bytes:
        return self._rng.randbytes(size)


class CryptoRandomSource:
    """OS CSPRNG backed bytes via :func:`os.urandom`."""

    def read(self, size: int) -> bytes:
        try:
            return os.urandom(size)
        except (OSError, NotImplementedError) as exc:
            raise EntropyUnavailableError(
                f"failed to read {size} bytes from the OS random source: {exc}",
                hint="Drop -c/-crypto to fall back to the non-cryptographic generator.",
            ) from exc


def random_source_for(source: RandomSource) -> RandomBytes:
    """Return a fresh byte source for *source*."""
    if source is RandomSource.CRYPTO:
        return CryptoRandomSource()
    return FastRandomSource()


def entropy_available() -> bool:
    """Return ``True`` when the OS random source answers."""
    try:
        CryptoRandomSource().read(1)
    except EntropyUnavailableError:
        return False
    return True
