"""Bind process termination signals to a :class:`CancelToken`."""

from __future__ import annotations

import signal
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType
from typing import Any

from dev_tools.core.cancellation import CancelToken

DEFAULT_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


@contextmanager
def cancel_on_signals(
    token: CancelToken,
    signals: tuple[signal.Signals, ...] = DEFAULT_SIGNALS,
) -> Iterator[CancelToken]:
    """Cancel *token* when one of *signals* arrives, for the block's duration.

    After cancelling, SIGINT raises ``KeyboardInterrupt`` and any other
    signal raises ``SystemExit(128 + signum)`` so blocking reads abort.
    Previous handlers are restored on exit.
    """

    def _handler(signum: int, _frame: FrameType | None) -> None:
        token.cancel(signal.Signals(signum).name)
        if signum == signal.SIGINT:
            raise KeyboardInterrupt
        raise SystemExit(128 + signum)

    previous: dict[signal.Signals, Any] = {}
    for sig in signals:
        try:
            previous[sig] = signal.signal(sig, _handler)
        except ValueError:
            # signal.signal only works from the main thread.
            break
    try:
        yield token
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
