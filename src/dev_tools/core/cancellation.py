"""Explicit cancellation token handed to every command handler."""

from __future__ import annotations

from dev_tools.exceptions import OperationCancelledError


class CancelToken:
    """One-shot cancellation flag.

    Once cancelled a token stays cancelled; the first reason wins.
    """

    __slots__ = ("_cancelled", "_reason")

    def __init__(self) -> None:
        self._cancelled: bool = False
        self._reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str = "cancelled") -> None:
        if self._cancelled:
            return
        self._cancelled = True
        self._reason = reason

    def raise_if_cancelled(self) -> None:
        """Raise :class:`OperationCancelledError` if the token was cancelled."""
        if self._cancelled:
            raise OperationCancelledError(f"operation cancelled: {self._reason}")
