"""pyperclip backed implementation of :class:`~dev_tools.core.protocols.ClipboardReader`.

This module is the **only** place in the codebase that touches the
system clipboard.  pyperclip is imported lazily so that the rest of the
CLI works on machines where it is missing; all pyperclip exceptions are
re-raised as :class:`~dev_tools.exceptions.ClipboardError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from dev_tools.exceptions import ClipboardError, EnvironmentError

_CLIPBOARD_HINT = (
    "On Linux install xclip, xsel or wl-clipboard; "
    "or pass input with -t, -in, or stdin instead."
)


def _load_pyperclip() -> Any:
    """Return the ``pyperclip`` module or raise ``EnvironmentError``."""
    try:
        import pyperclip
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "pyperclip is not installed. Install with: pip install pyperclip",
        ) from exc
    return pyperclip


class PyperclipClipboard:
    """Concrete clipboard reader backed by pyperclip."""

    def read(self) -> bytes:
        """Return the clipboard text as UTF-8, ``b""`` when empty.

        Raises
        ------
        EnvironmentError
            When pyperclip is not installed.
        ClipboardError
            When no copy/paste mechanism is available or the paste fails.
        """
        pyperclip = _load_pyperclip()
        try:
            content = pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(
                f"failed to read clipboard content: {exc}",
                hint=_CLIPBOARD_HINT,
            ) from exc
        return (content or "").encode("utf-8")


@dataclass(frozen=True, slots=True)
class ClipboardStatus:
    """Result of a clipboard backend probe."""

    available: bool
    detail: str


def detect_clipboard() -> ClipboardStatus:
    """Probe for a usable clipboard backend without reading its contents."""
    try:
        pyperclip = _load_pyperclip()
    except EnvironmentError:
        return ClipboardStatus(available=False, detail="pyperclip not installed")

    _copy, paste = pyperclip.determine_clipboard()
    # pyperclip returns falsy placeholder functions when nothing is found.
    if not paste:
        return ClipboardStatus(available=False, detail="no copy/paste mechanism")
    return ClipboardStatus(available=True, detail=f"pyperclip {pyperclip.__version__}")
