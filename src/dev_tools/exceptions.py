"""Custom exception hierarchy for dev-tools.

All exceptions that cross layer boundaries must inherit from
:class:`DevToolsError`.  Raw OS and third-party exceptions (e.g. from
pyperclip) must NEVER propagate beyond the infrastructure layer — they
must be caught and re-raised as a typed subclass defined here, chained
with ``raise ... from exc`` so the cause stays available for ``--debug``.

Hierarchy
---------
DevToolsError
├── UsageError
│   ├── NoCommandError
│   └── UnknownCommandError
├── RegistryError
├── InputError
│   ├── InputReadError
│   ├── ClipboardError
│   └── NoInputError
├── CodecError
├── OutputError
├── GeneratorError
│   └── EntropyUnavailableError
├── OperationCancelledError
└── EnvironmentError
"""

from __future__ import annotations


class DevToolsError(Exception):
    """Base exception for all dev-tools errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    followed by the usage listing.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Dispatch ---------------------------------------------------------------

class UsageError(DevToolsError):
    """Raised when the command line cannot be mapped to a command."""


class NoCommandError(UsageError):
    """Raised when no command name was given."""


class UnknownCommandError(UsageError):
    """Raised when the command name matches no registered command."""


class RegistryError(DevToolsError):
    """Raised when two commands claim the same name or alias."""


# --- Input resolution -------------------------------------------------------

class InputError(DevToolsError):
    """Base class for failures while obtaining input bytes."""


class InputReadError(InputError):
    """Raised when a file or standard input cannot be read."""


class ClipboardError(InputError):
    """Raised when the clipboard backend fails."""


class NoInputError(InputError):
    """Raised when every input source came up empty."""


# --- Codec / generator ------------------------------------------------------

class CodecError(DevToolsError):
    """Raised when base64 input is malformed."""


class GeneratorError(DevToolsError):
    """Raised when an identifier cannot be generated."""


class EntropyUnavailableError(GeneratorError):
    """Raised when the OS cryptographic random source is unavailable."""


# --- Output -----------------------------------------------------------------

class OutputError(DevToolsError):
    """Raised when the result cannot be written to a file or stdout."""


# --- Lifecycle / environment ------------------------------------------------

class OperationCancelledError(DevToolsError):
    """Raised when a handler observes a cancelled token."""


class EnvironmentError(DevToolsError):
    """Raised when a required runtime dependency is not available."""
