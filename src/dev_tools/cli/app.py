"""CLI application entry point and command dispatch for dev-tools.

This module is the **sole error boundary** for the entire application.
It catches :class:`~dev_tools.exceptions.DevToolsError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
messages via the console proxy and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the command
  modules, which delegate to the core and infrastructure layers.
* Command output goes to stdout through the context's writer; every
  diagnostic goes to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Sequence

from dev_tools.cli import exit_codes
from dev_tools.cli.console import console
from dev_tools.cli.context import CommandContext
from dev_tools.cli.registry import CommandRegistry
from dev_tools.cli.signals import cancel_on_signals
from dev_tools.config import Settings
from dev_tools.core.cancellation import CancelToken
from dev_tools.exceptions import DevToolsError, NoCommandError
from dev_tools.version import __version__

PROG: str = "dev-tools"


# ---------------------------------------------------------------------------
# Registry and argument parser
# ---------------------------------------------------------------------------

def build_registry() -> CommandRegistry:
    """Register every command.  Raises ``RegistryError`` on a name clash."""
    from dev_tools.cli import base64_command, doctor, uuid_command

    return CommandRegistry(
        [
            base64_command.COMMAND,
            uuid_command.COMMAND,
            doctor.COMMAND,
        ]
    )


def _commands_listing(registry: CommandRegistry) -> str:
    width = max(len(f"{c.name} (or {c.short})") for c in registry)
    lines = ["Commands:"]
    for command in registry:
        label = f"{command.name} (or {command.short})"
        lines.append(f"  {label:<{width}}  {command.summary}")
    lines.append("")
    lines.append(f"Run '{PROG} <command> -h' for details.")
    return "\n".join(lines)


def _build_parser(registry: CommandRegistry) -> argparse.ArgumentParser:
    """Construct the global-flags parser.

    The command name and its flags are split off before this parser
    runs, so it only ever sees leading ``-`` tokens.
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage="%(prog)s [global flags] <command> [flags]",
        description="Small developer utilities.",
        epilog=_commands_listing(registry),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="print full tracebacks on error (same as setting DEBUG)",
    )
    return parser


def _split_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split *argv* into global flags and ``[command, *command_flags]``."""
    for index, token in enumerate(argv):
        if not token.startswith("-"):
            return list(argv[:index]), list(argv[index:])
    return list(argv), []


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _dispatch(
    registry: CommandRegistry,
    rest: list[str],
    context: CommandContext,
) -> int:
    if not rest:
        raise NoCommandError("no command given")

    name, command_argv = rest[0], rest[1:]
    command = registry.resolve(name)
    if context.settings.debug:
        console.debug(f"dispatching {name!r} to command {command.name!r}")

    # argparse reports malformed flags itself and exits with status 2.
    namespace = command.parse_args(PROG, command_argv)
    return command.handler(namespace, context)


def _report(
    exc: DevToolsError,
    parser: argparse.ArgumentParser,
    settings: Settings,
) -> None:
    if settings.debug:
        console.print_exception(exc)
    console.error(str(exc), exc.hint)
    console.print_plain("\n" + parser.format_help())


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    context: CommandContext | None = None,
) -> int:
    """Run the dev-tools CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    context:
        Handler context.  When ``None``, the real filesystem, stdin,
        clipboard and stdout are wired with a fresh cancel token.  Its
        settings are always replaced by the ones resolved here.

    Returns
    -------
    int
        OS process exit code.
    """
    registry = build_registry()
    parser = _build_parser(registry)

    global_argv, rest = _split_argv(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(global_argv)
    settings = Settings.from_env(debug_flag=args.debug)

    if context is None:
        context = CommandContext.default(settings=settings)
    else:
        context = dataclasses.replace(context, settings=settings)

    try:
        return _dispatch(registry, rest, context)
    except DevToolsError as exc:
        _report(exc, parser, settings)
        return exit_codes.FAILURE


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main`, binds SIGINT/SIGTERM to the cancel
    token handed to every command, and guarantees the process never exits
    with a raw stack trace during normal usage.
    """
    token = CancelToken()
    try:
        with cancel_on_signals(token):
            code = main(context=CommandContext.default(token))
        sys.exit(code)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue."
        )
        console.print_plain(f"  {type(exc).__name__}: {exc}")
        sys.exit(exit_codes.UNEXPECTED_ERROR)
