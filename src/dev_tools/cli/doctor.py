"""``dev-tools doctor`` — environment diagnostics command.

Reports, for the current process, which input source ``base64`` would
fall back to, whether the clipboard and the OS entropy source are
usable, and whether the clock fits the UUID v7 timestamp field.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  It purely collects and displays
diagnostic data.
"""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum

from dev_tools.cli import exit_codes
from dev_tools.cli.console import console
from dev_tools.cli.context import CommandContext
from dev_tools.cli.registry import Command
from dev_tools.core.protocols import StdinReader
from dev_tools.exceptions import InputReadError
from dev_tools.infra.clipboard import detect_clipboard
from dev_tools.infra.randomness import entropy_available
from dev_tools.version import __version__

_V7_MAX_MILLIS: int = (1 << 48) - 1
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class CheckStatus(Enum):
    OK = "OK"
    WARN = "WARN"
    FAIL = "FAIL"

    @property
    def markup(self) -> str:
        colour = {"OK": "green", "WARN": "yellow", "FAIL": "red"}[self.value]
        return f"[{colour}]{self.value}[/{colour}]"


@dataclass(frozen=True, slots=True)
class Check:
    """One row of the doctor table."""

    component: str
    value: str
    status: CheckStatus


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _stdin_check(stdin: StdinReader) -> Check:
    """Which source ``base64`` reads when given neither ``-t`` nor ``-in``."""
    try:
        interactive = stdin.is_interactive()
    except InputReadError as exc:
        return Check("stdin", str(exc), CheckStatus.FAIL)
    if interactive:
        return Check("stdin", "terminal (base64 falls back to the clipboard)", CheckStatus.OK)
    return Check("stdin", "piped (base64 reads it before the clipboard)", CheckStatus.OK)


def _clipboard_check() -> Check:
    """A missing clipboard only disables the last-resort input source."""
    status = detect_clipboard()
    return Check(
        "clipboard",
        status.detail,
        CheckStatus.OK if status.available else CheckStatus.WARN,
    )


def _entropy_check() -> Check:
    if entropy_available():
        return Check("entropy", "os.urandom", CheckStatus.OK)
    return Check("entropy", "unavailable (-crypto disabled)", CheckStatus.WARN)


def _clock_check(clock: Callable[[], int] = time.time_ns) -> Check:
    """UUID v7 stores Unix milliseconds in 48 bits; outside that range IDs are wrong."""
    millis = clock() // 1_000_000
    if not 0 <= millis <= _V7_MAX_MILLIS:
        return Check("clock", f"{millis} ms since epoch", CheckStatus.FAIL)
    try:
        value = (_EPOCH + timedelta(milliseconds=millis)).isoformat(timespec="milliseconds")
    except OverflowError:
        value = f"{millis} ms since epoch"
    return Check("clock", value, CheckStatus.OK)


def _version_check() -> Check:
    return Check("dev-tools", __version__, CheckStatus.OK)


def collect_checks(context: CommandContext) -> list[Check]:
    return [
        _version_check(),
        _stdin_check(context.stdin),
        _clipboard_check(),
        _entropy_check(),
        _clock_check(),
    ]


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\ndev-tools doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<44} {'Status':<6}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for check in checks:
        print(f"{check.component:<12} {check.value:<44} {check.status.value:<6}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(context: CommandContext) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` unless a check reports FAIL, in which
        case :data:`exit_codes.FAILURE`.
    """
    checks = collect_checks(context)
    has_failure = any(check.status is CheckStatus.FAIL for check in checks)

    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.", file=sys.stderr)
        return exit_codes.FAILURE if has_failure else exit_codes.SUCCESS

    table = Table(
        title="dev-tools doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=6)
    for check in checks:
        table.add_row(check.component, escape(check.value), check.status.markup)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.FAILURE
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS


def _handle(_namespace: argparse.Namespace, context: CommandContext) -> int:
    return run_doctor(context)


COMMAND = Command(
    name="doctor",
    short="dr",
    summary="Report the input fallback, clipboard backend, entropy source and clock.",
    configure=lambda _parser: None,
    handler=_handle,
)
