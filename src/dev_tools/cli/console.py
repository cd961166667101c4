"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``, the usage
listing) remain functional even when Rich is not installed.  Everything
goes to stderr; stdout is reserved for command output.
"""

from __future__ import annotations

import sys
import traceback
from typing import Any

from dev_tools.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def _escape(text: str) -> str:
	from rich.markup import escape

	return escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def print_plain(self, text: str) -> None:
		"""Print *text* verbatim: no markup, no highlighting, no wrapping."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(text, file=sys.stderr)
			return
		rich_console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

	def error(self, message: str, hint: str | None = None) -> None:
		"""Render an error message and optional hint."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(f"Error: {message}", file=sys.stderr)
			if hint:
				print(f"Hint: {hint}", file=sys.stderr)
			return
		rich_console.print(f"[bold red]Error:[/bold red] {_escape(message)}", emoji=False, soft_wrap=True)
		if hint:
			rich_console.print(f"[yellow]Hint:[/yellow] {_escape(hint)}", emoji=False, soft_wrap=True)

	def debug(self, message: str) -> None:
		"""Render a dimmed diagnostic line."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(f"debug: {message}", file=sys.stderr)
			return
		rich_console.print(f"[dim]debug: {_escape(message)}[/dim]", emoji=False, soft_wrap=True)

	def print_exception(self, exc: BaseException) -> None:
		"""Render the full traceback of *exc*, cause chain included."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			lines = traceback.format_exception(type(exc), exc, exc.__traceback__)
			print("".join(lines), file=sys.stderr, end="")
			return
		from rich.traceback import Traceback

		rich_console.print(Traceback.from_exception(type(exc), exc, exc.__traceback__))


console = _ConsoleProxy()
