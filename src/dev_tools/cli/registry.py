"""Command registry: maps command names and aliases to handlers.

Every name and alias is validated for uniqueness when a command is
registered, so a collision is a start-up failure rather than a command
silently shadowing another.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Collection, Iterable, Iterator, Sequence
from dataclasses import dataclass

from dev_tools.cli.context import CommandContext
from dev_tools.exceptions import RegistryError, UnknownCommandError

Handler = Callable[[argparse.Namespace, CommandContext], int]


def bind_flag_values(argv: Sequence[str], flags: Collection[str]) -> list[str]:
    """Join each flag in *flags* with the token after it as ``flag=value``.

    argparse refuses an option value that itself starts with ``-``
    (``-t -w``). Binding the value first makes such flags take the next
    token whatever it looks like. Tokens after ``--`` and a trailing flag
    with nothing after it are left alone.
    """
    bound: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            bound.append(token)
            bound.extend(tokens)
            break
        if token in flags:
            value = next(tokens, None)
            if value is not None:
                bound.append(f"{token}={value}")
                continue
        bound.append(token)
    return bound


@dataclass(frozen=True, slots=True)
class Command:
    """A sub-command: its names, its flags, and its handler."""

    name: str
    short: str
    summary: str
    configure: Callable[[argparse.ArgumentParser], None]
    """Adds the command's flags to a fresh parser."""

    handler: Handler
    """Runs the command and returns an exit code."""

    value_flags: tuple[str, ...] = ()
    """Flags whose value is always the next token, even one starting with ``-``."""

    def build_parser(self, prog: str) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=f"{prog} {self.name}",
            description=self.summary,
        )
        self.configure(parser)
        return parser

    def parse_args(self, prog: str, argv: Sequence[str]) -> argparse.Namespace:
        """Parse *argv* (the tokens after the command name)."""
        return self.build_parser(prog).parse_args(bind_flag_values(argv, self.value_flags))


class CommandRegistry:
    """Name/alias lookup table for :class:`Command` objects."""

    def __init__(self, commands: Iterable[Command] = ()) -> None:
        self._by_name: dict[str, Command] = {}
        self._commands: list[Command] = []
        for command in commands:
            self.register(command)

    def register(self, command: Command) -> None:
        """Add *command*.

        Raises
        ------
        RegistryError
            If its name or alias is already taken, or they are equal.
        """
        if command.name == command.short:
            raise RegistryError(
                f"command {command.name!r} uses its own name as its alias",
            )
        for key in (command.name, command.short):
            existing = self._by_name.get(key)
            if existing is not None:
                raise RegistryError(
                    f"{key!r} of command {command.name!r} is already "
                    f"registered by command {existing.name!r}",
                )
        self._by_name[command.name] = command
        self._by_name[command.short] = command
        self._commands.append(command)

    def resolve(self, name: str) -> Command:
        """Return the command registered under *name* (full or short).

        Raises
        ------
        UnknownCommandError
            If nothing is registered under *name*.
        """
        command = self._by_name.get(name)
        if command is None:
            raise UnknownCommandError(f"{name} is unknown command")
        return command

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)
