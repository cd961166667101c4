"""``dev-tools uuid`` — print one UUID v4 or v7 to stdout."""

from __future__ import annotations

import argparse

from dev_tools.cli import exit_codes
from dev_tools.cli.context import CommandContext
from dev_tools.cli.registry import Command
from dev_tools.core.models import RandomSource, UuidOptions, UuidVersion
from dev_tools.core.uuid_generator import UuidGenerator
from dev_tools.infra.randomness import random_source_for


def configure(parser: argparse.ArgumentParser) -> None:
    version = parser.add_mutually_exclusive_group()
    version.add_argument(
        "-v4", "--v4",
        dest="version",
        action="store_const",
        const=UuidVersion.V4,
        help="random UUID (default)",
    )
    version.add_argument(
        "-v7", "--v7",
        dest="version",
        action="store_const",
        const=UuidVersion.V7,
        help="time-ordered UUID",
    )
    parser.set_defaults(version=UuidVersion.V4)

    parser.add_argument(
        "-c", "-crypto", "--crypto",
        dest="source",
        action="store_const",
        const=RandomSource.CRYPTO,
        default=RandomSource.FAST,
        help="use the OS cryptographic random source",
    )


def resolve_options(namespace: argparse.Namespace) -> UuidOptions:
    return UuidOptions(version=namespace.version, source=namespace.source)


def run_uuid(
    options: UuidOptions,
    context: CommandContext,
    *,
    generator: UuidGenerator | None = None,
) -> int:
    """Generate one UUID and write it, newline-terminated, to stdout.

    Raises
    ------
    EntropyUnavailableError
        When ``-crypto`` was requested and the OS source is unavailable.
    OutputError
        When stdout cannot be written.
    """
    if generator is None:
        generator = UuidGenerator(random_source_for(options.source))

    value = generator.generate(options.version)

    context.token.raise_if_cancelled()
    context.writer.write(None, f"{value}\n".encode("ascii"))
    return exit_codes.SUCCESS


def _handle(namespace: argparse.Namespace, context: CommandContext) -> int:
    return run_uuid(resolve_options(namespace), context)


COMMAND = Command(
    name="uuid",
    short="u",
    summary="Generate a UUID (v4 random or v7 time-ordered).",
    configure=configure,
    handler=_handle,
)
