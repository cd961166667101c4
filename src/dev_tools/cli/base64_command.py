"""``dev-tools base64`` — unpadded base64 encoder/decoder.

Flags keep the single-dash long spellings (``-encode``, ``-input``)
alongside the short ones; ``--`` spellings are accepted too.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from dev_tools.cli import exit_codes
from dev_tools.cli.console import console
from dev_tools.cli.context import CommandContext
from dev_tools.cli.registry import Command
from dev_tools.core import codec
from dev_tools.core.models import Base64Options, CodecMode


def configure(parser: argparse.ArgumentParser) -> None:
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-e", "-encode", "--encode",
        dest="mode",
        action="store_const",
        const=CodecMode.ENCODE,
        help="encode input (default)",
    )
    mode.add_argument(
        "-d", "-decode", "--decode",
        dest="mode",
        action="store_const",
        const=CodecMode.DECODE,
        help="decode input",
    )
    parser.set_defaults(mode=CodecMode.ENCODE)

    parser.add_argument(
        "-in", "-input", "--input",
        dest="input_path",
        default="",
        metavar="PATH",
        help="input file",
    )
    parser.add_argument(
        "-t", "-text", "--text",
        dest="text",
        default="",
        metavar="TEXT",
        help=(
            "input text; takes precedence over every other source. "
            "The next token is always the value, even one starting with '-'"
        ),
    )
    parser.add_argument(
        "-o", "-output", "--output",
        dest="output_path",
        default="",
        metavar="PATH",
        help="also write the output to this file (stdout always receives it)",
    )


def resolve_options(namespace: argparse.Namespace) -> Base64Options:
    """Turn parsed flags into :class:`Base64Options`.  Empty paths mean unset."""
    return Base64Options(
        mode=namespace.mode,
        text=namespace.text,
        input_path=Path(namespace.input_path) if namespace.input_path else None,
        output_path=Path(namespace.output_path) if namespace.output_path else None,
    )


def run_base64(options: Base64Options, context: CommandContext) -> int:
    """Resolve input, apply the codec, write the result.

    Raises
    ------
    InputError
        When no input can be obtained.
    CodecError
        When decoding malformed input.
    OutputError
        When the result cannot be written.
    """
    context.token.raise_if_cancelled()

    data, source = context.input_resolver().resolve_with_source(
        options.text,
        options.input_path,
    )
    if context.settings.debug:
        console.debug(f"read {len(data)} bytes from {source.value}")

    output = codec.transform(data, options.mode)

    context.token.raise_if_cancelled()
    context.writer.write(options.output_path, output)
    return exit_codes.SUCCESS


def _handle(namespace: argparse.Namespace, context: CommandContext) -> int:
    return run_base64(resolve_options(namespace), context)


COMMAND = Command(
    name="base64",
    short="b64",
    summary="Encode or decode unpadded base64 from text, a file, stdin, or the clipboard.",
    configure=configure,
    handler=_handle,
    value_flags=(
        "-in", "-input", "--input",
        "-t", "-text", "--text",
        "-o", "-output", "--output",
    ),
)
