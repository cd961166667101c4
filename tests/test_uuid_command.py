"""End-to-end tests for ``dev-tools uuid`` through :func:`main`.

Coverage:
* Default, ``-v4`` and ``-v7`` output shapes.
* ``-crypto`` selects the OS source; its failure exits 2.
* ``-v4``/``-v7`` are mutually exclusive.
* ``run_uuid`` honours an injected generator.
"""

from __future__ import annotations

import argparse
import uuid
from unittest.mock import patch

import pytest

from dev_tools.cli import exit_codes
from dev_tools.cli.app import main
from dev_tools.cli.uuid_command import configure, resolve_options, run_uuid
from dev_tools.core.models import RandomSource, UuidOptions, UuidVersion
from dev_tools.core.uuid_generator import UuidGenerator
from dev_tools.infra.randomness import FastRandomSource


def _parse(*argv: str) -> UuidOptions:
    parser = argparse.ArgumentParser()
    configure(parser)
    return resolve_options(parser.parse_args(list(argv)))


def _printed_uuid(buffer) -> uuid.UUID:
    raw = buffer.getvalue()
    assert raw.endswith(b"\n")
    text = raw.decode("ascii").strip()
    assert len(text) == 36
    return uuid.UUID(text)


class TestResolveOptions:
    def test_defaults(self) -> None:
        assert _parse() == UuidOptions(version=UuidVersion.V4, source=RandomSource.FAST)

    def test_v7_crypto(self) -> None:
        assert _parse("-v7", "-crypto") == UuidOptions(
            version=UuidVersion.V7,
            source=RandomSource.CRYPTO,
        )

    def test_short_crypto(self) -> None:
        assert _parse("-c").source is RandomSource.CRYPTO

    def test_versions_are_exclusive(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _parse("-v4", "-v7")
        assert exc_info.value.code == 2


class TestUuidCommand:
    def test_default_is_v4(self, make_context, stdout_buffer) -> None:
        code = main(["uuid"], context=make_context())
        assert code == exit_codes.SUCCESS
        assert _printed_uuid(stdout_buffer).version == 4

    def test_v4_shape(self, make_context, stdout_buffer) -> None:
        code = main(["uuid", "-v4"], context=make_context())
        parsed = _printed_uuid(stdout_buffer)

        assert code == exit_codes.SUCCESS
        assert parsed.version == 4
        assert parsed.variant == uuid.RFC_4122
        assert str(parsed)[14] == "4"

    def test_v7_via_alias(self, make_context, stdout_buffer) -> None:
        code = main(["u", "-v7"], context=make_context())
        assert code == exit_codes.SUCCESS
        assert _printed_uuid(stdout_buffer).version == 7

    def test_crypto(self, make_context, stdout_buffer) -> None:
        code = main(["uuid", "-crypto"], context=make_context())
        assert code == exit_codes.SUCCESS
        assert _printed_uuid(stdout_buffer).version == 4

    @patch("dev_tools.infra.randomness.os.urandom", side_effect=OSError("no entropy"))
    def test_crypto_unavailable(
        self,
        _mock_urandom: object,
        make_context,
        stdout_buffer,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["uuid", "-c"], context=make_context())

        assert code == exit_codes.FAILURE
        assert stdout_buffer.getvalue() == b""
        assert "OS random source" in capsys.readouterr().err

    def test_injected_generator(self, make_context, stdout_buffer) -> None:
        generator = UuidGenerator(FastRandomSource(seed=7))
        expected = UuidGenerator(FastRandomSource(seed=7)).generate(UuidVersion.V4)

        code = run_uuid(UuidOptions(), make_context(), generator=generator)

        assert code == exit_codes.SUCCESS
        assert stdout_buffer.getvalue() == f"{expected}\n".encode("ascii")
