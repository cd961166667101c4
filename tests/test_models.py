"""Tests for domain models (core/models.py) and settings (config.py).

Coverage:
* Option dataclasses are frozen and carry the documented defaults.
* Enumerations expose exactly one member per choice.
* ``Settings.from_env`` honours ``DEBUG`` and ``--debug``.
"""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from dev_tools.config import Settings
from dev_tools.core.models import (
    Base64Options,
    CodecMode,
    RandomSource,
    UuidOptions,
    UuidVersion,
)


# ---------------------------------------------------------------------------
# Base64Options
# ---------------------------------------------------------------------------

class TestBase64Options:
    def test_defaults(self) -> None:
        options = Base64Options()
        assert options.mode is CodecMode.ENCODE
        assert options.text == ""
        assert options.input_path is None
        assert options.output_path is None

    def test_frozen(self) -> None:
        options = Base64Options(input_path=Path("in.bin"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.mode = CodecMode.DECODE  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Base64Options(text="a") == Base64Options(text="a")
        assert Base64Options(text="a") != Base64Options(text="b")


# ---------------------------------------------------------------------------
# UuidOptions
# ---------------------------------------------------------------------------

class TestUuidOptions:
    def test_defaults(self) -> None:
        options = UuidOptions()
        assert options.version is UuidVersion.V4
        assert options.source is RandomSource.FAST

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            UuidOptions().version = UuidVersion.V7  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class TestEnums:
    def test_codec_modes(self) -> None:
        assert {m.value for m in CodecMode} == {"encode", "decode"}

    def test_uuid_versions(self) -> None:
        assert {v.value for v in UuidVersion} == {4, 7}

    def test_random_sources(self) -> None:
        assert {s.value for s in RandomSource} == {"fast", "crypto"}


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

class TestSettings:
    def test_default_is_quiet(self) -> None:
        assert Settings.from_env({}).debug is False

    def test_debug_env(self) -> None:
        assert Settings.from_env({"DEBUG": "1"}).debug is True

    def test_empty_debug_env_is_off(self) -> None:
        assert Settings.from_env({"DEBUG": ""}).debug is False

    def test_flag_overrides_env(self) -> None:
        assert Settings.from_env({}, debug_flag=True).debug is True

    def test_reads_process_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEBUG", "true")
        assert Settings.from_env().debug is True
