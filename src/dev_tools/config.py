"""Process-wide settings resolved once at start-up."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEBUG_ENV_VAR: str = "DEBUG"
"""Any non-empty value switches error output to full tracebacks."""


@dataclass(frozen=True, slots=True)
class Settings:
    """Holds process-wide CLI options."""

    debug: bool = False

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        debug_flag: bool = False,
    ) -> Settings:
        env = os.environ if environ is None else environ
        return cls(debug=debug_flag or env.get(DEBUG_ENV_VAR, "") != "")
