"""Unified settings: CLI flags, env vars and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``FIZZBUZZ_*`` prefix
  3. Code defaults

The defaults reproduce the documented CLI behaviour (``1..100``,
``numbered`` output); env vars only shift the values used when a flag is
omitted.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


class FizzBuzzSettings(BaseSettings):
    """Settings for one CLI invocation, frozen after construction."""

    model_config = {
        "frozen": True,
        "env_prefix": "FIZZBUZZ_",
    }

    default_start: int = 1
    default_end: int = 100
    default_format: str = "numbered"

    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> FizzBuzzSettings:
        """Construct settings, treating unset (``None``) flags as absent."""
        return cls(**{key: value for key, value in cli_flags.items() if value is not None})
