"""Help, version and error text."""

from __future__ import annotations

import click

from fizzbuzz import __version__
from fizzbuzz.output.console import render_error

APP_NAME = "FizzBuzz"
HELP_HINT = "Use --help for usage information."


def get_help_text() -> str:
    """Full ``--help`` output of the ``fizzbuzz`` command."""
    from fizzbuzz.cli import cli

    with click.Context(cli, info_name="fizzbuzz") as ctx:
        return ctx.get_help()


def get_version_text() -> str:
    return f"{APP_NAME} v{__version__}"


def get_error_message(error: str) -> str:
    """``Error: <error>`` followed by the ``--help`` hint."""
    return render_error(error, hint=HELP_HINT)


def get_completion_message(count: int, fmt: str) -> str:
    return f"Generated {count} FizzBuzz results in {fmt} format."
