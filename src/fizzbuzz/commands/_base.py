"""Custom Click command class with uniform error reporting.

Every failure (Click usage errors and :class:`FizzBuzzError` alike) is
reported as ``Error: <message>`` plus a ``--help`` hint on stderr and
exit code 1. Nothing is written to stdout on failure.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

import click

from fizzbuzz.domain.errors import FizzBuzzError

logger = logging.getLogger(__name__)


class FizzBuzzCommand(click.Command):
    """Click Command subclass that maps every error to exit code 1.

    ``main()`` always runs Click in non-standalone mode so exceptions
    surface here, then honours the caller's *standalone_mode*: exit the
    process, or return the exit code.
    """

    def main(  # type: ignore[override]
        self,
        args: Sequence[str] | None = None,
        prog_name: str | None = None,
        complete_var: str | None = None,
        standalone_mode: bool = True,
        **extra: Any,
    ) -> int:
        try:
            rv = super().main(args, prog_name, complete_var, standalone_mode=False, **extra)
            exit_code = rv if isinstance(rv, int) else 0
        except click.ClickException as exc:
            exit_code = self._fail(exc.format_message())
        except FizzBuzzError as exc:
            logger.debug("Command failed with %s", exc.code)
            exit_code = self._fail(exc.message)
        except click.Abort:
            exit_code = self._fail("Aborted")

        if standalone_mode:
            sys.exit(exit_code)
        return exit_code

    @staticmethod
    def _fail(message: str) -> int:
        from fizzbuzz.commands.help import get_error_message

        click.echo(get_error_message(message), err=True)
        return 1
