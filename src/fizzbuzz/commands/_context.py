"""AppContext: per-invocation state for the ``fizzbuzz`` command.

Created once by the command callback. Owns the resolved settings, sets up
structured logging and is the single place that writes to stdout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from fizzbuzz.config.settings import FizzBuzzSettings


class AppContext:
    """Shared context for one CLI run.

    INVARIANT: stdout receives exactly one string per invocation, written
    by :meth:`emit`.
    """

    def __init__(self, settings: FizzBuzzSettings) -> None:
        self.settings = settings
        self._emitted = False

        from fizzbuzz.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, output: str) -> None:
        """Write the final output string to stdout."""
        if self._emitted:
            raise RuntimeError("AppContext.emit() called twice")
        self._emitted = True
        click.echo(output)
