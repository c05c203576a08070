"""Single-call helpers kept for callers of the original function API."""

from __future__ import annotations

import click

from fizzbuzz.services.engine import create_standard_engine, run_fizzbuzz


def fizzbuzz(n: int) -> str:
    """Return the standard FizzBuzz value for a single number."""
    return create_standard_engine(n, n).evaluate_number(n).value


def generate_fizzbuzz(start: int = 1, end: int = 100) -> list[str]:
    """Standard FizzBuzz values for ``start..end``."""
    return [result.value for result in run_fizzbuzz(start, end)]


def print_fizzbuzz(start: int = 1, end: int = 100) -> None:
    """Echo ``"n: value"`` lines for ``start..end``."""
    for result in run_fizzbuzz(start, end):
        click.echo(f"{result.number}: {result.value}")
