"""Shared pytest fixtures for fizzbuzz tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from fizzbuzz.domain.models import FizzBuzzResult, Rule


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Every CLI run reconfigures logging; put the package logger back afterwards."""
    fb = logging.getLogger("fizzbuzz")
    original_handlers = fb.handlers[:]
    original_level = fb.level
    original_propagate = fb.propagate
    yield
    fb.handlers = original_handlers
    fb.setLevel(original_level)
    fb.propagate = original_propagate


@pytest.fixture
def sample_results() -> list[FizzBuzzResult]:
    """Results for 1, 3, 5 and 15 under the standard rules."""
    return [
        FizzBuzzResult(number=1, value="1", matched_rules=()),
        FizzBuzzResult(
            number=3, value="Fizz", matched_rules=(Rule(divisor=3, replacement="Fizz"),)
        ),
        FizzBuzzResult(
            number=5, value="Buzz", matched_rules=(Rule(divisor=5, replacement="Buzz"),)
        ),
        FizzBuzzResult(
            number=15,
            value="FizzBuzz",
            matched_rules=(Rule(divisor=15, replacement="FizzBuzz"),),
        ),
    ]
