"""FizzBuzzEngine: runs an evaluator over an inclusive integer range.

Construction is fail-fast: the config is validated before any number is
evaluated, so callers never see partial output. Result sequences are
lazy and restartable; every call to :meth:`FizzBuzzEngine.generate`
returns a fresh iterator.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

from fizzbuzz.domain.errors import RangeValidationError
from fizzbuzz.domain.models import MAX_RANGE_SIZE, FizzBuzzConfig, FizzBuzzResult, Rule
from fizzbuzz.domain.rules import (
    STANDARD_RULES,
    FirstMatchEvaluator,
    RuleEvaluator,
    is_integer,
    validate_rules,
)

logger = logging.getLogger(__name__)


def _check_bounds(start: object, end: object) -> None:
    if not is_integer(start) or not is_integer(end):
        raise RangeValidationError("Start and end must be integers")
    if start > end:  # type: ignore[operator]
        raise RangeValidationError("Start must be less than or equal to end")


def validate_config(config: FizzBuzzConfig) -> None:
    """Check rules, bound ordering and range size of *config*."""
    if not isinstance(config, FizzBuzzConfig):
        raise RangeValidationError("Config must be a FizzBuzzConfig")
    validate_rules(config.rules)
    _check_bounds(config.start, config.end)
    if config.size > MAX_RANGE_SIZE:
        raise RangeValidationError(f"Range too large (maximum {MAX_RANGE_SIZE:,} numbers)")


def make_config(rules: Sequence[Rule], start: object, end: object) -> FizzBuzzConfig:
    """Build a validated config from raw values.

    Non-integer bounds raise :class:`RangeValidationError` instead of a
    pydantic validation error.
    """
    rules = tuple(rules)
    validate_rules(rules)
    _check_bounds(start, end)
    config = FizzBuzzConfig(rules=rules, start=start, end=end)
    validate_config(config)
    return config


class FizzBuzzEngine:
    """Orchestrates rule evaluation over a configured range.

    Usage::

        engine = FizzBuzzEngine(make_config(STANDARD_RULES, 1, 15))
        for result in engine.generate():
            ...
    """

    def __init__(self, config: FizzBuzzConfig, evaluator: RuleEvaluator | None = None) -> None:
        validate_config(config)
        self._config = config
        self._evaluator = evaluator or FirstMatchEvaluator(config.rules)
        logger.debug(
            "Engine ready: %d..%d with %d rules (%s)",
            config.start,
            config.end,
            len(config.rules),
            self._evaluator.kind,
        )

    @property
    def config(self) -> FizzBuzzConfig:
        """The validated configuration (frozen)."""
        return self._config

    @property
    def evaluator(self) -> RuleEvaluator:
        return self._evaluator

    def _iter_range(self, start: int, end: int) -> Iterator[FizzBuzzResult]:
        for number in range(start, end + 1):
            yield self._evaluator.evaluate(number)

    def __iter__(self) -> Iterator[FizzBuzzResult]:
        return self.generate()

    def generate(self) -> Iterator[FizzBuzzResult]:
        """Lazily yield results for the configured range in ascending order."""
        return self._iter_range(self._config.start, self._config.end)

    def generate_all(self) -> list[FizzBuzzResult]:
        """Evaluate the configured range eagerly."""
        return list(self.generate())

    def generate_range(self, start: int, end: int) -> Iterator[FizzBuzzResult]:
        """Lazily yield results for an override range.

        Bounds are validated before the iterator is returned.
        """
        _check_bounds(start, end)
        return self._iter_range(start, end)

    def evaluate_number(self, number: int) -> FizzBuzzResult:
        return self._evaluator.evaluate(number)

    def stats(self) -> dict[str, Any]:
        """Summary of the configured run."""
        return {
            "total_numbers": self._config.size,
            "rule_count": len(self._config.rules),
            "range": {"start": self._config.start, "end": self._config.end},
        }


# --- Factories ---


def create_standard_engine(start: int = 1, end: int = 100) -> FizzBuzzEngine:
    """Engine with the canonical 15/3/5 rules."""
    return FizzBuzzEngine(make_config(STANDARD_RULES, start, end))


def create_custom_engine(
    config: FizzBuzzConfig, evaluator: RuleEvaluator | None = None
) -> FizzBuzzEngine:
    return FizzBuzzEngine(config, evaluator)


def run_fizzbuzz(
    start: int = 1,
    end: int = 100,
    rules: Sequence[Rule] | None = None,
) -> list[FizzBuzzResult]:
    """Evaluate ``start..end`` with *rules* (standard rules when omitted)."""
    config = make_config(rules if rules is not None else STANDARD_RULES, start, end)
    return FizzBuzzEngine(config).generate_all()
