"""Frozen pydantic models for rules, results and run configuration.

Models only enforce types. Domain constraints (positive divisors, unique
divisors, range bounds) are checked by the validators in
:mod:`fizzbuzz.domain.rules` and :mod:`fizzbuzz.services.engine` so they
raise the package's own error kinds.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, StrictInt

MAX_RANGE_SIZE = 1_000_000


class Rule(BaseModel):
    """A single divisor -> replacement rule."""

    model_config = {"frozen": True, "strict": True}

    divisor: int
    replacement: str

    def __str__(self) -> str:
        return f"{self.divisor}:{self.replacement}"


class FizzBuzzResult(BaseModel):
    """Outcome of evaluating one number.

    Attributes:
        number: The evaluated integer.
        value: The replacement text, or the decimal string of ``number``
            when no rule matched.
        matched_rules: Rules that divided ``number``, in evaluation order.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    number: int
    value: str
    matched_rules: tuple[Rule, ...] = Field(default=(), alias="matchedRules")

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form using the wire field names."""
        return {
            "number": self.number,
            "value": self.value,
            "matchedRules": [
                {"divisor": rule.divisor, "replacement": rule.replacement}
                for rule in self.matched_rules
            ],
        }


class FizzBuzzConfig(BaseModel):
    """Rules plus the inclusive range they are applied to."""

    model_config = {"frozen": True}

    rules: tuple[Rule, ...]
    start: StrictInt
    end: StrictInt

    @property
    def size(self) -> int:
        return self.end - self.start + 1
