"""Rule validation, rule-string parsing, evaluators and the rule builder.

Two evaluation strategies:
- First-match: rules sorted by descending divisor, so 15 is tried before
  3 and 5. The first dividing rule is the only match.
- Composite: rules kept in the given order. Every dividing rule matches
  and the replacements are concatenated.

INVARIANT: evaluators validate their rule list at construction and never
mutate it afterwards.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from enum import StrEnum

from fizzbuzz.domain.errors import InvalidNumberError, RuleValidationError
from fizzbuzz.domain.models import FizzBuzzResult, Rule

STANDARD_RULES: tuple[Rule, ...] = (
    Rule(divisor=15, replacement="FizzBuzz"),
    Rule(divisor=3, replacement="Fizz"),
    Rule(divisor=5, replacement="Buzz"),
)

_DIVISOR_PATTERN = re.compile(r"[+-]?\d+")


class EvaluatorKind(StrEnum):
    """Closed set of evaluation strategies."""

    FIRST_MATCH = "first-match"
    COMPOSITE = "composite"


# --- Validation ---


def is_integer(value: object) -> bool:
    """True for ints, excluding bools."""
    return isinstance(value, int) and not isinstance(value, bool)


def make_rule(divisor: object, replacement: object) -> Rule:
    """Build a validated :class:`Rule` from raw values."""
    if not is_integer(divisor) or divisor <= 0:  # type: ignore[operator]
        raise RuleValidationError("Rule divisor must be a positive integer")
    if not isinstance(replacement, str) or not replacement:
        raise RuleValidationError("Rule replacement must be a non-empty string")
    return Rule(divisor=divisor, replacement=replacement)  # type: ignore[arg-type]


def validate_rule(rule: object) -> None:
    """Raise :class:`RuleValidationError` unless *rule* is a usable Rule."""
    if not isinstance(rule, Rule):
        raise RuleValidationError("Rule must be a Rule instance")
    if rule.divisor <= 0:
        raise RuleValidationError("Rule divisor must be a positive integer")
    if not rule.replacement:
        raise RuleValidationError("Rule replacement must be a non-empty string")


def validate_rules(rules: Sequence[Rule]) -> None:
    """Validate a rule list: non-empty, each rule valid, divisors distinct."""
    if isinstance(rules, (str, bytes)) or not isinstance(rules, Sequence) or not rules:
        raise RuleValidationError("Rules must be a non-empty sequence")

    for index, rule in enumerate(rules):
        try:
            validate_rule(rule)
        except RuleValidationError as exc:
            raise RuleValidationError(f"Invalid rule at index {index}: {exc.message}") from exc

    seen: set[int] = set()
    duplicates: list[int] = []
    for rule in rules:
        if rule.divisor in seen and rule.divisor not in duplicates:
            duplicates.append(rule.divisor)
        seen.add(rule.divisor)
    if duplicates:
        listed = ", ".join(str(d) for d in duplicates)
        raise RuleValidationError(f"Duplicate divisors found: {listed}")


def parse_rule_string(text: str) -> Rule:
    """Parse ``"divisor:replacement"`` into a Rule.

    Exactly one colon is required. The divisor must be a positive
    decimal integer and the replacement must be non-empty.

    Examples:
        >>> parse_rule_string("7:Lucky")
        Rule(divisor=7, replacement='Lucky')
    """
    parts = text.split(":")
    if len(parts) != 2:
        raise RuleValidationError(
            f'Invalid rule format: "{text}". Expected format: "divisor:replacement"'
        )
    divisor_text, replacement = parts
    stripped = divisor_text.strip()
    if not _DIVISOR_PATTERN.fullmatch(stripped) or int(stripped) <= 0:
        raise RuleValidationError(
            f'Invalid divisor: "{divisor_text}". Must be a positive integer'
        )
    return make_rule(int(stripped), replacement)


# --- Evaluators ---


class RuleEvaluator:
    """Base for evaluation strategies.

    Subclasses implement :meth:`_match`, returning the matched rules for
    a number in the order they contribute to the value.
    """

    kind: EvaluatorKind

    def __init__(self, rules: Sequence[Rule]) -> None:
        validate_rules(rules)
        self._rules: tuple[Rule, ...] = self._order(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Rules in evaluation order."""
        return self._rules

    def _order(self, rules: Sequence[Rule]) -> tuple[Rule, ...]:
        return tuple(rules)

    def _match(self, number: int) -> tuple[Rule, ...]:
        raise NotImplementedError

    def evaluate(self, number: int) -> FizzBuzzResult:
        """Map *number* to a result record."""
        if not is_integer(number):
            raise InvalidNumberError("Number must be an integer")
        matched = self._match(number)
        value = "".join(rule.replacement for rule in matched) or str(number)
        return FizzBuzzResult(number=number, value=value, matched_rules=matched)


class FirstMatchEvaluator(RuleEvaluator):
    """Highest dividing divisor wins."""

    kind = EvaluatorKind.FIRST_MATCH

    def _order(self, rules: Sequence[Rule]) -> tuple[Rule, ...]:
        return tuple(sorted(rules, key=lambda rule: rule.divisor, reverse=True))

    def _match(self, number: int) -> tuple[Rule, ...]:
        for rule in self._rules:
            if number % rule.divisor == 0:
                return (rule,)
        return ()


class CompositeEvaluator(RuleEvaluator):
    """All dividing rules match; replacements concatenate in rule order."""

    kind = EvaluatorKind.COMPOSITE

    def _match(self, number: int) -> tuple[Rule, ...]:
        return tuple(rule for rule in self._rules if number % rule.divisor == 0)


DefaultRuleEvaluator = FirstMatchEvaluator
CompositeRuleEvaluator = CompositeEvaluator

_EVALUATORS: dict[EvaluatorKind, type[RuleEvaluator]] = {
    EvaluatorKind.FIRST_MATCH: FirstMatchEvaluator,
    EvaluatorKind.COMPOSITE: CompositeEvaluator,
}


def create_evaluator(
    rules: Sequence[Rule], kind: EvaluatorKind | str = EvaluatorKind.FIRST_MATCH
) -> RuleEvaluator:
    """Construct the evaluator for *kind*."""
    try:
        evaluator_cls = _EVALUATORS[EvaluatorKind(kind)]
    except ValueError as exc:
        supported = ", ".join(k.value for k in EvaluatorKind)
        raise RuleValidationError(
            f"Unknown evaluator: {kind}. Supported evaluators: {supported}"
        ) from exc
    return evaluator_cls(rules)


# --- Builder ---


class RuleBuilder:
    """Fluent accumulator for a rule list.

    Usage::

        evaluator = RuleBuilder().add_standard_rules().add_rule(7, "Bazz").build_evaluator()
    """

    def __init__(self) -> None:
        self._rules: list[Rule] = []

    def add_rule(self, divisor: int, replacement: str) -> RuleBuilder:
        self._rules.append(make_rule(divisor, replacement))
        return self

    def add_rule_string(self, text: str) -> RuleBuilder:
        self._rules.append(parse_rule_string(text))
        return self

    def add_rules(self, rule_strings: Iterable[str]) -> RuleBuilder:
        for text in rule_strings:
            self.add_rule_string(text)
        return self

    def add_standard_rules(self) -> RuleBuilder:
        self._rules.extend(STANDARD_RULES)
        return self

    def clear(self) -> RuleBuilder:
        self._rules = []
        return self

    def build(self) -> tuple[Rule, ...]:
        """Return a validated, immutable snapshot of the accumulated rules."""
        validate_rules(self._rules)
        return tuple(self._rules)

    def build_evaluator(self, composite: bool = False) -> RuleEvaluator:
        kind = EvaluatorKind.COMPOSITE if composite else EvaluatorKind.FIRST_MATCH
        return create_evaluator(self.build(), kind)
