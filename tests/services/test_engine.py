"""Tests for FizzBuzzEngine, config validation and the factory helpers."""

import pytest

from fizzbuzz.domain.errors import InvalidNumberError, RangeValidationError, RuleValidationError
from fizzbuzz.domain.models import MAX_RANGE_SIZE, FizzBuzzConfig, Rule
from fizzbuzz.domain.rules import STANDARD_RULES, CompositeEvaluator
from fizzbuzz.services.engine import (
    FizzBuzzEngine,
    create_custom_engine,
    create_standard_engine,
    make_config,
    run_fizzbuzz,
    validate_config,
)


class TestValidateConfig:
    def test_valid(self) -> None:
        validate_config(make_config(STANDARD_RULES, 1, 100))

    def test_start_after_end(self) -> None:
        config = FizzBuzzConfig(rules=STANDARD_RULES, start=10, end=5)
        with pytest.raises(RangeValidationError, match="Start must be less than or equal to end"):
            validate_config(config)

    def test_max_range_accepted(self) -> None:
        config = make_config(STANDARD_RULES, 1, MAX_RANGE_SIZE)
        assert config.size == 1_000_000

    def test_range_too_large(self) -> None:
        with pytest.raises(RangeValidationError, match="Range too large"):
            make_config(STANDARD_RULES, 1, MAX_RANGE_SIZE + 1)

    def test_range_too_large_negative_bounds(self) -> None:
        with pytest.raises(RangeValidationError, match="Range too large"):
            make_config(STANDARD_RULES, -1_000_000, 0)

    @pytest.mark.parametrize("start,end", [(1.5, 3), (1, "10"), (None, 5), (True, 5)])
    def test_non_integer_bounds(self, start: object, end: object) -> None:
        with pytest.raises(RangeValidationError, match="must be integers"):
            make_config(STANDARD_RULES, start, end)

    def test_rules_checked_first(self) -> None:
        with pytest.raises(RuleValidationError):
            make_config([], 10, 5)

    def test_duplicate_divisors(self) -> None:
        rules = [Rule(divisor=3, replacement="A"), Rule(divisor=3, replacement="B")]
        with pytest.raises(RuleValidationError, match="Duplicate"):
            make_config(rules, 1, 10)

    def test_rejects_non_config(self) -> None:
        with pytest.raises(RangeValidationError):
            validate_config({"rules": STANDARD_RULES, "start": 1, "end": 5})  # type: ignore[arg-type]


class TestFizzBuzzEngine:
    def test_generate_first_five(self) -> None:
        engine = create_standard_engine(1, 5)
        assert [r.value for r in engine.generate()] == ["1", "2", "Fizz", "4", "Buzz"]

    def test_generate_is_lazy(self) -> None:
        engine = create_standard_engine(1, 1_000_000)
        iterator = engine.generate()
        assert next(iterator).value == "1"
        assert next(iterator).value == "2"

    def test_generate_is_restartable(self) -> None:
        engine = create_standard_engine(1, 3)
        first = [r.value for r in engine.generate()]
        second = [r.value for r in engine.generate()]
        assert first == second == ["1", "2", "Fizz"]

    def test_iterable(self) -> None:
        engine = create_standard_engine(14, 15)
        assert [r.value for r in engine] == ["14", "FizzBuzz"]

    def test_numbers_ascend_from_start(self) -> None:
        results = create_standard_engine(-5, 5).generate_all()
        assert [r.number for r in results] == list(range(-5, 6))

    def test_single_number_range(self) -> None:
        results = create_standard_engine(15, 15).generate_all()
        assert len(results) == 1
        assert results[0].value == "FizzBuzz"

    def test_construction_fails_before_evaluation(self) -> None:
        config = FizzBuzzConfig(rules=STANDARD_RULES, start=5, end=1)
        with pytest.raises(RangeValidationError):
            FizzBuzzEngine(config)

    def test_generate_range_override(self) -> None:
        engine = create_standard_engine(1, 5)
        assert [r.value for r in engine.generate_range(9, 10)] == ["Fizz", "Buzz"]
        assert engine.config.start == 1

    def test_generate_range_validates_eagerly(self) -> None:
        engine = create_standard_engine()
        with pytest.raises(RangeValidationError, match="Start must be less than or equal to end"):
            engine.generate_range(10, 5)
        with pytest.raises(RangeValidationError, match="must be integers"):
            engine.generate_range(1, 2.5)  # type: ignore[arg-type]

    def test_evaluate_number(self) -> None:
        engine = create_standard_engine(1, 2)
        assert engine.evaluate_number(45).value == "FizzBuzz"
        assert engine.evaluate_number(-9).value == "Fizz"

    def test_evaluate_number_rejects_non_integer(self) -> None:
        with pytest.raises(InvalidNumberError):
            create_standard_engine().evaluate_number(1.5)  # type: ignore[arg-type]

    def test_custom_evaluator(self) -> None:
        rules = (Rule(divisor=3, replacement="Fizz"), Rule(divisor=5, replacement="Buzz"))
        config = make_config(rules, 15, 15)
        engine = create_custom_engine(config, CompositeEvaluator(rules))
        result = engine.generate_all()[0]
        assert result.value == "FizzBuzz"
        assert len(result.matched_rules) == 2

    def test_stats(self) -> None:
        engine = create_standard_engine(10, 19)
        assert engine.stats() == {
            "total_numbers": 10,
            "rule_count": 3,
            "range": {"start": 10, "end": 19},
        }


class TestRunFizzBuzz:
    def test_defaults(self) -> None:
        results = run_fizzbuzz()
        assert len(results) == 100
        assert results[14].value == "FizzBuzz"

    def test_custom_rules(self) -> None:
        rules = [Rule(divisor=7, replacement="Lucky")]
        assert [r.value for r in run_fizzbuzz(6, 8, rules)] == ["6", "Lucky", "8"]
