"""fizzbuzz: configurable FizzBuzz sequences for the command line and for code."""

__version__ = "2.0.0"

from fizzbuzz.commands.args import CliArgs, get_examples, parse_args, validate_args
from fizzbuzz.commands.help import APP_NAME, get_help_text, get_version_text
from fizzbuzz.commands.runner import (
    CommandBuilder,
    execute_command,
    quick_custom_fizzbuzz,
    quick_fizzbuzz,
    quick_fizzbuzz_json,
    run_fizzbuzz_command,
)
from fizzbuzz.domain.errors import (
    ArgumentParseError,
    FizzBuzzError,
    FormatValidationError,
    InvalidNumberError,
    RangeValidationError,
    RuleValidationError,
)
from fizzbuzz.domain.models import MAX_RANGE_SIZE, FizzBuzzConfig, FizzBuzzResult, Rule
from fizzbuzz.domain.rules import (
    STANDARD_RULES,
    CompositeEvaluator,
    CompositeRuleEvaluator,
    DefaultRuleEvaluator,
    EvaluatorKind,
    FirstMatchEvaluator,
    RuleBuilder,
    RuleEvaluator,
    create_evaluator,
    parse_rule_string,
    validate_rule,
    validate_rules,
)
from fizzbuzz.output.formatters import (
    OutputFormat,
    OutputOptions,
    format_result,
    format_results,
    supported_formats,
)
from fizzbuzz.services.engine import (
    FizzBuzzEngine,
    create_custom_engine,
    create_standard_engine,
    make_config,
    run_fizzbuzz,
    validate_config,
)
from fizzbuzz.services.legacy import fizzbuzz, generate_fizzbuzz, print_fizzbuzz

VERSION = __version__

__all__ = [
    "APP_NAME",
    "MAX_RANGE_SIZE",
    "STANDARD_RULES",
    "VERSION",
    "ArgumentParseError",
    "CliArgs",
    "CommandBuilder",
    "CompositeEvaluator",
    "CompositeRuleEvaluator",
    "DefaultRuleEvaluator",
    "EvaluatorKind",
    "FirstMatchEvaluator",
    "FizzBuzzConfig",
    "FizzBuzzEngine",
    "FizzBuzzError",
    "FizzBuzzResult",
    "FormatValidationError",
    "InvalidNumberError",
    "OutputFormat",
    "OutputOptions",
    "RangeValidationError",
    "Rule",
    "RuleBuilder",
    "RuleEvaluator",
    "RuleValidationError",
    "create_custom_engine",
    "create_evaluator",
    "create_standard_engine",
    "execute_command",
    "fizzbuzz",
    "format_result",
    "format_results",
    "generate_fizzbuzz",
    "get_examples",
    "get_help_text",
    "get_version_text",
    "make_config",
    "parse_args",
    "parse_rule_string",
    "print_fizzbuzz",
    "quick_custom_fizzbuzz",
    "quick_fizzbuzz",
    "quick_fizzbuzz_json",
    "run_fizzbuzz",
    "run_fizzbuzz_command",
    "supported_formats",
    "validate_args",
    "validate_config",
    "validate_rule",
    "validate_rules",
]
