"""Command execution: validated arguments in, rendered string out.

Also provides :class:`CommandBuilder`, a fluent way to assemble the same
arguments from code, and a few one-call helpers on top of it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from fizzbuzz.commands.args import CliArgs, validate_args
from fizzbuzz.commands.help import get_completion_message
from fizzbuzz.domain.errors import ArgumentParseError, RangeValidationError
from fizzbuzz.domain.rules import RuleBuilder
from fizzbuzz.output.formatters import OutputFormat, OutputOptions, format_results
from fizzbuzz.services.engine import FizzBuzzEngine, make_config

if TYPE_CHECKING:
    from fizzbuzz.config.settings import FizzBuzzSettings

logger = logging.getLogger(__name__)


def run_fizzbuzz_command(args: CliArgs, settings: FizzBuzzSettings | None = None) -> str:
    """Build rules, run the engine and render the output string.

    Custom rules replace the standard set. ``plain`` output omits the
    number prefix; ``json`` output is pretty-printed.
    """
    args = validate_args(args, settings=settings)
    builder = RuleBuilder()
    if args.rules:
        builder.add_rules(args.rules)
    else:
        builder.add_standard_rules()

    engine = FizzBuzzEngine(make_config(builder.build(), args.start, args.end))
    results = engine.generate_all()

    fmt = OutputFormat(args.format)
    options = OutputOptions(
        include_number=fmt is not OutputFormat.PLAIN,
        pretty_json=fmt is OutputFormat.JSON,
    )
    output = format_results(results, fmt, options)
    logger.debug(get_completion_message(len(results), fmt))
    return output


def execute_command(argv: Sequence[str]) -> int:
    """Run the CLI in-process on *argv* and return its exit code."""
    from fizzbuzz.cli import cli

    return cli.main(args=list(argv), prog_name="fizzbuzz", standalone_mode=False)


class CommandBuilder:
    """Fluent assembly of a FizzBuzz run for scripting.

    Usage::

        output = CommandBuilder().set_start(1).set_end(15).set_format("csv").execute()
    """

    def __init__(self) -> None:
        self._args: dict[str, Any] = {}

    def set_start(self, start: int) -> CommandBuilder:
        self._args["start"] = start
        return self

    def set_end(self, end: int) -> CommandBuilder:
        self._args["end"] = end
        return self

    def set_format(self, fmt: str) -> CommandBuilder:
        self._args["format"] = fmt
        return self

    def add_rule(self, rule: str) -> CommandBuilder:
        self._args["rules"] = (*self._args.get("rules", ()), rule)
        return self

    def add_rules(self, rules: Iterable[str]) -> CommandBuilder:
        self._args["rules"] = (*self._args.get("rules", ()), *rules)
        return self

    def clear_rules(self) -> CommandBuilder:
        self._args["rules"] = ()
        return self

    def reset(self) -> CommandBuilder:
        self._args = {}
        return self

    @property
    def args(self) -> CliArgs:
        """Snapshot of the arguments assembled so far.

        Values of the wrong type raise :class:`RangeValidationError` for the
        bounds and :class:`ArgumentParseError` for everything else.
        """
        try:
            return CliArgs(**self._args)
        except ValidationError as exc:
            fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
            if "start" in fields or "end" in fields:
                raise RangeValidationError("Start and end must be integers") from exc
            raise ArgumentParseError(f"Invalid value for: {', '.join(fields)}") from exc

    def execute(self) -> str:
        return run_fizzbuzz_command(self.args)


def quick_fizzbuzz(start: int = 1, end: int = 100) -> str:
    return CommandBuilder().set_start(start).set_end(end).set_format("numbered").execute()


def quick_fizzbuzz_json(start: int = 1, end: int = 100) -> str:
    return CommandBuilder().set_start(start).set_end(end).set_format("json").execute()


def quick_custom_fizzbuzz(start: int, end: int, rules: Iterable[str]) -> str:
    return (
        CommandBuilder()
        .set_start(start)
        .set_end(end)
        .add_rules(rules)
        .set_format("numbered")
        .execute()
    )
