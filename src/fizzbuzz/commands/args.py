"""Command-line argument model, parsing and validation.

Parsing is delegated to Click using the parameter declarations of the
``fizzbuzz`` command, so the library entry point :func:`parse_args` and
the console script accept exactly the same syntax. Click usage errors
are re-raised as :class:`ArgumentParseError`.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

import click
from pydantic import BaseModel

from fizzbuzz.domain.errors import ArgumentParseError, FormatValidationError, RangeValidationError
from fizzbuzz.domain.rules import parse_rule_string
from fizzbuzz.output.formatters import supported_formats

if TYPE_CHECKING:
    from fizzbuzz.config.settings import FizzBuzzSettings

DEFAULT_START = 1
DEFAULT_END = 100
DEFAULT_FORMAT = "numbered"


class CliArgs(BaseModel):
    """Parsed command-line arguments. ``None`` means "not given"."""

    model_config = {"frozen": True, "strict": True}

    start: int | None = None
    end: int | None = None
    rules: tuple[str, ...] = ()
    format: str | None = None
    help: bool = False
    version: bool = False
    verbose: bool = False
    log_json: bool = False


def args_from_params(params: Mapping[str, Any]) -> CliArgs:
    """Build :class:`CliArgs` from the Click parameter values.

    Positional integers fill whichever of start/end the flags left
    unset, in that order.
    """
    start = params.get("start")
    end = params.get("end")
    positionals = list(params.get("bounds") or ())
    if len(positionals) > 2:
        raise ArgumentParseError(f"Too many positional arguments: {positionals[2]}")
    for value in positionals:
        if start is None:
            start = value
        elif end is None:
            end = value
        else:
            raise ArgumentParseError(f"Too many positional arguments: {value}")

    return CliArgs(
        start=start,
        end=end,
        rules=tuple(params.get("rules") or ()),
        format=params.get("output_format"),
        help=bool(params.get("show_help")),
        version=bool(params.get("show_version")),
        verbose=bool(params.get("verbose")),
        log_json=bool(params.get("log_json")),
    )


def parse_args(argv: Sequence[str]) -> CliArgs:
    """Parse *argv* (without the program name) into :class:`CliArgs`."""
    from fizzbuzz.cli import cli

    try:
        ctx = cli.make_context("fizzbuzz", list(argv))
    except click.UsageError as exc:
        raise ArgumentParseError(exc.format_message()) from exc
    return args_from_params(ctx.params)


def validate_args(args: CliArgs, settings: FizzBuzzSettings | None = None) -> CliArgs:
    """Fill defaults and re-check range ordering, format and rule syntax.

    Returns a new :class:`CliArgs` with ``start``, ``end`` and ``format``
    always set.
    """
    start = args.start
    end = args.end
    fmt = args.format
    if start is None:
        start = settings.default_start if settings else DEFAULT_START
    if end is None:
        end = settings.default_end if settings else DEFAULT_END
    if fmt is None:
        fmt = settings.default_format if settings else DEFAULT_FORMAT

    if start > end:
        raise RangeValidationError("Start must be less than or equal to end")

    formats = supported_formats()
    if fmt not in formats:
        raise FormatValidationError(
            f"Unsupported format: {fmt}. Supported formats: {', '.join(formats)}"
        )

    for rule in args.rules:
        parse_rule_string(rule)

    return args.model_copy(update={"start": start, "end": end, "format": fmt})


def get_examples() -> list[str]:
    """Example invocations shown in ``--help``."""
    return [
        "fizzbuzz",
        "fizzbuzz 1 50",
        "fizzbuzz --start 1 --end 100",
        "fizzbuzz --format json",
        'fizzbuzz --rule "7:Lucky" --rule "11:Eleven"',
        "fizzbuzz --start=10 --end=20 --format=table",
        "fizzbuzz 1 30 --format compact",
    ]
