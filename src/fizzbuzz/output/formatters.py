"""Render result sequences as plain, numbered, JSON, CSV, table or compact text.

Each format is a pure function ``(results, options) -> str`` registered
in a closed dispatch table keyed by :class:`OutputFormat`. Formatters do
not validate their input beyond what the models guarantee.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable, Iterable, Sequence
from enum import StrEnum

from pydantic import BaseModel

from fizzbuzz.domain.errors import FormatValidationError
from fizzbuzz.domain.models import FizzBuzzResult

TABLE_HEADER = "| Number | Value      | Matched Rules        |"
TABLE_SEPARATOR = "|--------|------------|----------------------|"
CSV_HEADER = ("Number", "Value", "Matched Rules")


class OutputFormat(StrEnum):
    """Supported output formats, in display order."""

    PLAIN = "plain"
    NUMBERED = "numbered"
    JSON = "json"
    CSV = "csv"
    TABLE = "table"
    COMPACT = "compact"


class OutputOptions(BaseModel):
    """Rendering switches shared by all formats.

    Attributes:
        include_number: Prefix ``plain`` values with ``"n: "``.
        separator: Field separator for ``csv``, item separator for
            ``compact``. ``None`` or empty selects the format default.
        pretty_json: Indent ``json`` output by two spaces.
    """

    model_config = {"frozen": True}

    include_number: bool = False
    separator: str | None = None
    pretty_json: bool = False


_DEFAULT_OPTIONS = OutputOptions()


def _rules_summary(result: FizzBuzzResult, joiner: str) -> str:
    return joiner.join(str(rule) for rule in result.matched_rules)


def _dumps(data: object, options: OutputOptions) -> str:
    if options.pretty_json:
        return _json.dumps(data, indent=2, ensure_ascii=False)
    return _json.dumps(data, separators=(",", ":"), ensure_ascii=False)


# --- Per-result renderers ---


def _plain_one(result: FizzBuzzResult, options: OutputOptions) -> str:
    if options.include_number:
        return f"{result.number}: {result.value}"
    return result.value


def _numbered_one(result: FizzBuzzResult, options: OutputOptions) -> str:
    return f"{result.number}: {result.value}"


def _json_one(result: FizzBuzzResult, options: OutputOptions) -> str:
    return _dumps(result.to_dict(), options)


def _csv_one(result: FizzBuzzResult, options: OutputOptions) -> str:
    separator = options.separator or ","
    return separator.join(
        [str(result.number), f'"{result.value}"', f'"{_rules_summary(result, ";")}"']
    )


def _table_one(result: FizzBuzzResult, options: OutputOptions) -> str:
    matched = _rules_summary(result, ", ") or "none"
    return f"| {str(result.number):>6} | {result.value:<10} | {matched:<20} |"


def _compact_one(result: FizzBuzzResult, options: OutputOptions) -> str:
    return result.value


# --- Sequence renderers ---


def _plain(results: Sequence[FizzBuzzResult], options: OutputOptions) -> str:
    return "\n".join(_plain_one(r, options) for r in results)


def _numbered(results: Sequence[FizzBuzzResult], options: OutputOptions) -> str:
    return "\n".join(_numbered_one(r, options) for r in results)


def _json_many(results: Sequence[FizzBuzzResult], options: OutputOptions) -> str:
    return _dumps([r.to_dict() for r in results], options)


def _csv(results: Sequence[FizzBuzzResult], options: OutputOptions) -> str:
    separator = options.separator or ","
    rows = [separator.join(CSV_HEADER)]
    rows.extend(_csv_one(r, options) for r in results)
    return "\n".join(rows)


def _table(results: Sequence[FizzBuzzResult], options: OutputOptions) -> str:
    rows = [TABLE_HEADER, TABLE_SEPARATOR]
    rows.extend(_table_one(r, options) for r in results)
    return "\n".join(rows)


def _compact(results: Sequence[FizzBuzzResult], options: OutputOptions) -> str:
    separator = options.separator or " "
    return separator.join(_compact_one(r, options) for r in results)


_Renderer = Callable[[Sequence[FizzBuzzResult], OutputOptions], str]
_OneRenderer = Callable[[FizzBuzzResult, OutputOptions], str]

_RENDERERS: dict[OutputFormat, tuple[_OneRenderer, _Renderer]] = {
    OutputFormat.PLAIN: (_plain_one, _plain),
    OutputFormat.NUMBERED: (_numbered_one, _numbered),
    OutputFormat.JSON: (_json_one, _json_many),
    OutputFormat.CSV: (_csv_one, _csv),
    OutputFormat.TABLE: (_table_one, _table),
    OutputFormat.COMPACT: (_compact_one, _compact),
}


# --- Public API ---


def supported_formats() -> list[str]:
    """Format names in display order."""
    return [fmt.value for fmt in OutputFormat]


def resolve_format(name: str | OutputFormat) -> OutputFormat:
    """Map a (case-insensitive) format name to :class:`OutputFormat`."""
    try:
        return OutputFormat(str(name).lower())
    except ValueError as exc:
        supported = ", ".join(supported_formats())
        raise FormatValidationError(
            f"Unknown format: {name}. Supported formats: {supported}"
        ) from exc


def format_results(
    results: Iterable[FizzBuzzResult],
    fmt: str | OutputFormat = OutputFormat.PLAIN,
    options: OutputOptions | None = None,
) -> str:
    """Render a result sequence in format *fmt*.

    Args:
        results: Results to render; any iterable, including an engine's
            lazy iterator.
        fmt: Format name, see :func:`supported_formats`.
        options: Rendering switches; defaults apply when omitted.
    """
    _, render = _RENDERERS[resolve_format(fmt)]
    return render(list(results), options or _DEFAULT_OPTIONS)


def format_result(
    result: FizzBuzzResult,
    fmt: str | OutputFormat = OutputFormat.PLAIN,
    options: OutputOptions | None = None,
) -> str:
    """Render a single result in format *fmt* (no headers)."""
    render_one, _ = _RENDERERS[resolve_format(fmt)]
    return render_one(result, options or _DEFAULT_OPTIONS)
