"""Error hierarchy for the FizzBuzz engine.

Every error carries a stable machine-readable ``code`` so library callers
can tell the kinds apart. The CLI collapses all of them to exit code 1.
"""

from __future__ import annotations


class FizzBuzzError(Exception):
    """Base class for all FizzBuzz errors."""

    code: str = "FIZZBUZZ_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict[str, str]:
        """Structured payload, mirroring the JSON error shape."""
        return {"code": self.code, "message": self.message}


class RuleValidationError(FizzBuzzError):
    """Bad divisor or replacement, duplicate divisors, malformed rule string."""

    code = "INVALID_RULE"


class RangeValidationError(FizzBuzzError):
    """Non-integer bounds, start after end, or range too large."""

    code = "INVALID_RANGE"


class FormatValidationError(FizzBuzzError):
    """Unknown output format name."""

    code = "INVALID_FORMAT"


class InvalidNumberError(FizzBuzzError):
    """A non-integer was handed to an evaluator."""

    code = "INVALID_NUMBER"


class ArgumentParseError(FizzBuzzError):
    """Unknown flag, missing value, unparsable number, too many positionals."""

    code = "INVALID_ARGUMENT"
