"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from .enums import DateTimeKind


class ParseError(ValueError):
    """Text does not conform to a pattern, or names an impossible date.

    Raised for syntactic mismatches (wrong separators, missing digits,
    trailing characters) and for calendar-invalid values that match the
    layout (month 13, day 32, February 29 in a non-leap year). Inherits from
    ValueError so callers already guarding ``datetime.strptime`` keep working.

    Attributes:
        text: The input that failed to parse.
        pattern: The pattern that was tried.
        reason: Short description of the mismatch.

    Example:
        >>> err = ParseError("2025-02-29", "yyyy-MM-dd", "day is out of range for month")
        >>> str(err)
        "Unable to parse '2025-02-29' with pattern 'yyyy-MM-dd': day is out of range for month"
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, text: str, pattern: str, reason: str) -> None:
        self.text = text
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Unable to parse {text!r} with pattern {pattern!r}: {reason}")


class ConversionError(ValueError):
    """UTC conversion failed: unparseable input or an out-of-range instant.

    Always chained (``raise ... from``) to the underlying cause, normally a
    :class:`ParseError`; the cause is also exposed as :attr:`cause`.

    Example:
        >>> cause = ParseError("13/45/2026", "MM/dd/yyyy", "month is out of range")
        >>> err = ConversionError("13/45/2026", "MM/dd/yyyy", DateTimeKind.LOCAL, cause)
        >>> err.cause is cause
        True
        >>> "local" in str(err)
        True
    """

    def __init__(self, text: str, pattern: str, source_kind: DateTimeKind, cause: Exception) -> None:
        self.text = text
        self.pattern = pattern
        self.source_kind = source_kind
        self.cause = cause
        super().__init__(f"Unable to convert {text!r} ({source_kind.value}) to UTC using pattern {pattern!r}: {cause}")


class ConfigurationError(Exception):
    """Missing, invalid, or inconsistent configuration.

    Raised when the ``[datenorm]`` section names an unknown culture or zone,
    or holds values that fail validation. Caught at CLI boundaries to
    produce a configuration exit code.

    Example:
        >>> str(ConfigurationError("Unknown culture: 'xx'"))
        "Unknown culture: 'xx'"
    """


__all__ = [
    "ConfigurationError",
    "ConversionError",
    "ParseError",
]
