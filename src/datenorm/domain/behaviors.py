"""Pure date normalization functions with no I/O or framework dependencies.

Every function takes the culture (and, where a local zone matters, the zone)
as an explicit argument. Nothing here reads process locale state; the only
ambient input is the system zone table, consulted when ``zone`` is None.

Contents:
    * :func:`parse_exact` - Strict single-pattern parse.
    * :func:`parse_to_utc` - Parse, tag, and convert to UTC.
    * :func:`parse_offset` - Parse a value carrying a fixed offset.
    * :func:`try_match` - Non-raising conformance check.
    * :func:`format_civil` / :func:`format_offset` - Canonical rendering.
    * :func:`parse_flexible` - First-match-wins over candidate patterns.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime, timedelta, timezone, tzinfo
from types import MappingProxyType

from .culture import Culture
from .enums import DateTimeKind
from .errors import ConversionError, ParseError
from .patterns import ParsedFields, compile_pattern
from .values import CivilDateTime, FlexibleParseResult, OffsetDateTime

logger = logging.getLogger(__name__)

#: Pattern used by the single-pattern entry points when the caller gives none.
DEFAULT_PATTERN = "yyyy-MM-ddTHH:mm:ss"

#: Default pattern for :func:`parse_offset`.
DEFAULT_OFFSET_PATTERN = "yyyy-MM-ddTHH:mm:sszzz"

#: Built-in candidates for :func:`parse_flexible`, tried in this order.
#: Month-first slashed dates come before day-first ones.
DEFAULT_CANDIDATE_PATTERNS: tuple[str, ...] = (
    "yyyy-MM-ddTHH:mm:ss.FFFFFFF",
    "yyyy-MM-dd HH:mm:ss",
    "yyyy-MM-ddTHH:mm",
    "yyyy-MM-dd",
    "yyyyMMddTHHmmss",
    "yyyyMMdd",
    "yyyy/MM/dd",
    "MM/dd/yyyy HH:mm:ss",
    "MM/dd/yyyy",
    "dd/MM/yyyy",
    "dd-MM-yyyy",
    "dd.MM.yyyy",
    "d MMMM yyyy",
    "dd MMM yyyy",
    "MMMM d, yyyy",
    "MMM d, yyyy",
)

#: Which conversion basis each kind goes through on the way to UTC.
#: UNSPECIFIED deliberately shares the LOCAL row.
UTC_CONVERSION_BASIS: Mapping[DateTimeKind, DateTimeKind] = MappingProxyType(
    {
        DateTimeKind.LOCAL: DateTimeKind.LOCAL,
        DateTimeKind.UNSPECIFIED: DateTimeKind.LOCAL,
        DateTimeKind.UTC: DateTimeKind.UTC,
    }
)

UTC_MARKER = "Z"

#: Layout produced by :func:`format_civil` without sub-seconds.
CANONICAL_PATTERN = "yyyy-MM-ddTHH:mm:ss"


def _parse_fields(text: str, pattern: str, culture: Culture) -> ParsedFields:
    try:
        compiled = compile_pattern(pattern, culture)
    except ValueError as exc:
        raise ParseError(text, pattern, f"invalid pattern: {exc}") from exc
    try:
        return compiled.parse(text)
    except ValueError as exc:
        raise ParseError(text, pattern, str(exc)) from exc


def parse_exact(text: str, pattern: str, culture: Culture) -> CivilDateTime:
    """Parse ``text`` that must match ``pattern`` completely.

    Offset tokens in the pattern are consumed but only the wall-clock value
    is kept; use :func:`parse_offset` to retain the offset.

    Args:
        text: Input to parse.
        pattern: Custom format pattern describing the whole input.
        culture: Locale data for names, designators and separators.

    Returns:
        The parsed value tagged ``UNSPECIFIED``.

    Raises:
        ParseError: On any layout mismatch, leftover characters, or a
            calendar-invalid date.

    Example:
        >>> from datenorm.domain.culture import INVARIANT_CULTURE
        >>> parse_exact("2024-02-29", "yyyy-MM-dd", INVARIANT_CULTURE).value
        datetime.datetime(2024, 2, 29, 0, 0)
        >>> parse_exact("2025-02-29", "yyyy-MM-dd", INVARIANT_CULTURE)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        datenorm.domain.errors.ParseError: Unable to parse '2025-02-29' with pattern 'yyyy-MM-dd': ...
    """
    return CivilDateTime(_parse_fields(text, pattern, culture).value, DateTimeKind.UNSPECIFIED)


def _local_to_utc(value: datetime, zone: tzinfo | None) -> datetime:
    aware = value.astimezone() if zone is None else value.replace(tzinfo=zone)
    return aware.astimezone(timezone.utc).replace(tzinfo=None)


def to_utc(value: CivilDateTime, zone: tzinfo | None) -> CivilDateTime:
    """Convert a tagged value to UTC through :data:`UTC_CONVERSION_BASIS`.

    Args:
        value: Value to convert.
        zone: Local zone rules; None uses the process local zone.

    Returns:
        The equivalent value tagged ``UTC``.

    Raises:
        OverflowError: If the converted instant leaves the supported range.

    Example:
        >>> fixed = timezone(timedelta(hours=2))
        >>> v = CivilDateTime(datetime(2026, 1, 3, 12, 0), DateTimeKind.UNSPECIFIED)
        >>> to_utc(v, fixed).value
        datetime.datetime(2026, 1, 3, 10, 0)
    """
    if UTC_CONVERSION_BASIS[value.kind] is DateTimeKind.UTC:
        return value.with_kind(DateTimeKind.UTC)
    return CivilDateTime(_local_to_utc(value.value, zone), DateTimeKind.UTC)


def parse_to_utc(
    text: str,
    pattern: str,
    source_kind: DateTimeKind,
    culture: Culture,
    zone: tzinfo | None,
) -> CivilDateTime:
    """Parse ``text``, tag it with ``source_kind`` and convert it to UTC.

    ``LOCAL`` and ``UNSPECIFIED`` inputs are interpreted in ``zone`` (the
    process local zone when None); ``UTC`` inputs are only retagged.

    Raises:
        ConversionError: Wrapping the :class:`ParseError` when ``text`` does
            not match, or the range error when the result is unrepresentable.
    """
    try:
        parsed = parse_exact(text, pattern, culture)
    except ParseError as exc:
        raise ConversionError(text, pattern, source_kind, exc) from exc
    try:
        return to_utc(parsed.with_kind(source_kind), zone)
    except (OverflowError, ValueError, OSError) as exc:
        raise ConversionError(text, pattern, source_kind, exc) from exc


def parse_offset(text: str, pattern: str, culture: Culture) -> OffsetDateTime:
    """Parse ``text`` whose pattern includes an offset token.

    Example:
        >>> from datenorm.domain.culture import INVARIANT_CULTURE
        >>> odt = parse_offset("2026-01-03T14:30:00+05:30", DEFAULT_OFFSET_PATTERN, INVARIANT_CULTURE)
        >>> odt.offset_text, odt.utc_instant.value
        ('+05:30', datetime.datetime(2026, 1, 3, 9, 0))

    Raises:
        ParseError: If the pattern has no offset token, the text carries no
            offset, or any other mismatch occurs.
    """
    fields = _parse_fields(text, pattern, culture)
    if fields.offset is None or fields.offset_text is None:
        raise ParseError(text, pattern, "no UTC offset present")
    if fields.value - datetime.min < fields.offset or datetime.max - fields.value < -fields.offset:
        raise ParseError(text, pattern, "UTC instant is out of range")
    return OffsetDateTime(fields.value, fields.offset, fields.offset_text)


def try_match(text: str, pattern: str, culture: Culture) -> bool:
    """Return whether :func:`parse_exact` would succeed; never raises for bad input."""
    try:
        parse_exact(text, pattern, culture)
    except ParseError:
        return False
    return True


def _render(value: datetime, include_subsecond: bool) -> str:
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if include_subsecond:
        text += f".{value.microsecond // 1000:03d}"
    return text


def format_civil(
    value: CivilDateTime,
    *,
    use_utc: bool,
    include_subsecond: bool,
    zone: tzinfo | None,
) -> str:
    """Render ``value`` as ``YYYY-MM-DDThh:mm:ss[.fff][Z]``.

    With ``use_utc`` the value is converted first (unless already UTC) and
    suffixed with ``Z``. Sub-seconds are truncated to milliseconds and always
    printed with three digits.

    Raises:
        ConversionError: If the converted instant falls outside the
            representable calendar range; the range error is the cause.

    Example:
        >>> v = CivilDateTime(datetime(2026, 1, 3, 9, 5, 7, 45000), DateTimeKind.UTC)
        >>> format_civil(v, use_utc=True, include_subsecond=True, zone=None)
        '2026-01-03T09:05:07.045Z'
    """
    if not use_utc:
        return _render(value.value, include_subsecond)
    try:
        converted = to_utc(value, zone)
    except (OverflowError, ValueError, OSError) as exc:
        raise ConversionError(_render(value.value, False), CANONICAL_PATTERN, value.kind, exc) from exc
    return _render(converted.value, include_subsecond) + UTC_MARKER


def format_offset(value: OffsetDateTime, *, include_subsecond: bool) -> str:
    """Render ``value`` with a canonical ``±hh:mm`` suffix.

    Example:
        >>> odt = OffsetDateTime(datetime(2026, 1, 3, 14, 30), -timedelta(hours=3, minutes=30), "-3:30")
        >>> format_offset(odt, include_subsecond=False)
        '2026-01-03T14:30:00-03:30'
    """
    minutes = int(value.offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{_render(value.value, include_subsecond)}{sign}{hours:02d}:{minutes:02d}"


def parse_flexible(text: str, candidate_patterns: Sequence[str], culture: Culture) -> FlexibleParseResult:
    """Try each candidate in order and return the first success.

    Order is the only tie-breaker: an input matching several candidates
    resolves to the earliest one. Never raises for bad input.

    Example:
        >>> from datenorm.domain.culture import INVARIANT_CULTURE
        >>> hit = parse_flexible("01/03/2026", ["MM/dd/yyyy", "dd/MM/yyyy"], INVARIANT_CULTURE)
        >>> hit.pattern, hit.value.month, hit.value.day
        ('MM/dd/yyyy', 1, 3)
    """
    attempted: list[str] = []
    for pattern in candidate_patterns:
        attempted.append(pattern)
        try:
            value = parse_exact(text, pattern, culture)
        except ParseError as exc:
            logger.debug("Candidate pattern rejected", extra={"pattern": pattern, "reason": exc.reason})
            continue
        return FlexibleParseResult.matched(value, pattern, tuple(attempted))
    result = FlexibleParseResult.unmatched(text, tuple(attempted))
    logger.debug("No candidate pattern matched", extra={"attempted": len(attempted)})
    return result


__all__ = [
    "DEFAULT_CANDIDATE_PATTERNS",
    "DEFAULT_OFFSET_PATTERN",
    "CANONICAL_PATTERN",
    "DEFAULT_PATTERN",
    "UTC_CONVERSION_BASIS",
    "UTC_MARKER",
    "format_civil",
    "format_offset",
    "parse_exact",
    "parse_flexible",
    "parse_offset",
    "parse_to_utc",
    "to_utc",
    "try_match",
]
