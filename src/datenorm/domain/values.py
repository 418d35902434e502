"""Immutable value types produced by the date normalizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from .enums import DateTimeKind


@dataclass(frozen=True, slots=True)
class CivilDateTime:
    """A calendar date-time tagged with its :class:`DateTimeKind`.

    The wrapped ``value`` is always a naive :class:`datetime`; zone meaning
    comes from ``kind`` alone.

    Example:
        >>> v = CivilDateTime(datetime(2026, 1, 3, 14, 30, 0, 45000), DateTimeKind.UNSPECIFIED)
        >>> (v.year, v.month, v.day, v.millisecond)
        (2026, 1, 3, 45)
        >>> v.with_kind(DateTimeKind.UTC).kind
        <DateTimeKind.UTC: 'utc'>
    """

    value: datetime
    kind: DateTimeKind = DateTimeKind.UNSPECIFIED

    def __post_init__(self) -> None:
        if self.value.tzinfo is not None:
            raise ValueError("CivilDateTime wraps naive datetimes; use OffsetDateTime for offset-aware values")

    @property
    def year(self) -> int:
        return self.value.year

    @property
    def month(self) -> int:
        return self.value.month

    @property
    def day(self) -> int:
        return self.value.day

    @property
    def hour(self) -> int:
        return self.value.hour

    @property
    def minute(self) -> int:
        return self.value.minute

    @property
    def second(self) -> int:
        return self.value.second

    @property
    def microsecond(self) -> int:
        return self.value.microsecond

    @property
    def millisecond(self) -> int:
        return self.value.microsecond // 1000

    def with_kind(self, kind: DateTimeKind) -> CivilDateTime:
        """Return the same wall-clock value under a different kind tag."""
        return CivilDateTime(self.value, kind)


@dataclass(frozen=True, slots=True)
class OffsetDateTime:
    """A wall-clock value paired with the fixed UTC offset it was written in.

    ``offset_text`` keeps the offset exactly as it appeared in the input
    (``+05:30``, ``-3``, ``Z``); ``offset`` is its numeric form. Neither is
    touched when the UTC instant is derived.

    Example:
        >>> odt = OffsetDateTime(datetime(2026, 1, 3, 14, 30), timedelta(hours=5), "+05:00")
        >>> odt.utc_instant.hour
        9
        >>> odt.offset_text
        '+05:00'
    """

    value: datetime
    offset: timedelta
    offset_text: str

    def __post_init__(self) -> None:
        if self.value.tzinfo is not None:
            raise ValueError("OffsetDateTime wraps a naive wall-clock value plus an explicit offset")

    @property
    def local_value(self) -> CivilDateTime:
        """The wall-clock value as written, without zone meaning."""
        return CivilDateTime(self.value, DateTimeKind.UNSPECIFIED)

    @property
    def utc_instant(self) -> CivilDateTime:
        """The same instant expressed in UTC (``value - offset``)."""
        return CivilDateTime(self.value - self.offset, DateTimeKind.UTC)

    def to_aware(self) -> datetime:
        """Return an aware :class:`datetime` carrying the fixed offset."""
        return self.value.replace(tzinfo=timezone(self.offset))


def _no_patterns() -> tuple[str, ...]:
    return ()


@dataclass(frozen=True, slots=True)
class FlexibleParseResult:
    """Outcome of trying an ordered list of candidate patterns.

    Failure is data rather than an exception: ``success`` is False,
    ``value`` and ``pattern`` are None, and ``message`` explains what was
    tried. Truthiness mirrors ``success``.

    Example:
        >>> miss = FlexibleParseResult.unmatched("x", ("yyyy",))
        >>> bool(miss), miss.message
        (False, "Could not parse 'x' with any of 1 candidate pattern(s): 'yyyy'")
    """

    success: bool
    value: CivilDateTime | None = None
    pattern: str | None = None
    attempted: tuple[str, ...] = field(default_factory=_no_patterns)
    message: str = ""

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def matched(cls, value: CivilDateTime, pattern: str, attempted: tuple[str, ...]) -> FlexibleParseResult:
        """Build a success result for ``pattern``."""
        return cls(success=True, value=value, pattern=pattern, attempted=attempted, message=f"Matched pattern {pattern!r}")

    @classmethod
    def unmatched(cls, text: str, attempted: tuple[str, ...]) -> FlexibleParseResult:
        """Build a failure result naming ``text`` and every pattern tried."""
        tried = ", ".join(repr(p) for p in attempted) or "<none>"
        message = f"Could not parse {text!r} with any of {len(attempted)} candidate pattern(s): {tried}"
        return cls(success=False, attempted=attempted, message=message)


__all__ = [
    "CivilDateTime",
    "FlexibleParseResult",
    "OffsetDateTime",
]
