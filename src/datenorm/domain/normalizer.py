"""DateNormalizer: the pure functions bound to one explicit set of settings."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import tzinfo

from . import behaviors
from .culture import INVARIANT_CULTURE, Culture
from .enums import DateTimeKind
from .values import CivilDateTime, FlexibleParseResult, OffsetDateTime


def _given_or(pattern: str | None, default: str) -> str:
    """Only None selects the default; an empty pattern is passed on and rejected."""
    return default if pattern is None else pattern


@dataclass(frozen=True, slots=True)
class DateNormalizer:
    """Parse, convert, validate, and render date-time strings.

    Holds the culture, local zone, and default patterns every operation
    falls back to, so callers configure behaviour once and the pure
    functions in :mod:`datenorm.domain.behaviors` never consult ambient
    state. Instances are immutable and safe to share between threads.

    Attributes:
        culture: Locale data for names, designators and separators.
        zone: Local zone rules for LOCAL/UNSPECIFIED conversion; None means
            the process local zone.
        default_pattern: Pattern used when a single-pattern call omits one.
        default_offset_pattern: Pattern used by :meth:`parse_offset` by default.
        source_kind: Kind assumed by :meth:`parse_to_utc` by default.
        candidate_patterns: Ordered list used by :meth:`parse_flexible`.

    Example:
        >>> normalizer = DateNormalizer()
        >>> normalizer.format(normalizer.parse_exact("2026-01-03T14:30:00"), include_subsecond=True)
        '2026-01-03T14:30:00.000'
        >>> normalizer.try_match("2026-13-01", "yyyy-MM-dd")
        False
    """

    culture: Culture = INVARIANT_CULTURE
    zone: tzinfo | None = None
    default_pattern: str = behaviors.DEFAULT_PATTERN
    default_offset_pattern: str = behaviors.DEFAULT_OFFSET_PATTERN
    source_kind: DateTimeKind = DateTimeKind.LOCAL
    candidate_patterns: tuple[str, ...] = behaviors.DEFAULT_CANDIDATE_PATTERNS

    def parse_exact(self, text: str, pattern: str | None = None, *, culture: Culture | None = None) -> CivilDateTime:
        """Strictly parse ``text``; see :func:`behaviors.parse_exact`."""
        return behaviors.parse_exact(text, _given_or(pattern, self.default_pattern), culture or self.culture)

    def parse_to_utc(
        self,
        text: str,
        pattern: str | None = None,
        source_kind: DateTimeKind | None = None,
        *,
        culture: Culture | None = None,
    ) -> CivilDateTime:
        """Parse ``text`` and convert it to UTC; see :func:`behaviors.parse_to_utc`."""
        return behaviors.parse_to_utc(
            text,
            _given_or(pattern, self.default_pattern),
            source_kind or self.source_kind,
            culture or self.culture,
            self.zone,
        )

    def parse_offset(self, text: str, pattern: str | None = None, *, culture: Culture | None = None) -> OffsetDateTime:
        """Parse an offset-bearing ``text``; see :func:`behaviors.parse_offset`."""
        return behaviors.parse_offset(text, _given_or(pattern, self.default_offset_pattern), culture or self.culture)

    def try_match(self, text: str, pattern: str | None = None, *, culture: Culture | None = None) -> bool:
        return behaviors.try_match(text, _given_or(pattern, self.default_pattern), culture or self.culture)

    def to_utc(self, value: CivilDateTime) -> CivilDateTime:
        return behaviors.to_utc(value, self.zone)

    def format(self, value: CivilDateTime, *, use_utc: bool = False, include_subsecond: bool = False) -> str:
        """Render ``value`` canonically; see :func:`behaviors.format_civil`."""
        return behaviors.format_civil(value, use_utc=use_utc, include_subsecond=include_subsecond, zone=self.zone)

    def format_offset(self, value: OffsetDateTime, *, include_subsecond: bool = False) -> str:
        return behaviors.format_offset(value, include_subsecond=include_subsecond)

    def parse_flexible(
        self,
        text: str,
        candidate_patterns: Sequence[str] | None = None,
        *,
        culture: Culture | None = None,
    ) -> FlexibleParseResult:
        """Try candidates in order; see :func:`behaviors.parse_flexible`.

        An explicitly empty ``candidate_patterns`` is honoured (and fails);
        only None falls back to the configured list.
        """
        candidates = self.candidate_patterns if candidate_patterns is None else candidate_patterns
        return behaviors.parse_flexible(text, candidates, culture or self.culture)


__all__ = ["DateNormalizer"]
