"""DateNormalizer: explicit settings and their per-call overrides."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, replace
from datetime import datetime

import pytest

from datenorm.domain import (
    DEFAULT_CANDIDATE_PATTERNS,
    DEFAULT_OFFSET_PATTERN,
    DEFAULT_PATTERN,
    INVARIANT_CULTURE,
    CivilDateTime,
    ConversionError,
    DateNormalizer,
    DateTimeKind,
    ParseError,
)


@pytest.mark.os_agnostic
def test_default_settings() -> None:
    normalizer = DateNormalizer()

    assert normalizer.culture is INVARIANT_CULTURE
    assert normalizer.zone is None
    assert normalizer.default_pattern == DEFAULT_PATTERN
    assert normalizer.default_offset_pattern == DEFAULT_OFFSET_PATTERN
    assert normalizer.source_kind is DateTimeKind.LOCAL
    assert normalizer.candidate_patterns == DEFAULT_CANDIDATE_PATTERNS


@pytest.mark.os_agnostic
def test_settings_cannot_be_reassigned() -> None:
    with pytest.raises(FrozenInstanceError):
        DateNormalizer().default_pattern = "yyyy"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_parse_exact_uses_default_pattern(utc_normalizer: DateNormalizer) -> None:
    assert utc_normalizer.parse_exact("2026-01-03T14:30:00").value == datetime(2026, 1, 3, 14, 30)


@pytest.mark.os_agnostic
def test_parse_exact_accepts_an_explicit_pattern(utc_normalizer: DateNormalizer) -> None:
    assert utc_normalizer.parse_exact("03.01.2026", "dd.MM.yyyy").value == datetime(2026, 1, 3)


@pytest.mark.os_agnostic
def test_explicit_empty_pattern_is_rejected_not_defaulted() -> None:
    normalizer = DateNormalizer()

    with pytest.raises(ParseError, match="pattern is empty"):
        normalizer.parse_exact("2026-01-03T00:00:00", "")
    with pytest.raises(ParseError, match="pattern is empty"):
        normalizer.parse_offset("2026-01-03T00:00:00+01:00", "")
    with pytest.raises(ConversionError) as exc:
        normalizer.parse_to_utc("2026-01-03T00:00:00", "")
    assert isinstance(exc.value.cause, ParseError)
    assert not normalizer.try_match("2026-01-03T00:00:00", "")


@pytest.mark.os_agnostic
def test_parse_to_utc_uses_configured_zone_and_kind(plus_two_normalizer: DateNormalizer) -> None:
    value = plus_two_normalizer.parse_to_utc("2026-01-03T12:00:00")

    assert value.value == datetime(2026, 1, 3, 10, 0)
    assert value.kind is DateTimeKind.UTC


@pytest.mark.os_agnostic
def test_parse_to_utc_kind_argument_overrides_the_default(plus_two_normalizer: DateNormalizer) -> None:
    value = plus_two_normalizer.parse_to_utc("2026-01-03T12:00:00", source_kind=DateTimeKind.UTC)

    assert value.value == datetime(2026, 1, 3, 12, 0)


@pytest.mark.os_agnostic
def test_configured_utc_source_kind_skips_zone_rules(plus_two_normalizer: DateNormalizer) -> None:
    normalizer = replace(plus_two_normalizer, source_kind=DateTimeKind.UTC)

    assert normalizer.parse_to_utc("2026-01-03T12:00:00").hour == 12


@pytest.mark.os_agnostic
def test_parse_to_utc_raises_conversion_error(utc_normalizer: DateNormalizer) -> None:
    with pytest.raises(ConversionError) as exc:
        utc_normalizer.parse_to_utc("yesterday")

    assert isinstance(exc.value.cause, ParseError)


@pytest.mark.os_agnostic
def test_parse_offset_uses_default_offset_pattern(utc_normalizer: DateNormalizer) -> None:
    assert utc_normalizer.parse_offset("2026-01-03T14:30:00+05:00").utc_instant.hour == 9


@pytest.mark.os_agnostic
def test_try_match_uses_default_pattern(utc_normalizer: DateNormalizer) -> None:
    assert utc_normalizer.try_match("2026-01-03T14:30:00")
    assert not utc_normalizer.try_match("2026-01-03")


@pytest.mark.os_agnostic
def test_format_and_format_offset(plus_two_normalizer: DateNormalizer) -> None:
    value = plus_two_normalizer.parse_exact("2026-01-03T12:00:00")
    offset_value = plus_two_normalizer.parse_offset("2026-01-03T12:00:00-01:00")

    assert plus_two_normalizer.format(value) == "2026-01-03T12:00:00"
    assert plus_two_normalizer.format(value, use_utc=True, include_subsecond=True) == "2026-01-03T10:00:00.000Z"
    assert plus_two_normalizer.format_offset(offset_value) == "2026-01-03T12:00:00-01:00"


@pytest.mark.os_agnostic
def test_format_to_utc_at_the_calendar_edge_raises_conversion_error(plus_two_normalizer: DateNormalizer) -> None:
    earliest = CivilDateTime(datetime(1, 1, 1), DateTimeKind.UNSPECIFIED)

    with pytest.raises(ConversionError) as exc:
        plus_two_normalizer.format(earliest, use_utc=True)

    assert isinstance(exc.value.cause, OverflowError)
    assert exc.value.text == "0001-01-01T00:00:00"
    assert plus_two_normalizer.format(earliest) == "0001-01-01T00:00:00"


@pytest.mark.os_agnostic
def test_to_utc_uses_configured_zone(plus_two_normalizer: DateNormalizer) -> None:
    value = plus_two_normalizer.parse_exact("2026-01-03T00:30:00")

    assert plus_two_normalizer.to_utc(value).value == datetime(2026, 1, 2, 22, 30)


@pytest.mark.os_agnostic
def test_parse_flexible_falls_back_to_configured_candidates() -> None:
    normalizer = DateNormalizer(candidate_patterns=("dd/MM/yyyy",))

    result = normalizer.parse_flexible("01/03/2026")

    assert result.pattern == "dd/MM/yyyy"
    assert result.value is not None
    assert result.value.month == 3


@pytest.mark.os_agnostic
def test_parse_flexible_honours_an_explicit_empty_list(utc_normalizer: DateNormalizer) -> None:
    result = utc_normalizer.parse_flexible("2026-01-03", [])

    assert not result.success
    assert result.attempted == ()


@pytest.mark.os_agnostic
def test_culture_can_be_overridden_per_call(utc_normalizer: DateNormalizer) -> None:
    dotted = replace(INVARIANT_CULTURE, name="dotted", date_separator=".")

    assert utc_normalizer.parse_exact("03.01.2026", "dd/MM/yyyy", culture=dotted).day == 3
    assert not utc_normalizer.try_match("03.01.2026", "dd/MM/yyyy")
