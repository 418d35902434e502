"""The ``[datenorm]`` settings model, zone resolution and normalizer loading."""

from __future__ import annotations

from datetime import timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
import rtoml
from lib_layered_config import Config
from pydantic import ValidationError

from datenorm.adapters.config.loader import get_default_config_path
from datenorm.adapters.config.settings import (
    NormalizerConfig,
    load_normalizer,
    load_normalizer_config,
    load_normalizer_config_from_dict,
    load_normalizer_from_dict,
    resolve_zone,
)
from datenorm.domain import DateTimeKind
from datenorm.domain.behaviors import DEFAULT_CANDIDATE_PATTERNS, DEFAULT_OFFSET_PATTERN, DEFAULT_PATTERN
from datenorm.domain.errors import ConfigurationError

# ======================== resolve_zone ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", ["", "   "])
def test_blank_zone_means_process_local(name: str) -> None:
    assert resolve_zone(name) is None


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", ["UTC", "utc", "Z"])
def test_utc_aliases_resolve_to_utc(name: str) -> None:
    assert resolve_zone(name) is timezone.utc


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("+05:30", timedelta(hours=5, minutes=30)),
        ("-0800", -timedelta(hours=8)),
        ("+14:00", timedelta(hours=14)),
    ],
)
def test_fixed_offsets_resolve_to_fixed_zones(name: str, offset: timedelta) -> None:
    assert resolve_zone(name) == timezone(offset)


@pytest.mark.os_agnostic
def test_iana_names_resolve_through_zoneinfo() -> None:
    assert resolve_zone("Europe/Vienna") == ZoneInfo("Europe/Vienna")


@pytest.mark.os_agnostic
@pytest.mark.parametrize("name", ["+15:00", "+05:60", "Mars/Olympus", "not a zone", "America", "Europe/" + "x" * 300])
def test_bad_zone_names_raise(name: str) -> None:
    with pytest.raises(ValueError):
        resolve_zone(name)


# ======================== NormalizerConfig defaults ========================


@pytest.mark.os_agnostic
def test_defaults_match_the_domain_defaults() -> None:
    cfg = NormalizerConfig()

    assert cfg.culture == "invariant"
    assert cfg.default_pattern == DEFAULT_PATTERN
    assert cfg.default_offset_pattern == DEFAULT_OFFSET_PATTERN
    assert cfg.source_kind is DateTimeKind.LOCAL
    assert cfg.local_zone == ""
    assert cfg.use_utc is False
    assert cfg.include_subsecond is False
    assert cfg.candidate_patterns == DEFAULT_CANDIDATE_PATTERNS


@pytest.mark.os_agnostic
def test_bundled_defaultconfig_agrees_with_the_model_defaults() -> None:
    section = rtoml.load(get_default_config_path())["datenorm"]

    cfg = NormalizerConfig.model_validate(section)

    assert cfg == NormalizerConfig()


@pytest.mark.os_agnostic
def test_settings_are_frozen() -> None:
    cfg = NormalizerConfig()

    with pytest.raises(ValidationError):
        cfg.use_utc = True  # type: ignore[misc]


# ======================== NormalizerConfig validation ========================


@pytest.mark.os_agnostic
def test_kind_is_case_insensitive() -> None:
    assert NormalizerConfig(source_kind="  UNSPECIFIED ").source_kind is DateTimeKind.UNSPECIFIED  # type: ignore[arg-type]


@pytest.mark.os_agnostic
def test_single_candidate_string_becomes_a_list() -> None:
    cfg = NormalizerConfig(candidate_patterns="dd.MM.yyyy")  # type: ignore[arg-type]

    assert cfg.candidate_patterns == ("dd.MM.yyyy",)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("section", "fragment"),
    [
        ({"colour": "blue"}, "colour"),
        ({"source_kind": "sideways"}, "source_kind"),
        ({"culture": "klingon"}, "culture"),
        ({"local_zone": "Mars/Olympus"}, "local_zone"),
        ({"local_zone": "America"}, "local_zone"),
        ({"local_zone": "Zone/" + "x" * 300}, "local_zone"),
        ({"default_pattern": "HHH"}, "invalid pattern"),
        ({"candidate_patterns": []}, "at least one pattern"),
        ({"candidate_patterns": ""}, "at least one pattern"),
        ({"default_offset_pattern": "yyyy-MM-dd"}, "no offset token"),
    ],
)
def test_invalid_sections_raise_configuration_error(section: dict[str, object], fragment: str) -> None:
    with pytest.raises(ConfigurationError, match=r"Invalid \[datenorm\] configuration") as excinfo:
        load_normalizer_config_from_dict({"datenorm": section})

    assert fragment in str(excinfo.value)


@pytest.mark.os_agnostic
def test_missing_section_uses_defaults() -> None:
    assert load_normalizer_config_from_dict({}) == NormalizerConfig()


@pytest.mark.os_agnostic
def test_non_mapping_section_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        load_normalizer_config_from_dict({"datenorm": "yes please"})


# ======================== normalizer building ========================


@pytest.mark.os_agnostic
def test_to_normalizer_carries_every_setting() -> None:
    cfg = NormalizerConfig(
        default_pattern="dd.MM.yyyy HH:mm",
        source_kind=DateTimeKind.UTC,
        local_zone="+02:00",
        candidate_patterns=("dd.MM.yyyy",),
    )

    normalizer = cfg.to_normalizer()

    assert normalizer.default_pattern == "dd.MM.yyyy HH:mm"
    assert normalizer.source_kind is DateTimeKind.UTC
    assert normalizer.zone == timezone(timedelta(hours=2))
    assert normalizer.candidate_patterns == ("dd.MM.yyyy",)
    assert normalizer.culture.name == "invariant"


@pytest.mark.os_agnostic
def test_load_normalizer_from_dict_builds_a_working_normalizer() -> None:
    normalizer = load_normalizer_from_dict({"datenorm": {"local_zone": "UTC"}})

    assert normalizer.try_match("2026-01-03T14:30:00")


@pytest.mark.os_agnostic
def test_load_normalizer_reads_layered_config() -> None:
    config = Config({"datenorm": {"local_zone": "UTC", "use_utc": True}}, {})

    assert load_normalizer_config(config).use_utc is True
    assert load_normalizer(config).zone is timezone.utc


@pytest.mark.os_agnostic
def test_load_normalizer_surfaces_configuration_errors() -> None:
    with pytest.raises(ConfigurationError):
        load_normalizer(Config({"datenorm": {"culture": "klingon"}}, {}))
