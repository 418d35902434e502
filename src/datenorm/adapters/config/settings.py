"""Normalizer settings model and loader.

Validates the ``[datenorm]`` configuration section with a frozen Pydantic
model and turns it into a ready-to-use :class:`DateNormalizer`.

Contents:
    * :class:`NormalizerConfig` - Validated, immutable ``[datenorm]`` settings.
    * :func:`resolve_zone` - Zone name to ``tzinfo`` (or None for the process zone).
    * :func:`load_normalizer_from_dict` / :func:`load_normalizer` - Boundary loaders.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import timedelta, timezone, tzinfo
from typing import Any, cast
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from datenorm.domain.behaviors import DEFAULT_CANDIDATE_PATTERNS, DEFAULT_OFFSET_PATTERN, DEFAULT_PATTERN
from datenorm.domain.culture import get_culture
from datenorm.domain.enums import DateTimeKind
from datenorm.domain.errors import ConfigurationError
from datenorm.domain.normalizer import DateNormalizer
from datenorm.domain.patterns import compile_pattern

_FIXED_OFFSET = re.compile(r"^(?P<sign>[+-])(?P<hours>[0-9]{2}):?(?P<minutes>[0-9]{2})$")

SECTION = "datenorm"


def resolve_zone(name: str) -> tzinfo | None:
    """Translate a configured zone name into ``tzinfo``.

    Args:
        name: ``""`` for the process local zone, ``"UTC"``, a fixed offset
            (``"+05:30"``, ``"-0800"``), or an IANA zone name.

    Returns:
        The zone, or None when the process local zone should be used.

    Raises:
        ValueError: If the name is not a fixed offset and no such IANA zone exists.

    Examples:
        >>> resolve_zone("") is None
        True
        >>> resolve_zone("utc")
        datetime.timezone.utc
        >>> resolve_zone("+05:30")
        datetime.timezone(datetime.timedelta(seconds=19800))
    """
    cleaned = name.strip()
    if not cleaned:
        return None
    if cleaned.upper() in ("UTC", "Z"):
        return timezone.utc
    match = _FIXED_OFFSET.fullmatch(cleaned)
    if match is not None:
        offset = timedelta(hours=int(match["hours"]), minutes=int(match["minutes"]))
        if int(match["minutes"]) >= 60 or offset > timedelta(hours=14):
            raise ValueError(f"fixed offset out of range: {cleaned!r}")
        return timezone(-offset if match["sign"] == "-" else offset)
    try:
        return ZoneInfo(cleaned)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ValueError(f"unknown time zone: {cleaned!r}") from exc


class NormalizerConfig(BaseModel):
    """Validated, immutable ``[datenorm]`` settings.

    Unknown keys are rejected so typos surface instead of silently falling
    back to defaults.

    Example:
        >>> cfg = NormalizerConfig(source_kind="utc", local_zone="UTC")
        >>> cfg.source_kind
        <DateTimeKind.UTC: 'utc'>
        >>> cfg.to_normalizer().default_pattern
        'yyyy-MM-ddTHH:mm:ss'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    culture: str = "invariant"
    default_pattern: str = DEFAULT_PATTERN
    default_offset_pattern: str = DEFAULT_OFFSET_PATTERN
    source_kind: DateTimeKind = DateTimeKind.LOCAL
    local_zone: str = ""
    use_utc: bool = False
    include_subsecond: bool = False
    candidate_patterns: tuple[str, ...] = Field(default=DEFAULT_CANDIDATE_PATTERNS)

    @field_validator("candidate_patterns", mode="before")
    @classmethod
    def _coerce_string_to_list(cls, v: Any) -> Any:
        """Accept a single pattern string where a list is expected.

        Environment variables and ``--set`` overrides often provide one string.

        Examples:
            >>> NormalizerConfig._coerce_string_to_list("yyyy-MM-dd")
            ['yyyy-MM-dd']
        """
        if isinstance(v, str):
            return [v] if v.strip() else []
        return v

    @field_validator("source_kind", mode="before")
    @classmethod
    def _lowercase_kind(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("culture")
    @classmethod
    def _known_culture(cls, v: str) -> str:
        try:
            get_culture(v)
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from exc
        return v

    @field_validator("local_zone")
    @classmethod
    def _known_zone(cls, v: str) -> str:
        resolve_zone(v)
        return v

    @model_validator(mode="after")
    def _validate_patterns(self) -> NormalizerConfig:
        """Compile every configured pattern once so mistakes fail at load time."""
        if not self.candidate_patterns:
            raise ValueError("candidate_patterns must list at least one pattern")
        culture = get_culture(self.culture)
        patterns = (self.default_pattern, self.default_offset_pattern, *self.candidate_patterns)
        for pattern in patterns:
            try:
                compile_pattern(pattern, culture)
            except ValueError as exc:
                raise ValueError(f"invalid pattern {pattern!r}: {exc}") from exc
        if not compile_pattern(self.default_offset_pattern, culture).has_offset:
            raise ValueError(f"default_offset_pattern {self.default_offset_pattern!r} has no offset token")
        return self

    def to_normalizer(self) -> DateNormalizer:
        """Build the DateNormalizer these settings describe."""
        return DateNormalizer(
            culture=get_culture(self.culture),
            zone=resolve_zone(self.local_zone),
            default_pattern=self.default_pattern,
            default_offset_pattern=self.default_offset_pattern,
            source_kind=self.source_kind,
            candidate_patterns=self.candidate_patterns,
        )


def load_normalizer_config_from_dict(config_dict: Mapping[str, Any]) -> NormalizerConfig:
    """Validate the ``[datenorm]`` section of a configuration dictionary.

    Args:
        config_dict: Mapping with an optional ``datenorm`` section.

    Returns:
        Validated settings; defaults fill in missing keys.

    Raises:
        ConfigurationError: If the section fails validation.

    Example:
        >>> load_normalizer_config_from_dict({"datenorm": {"use_utc": True}}).use_utc
        True
        >>> load_normalizer_config_from_dict({"datenorm": {"source_kind": "sideways"}})  # doctest: +ELLIPSIS
        Traceback (most recent call last):
        ...
        datenorm.domain.errors.ConfigurationError: Invalid [datenorm] configuration: ...
    """
    raw: Any = config_dict.get(SECTION, {})
    try:
        if isinstance(raw, Mapping):
            return NormalizerConfig.model_validate(dict(cast(Mapping[str, Any], raw)))
        return NormalizerConfig.model_validate(raw or {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [{SECTION}] configuration: {exc}") from exc


def load_normalizer_from_dict(config_dict: Mapping[str, Any]) -> DateNormalizer:
    """Build a DateNormalizer from a configuration dictionary."""
    return load_normalizer_config_from_dict(config_dict).to_normalizer()


def load_normalizer_config(config: Config) -> NormalizerConfig:
    """Validate the ``[datenorm]`` section of loaded layered configuration.

    Raises:
        ConfigurationError: If the section is invalid.
    """
    return load_normalizer_config_from_dict(config.as_dict())


def load_normalizer(config: Config) -> DateNormalizer:
    """Build a DateNormalizer from loaded layered configuration.

    Raises:
        ConfigurationError: If the ``[datenorm]`` section is invalid.
    """
    return load_normalizer_config(config).to_normalizer()


__all__ = [
    "NormalizerConfig",
    "SECTION",
    "load_normalizer",
    "load_normalizer_config",
    "load_normalizer_config_from_dict",
    "load_normalizer_from_dict",
    "resolve_zone",
]
