"""Domain layer - pure date parsing and normalization with no I/O.

Contents:
    * :mod:`.behaviors` - Pure parse/convert/format functions
    * :mod:`.normalizer` - DateNormalizer bundling explicit settings
    * :mod:`.patterns` - Format-pattern compiler
    * :mod:`.culture` - Culture values (invariant culture)
    * :mod:`.values` - CivilDateTime, OffsetDateTime, FlexibleParseResult
    * :mod:`.enums` - DateTimeKind, OutputFormat, DeployTarget
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_CANDIDATE_PATTERNS,
    DEFAULT_OFFSET_PATTERN,
    DEFAULT_PATTERN,
    UTC_CONVERSION_BASIS,
    format_civil,
    format_offset,
    parse_exact,
    parse_flexible,
    parse_offset,
    parse_to_utc,
    to_utc,
    try_match,
)
from .culture import INVARIANT_CULTURE, Culture, get_culture
from .enums import DateTimeKind, DeployTarget, OutputFormat
from .errors import ConfigurationError, ConversionError, ParseError
from .normalizer import DateNormalizer
from .values import CivilDateTime, FlexibleParseResult, OffsetDateTime

__all__ = [
    # Behaviors
    "DEFAULT_CANDIDATE_PATTERNS",
    "DEFAULT_OFFSET_PATTERN",
    "DEFAULT_PATTERN",
    "UTC_CONVERSION_BASIS",
    "format_civil",
    "format_offset",
    "parse_exact",
    "parse_flexible",
    "parse_offset",
    "parse_to_utc",
    "to_utc",
    "try_match",
    # Normalizer
    "DateNormalizer",
    # Culture
    "INVARIANT_CULTURE",
    "Culture",
    "get_culture",
    # Values
    "CivilDateTime",
    "FlexibleParseResult",
    "OffsetDateTime",
    # Enums
    "DateTimeKind",
    "DeployTarget",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "ConversionError",
    "ParseError",
]
