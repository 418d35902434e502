"""Public package surface exposing the date normalizer, metadata, and configuration.

Routes imports through the architectural layers:
- Domain exports: DateNormalizer, value types, errors, pattern defaults
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config, load_normalizer

# Domain exports
from .domain import (
    DEFAULT_CANDIDATE_PATTERNS,
    DEFAULT_OFFSET_PATTERN,
    DEFAULT_PATTERN,
    INVARIANT_CULTURE,
    CivilDateTime,
    ConfigurationError,
    ConversionError,
    Culture,
    DateNormalizer,
    DateTimeKind,
    FlexibleParseResult,
    OffsetDateTime,
    ParseError,
)

__all__ = [
    "DEFAULT_CANDIDATE_PATTERNS",
    "DEFAULT_OFFSET_PATTERN",
    "DEFAULT_PATTERN",
    "INVARIANT_CULTURE",
    "CivilDateTime",
    "ConfigurationError",
    "ConversionError",
    "Culture",
    "DateNormalizer",
    "DateTimeKind",
    "FlexibleParseResult",
    "OffsetDateTime",
    "ParseError",
    "get_config",
    "load_normalizer",
    "print_info",
]
