"""Type-safe domain enums for date-time kinds, output formats, and deployment targets."""

from __future__ import annotations

from enum import Enum


class DateTimeKind(str, Enum):
    """Timezone tag attached to a civil date-time value.

    A closed set: every conversion decision is looked up from this tag, never
    guessed from the value itself. Inherits from str so configuration values
    and Click choices compare directly.

    Attributes:
        LOCAL: Wall-clock time in the local zone.
        UTC: Wall-clock time in UTC.
        UNSPECIFIED: No zone information; produced by every exact parse.

    Example:
        >>> DateTimeKind.UNSPECIFIED.value
        'unspecified'
        >>> DateTimeKind("utc") is DateTimeKind.UTC
        True
    """

    LOCAL = "local"
    UTC = "utc"
    UNSPECIFIED = "unspecified"


class OutputFormat(str, Enum):
    """Output format options for CLI rendering.

    Attributes:
        HUMAN: Human-readable text output.
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class DeployTarget(str, Enum):
    """Configuration deployment target layers.

    Attributes:
        APP: System-wide application configuration (requires privileges).
        HOST: System-wide host-specific configuration (requires privileges).
        USER: User-specific configuration (~/.config on Linux).

    Example:
        >>> DeployTarget.USER.value
        'user'
    """

    APP = "app"
    HOST = "host"
    USER = "user"


__all__ = [
    "DateTimeKind",
    "DeployTarget",
    "OutputFormat",
]
