"""Culture values: the explicit locale data consulted while parsing.

A :class:`Culture` carries every locale-dependent piece of the pattern
language (month and day names, AM/PM designators, separators). It is passed
explicitly to each parse so results never depend on process locale state.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Culture:
    """Immutable locale data for the pattern language.

    Name and designator matching is case-insensitive; separators are
    matched literally.

    Attributes:
        name: Registry key for the culture.
        month_names: Twelve full month names, January first.
        abbreviated_month_names: Twelve abbreviated month names.
        day_names: Seven full day names, Monday first.
        abbreviated_day_names: Seven abbreviated day names, Monday first.
        am_designator: Morning designator matched by ``tt``.
        pm_designator: Afternoon designator matched by ``tt``.
        date_separator: Text substituted for ``/`` in patterns.
        time_separator: Text substituted for ``:`` in patterns.
    """

    name: str
    month_names: tuple[str, ...]
    abbreviated_month_names: tuple[str, ...]
    day_names: tuple[str, ...]
    abbreviated_day_names: tuple[str, ...]
    am_designator: str = "AM"
    pm_designator: str = "PM"
    date_separator: str = "/"
    time_separator: str = ":"

    def __post_init__(self) -> None:
        if len(self.month_names) != 12 or len(self.abbreviated_month_names) != 12:
            raise ValueError(f"Culture {self.name!r} must define 12 month names")
        if len(self.day_names) != 7 or len(self.abbreviated_day_names) != 7:
            raise ValueError(f"Culture {self.name!r} must define 7 day names")


INVARIANT_CULTURE = Culture(
    name="invariant",
    month_names=(
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
    abbreviated_month_names=("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    day_names=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    abbreviated_day_names=("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
)

_REGISTRY: dict[str, Culture] = {INVARIANT_CULTURE.name: INVARIANT_CULTURE}


def get_culture(name: str) -> Culture:
    """Look up a registered culture by name.

    Args:
        name: Culture name, matched case-insensitively. An empty string
            selects the invariant culture.

    Returns:
        The registered Culture.

    Raises:
        ConfigurationError: If no culture is registered under ``name``.

    Example:
        >>> get_culture("Invariant") is INVARIANT_CULTURE
        True
        >>> get_culture("xx-XX")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        datenorm.domain.errors.ConfigurationError: Unknown culture 'xx-XX'
    """
    key = name.strip().lower() or INVARIANT_CULTURE.name
    try:
        return _REGISTRY[key]
    except KeyError as exc:
        known = ", ".join(sorted(_REGISTRY))
        raise ConfigurationError(f"Unknown culture {name!r} (known: {known})") from exc


__all__ = [
    "INVARIANT_CULTURE",
    "Culture",
    "get_culture",
]
