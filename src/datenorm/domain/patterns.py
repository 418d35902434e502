"""Format-pattern compiler.

Turns a custom date/time format pattern (``yyyy-MM-dd``, ``dd MMM yyyy``,
``yyyy-MM-ddTHH:mm:ss.fffzzz``) into an anchored regular expression plus the
logic that assembles the captured fields into a :class:`datetime`.

Matching is strict: the whole input must be consumed, digits are ASCII only,
and whitespace is literal. Month/day names, AM/PM designators and the ``Z``
accepted by ``K`` match case-insensitively; every other literal is exact.

Contents:
    * :func:`compile_pattern` - Cached compilation keyed by (pattern, culture).
    * :class:`CompiledPattern` - Matcher returning :class:`ParsedFields`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from functools import lru_cache

from .culture import Culture

#: Two-digit years at or below this value land in the 2000s, the rest in the 1900s.
TWO_DIGIT_YEAR_PIVOT = 49

#: Largest offset accepted from ``z``/``zz``/``zzz``/``K`` tokens.
MAX_OFFSET = timedelta(hours=14)

_TOKEN_LETTERS = frozenset("yMdHhmsfFtzK")
_DIGIT_LIMITED = {"H": "hour24", "h": "hour12", "m": "minute", "s": "second"}


@dataclass(frozen=True, slots=True)
class ParsedFields:
    """Result of a successful match: the wall-clock value and any offset."""

    value: datetime
    offset: timedelta | None = None
    offset_text: str | None = None


@dataclass(frozen=True, slots=True)
class _Token:
    field: str
    width: int
    regex: str


def _digits(width: int, *, exact: bool = True) -> str:
    if exact:
        return f"[0-9]{{{width}}}"
    return f"[0-9]{{1,{width}}}"


def _names(names: tuple[str, ...]) -> str:
    ordered = sorted(names, key=len, reverse=True)
    return "(?i:" + "|".join(re.escape(name) for name in ordered) + ")"


def _year_token(width: int) -> _Token:
    if width == 1:
        return _Token("year", 1, _digits(2, exact=False))
    if width == 2:
        return _Token("year", 2, _digits(2))
    if width == 3:
        return _Token("year", 3, "[0-9]{3,4}")
    return _Token("year", width, _digits(width))


def _month_token(width: int, culture: Culture) -> _Token:
    if width >= 4:
        return _Token("month", width, _names(culture.month_names))
    if width == 3:
        return _Token("month", 3, _names(culture.abbreviated_month_names))
    return _Token("month", width, _digits(2, exact=width == 2))


def _day_token(width: int, culture: Culture) -> _Token:
    if width >= 4:
        return _Token("weekday", width, _names(culture.day_names))
    if width == 3:
        return _Token("weekday", 3, _names(culture.abbreviated_day_names))
    return _Token("day", width, _digits(2, exact=width == 2))


def _designator_token(width: int, culture: Culture) -> _Token:
    if width == 1:
        choices = (culture.am_designator[:1], culture.pm_designator[:1])
    else:
        choices = (culture.am_designator, culture.pm_designator)
    return _Token("designator", width, _names(choices))


def _offset_token(letter: str, width: int) -> _Token:
    if letter == "K":
        if width > 1:
            raise ValueError("'K' may only appear once")
        return _Token("offset", 0, "(?:(?i:z)|[+-][0-9]{2}:[0-9]{2})?")
    if width == 1:
        return _Token("offset", 1, "[+-][0-9]{1,2}")
    if width == 2:
        return _Token("offset", 2, "[+-][0-9]{2}")
    return _Token("offset", 3, "[+-][0-9]{2}:[0-9]{2}")


def _build_token(letter: str, width: int, culture: Culture) -> _Token:
    if letter == "y":
        return _year_token(width)
    if letter == "M":
        return _month_token(width, culture)
    if letter == "d":
        return _day_token(width, culture)
    if letter in _DIGIT_LIMITED:
        if width > 2:
            raise ValueError(f"too many {letter!r} characters in a row")
        return _Token(_DIGIT_LIMITED[letter], width, _digits(2, exact=width == 2))
    if letter in "fF":
        if width > 7:
            raise ValueError(f"at most 7 {letter!r} characters are allowed")
        return _Token("fraction", width, _digits(width, exact=letter == "f"))
    if letter == "t":
        return _designator_token(width, culture)
    return _offset_token(letter, width)


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A pattern translated to an anchored regex plus field metadata.

    Attributes:
        pattern: The source pattern text.
        culture: Locale data the pattern was compiled against.
        regex: Compiled expression with one named group per field.
        widths: Token width per field name (``year`` → 2 for ``yy``).
    """

    pattern: str
    culture: Culture
    regex: re.Pattern[str]
    widths: dict[str, int]

    @property
    def has_offset(self) -> bool:
        return "offset" in self.widths

    def parse(self, text: str) -> ParsedFields:
        """Match ``text`` and assemble its fields.

        Raises:
            ValueError: With a short reason when the text does not match the
                layout or names an impossible date.
        """
        match = self.regex.fullmatch(text)
        if match is None:
            raise ValueError("text does not match the pattern layout")
        groups = {name: value for name, value in match.groupdict().items() if value is not None}
        return _assemble(groups, self.widths, self.culture)


def _tokenize(pattern: str, culture: Culture) -> list[_Token | str]:
    parts: list[_Token | str] = []
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch in ("'", '"'):
            end = pattern.find(ch, i + 1)
            if end == -1:
                raise ValueError(f"unterminated quoted literal starting at position {i}")
            parts.append(pattern[i + 1 : end])
            i = end + 1
        elif ch == "\\":
            if i + 1 >= len(pattern):
                raise ValueError("pattern ends with an escape character")
            parts.append(pattern[i + 1])
            i += 2
        elif ch == "%":
            if i + 1 >= len(pattern) or pattern[i + 1] not in _TOKEN_LETTERS:
                raise ValueError("'%' must be followed by a format letter")
            parts.append(_build_token(pattern[i + 1], 1, culture))
            i += 2
        elif ch == "/":
            parts.append(culture.date_separator)
            i += 1
        elif ch == ":":
            parts.append(culture.time_separator)
            i += 1
        elif ch in _TOKEN_LETTERS:
            width = 1
            while i + width < len(pattern) and pattern[i + width] == ch:
                width += 1
            parts.append(_build_token(ch, width, culture))
            i += width
        else:
            parts.append(ch)
            i += 1
    return parts


def _join(parts: list[_Token | str]) -> tuple[str, dict[str, int]]:
    widths: dict[str, int] = {}
    pieces: list[str] = []
    for index, part in enumerate(parts):
        if isinstance(part, str):
            optional_dot = part == "." and _is_optional_fraction(parts, index + 1)
            if not optional_dot:
                pieces.append(re.escape(part))
            continue
        field = part.field
        if field in widths or (field.startswith("hour") and ("hour24" in widths or "hour12" in widths)):
            raise ValueError(f"the {field.replace('24', '').replace('12', '')} field appears more than once")
        widths[field] = part.width
        group = f"(?P<{field}>{part.regex})"
        if field == "fraction" and part.regex.startswith("[0-9]{1,"):
            dot = r"\." if index > 0 and parts[index - 1] == "." else ""
            group = f"(?:{dot}{group})?"
        pieces.append(group)
    return "".join(pieces), widths


def _is_optional_fraction(parts: list[_Token | str], index: int) -> bool:
    if index >= len(parts):
        return False
    nxt = parts[index]
    return isinstance(nxt, _Token) and nxt.field == "fraction" and nxt.regex.startswith("[0-9]{1,")


@lru_cache(maxsize=256)
def compile_pattern(pattern: str, culture: Culture) -> CompiledPattern:
    """Compile ``pattern`` for ``culture``.

    Args:
        pattern: Custom format pattern.
        culture: Locale data for names, designators and separators.

    Returns:
        The compiled, reusable matcher.

    Raises:
        ValueError: If the pattern is empty, repeats a field, has an
            unterminated quote, or uses a token with an unsupported width.

    Example:
        >>> from datenorm.domain.culture import INVARIANT_CULTURE
        >>> compiled = compile_pattern("yyyy-MM-dd", INVARIANT_CULTURE)
        >>> compiled.parse("2026-01-03").value
        datetime.datetime(2026, 1, 3, 0, 0)
        >>> compile_pattern("yyyy-MM-ddTHH:mm:sszzz", INVARIANT_CULTURE).has_offset
        True
    """
    if not pattern:
        raise ValueError("pattern is empty")
    regex, widths = _join(_tokenize(pattern, culture))
    if not widths:
        raise ValueError("pattern contains no date or time fields")
    return CompiledPattern(pattern=pattern, culture=culture, regex=re.compile(regex), widths=widths)


def _index_of(name: str, names: tuple[str, ...]) -> int:
    lowered = name.lower()
    for index, candidate in enumerate(names):
        if candidate.lower() == lowered:
            return index
    raise ValueError(f"unrecognised name {name!r}")


def _resolve_year(raw: str, width: int) -> int:
    year = int(raw)
    if width <= 2:
        return 2000 + year if year <= TWO_DIGIT_YEAR_PIVOT else 1900 + year
    return year


def _resolve_month(raw: str, width: int, culture: Culture) -> int:
    if width >= 4:
        return _index_of(raw, culture.month_names) + 1
    if width == 3:
        return _index_of(raw, culture.abbreviated_month_names) + 1
    return int(raw)


def _resolve_hour(groups: dict[str, str], culture: Culture) -> int:
    designator = groups.get("designator")
    is_pm = designator is not None and designator.lower() in (
        culture.pm_designator.lower(),
        culture.pm_designator[:1].lower(),
    )
    if "hour12" in groups:
        hour = int(groups["hour12"])
        if not 1 <= hour <= 12:
            raise ValueError("hour must be in 1..12 on a 12-hour clock")
        if designator is None:
            return hour
        return hour % 12 + (12 if is_pm else 0)
    if "hour24" not in groups:
        return 0
    hour = int(groups["hour24"])
    if designator is not None and (hour >= 12) != is_pm:
        raise ValueError(f"designator {designator!r} contradicts hour {hour}")
    return hour


def _resolve_offset(raw: str) -> timedelta:
    if raw.upper() == "Z":
        return timedelta(0)
    sign = -1 if raw[0] == "-" else 1
    hours_text, _, minutes_text = raw[1:].partition(":")
    hours, minutes = int(hours_text), int(minutes_text or "0")
    if minutes >= 60:
        raise ValueError("offset minutes must be below 60")
    offset = timedelta(hours=hours, minutes=minutes)
    if offset > MAX_OFFSET:
        raise ValueError("offset exceeds 14 hours")
    return sign * offset


def _assemble(groups: dict[str, str], widths: dict[str, int], culture: Culture) -> ParsedFields:
    year = _resolve_year(groups["year"], widths["year"]) if "year" in groups else 1
    month = _resolve_month(groups["month"], widths["month"], culture) if "month" in groups else 1
    day = int(groups.get("day", "1"))
    hour = _resolve_hour(groups, culture)
    minute = int(groups.get("minute", "0"))
    second = int(groups.get("second", "0"))
    fraction = groups.get("fraction", "")
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0

    value = datetime(year, month, day, hour, minute, second, microsecond)

    if "weekday" in groups:
        names = culture.day_names if widths["weekday"] >= 4 else culture.abbreviated_day_names
        if _index_of(groups["weekday"], names) != value.weekday():
            raise ValueError(f"day of week {groups['weekday']!r} does not match {value.date().isoformat()}")

    raw_offset = groups.get("offset")
    if raw_offset:
        return ParsedFields(value=value, offset=_resolve_offset(raw_offset), offset_text=raw_offset)
    return ParsedFields(value=value)


__all__ = [
    "MAX_OFFSET",
    "TWO_DIGIT_YEAR_PIVOT",
    "CompiledPattern",
    "ParsedFields",
    "compile_pattern",
]
