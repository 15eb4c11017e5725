"""Date formatting with ``yyyy-MM-dd`` style patterns.

Template authors write date patterns using the letters of Java's
``DateTimeFormatter`` (``yyyy-MM-dd HH:mm``) rather than ``strftime``
directives. :func:`format_datetime` understands only a subset of those
letters and formats without going through the platform ``strftime`` so output
does not depend on the C library or the active locale.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, Iterator

from .errors import DatePatternError

__all__ = [
    "DEFAULT_DATE_PATTERN",
    "DEFAULT_NOW_PATTERN",
    "format_datetime",
    "parse_datetime",
]


LOGGER = logging.getLogger(__name__)

DEFAULT_DATE_PATTERN = "yyyy-MM-dd"
DEFAULT_NOW_PATTERN = "yyyy-MM-dd HH:mm"

_MONTHS = (
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
)
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _year(moment: datetime, width: int) -> str:
    if width == 2:
        return f"{moment.year % 100:02d}"
    return str(moment.year).zfill(width)


def _month(moment: datetime, width: int) -> str:
    name = _MONTHS[moment.month - 1]
    if width == 3:
        return name[:3]
    if width == 4:
        return name
    if width >= 5:
        return name[0]
    return str(moment.month).zfill(width)


def _weekday(moment: datetime, width: int) -> str:
    name = _WEEKDAYS[moment.weekday()]
    if width == 4:
        return name
    if width >= 5:
        return name[0]
    return name[:3]


def _fraction(moment: datetime, width: int) -> str:
    digits = f"{moment.microsecond:06d}"
    return digits[:width].ljust(width, "0")


def _number(getter: Callable[[datetime], int]) -> Callable[[datetime, int], str]:
    return lambda moment, width: str(getter(moment)).zfill(width)


_FIELDS: dict[str, Callable[[datetime, int], str]] = {
    "y": _year,
    "u": _year,
    "M": _month,
    "L": _month,
    "d": _number(lambda moment: moment.day),
    "D": _number(lambda moment: moment.timetuple().tm_yday),
    "E": _weekday,
    "a": lambda moment, width: "AM" if moment.hour < 12 else "PM",
    "H": _number(lambda moment: moment.hour),
    "k": _number(lambda moment: moment.hour or 24),
    "K": _number(lambda moment: moment.hour % 12),
    "h": _number(lambda moment: moment.hour % 12 or 12),
    "m": _number(lambda moment: moment.minute),
    "s": _number(lambda moment: moment.second),
    "S": _fraction,
}


def _segments(pattern: str) -> Iterator[tuple[str | None, str]]:
    """Yield ``(letter, run)`` for pattern letters and ``(None, text)`` for literals."""

    index = 0
    length = len(pattern)
    while index < length:
        char = pattern[index]
        if char == "'":
            if pattern.startswith("''", index):
                yield None, "'"
                index += 2
                continue
            literal: list[str] = []
            index += 1
            while index < length:
                end = pattern.find("'", index)
                if end == -1:
                    literal.append(pattern[index:])
                    index = length
                    break
                literal.append(pattern[index:end])
                if pattern.startswith("''", end):
                    literal.append("'")
                    index = end + 2
                    continue
                index = end + 1
                break
            yield None, "".join(literal)
            continue
        if char.isascii() and char.isalpha():
            end = index
            while end < length and pattern[end] == char:
                end += 1
            yield char, pattern[index:end]
            index = end
            continue
        if char in "[]":
            # optional section markers; every field is always available
            index += 1
            continue
        if char in "#{}":
            yield char, char
            index += 1
            continue
        yield None, char
        index += 1


def format_datetime(moment: datetime, pattern: str = DEFAULT_DATE_PATTERN) -> str:
    """Format ``moment`` using a ``yyyy-MM-dd`` style ``pattern``.

    Parameters
    ----------
    moment:
        The timestamp to format.
    pattern:
        Pattern letters are repeated to choose the width (``d`` vs ``dd``) or
        the textual form (``MMM`` vs ``MMMM``). Text wrapped in single quotes is
        copied verbatim and ``''`` produces a single quote. Five letters select
        the narrow form of a month or weekday name (``MMMMM`` gives ``M``). The
        brackets of optional sections are dropped and their content is always
        printed. Zone, offset, era, quarter and week based fields are not
        supported.

    Raises
    ------
    DatePatternError
        If ``pattern`` uses a letter that is not supported or one of the
        reserved characters ``#``, ``{`` and ``}``.
    """

    parts: list[str] = []
    for letter, run in _segments(pattern):
        if letter is None:
            parts.append(run)
            continue
        try:
            field_format = _FIELDS[letter]
        except KeyError as exc:
            raise DatePatternError(pattern, letter) from exc
        parts.append(field_format(moment, len(run)))
    return "".join(parts)


def parse_datetime(value: Any) -> datetime:
    """Coerce ``value`` to a :class:`~datetime.datetime`.

    ``datetime`` values are returned unchanged, ``date`` values are taken at
    midnight and strings are parsed as ISO-8601. Anything else, ``None``
    included, falls back to the current local time.

    Raises
    ------
    ValueError
        If ``value`` is a string that is not valid ISO-8601.
    """

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip())
    if value is not None:
        LOGGER.debug("Formatting current time in place of %s value", type(value).__name__)
    return datetime.now()
