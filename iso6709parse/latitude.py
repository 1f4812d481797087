"""Latitude parsers for the readable and the string-representation formats.

Every parser takes the input text and returns ``(remaining, value)``,
raising :class:`ParseError` when the text does not start with a latitude.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from .common import parse_degree, parse_minutes, parse_seconds
from .errors import ParseError

MAX_LATITUDE = 90.0

_ASCII_DIGITS = frozenset("0123456789")
_FRACTION = re.compile(r"\.[0-9]*")
_BYTE_MAX = 255


def _readable_hemisphere(text: str) -> tuple[str, float]:
    if text.startswith("N"):
        return text[1:], 1.0
    if text.startswith("S"):
        return text[1:], -1.0
    raise ParseError(text)


def parse_north_or_south(text: str) -> tuple[str, float]:
    """Parse ``N`` or ``+`` as 1.0 and ``S`` or ``-`` as -1.0."""
    if text[:1] in ("N", "+"):
        return text[1:], 1.0
    if text[:1] in ("S", "-"):
        return text[1:], -1.0
    raise ParseError(text)


def parse_readable_latitude(text: str) -> tuple[str, float]:
    """Parse a latitude such as ``50°40′46.461″N``.

    Raises a fatal :class:`ParseError` if the magnitude exceeds 90°.
    """
    rest, degrees = parse_degree(text)
    rest, minutes = parse_minutes(rest)
    rest, seconds = parse_seconds(rest)
    rest, sign = _readable_hemisphere(rest)
    value = degrees + minutes / 60.0 + seconds / 3600.0
    if value > MAX_LATITUDE:
        raise ParseError(text, fatal=True)
    return rest, sign * value


def _take_digits(text: str, width: int) -> tuple[str, int]:
    """Take exactly ``width`` ASCII digits as a number no larger than 255."""
    head = text[:width]
    if len(head) != width or not set(head) <= _ASCII_DIGITS:
        raise ParseError(text)
    value = int(head)
    if value > _BYTE_MAX:
        raise ParseError(text)
    return text[width:], value


def _take_fraction(text: str) -> tuple[str, float]:
    """Take an optional ``.ddd`` fraction; absent or bare ``.`` gives 0."""
    match = _FRACTION.match(text)
    if match is None:
        return text, 0.0
    try:
        value = float(match.group())
    except ValueError:
        return text, 0.0
    return text[match.end():], value


def _degrees(text: str, width: int) -> tuple[str, float]:
    rest, degrees = _take_digits(text, width)
    rest, fraction = _take_fraction(rest)
    return rest, degrees + fraction


def _degrees_minutes(text: str, width: int) -> tuple[str, float]:
    rest, degrees = _take_digits(text, width)
    rest, minutes = _take_digits(rest, 2)
    if minutes >= 60:
        raise ParseError(text, fatal=True)
    whole = degrees + minutes / 60.0
    rest, fraction = _take_fraction(rest)
    return rest, whole + fraction / 60.0


def _degrees_minutes_seconds(text: str, width: int) -> tuple[str, float]:
    rest, degrees = _take_digits(text, width)
    rest, minutes = _take_digits(rest, 2)
    rest, seconds = _take_digits(rest, 2)
    if minutes >= 60 or seconds >= 60:
        raise ParseError(text, fatal=True)
    whole = degrees + minutes / 60.0 + seconds / 3600.0
    rest, fraction = _take_fraction(rest)
    return rest, whole + fraction / 3600.0


_FORMS: tuple[Callable[[str, int], tuple[str, float]], ...] = (
    _degrees_minutes_seconds,
    _degrees_minutes,
    _degrees,
)


def _parse_string_magnitude(text: str, degree_width: int) -> tuple[str, float]:
    """Parse DDMMSS.SSS, DDMM.MMM or DD.DDD, trying the longest form first."""
    for form in _FORMS:
        try:
            return form(text, degree_width)
        except ParseError as error:
            if error.fatal:
                raise
    raise ParseError(text)


def parse_string_latitude(text: str) -> tuple[str, float]:
    """Parse a latitude such as ``+4520.30`` or ``N45.45``.

    Degrees take two digits, minutes and seconds two each.  Raises a
    fatal :class:`ParseError` if the magnitude exceeds 90°.
    """
    body, sign = parse_north_or_south(text)
    rest, value = _parse_string_magnitude(body, 2)
    if value > MAX_LATITUDE:
        raise ParseError(body, fatal=True)
    return rest, sign * value