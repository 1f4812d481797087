"""Longitude parsers for the readable and the string-representation formats.

Every parser takes the input text and returns ``(remaining, value)``,
raising :class:`ParseError` when the text does not start with a longitude.
"""

from __future__ import annotations

from .common import parse_degree, parse_minutes, parse_seconds
from .errors import ParseError
from .latitude import _parse_string_magnitude

MAX_LONGITUDE = 180.0


def _readable_hemisphere(text: str) -> tuple[str, float]:
    if text.startswith("E"):
        return text[1:], 1.0
    if text.startswith("W"):
        return text[1:], -1.0
    raise ParseError(text)


def parse_east_or_west(text: str) -> tuple[str, float]:
    """Parse ``E`` or ``+`` as 1.0 and ``W`` or ``-`` as -1.0."""
    if text[:1] in ("E", "+"):
        return text[1:], 1.0
    if text[:1] in ("W", "-"):
        return text[1:], -1.0
    raise ParseError(text)


def parse_readable_longitude(text: str) -> tuple[str, float]:
    """Parse a longitude such as ``95°48′26.533″W``.

    Raises a fatal :class:`ParseError` if the magnitude exceeds 180°.
    """
    rest, degrees = parse_degree(text)
    rest, minutes = parse_minutes(rest)
    rest, seconds = parse_seconds(rest)
    rest, sign = _readable_hemisphere(rest)
    value = degrees + minutes / 60.0 + seconds / 3600.0
    if value > MAX_LONGITUDE:
        raise ParseError(text, fatal=True)
    return rest, sign * value


def parse_string_longitude(text: str) -> tuple[str, float]:
    """Parse a longitude such as ``+14520.30`` or ``W145.45``.

    Degrees take three digits, minutes and seconds two each.  Raises a
    fatal :class:`ParseError` if the magnitude exceeds 180°.
    """
    body, sign = parse_east_or_west(text)
    rest, value = _parse_string_magnitude(body, 3)
    if value > MAX_LONGITUDE:
        raise ParseError(body, fatal=True)
    return rest, sign * value