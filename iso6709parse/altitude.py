"""Altitude parsers for the readable and the string-representation formats."""

from __future__ import annotations

import re

from .errors import ParseError

_FLOAT_CHARS = re.compile(r"[0-9.]*")
_ALPHA = re.compile(r"[A-Za-z]+")
_CRS_TAG = "CRS"


def _altitude_number(text: str) -> tuple[str, float]:
    match = _FLOAT_CHARS.match(text)
    number = match.group()
    try:
        value = float(number)
    except ValueError:
        raise ParseError(text) from None
    return text[match.end():], value


def parse_readable_altitude(text: str) -> tuple[str, float]:
    """Parse an altitude such as ``-978.90`` in the readable format.

    A leading ``-`` is optional; the unit that follows is left unparsed.
    """
    sign = 1.0
    if text.startswith("-"):
        sign = -1.0
        text = text[1:]
    rest, value = _altitude_number(text)
    return rest, value * sign


def parse_altitude_unit(text: str) -> tuple[str, str]:
    """Parse the alphabetic unit that follows a readable altitude."""
    match = _ALPHA.match(text)
    if match is None:
        raise ParseError(text)
    return text[match.end():], match.group()


def parse_string_altitude(text: str) -> tuple[str, float]:
    """Parse a signed altitude and the ``CRS`` tag, as in ``+2122CRSWGS_85``.

    Returns the text after ``CRS`` and the altitude.
    """
    if text.startswith("+"):
        sign = 1.0
    elif text.startswith("-"):
        sign = -1.0
    else:
        raise ParseError(text)
    rest, value = _altitude_number(text[1:])
    if not rest.startswith(_CRS_TAG):
        raise ParseError(rest)
    return rest[len(_CRS_TAG):], sign * value


def parse_crs(text: str) -> tuple[str, str]:
    """Parse an altitude with its CRS and return the CRS name.

    The name runs up to the next ``/`` and must not be empty.
    """
    rest, _ = parse_string_altitude(text)
    name, slash, tail = rest.partition("/")
    if not name:
        raise ParseError(rest)
    return slash + tail, name