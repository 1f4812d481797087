"""Combined latitude, longitude and altitude parsers for both ISO 6709 forms.

Every parser takes the input text and returns ``(remaining, value)``,
raising :class:`ParseError` when the text does not start with a coordinate.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TypeVar

from .altitude import parse_readable_altitude, parse_string_altitude
from .errors import ParseError
from .latitude import parse_readable_latitude, parse_string_latitude
from .longitude import parse_readable_longitude, parse_string_longitude

_T = TypeVar("_T")
_SPACE = re.compile(r"[ \t]+")

LatLong = tuple[float, float]


def _space1(text: str) -> str:
    match = _SPACE.match(text)
    if match is None:
        raise ParseError(text)
    return text[match.end():]


def _optional(
    parser: Callable[[str], tuple[str, _T]], text: str
) -> tuple[str, _T | None]:
    """Run ``parser``; on a recoverable failure give ``None`` and the input."""
    try:
        return parser(text)
    except ParseError as error:
        if error.fatal:
            raise
        return text, None


def _spaced_readable_altitude(text: str) -> tuple[str, float]:
    return parse_readable_altitude(_space1(text))


def readable_latlong(text: str) -> tuple[str, LatLong]:
    """Parse ``15°30′00.000″N 95°15′00.000″W`` into ``(lat, lon)``."""
    rest, lat = parse_readable_latitude(text)
    rest = _space1(rest)
    rest, lon = parse_readable_longitude(rest)
    return rest, (lat, lon)


def readable_latlong_altitude(text: str) -> tuple[str, tuple[LatLong, float]]:
    """Parse a readable coordinate that must carry an altitude.

    The altitude unit is left in the remaining text.
    """
    rest, latlong = readable_latlong(text)
    rest, altitude = _spaced_readable_altitude(rest)
    return rest, (latlong, altitude)


def readable_latlong_altitude_option(
    text: str,
) -> tuple[str, tuple[LatLong, float | None]]:
    """Parse a readable coordinate whose altitude may be absent."""
    rest, latlong = readable_latlong(text)
    rest, altitude = _optional(_spaced_readable_altitude, rest)
    return rest, (latlong, altitude)


def string_latlong(text: str) -> tuple[str, LatLong]:
    """Parse a string representation such as ``+1200.00-02130.00``."""
    rest, lat = parse_string_latitude(text)
    rest, lon = parse_string_longitude(rest)
    return rest, (lat, lon)


def string_latlong_altitude(text: str) -> tuple[str, tuple[LatLong, float]]:
    """Parse a string representation that must carry an altitude and ``CRS``.

    The remaining text starts after ``CRS``.
    """
    rest, latlong = string_latlong(text)
    rest, altitude = parse_string_altitude(rest)
    return rest, (latlong, altitude)


def string_latlong_altitude_option(
    text: str,
) -> tuple[str, tuple[LatLong, float | None]]:
    """Parse a string representation whose altitude may be absent."""
    rest, latlong = string_latlong(text)
    rest, altitude = _optional(parse_string_altitude, rest)
    return rest, (latlong, altitude)