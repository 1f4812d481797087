"""Top-level entry points for parsing ISO 6709 coordinates."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .errors import ISO6709Error, ParseError
from .iso6709 import readable_latlong_altitude_option, string_latlong_altitude_option

_LEADING_SPACE = " \t\r\n"


@dataclass(frozen=True)
class ISO6709Coord:
    """A parsed coordinate in decimal degrees, with an optional altitude."""

    lat: float
    lon: float
    altitude: float | None = None

    def as_point(self) -> tuple[float, float]:
        """Return the coordinate as an ``(x, y)`` pair, i.e. ``(lon, lat)``."""
        return self.lon, self.lat


def _run(
    parser: Callable[[str], tuple[str, tuple[tuple[float, float], float | None]]],
    text: str,
) -> ISO6709Coord:
    try:
        _, ((lat, lon), altitude) = parser(text.lstrip(_LEADING_SPACE))
    except ParseError as error:
        raise ISO6709Error(str(error)) from error
    return ISO6709Coord(lat=lat, lon=lon, altitude=altitude)


def parse_readable(text: str) -> ISO6709Coord:
    """Parse the human-readable form, e.g. ``15°30′00.000″N 95°15′00.000″W``.

    ``'`` and ``"`` may stand in for ``′`` and ``″``.  Raises
    :class:`ISO6709Error` on malformed input or out-of-range values.
    """
    return _run(readable_latlong_altitude_option, text)


def parse_string_representation(text: str) -> ISO6709Coord:
    """Parse the string representation, e.g. ``N35.50W170.10+8712CRSWGS_85/``.

    Supports DD.DDD, DDMM.MMM and DDMMSS.SSS with ``+``/``-`` or
    ``N``/``S`` and ``E``/``W``.  Raises :class:`ISO6709Error` on failure.
    """
    return _run(string_latlong_altitude_option, text)


def parse(text: str) -> ISO6709Coord:
    """Parse either form, trying the human-readable one first."""
    try:
        return parse_readable(text)
    except ISO6709Error:
        return parse_string_representation(text)