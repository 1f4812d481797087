# iso6709parse

Parse geographic coordinates written in ISO 6709 notation into latitude,
longitude and an optional altitude, all as floats in decimal degrees (and
the altitude in whatever unit the input used).

Two notations are understood:

* **Human readable**: degrees, minutes and seconds with a hemisphere letter,
  optionally followed by a space and an altitude, e.g.
  `15°30′00.000″N 95°15′00.000″W 123.45m`. A plain `'` may stand in for `′`
  and a plain `"` for `″`. The altitude may carry a leading `-`.
* **String representation**: the compact form, in `DD.DDD`, `DDMM.MMM` or
  `DDMMSS.SSS` for latitude (three degree digits for longitude), signed with
  `+`/`-` or `N`/`S` and `E`/`W`, optionally followed by a signed altitude
  and the `CRS` tag, e.g. `N35.50W170.10+8712CRSWGS_85/`. Values below ten
  need a leading zero, as the standard requires. Minutes and seconds of 60
  or more are rejected.

Latitudes beyond ±90° and longitudes beyond ±180° are rejected.

## Installation

```
pip install iso6709parse
```

The package has no dependencies outside the standard library.

## Usage

```python
from iso6709parse.api import parse, parse_readable, parse_string_representation

coord = parse_readable("15°30′00.000″N 95°15′00.000″W")
assert coord.lat == 15.5
assert coord.lon == -95.25
assert coord.altitude is None

coord = parse_readable("15°30′00.000″N 95°15′00.000″W 123.45m")
assert coord.altitude == 123.45

coord = parse_string_representation("N35.50W170.10+8712CRSWGS_85/")
assert (coord.lat, coord.lon, coord.altitude) == (35.5, -170.1, 8712.0)

# parse() tries the human readable form first, then the string representation.
coord = parse("N35.50W170.10/")
assert coord.as_point() == (-170.1, 35.5)  # (x, y) = (longitude, latitude)
```

`ISO6709Coord` is a frozen dataclass with the fields `lat`, `lon` and
`altitude` (`None` when no altitude was given).

Leading whitespace is skipped. Parsing stops once the coordinate (and the
altitude, if present) has been read; whatever follows, such as the altitude
unit, the reference system name or a trailing `/`, is not checked.

Input that cannot be parsed raises `iso6709parse.errors.ISO6709Error`, a
subclass of `ValueError`.

### Lower-level parsers

The modules `iso6709parse.common`, `iso6709parse.latitude`,
`iso6709parse.longitude`, `iso6709parse.altitude` and
`iso6709parse.iso6709` expose the individual parsers, for example
`parse_string_latitude`, `parse_readable_longitude`, `parse_crs`,
`string_latlong` or `readable_latlong_altitude_option`. Each returns a
`(remaining, value)` pair, where `remaining` is the unconsumed rest of the
input:

```python
from iso6709parse.iso6709 import string_latlong_altitude
from iso6709parse.altitude import parse_crs

assert string_latlong_altitude("N35.50W170.10+8712CRSWGS_85/") == (
    "WGS_85/",
    ((35.5, -170.1), 8712.0),
)
assert parse_crs("+2122CRSWGS_85/") == ("/", "WGS_85")
```

They raise `iso6709parse.errors.ParseError` when the input does not match.
The error's `remaining` attribute holds the input where parsing stopped, and
`fatal` is true when the input had the expected shape but an invalid value
(for example a latitude above 90°).

### What it does not do

The package only reads coordinates. It does not format coordinates back into
ISO 6709 text, convert between reference systems, or interpret the altitude
unit or the CRS name beyond returning them as text.

## Running the tests

```
pip install -e ".[test]"
pytest
```