"""Parse coordinates in ISO 6709 format from strings.

The entry points are in ``iso6709parse.api``; the individual field parsers
are in the other modules.
"""

__version__ = "0.1.1"

__all__ = ["altitude", "api", "common", "errors", "iso6709", "latitude", "longitude"]