"""Parsers for the degree, minute and second fields of the readable format.

Each parser takes the input text and returns ``(remaining, value)``,
raising :class:`ParseError` when the text does not start with the
expected field.
"""

from __future__ import annotations

import re

from .errors import ParseError

_DIGITS = re.compile(r"[0-9]+")
_SECONDS = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def _take(pattern: re.Pattern[str], text: str) -> tuple[str, str]:
    match = pattern.match(text)
    if match is None:
        raise ParseError(text)
    return text[match.end():], match.group()


def _expect(text: str, *markers: str) -> str:
    for marker in markers:
        if text.startswith(marker):
            return text[len(marker):]
    raise ParseError(text)


def parse_value(text: str) -> tuple[str, float]:
    """Parse a run of ASCII digits as a number."""
    rest, digits = _take(_DIGITS, text)
    return rest, float(digits)


def parse_degree(text: str) -> tuple[str, float]:
    """Parse whole degrees followed by the degree sign."""
    rest, value = parse_value(text)
    return _expect(rest, "°"), value


def parse_minutes(text: str) -> tuple[str, float]:
    """Parse whole minutes followed by a prime or an apostrophe."""
    rest, value = parse_value(text)
    return _expect(rest, "'", "′"), value


def parse_seconds_with_decimal(text: str) -> tuple[str, float]:
    """Parse seconds with an optional fractional part."""
    rest, number = _take(_SECONDS, text)
    return rest, float(number)


def parse_seconds(text: str) -> tuple[str, float]:
    """Parse seconds followed by a double prime or a double quote."""
    rest, value = parse_seconds_with_decimal(text)
    return _expect(rest, '"', "″"), value