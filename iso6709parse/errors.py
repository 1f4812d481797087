"""Exceptions raised while parsing ISO 6709 coordinates."""

from __future__ import annotations


class ISO6709Error(ValueError):
    """Raised when a string cannot be parsed as an ISO 6709 coordinate."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"Failed to parse ISO6709 coordinate: {self.detail}"


class ParseError(Exception):
    """Low-level parser failure.

    ``remaining`` is the input at the point where parsing stopped.  A
    ``fatal`` error means that the input matched the expected shape but
    holds an invalid value, so no alternative form should be tried.
    """

    def __init__(self, remaining: str, fatal: bool = False) -> None:
        super().__init__(remaining, fatal)
        self.remaining = remaining
        self.fatal = fatal

    def __str__(self) -> str:
        kind = "invalid value" if self.fatal else "unexpected input"
        return f"{kind} at: {self.remaining!r}"