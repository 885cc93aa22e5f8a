# subtp/errors.py
"""
Public error type.

Every grammar failure, lexical or range related, collapses into a single
ParseError describing the furthest position the parser reached and what
it expected to find there.
"""
from __future__ import annotations


class ParseError(ValueError):
    """Raised when text does not match the SubRip or WebVTT grammar."""

    def __init__(self, location: str, expected: str, line: int = 0, column: int = 0, offset: int = 0):
        self.location = location
        self.expected = expected
        self.line = line
        self.column = column
        self.offset = offset
        super().__init__(f"Parse error at {location}: expected {expected}")

    def __reduce__(self):
        return (
            self.__class__,
            (self.location, self.expected, self.line, self.column, self.offset),
        )
