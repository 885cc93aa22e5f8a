# subtp/parsers/base.py
# -*- coding: utf-8 -*-
"""
Lexical primitives shared by the SRT and WebVTT grammars.

GrammarParser is a small recursive-descent engine with PEG semantics:
- Ordered choice: the first alternative that matches wins
- Every failed rule records (position, expected) before raising Backtrack
- Only the furthest failure position is kept, with every expectation
  recorded there, so the final ParseError points at the rightmost failure

Grammar rules are methods that either return a value and advance ``pos``,
or raise Backtrack. Combinators restore ``pos`` when an alternative fails.
"""
from __future__ import annotations

import json
import re
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Tuple, TypeVar

from ..errors import ParseError
from ..models.settings import ParserSettings
from ..models.vtt import Percentage

T = TypeVar('T')

BOM = '\ufeff'

# Character classes
_WHITESPACE = re.compile(r'[ \t]')
_WHITESPACE_RUN = re.compile(r'[ \t]+')
_NEWLINE = re.compile(r'\r\n|\n|\r')
_BLANK_LINES = re.compile(r'(?:[ \t]*(?:\r\n|\n|\r))+')

# Numbers
_TWO_DIGITS = re.compile(r'[0-9]{2}')
_THREE_DIGITS = re.compile(r'[0-9]{3}')
_DIGITS = re.compile(r'[0-9]+')
_SIGNED_INT = re.compile(r'[+-]?[0-9]+')
_FLOAT = re.compile(r'[0-9]+\.[0-9]+')

# Text
_SEQUENCE = re.compile(r'[^ \t\r\n]+')
_TEXT_START = re.compile(r'[^ \t\r\n][^\r\n]*')
_CONTENT_LINE = re.compile(r'[ \t]*[^ \t\r\n][^\r\n]*')

PERCENTAGE_RANGE = 'percentage between 0% and 100%'


class Backtrack(Exception):
    """A rule did not match at the current position."""


def describe_expected(expected: set) -> str:
    """Format a set of expectations as human readable text."""
    if not expected:
        return 'valid input'
    items = sorted(expected)
    if len(items) == 1:
        return items[0]
    return 'one of ' + ', '.join(items)


def line_and_column(text: str, offset: int) -> Tuple[int, int]:
    """1-based line and column of ``offset``; \\r\\n, \\r and \\n each end a line."""
    line = 1
    line_start = 0
    for match in _NEWLINE.finditer(text, 0, offset):
        line += 1
        line_start = match.end()
    return line, offset - line_start + 1


class GrammarParser:
    """Cursor over ``text`` with furthest-failure tracking."""

    def __init__(self, text: str, settings: Optional[ParserSettings] = None):
        self.text = text
        self.pos = 0
        self.settings = settings or ParserSettings()
        self._furthest = 0
        self._expected: set = set()
        self._quiet = 0

    # =========================================================================
    # Failure tracking
    # =========================================================================

    def fail(self, expected: str, pos: Optional[int] = None):
        """Record an expectation and abandon the current rule."""
        if pos is None:
            pos = self.pos
        if not self._quiet:
            if pos > self._furthest:
                self._furthest = pos
                self._expected = {expected}
            elif pos == self._furthest:
                self._expected.add(expected)
        raise Backtrack(expected)

    @contextmanager
    def quiet(self) -> Iterator[None]:
        """Suppress expectation recording (optional runs, lookaheads)."""
        self._quiet += 1
        try:
            yield
        finally:
            self._quiet -= 1

    def error(self) -> ParseError:
        """Build the public error from the furthest recorded failure."""
        line, column = line_and_column(self.text, self._furthest)
        return ParseError(
            f"{line}:{column}",
            describe_expected(self._expected),
            line=line,
            column=column,
            offset=self._furthest,
        )

    def run(self, rule: Callable[[], T]) -> T:
        """Match ``rule`` against the whole input.

        Raises:
            ParseError: if the rule fails or leaves input unconsumed.
        """
        try:
            result = rule()
            self.expect_end()
        except Backtrack:
            raise self.error() from None
        return result

    # =========================================================================
    # Combinators
    # =========================================================================

    def literal(self, token: str) -> str:
        if self.text.startswith(token, self.pos):
            self.pos += len(token)
            return token
        self.fail(json.dumps(token))

    def regex(self, pattern: re.Pattern, expected: str) -> str:
        match = pattern.match(self.text, self.pos)
        if match is None:
            self.fail(expected)
        self.pos = match.end()
        return match.group(0)

    def choice(self, *rules: Callable[[], T]) -> T:
        """Ordered choice; each alternative starts from the same position."""
        start = self.pos
        for rule in rules:
            try:
                return rule()
            except Backtrack:
                self.pos = start
        raise Backtrack('choice')

    def optional(self, rule: Callable[[], T], default=None):
        start = self.pos
        try:
            return rule()
        except Backtrack:
            self.pos = start
            return default

    def many(self, rule: Callable[[], T]) -> List[T]:
        """Zero or more matches; stops on a match that consumed nothing."""
        items = []
        while True:
            start = self.pos
            try:
                item = rule()
            except Backtrack:
                self.pos = start
                break
            items.append(item)
            if self.pos == start:
                break
        return items

    def many1(self, rule: Callable[[], T]) -> List[T]:
        items = [rule()]
        items.extend(self.many(rule))
        return items

    def separated(self, rule: Callable[[], T], separator: Callable[[], object]) -> List[T]:
        """Zero or more ``rule`` matches joined by ``separator``."""
        start = self.pos
        try:
            items = [rule()]
        except Backtrack:
            self.pos = start
            return []

        def tail():
            separator()
            return rule()

        items.extend(self.many(tail))
        return items

    def not_followed_by(self, rule: Callable[[], object], expected: str) -> None:
        """Negative lookahead; never consumes input."""
        start = self.pos
        try:
            with self.quiet():
                rule()
        except Backtrack:
            self.pos = start
            return
        self.pos = start
        self.fail(expected)

    def expect_end(self) -> None:
        if self.pos != len(self.text):
            self.fail('EOF')

    # =========================================================================
    # Whitespace and newlines
    # =========================================================================

    def whitespace(self) -> str:
        return self.regex(_WHITESPACE, 'whitespace')

    def whitespace_run(self) -> str:
        """One or more spaces or tabs."""
        return self.regex(_WHITESPACE_RUN, 'whitespace')

    def skip_whitespace(self) -> None:
        """Zero or more spaces or tabs."""
        with self.quiet():
            self.optional(self.whitespace_run)

    def skip_bom(self) -> None:
        """A single leading U+FEFF byte-order mark, if present."""
        with self.quiet():
            self.optional(lambda: self.literal(BOM))

    def newline(self) -> str:
        return self.regex(_NEWLINE, 'newline')

    def whitespace_or_newline(self) -> str:
        return self.choice(self.whitespace, self.newline)

    def skip_whitespace_or_newline(self) -> None:
        self.many(self.whitespace_or_newline)

    def blank_lines(self) -> str:
        """One or more empty or whitespace-only lines."""
        return self.regex(_BLANK_LINES, 'blank line')

    # =========================================================================
    # Numbers
    # =========================================================================

    def two_digits(self) -> int:
        return int(self.regex(_TWO_DIGITS, 'two-digit number'))

    def three_digits(self) -> int:
        return int(self.regex(_THREE_DIGITS, 'three-digit number'))

    def number(self) -> int:
        return int(self.regex(_DIGITS, 'number'))

    def signed_int(self) -> int:
        return int(self.regex(_SIGNED_INT, 'signed integer'))

    def float_number(self) -> float:
        return float(self.regex(_FLOAT, 'decimal number'))

    def percentage(self) -> Percentage:
        """Integer or decimal percentage in [0, 100]; ``101%`` fails after the sign."""
        return self.choice(self._percentage_int, self._percentage_float)

    def _percentage_int(self) -> Percentage:
        value = self.number()
        self.literal('%')
        if value > 100:
            self.fail(PERCENTAGE_RANGE)
        return Percentage(float(value))

    def _percentage_float(self) -> Percentage:
        value = self.float_number()
        self.literal('%')
        if not 0.0 <= value <= 100.0:
            self.fail(PERCENTAGE_RANGE)
        return Percentage(value)

    # =========================================================================
    # Text
    # =========================================================================

    def sequence(self) -> str:
        """Maximal run of characters that are neither whitespace nor newline."""
        return self.regex(_SEQUENCE, 'text')

    def line(self) -> str:
        """Rest of a line not starting with whitespace, newline included, trimmed."""
        text = self.regex(_TEXT_START, 'text')
        self.newline()
        return text.strip()

    def multiline(self) -> List[str]:
        """Consecutive non-blank lines, each newline-terminated and trimmed.

        Stops at a blank (or whitespace-only) line or at end of input. Fails
        when no line is captured, so empty payloads are rejected.
        """
        lines = [self.line()]
        lines.extend(self.many(self._content_line))
        return lines

    def text_block(self) -> str:
        """Like multiline, but lines are kept raw and joined with ``\\n``."""
        lines = self.many1(self._raw_content_line)
        return '\n'.join(lines)

    def _content_line(self) -> str:
        return self._raw_content_line().strip()

    def _raw_content_line(self) -> str:
        text = self.regex(_CONTENT_LINE, 'text')
        self.newline()
        return text
