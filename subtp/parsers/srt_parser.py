# subtp/parsers/srt_parser.py
# -*- coding: utf-8 -*-
"""
SubRip (.srt) grammar.

    srt       := BOM? ws_or_nl* (entry (blank_lines entry)*)? ws_or_nl* EOF
    entry     := ws* number sep timestamp sep? "-->" sep? timestamp sep multiline
    sep       := whitespace run containing at most one newline
    timestamp := DD ":" DD ":" DD "," DDD

Blank lines are tolerated in any number between entries but never inside
one: ``sep`` cannot span an empty line, and the payload ends at the first
blank line. Parsing is all-or-nothing.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from ..errors import ParseError
from ..models.settings import ParserSettings
from ..models.srt import SubtitleDocument, SubtitleEntry, Timestamp
from .base import GrammarParser

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r'[ \t]+(?:(?:\r\n|\n|\r)[ \t]*)?|(?:\r\n|\n|\r)[ \t]*')


class SrtParser(GrammarParser):
    """Recursive-descent parser for SubRip text."""

    def document(self) -> SubtitleDocument:
        self.skip_bom()
        self.skip_whitespace_or_newline()
        entries = self.separated(self.entry, self.blank_lines)
        self.skip_whitespace_or_newline()
        return SubtitleDocument(entries)

    def entry(self) -> SubtitleEntry:
        self.skip_whitespace()
        sequence = self.number()
        self.separator()
        start = self.timestamp()
        self.optional(self.separator)
        self.literal('-->')
        self.optional(self.separator)
        end = self.timestamp()
        self.separator()
        text = self.multiline()
        return SubtitleEntry(sequence, start, end, text)

    def separator(self) -> str:
        return self.regex(_SEPARATOR, 'whitespace or newline')

    def timestamp(self) -> Timestamp:
        hours = self.two_digits()
        self.literal(':')
        minutes = self.two_digits()
        self.literal(':')
        seconds = self.two_digits()
        self.literal(',')
        milliseconds = self.three_digits()
        return Timestamp(hours, minutes, seconds, milliseconds)


def parse_srt(text: str, settings: Optional[ParserSettings] = None) -> SubtitleDocument:
    """
    Parse SubRip text into a SubtitleDocument.

    Args:
        text: Complete .srt contents (any of \\n, \\r\\n or \\r line endings),
            optionally starting with a BOM
        settings: Parser settings (defaults when omitted)

    Returns:
        SubtitleDocument with entries in input order

    Raises:
        ParseError: at the furthest position the grammar reached
    """
    parser = SrtParser(text, settings)
    try:
        document = parser.run(parser.document)
    except ParseError as e:
        logger.debug(f"SRT parse failed at {e.location}: expected {e.expected}")
        raise
    logger.debug(f"Parsed {len(document)} SRT entries")
    return document
