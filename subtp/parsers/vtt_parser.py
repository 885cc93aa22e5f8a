# subtp/parsers/vtt_parser.py
# -*- coding: utf-8 -*-
"""
WebVTT (.vtt) grammar.

    vtt     := BOM? header (blank_lines (block (blank_lines block)*)?)? ws_or_nl* EOF
    header  := "WEBVTT" ws* newline text_block      (description below)
             / "WEBVTT" ws+ text_block              (description beside)
             / "WEBVTT" ws* newline
    block   := cue / comment / style / region
    cue     := ws* (!arrow_line line)? ws* timings (ws+ cue_settings)? ws* newline ws* multiline
    comment := "NOTE" ws* newline multiline / "NOTE" ws+ multiline
    style   := "STYLE" ws* newline text_block
    region  := "REGION" ws* newline region_settings ws* newline

Cue and region settings are key:value tokens accepted in any order. Each
token is tried against every known key; an unknown token fails the parse.
Repeated keys follow ParserSettings.duplicate_keys.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from ..errors import ParseError
from ..models.enums import (
    Alignment,
    DuplicateKeyPolicy,
    LineAlignment,
    Placement,
    PositionAlignment,
    Scroll,
    Vertical,
)
from ..models.settings import ParserSettings
from ..models.vtt import (
    Anchor,
    CueSettings,
    Line,
    Position,
    VttBlock,
    VttComment,
    VttCue,
    VttDescription,
    VttDocument,
    VttHeader,
    VttRegion,
    VttStyle,
    VttTimestamp,
    VttTimings,
)
from .base import GrammarParser

logger = logging.getLogger(__name__)

ARROW = '-->'

_ARROW_LINE = re.compile(r'[^\r\n]*-->')
_REGION_SEPARATOR = re.compile(r'[ \t]*(?:\r\n|\n|\r)[ \t]*|[ \t]+')
_TOKEN_END = re.compile(r'[ \t\r\n]|$')


def _keywords(enum_cls) -> List[str]:
    # Longest first so "line-left" is tried before any shorter prefix
    return sorted((member.value for member in enum_cls), key=len, reverse=True)


class VttParser(GrammarParser):
    """Recursive-descent parser for WebVTT text."""

    # =========================================================================
    # Document
    # =========================================================================

    def document(self) -> VttDocument:
        self.skip_bom()
        header = self.header()
        blocks = self.optional(self._body, default=[])
        self.skip_whitespace_or_newline()
        return VttDocument(header, blocks)

    def _body(self) -> List[VttBlock]:
        self.blank_lines()
        return self.separated(self.block, self.blank_lines)

    def header(self) -> VttHeader:
        return self.choice(self._header_below, self._header_side, self._header_minimal)

    def _header_below(self) -> VttHeader:
        self.literal('WEBVTT')
        self.skip_whitespace()
        self.newline()
        text = self.text_block()
        return VttHeader(VttDescription(text, Placement.BELOW))

    def _header_side(self) -> VttHeader:
        self.literal('WEBVTT')
        self.whitespace_run()
        text = self.text_block()
        return VttHeader(VttDescription(text, Placement.SIDE))

    def _header_minimal(self) -> VttHeader:
        self.literal('WEBVTT')
        self.skip_whitespace()
        self.newline()
        return VttHeader()

    def block(self) -> VttBlock:
        return self.choice(self.cue, self.comment, self.style, self.region)

    # =========================================================================
    # Cues
    # =========================================================================

    def cue(self) -> VttCue:
        self.skip_whitespace()
        identifier = self.optional(self.cue_identifier)
        self.skip_whitespace()
        timings = self.timings()
        settings = self.optional(self._trailing_cue_settings)
        self.skip_whitespace()
        self.newline()
        self.skip_whitespace()
        payload = self.multiline()
        return VttCue(identifier, timings, settings, payload)

    def cue_identifier(self) -> str:
        self.not_followed_by(lambda: self.regex(_ARROW_LINE, ARROW), 'cue identifier')
        return self.line()

    def timings(self) -> VttTimings:
        start = self.timestamp()
        self.skip_whitespace()
        self.literal(ARROW)
        self.skip_whitespace()
        end = self.timestamp()
        return VttTimings(start, end)

    def timestamp(self) -> VttTimestamp:
        return self.choice(self._timestamp_with_hours, self._timestamp_without_hours)

    def _timestamp_with_hours(self) -> VttTimestamp:
        hours = self.two_digits()
        self.literal(':')
        minutes, seconds, milliseconds = self._minutes_seconds_millis()
        return VttTimestamp(hours, minutes, seconds, milliseconds)

    def _timestamp_without_hours(self) -> VttTimestamp:
        minutes, seconds, milliseconds = self._minutes_seconds_millis()
        return VttTimestamp(0, minutes, seconds, milliseconds)

    def _minutes_seconds_millis(self) -> Tuple[int, int, int]:
        minutes = self.two_digits()
        self.literal(':')
        seconds = self.two_digits()
        self.literal('.')
        milliseconds = self.three_digits()
        return minutes, seconds, milliseconds

    def _trailing_cue_settings(self) -> CueSettings:
        self.whitespace_run()
        return self.cue_settings()

    def cue_settings(self) -> CueSettings:
        """Whitespace separated setting tokens on the timings line."""
        settings = CueSettings()
        seen = set()
        rules = (
            self._cue_vertical,
            self._cue_line,
            self._cue_position,
            self._cue_size,
            self._cue_align,
            self._cue_region,
        )

        def token():
            key, value = self.choice(*rules)
            self._assign(settings, seen, key, value)

        def next_token():
            self.whitespace_run()
            token()

        token()
        self.many(next_token)
        return settings

    def _cue_vertical(self):
        self.literal('vertical:')
        return 'vertical', self._keyword(Vertical)

    def _cue_line(self):
        self.literal('line:')
        value = self.choice(self.percentage, self.signed_int)
        alignment = self.optional(lambda: self._suffix(LineAlignment))
        self._token_end()
        return 'line', Line(value, alignment)

    def _cue_position(self):
        self.literal('position:')
        value = self.percentage()
        alignment = self.optional(lambda: self._suffix(PositionAlignment))
        self._token_end()
        return 'position', Position(value, alignment)

    def _cue_size(self):
        self.literal('size:')
        value = self.percentage()
        self._token_end()
        return 'size', value

    def _cue_align(self):
        self.literal('align:')
        return 'align', self._keyword(Alignment)

    def _cue_region(self):
        self.literal('region:')
        return 'region', self.sequence()

    # =========================================================================
    # Comment / Style / Region
    # =========================================================================

    def comment(self) -> VttComment:
        return self.choice(self._comment_below, self._comment_side)

    def _comment_below(self) -> VttComment:
        self.literal('NOTE')
        self.skip_whitespace()
        self.newline()
        return VttComment('\n'.join(self.multiline()), Placement.BELOW)

    def _comment_side(self) -> VttComment:
        self.literal('NOTE')
        self.whitespace_run()
        return VttComment('\n'.join(self.multiline()), Placement.SIDE)

    def style(self) -> VttStyle:
        self.literal('STYLE')
        self.skip_whitespace()
        self.newline()
        return VttStyle(self.text_block())

    def region(self) -> VttRegion:
        self.literal('REGION')
        self.skip_whitespace()
        self.newline()
        region = self.region_settings()
        self.skip_whitespace()
        self.newline()
        return region

    def region_settings(self) -> VttRegion:
        """Setting tokens separated by whitespace or a single newline."""
        region = VttRegion()
        seen = set()
        rules = (
            self._region_id,
            self._region_width,
            self._region_lines,
            self._region_anchor,
            self._region_viewport_anchor,
            self._region_scroll,
        )

        def token():
            key, value = self.choice(*rules)
            self._assign(region, seen, key, value)

        def next_token():
            self.regex(_REGION_SEPARATOR, 'whitespace or newline')
            token()

        token()
        self.many(next_token)
        return region

    def _region_id(self):
        self.literal('id:')
        return 'id', self.sequence()

    def _region_width(self):
        self.literal('width:')
        value = self.percentage()
        self._token_end()
        return 'width', value

    def _region_lines(self):
        self.literal('lines:')
        value = self.number()
        self._token_end()
        return 'lines', value

    def _region_anchor(self):
        self.literal('regionanchor:')
        return 'region_anchor', self._anchor()

    def _region_viewport_anchor(self):
        self.literal('viewportanchor:')
        return 'viewport_anchor', self._anchor()

    def _region_scroll(self):
        self.literal('scroll:')
        return 'scroll', self._keyword(Scroll)

    # =========================================================================
    # Setting helpers
    # =========================================================================

    def _anchor(self) -> Anchor:
        x = self.percentage()
        self.literal(',')
        y = self.percentage()
        self._token_end()
        return Anchor(x, y)

    def _keyword(self, enum_cls):
        """One of the enum's values, ending at a token boundary."""
        value = self.choice(*[
            (lambda keyword=keyword: self.literal(keyword))
            for keyword in _keywords(enum_cls)
        ])
        self._token_end()
        return enum_cls(value)

    def _suffix(self, enum_cls):
        self.literal(',')
        return self._keyword(enum_cls)

    def _token_end(self) -> None:
        if _TOKEN_END.match(self.text, self.pos) is None:
            self.fail('whitespace or newline')

    def _assign(self, target, seen: set, key: str, value) -> None:
        if key in seen and self.settings.duplicate_keys is DuplicateKeyPolicy.REJECT:
            self.fail(f"unique {key!r} setting")
        seen.add(key)
        setattr(target, key, value)


def parse_vtt(text: str, settings: Optional[ParserSettings] = None) -> VttDocument:
    """
    Parse WebVTT text into a VttDocument.

    Args:
        text: Complete .vtt contents, optionally starting with a BOM
        settings: Parser settings (defaults when omitted)

    Returns:
        VttDocument with blocks in input order

    Raises:
        ParseError: at the furthest position the grammar reached
    """
    parser = VttParser(text, settings)
    try:
        document = parser.run(parser.document)
    except ParseError as e:
        logger.debug(f"WebVTT parse failed at {e.location}: expected {e.expected}")
        raise
    logger.debug(
        f"Parsed WebVTT document: {len(document.cues)} cues, {len(document)} blocks"
    )
    return document
