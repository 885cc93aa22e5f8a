# subtp/__init__.py
# -*- coding: utf-8 -*-
"""
subtp - SubRip and WebVTT parsing and rendering.

    >>> from subtp import SubtitleDocument
    >>> doc = SubtitleDocument.parse("1\\n00:00:00,000 --> 00:00:02,000\\nHello\\n")
    >>> doc.entries[0].text
    ['Hello']
    >>> str(doc)
    '1\\n00:00:00,000 --> 00:00:02,000\\nHello\\n'
"""

from .errors import ParseError
from .models import (
    Alignment,
    Anchor,
    CueSettings,
    DuplicateKeyPolicy,
    Line,
    LineAlignment,
    NewlineStyle,
    ParserSettings,
    Percentage,
    Placement,
    Position,
    PositionAlignment,
    RenderSettings,
    Scroll,
    SubtitleDocument,
    SubtitleEntry,
    Timestamp,
    Vertical,
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
from .parsers import parse_srt, parse_vtt
from .writers import render_srt, render_vtt

__version__ = "0.1.0"

__all__ = [
    "ParseError",
    "parse_srt",
    "parse_vtt",
    "render_srt",
    "render_vtt",
    "ParserSettings",
    "RenderSettings",
    "DuplicateKeyPolicy",
    "NewlineStyle",
    "SubtitleDocument",
    "SubtitleEntry",
    "Timestamp",
    "VttDocument",
    "VttHeader",
    "VttDescription",
    "VttBlock",
    "VttCue",
    "VttComment",
    "VttStyle",
    "VttRegion",
    "VttTimings",
    "VttTimestamp",
    "CueSettings",
    "Line",
    "Position",
    "Percentage",
    "Anchor",
    "Placement",
    "Vertical",
    "LineAlignment",
    "PositionAlignment",
    "Alignment",
    "Scroll",
]
