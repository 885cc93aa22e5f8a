# subtp/models/__init__.py
# -*- coding: utf-8 -*-
"""Typed in-memory models for SubRip and WebVTT documents."""

from .enums import (
    Alignment,
    DuplicateKeyPolicy,
    LineAlignment,
    NewlineStyle,
    Placement,
    PositionAlignment,
    Scroll,
    Vertical,
)
from .settings import ParserSettings, RenderSettings
from .timing import BaseTimestamp
from .srt import SubtitleDocument, SubtitleEntry, Timestamp
from .vtt import (
    Anchor,
    CueSettings,
    Line,
    Percentage,
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

__all__ = [
    'Alignment',
    'DuplicateKeyPolicy',
    'LineAlignment',
    'NewlineStyle',
    'Placement',
    'PositionAlignment',
    'Scroll',
    'Vertical',
    'ParserSettings',
    'RenderSettings',
    'BaseTimestamp',
    'SubtitleDocument',
    'SubtitleEntry',
    'Timestamp',
    'Anchor',
    'CueSettings',
    'Line',
    'Percentage',
    'Position',
    'VttBlock',
    'VttComment',
    'VttCue',
    'VttDescription',
    'VttDocument',
    'VttHeader',
    'VttRegion',
    'VttStyle',
    'VttTimestamp',
    'VttTimings',
]
