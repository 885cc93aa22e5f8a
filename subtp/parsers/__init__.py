# subtp/parsers/__init__.py
# -*- coding: utf-8 -*-
"""SubRip and WebVTT grammars."""

from .srt_parser import SrtParser, parse_srt
from .vtt_parser import VttParser, parse_vtt

__all__ = ['SrtParser', 'parse_srt', 'VttParser', 'parse_vtt']
