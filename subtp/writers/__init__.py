# subtp/writers/__init__.py
"""Subtitle text renderers."""

from .srt_writer import render_entry, render_srt
from .vtt_writer import render_block, render_cue_settings, render_header, render_vtt

__all__ = [
    "render_entry",
    "render_srt",
    "render_block",
    "render_cue_settings",
    "render_header",
    "render_vtt",
]
