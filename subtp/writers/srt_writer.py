# subtp/writers/srt_writer.py
# -*- coding: utf-8 -*-
"""
SubRip (.srt) renderer.

Each entry renders as:

    sequence
    HH:MM:SS,mmm --> HH:MM:SS,mmm
    payload lines
    (blank line between entries)

The renderer trusts its input: out-of-range fields are written as-is and
nothing is ever rejected.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..models.settings import RenderSettings

if TYPE_CHECKING:
    from ..models.srt import SubtitleDocument, SubtitleEntry


def render_entry(entry: 'SubtitleEntry', settings: Optional[RenderSettings] = None) -> str:
    """Render a single entry, ending with exactly one newline."""
    lines = [
        str(entry.sequence),
        f'{entry.start} --> {entry.end}',
        *entry.text,
    ]
    return apply_newline_style('\n'.join(lines) + '\n', settings)


def render_srt(document: 'SubtitleDocument', settings: Optional[RenderSettings] = None) -> str:
    """
    Render a SubtitleDocument to SubRip text.

    Args:
        document: Document to render
        settings: Render settings (defaults when omitted)

    Returns:
        Entries joined by one blank line; empty string for an empty document
    """
    content = '\n'.join(render_entry(entry) for entry in document.entries)
    return apply_newline_style(content, settings)


def apply_newline_style(content: str, settings: Optional[RenderSettings]) -> str:
    """Convert ``\\n`` line endings to the configured newline sequence."""
    if settings is None:
        return content
    newline = settings.newline.sequence
    if newline == '\n':
        return content
    return content.replace('\n', newline)
