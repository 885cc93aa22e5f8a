# subtp/writers/vtt_writer.py
# -*- coding: utf-8 -*-
"""
WebVTT (.vtt) renderer.

Output layout:
- Header: "WEBVTT", then " description" or "\\ndescription", then a newline
- One blank line after the header
- Blocks joined by one blank line, each ending with its own newline

Cue settings and region settings are written in a fixed key order no matter
what order they were parsed in.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ..models.enums import Placement
from ..models.settings import RenderSettings
from ..models.vtt import VttComment, VttCue, VttRegion, VttStyle
from .srt_writer import apply_newline_style

if TYPE_CHECKING:
    from ..models.vtt import CueSettings, VttBlock, VttDocument, VttHeader


def render_vtt(document: 'VttDocument', settings: Optional[RenderSettings] = None) -> str:
    """
    Render a VttDocument to WebVTT text.

    Args:
        document: Document to render
        settings: Render settings (defaults when omitted)

    Returns:
        WebVTT text; never validates field ranges
    """
    content = render_header(document.header) + '\n'
    content += '\n'.join(render_block(block) for block in document.blocks)
    return apply_newline_style(content, settings)


def render_header(header: 'VttHeader', settings: Optional[RenderSettings] = None) -> str:
    description = header.description
    if description is None:
        content = 'WEBVTT\n'
    elif description.placement is Placement.BELOW:
        content = f'WEBVTT\n{description.text}\n'
    else:
        content = f'WEBVTT {description.text}\n'
    return apply_newline_style(content, settings)


def render_block(block: 'VttBlock', settings: Optional[RenderSettings] = None) -> str:
    """Render any block variant.

    Raises:
        TypeError: for objects that are not one of the four block kinds.
    """
    if isinstance(block, VttCue):
        content = _render_cue(block)
    elif isinstance(block, VttComment):
        content = _render_comment(block)
    elif isinstance(block, VttStyle):
        content = f'STYLE\n{block.text}\n'
    elif isinstance(block, VttRegion):
        content = _render_region(block)
    else:
        raise TypeError(f"Unsupported WebVTT block: {type(block).__name__}")
    return apply_newline_style(content, settings)


def render_cue_settings(settings: 'CueSettings') -> str:
    """Space separated ``key:value`` tokens in canonical order."""
    tokens = []
    if settings.vertical is not None:
        tokens.append(f'vertical:{settings.vertical.value}')
    if settings.line is not None:
        tokens.append(f'line:{settings.line}')
    if settings.position is not None:
        tokens.append(f'position:{settings.position}')
    if settings.size is not None:
        tokens.append(f'size:{settings.size}')
    if settings.align is not None:
        tokens.append(f'align:{settings.align.value}')
    if settings.region is not None:
        tokens.append(f'region:{settings.region}')
    return ' '.join(tokens)


def _render_cue(cue: VttCue) -> str:
    lines: List[str] = []
    if cue.identifier is not None:
        lines.append(cue.identifier)

    timing_line = str(cue.timings)
    if cue.settings is not None and not cue.settings.is_empty():
        timing_line += ' ' + render_cue_settings(cue.settings)
    lines.append(timing_line)

    lines.extend(cue.payload)
    return '\n'.join(lines) + '\n'


def _render_comment(comment: VttComment) -> str:
    if comment.placement is Placement.BELOW:
        return f'NOTE\n{comment.text}\n'
    return f'NOTE {comment.text}\n'


def _render_region(region: VttRegion) -> str:
    lines = ['REGION']
    if region.id is not None:
        lines.append(f'id:{region.id}')
    if region.width is not None:
        lines.append(f'width:{region.width}')
    if region.lines is not None:
        lines.append(f'lines:{region.lines}')
    if region.region_anchor is not None:
        lines.append(f'regionanchor:{region.region_anchor}')
    if region.viewport_anchor is not None:
        lines.append(f'viewportanchor:{region.viewport_anchor}')
    if region.scroll is not None:
        lines.append(f'scroll:{region.scroll.value}')
    return '\n'.join(lines) + '\n'
