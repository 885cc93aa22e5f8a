# subtp/pysubs2_bridge.py
# -*- coding: utf-8 -*-
"""
Interop with pysubs2 event files.

Maps SubRip and WebVTT documents onto ``pysubs2.SSAFile`` so callers can use
pysubs2's styling, shifting and format writers, and maps SSA events back to
SubRip entries. Times cross the boundary as integer milliseconds.
"""
from __future__ import annotations

import logging

from pysubs2 import SSAEvent, SSAFile

from .models.srt import SubtitleDocument, SubtitleEntry, Timestamp
from .models.vtt import VttDocument

logger = logging.getLogger(__name__)

# ASS hard line break
ASS_NEWLINE = '\\N'


def srt_to_ssafile(document: SubtitleDocument) -> SSAFile:
    """
    Build an SSAFile with one Default-style event per SRT entry.

    Args:
        document: Parsed or hand-built SubRip document

    Returns:
        SSAFile whose events follow the document's entry order
    """
    subs = SSAFile()
    for entry in document:
        subs.events.append(SSAEvent(
            start=entry.start.to_milliseconds(),
            end=entry.end.to_milliseconds(),
            text=ASS_NEWLINE.join(entry.text),
            style='Default',
        ))
    logger.info(f"Converted {len(subs.events)} SRT entries to SSA events")
    return subs


def ssafile_to_srt(subs: SSAFile) -> SubtitleDocument:
    """
    Build a SubtitleDocument from SSA dialogue events.

    Comment events and events without visible text are skipped. Sequence
    numbers are assigned from 1 in event order; override tags are dropped
    via ``SSAEvent.plaintext``.
    """
    entries = []
    skipped = 0
    for event in subs.events:
        if event.is_comment:
            skipped += 1
            continue
        lines = [line.strip() for line in event.plaintext.splitlines()]
        lines = [line for line in lines if line]
        if not lines:
            skipped += 1
            continue
        entries.append(SubtitleEntry(
            sequence=len(entries) + 1,
            start=Timestamp.from_milliseconds(max(0, event.start)),
            end=Timestamp.from_milliseconds(max(0, event.end)),
            text=lines,
        ))

    if skipped:
        logger.warning(f"Skipped {skipped} comment or empty SSA events")
    logger.info(f"Converted {len(entries)} SSA events to SRT entries")
    return SubtitleDocument(entries)


def vtt_to_ssafile(document: VttDocument) -> SSAFile:
    """
    Build an SSAFile from the cues of a WebVTT document.

    Comments, styles and regions have no event counterpart and are not
    carried over. A cue identifier becomes the event's ``name``.
    """
    subs = SSAFile()
    for cue in document.cues:
        subs.events.append(SSAEvent(
            start=cue.timings.start.to_milliseconds(),
            end=cue.timings.end.to_milliseconds(),
            text=ASS_NEWLINE.join(cue.payload),
            style='Default',
            name=cue.identifier or '',
        ))
    skipped = len(document) - len(subs.events)
    if skipped:
        logger.warning(f"Skipped {skipped} non-cue WebVTT blocks")
    logger.info(f"Converted {len(subs.events)} WebVTT cues to SSA events")
    return subs
