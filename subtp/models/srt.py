# subtp/models/srt.py
"""
SubRip (.srt) document model.

    1
    00:00:01,000 --> 00:00:04,000
    First subtitle line
    Maybe second line

    2
    00:00:05,000 --> 00:00:08,000
    Second subtitle

SubtitleEntry compares and sorts by sequence number only, so
``sorted(document)`` orders entries by their slot while ignoring content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Iterator

from .timing import BaseTimestamp

if TYPE_CHECKING:
    from .settings import ParserSettings, RenderSettings


@dataclass(frozen=True, order=True)
class Timestamp(BaseTimestamp):
    """SRT timestamp, rendered as HH:MM:SS,mmm."""

    SEPARATOR: ClassVar[str] = ","


@dataclass(order=True)
class SubtitleEntry:
    """A single numbered subtitle. Equality and ordering use ``sequence`` only."""

    sequence: int
    start: Timestamp = field(default_factory=Timestamp, compare=False)
    end: Timestamp = field(default_factory=Timestamp, compare=False)
    text: list[str] = field(default_factory=list, compare=False)

    @property
    def duration(self) -> int:
        """Duration in milliseconds (may be negative for inverted timings)."""
        return self.end.to_milliseconds() - self.start.to_milliseconds()

    def render(self, settings: RenderSettings | None = None) -> str:
        from ..writers.srt_writer import render_entry

        return render_entry(self, settings)

    def __str__(self) -> str:
        return self.render()


@dataclass
class SubtitleDocument:
    """Ordered collection of SRT entries."""

    entries: list[SubtitleEntry] = field(default_factory=list)

    # =========================================================================
    # Factory / Render
    # =========================================================================

    @classmethod
    def parse(cls, text: str, settings: ParserSettings | None = None) -> SubtitleDocument:
        """
        Parse SubRip text.

        Raises:
            ParseError: if the text does not match the SRT grammar
        """
        from ..parsers.srt_parser import parse_srt

        return parse_srt(text, settings)

    def render(self, settings: RenderSettings | None = None) -> str:
        """Render to SubRip text. Never validates field ranges."""
        from ..writers.srt_writer import render_srt

        return render_srt(self, settings)

    def __str__(self) -> str:
        return self.render()

    # =========================================================================
    # Sequence access
    # =========================================================================

    def __iter__(self) -> Iterator[SubtitleEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def drain(self) -> Iterator[SubtitleEntry]:
        """Remove entries front to back, yielding each one."""
        while self.entries:
            yield self.entries.pop(0)

    def sort_by_sequence(self) -> None:
        self.entries.sort()
