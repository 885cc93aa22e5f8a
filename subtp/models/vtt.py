# subtp/models/vtt.py
"""
WebVTT (.vtt) document model.

    WEBVTT optional description

    REGION
    id:fred
    width:40%

    NOTE a comment

    cue-id
    00:01.000 --> 00:04.000 line:0 region:fred
    Cue payload

A document is a header followed by an ordered list of blocks. Blocks are
one of VttCue, VttComment, VttStyle or VttRegion and keep the order in
which they appeared. Cue settings and region settings are accepted in any
order but always rendered in a fixed order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar, Iterator

from .enums import (
    Alignment,
    LineAlignment,
    Placement,
    PositionAlignment,
    Scroll,
    Vertical,
)
from .timing import BaseTimestamp

if TYPE_CHECKING:
    from .settings import ParserSettings, RenderSettings


# =============================================================================
# Values
# =============================================================================


@dataclass(frozen=True, order=True)
class VttTimestamp(BaseTimestamp):
    """WebVTT timestamp, always rendered with hours as HH:MM:SS.mmm."""

    SEPARATOR: ClassVar[str] = "."


@dataclass(frozen=True)
class VttTimings:
    start: VttTimestamp = field(default_factory=VttTimestamp)
    end: VttTimestamp = field(default_factory=VttTimestamp)

    def __str__(self) -> str:
        return f"{self.start} --> {self.end}"


@dataclass(frozen=True, order=True)
class Percentage:
    """Percentage in [0, 100]. The range is enforced by the parser only."""

    value: float = 0.0

    def __str__(self) -> str:
        if float(self.value).is_integer():
            return f"{int(self.value)}%"
        # Fixed-point digits of the shortest repr; 1e-05 renders as 0.00001
        return f"{Decimal(repr(float(self.value))):f}%"


@dataclass(frozen=True)
class Anchor:
    x: Percentage = field(default_factory=lambda: Percentage(0.0))
    y: Percentage = field(default_factory=lambda: Percentage(100.0))

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass(frozen=True)
class Line:
    """``line:`` setting; ``value`` is a Percentage or a (signed) line number."""

    value: Percentage | int = field(default_factory=Percentage)
    alignment: LineAlignment | None = None

    @property
    def is_percentage(self) -> bool:
        return isinstance(self.value, Percentage)

    def __str__(self) -> str:
        if self.alignment is None:
            return f"{self.value}"
        return f"{self.value},{self.alignment.value}"


@dataclass(frozen=True)
class Position:
    value: Percentage = field(default_factory=Percentage)
    alignment: PositionAlignment | None = None

    def __str__(self) -> str:
        if self.alignment is None:
            return f"{self.value}"
        return f"{self.value},{self.alignment.value}"


@dataclass
class CueSettings:
    """Cue settings; rendered in field order regardless of input order."""

    vertical: Vertical | None = None
    line: Line | None = None
    position: Position | None = None
    size: Percentage | None = None
    align: Alignment | None = None
    region: str | None = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (self.vertical, self.line, self.position, self.size, self.align, self.region)
        )

    def __str__(self) -> str:
        from ..writers.vtt_writer import render_cue_settings

        return render_cue_settings(self)


# =============================================================================
# Header
# =============================================================================


@dataclass
class VttDescription:
    text: str
    placement: Placement = Placement.SIDE


@dataclass
class VttHeader:
    description: VttDescription | None = None

    def render(self, settings: RenderSettings | None = None) -> str:
        from ..writers.vtt_writer import render_header

        return render_header(self, settings)

    def __str__(self) -> str:
        return self.render()


# =============================================================================
# Blocks
# =============================================================================


class VttBlock:
    """Base class for the four WebVTT block kinds."""

    def render(self, settings: RenderSettings | None = None) -> str:
        from ..writers.vtt_writer import render_block

        return render_block(self, settings)

    def __str__(self) -> str:
        return self.render()


@dataclass
class VttCue(VttBlock):
    identifier: str | None = None
    timings: VttTimings = field(default_factory=VttTimings)
    settings: CueSettings | None = None
    payload: list[str] = field(default_factory=list)


@dataclass
class VttComment(VttBlock):
    text: str
    placement: Placement = Placement.SIDE


@dataclass
class VttStyle(VttBlock):
    """STYLE block; the CSS text is kept verbatim and never interpreted."""

    text: str


@dataclass
class VttRegion(VttBlock):
    """REGION block; rendered in field order regardless of input order."""

    id: str | None = None
    width: Percentage | None = None
    lines: int | None = None
    region_anchor: Anchor | None = None
    viewport_anchor: Anchor | None = None
    scroll: Scroll | None = None


# =============================================================================
# Document
# =============================================================================


@dataclass
class VttDocument:
    header: VttHeader = field(default_factory=VttHeader)
    blocks: list[VttBlock] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str, settings: ParserSettings | None = None) -> VttDocument:
        """
        Parse WebVTT text.

        Raises:
            ParseError: if the text does not match the WebVTT grammar
        """
        from ..parsers.vtt_parser import parse_vtt

        return parse_vtt(text, settings)

    def render(self, settings: RenderSettings | None = None) -> str:
        from ..writers.vtt_writer import render_vtt

        return render_vtt(self, settings)

    def __str__(self) -> str:
        return self.render()

    def __iter__(self) -> Iterator[VttBlock]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def drain(self) -> Iterator[VttBlock]:
        """Remove blocks front to back, yielding each one."""
        while self.blocks:
            yield self.blocks.pop(0)

    @property
    def cues(self) -> list[VttCue]:
        return [block for block in self.blocks if isinstance(block, VttCue)]
