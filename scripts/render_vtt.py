#!/usr/bin/env python3
"""
render_vtt.py
---------------------------------
Build a WebVTT document in code and render it, growing it block by block.

Usage:
    python3 scripts/render_vtt.py [--crlf]
"""
from __future__ import annotations

import sys

from subtp import (
    Alignment,
    Anchor,
    CueSettings,
    Line,
    LineAlignment,
    NewlineStyle,
    Percentage,
    Placement,
    Position,
    PositionAlignment,
    RenderSettings,
    Scroll,
    Vertical,
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


def main(argv: list[str]) -> int:
    settings = RenderSettings(newline=NewlineStyle.CRLF if "--crlf" in argv else NewlineStyle.LF)

    document = VttDocument()
    print(f"Empty document:\n{document.render(settings)}")

    document.header = VttHeader(VttDescription("This is a description.", Placement.SIDE))

    document.blocks.append(VttRegion(
        id="region_id",
        width=Percentage(100.0),
        lines=3,
        region_anchor=Anchor(Percentage(0.0), Percentage(100.0)),
        viewport_anchor=Anchor(Percentage(0.0), Percentage(100.0)),
        scroll=Scroll.UP,
    ))
    document.blocks.append(VttStyle("::cue {\n  background-image: linear-gradient(to bottom, dimgray, lightgray);\n}"))
    document.blocks.append(VttComment("This is a comment.", Placement.SIDE))
    document.blocks.append(VttCue(
        identifier="first",
        timings=VttTimings(VttTimestamp(0, 0, 0, 0), VttTimestamp(0, 0, 2, 0)),
        settings=CueSettings(
            vertical=Vertical.RL,
            line=Line(Percentage(100.0), LineAlignment.CENTER),
            position=Position(Percentage(50.0), PositionAlignment.LINE_LEFT),
            size=Percentage(50.0),
            align=Alignment.CENTER,
            region="region_id",
        ),
        payload=["This is the first cue."],
    ))
    document.blocks.append(VttCue(
        timings=VttTimings(VttTimestamp(0, 0, 2, 0), VttTimestamp(0, 0, 4, 0)),
        payload=["This is the second cue.", "Cue payload can span multiple lines."],
    ))

    print(f"Full document:\n{document.render(settings)}")

    # Rendered output parses back to the same document
    assert VttDocument.parse(document.render(settings)) == document
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
