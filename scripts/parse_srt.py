#!/usr/bin/env python3
"""
parse_srt.py
---------------------------------
Parse SubRip text, print the model, render it back and drain the entries.

Usage:
    python3 scripts/parse_srt.py
"""
from __future__ import annotations

import logging

from subtp import ParseError, SubtitleDocument

TEXT = """
1
00:00:00,000 --> 00:00:02,000
This is the first subtitle.

2
00:00:02,000 --> 00:00:04,000
This is the second subtitle.
Subtitle text can span multiple lines.
"""


def main() -> int:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        document = SubtitleDocument.parse(TEXT)
    except ParseError as e:
        print(f"[ERROR] {e}")
        return 1

    print(f"Parsed srt:\n{document!r}\n")
    print(f"Rendered srt:\n{document.render()}")

    print("Drain entries:")
    for entry in document.drain():
        print(f"  #{entry.sequence} {entry.start} -> {entry.end} ({entry.duration} ms): {entry.text}")

    # Malformed input reports the furthest position reached
    try:
        SubtitleDocument.parse("1\n\n00:00:00,000 --> 00:00:01,000\nHello\n")
    except ParseError as e:
        print(f"\nExpected failure: {e}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
