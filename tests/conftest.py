# tests/conftest.py
import pytest

SRT_SAMPLE = (
    "1\n"
    "00:00:00,000 --> 00:00:02,000\n"
    "Hello, world!\n"
    "\n"
    "2\n"
    "00:00:02,000 --> 00:00:04,000\n"
    "Line one.\n"
    "Line two.\n"
)

VTT_SAMPLE = (
    "WEBVTT - Sample\n"
    "\n"
    "REGION\n"
    "id:fred\n"
    "width:40%\n"
    "lines:3\n"
    "regionanchor:0%,100%\n"
    "viewportanchor:10%,90%\n"
    "scroll:up\n"
    "\n"
    "STYLE\n"
    "::cue {\n"
    "  color: yellow;\n"
    "}\n"
    "\n"
    "NOTE a side comment\n"
    "\n"
    "intro\n"
    "00:00:01.000 --> 00:00:04.000 line:0 region:fred\n"
    "Never drink liquid nitrogen.\n"
    "\n"
    "00:00:05.000 --> 00:00:09.000 vertical:rl line:50%,center position:25%,line-left size:35.5% align:start\n"
    "- It will perforate your stomach.\n"
    "- You could die.\n"
)


@pytest.fixture
def srt_text():
    """Two-entry SubRip file in canonical form."""
    return SRT_SAMPLE


@pytest.fixture
def vtt_text():
    """WebVTT file using every block kind, in canonical form."""
    return VTT_SAMPLE


@pytest.fixture
def cue_text():
    """Build a minimal WebVTT document around one timings line."""
    def build(timings_line: str, payload: str = "Hello") -> str:
        return f"WEBVTT\n\n{timings_line}\n{payload}\n"
    return build
