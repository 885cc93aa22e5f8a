# tests/test_errors.py
import logging
import pickle

import pytest

from subtp import ParseError, parse_srt, parse_vtt


def test_parse_error_shape():
    err = ParseError("3:14", "newline", line=3, column=14, offset=45)
    assert str(err) == "Parse error at 3:14: expected newline"
    assert (err.location, err.expected) == ("3:14", "newline")
    assert (err.line, err.column, err.offset) == (3, 14, 45)
    assert isinstance(err, ValueError)


def test_parse_error_pickles():
    err = ParseError("1:1", "EOF", line=1, column=1, offset=0)
    restored = pickle.loads(pickle.dumps(err))
    assert str(restored) == str(err)
    assert restored.offset == 0


def test_location_is_consistent_with_offset():
    text = "1\n00:00:00,000 --> 00:00:01,000\nHello\n\n2\n00:00:01,000 -> 00:00:02,000\nX\n"
    with pytest.raises(ParseError) as exc:
        parse_srt(text)
    err = exc.value
    assert err.location == f"{err.line}:{err.column}"
    assert err.line == 6
    assert err.column == 14
    assert '"-->"' in err.expected


def test_srt_rejects_vtt_input():
    with pytest.raises(ParseError):
        parse_srt("WEBVTT\n\n00:01.000 --> 00:02.000\nHi\n")


def test_vtt_rejects_srt_input():
    with pytest.raises(ParseError) as exc:
        parse_vtt("1\n00:00:00,000 --> 00:00:01,000\nHello\n")
    assert exc.value.location == "1:1"
    assert exc.value.expected == '"WEBVTT"'


def test_failure_is_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="subtp"):
        with pytest.raises(ParseError):
            parse_srt("x")
    assert any("SRT parse failed at 1:1" in record.getMessage() for record in caplog.records)


def test_success_is_logged_at_debug(caplog, vtt_text):
    with caplog.at_level(logging.DEBUG, logger="subtp"):
        parse_vtt(vtt_text)
    assert any("2 cues, 5 blocks" in record.getMessage() for record in caplog.records)
