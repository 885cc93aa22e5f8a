# tests/test_primitives.py
import pytest

from subtp.errors import ParseError
from subtp.models.vtt import Percentage
from subtp.parsers.base import GrammarParser, describe_expected, line_and_column


def run(text, rule_name):
    parser = GrammarParser(text)
    return parser.run(getattr(parser, rule_name))


# --- numbers -----------------------------------------------------------------

def test_fixed_width_digits():
    assert run("42", "two_digits") == 42
    assert run("007", "three_digits") == 7

    with pytest.raises(ParseError):
        run("4", "two_digits")
    with pytest.raises(ParseError):
        run("42", "three_digits")


def test_fixed_width_rejects_extra_digits():
    with pytest.raises(ParseError) as exc:
        run("123", "two_digits")
    assert exc.value.expected == "EOF"
    assert exc.value.location == "1:3"


def test_number_and_signed_int():
    assert run("123456", "number") == 123456
    assert run("-5", "signed_int") == -5
    assert run("+7", "signed_int") == 7

    with pytest.raises(ParseError):
        run("-5", "number")


def test_float_requires_decimal_point():
    assert run("12.25", "float_number") == 12.25

    with pytest.raises(ParseError):
        run("12", "float_number")
    with pytest.raises(ParseError):
        run("12.", "float_number")


@pytest.mark.parametrize("text, value", [
    ("0%", 0.0),
    ("100%", 100.0),
    ("50%", 50.0),
    ("12.5%", 12.5),
    ("100.0%", 100.0),
])
def test_percentage_accepts_range(text, value):
    assert run(text, "percentage") == Percentage(value)


@pytest.mark.parametrize("text", ["101%", "100.5%", "250%"])
def test_percentage_rejects_out_of_range(text):
    with pytest.raises(ParseError) as exc:
        run(text, "percentage")
    assert exc.value.expected == "percentage between 0% and 100%"
    # reported after the percent sign
    assert exc.value.offset == len(text)


def test_percentage_requires_sign():
    with pytest.raises(ParseError) as exc:
        run("50", "percentage")
    assert '"%"' in exc.value.expected


# --- text --------------------------------------------------------------------

def test_sequence_stops_at_whitespace():
    parser = GrammarParser("abc def")
    assert parser.sequence() == "abc"
    assert parser.pos == 3


def test_line_is_trimmed_and_consumes_newline():
    parser = GrammarParser("Hello  \r\nrest")
    assert parser.line() == "Hello"
    assert parser.text[parser.pos:] == "rest"


def test_line_rejects_leading_whitespace():
    with pytest.raises(ParseError):
        run(" Hello\n", "line")


def test_multiline_stops_at_blank_line():
    parser = GrammarParser("a \nb\n\nc\n")
    assert parser.multiline() == ["a", "b"]
    assert parser.pos == 5


def test_multiline_treats_whitespace_only_line_as_blank():
    parser = GrammarParser("a\n   \nb\n")
    assert parser.multiline() == ["a"]


def test_multiline_requires_one_line():
    with pytest.raises(ParseError):
        run("\n", "multiline")
    with pytest.raises(ParseError):
        run("", "multiline")


def test_multiline_requires_terminating_newline():
    with pytest.raises(ParseError) as exc:
        run("Hello", "multiline")
    assert exc.value.expected == "newline"
    assert exc.value.location == "1:6"


def test_text_block_keeps_raw_lines():
    parser = GrammarParser("  a {\r\nb \n\nnext")
    assert parser.text_block() == "  a {\nb "


# --- whitespace --------------------------------------------------------------

@pytest.mark.parametrize("text", ["\n", "\r\n", "\r"])
def test_newline_variants(text):
    assert run(text, "newline") == text


def test_blank_lines_accepts_whitespace_only_lines():
    assert run("\n  \n\t\n", "blank_lines") == "\n  \n\t\n"


# --- combinators -------------------------------------------------------------

def test_choice_is_ordered():
    parser = GrammarParser("abc")
    result = parser.choice(lambda: parser.literal("ab"), lambda: parser.literal("abc"))
    assert result == "ab"
    assert parser.pos == 2


def test_many_stops_on_zero_width_match():
    parser = GrammarParser("x")
    assert parser.many(lambda: parser.optional(parser.whitespace)) == [None]
    assert parser.pos == 0


def test_separated_backtracks_dangling_separator():
    parser = GrammarParser("a,a,")
    items = parser.separated(lambda: parser.literal("a"), lambda: parser.literal(","))
    assert items == ["a", "a"]
    assert parser.pos == 3


def test_not_followed_by_does_not_consume():
    parser = GrammarParser("ab")
    parser.not_followed_by(lambda: parser.literal("b"), "not b")
    assert parser.pos == 0

    with pytest.raises(ParseError) as exc:
        parser.run(lambda: parser.not_followed_by(lambda: parser.literal("a"), "not a"))
    assert exc.value.expected == "not a"


def test_furthest_failure_wins():
    parser = GrammarParser("abd")

    def rule():
        return parser.choice(
            lambda: parser.literal("abc"),
            lambda: (parser.literal("a"), parser.literal("b"), parser.literal("c")),
            lambda: parser.literal("x"),
        )

    with pytest.raises(ParseError) as exc:
        parser.run(rule)
    assert exc.value.location == "1:3"
    assert exc.value.expected == '"c"'


def test_expectations_at_same_position_are_merged():
    parser = GrammarParser("z")
    with pytest.raises(ParseError) as exc:
        parser.run(lambda: parser.choice(
            lambda: parser.literal("b"),
            lambda: parser.literal("a"),
        ))
    assert exc.value.expected == 'one of "a", "b"'


def test_quiet_suppresses_expectations():
    parser = GrammarParser("z")
    with pytest.raises(ParseError) as exc:
        def rule():
            with parser.quiet():
                parser.optional(lambda: parser.literal("q"))
            parser.literal("a")
        parser.run(rule)
    assert exc.value.expected == '"a"'


# --- locations ---------------------------------------------------------------

def test_line_and_column_counts_all_newline_styles():
    text = "a\r\nb\rc\nd"
    assert line_and_column(text, 0) == (1, 1)
    assert line_and_column(text, 3) == (2, 1)
    assert line_and_column(text, 5) == (3, 1)
    assert line_and_column(text, 7) == (4, 1)
    assert line_and_column(text, 8) == (4, 2)


def test_describe_expected():
    assert describe_expected({"EOF"}) == "EOF"
    assert describe_expected({"newline", "EOF"}) == "one of EOF, newline"
    assert describe_expected(set()) == "valid input"
