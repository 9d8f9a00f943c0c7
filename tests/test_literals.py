import pytest

from mikroc.literals import (
    MAX_STRING,
    parse_binary,
    parse_char,
    parse_decimal,
    parse_hex,
    read_string,
    skip_block_comment,
    skip_line_comment,
)
from mikroc.source import SourceReader
from mikroc.tokens import TAB_SIZE, Position


def test_parse_decimal_value():
    assert parse_decimal("42") == 42


def test_parse_decimal_wraps_to_int32():
    assert parse_decimal(str(2**32 - 1)) == -1


@pytest.mark.parametrize("value", [0, 1, 7, 255, 1000, 123456, 2**31 - 1])
def test_number_round_trips(value):
    assert parse_decimal(str(value)) == value
    assert parse_hex(hex(value)) == value
    assert parse_hex(format(value, "X")) == value
    assert parse_binary("0b" + format(value, "b")) == value


def test_parse_hex_prefixes():
    assert parse_hex("0x1F") == 0x1F
    assert parse_hex("0XfF") == 0xFF


def test_parse_binary_value():
    assert parse_binary("0b101") == 0b101
    assert parse_binary("0B11") == 0b11


@pytest.mark.parametrize("text", ["", "abc", "12a"])
def test_parse_decimal_rejects(text):
    with pytest.raises(ValueError):
        parse_decimal(text)


@pytest.mark.parametrize("text", ["0x", "0xg", "zz"])
def test_parse_hex_rejects(text):
    with pytest.raises(ValueError):
        parse_hex(text)


@pytest.mark.parametrize("text", ["0b", "0b2", "101"])
def test_parse_binary_rejects(text):
    with pytest.raises(ValueError):
        parse_binary(text)


def test_parse_char():
    assert parse_char("'a'") == ord("a")
    assert parse_char("'\n'") == ord("\n")
    assert parse_char("'\\''") == ord("'")


@pytest.mark.parametrize("text", ["'ab'", "a", "''"])
def test_parse_char_rejects(text):
    with pytest.raises(ValueError):
        parse_char(text)


def test_read_string_plain():
    reader = SourceReader('abc" rest')
    assert read_string(reader) == "abc"
    assert reader.peek() == " "
    assert reader.diagnostics == []


def test_read_string_escapes():
    reader = SourceReader('a\\nb\\t\\"\\\\\\q"')
    assert read_string(reader) == 'a\nb\t"\\q'


def test_read_string_tab_becomes_spaces():
    reader = SourceReader('a\tb"')
    assert read_string(reader) == "a" + " " * TAB_SIZE + "b"


def test_read_string_newline_ends_literal():
    reader = SourceReader("ab\ncd")
    assert read_string(reader) == "ab"
    assert reader.line == 2
    assert reader.peek() == "c"
    assert [d.message for d in reader.diagnostics] == ["Chybi znak '\"' na konci retezce"]
    assert reader.diagnostics[0].position is Position.LINE


def test_read_string_end_of_input():
    reader = SourceReader("abc")
    assert read_string(reader) is None
    assert [d.message for d in reader.diagnostics] == ["Neukonceny retezec"]


def test_read_string_too_long_is_truncated_and_reported_once():
    reader = SourceReader("x" * (MAX_STRING + 50) + '"')
    result = read_string(reader)
    assert result == "x" * MAX_STRING
    assert [d.message for d in reader.diagnostics] == ["Dlouhy retezec"]
    assert reader.at_end


def test_read_string_column_tracking():
    reader = SourceReader('ab"')
    read_string(reader)
    assert reader.column == 4


def test_skip_block_comment_closed():
    reader = SourceReader(" x */y")
    assert skip_block_comment(reader) is True
    assert reader.peek() == "y"
    assert reader.diagnostics == []


def test_skip_block_comment_slash_alone_does_not_close():
    reader = SourceReader("/ */z")
    assert skip_block_comment(reader) is True
    assert reader.peek() == "z"


def test_skip_block_comment_counts_lines():
    reader = SourceReader("a\nb\n*/q")
    assert skip_block_comment(reader) is True
    assert reader.line == 3
    assert reader.peek() == "q"


def test_skip_block_comment_unterminated():
    reader = SourceReader("never closed *")
    assert skip_block_comment(reader) is False
    assert [d.message for d in reader.diagnostics] == ["Neukonceny komentar"]
    assert reader.diagnostics[0].position is Position.LINE


def test_skip_line_comment():
    reader = SourceReader(" hi\nnext")
    assert skip_line_comment(reader) is True
    assert reader.line == 2
    assert reader.column == 1
    assert reader.peek() == "n"


def test_skip_line_comment_end_of_input():
    reader = SourceReader(" trailing")
    assert skip_line_comment(reader) is False
    assert reader.at_end
    assert reader.diagnostics == []