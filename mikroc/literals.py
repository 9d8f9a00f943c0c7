"""Scanning of number, character and string literals and of comments."""

from __future__ import annotations

import re

from mikroc.source import SourceReader
from mikroc.tokens import TAB_SIZE, Position

MAX_STRING = 256
"""Longest string literal kept; longer ones are truncated and reported."""

_DECIMAL = re.compile(r"[0-9]+")
_HEX = re.compile(r"(?:0[xX])?([0-9a-fA-F]+)")
_BINARY = re.compile(r"0[bB]([01]+)")
_CHAR = re.compile(r"'(.)'", re.DOTALL)
_QUOTE_CHAR = "'\\''"

_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "'": "'",
    '"': '"',
    "\\": "\\",
    "?": "?",
}


def _to_int32(value: int) -> int:
    """Wrap ``value`` into the range of a signed 32-bit integer."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def parse_decimal(text: str) -> int:
    """Return the value of a decimal literal, wrapped to 32 bits."""
    if not _DECIMAL.fullmatch(text):
        raise ValueError(f"not a decimal literal: {text!r}")
    return _to_int32(int(text, 10))


def parse_hex(text: str) -> int:
    """Return the value of a hexadecimal literal, with or without ``0x``."""
    match = _HEX.fullmatch(text)
    if match is None:
        raise ValueError(f"not a hexadecimal literal: {text!r}")
    return _to_int32(int(match.group(1), 16))


def parse_binary(text: str) -> int:
    """Return the value of a ``0b`` binary literal, wrapped to 32 bits."""
    match = _BINARY.fullmatch(text)
    if match is None:
        raise ValueError(f"not a binary literal: {text!r}")
    return _to_int32(int(match.group(1), 2))


def parse_char(text: str) -> int:
    """Return the character code of a quoted character literal.

    ``'\\''`` stands for the single quote; any other literal is one
    character between single quotes, taken as it is.
    """
    if text == _QUOTE_CHAR:
        return ord("'")
    match = _CHAR.fullmatch(text)
    if match is None:
        raise ValueError(f"not a character literal: {text!r}")
    return ord(match.group(1))


def read_string(reader: SourceReader) -> str | None:
    """Read the rest of a string literal whose opening quote was consumed.

    Returns the literal's text, cut to :data:`MAX_STRING` characters.  A
    newline before the closing quote is reported and ends the literal; the
    end of input is reported and gives None.
    """
    reader.mark_token(1)
    chars: list[str] = []
    length = 0
    escaping = False
    too_long_reported = False

    def append(char: str) -> None:
        nonlocal length
        if length < MAX_STRING:
            chars.append(char)
        length += 1

    while True:
        char = reader.read()
        if char is None:
            reader.report("Neukonceny retezec", Position.LINE)
            return None
        if char == "\n":
            reader.report("Chybi znak '\"' na konci retezce", Position.LINE)
            reader.newline()
            return "".join(chars)

        if char == "\t":
            reader.mark_token(TAB_SIZE)
            for _ in range(TAB_SIZE):
                append(" ")
            escaping = False
        else:
            reader.mark_token(1)
            if escaping:
                append(_ESCAPES.get(char, char))
                escaping = False
            elif char == "\\":
                escaping = True
                continue
            elif char == '"':
                return "".join(chars)
            else:
                append(char)

        if length > MAX_STRING and not too_long_reported:
            reader.report("Dlouhy retezec")
            too_long_reported = True


def skip_block_comment(reader: SourceReader) -> bool:
    """Skip a ``/* ... */`` comment whose opener was consumed.

    Returns True once the closing ``*/`` is read; at the end of input the
    unterminated comment is reported and False is returned.
    """
    reader.mark_token(2)
    previous: str | None = None
    while True:
        char = reader.read()
        reader.mark_token(TAB_SIZE if char == "\t" else 1)
        if char is None:
            reader.report("Neukonceny komentar", Position.LINE)
            return False
        if previous == "*" and char == "/":
            return True
        previous = char
        if char == "\n":
            reader.newline()


def skip_line_comment(reader: SourceReader) -> bool:
    """Skip a ``//`` comment up to and including the end of the line.

    Returns True when a newline ended the comment and False when the input
    ended first.
    """
    while True:
        char = reader.read()
        if char is None:
            return False
        if char == "\n":
            reader.newline()
            return True