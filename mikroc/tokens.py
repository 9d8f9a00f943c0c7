"""Token kinds, error-position styles and the token record used by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

TAB_SIZE = 4
"""Number of columns a tab character advances."""


class TokenType(IntEnum):
    """Kinds of tokens and of syntax tree nodes.

    Single-character tokens use the character code as their value; the
    named tokens use the numbers the grammar assigns to them.  ``SEQUENCE``
    is the kind of a node that chains two statements.
    """

    SEQUENCE = 0

    BANG = ord("!")
    PERCENT = ord("%")
    AMPERSAND = ord("&")
    LPAREN = ord("(")
    RPAREN = ord(")")
    STAR = ord("*")
    PLUS = ord("+")
    COMMA = ord(",")
    MINUS = ord("-")
    SLASH = ord("/")
    SEMICOLON = ord(";")
    LESS = ord("<")
    ASSIGN = ord("=")
    GREATER = ord(">")
    CARET = ord("^")
    LBRACE = ord("{")
    PIPE = ord("|")
    RBRACE = ord("}")
    TILDE = ord("~")

    NUMBER = 258
    STRING = 259
    VARIABLE = 260
    IF = 261
    ELSE = 262
    FOR = 263
    WHILE = 264
    DO = 265
    PRINT = 266
    SCAN = 267
    OR_ASSIGN = 268
    XOR_ASSIGN = 269
    AND_ASSIGN = 270
    SHR_ASSIGN = 271
    SHL_ASSIGN = 272
    SUB_ASSIGN = 273
    ADD_ASSIGN = 274
    MOD_ASSIGN = 275
    DIV_ASSIGN = 276
    MUL_ASSIGN = 277
    OR = 278
    AND = 279
    NOT_EQUAL = 280
    EQUAL = 281
    GREATER_EQUAL = 282
    LESS_EQUAL = 283
    SHIFT_RIGHT = 284
    SHIFT_LEFT = 285
    UNARY_PLUS = 286
    UNARY_MINUS = 287
    NOT = 288
    DECREMENT = 289
    INCREMENT = 290


class Position(Enum):
    """How much of the current source position an error message shows."""

    NONE = 0
    LINE = 1
    COLUMN = 2


@dataclass(frozen=True)
class Token:
    """One lexical token with its semantic value and source location."""

    type: TokenType
    value: int | str | None = None
    line: int = 1
    column: int = 1

    def is_literal(self) -> bool:
        """Return True for number and string literals."""
        return self.type in (TokenType.NUMBER, TokenType.STRING)