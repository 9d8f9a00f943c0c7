"""Splits program text into tokens."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator

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
from mikroc.source import Diagnostic, SourceReader
from mikroc.tokens import TAB_SIZE, Token, TokenType


class _End:
    """Marks that scanning must stop before the end of the text."""


_END = _End()

_Result = Token | _End | None
_Handler = Callable[["Lexer", str], _Result]


def _emit(lexer: Lexer, kind: TokenType, text: str, value: int | str | None = None) -> Token:
    reader = lexer.reader
    reader.mark_token(len(text))
    return Token(kind, value, reader.line, reader.column)


def _fixed(kind: TokenType) -> _Handler:
    return lambda lexer, text: _emit(lexer, kind, text)


def _constant(value: int) -> _Handler:
    return lambda lexer, text: _emit(lexer, TokenType.NUMBER, text, value)


def _number(parse: Callable[[str], int]) -> _Handler:
    return lambda lexer, text: _emit(lexer, TokenType.NUMBER, text, parse(text))


def _space(lexer: Lexer, text: str) -> None:
    lexer.reader.mark_token(1)


def _tab(lexer: Lexer, text: str) -> None:
    lexer.reader.mark_token(TAB_SIZE)


def _newline(lexer: Lexer, text: str) -> None:
    lexer.reader.newline()


def _string(lexer: Lexer, text: str) -> _Result:
    reader = lexer.reader
    reader.mark_token(0)
    line, column = reader.line, reader.column
    content = read_string(reader)
    if content is None:
        return _END
    return Token(TokenType.STRING, content, line, column)


def _identifier(lexer: Lexer, text: str) -> Token:
    return _emit(lexer, TokenType.VARIABLE, text, text[:MAX_STRING])


def _block_comment(lexer: Lexer, text: str) -> _Result:
    return None if skip_block_comment(lexer.reader) else _END


def _line_comment(lexer: Lexer, text: str) -> _Result:
    return None if skip_line_comment(lexer.reader) else _END


def _unknown(lexer: Lexer, text: str) -> None:
    lexer.reader.mark_token(len(text))
    lexer.reader.report("Neznamy znak")


def _literal(text: str) -> re.Pattern[str]:
    return re.compile(re.escape(text))


# Rules in priority order: the longest match wins, the earlier rule on a tie.
_RULES: list[tuple[re.Pattern[str], _Handler]] = [
    (_literal(" "), _space),
    (_literal("\t"), _tab),
    (_literal("\n"), _newline),
    (re.compile(r"[0-9]+"), _number(parse_decimal)),
    (re.compile(r"0[xX][0-9a-fA-F]+"), _number(parse_hex)),
    (re.compile(r"0[bB][01]+"), _number(parse_binary)),
    (_literal("false"), _constant(0)),
    (_literal("true"), _constant(1)),
    (_literal('"'), _string),
    (re.compile(r"'[\s\S]'"), _number(parse_char)),
    (_literal("'\\''"), _constant(ord("'"))),
    (_literal("{"), _fixed(TokenType.LBRACE)),
    (_literal("}"), _fixed(TokenType.RBRACE)),
    (_literal("("), _fixed(TokenType.LPAREN)),
    (_literal(")"), _fixed(TokenType.RPAREN)),
    (_literal("++"), _fixed(TokenType.INCREMENT)),
    (_literal("--"), _fixed(TokenType.DECREMENT)),
    (_literal("!"), _fixed(TokenType.BANG)),
    (_literal("not"), _fixed(TokenType.NOT)),
    (_literal("~"), _fixed(TokenType.TILDE)),
    (_literal("*"), _fixed(TokenType.STAR)),
    (_literal("/"), _fixed(TokenType.SLASH)),
    (_literal("%"), _fixed(TokenType.PERCENT)),
    (_literal("+"), _fixed(TokenType.PLUS)),
    (_literal("-"), _fixed(TokenType.MINUS)),
    (_literal("<<"), _fixed(TokenType.SHIFT_LEFT)),
    (_literal(">>"), _fixed(TokenType.SHIFT_RIGHT)),
    (_literal("<"), _fixed(TokenType.LESS)),
    (_literal(">"), _fixed(TokenType.GREATER)),
    (_literal("<="), _fixed(TokenType.LESS_EQUAL)),
    (_literal(">="), _fixed(TokenType.GREATER_EQUAL)),
    (_literal("=="), _fixed(TokenType.EQUAL)),
    (_literal("!="), _fixed(TokenType.NOT_EQUAL)),
    (_literal("&"), _fixed(TokenType.AMPERSAND)),
    (_literal("^"), _fixed(TokenType.CARET)),
    (_literal("|"), _fixed(TokenType.PIPE)),
    (_literal("&&"), _fixed(TokenType.AND)),
    (_literal("and"), _fixed(TokenType.AND)),
    (_literal("||"), _fixed(TokenType.OR)),
    (_literal("or"), _fixed(TokenType.OR)),
    (_literal("="), _fixed(TokenType.ASSIGN)),
    (_literal("*="), _fixed(TokenType.MUL_ASSIGN)),
    (_literal("/="), _fixed(TokenType.DIV_ASSIGN)),
    (_literal("%="), _fixed(TokenType.MOD_ASSIGN)),
    (_literal("+="), _fixed(TokenType.ADD_ASSIGN)),
    (_literal("-="), _fixed(TokenType.SUB_ASSIGN)),
    (_literal("<<="), _fixed(TokenType.SHL_ASSIGN)),
    (_literal(">>="), _fixed(TokenType.SHR_ASSIGN)),
    (_literal("&="), _fixed(TokenType.AND_ASSIGN)),
    (_literal("^="), _fixed(TokenType.XOR_ASSIGN)),
    (_literal("|="), _fixed(TokenType.OR_ASSIGN)),
    (_literal("if"), _fixed(TokenType.IF)),
    (_literal("else"), _fixed(TokenType.ELSE)),
    (_literal("for"), _fixed(TokenType.FOR)),
    (_literal("while"), _fixed(TokenType.WHILE)),
    (_literal("do"), _fixed(TokenType.DO)),
    (_literal("print"), _fixed(TokenType.PRINT)),
    (_literal("scan"), _fixed(TokenType.SCAN)),
    (re.compile(r"[A-Za-z_][A-Za-z0-9_]*"), _identifier),
    (_literal(","), _fixed(TokenType.COMMA)),
    (_literal(";"), _fixed(TokenType.SEMICOLON)),
    (_literal("/*"), _block_comment),
    (_literal("//"), _line_comment),
    (re.compile(r"[\s\S]"), _unknown),
]


class Lexer:
    """Produces the tokens of one program text and collects lexical errors."""

    def __init__(self, text: str) -> None:
        self.reader = SourceReader(text)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Errors reported while scanning so far."""
        return self.reader.diagnostics

    def _longest_match(self) -> tuple[str, _Handler]:
        best_text = ""
        best_handler: _Handler = _unknown
        for pattern, handler in _RULES:
            match = self.reader.match(pattern)
            if match is not None and len(match.group()) > len(best_text):
                best_text, best_handler = match.group(), handler
        return best_text, best_handler

    def tokens(self) -> Iterator[Token]:
        """Yield tokens until the text ends or an unterminated construct stops it."""
        reader = self.reader
        while not reader.at_end:
            text, handler = self._longest_match()
            reader.advance(len(text))
            result = handler(self, text)
            if isinstance(result, _End):
                return
            if result is not None:
                yield result


def tokenize(text: str) -> list[Token]:
    """Return all tokens of ``text``."""
    return list(Lexer(text).tokens())