import pytest

from mikroc.lexer import Lexer, tokenize
from mikroc.literals import MAX_STRING
from mikroc.tokens import TokenType


def kinds(text):
    return [token.type for token in tokenize(text)]


def test_assignment_statement():
    tokens = tokenize("a = 5;")
    assert [t.type for t in tokens] == [
        TokenType.VARIABLE,
        TokenType.ASSIGN,
        TokenType.NUMBER,
        TokenType.SEMICOLON,
    ]
    assert tokens[0].value == "a"
    assert tokens[2].value == 5


@pytest.mark.parametrize(
    "text, kind",
    [
        ("if", TokenType.IF),
        ("else", TokenType.ELSE),
        ("for", TokenType.FOR),
        ("while", TokenType.WHILE),
        ("do", TokenType.DO),
        ("print", TokenType.PRINT),
        ("scan", TokenType.SCAN),
        ("not", TokenType.NOT),
        ("and", TokenType.AND),
        ("or", TokenType.OR),
    ],
)
def test_keywords(text, kind):
    assert kinds(text) == [kind]


def test_keyword_prefix_is_identifier():
    tokens = tokenize("iffy")
    assert [t.type for t in tokens] == [TokenType.VARIABLE]
    assert tokens[0].value == "iffy"


@pytest.mark.parametrize(
    "text, kind",
    [
        ("<<=", TokenType.SHL_ASSIGN),
        (">>=", TokenType.SHR_ASSIGN),
        ("<<", TokenType.SHIFT_LEFT),
        ("<=", TokenType.LESS_EQUAL),
        ("==", TokenType.EQUAL),
        ("!=", TokenType.NOT_EQUAL),
        ("&&", TokenType.AND),
        ("||", TokenType.OR),
        ("++", TokenType.INCREMENT),
        ("--", TokenType.DECREMENT),
        ("+=", TokenType.ADD_ASSIGN),
        ("|=", TokenType.OR_ASSIGN),
        ("~", TokenType.TILDE),
    ],
)
def test_operators_take_longest_match(text, kind):
    assert kinds(text) == [kind]


def test_hex_and_binary_literals():
    tokens = tokenize("0x10 0b101")
    assert [t.value for t in tokens] == [16, 5]
    assert all(t.type is TokenType.NUMBER for t in tokens)


def test_true_and_false():
    assert [t.value for t in tokenize("true false")] == [1, 0]


def test_character_literals():
    tokens = tokenize("'A' '\\''")
    assert [t.value for t in tokens] == [ord("A"), ord("'")]


def test_string_literal_with_escape():
    tokens = tokenize('print "hi\\n";')
    assert tokens[1].type is TokenType.STRING
    assert tokens[1].value == "hi\n"
    assert tokens[2].type is TokenType.SEMICOLON


def test_comments_are_skipped():
    text = "a /* b\n c */ d // e\nf"
    tokens = tokenize(text)
    assert [t.value for t in tokens] == ["a", "d", "f"]
    assert tokens[2].line == tokens[1].line + 1


def test_line_numbers_advance():
    tokens = tokenize("a\nb")
    assert tokens[1].line == tokens[0].line + 1
    assert tokens[1].column == tokens[0].column


def test_columns_follow_previous_tokens():
    tokens = tokenize("ab cd")
    assert tokens[0].column == 1
    assert tokens[1].column == 4


def test_long_identifier_truncated():
    name = "x" * (MAX_STRING + 10)
    tokens = tokenize(name)
    assert tokens[0].value == name[:MAX_STRING]


def test_unknown_character_reported():
    lexer = Lexer("a @ b")
    tokens = list(lexer.tokens())
    assert [t.value for t in tokens] == ["a", "b"]
    assert [d.message for d in lexer.diagnostics] == ["Neznamy znak"]


def test_unterminated_string_stops():
    lexer = Lexer('a "abc')
    tokens = list(lexer.tokens())
    assert [t.type for t in tokens] == [TokenType.VARIABLE]
    assert [d.message for d in lexer.diagnostics] == ["Neukonceny retezec"]


def test_unterminated_comment_stops():
    lexer = Lexer("a /* never closed")
    tokens = list(lexer.tokens())
    assert [t.value for t in tokens] == ["a"]
    assert [d.message for d in lexer.diagnostics] == ["Neukonceny komentar"]


def test_clean_program_has_no_diagnostics():
    lexer = Lexer("while (i < 10) { i += 1; }")
    tokens = list(lexer.tokens())
    assert lexer.diagnostics == []
    assert tokens[0].type is TokenType.WHILE
    assert tokens[-1].type is TokenType.RBRACE


def test_zero_b_without_digits_splits():
    tokens = tokenize("0b")
    assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.VARIABLE]
    assert tokens[1].value == "b"