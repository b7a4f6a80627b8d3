import pytest
from hypothesis import given, strategies as st

from raiton.reader.lexer import Lexer, lex
from raiton.reader.token import Token, TokenKind


def kinds_and_literals(source):
    return [(t.kind, t.literal) for t in lex(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("println", [(TokenKind.IDENTIFIER, "println")]),
        ("add_two x1 _tmp", [
            (TokenKind.IDENTIFIER, "add_two"),
            (TokenKind.IDENTIFIER, "x1"),
            (TokenKind.IDENTIFIER, "_tmp"),
        ]),
        ("print!", [(TokenKind.IDENTIFIER, "print!")]),
        ("true false", [(TokenKind.BOOLEAN, "true"), (TokenKind.BOOLEAN, "false")]),
        ("fn if else type", [
            (TokenKind.KEYWORD, "fn"),
            (TokenKind.KEYWORD, "if"),
            (TokenKind.KEYWORD, "else"),
            (TokenKind.KEYWORD, "type"),
        ]),
        ("42", [(TokenKind.NUMBER, "42")]),
        ("-5", [(TokenKind.MINUS, "-"), (TokenKind.NUMBER, "5")]),
        ("3.14", [(TokenKind.NUMBER, "3"), (TokenKind.DOT, "."), (TokenKind.NUMBER, "14")]),
        ("r.0.name", [
            (TokenKind.IDENTIFIER, "r"),
            (TokenKind.DOT, "."),
            (TokenKind.NUMBER, "0"),
            (TokenKind.DOT, "."),
            (TokenKind.IDENTIFIER, "name"),
        ]),
        ("()[]{}:\\", [
            (TokenKind.OPEN_PAREN, "("),
            (TokenKind.CLOSED_PAREN, ")"),
            (TokenKind.OPEN_BRACKET, "["),
            (TokenKind.CLOSED_BRACKET, "]"),
            (TokenKind.OPEN_BRACE, "{"),
            (TokenKind.CLOSED_BRACE, "}"),
            (TokenKind.COLON, ":"),
            (TokenKind.BACKSLASH, "\\"),
        ]),
        ("->", [(TokenKind.ARROW, "->")]),
        ("- >", [(TokenKind.MINUS, "-"), (TokenKind.ILLEGAL, ">")]),
        ("@", [(TokenKind.ILLEGAL, "@")]),
        ("# just a comment", []),
        ("a # trailing\nb", [(TokenKind.IDENTIFIER, "a"), (TokenKind.IDENTIFIER, "b")]),
    ]
)
def test_lexer_basic(source, expected):
    assert kinds_and_literals(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ('"hello"', [
            (TokenKind.DOUBLE_QUOTE, '"'),
            (TokenKind.STRING, "hello"),
            (TokenKind.DOUBLE_QUOTE, '"'),
        ]),
        ("'hi there'", [
            (TokenKind.SINGLE_QUOTE, "'"),
            (TokenKind.STRING, "hi there"),
            (TokenKind.SINGLE_QUOTE, "'"),
        ]),
        ('""', [(TokenKind.DOUBLE_QUOTE, '"'), (TokenKind.DOUBLE_QUOTE, '"')]),
        ('"say \\"hi\\""', [
            (TokenKind.DOUBLE_QUOTE, '"'),
            (TokenKind.STRING, 'say "hi"'),
            (TokenKind.DOUBLE_QUOTE, '"'),
        ]),
        ('"a\\nb\\tc\\q"', [
            (TokenKind.DOUBLE_QUOTE, '"'),
            (TokenKind.STRING, "a\nb\tc\\q"),
            (TokenKind.DOUBLE_QUOTE, '"'),
        ]),
        ('"it\'s"', [
            (TokenKind.DOUBLE_QUOTE, '"'),
            (TokenKind.STRING, "it's"),
            (TokenKind.DOUBLE_QUOTE, '"'),
        ]),
        ('"# not a comment"', [
            (TokenKind.DOUBLE_QUOTE, '"'),
            (TokenKind.STRING, "# not a comment"),
            (TokenKind.DOUBLE_QUOTE, '"'),
        ]),
    ]
)
def test_lexer_strings(source, expected):
    assert kinds_and_literals(source) == expected


def test_unterminated_string_ends_in_eof():
    lexer = Lexer('"oops')
    assert lexer.next().kind == TokenKind.DOUBLE_QUOTE
    assert lexer.next() == Token(TokenKind.STRING, "oops", 1, 2)
    assert lexer.next().kind == TokenKind.EOF


def test_escape_at_end_of_input_is_eof():
    lexer = Lexer('"abc\\')
    lexer.next()
    assert lexer.next().kind == TokenKind.EOF


def test_eof_repeats_forever():
    lexer = Lexer("x")
    lexer.next()
    assert [lexer.next().kind for _ in range(3)] == [TokenKind.EOF] * 3


def test_positions_are_one_based():
    tokens = list(lex("a: 1\n  (add a 2)"))
    assert [(t.literal, t.line, t.column) for t in tokens] == [
        ("a", 1, 1),
        (":", 1, 2),
        ("1", 1, 4),
        ("(", 2, 3),
        ("add", 2, 4),
        ("a", 2, 8),
        ("2", 2, 10),
        (")", 2, 11),
    ]


def test_describe_token():
    assert Token(TokenKind.IDENTIFIER, "x", 1, 2).describe() == "(  1,   2)     identifier x"
    assert Token(TokenKind.STRING, "hi", 3, 14).describe() == "(  3,  14)         string `hi`"


source_strat = st.text(
    st.sampled_from(list("abcxyz_019 \n\t#()[]{}:\\-.>'\"!@")),
    max_size=60,
)


@given(source_strat)
def test_lexer_never_raises_and_is_deterministic(source):
    first = list(lex(source))
    second = list(lex(source))
    assert first == second


@given(source_strat)
def test_positions_never_decrease(source):
    positions = [(t.line, t.column) for t in lex(source)]
    assert positions == sorted(positions)
