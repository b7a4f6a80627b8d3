"""Token kinds and the keyword/symbol tables shared by the lexer and parser."""

from __future__ import annotations

from dataclasses import dataclass


class TokenKind:
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    KEYWORD = "keyword"

    OPEN_PAREN = "left_paren"
    CLOSED_PAREN = "right_paren"
    OPEN_BRACKET = "left_bracket"
    CLOSED_BRACKET = "right_bracket"
    OPEN_BRACE = "left_brace"
    CLOSED_BRACE = "right_brace"

    SINGLE_QUOTE = "single_quote"
    DOUBLE_QUOTE = "double_quote"
    COLON = "colon"
    BACKSLASH = "backslash"
    MINUS = "minus"
    DOT = "dot"
    ARROW = "arrow"

    EOF = "eof"
    ILLEGAL = "illegal"


# Reserved words. true/false are booleans, the rest share the KEYWORD kind
# and are told apart by their literal.
KEYWORDS: dict[str, str] = {
    "true": TokenKind.BOOLEAN,
    "false": TokenKind.BOOLEAN,
    "fn": TokenKind.KEYWORD,
    "if": TokenKind.KEYWORD,
    "else": TokenKind.KEYWORD,
    "type": TokenKind.KEYWORD,
}

# Reserved words that stand for themselves as Keyword atoms in expression position.
ATOM_KEYWORDS = frozenset({"type"})

SYMBOLS: dict[str, str] = {
    "(": TokenKind.OPEN_PAREN,
    ")": TokenKind.CLOSED_PAREN,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSED_BRACKET,
    "{": TokenKind.OPEN_BRACE,
    "}": TokenKind.CLOSED_BRACE,
    "'": TokenKind.SINGLE_QUOTE,
    '"': TokenKind.DOUBLE_QUOTE,
    ":": TokenKind.COLON,
    "\\": TokenKind.BACKSLASH,
    "-": TokenKind.MINUS,
    ".": TokenKind.DOT,
    "->": TokenKind.ARROW,
}

QUOTES: dict[str, str] = {
    "'": TokenKind.SINGLE_QUOTE,
    '"': TokenKind.DOUBLE_QUOTE,
}


@dataclass(frozen=True)
class Token:
    kind: str
    literal: str
    line: int
    column: int

    def describe(self) -> str:
        """Fixed-width single line used for token dumps."""
        literal = f"`{self.literal}`" if self.kind == TokenKind.STRING else self.literal
        return f"({self.line:3d}, {self.column:3d}) {self.kind:>14s} {literal}"

    def __str__(self) -> str:
        return f"{self.kind} `{self.literal}` on line {self.line} column {self.column}"
