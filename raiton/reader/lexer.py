"""
  Raiton Lexer

- Character-by-character scanner with two modes:

    - normal:   skips whitespace and `#` comments, then reads identifiers,
                numbers, quotes and special symbols
    - sequence: entered after an opening quote, reads the string body up to
                the matching quote

- Never raises. Unknown characters become ILLEGAL tokens and input that ends
  inside a string yields EOF, both left for the parser to report.
- Once the source is exhausted every call to `next()` returns EOF.
"""

from __future__ import annotations

from typing import Iterator, Optional

from raiton.reader.token import KEYWORDS, QUOTES, SYMBOLS, Token, TokenKind

NORMAL_MODE = "normal"
SEQUENCE_MODE = "sequence"

ESCAPES: dict[str, str] = {
    '"': '"',
    "'": "'",
    "n": "\n",
    "t": "\t",
}

WHITESPACE = frozenset(" \t\r\n")


def is_alpha(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z"


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


class Lexer:
    __slots__ = ("source", "position", "line", "column", "mode", "terminator")

    def __init__(self, source: str):
        self.source = source
        self.position = 0
        self.line = 1
        self.column = 1
        self.mode = NORMAL_MODE
        self.terminator: Optional[str] = None

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        return self.next()

    def next(self) -> Token:
        if self.mode == SEQUENCE_MODE:
            return self._sequence_mode()
        return self._normal_mode()

    # --- modes ---
    def _normal_mode(self) -> Token:
        self._skip_whitespace()

        char = self._current()
        if char is None:
            return Token(TokenKind.EOF, "", self.line, self.column)

        if is_alpha(char) or char == "_":
            return self._identifier()
        if is_digit(char):
            return self._number()
        if char in QUOTES:
            token = Token(QUOTES[char], char, self.line, self.column)
            self._advance()
            self.mode = SEQUENCE_MODE
            self.terminator = char
            return token
        return self._special()

    def _sequence_mode(self) -> Token:
        char = self._current()
        if char is None:
            return Token(TokenKind.EOF, "", self.line, self.column)

        if char == self.terminator:
            token = Token(QUOTES[char], char, self.line, self.column)
            self._advance()
            self.mode = NORMAL_MODE
            self.terminator = None
            return token

        return self._string()

    # --- token readers ---
    def _identifier(self) -> Token:
        line, column, start = self.line, self.column, self.position

        char = self._current()
        while char is not None and (is_alpha(char) or is_digit(char) or char == "_"):
            char = self._advance()
        if char == "!":
            self._advance()

        literal = self.source[start:self.position]
        return Token(KEYWORDS.get(literal, TokenKind.IDENTIFIER), literal, line, column)

    def _number(self) -> Token:
        line, column, start = self.line, self.column, self.position

        char = self._current()
        while char is not None and is_digit(char):
            char = self._advance()

        return Token(TokenKind.NUMBER, self.source[start:self.position], line, column)

    def _string(self) -> Token:
        line, column = self.line, self.column
        chars: list[str] = []

        char = self._current()
        while char is not None and char != self.terminator:
            if char == "\\":
                escaped = self._advance()
                if escaped is None:
                    return Token(TokenKind.EOF, "", self.line, self.column)
                chars.append(ESCAPES.get(escaped, "\\" + escaped))
            else:
                chars.append(char)
            char = self._advance()

        return Token(TokenKind.STRING, "".join(chars), line, column)

    def _special(self) -> Token:
        line, column = self.line, self.column
        char = self._current()

        extended = self.source[self.position:self.position + 2]
        if len(extended) == 2 and extended in SYMBOLS:
            self._advance()
            self._advance()
            return Token(SYMBOLS[extended], extended, line, column)

        self._advance()
        return Token(SYMBOLS.get(char, TokenKind.ILLEGAL), char, line, column)

    # --- cursor ---
    def _skip_whitespace(self) -> None:
        char = self._current()
        while char is not None:
            if char == "#":
                while char is not None and char != "\n":
                    char = self._advance()
            elif char in WHITESPACE:
                char = self._advance()
            else:
                break

    def _current(self) -> Optional[str]:
        if self.position < len(self.source):
            return self.source[self.position]
        return None

    def _advance(self) -> Optional[str]:
        """Step past the current character and return the new current one."""
        if self.position < len(self.source):
            if self.source[self.position] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.position += 1
        return self._current()


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields every token of `source` before EOF."""
    lexer = Lexer(source)
    while True:
        token = lexer.next()
        if token.kind == TokenKind.EOF:
            return
        yield token
