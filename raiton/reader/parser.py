"""
  Raiton Parser

Recursive descent over the token stream with the current token plus at most
one peeked token. The peek is needed in two places only:

    - after `[`, to tell an explicitly sized array `[3: ...` from a list
    - after an identifier at scope level, to tell `name: ...` and
      `name { ... }` definitions from a plain expression

The parser stops at the first token it cannot accept and raises
RaitonSyntaxError carrying that token's kind, literal and position.
"""

from __future__ import annotations

import logging
from typing import Optional

from raiton.errors import RaitonSyntaxError
from raiton.reader.lexer import Lexer
from raiton.reader.token import ATOM_KEYWORDS, Token, TokenKind
from raiton.syntax import ast

logger = logging.getLogger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.token: Token = lexer.next()
        self.peek_token: Optional[Token] = None

    def parse(self) -> ast.Scope:
        scope = self._file_scope()
        logger.debug(
            "parsed file scope: %d definitions, %d expressions",
            len(scope.definitions), len(scope.expressions),
        )
        return scope

    # ------------------------
    # Scopes and definitions
    # ------------------------
    def _file_scope(self) -> ast.Scope:
        scope = ast.Scope()
        while not self._match(TokenKind.EOF):
            self._scope_item(scope)
        return scope

    def _block(self) -> ast.Scope:
        scope = ast.Scope()
        self._consume(TokenKind.OPEN_BRACE)
        while not self._match(TokenKind.EOF) and not self._match(TokenKind.CLOSED_BRACE):
            self._scope_item(scope)
        self._consume(TokenKind.CLOSED_BRACE)
        return scope

    def _scope(self) -> ast.Scope:
        """Either a `{ ... }` block or the `: expression` shorthand."""
        if self._match(TokenKind.OPEN_BRACE):
            return self._block()
        if self._match(TokenKind.COLON):
            self._consume(TokenKind.COLON)
            return ast.scope_expressions(self._expression())
        raise self._unexpected("scope")

    def _scope_item(self, scope: ast.Scope) -> None:
        if self._match(TokenKind.IDENTIFIER):
            following = self._peek().kind
            if following == TokenKind.COLON:
                scope.definitions.append(self._value_definition())
                return
            if following == TokenKind.OPEN_BRACE:
                scope.definitions.append(self._block_definition())
                return
        elif self._match(TokenKind.KEYWORD, "fn"):
            scope.definitions.append(self._function_definition())
            return

        scope.expressions.append(self._expression())

    def _value_definition(self) -> ast.Definition:
        name = self._identifier()
        self._consume(TokenKind.COLON)
        return ast.Definition(name, self._expression())

    def _block_definition(self) -> ast.Definition:
        name = self._identifier()
        return ast.Definition(name, self._block())

    def _function_definition(self) -> ast.Definition:
        self._consume(TokenKind.KEYWORD, "fn")
        name = self._identifier()
        parameters = self._parameters()
        return ast.Definition(name, ast.Function(parameters, self._scope()))

    # ------------------------
    # Expressions
    # ------------------------
    def _expression(self) -> ast.Expression:
        kind = self.token.kind

        if kind == TokenKind.IDENTIFIER:
            return self._selector()
        if kind in (TokenKind.NUMBER, TokenKind.MINUS):
            return self._number()
        if kind == TokenKind.BOOLEAN:
            return ast.Boolean(self._consume(TokenKind.BOOLEAN).literal)
        if kind == TokenKind.KEYWORD:
            if self.token.literal == "if":
                return self._conditional()
            if self.token.literal in ATOM_KEYWORDS:
                return ast.Keyword(self._consume(TokenKind.KEYWORD).literal)
        if kind in (TokenKind.DOUBLE_QUOTE, TokenKind.SINGLE_QUOTE):
            return self._string()
        if kind == TokenKind.OPEN_BRACKET:
            return self._array_or_list()
        if kind == TokenKind.OPEN_BRACE:
            return self._record()
        if kind == TokenKind.BACKSLASH:
            return self._function_literal()
        if kind == TokenKind.OPEN_PAREN:
            return self._application()

        raise self._unexpected("expression")

    def _selector(self) -> ast.Selector:
        items = [ast.SelectorItem(identifier=self._identifier())]

        while self._match(TokenKind.DOT):
            self._consume(TokenKind.DOT)
            if self._match(TokenKind.IDENTIFIER):
                items.append(ast.SelectorItem(identifier=self._identifier()))
            elif self._match(TokenKind.NUMBER):
                items.append(ast.SelectorItem(index=int(self._consume(TokenKind.NUMBER).literal, 10)))
            else:
                raise self._unexpected("identifier or index")

        return ast.Selector(items)

    def _number(self) -> ast.Integer | ast.Float:
        start = self.token
        sign = ""
        if self._match(TokenKind.MINUS):
            self._consume(TokenKind.MINUS)
            sign = "-"

        whole = self._consume(TokenKind.NUMBER).literal

        if self._match(TokenKind.DOT):
            self._consume(TokenKind.DOT)
            fraction = self._consume(TokenKind.NUMBER).literal
            return ast.Float(float(f"{sign}{whole}.{fraction}"))

        value = int(sign + whole, 10)
        if not INT64_MIN <= value <= INT64_MAX:
            raise RaitonSyntaxError(
                f"malformed number literal `{sign}{whole}` on line {start.line} column {start.column}",
                start.kind, start.literal, start.line, start.column,
            )
        return ast.Integer(value)

    def _string(self) -> ast.String:
        quote = self.token.kind
        self._consume(quote)

        literal = ""
        if self._match(TokenKind.STRING):
            literal = self._consume(TokenKind.STRING).literal

        self._consume(quote)
        return ast.String(literal)

    def _array_or_list(self) -> ast.Array | ast.List:
        self._consume(TokenKind.OPEN_BRACKET)

        size: Optional[int] = None
        is_array = False

        if self._match(TokenKind.COLON):
            self._consume(TokenKind.COLON)
            is_array = True
        elif self._match(TokenKind.NUMBER) and self._peek().kind == TokenKind.COLON:
            size = int(self._consume(TokenKind.NUMBER).literal, 10)
            self._consume(TokenKind.COLON)
            is_array = True

        elements: list[ast.Expression] = []
        while not self._match(TokenKind.EOF) and not self._match(TokenKind.CLOSED_BRACKET):
            elements.append(self._expression())

        self._consume(TokenKind.CLOSED_BRACKET)

        if not is_array:
            return ast.List(elements)
        return ast.Array(len(elements) if size is None else size, elements)

    def _record(self) -> ast.Record:
        self._consume(TokenKind.OPEN_BRACE)

        fields: dict[ast.Identifier, ast.Expression] = {}
        while self._match(TokenKind.IDENTIFIER):
            name = self._identifier()
            self._consume(TokenKind.COLON)
            fields[name] = self._expression()

        self._consume(TokenKind.CLOSED_BRACE)
        return ast.Record(fields)

    def _function_literal(self) -> ast.Function:
        self._consume(TokenKind.BACKSLASH)
        parameters = self._parameters()
        return ast.Function(parameters, self._scope())

    def _application(self) -> ast.Application:
        self._consume(TokenKind.OPEN_PAREN)

        arguments: list[ast.Expression] = []
        while not self._match(TokenKind.EOF) and not self._match(TokenKind.CLOSED_PAREN):
            arguments.append(self._expression())

        self._consume(TokenKind.CLOSED_PAREN)
        return ast.Application(arguments)

    def _conditional(self) -> ast.Conditional:
        self._consume(TokenKind.KEYWORD, "if")
        condition = self._expression()
        consequence = self._scope()
        self._consume(TokenKind.KEYWORD, "else")
        alternative = self._scope()
        return ast.Conditional(condition, consequence, alternative)

    def _identifier(self) -> ast.Identifier:
        return ast.Identifier(self._consume(TokenKind.IDENTIFIER).literal)

    def _parameters(self) -> list[ast.Identifier]:
        parameters = []
        while self._match(TokenKind.IDENTIFIER):
            parameters.append(self._identifier())
        return parameters

    # ------------------------
    # Token stream utilities
    # ------------------------
    def _match(self, kind: str, literal: Optional[str] = None) -> bool:
        if self.token.kind != kind:
            return False
        return literal is None or self.token.literal == literal

    def _consume(self, kind: str, literal: Optional[str] = None) -> Token:
        if not self._match(kind, literal):
            raise self._unexpected(literal or kind)

        consumed = self.token
        if self.peek_token is not None:
            self.token = self.peek_token
            self.peek_token = None
        else:
            self.token = self.lexer.next()
        return consumed

    def _peek(self) -> Token:
        if self.peek_token is None:
            self.peek_token = self.lexer.next()
        return self.peek_token

    def _unexpected(self, expected: str) -> RaitonSyntaxError:
        token = self.token
        got = f"{token.kind} `{token.literal}`" if token.literal else token.kind
        return RaitonSyntaxError(
            f"expected {expected}, but got {got} on line {token.line} column {token.column}",
            token.kind, token.literal, token.line, token.column,
        )


def parse(source: str) -> ast.Scope:
    """Parse a whole source text into its file-level Scope."""
    return Parser(Lexer(source)).parse()
