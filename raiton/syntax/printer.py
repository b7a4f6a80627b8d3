"""Pretty printer turning an AST back into Raiton source.

The output reparses to a structurally equal tree. Two shapes cannot be
written back faithfully: a string holding a backslash right before one of
`"`, `'`, `n`, `t` or at its very end, and a bare identifier item followed by a record literal in
the same scope (which reads back as a block definition).
"""

from __future__ import annotations

from io import StringIO

from raiton.syntax import ast
from raiton.types.values import positional_float

STRING_ESCAPES = {
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
}


class Printer:
    def __init__(self, node: ast.Node):
        self.node = node
        self.buffer = StringIO()

    def __str__(self) -> str:
        self.buffer = StringIO()
        if isinstance(self.node, ast.Scope):
            self._scope_items(self.node, "\n")
        else:
            self._print(self.node)
        return self.buffer.getvalue()

    def _write(self, text: str) -> None:
        self.buffer.write(text)

    def _scope_items(self, scope: ast.Scope, separator: str) -> None:
        items = [*scope.definitions, *scope.expressions]
        for i, item in enumerate(items):
            if i:
                self._write(separator)
            self._print(item)

    def _block(self, scope: ast.Scope) -> None:
        if not scope.definitions and not scope.expressions:
            self._write("{ }")
            return
        self._write("{ ")
        self._scope_items(scope, " ")
        self._write(" }")

    def _sequence(self, expressions: list[ast.Expression]) -> None:
        for i, expression in enumerate(expressions):
            if i:
                self._write(" ")
            self._print(expression)

    def _print(self, node: ast.Node) -> None:
        match node:
            case ast.Scope():
                self._block(node)
            case ast.Definition(identifier=name, expression=ast.Scope() as body):
                self._write(f"{name} ")
                self._block(body)
            case ast.Definition(identifier=name, expression=expression):
                self._write(f"{name}: ")
                self._print(expression)
            case ast.Identifier():
                self._write(node.name)
            case ast.Selector(items=items):
                self._write(".".join(str(item) for item in items))
            case ast.SelectorItem():
                self._write(str(node))
            case ast.Application(arguments=arguments):
                self._write("(")
                self._sequence(arguments)
                self._write(")")
            case ast.Function(parameters=parameters, body=body):
                self._write("\\")
                self._write(" ".join(str(p) for p in parameters))
                self._write(" ")
                self._block(body)
            case ast.Conditional(condition=condition, consequence=consequence, alternative=alternative):
                self._write("if ")
                self._print(condition)
                self._write(" ")
                self._block(consequence)
                self._write(" else ")
                self._block(alternative)
            case ast.Record(fields=fields):
                if not fields:
                    self._write("{ }")
                    return
                self._write("{ ")
                for name, expression in fields.items():
                    self._write(f"{name}: ")
                    self._print(expression)
                    self._write(" ")
                self._write("}")
            case ast.Array(size=size, elements=elements):
                self._write(f"[{size}:")
                if elements:
                    self._write(" ")
                    self._sequence(elements)
                self._write("]")
            case ast.List(elements=elements):
                self._write("[")
                self._sequence(elements)
                self._write("]")
            case ast.Integer(value=value):
                self._write(str(value))
            case ast.Float(value=value):
                self._write(positional_float(value))
            case ast.String(value=value):
                self._write('"' + "".join(STRING_ESCAPES.get(c, c) for c in value) + '"')
            case ast.Keyword(value=value):
                self._write(value)
            case ast.Boolean(literal=literal):
                self._write(literal)
            case _:
                raise TypeError(f"cannot print {type(node).__name__}")


def pretty_print(node: ast.Node) -> str:
    return str(Printer(node))
