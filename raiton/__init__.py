# Raiton: a small S-expression flavoured, functional-first expression language.
#
# The core is three stages:
# - reader:     source -> tokens (lexer) -> AST (parser)
# - syntax:     the AST node family, pretty printer and structural comparator
# - evaluation: AST -> value against a lexically scoped Environment
#
# Runtime values live under raiton.types and expose `inspect()` for display.

from raiton.interpreter import (
    Interpreter,
    evaluate,
    new_environment,
    parse,
    pretty_print,
    tokenize,
)
from raiton.errors import RaitonError, RaitonRuntimeError, RaitonSyntaxError

__all__ = [
    "Interpreter",
    "RaitonError",
    "RaitonRuntimeError",
    "RaitonSyntaxError",
    "evaluate",
    "new_environment",
    "parse",
    "pretty_print",
    "tokenize",
]
