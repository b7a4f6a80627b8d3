"""Embedding surface of the Raiton core.

The REPL and command line front ends only talk to the core through the
functions below and through `Value.inspect()`.
"""

from __future__ import annotations

import logging

from raiton import config
from raiton.evaluation.evaluator import evaluate
from raiton.reader.lexer import lex
from raiton.reader.parser import parse
from raiton.reader.token import Token
from raiton.syntax.printer import pretty_print
from raiton.types.environment import Environment

logger = logging.getLogger(__name__)

__all__ = [
    "Interpreter",
    "evaluate",
    "new_environment",
    "parse",
    "pretty_print",
    "tokenize",
]


def new_environment() -> Environment:
    """Root environment with no user bindings; builtins are resolved separately."""
    return Environment.new_root()


def tokenize(source: str) -> list[Token]:
    return list(lex(source))


class Interpreter:
    """
    A turn-based interpreter for Raiton source.
    Each call to `eval` parses and evaluates into the same environment, so
    definitions persist between turns. A turn that fails keeps whatever
    bindings it made before the error.
    """
    def __init__(self, prelude: str | None = None):
        config.configure_logging()
        config.apply_recursion_limit()

        self.env = new_environment()

        if prelude == "auto":
            path = config.get_prelude_path()
            if path is not None:
                self.eval_prelude(path.read_text(encoding="utf-8"))
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate a string of Raiton code as prelude."""
        logger.debug("evaluating prelude (%d characters)", len(code))
        self.eval(code)

    def eval(self, code: str):
        """Evaluate one turn of input and return its value (Unit when empty)."""
        program = parse(code)
        logger.debug("AST: %s", program)
        return evaluate(self.env, program)
