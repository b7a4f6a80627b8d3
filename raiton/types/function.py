"""Function (closure) values and argument binding for Raiton."""

from __future__ import annotations

from io import StringIO

from raiton.syntax import ast
from raiton.syntax.printer import pretty_print
from raiton.types.environment import Environment


class Function:
    """A first-class closure with parameters, body, and captured env."""

    __slots__ = ("parameters", "body", "env")

    type_name = "function"

    def __init__(self, parameters: list[ast.Identifier], body: ast.Scope, env: Environment | None = None):
        self.parameters: list[ast.Identifier] = list(parameters)
        self.body: ast.Scope = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def inspect(self) -> str:
        return pretty_print(ast.Function(self.parameters, self.body))

    def __str__(self) -> str:
        return self.inspect()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Function (")
            buffer.write(" ".join(str(p) for p in self.parameters))
            buffer.write(")>")
            return buffer.getvalue()

    # --- Evaluation helpers ---
    def extend_env(self, args: list) -> Environment:
        """Bind a full argument list in a new frame enclosing the captured env.

        Parameters repeated in the list are rebound, the last one wins.
        """
        local_env = Environment.new_enclosed(self.env)
        for parameter, value in zip(self.parameters, args):
            local_env.define(parameter, value)
        return local_env

    def partial(self, args: list) -> Function:
        """Bind the leading parameters in a clone of the captured env.

        The clone keeps one call site's arguments from leaking into another.
        """
        bound_env = self.env.clone()
        for parameter, value in zip(self.parameters, args):
            bound_env.define(parameter, value)
        return Function(self.parameters[len(args):], self.body, bound_env)
