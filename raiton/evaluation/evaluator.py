"""Core evaluator for the Raiton interpreter.

A recursive tree walk: `Evaluator.evaluate` matches on the node class and
returns the node's value, raising a RaitonRuntimeError subclass on failure.
The only mutable state is `self.env`, the environment new definitions are
written to. It is swapped for the duration of a function call and
always restored afterwards.

Sub-expressions are evaluated left to right, scope items top to bottom.
"""

from __future__ import annotations

import logging

from raiton.builtins import BUILTINS
from raiton.errors import (
    RaitonEmptyStackError,
    RaitonRangeError,
    RaitonTypeError,
    RaitonUnboundName,
)
from raiton.evaluation.apply import apply
from raiton.syntax import ast
from raiton.types import values
from raiton.types.environment import Environment
from raiton.types.function import Function
from raiton.types.unit import Unit

logger = logging.getLogger(__name__)


class Evaluator:
    def __init__(self, env: Environment, builtins: dict[str, values.Builtin] | None = None):
        self.env = env
        self.builtins = BUILTINS if builtins is None else builtins

    def evaluate(self, node: ast.Node):
        match node:
            case ast.Scope():
                return self._scope(node)
            case ast.Definition():
                return self._definition(node)
            case ast.Identifier():
                return self._resolve(node)
            case ast.Selector():
                return self._selector(node)
            case ast.Application():
                return self._application(node)
            case ast.Function(parameters=parameters, body=body):
                return Function(parameters, body, Environment.new_enclosed(self.env))
            case ast.Conditional():
                return self._conditional(node)
            case ast.Record(fields=fields):
                return values.Record({name.name: self.evaluate(e) for name, e in fields.items()})
            case ast.Array():
                return self._array(node)
            case ast.List(elements=elements):
                return values.List.from_iterable([self.evaluate(e) for e in elements])
            case ast.Integer(value=value):
                return values.Integer(value)
            case ast.Float(value=value):
                return values.Float(value)
            case ast.String(value=value):
                return values.String(value)
            case ast.Keyword(value=value):
                return values.Keyword(value)
            case ast.Boolean(literal=literal):
                return self._boolean(literal)

        raise RaitonEmptyStackError(f"evaluation of {type(node).__name__} produced no value")

    def evaluate_in(self, env: Environment, node: ast.Node):
        """Evaluate `node` with `env` as the current environment."""
        previous = self.env
        self.env = env
        try:
            return self.evaluate(node)
        finally:
            self.env = previous

    def call(self, callee, *args):
        """Apply a callable value to already-evaluated arguments."""
        return apply(self, callee, list(args))

    # --- scopes and bindings ---
    def _scope(self, scope: ast.Scope):
        for definition in scope.definitions:
            self.evaluate(definition)

        result = Unit
        for expression in scope.expressions:
            result = self.evaluate(expression)
        return result

    def _definition(self, definition: ast.Definition):
        value = self.evaluate(definition.expression)
        logger.debug("define %s: %s", definition.identifier, value.type_name)
        return self.env.define(definition.identifier, value)

    def _resolve(self, name: ast.Identifier):
        env = self.env.find(name)
        if env is not None:
            return env.vars[name.name]
        if name.name in self.builtins:
            return self.builtins[name.name]
        raise RaitonUnboundName(f"'{name}' not defined")

    # --- selectors ---
    def _selector(self, selector: ast.Selector):
        value = self._resolve(selector.head)
        for item in selector.path:
            value = self._select(value, item)
        return value

    @staticmethod
    def _select(value, item: ast.SelectorItem):
        match value:
            case values.Record(fields=fields):
                if item.is_index:
                    raise RaitonTypeError(f"cannot index record with {item.index}")
                if item.identifier.name not in fields:
                    raise RaitonTypeError(f"record has no field '{item.identifier}'")
                return fields[item.identifier.name]
            case values.Array(elements=elements):
                if not item.is_index:
                    raise RaitonTypeError(f"cannot select field '{item.identifier}' from array")
                if not 0 <= item.index < len(elements):
                    raise RaitonRangeError(f"index {item.index} out of bounds for array of size {len(elements)}")
                return elements[item.index]
            case values.List():
                if not item.is_index:
                    raise RaitonTypeError(f"cannot select field '{item.identifier}' from list")
                element = value.at(item.index)
                if element is None:
                    raise RaitonRangeError(f"index {item.index} out of bounds for list of size {value.size}")
                return element
        raise RaitonTypeError(f"cannot select '{item}' from {value.type_name}")

    # --- calls and control flow ---
    def _application(self, application: ast.Application):
        if not application.arguments:
            return Unit

        callee_node, *argument_nodes = application.arguments
        callee = self.evaluate(callee_node)
        args = [self.evaluate(a) for a in argument_nodes]
        return apply(self, callee, args)

    def _conditional(self, conditional: ast.Conditional):
        condition = self.evaluate(conditional.condition)
        if not isinstance(condition, values.Boolean):
            raise RaitonTypeError(f"expected condition to be boolean, but got {condition.type_name}")
        branch = conditional.consequence if condition.value else conditional.alternative
        return self._scope(branch)

    # --- literals ---
    def _array(self, array: ast.Array):
        elements = [self.evaluate(e) for e in array.elements]
        if len(elements) != array.size:
            raise RaitonRangeError(f"expected array of size {array.size}, but got {len(elements)}")
        return values.Array(elements)

    @staticmethod
    def _boolean(literal: str) -> values.Boolean:
        if literal == "true":
            return values.TRUE
        if literal == "false":
            return values.FALSE
        raise RaitonTypeError(f"invalid boolean literal `{literal}`")


def evaluate(env: Environment, node: ast.Node):
    """Evaluate `node` against `env`; definitions in a file scope land in `env`."""
    return Evaluator(env).evaluate(node)
