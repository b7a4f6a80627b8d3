"""Structural comparison of two ASTs.

Used by the test suite to check parser output. `compare` raises
NodeMismatch describing the first difference and the path that leads to it,
e.g. `scope.expressions[0].arguments[1]: expected 2, but got 3`.
"""

from __future__ import annotations

import math

from raiton.syntax import ast


class NodeMismatch(AssertionError):
    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class Comparator:
    def __init__(self, current: ast.Node | None):
        self.current = current

    def compare(self, expected: ast.Node | None) -> None:
        self._compare(expected, self.current, type(expected).__name__.lower())

    def _compare(self, expected, current, path: str) -> None:
        if expected is None or current is None:
            if expected is not current:
                raise NodeMismatch(path, f"expected {expected!r}, but got {current!r}")
            return

        if type(expected) is not type(current):
            raise NodeMismatch(
                path, f"expected node of type `{type(expected).__name__}`, but got `{type(current).__name__}`"
            )

        match expected:
            case ast.Scope():
                self._sequence(expected.definitions, current.definitions, f"{path}.definitions")
                self._sequence(expected.expressions, current.expressions, f"{path}.expressions")
            case ast.Definition():
                self._compare(expected.identifier, current.identifier, f"{path}.identifier")
                self._compare(expected.expression, current.expression, f"{path}.expression")
            case ast.Identifier():
                if expected != current:
                    raise NodeMismatch(path, f"expected `{expected}`, but got `{current}`")
            case ast.Selector():
                self._sequence(expected.items, current.items, f"{path}.items")
            case ast.SelectorItem():
                if expected.is_index != current.is_index:
                    kind = "index" if expected.is_index else "field"
                    raise NodeMismatch(path, f"expected {kind} item `{expected}`, but got `{current}`")
                if expected.is_index:
                    self._value(expected.index, current.index, path)
                else:
                    self._compare(expected.identifier, current.identifier, path)
            case ast.Application():
                self._sequence(expected.arguments, current.arguments, f"{path}.arguments")
            case ast.Function():
                self._sequence(expected.parameters, current.parameters, f"{path}.parameters")
                self._compare(expected.body, current.body, f"{path}.body")
            case ast.Conditional():
                self._compare(expected.condition, current.condition, f"{path}.condition")
                self._compare(expected.consequence, current.consequence, f"{path}.consequence")
                self._compare(expected.alternative, current.alternative, f"{path}.alternative")
            case ast.Record():
                if len(expected.fields) != len(current.fields):
                    raise NodeMismatch(
                        path, f"expected {len(expected.fields)} fields, but got {len(current.fields)}"
                    )
                for name, expression in expected.fields.items():
                    if name not in current.fields:
                        raise NodeMismatch(path, f"field `{name}` not found")
                    self._compare(expression, current.fields[name], f"{path}.{name}")
            case ast.Array():
                if expected.size != current.size:
                    raise NodeMismatch(
                        path, f"expected array of size {expected.size}, but got size {current.size}"
                    )
                self._sequence(expected.elements, current.elements, f"{path}.elements")
            case ast.List():
                self._sequence(expected.elements, current.elements, f"{path}.elements")
            case ast.Integer() | ast.String() | ast.Keyword():
                self._value(expected.value, current.value, path)
            case ast.Float():
                both_nan = math.isnan(expected.value) and math.isnan(current.value)
                if not both_nan and expected.value != current.value:
                    raise NodeMismatch(path, f"expected `{expected.value!r}`, but got `{current.value!r}`")
            case ast.Boolean():
                self._value(expected.literal, current.literal, path)
            case _:
                raise TypeError(f"unhandled node type {type(expected).__name__}")

    def _sequence(self, expected: list, current: list, path: str) -> None:
        if len(expected) != len(current):
            raise NodeMismatch(path, f"expected {len(expected)} items, but got {len(current)}")
        for i, (e, c) in enumerate(zip(expected, current)):
            self._compare(e, c, f"{path}[{i}]")

    @staticmethod
    def _value(expected, current, path: str) -> None:
        if expected != current:
            raise NodeMismatch(path, f"expected `{expected!r}`, but got `{current!r}`")


def compare(expected: ast.Node | None, current: ast.Node | None) -> None:
    """Raise NodeMismatch unless `current` is structurally equal to `expected`."""
    Comparator(current).compare(expected)


def equal(a: ast.Node | None, b: ast.Node | None) -> bool:
    try:
        compare(a, b)
    except NodeMismatch:
        return False
    return True
