"""Raiton abstract syntax tree.

Nodes are plain dataclasses created by the parser and never mutated after
that. The evaluator, printer and comparator each dispatch on the node class
with a single `match`.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional, Union


class Identifier:
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Identifier) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Identifier({self.name!r})"

    def __str__(self):
        return self.name


@dataclass
class Scope:
    definitions: list[Definition] = field(default_factory=list)
    expressions: list[Expression] = field(default_factory=list)


@dataclass
class Definition:
    identifier: Identifier
    expression: Expression

    def __post_init__(self):
        if not self.identifier.name:
            raise ValueError("definition name must not be empty")


@dataclass
class SelectorItem:
    """One step of a selector: a record field or an array/list index."""

    identifier: Optional[Identifier] = None
    index: Optional[int] = None

    @property
    def is_index(self) -> bool:
        return self.index is not None

    def __str__(self) -> str:
        return str(self.index) if self.is_index else str(self.identifier)


@dataclass
class Selector:
    items: list[SelectorItem]

    @property
    def head(self) -> Identifier:
        return self.items[0].identifier

    @property
    def path(self) -> list[SelectorItem]:
        return self.items[1:]


@dataclass
class Application:
    arguments: list[Expression]


@dataclass
class Function:
    parameters: list[Identifier]
    body: Scope


@dataclass
class Conditional:
    condition: Expression
    consequence: Scope
    alternative: Scope


@dataclass
class Record:
    fields: dict[Identifier, Expression]


@dataclass
class Array:
    size: int
    elements: list[Expression]


@dataclass
class List:
    elements: list[Expression]


@dataclass
class Integer:
    value: int


@dataclass
class Float:
    value: float


@dataclass
class String:
    value: str


@dataclass
class Keyword:
    value: str


@dataclass
class Boolean:
    literal: str


Expression = Union[
    Scope, Identifier, Selector, Application, Function, Conditional,
    Record, Array, List, Integer, Float, String, Keyword, Boolean,
]

Node = Union[Expression, Definition, SelectorItem]


# --- construction helpers, mostly for tests ---

def scope_expressions(*expressions: Expression) -> Scope:
    return Scope(definitions=[], expressions=list(expressions))


def field_item(name: str) -> SelectorItem:
    return SelectorItem(identifier=Identifier(name))


def index_item(index: int) -> SelectorItem:
    return SelectorItem(index=index)


def selector(name: str, *path: str | int) -> Selector:
    """selector("r", "k", 0) builds `r.k.0`."""
    items = [field_item(name)]
    for step in path:
        items.append(index_item(step) if isinstance(step, int) else field_item(step))
    return Selector(items)


def application(*arguments: Expression) -> Application:
    return Application(list(arguments))


def function(parameters: list[str], *body: Expression) -> Function:
    return Function([Identifier(p) for p in parameters], scope_expressions(*body))


def definition(name: str, expression: Expression) -> Definition:
    return Definition(Identifier(name), expression)
