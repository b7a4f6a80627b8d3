"""Runtime values produced by the evaluator.

Every value exposes `type_name` (used in error messages) and `inspect()`
(the display string shown by the REPL). Values are never mutated once they
have been handed out.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from io import StringIO
from typing import Any, Callable, Iterable, Iterator, Optional, Union

from raiton.types.unit import UnitType


class Boolean:
    __slots__ = ("value",)

    type_name = "boolean"

    def __init__(self, value: bool):
        self.value = value

    def inspect(self) -> str:
        return "true" if self.value else "false"

    def __repr__(self):
        return f"Boolean({self.value})"


TRUE = Boolean(True)
FALSE = Boolean(False)


def box_boolean(value: bool) -> Boolean:
    return TRUE if value else FALSE


@dataclass(frozen=True)
class Integer:
    value: int
    type_name = "integer"

    def inspect(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Float:
    value: float
    type_name = "float"

    def inspect(self) -> str:
        return format_float(self.value)


@dataclass(frozen=True)
class String:
    value: str
    type_name = "string"

    def inspect(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class Keyword:
    value: str
    type_name = "keyword"

    def inspect(self) -> str:
        return self.value


class Array:
    """Fixed-size sequence. The size is taken from the elements."""

    __slots__ = ("elements", "size")

    type_name = "array"

    def __init__(self, elements: Iterable[Value]):
        self.elements: tuple[Value, ...] = tuple(elements)
        self.size: int = len(self.elements)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.elements)

    def __eq__(self, other):
        return isinstance(other, Array) and self.elements == other.elements

    def __repr__(self):
        return f"Array({list(self.elements)!r})"

    def inspect(self) -> str:
        if not self.elements:
            return f"[{self.size}:]"
        return f"[{self.size}: {' '.join(e.inspect() for e in self.elements)}]"


class ListNode:
    __slots__ = ("value", "next")

    def __init__(self, value: Value, next: Optional[ListNode] = None):
        self.value = value
        self.next = next


class List:
    """Singly linked list with a cached size."""

    __slots__ = ("head", "size")

    type_name = "list"

    def __init__(self, head: Optional[ListNode] = None, size: int = 0):
        self.head = head
        self.size = size

    @classmethod
    def from_iterable(cls, values: Iterable[Value]) -> List:
        items = list(values)
        head: Optional[ListNode] = None
        for value in reversed(items):
            head = ListNode(value, head)
        return cls(head, len(items))

    def __iter__(self) -> Iterator[Value]:
        node = self.head
        for _ in range(self.size):
            if node is None:
                break
            yield node.value
            node = node.next

    def at(self, index: int) -> Optional[Value]:
        """Walk at most `size` links; None when the index is out of bounds."""
        if index < 0 or index >= self.size:
            return None
        node = self.head
        for _ in range(index):
            node = node.next
        return node.value

    def __eq__(self, other):
        return isinstance(other, List) and self.size == other.size and list(self) == list(other)

    def __repr__(self):
        return f"List({list(self)!r})"

    def inspect(self) -> str:
        return f"[{' '.join(v.inspect() for v in self)}]"


class Record:
    __slots__ = ("fields",)

    type_name = "record"

    def __init__(self, fields: dict[str, Value]):
        self.fields = fields

    def __eq__(self, other):
        return isinstance(other, Record) and self.fields == other.fields

    def __repr__(self):
        return f"Record({self.fields!r})"

    def inspect(self) -> str:
        if not self.fields:
            return "{ }"
        with StringIO() as buffer:
            buffer.write("{ ")
            buffer.write(" ".join(f"{k}: {v.inspect()}" for k, v in self.fields.items()))
            buffer.write(" }")
            return buffer.getvalue()


BuiltinFn = Callable[[Any, list], "Value"]


@dataclass(frozen=True)
class Builtin:
    """Host function. Called with the evaluator and the evaluated arguments."""

    name: str
    fn: BuiltinFn
    type_name = "builtin"

    def __call__(self, evaluator, args: list) -> Value:
        return self.fn(evaluator, args)

    def inspect(self) -> str:
        return "builtin function"

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


def format_float(value: float) -> str:
    """Shortest round-trip decimal, exponent written without zero padding."""
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        exp = int(exponent)
        return f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"
    return text


def positional_float(value: float) -> str:
    """Decimal form without exponent that reparses to the same float."""
    text = format(Decimal(repr(value)), "f")
    if "." not in text:
        text += ".0"
    return text


Value = Union[
    UnitType, Boolean, Integer, Float, String, Keyword,
    Array, List, Record, Builtin, "Function",
]
