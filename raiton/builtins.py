from __future__ import annotations

from raiton.errors import RaitonArityError, RaitonTypeError
from raiton.types.function import Function
from raiton.types.values import (
    Array,
    Boolean,
    Builtin,
    Float,
    Integer,
    List,
    Record,
    String,
    box_boolean,
)

INT64_MASK = (1 << 64) - 1
INT64_SIGN = 1 << 63

ORDINALS = ("first", "second", "third")


def wrap_int64(value: int) -> int:
    """Two's complement wrap-around to a signed 64-bit integer."""
    value &= INT64_MASK
    return value - (1 << 64) if value & INT64_SIGN else value


def _expect_arity(name: str, args: list, count: int) -> None:
    if len(args) != count:
        raise RaitonArityError(f"{name} expects {count} arguments, but got {len(args)}")


def _expect(name: str, args: list, position: int, kinds: tuple[type, ...], description: str):
    arg = args[position]
    if not isinstance(arg, kinds):
        raise RaitonTypeError(
            f"{name}: expected {ORDINALS[position]} argument to be {description}, but got {arg.type_name}"
        )
    return arg


def _integer_operands(name: str, args: list) -> tuple[int, int]:
    _expect_arity(name, args, 2)
    first = _expect(name, args, 0, (Integer,), "integer")
    second = _expect(name, args, 1, (Integer,), "integer")
    return first.value, second.value


# -------------------------------
# Arithmetic
# -------------------------------
def add(evaluator, args: list) -> Integer:
    a, b = _integer_operands("add", args)
    return Integer(wrap_int64(a + b))


def sub(evaluator, args: list) -> Integer:
    a, b = _integer_operands("sub", args)
    return Integer(wrap_int64(a - b))


def mul(evaluator, args: list) -> Integer:
    a, b = _integer_operands("mul", args)
    return Integer(wrap_int64(a * b))


# -------------------------------
# Equality and logic
# -------------------------------
EQ_KINDS = (Boolean, Integer, Float, String)


def eq(evaluator, args: list) -> Boolean:
    _expect_arity("eq", args, 2)
    first, second = args
    for arg in args:
        if not isinstance(arg, EQ_KINDS):
            raise RaitonTypeError(f"eq is not defined for {arg.type_name}")
    if type(first) is not type(second):
        raise RaitonTypeError(f"eq cannot compare {first.type_name} with {second.type_name}")
    if isinstance(first, Boolean):
        return box_boolean(first is second or first.value == second.value)
    return box_boolean(first.value == second.value)


def not_(evaluator, args: list) -> Boolean:
    _expect_arity("not", args, 1)
    value = _expect("not", args, 0, (Boolean,), "boolean")
    return box_boolean(not value.value)


# -------------------------------
# Collections
# -------------------------------
def length(evaluator, args: list) -> Integer:
    _expect_arity("len", args, 1)
    value = _expect("len", args, 0, (Array, List, String, Record), "array, list, string or record")
    match value:
        case Array() | List():
            return Integer(value.size)
        case String():
            return Integer(len(value.value))
    return Integer(len(value.fields))


def map_(evaluator, args: list) -> Array | List:
    _expect_arity("map", args, 2)
    fn = _expect("map", args, 0, (Function, Builtin), "a function")
    sequence = _expect("map", args, 1, (Array, List), "an array or list")

    mapped = [evaluator.call(fn, element) for element in sequence]

    if isinstance(sequence, Array):
        return Array(mapped)
    return List.from_iterable(mapped)


BUILTINS: dict[str, Builtin] = {
    b.name: b
    for b in (
        Builtin("add", add),
        Builtin("sub", sub),
        Builtin("mul", mul),
        Builtin("eq", eq),
        Builtin("not", not_),
        Builtin("len", length),
        Builtin("map", map_),
    )
}
