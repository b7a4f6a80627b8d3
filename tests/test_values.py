import pytest

from raiton.types import values
from raiton.types.unit import Unit, UnitType


@pytest.mark.parametrize(
    "value,expected",
    [
        (Unit, "()"),
        (values.TRUE, "true"),
        (values.FALSE, "false"),
        (values.Integer(-12), "-12"),
        (values.Float(3.14), "3.14"),
        (values.Float(2.0), "2.0"),
        (values.Float(100000.0), "100000.0"),
        (values.Float(1e-9), "1e-9"),
        (values.Float(1.5e300), "1.5e+300"),
        (values.String("hi"), '"hi"'),
        (values.Keyword("type"), "type"),
        (values.Array([]), "[0:]"),
        (values.Array([values.Integer(1), values.String("a")]), '[2: 1 "a"]'),
        (values.List.from_iterable([]), "[]"),
        (values.List.from_iterable([values.Integer(1), values.Integer(2)]), "[1 2]"),
        (values.Record({}), "{ }"),
        (values.Record({"a": values.Integer(1), "b": values.TRUE}), "{ a: 1 b: true }"),
        (values.Builtin("add", lambda evaluator, args: None), "builtin function"),
    ]
)
def test_inspect(value, expected):
    assert value.inspect() == expected


def test_unit_is_a_singleton_value():
    assert Unit == UnitType()
    assert not Unit
    assert Unit.type_name == "unit"


def test_box_boolean_returns_singletons():
    assert values.box_boolean(True) is values.TRUE
    assert values.box_boolean(False) is values.FALSE


def test_list_at_is_bounded():
    lst = values.List.from_iterable([values.Integer(i) for i in range(3)])
    assert lst.at(0) == values.Integer(0)
    assert lst.at(2) == values.Integer(2)
    assert lst.at(3) is None
    assert lst.at(-1) is None


def test_list_iteration_respects_size():
    lst = values.List.from_iterable([values.Integer(1), values.Integer(2)])
    truncated = values.List(lst.head, 1)
    assert list(truncated) == [values.Integer(1)]
    assert truncated.at(1) is None


def test_array_size_follows_elements():
    array = values.Array(iter([values.Integer(1), values.Integer(2)]))
    assert array.size == 2
    assert list(array) == [values.Integer(1), values.Integer(2)]


@pytest.mark.parametrize(
    "value,expected",
    [
        (1e-9, "0.000000001"),
        (2.0, "2.0"),
        (1e20, "100000000000000000000.0"),
        (-0.5, "-0.5"),
    ]
)
def test_positional_float(value, expected):
    assert values.positional_float(value) == expected
