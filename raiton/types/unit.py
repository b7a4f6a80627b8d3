from __future__ import annotations


class UnitType:
    """The value of an empty scope or an empty application."""

    __slots__ = ()

    type_name = "unit"

    def inspect(self) -> str:
        return "()"

    def __repr__(self): return "Unit"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, UnitType)

    def __hash__(self):
        return hash(UnitType)


Unit = UnitType()
