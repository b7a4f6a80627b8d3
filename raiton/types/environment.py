"""Runtime environment for Raiton.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Links only ever point towards the root, so
a chain can never form a cycle. `define` writes to the local frame only;
parents are read-only from a child's point of view.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from raiton.errors import RaitonTypeError, RaitonUnboundName
from raiton.syntax.ast import Identifier


def _key(name: str | Identifier) -> str:
    if isinstance(name, Identifier):
        return name.name
    if isinstance(name, str) and name:
        return name
    raise RaitonTypeError(f"Cannot bind {name!r} as a name")


class Environment:
    """Hierarchical mapping from names to Raiton values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, object] = {}
        self.outer: Environment | None = outer

    @classmethod
    def new_root(cls) -> Environment:
        return cls()

    @classmethod
    def new_enclosed(cls, parent: Environment) -> Environment:
        return cls(outer=parent)

    def enclosing(self) -> Optional[Environment]:
        return self.outer

    def define(self, name: str | Identifier, value):
        """Bind `name` in this frame, shadowing any outer binding. Returns `value`."""
        self.vars[_key(name)] = value
        return value

    def find(self, name: str | Identifier) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str | Identifier):
        """Look up the value bound to `name`, local frame first.

        Raises RaitonUnboundName if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise RaitonUnboundName(f"'{_key(name)}' not defined")
        return env.vars[_key(name)]

    def __contains__(self, name: str | Identifier) -> bool:
        return self.find(name) is not None

    def clone(self) -> Environment:
        """Shallow copy of the local frame sharing the same parent."""
        copy = Environment(outer=self.outer)
        copy.vars = dict(self.vars)
        return copy

    def update(self, mapping: dict) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v.inspect()}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
