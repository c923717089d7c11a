"""Runtime environment for Lispy.

The Environment stores bindings of Symbols to values and supports nested
scopes via an `outer` link. Every binding owns its value: values are copied
on the way in (`bind`, `define`) and on the way out (`lookup`), so no two
scopes ever share a mutable list or closure.

`outer` is a back-reference only. Copying an environment copies the
bindings but keeps pointing at the same parent.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lispy import LispValue
from lispy.errors import LispyTypeError, LispyUnboundSymbol
from lispy.types.error import Error
from lispy.types.symbol import Symbol
from lispy.types.values import copy_value


class Environment:
    """Hierarchical mapping from Symbols to Lispy values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def root(self) -> Environment:
        """Climb the parent links to the global scope."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Return a copy of the value bound to `name`.

        Resolution walks from this scope out to the root. A miss everywhere
        yields an unresolved-symbol Error value rather than raising.
        """
        env = self.find(name)
        if env is None:
            return Error(f"Symbol '{name}' not defined.", LispyUnboundSymbol.kind)
        return copy_value(env.vars[name])

    def bind(self, name: Symbol, value: LispValue) -> None:
        """Bind a copy of `value` to `name` in this scope only.

        An existing binding in this scope is replaced; ancestors are never
        touched. Raises LispyTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispyTypeError(f"Cannot bind {name} as a symbol.")
        self.vars[name] = copy_value(value)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in the global scope, wherever this scope sits."""
        self.root().bind(name, value)

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-bind a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.bind(k, v)

    def copy(self) -> Environment:
        """Copy every binding; the parent reference is shared, not copied."""
        env = Environment(self.outer)
        env.vars = {k: copy_value(v) for k, v in self.vars.items()}
        return env

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Environment)
            and self.outer is other.outer
            and self.vars == other.vars
        )

    __hash__ = None

    def __len__(self) -> int:
        return len(self.vars)

    def __contains__(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
