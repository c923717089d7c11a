"""Function values: builtin primitives and user-defined lambdas."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from lispy import BuiltinFn
from lispy.types.expr import QExpr

if TYPE_CHECKING:
    from lispy.types.environment import Environment


class Function:
    """Common base so builtins and lambdas share one value kind."""

    __slots__ = ()


class Builtin(Function):
    """A primitive implemented in Python as op(env, args)."""

    __slots__ = ("name", "op")

    def __init__(self, name: str, op: BuiltinFn):
        self.name = name
        self.op = op

    def __call__(self, env: Environment, args):
        return self.op(env, args)

    def copy(self) -> Builtin:
        # Builtins carry no owned state
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Builtin) and self.op is other.op

    def __hash__(self) -> int:
        return hash(self.op)

    def __repr__(self):
        return f"Builtin({self.name!r})"

    def __str__(self):
        return "<builtin>"


class Lambda(Function):
    """A closure with formal parameters, body, and its own environment.

    The environment holds the arguments bound so far, so a partially applied
    lambda is just a Lambda whose `formals` are the ones still unbound.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(
        self, formals: QExpr, body: QExpr, env: Environment | None = None
    ):
        if env is None:
            from lispy.types.environment import Environment
            env = Environment()
        self.formals: QExpr = formals
        self.body: QExpr = body
        self.env: Environment = env

    def copy(self) -> Lambda:
        return Lambda(self.formals.copy(), self.body.copy(), self.env.copy())

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.formals == other.formals
            and self.body == other.body
            and self.env == other.env
        )

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("\\")
            buffer.write(str(self.formals))
            buffer.write(" ")
            buffer.write(str(self.body))
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Lambda({self.formals!r}, {self.body!r})"
