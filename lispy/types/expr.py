"""S-Expression and Q-Expression containers.

Both are Python lists of values. They differ only in how the evaluator
treats them: an SExpr is applied, a QExpr is inert data. Two lists are equal
only when they are the same kind and hold equal elements in the same order.
"""

from __future__ import annotations

from lispy import LispValue


class Expr(list):
    __slots__ = ()

    open_bracket = "("
    close_bracket = ")"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and list.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    __hash__ = None  # mutable

    def take(self, i: int) -> LispValue:
        """Remove and return element `i`, emptying the rest of the list."""
        x = self.pop(i)
        self.clear()
        return x

    def copy(self) -> Expr:
        from lispy.types.values import copy_value
        return type(self)(copy_value(x) for x in self)

    def relabel(self, kind: type[Expr]) -> Expr:
        """Move every element into a new list of the given kind."""
        moved = kind(self)
        self.clear()
        return moved

    def __repr__(self):
        return f"{type(self).__name__}({list.__repr__(self)})"

    def __str__(self):
        from lispy.types.values import render
        return render(self)


class SExpr(Expr):
    __slots__ = ()


class QExpr(Expr):
    __slots__ = ()

    open_bracket = "{"
    close_bracket = "}"
