"""Helpers that work across every value kind: copying, naming, rendering."""

from __future__ import annotations

from lispy import LispValue
from lispy.types.error import Error
from lispy.types.expr import Expr, QExpr, SExpr
from lispy.types.function import Function
from lispy.types.symbol import Symbol

# Display names used in type error messages
TYPE_NAMES: dict[type, str] = {
    int: "Number",
    Error: "Error",
    Symbol: "Symbol",
    Function: "Function",
    SExpr: "S-Expression",
    QExpr: "Q-Expression",
}


def copy_value(v: LispValue) -> LispValue:
    """Return an independent copy of `v`.

    Lists and lambdas are copied deeply. Numbers, symbols, errors and
    builtins are immutable, so the value itself is its own copy.
    """
    if isinstance(v, (Expr, Function)):
        return v.copy()
    return v


def type_name(v: LispValue) -> str:
    for kind, name in TYPE_NAMES.items():
        if isinstance(v, kind):
            return name
    return "Unknown"


def render(v: LispValue) -> str:
    """Printed form shown by the REPL: `{1 2}`, `(+ 1 2)`, `Error: ...`.

    Walks nested lists with an explicit stack, so any value the reader can
    build can also be printed.
    """
    parts: list[str] = []
    # Pending values, plus plain str entries for brackets and separators
    todo: list = [v]
    while todo:
        x = todo.pop()
        if isinstance(x, str):
            parts.append(x)
        elif isinstance(x, Expr):
            parts.append(x.open_bracket)
            todo.append(x.close_bracket)
            for i, item in enumerate(reversed(x)):
                if i:
                    todo.append(" ")
                todo.append(item)
        else:
            parts.append(str(x))
    return "".join(parts)
