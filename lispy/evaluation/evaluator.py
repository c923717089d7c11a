"""Core evaluator for the Lispy interpreter.

Reduces a value to normal form. Symbols are looked up, S-Expressions are
evaluated child by child and then applied, everything else evaluates to
itself. Evaluation consumes its input: the list handed in is emptied or
rewritten in place, so callers pass a copy of anything they want to keep.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.errors import LispyTypeError
from lispy.types.environment import Environment
from lispy.types.error import Error
from lispy.types.expr import SExpr
from lispy.types.function import Function
from lispy.types.symbol import Symbol
from lispy.types.values import type_name


def evaluate(expr: LispValue, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr)
        case SExpr():
            return evaluate_sexpr(expr, env)

    # --- Numbers, errors, functions and Q-Expressions return as-is ---
    return expr


def evaluate_sexpr(expr: SExpr, env: Environment) -> LispValue:
    # Left to right: a definition made by one child is visible to the next.
    for i, child in enumerate(expr):
        expr[i] = evaluate(child, env)
        if isinstance(expr[i], Error):
            return expr.take(i)

    if not expr:
        return expr
    if len(expr) == 1:
        return expr.take(0)

    head = expr.pop(0)
    if not isinstance(head, Function):
        return Error(
            "Incorrect type for first element. "
            f"Got {type_name(head)}, expected Function.",
            LispyTypeError.kind,
        )

    # Deferred: apply needs evaluate for lambda bodies
    from lispy.evaluation.apply import apply
    return apply(head, expr, env)
