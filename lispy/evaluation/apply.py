"""Application engine for Lispy.

This module centralizes function application semantics for the interpreter:
- Builtins are called directly with the calling environment and the
  argument list, which they consume.
- Lambdas bind one formal to one argument at a time into a fresh copy of
  their own environment. The `&` formal collects every remaining argument
  into a Q-Expression.
- Fewer arguments than formals yields a new Lambda holding the bindings made
  so far (partial application); exactly enough runs the body.

Failures raised as LispyError anywhere in a call come back as Error values.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.errors import (
    LispyArityError,
    LispyError,
    LispyMalformedVariadic,
    LispyTypeError,
)
from lispy.evaluation.evaluator import evaluate
from lispy.types.environment import Environment
from lispy.types.error import Error
from lispy.types.expr import QExpr, SExpr
from lispy.types.function import Builtin, Lambda
from lispy.types.symbol import VARIADIC
from lispy.types.values import copy_value, type_name

_MALFORMED_VARIADIC = "Function format invalid. Symbol '&' not followed by single symbol."


def apply_lambda(fn: Lambda, args: SExpr, caller_env: Environment) -> LispValue:
    """Apply a Lambda value.

    Parameters:
    - fn: The Lambda being applied. It is never modified, so the same value
      can be called again from any scope.
    - args: The already-evaluated argument values. Consumed.
    - caller_env: The environment the call is made from. It becomes the
      parent of the call's local scope for the duration of the body.

    Raises LispyArityError for surplus arguments and LispyMalformedVariadic
    when '&' is not followed by exactly one formal.
    """
    formals = fn.formals
    given = len(args)
    total = len(formals)

    local = fn.env.copy()
    bound = 0  # formals consumed so far

    while args:
        if bound == total:
            raise LispyArityError(
                f"Function passed too many arguments. Got {given}, expected {total}."
            )
        sym = formals[bound]
        bound += 1

        if sym == VARIADIC:
            if total - bound != 1:
                raise LispyMalformedVariadic(_MALFORMED_VARIADIC)
            local.bind(formals[bound], args.relabel(QExpr))
            bound += 1
            break

        local.bind(sym, args.pop(0))

    # A trailing '&' with nothing left to collect binds the empty list
    if bound < total and formals[bound] == VARIADIC:
        if total - bound != 2:
            raise LispyMalformedVariadic(_MALFORMED_VARIADIC)
        local.bind(formals[bound + 1], QExpr())
        bound += 2

    if bound < total:
        remaining = QExpr(copy_value(f) for f in formals[bound:])
        return Lambda(remaining, fn.body.copy(), local)

    local.outer = caller_env
    return evaluate(fn.body.copy().relabel(SExpr), local)


def apply(fn: LispValue, args: SExpr, env: Environment) -> LispValue:
    """Apply either a Builtin or a Lambda to an argument list.

    - For Lambda, defer to apply_lambda (handling partials and '&').
    - For Builtin, invoke with the runtime env and the list of args.
    - Anything else is a type Error.
    """
    try:
        if isinstance(fn, Lambda):
            return apply_lambda(fn, args, env)
        if isinstance(fn, Builtin):
            return fn(env, args)
    except LispyError as exc:
        return Error.from_exception(exc)
    return Error(
        f"Cannot apply non-function. Got {type_name(fn)}, expected Function.",
        LispyTypeError.kind,
    )
