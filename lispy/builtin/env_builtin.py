"""Built-in functions for the Lispy runtime environment.

This module defines the fixed primitive set registered into the global
environment: lambda construction, global and local definition, the list
functions over Q-Expressions, and integer arithmetic.

Every primitive has the signature op(env, args): `env` is the calling
environment and `args` the evaluated argument S-Expression, which the
primitive owns and may take apart. Invalid arguments raise a LispyError,
which the application engine turns into an Error value.
"""
from __future__ import annotations

from typing import Callable

from lispy import LispValue
from lispy.errors import (
    LispyArityError,
    LispyDivisionByZero,
    LispyEmptyListError,
    LispyTypeError,
)
from lispy.evaluation.evaluator import evaluate
from lispy.types.environment import Environment
from lispy.types.expr import QExpr, SExpr
from lispy.types.function import Builtin, Lambda
from lispy.types.number import trunc_div, trunc_mod, wrap
from lispy.types.symbol import Symbol
from lispy.types.values import TYPE_NAMES, type_name


# -------------------------------
# Argument checks
# -------------------------------
def check_count(name: str, args: SExpr, expected: int) -> None:
    if len(args) != expected:
        raise LispyArityError(
            f"Function '{name}' passed incorrect number of arguments. "
            f"Got {len(args)}, expected {expected}."
        )


def check_type(name: str, args: SExpr, i: int, kind: type) -> None:
    if not isinstance(args[i], kind):
        raise LispyTypeError(
            f"Function '{name}' passed incorrect type for argument {i}. "
            f"Got {type_name(args[i])}, expected {TYPE_NAMES[kind]}."
        )


def check_not_empty(name: str, args: SExpr, i: int) -> None:
    if not args[i]:
        raise LispyEmptyListError(f"Function '{name}' passed {{}} for argument {i}.")


def check_symbols(name: str, syms: QExpr) -> None:
    for s in syms:
        if not isinstance(s, Symbol):
            raise LispyTypeError(
                f"Function '{name}' cannot define non-symbol. "
                f"Got {type_name(s)}, expected Symbol."
            )


# -------------------------------
# Variables and functions
# -------------------------------
def lambda_builtin(env: Environment, args: SExpr) -> Lambda:
    """(\\ {formals} {body}) -> a new lambda."""
    check_count("\\", args, 2)
    check_type("\\", args, 0, QExpr)
    check_type("\\", args, 1, QExpr)
    check_symbols("\\", args[0])

    formals = args.pop(0)
    body = args.pop(0)
    return Lambda(formals, body)


def _var(env: Environment, args: SExpr, name: str) -> SExpr:
    if not args:
        raise LispyArityError(
            f"Function '{name}' passed incorrect number of arguments. "
            "Got 0, expected at least 1."
        )
    check_type(name, args, 0, QExpr)
    syms = args[0]
    check_symbols(name, syms)
    if len(syms) != len(args) - 1:
        raise LispyArityError(
            f"Function '{name}' cannot define incorrect number of values to symbols. "
            f"Got {len(syms)} symbols and {len(args) - 1} values."
        )

    for sym, value in zip(syms, args[1:]):
        if name == "def":
            env.define(sym, value)
        else:
            env.bind(sym, value)
    return SExpr()


def def_builtin(env: Environment, args: SExpr) -> SExpr:
    """(def {a b} 1 2) binds in the global scope."""
    return _var(env, args, "def")


def put_builtin(env: Environment, args: SExpr) -> SExpr:
    """(= {a b} 1 2) binds in the current scope."""
    return _var(env, args, "=")


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: SExpr) -> QExpr:
    return args.relabel(QExpr)


def head(env: Environment, args: SExpr) -> QExpr:
    check_count("head", args, 1)
    check_type("head", args, 0, QExpr)
    check_not_empty("head", args, 0)

    v = args.take(0)
    del v[1:]
    return v


def tail(env: Environment, args: SExpr) -> QExpr:
    check_count("tail", args, 1)
    check_type("tail", args, 0, QExpr)
    check_not_empty("tail", args, 0)

    v = args.take(0)
    v.pop(0)
    return v


def eval_builtin(env: Environment, args: SExpr) -> LispValue:
    check_count("eval", args, 1)
    check_type("eval", args, 0, QExpr)

    x = args.take(0).relabel(SExpr)
    return evaluate(x, env)


def join(env: Environment, args: SExpr) -> QExpr:
    for i in range(len(args)):
        check_type("join", args, i, QExpr)

    x = QExpr()
    while args:
        x.extend(args.pop(0))
    return x


# -------------------------------
# Arithmetic
# -------------------------------
def _div(a: int, b: int) -> int:
    if b == 0:
        raise LispyDivisionByZero("Function '/' caused division by zero.")
    return trunc_div(a, b)


def _mod(a: int, b: int) -> int:
    if b == 0:
        raise LispyDivisionByZero("Function '%' caused division by zero.")
    return trunc_mod(a, b)


OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _div,
    "%": _mod,
}


def arithmetic(name: str, args: SExpr) -> int:
    for i in range(len(args)):
        check_type(name, args, i, int)
    if not args:
        raise LispyArityError(
            f"Function '{name}' passed incorrect number of arguments. "
            "Got 0, expected at least 1."
        )

    op = OPERATORS[name]
    x = args.pop(0)
    # Unary minus negates
    if name == "-" and not args:
        return wrap(-x)
    while args:
        x = wrap(op(x, args.pop(0)))
    return x


def add(env: Environment, args: SExpr) -> int:
    return arithmetic("+", args)


def sub(env: Environment, args: SExpr) -> int:
    return arithmetic("-", args)


def mul(env: Environment, args: SExpr) -> int:
    return arithmetic("*", args)


def div(env: Environment, args: SExpr) -> int:
    return arithmetic("/", args)


def mod(env: Environment, args: SExpr) -> int:
    return arithmetic("%", args)


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[Environment, SExpr], LispValue]] = {
    # variable functions
    "\\": lambda_builtin,
    "def": def_builtin,
    "=": put_builtin,
    # list functions
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "eval": eval_builtin,
    "join": join,
    # mathematical functions
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
}


def register(env: Environment) -> None:
    env.update({Symbol(name): Builtin(name, op) for name, op in BUILTINS.items()})
