"""Runtime value model: the six value kinds and the environment chain."""

from lispy.types.symbol import Symbol
from lispy.types.error import Error
from lispy.types.expr import Expr, SExpr, QExpr
from lispy.types.function import Function, Builtin, Lambda
from lispy.types.environment import Environment
from lispy.types.values import copy_value, render, type_name

__all__ = [
    "Symbol",
    "Error",
    "Expr",
    "SExpr",
    "QExpr",
    "Function",
    "Builtin",
    "Lambda",
    "Environment",
    "copy_value",
    "render",
    "type_name",
]
