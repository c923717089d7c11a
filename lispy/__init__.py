# Core type aliases for Lispy's data model.
# Numbers are plain Python ints; symbols, errors, functions and the two list
# kinds (S-Expression and Q-Expression) are small classes under lispy.types.
#
# Naming guidance:
# - LispValue: any runtime value produced by the reader or the evaluator.
# - BuiltinFn: the Python signature of a primitive, op(env, args) -> LispValue.

from typing import Any, Callable

__version__ = "0.0.0.0.1"

# Runtime value alias
LispValue = Any

# Primitive operation registered in the global environment
BuiltinFn = Callable[..., LispValue]
