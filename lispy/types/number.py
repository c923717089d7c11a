"""Numbers are Python ints held to the width of a signed 64-bit integer."""

from __future__ import annotations

NUM_BITS = 64
NUM_MIN = -(1 << (NUM_BITS - 1))
NUM_MAX = (1 << (NUM_BITS - 1)) - 1
_MASK = (1 << NUM_BITS) - 1


def in_range(n: int) -> bool:
    return NUM_MIN <= n <= NUM_MAX


def wrap(n: int) -> int:
    """Two's complement wrap-around, as native integer arithmetic does."""
    return ((n - NUM_MIN) & _MASK) + NUM_MIN


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, pairing with trunc_div."""
    return a - b * trunc_div(a, b)
