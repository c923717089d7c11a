"""Error values.

Failures inside the language are ordinary values: a builtin that cannot
complete returns an Error, and an Error met while evaluating an S-Expression
becomes the result of the whole expression.
"""

from __future__ import annotations

from lispy.errors import LispyError


class Error:
    __slots__ = ("message", "kind")

    def __init__(self, message: str, kind: str = LispyError.kind):
        self.message = message
        self.kind = kind

    @classmethod
    def from_exception(cls, exc: LispyError) -> Error:
        return cls(str(exc), exc.kind)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Error)
            and self.kind == other.kind
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self):
        return f"Error({self.message!r}, kind={self.kind!r})"

    def __str__(self):
        return f"Error: {self.message}"
