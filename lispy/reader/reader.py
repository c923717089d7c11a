"""Reader: converts a generic parse tree into Lispy values.

This is the only place the evaluator's value model meets the parser. A node
is classified by substrings of its tag; bracket punctuation and the regex
anchors around the root are skipped. Malformed number literals become Error
values, never exceptions.
"""

from __future__ import annotations

import re

from lispy import LispValue
from lispy.errors import LispyNumericParseError, LispySyntaxError
from lispy.reader.parser import ParseNode
from lispy.types.error import Error
from lispy.types.expr import Expr, QExpr, SExpr
from lispy.types.number import in_range
from lispy.types.symbol import Symbol

PUNCTUATION = frozenset(("(", ")", "{", "}"))
ROOT_TAG = ">"

_NUMBER_RE = re.compile(r"([+-]?)([0-9]+)")


def read_number(node: ParseNode) -> LispValue:
    text = node.contents
    m = _NUMBER_RE.fullmatch(text)
    digits = m.group(2).lstrip("0") if m else ""
    # More than 19 significant digits never fits in 64 bits
    if m is not None and len(digits) <= 19:
        value = -int(digits or "0") if m.group(1) == "-" else int(digits or "0")
        if in_range(value):
            return value
    return Error(f"Invalid number '{text}'.", LispyNumericParseError.kind)


def read(node: ParseNode) -> LispValue:
    """Convert `node` (and everything below it) into a value tree."""
    if "number" in node.tag:
        return read_number(node)
    if "symbol" in node.tag:
        return Symbol(node.contents)

    x: Expr
    if node.tag == ROOT_TAG or "sexpr" in node.tag:
        x = SExpr()
    elif "qexpr" in node.tag:
        x = QExpr()
    else:
        return Error(f"Unknown parse node '{node.tag}'.", LispySyntaxError.kind)

    for child in node.children:
        if child.contents in PUNCTUATION or child.tag == "regex":
            continue
        x.append(read(child))
    return x
