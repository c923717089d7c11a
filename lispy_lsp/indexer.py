from __future__ import annotations

"""
Lightweight indexer for Lispy files without evaluating code.

We scan the token stream for definitions and build an index for:
- globals and locals: (def {a b} ...), (= {a} ...)
- named functions: (fun {name args...} {...}), (def {name} (\\ ...))
- bracket balance for both () and {}
- the first syntax error reported by the real parser

The scan is tolerant so partial buffers still index; the parser is only
consulted for its error message and position.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import re

from lispy.errors import LispySyntaxError
from lispy.reader.parser import parse, position_from_offset

# Simple token patterns for scanning
TOKEN_REGEX = re.compile(r";[^\n]*|[(){}]|[^\s(){};]+")

DEFINING_FORMS = ("def", "=", "fun")


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class SyntaxProblem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    paren_balance: int = 0
    brace_balance: int = 0
    syntax_error: Optional[SyntaxProblem] = None


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        tok = m.group(0)
        if tok.startswith(';'):
            continue
        yield tok, m.start()


def _record(idx: DocumentIndex, text: str, name: str, kind: str, offset: int) -> None:
    line, col = position_from_offset(text, offset)
    idx.symbols[name] = SymbolDef(name=name, kind=kind, line=line, col=col)


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))

    for i, (tok, _) in enumerate(tokens):
        if tok == '(':
            idx.paren_balance += 1
        elif tok == ')':
            idx.paren_balance -= 1
        elif tok == '{':
            idx.brace_balance += 1
        elif tok == '}':
            idx.brace_balance -= 1
        elif tok in DEFINING_FORMS and i + 1 < len(tokens) and tokens[i + 1][0] == '{':
            # Collect the symbols up to the closing brace
            names = []
            j = i + 2
            while j < len(tokens) and tokens[j][0] not in ('{', '}', '(', ')'):
                names.append(tokens[j])
                j += 1
            if not names:
                continue
            if tok == 'fun':
                name, offset = names[0]
                _record(idx, text, name, 'function', offset)
                continue
            # (def {f} (\ ...)) names a function
            lambda_follows = (
                len(names) == 1
                and j + 2 < len(tokens)
                and tokens[j][0] == '}'
                and tokens[j + 1][0] == '('
                and tokens[j + 2][0] == '\\'
            )
            for name, offset in names:
                _record(idx, text, name, 'function' if lambda_follows else 'var', offset)

    try:
        parse(text)
    except LispySyntaxError as ex:
        idx.syntax_error = SyntaxProblem(message=str(ex), line=ex.line, col=ex.col)

    return idx


# Builtin signatures for quick hover/signature help without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "\\": "(\\ {formals} {body})",
    "def": "(def {syms} values...)",
    "=": "(= {syms} values...)",
    "list": "(list xs...)",
    "head": "(head {xs})",
    "tail": "(tail {xs})",
    "eval": "(eval {expr})",
    "join": "(join {xs}...)",
    "+": "(+ n ns...)",
    "-": "(- n ns...)",
    "*": "(* n ns...)",
    "/": "(/ n ns...)",
    "%": "(% n ns...)",
}

# Definitions made by the bundled prelude
PRELUDE_SIGNATURES: Dict[str, str] = {
    "fun": "(fun {name formals...} {body})",
    "unpack": "(unpack f {xs})",
    "curry": "(curry f {xs})",
    "pack": "(pack f xs...)",
    "uncurry": "(uncurry f xs...)",
    "nil": "nil",
}

KNOWN_SIGNATURES: Dict[str, str] = {**BUILTIN_SIGNATURES, **PRELUDE_SIGNATURES}


def signature_parameters(signature: str) -> List[str]:
    """Parameter labels of a signature, without the callee name."""
    return signature.strip("()").split()[1:]
