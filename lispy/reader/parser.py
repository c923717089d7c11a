"""
  Lispy Lexer and Parser

Turns source text into a generic parse tree of ParseNode objects. The tree is
language-agnostic: a node has a tag naming the grammar rule, its literal
contents and an ordered list of children. The reader only looks at tag
substrings and bracket punctuation, so any parser producing the same shape
can stand in for this one.

Grammar:

    number : /-?[0-9]+/ ;
    symbol : /[a-zA-Z0-9_+\\-*\\/%\\\\=<>!&]+/ ;
    sexpr  : '(' <expr>* ')' ;
    qexpr  : '{' <expr>* '}' ;
    expr   : <number> | <symbol> | <sexpr> | <qexpr> ;
    lispy  : /^/ <expr>* /$/ ;

Tree shape:

    - root               -> tag ">", children: regex anchor, exprs..., regex anchor
    - numbers / symbols  -> tag "expr|number|regex" / "expr|symbol|regex"
    - lists              -> tag "expr|sexpr|>" / "expr|qexpr|>"
    - brackets           -> tag "char", contents "(" ")" "{" "}"
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Optional

from lispy.errors import LispySyntaxError


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<number>-?[0-9]+)"  # tried before symbol, so "-5" is a number
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/%\\=<>!&]+)"
    r")"
)

OPENERS = {"lparen": ("rparen", "sexpr"), "lbrace": ("rbrace", "qexpr")}

Token = tuple[str, str, int]


@dataclass
class ParseNode:
    tag: str
    contents: str = ""
    children: list[ParseNode] = field(default_factory=list)
    line: int = 0  # 0-based
    col: int = 0  # 0-based

    def __str__(self) -> str:
        if not self.children:
            return f"{self.tag} '{self.contents}'"
        return f"{self.tag} [" + " ".join(str(c) for c in self.children) + "]"


def position_from_offset(source: str, offset: int) -> tuple[int, int]:
    # Return (line, col), 0-based
    line = source.count("\n", 0, offset)
    last_nl = source.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def lex(source: str, filename: str = "<stdin>") -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            if source[pos:].strip() == "":
                break
            start = pos + len(source[pos:]) - len(source[pos:].lstrip())
            line, col = position_from_offset(source, start)
            raise LispySyntaxError(
                f"{filename}:{line + 1}:{col + 1}: error: unexpected {source[start]!r}",
                line,
                col,
            )
        pos = m.end()
        if m.lastgroup == "comment":
            continue
        yield m.lastgroup, m.group(m.lastgroup), m.start(m.lastgroup)


class TokenStream:
    def __init__(self, source: str, filename: str = "<stdin>"):
        self.source = source
        self.filename = filename
        self.tokens = lex(source, filename)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def _error(self, message: str, offset: int) -> LispySyntaxError:
        line, col = position_from_offset(self.source, offset)
        return LispySyntaxError(
            f"{self.filename}:{line + 1}:{col + 1}: error: {message}", line, col
        )

    def _node(self, tag: str, contents: str, offset: int) -> ParseNode:
        line, col = position_from_offset(self.source, offset)
        return ParseNode(tag, contents, [], line, col)

    def parse_expr(self) -> ParseNode:
        tok = self.advance()
        if tok is None:
            raise self._error("expected expression at end of input", len(self.source))
        tok_type, tok_val, offset = tok

        if tok_type in ("number", "symbol"):
            return self._node(f"expr|{tok_type}|regex", tok_val, offset)

        if tok_type in OPENERS:
            closer, rule = OPENERS[tok_type]
            node = self._node(f"expr|{rule}|>", "", offset)
            node.children.append(self._node("char", tok_val, offset))
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise self._error(
                        f"expected '{_CLOSE_TEXT[closer]}' at end of input",
                        len(self.source),
                    )
                if nxt[0] == closer:
                    self.advance()
                    node.children.append(self._node("char", nxt[1], nxt[2]))
                    return node
                node.children.append(self.parse_expr())

        raise self._error(f"unexpected '{tok_val}'", offset)

    def parse_all(self) -> Iterator[ParseNode]:
        while self.peek() is not None:
            yield self.parse_expr()


_CLOSE_TEXT = {"rparen": ")", "rbrace": "}"}


def too_deep(filename: str) -> LispySyntaxError:
    return LispySyntaxError(f"{filename}:1:1: error: expression nested too deeply")


def parse(source: str, filename: str = "<stdin>") -> ParseNode:
    """Parse a whole input into a root node wrapping its top-level expressions.

    Raises LispySyntaxError on unbalanced or stray brackets, and on input
    nested deeper than the Python stack allows.
    """
    stream = TokenStream(source, filename)
    root = ParseNode(">", "", [ParseNode("regex", "")])
    try:
        root.children.extend(stream.parse_all())
    except RecursionError:
        raise too_deep(filename) from None
    end_line, end_col = position_from_offset(source, len(source))
    root.children.append(ParseNode("regex", "", [], end_line, end_col))
    return root
