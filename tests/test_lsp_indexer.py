from lsprotocol.types import DiagnosticSeverity

from lispy.builtin.env_builtin import BUILTINS
from lispy_lsp.diagnostics import collect_diagnostics
from lispy_lsp.indexer import (
    BUILTIN_SIGNATURES,
    build_index,
    signature_parameters,
)

SOURCE = """\
; numbers
(def {x y} 1 2)
(fun {add a b} {+ a b})
(def {inc} (\\ {n} {+ n 1}))
(= {local} {1 2})
"""


def test_definitions_are_indexed():
    idx = build_index(SOURCE)
    assert {name: (d.kind, d.line, d.col) for name, d in idx.symbols.items()} == {
        "x": ("var", 1, 6),
        "y": ("var", 1, 8),
        "add": ("function", 2, 6),
        "inc": ("function", 3, 6),
        "local": ("var", 4, 4),
    }


def test_clean_document_has_no_diagnostics():
    idx = build_index(SOURCE)
    assert idx.paren_balance == 0 and idx.brace_balance == 0
    assert idx.syntax_error is None
    assert collect_diagnostics(idx) == []


def test_unbalanced_document():
    idx = build_index("(def {x} 1\n(head {1 2)")
    assert idx.paren_balance == 1
    assert idx.brace_balance == 1
    assert idx.syntax_error is not None
    assert idx.syntax_error.line == 1

    diags = collect_diagnostics(idx)
    assert [d.severity for d in diags] == [
        DiagnosticSeverity.Error,
        DiagnosticSeverity.Warning,
        DiagnosticSeverity.Warning,
    ]
    assert diags[0].range.start.line == 1


def test_comments_are_ignored():
    idx = build_index("; (def {ghost} 1)\n")
    assert idx.symbols == {}
    assert idx.paren_balance == 0


def test_every_builtin_has_a_signature():
    assert set(BUILTIN_SIGNATURES) == set(BUILTINS)


def test_signature_parameters():
    assert signature_parameters("(head {xs})") == ["{xs}"]
    assert signature_parameters("(\\ {formals} {body})") == ["{formals}", "{body}"]
    assert signature_parameters("nil") == []


def test_server_word_helpers():
    from lsprotocol.types import Position

    from lispy_lsp.server import extract_callee_name, extract_word_at, get_line_prefix

    text = "(def {x} 1)\n(head {x y})\n"
    assert extract_word_at(text, Position(line=1, character=3)) == "head"
    assert extract_word_at(text, Position(line=0, character=6)) == "x"
    assert extract_word_at(text, Position(line=5, character=0)) is None

    prefix = get_line_prefix(text, Position(line=1, character=7))
    assert prefix == "(head {"
    assert extract_callee_name(prefix) == "head"
    assert extract_callee_name("x y") is None
