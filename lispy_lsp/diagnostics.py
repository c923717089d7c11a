"""Diagnostics computed from a DocumentIndex."""

from __future__ import annotations

from typing import List

from lsprotocol.types import Diagnostic, DiagnosticSeverity, Position, Range

from lispy_lsp.indexer import DocumentIndex

SOURCE = "lispy-ls"


def _mk_range(line: int, col: int) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + 1))


def collect_diagnostics(idx: DocumentIndex) -> List[Diagnostic]:
    diags: List[Diagnostic] = []

    if idx.syntax_error is not None:
        err = idx.syntax_error
        diags.append(
            Diagnostic(
                range=_mk_range(err.line, err.col),
                message=err.message,
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )

    # Unmatched brackets
    if idx.paren_balance != 0:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message="Unmatched parentheses detected",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )
    if idx.brace_balance != 0:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message="Unmatched braces detected",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )

    return diags
