"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from jsoncst.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """One-line rendering used by scripts and debug printers."""
    where = ""
    if diagnostic.range is not None:
        where = f" range={diagnostic.range.as_tuple()}"
    if diagnostic.position is not None:
        where += f" token={diagnostic.position}"
    line = f"{diagnostic.severity.upper()} {diagnostic.code}{where}: {diagnostic.message}"
    if diagnostic.hint:
        line += f" (hint: {diagnostic.hint})"
    return line
