"""Shared debug printers for lexer/parser tests."""

from __future__ import annotations

import os

from jsoncst.cst import ParseNode, dump_tree
from jsoncst.diagnostics import Diagnostic, format_diagnostic
from jsoncst.lexer import Token, token_text

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_CST = os.getenv("PRINT_CST", "0").lower() in {"1", "true", "yes", "on"}
PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in {
    "1",
    "true",
    "yes",
    "on",
}


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_tokens(test_name: str, source: str, tokens: list[Token]) -> None:
    if not PRINT_TOKENS:
        return
    debug_print_source(test_name, source)
    print(f"\n===== {test_name} TOKENS =====")
    for index, tok in enumerate(tokens):
        where = tok.range.as_tuple() if tok.range is not None else None
        print(f"{index:03d} {tok.kind.name:<10} range={where} value={tok.value!r} text={token_text(source, tok)!r}")


def debug_dump_cst(test_name: str, source: str, root: ParseNode) -> None:
    if not PRINT_CST:
        return
    debug_print_source(test_name, source)
    print(f"===== {test_name} CST =====")
    print(dump_tree(root))


def debug_dump_diagnostics(test_name: str, diagnostics: list[Diagnostic], source: str | None = None) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"===== {test_name} DIAGNOSTICS =====")
    if not diagnostics:
        print("(none)")
        return
    for diagnostic in diagnostics:
        print(format_diagnostic(diagnostic))
