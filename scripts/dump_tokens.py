#!/usr/bin/env python
"""Print the token stream (and optionally the parse tree) of a JSON file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from jsoncst import dump_tokens, dump_tree, render_tree
from jsoncst.diagnostics import format_diagnostic
from jsoncst.pipeline import run_parse


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump JSON tokens and concrete syntax tree")
    parser.add_argument("path", type=Path, help="JSON file to read")
    parser.add_argument("--tree", action="store_true", help="Also print the parse tree")
    parser.add_argument(
        "--indent",
        action="store_true",
        help="Print the tree one node per line instead of the single-line rendering",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    path: Path = args.path
    if not path.is_file():
        raise SystemExit(f"Not a file: {path}")
    text = path.read_text(encoding="utf-8")

    result = run_parse(text)
    if result.tokens is not None:
        dump_tokens(result.tokens, text)

    if result.has_errors:
        print("\nDiagnostics:")
        for diagnostic in result.diagnostics:
            print(f"- {format_diagnostic(diagnostic)}")
        return 1

    if args.tree:
        root = result.require_root()
        print()
        print(dump_tree(root) if args.indent else render_tree(root))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
