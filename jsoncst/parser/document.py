"""High-level parse entrypoints for JSON text and token sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from jsoncst.cst import ParseNode
from jsoncst.errors import ParseError, ParseErrorKind
from jsoncst.lexer import Token, tokenize
from jsoncst.parser.grammar import parse_json
from jsoncst.parser.options import ParserOptions
from jsoncst.parser.parser import Parser

if TYPE_CHECKING:
    from jsoncst.pipeline import JsonParseResult


def parse(tokens: Sequence[Token], options: ParserOptions | None = None) -> ParseNode:
    """Parse a complete token sequence into a `Json` rooted tree.

    Raises ParseError on the first syntax error; all tokens must be consumed.
    """
    if not tokens:
        raise ParseError(
            ParseErrorKind.UNEXPECTED_END_OF_INPUT,
            "Unexpected end of input at position 0; expected a value",
            0,
        )

    parser = Parser(tokens, options=options)
    try:
        root, pos = parse_json(parser, 0)
    except RecursionError:
        raise parser.recursion_exhausted() from None
    if pos != len(tokens):
        raise parser.trailing(pos)
    return root


def parse_text(text: str, options: ParserOptions | None = None) -> ParseNode:
    """Tokenize and parse `text`; raises LexError or ParseError."""
    return parse(tokenize(text), options=options)


def parse_result(text: str, options: ParserOptions | None = None) -> JsonParseResult:
    """Tokenize and parse `text` without raising for malformed input."""
    from jsoncst.pipeline import run_parse

    return run_parse(text, options=options)
