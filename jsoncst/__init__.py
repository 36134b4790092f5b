"""JSON tokenizer and recursive-descent parser producing a concrete syntax tree."""

from jsoncst.cst import (
    GrammarItem,
    GrammarKind,
    JsonValue,
    ParseNode,
    dump_tree,
    iter_nodes,
    lower_tree,
    render_tree,
)
from jsoncst.diagnostics import Diagnostic
from jsoncst.errors import JsonCstError, LexError, LexErrorKind, ParseError, ParseErrorKind
from jsoncst.lexer import Lexer, Token, TokenKind, dump_tokens, tokenize, unescape
from jsoncst.parser import ParserOptions, parse, parse_result, parse_text
from jsoncst.pipeline import JsonParseResult

__all__ = [
    "Diagnostic",
    "GrammarItem",
    "GrammarKind",
    "JsonCstError",
    "JsonParseResult",
    "JsonValue",
    "LexError",
    "LexErrorKind",
    "Lexer",
    "ParseError",
    "ParseErrorKind",
    "ParseNode",
    "ParserOptions",
    "Token",
    "TokenKind",
    "dump_tokens",
    "dump_tree",
    "iter_nodes",
    "lower_tree",
    "parse",
    "parse_result",
    "parse_text",
    "render_tree",
    "tokenize",
    "unescape",
]
