"""Diagnostics."""

from jsoncst.diagnostics.codes import (
    LEXER_INVALID_CHARACTER,
    LEXER_INVALID_ESCAPE,
    LEXER_INVALID_LITERAL,
    LEXER_INVALID_NUMBER,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    PARSER_DEPTH_LIMIT_EXCEEDED,
    PARSER_TRAILING_INPUT,
    PARSER_UNEXPECTED_END_OF_INPUT,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
    Severity,
)
from jsoncst.diagnostics.diagnostic import Diagnostic
from jsoncst.diagnostics.report import format_diagnostic, has_errors

__all__ = [
    "LEXER_INVALID_CHARACTER",
    "LEXER_INVALID_ESCAPE",
    "LEXER_INVALID_LITERAL",
    "LEXER_INVALID_NUMBER",
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_DEPTH_LIMIT_EXCEEDED",
    "PARSER_TRAILING_INPUT",
    "PARSER_UNEXPECTED_END_OF_INPUT",
    "PARSER_UNEXPECTED_TOKEN",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "format_diagnostic",
    "has_errors",
]
