"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_INVALID_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_CHARACTER",
    message="Invalid character in string literal.",
    hint="Control characters must be written as escape sequences (`\\n`, `\\t`, `\\u0000`).",
    severity="error",
    category="lexer",
)

LEXER_INVALID_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_ESCAPE",
    message="Invalid escape sequence in string literal.",
    hint='Valid escapes are `\\\\`, `\\/`, `\\b`, `\\f`, `\\n`, `\\r`, `\\t`, `\\u` and `\\"`.',
    severity="error",
    category="lexer",
)

LEXER_INVALID_LITERAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_LITERAL",
    message="Invalid literal.",
    hint="The only bare words allowed are `true`, `false` and `null`.",
    severity="error",
    category="lexer",
)

LEXER_INVALID_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_NUMBER",
    message="Invalid number literal.",
    severity="error",
    category="lexer",
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character.",
    hint="Bare values are not allowed; quote strings with double quotes.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a double quote.",
    severity="error",
    category="lexer",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_END_OF_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_END_OF_INPUT",
    message="Unexpected end of input",
    severity="error",
    category="parser",
)

PARSER_TRAILING_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_INPUT",
    message="Expected end of input",
    hint="A document holds exactly one value.",
    severity="error",
    category="parser",
)

PARSER_DEPTH_LIMIT_EXCEEDED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DEPTH_LIMIT_EXCEEDED",
    message="Nesting depth limit exceeded",
    hint="Raise `ParserOptions.max_depth` or pass `max_depth=None`.",
    severity="error",
    category="parser",
)
