"""Exceptions raised by the lexer and parser."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Final

from jsoncst.diagnostics import (
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
    Diagnostic,
    DiagnosticSpec,
)
from jsoncst.text import TextRange

if TYPE_CHECKING:
    from jsoncst.lexer.tokens import Token


class LexErrorKind(StrEnum):
    INVALID_CHARACTER = "InvalidCharacter"
    INVALID_ESCAPE = "InvalidEscape"
    INVALID_LITERAL = "InvalidLiteral"
    INVALID_NUMBER = "InvalidNumber"
    UNEXPECTED_CHARACTER = "UnexpectedCharacter"
    UNEXPECTED_END_OF_INPUT = "UnexpectedEndOfInput"


class ParseErrorKind(StrEnum):
    UNEXPECTED_TOKEN = "UnexpectedToken"
    UNEXPECTED_END_OF_INPUT = "UnexpectedEndOfInput"
    TRAILING_INPUT = "TrailingInput"
    DEPTH_LIMIT_EXCEEDED = "DepthLimitExceeded"


_LEX_SPECS: Final[dict[LexErrorKind, DiagnosticSpec]] = {
    LexErrorKind.INVALID_CHARACTER: LEXER_INVALID_CHARACTER,
    LexErrorKind.INVALID_ESCAPE: LEXER_INVALID_ESCAPE,
    LexErrorKind.INVALID_LITERAL: LEXER_INVALID_LITERAL,
    LexErrorKind.INVALID_NUMBER: LEXER_INVALID_NUMBER,
    LexErrorKind.UNEXPECTED_CHARACTER: LEXER_UNEXPECTED_CHARACTER,
    LexErrorKind.UNEXPECTED_END_OF_INPUT: LEXER_UNTERMINATED_STRING,
}

_PARSE_SPECS: Final[dict[ParseErrorKind, DiagnosticSpec]] = {
    ParseErrorKind.UNEXPECTED_TOKEN: PARSER_UNEXPECTED_TOKEN,
    ParseErrorKind.UNEXPECTED_END_OF_INPUT: PARSER_UNEXPECTED_END_OF_INPUT,
    ParseErrorKind.TRAILING_INPUT: PARSER_TRAILING_INPUT,
    ParseErrorKind.DEPTH_LIMIT_EXCEEDED: PARSER_DEPTH_LIMIT_EXCEEDED,
}


class JsonCstError(Exception):
    """Base class for every error raised while tokenizing or parsing."""

    @property
    def message(self) -> str:
        return str(self)


class LexError(JsonCstError):
    """The first invalid character or token met while scanning.

    `offset` is the character offset where the offending lexeme starts and
    `end` where scanning stopped.
    """

    def __init__(self, kind: LexErrorKind, message: str, offset: int, end: int | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.offset = offset
        self.end = offset if end is None else end

    @property
    def range(self) -> TextRange:
        return TextRange(self.offset, self.end)

    @property
    def diagnostic(self) -> Diagnostic:
        spec = _LEX_SPECS[self.kind]
        return Diagnostic(
            code=spec.code,
            message=str(self),
            range=self.range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )


class ParseError(JsonCstError):
    """A syntax error at a token index.

    `token` is the offending token, or None when the parser ran off the end.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        position: int,
        token: Token | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.position = position
        self.token = token

    @property
    def diagnostic(self) -> Diagnostic:
        spec = _PARSE_SPECS[self.kind]
        return Diagnostic(
            code=spec.code,
            message=str(self),
            range=self.token.range if self.token is not None else None,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
            position=self.position,
        )
