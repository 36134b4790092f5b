"""Lexer tokens."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Final

from jsoncst.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Punctuation / structure
    # -------------------------
    LBRACE = 60  # {
    RBRACE = 61  # }
    LBRACKET = 62  # [
    RBRACKET = 63  # ]
    COLON = 40  # :
    COMMA = 42  # ,

    # -------------------------
    # Literals
    # -------------------------
    STRING = 21  # quoted string, raw text between the quotes
    NUMBER = 22  # 64-bit float

    # -------------------------
    # Keywords
    # -------------------------
    TRUE = 70
    FALSE = 71
    NULL = 72

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: Final[dict[TokenKind, str]] = {
    TokenKind.LBRACE: "OpeningBrace",
    TokenKind.RBRACE: "ClosingBrace",
    TokenKind.LBRACKET: "OpeningBracket",
    TokenKind.RBRACKET: "ClosingBracket",
    TokenKind.COLON: "Colon",
    TokenKind.COMMA: "Comma",
    TokenKind.STRING: "StringLiteral",
    TokenKind.NUMBER: "Number",
    TokenKind.TRUE: "True",
    TokenKind.FALSE: "False",
    TokenKind.NULL: "Null",
}

PUNCTUATION: Final[dict[str, TokenKind]] = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
}

KEYWORDS: Final[dict[str, TokenKind]] = {
    "t": TokenKind.TRUE,
    "f": TokenKind.FALSE,
    "n": TokenKind.NULL,
}

KEYWORD_TEXT: Final[dict[TokenKind, str]] = {
    TokenKind.TRUE: "true",
    TokenKind.FALSE: "false",
    TokenKind.NULL: "null",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `value` holds the raw string text for STRING and the float for NUMBER.
    `range` is informational and does not take part in equality, so token
    lists compare by kind and payload only.
    """

    kind: TokenKind
    value: str | float | None = None
    range: TextRange | None = field(default=None, compare=False)

    @staticmethod
    def string(text: str) -> "Token":
        return Token(TokenKind.STRING, text)

    @staticmethod
    def number(value: float) -> "Token":
        return Token(TokenKind.NUMBER, float(value))

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        name = self.kind.display_name
        match self.kind:
            case TokenKind.STRING:
                return f'{name}("{self.value}")'
            case TokenKind.NUMBER:
                return f"{name}({format_number(self.value)})"
            case _:
                return name


def format_number(value: float) -> str:
    """Render integral floats without a fractional part (`30.0` -> `30`).

    Magnitudes from 1e16 up keep the exponent form (`1e+300`).
    """
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)
