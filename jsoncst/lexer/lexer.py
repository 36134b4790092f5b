"""Lexer."""

from collections.abc import Callable
from typing import Final

from jsoncst.errors import LexError, LexErrorKind
from jsoncst.lexer.tokens import KEYWORD_TEXT, KEYWORDS, PUNCTUATION, Token, TokenKind
from jsoncst.text import TextRange, slice_text_range

DIGITS: Final[str] = "0123456789"
NUMBER_CHARS: Final[frozenset[str]] = frozenset(DIGITS + ".eE-+")
ESCAPE_CHARS: Final[frozenset[str]] = frozenset('\\/bfnrtu"')
# Unicode White_Space property; str.isspace also accepts the U+001C..U+001F separators.
WHITESPACE: Final[frozenset[str]] = frozenset(
    map(
        chr,
        [
            *range(0x09, 0x0E),
            0x20,
            0x85,
            0xA0,
            0x1680,
            *range(0x2000, 0x200B),
            0x2028,
            0x2029,
            0x202F,
            0x205F,
            0x3000,
        ],
    )
)


def is_string_char(ch: str) -> bool:
    """Unicode scalar values in U+0020..=U+10FFFF (surrogates are not scalars)."""
    code = ord(ch)
    return 0x20 <= code <= 0x10FFFF and not 0xD800 <= code <= 0xDFFF


class Lexer:
    """Fail-fast JSON lexer over an explicit character cursor.

    Whitespace is skipped; every other character either starts a token or
    aborts the scan with a `LexError`.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._current_start = 0

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def current_range(self) -> TextRange:
        return TextRange(self._current_start, self._position)

    def tokenize(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            if token is None:
                break
            tokens.append(token)
        return tokens

    def next_token(self) -> Token | None:
        """Lex the next token, or return None once only whitespace remains."""
        while not self.is_eof and self._current_char() in WHITESPACE:
            self._advance(1)

        if self.is_eof:
            return None

        self._current_start = self._position
        return self._lex_token()

    def _lex_token(self) -> Token:
        ch = self._current_char()

        kind = PUNCTUATION.get(ch)
        if kind is not None:
            self._advance(1)
            return Token(kind, range=self.current_range)

        if ch == '"':
            return self._lex_string()

        if ch in KEYWORDS:
            return self._lex_keyword(KEYWORDS[ch])

        if ch == "-" or ch in DIGITS:
            return self._lex_number()

        raise LexError(
            LexErrorKind.UNEXPECTED_CHARACTER,
            f"Bare values are not allowed: {ch!r} at offset {self._position}",
            self._position,
            self._position + 1,
        )

    def _lex_string(self) -> Token:
        # Consume opening quote
        self._advance(1)
        body_start = self._position

        while True:
            if self.is_eof:
                raise self._unterminated_string()
            ch = self._current_char()
            if ch == '"':
                break
            if not is_string_char(ch):
                raise LexError(
                    LexErrorKind.INVALID_CHARACTER,
                    f"Invalid character {ch!r} in string literal at offset {self._position}",
                    self._position,
                    self._position + 1,
                )
            if ch == "\\":
                self._advance(1)
                if self.is_eof:
                    raise self._unterminated_string()
                escaped = self._current_char()
                if escaped not in ESCAPE_CHARS:
                    raise LexError(
                        LexErrorKind.INVALID_ESCAPE,
                        f"Invalid escape sequence \\{escaped} at offset {self._position - 1}",
                        self._position - 1,
                        self._position + 1,
                    )
            self._advance(1)

        text = self._source[body_start : self._position]
        # Consume closing quote
        self._advance(1)
        return Token(TokenKind.STRING, text, self.current_range)

    def _lex_keyword(self, kind: TokenKind) -> Token:
        run = self._take_while(str.isalpha)
        expected = KEYWORD_TEXT[kind]
        if run != expected:
            raise LexError(
                LexErrorKind.INVALID_LITERAL,
                f"Invalid value: {run}; expected: {expected}",
                self._current_start,
                self._position,
            )
        return Token(kind, range=self.current_range)

    def _lex_number(self) -> Token:
        digits = self._take_while(lambda c: c in NUMBER_CHARS)
        try:
            value = float(digits)
        except ValueError:
            raise LexError(
                LexErrorKind.INVALID_NUMBER,
                f"Invalid number: {digits} at offset {self._current_start}",
                self._current_start,
                self._position,
            ) from None
        return Token(TokenKind.NUMBER, value, self.current_range)

    def _take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume characters while `predicate` holds; the failing one stays unconsumed."""
        start = self._position
        while not self.is_eof and predicate(self._current_char()):
            self._advance(1)
        return self._source[start : self._position]

    def _unterminated_string(self) -> LexError:
        return LexError(
            LexErrorKind.UNEXPECTED_END_OF_INPUT,
            f"Unexpected end of input: unterminated string literal starting at offset {self._current_start}",
            self._current_start,
            self._position,
        )

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _advance(self, steps: int) -> None:
        self._position += steps


def tokenize(text: str) -> list[Token]:
    """Lex `text` into an ordered token list, raising `LexError` on the first problem."""
    return Lexer(text).tokenize()


def token_text(source: str, token: Token) -> str:
    """Get the source text of a token based on its range."""
    if token.range is None:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str | None = None) -> None:
    """Print token list with kind, range, payload and source text for debugging."""
    for i, tok in enumerate(tokens):
        where = tok.range.as_tuple() if tok.range is not None else None
        line = f"{i:03d} {tok.kind.name:<10} range={where} value={tok.value!r}"
        if source is not None:
            line += f" text={token_text(source, tok)!r}"
        print(line)
