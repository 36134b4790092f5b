"""Position-indexed parser state shared by the grammar routines."""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from jsoncst.errors import ParseError, ParseErrorKind
from jsoncst.lexer import Token, TokenKind
from jsoncst.parser.options import ParserOptions


class Parser:
    """Read-only view over a token sequence plus the nesting counter.

    Grammar routines pass token positions explicitly; the parser itself
    never advances.
    """

    def __init__(self, tokens: Sequence[Token], options: ParserOptions | None = None) -> None:
        self._tokens = tokens
        self._options = options or ParserOptions()
        self._depth = 0
        self._deepest_open = 0

    @property
    def tokens(self) -> Sequence[Token]:
        return self._tokens

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def depth(self) -> int:
        return self._depth

    def token_at(self, pos: int) -> Token | None:
        if 0 <= pos < len(self._tokens):
            return self._tokens[pos]
        return None

    def at(self, pos: int, kind: TokenKind) -> bool:
        token = self.token_at(pos)
        return token is not None and token.kind == kind

    def expect(self, pos: int, kind: TokenKind) -> int:
        """Require a `kind` token at `pos` and return the next position."""
        if self.at(pos, kind):
            return pos + 1
        raise self.unexpected(pos, kind.display_name)

    def unexpected(self, pos: int, expected: str) -> ParseError:
        token = self.token_at(pos)
        if token is None:
            return ParseError(
                ParseErrorKind.UNEXPECTED_END_OF_INPUT,
                f"Unexpected end of input at position {pos}; expected {expected}",
                pos,
            )
        return ParseError(
            ParseErrorKind.UNEXPECTED_TOKEN,
            f"Unexpected token {token.describe()} at position {pos}; expected {expected}",
            pos,
            token,
        )

    def trailing(self, pos: int) -> ParseError:
        token = self._tokens[pos]
        return ParseError(
            ParseErrorKind.TRAILING_INPUT,
            f"Expected end of input, found {token.describe()} at position {pos}",
            pos,
            token,
        )

    @contextmanager
    def nested(self, pos: int) -> Iterator[None]:
        """Track one level of object/array nesting opened at `pos`."""
        max_depth = self._options.max_depth
        if max_depth is not None and self._depth >= max_depth:
            raise ParseError(
                ParseErrorKind.DEPTH_LIMIT_EXCEEDED,
                f"Nesting depth limit of {max_depth} exceeded at position {pos}",
                pos,
                self.token_at(pos),
            )
        self._depth += 1
        self._deepest_open = max(self._deepest_open, pos)
        try:
            yield
        finally:
            self._depth -= 1

    def recursion_exhausted(self) -> ParseError:
        """Error for nesting that ran out of interpreter stack before `max_depth`."""
        pos = self._deepest_open
        return ParseError(
            ParseErrorKind.DEPTH_LIMIT_EXCEEDED,
            f"Nesting depth exceeds the interpreter recursion limit at position {pos}",
            pos,
            self.token_at(pos),
        )
