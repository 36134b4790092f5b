"""Lexer."""

from jsoncst.lexer.escapes import unescape
from jsoncst.lexer.lexer import Lexer, dump_tokens, is_string_char, token_text, tokenize
from jsoncst.lexer.tokens import Token, TokenKind, format_number

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "format_number",
    "is_string_char",
    "token_text",
    "tokenize",
    "unescape",
]
