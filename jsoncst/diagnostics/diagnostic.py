"""Diagnostics core types."""

from dataclasses import dataclass

from jsoncst.diagnostics.codes import Severity
from jsoncst.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer or parser.

    `range` is a character range in the source text when one is known.
    `position` is the token index for parser diagnostics.
    """

    code: str
    message: str
    range: TextRange | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    position: int | None = None
