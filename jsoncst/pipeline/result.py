"""Parse result carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from jsoncst.diagnostics import has_errors
from jsoncst.parser.options import ParserOptions

if TYPE_CHECKING:
    from jsoncst.cst import JsonValue, ParseNode
    from jsoncst.diagnostics import Diagnostic
    from jsoncst.lexer import Token


@dataclass(slots=True)
class JsonParseResult:
    """Outcome of tokenizing and parsing one document.

    `tokens` is None when lexing failed and `root` is None when either stage
    failed; `diagnostics` then holds the single error that stopped the run.
    """

    source_text: str
    options: ParserOptions
    tokens: list[Token] | None
    root: ParseNode | None
    diagnostics: list[Diagnostic]
    _value: JsonValue = field(default=None, init=False, repr=False)
    _value_ready: bool = field(default=False, init=False, repr=False)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def require_root(self) -> ParseNode:
        if self.root is None:
            messages = "; ".join(d.message for d in self.diagnostics)
            raise ValueError(f"Parse failed: {messages}")
        return self.root

    def value(self) -> JsonValue:
        """Plain Python value of the document with raw string payloads."""
        if not self._value_ready:
            from jsoncst.cst import lower_tree

            self._value = lower_tree(self.require_root())
            self._value_ready = True
        return self._value

    def render(self) -> str:
        from jsoncst.cst import render_tree

        return render_tree(self.require_root())
