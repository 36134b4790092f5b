"""Entrypoint that runs lexer and parser once and reports diagnostics."""

from __future__ import annotations

import logging

from jsoncst.errors import LexError, ParseError
from jsoncst.lexer import tokenize
from jsoncst.parser.document import parse
from jsoncst.parser.options import ParserOptions
from jsoncst.pipeline.result import JsonParseResult

logger = logging.getLogger(__name__)


def run_parse(text: str, options: ParserOptions | None = None) -> JsonParseResult:
    """Tokenize and parse `text`, turning the first error into a diagnostic."""
    resolved_options = options or ParserOptions()

    try:
        tokens = tokenize(text)
    except LexError as exc:
        logger.debug("lexing failed at offset %d: %s", exc.offset, exc)
        return JsonParseResult(
            source_text=text,
            options=resolved_options,
            tokens=None,
            root=None,
            diagnostics=[exc.diagnostic],
        )

    try:
        root = parse(tokens, options=resolved_options)
    except ParseError as exc:
        logger.debug("parsing failed at token %d: %s", exc.position, exc)
        return JsonParseResult(
            source_text=text,
            options=resolved_options,
            tokens=tokens,
            root=None,
            diagnostics=[exc.diagnostic],
        )

    logger.debug("parsed %d tokens", len(tokens))
    return JsonParseResult(
        source_text=text,
        options=resolved_options,
        tokens=tokens,
        root=root,
        diagnostics=[],
    )
