"""Shared parse carrier and pipeline entrypoint."""

from jsoncst.pipeline.entrypoints import run_parse
from jsoncst.pipeline.result import JsonParseResult

__all__ = [
    "JsonParseResult",
    "run_parse",
]
