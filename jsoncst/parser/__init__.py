"""Recursive-descent parser producing a concrete syntax tree."""

from jsoncst.parser.document import parse, parse_result, parse_text
from jsoncst.parser.grammar import (
    parse_array,
    parse_element,
    parse_elements,
    parse_json,
    parse_member,
    parse_members,
    parse_object,
    parse_value,
)
from jsoncst.parser.options import DEFAULT_MAX_DEPTH, ParserOptions
from jsoncst.parser.parser import Parser

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Parser",
    "ParserOptions",
    "parse",
    "parse_array",
    "parse_element",
    "parse_elements",
    "parse_json",
    "parse_member",
    "parse_members",
    "parse_object",
    "parse_result",
    "parse_text",
    "parse_value",
]
