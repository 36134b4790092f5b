"""Lower a JSON CST into plain Python values."""

from __future__ import annotations

from jsoncst.cst.node import GrammarKind, ParseNode
from jsoncst.lexer import unescape

type JsonValue = dict[str, JsonValue] | list[JsonValue] | str | float | bool | None


def lower_tree(node: ParseNode, *, decode_strings: bool = False) -> JsonValue:
    """Convert any node of a parse tree into dicts, lists and scalars.

    String payloads stay raw unless `decode_strings` is set. Later duplicate
    keys win.
    """
    match node.kind:
        case GrammarKind.JSON | GrammarKind.ELEMENT:
            return lower_tree(node.child(), decode_strings=decode_strings)
        case GrammarKind.OBJECT:
            return _lower_object(node, decode_strings)
        case GrammarKind.ARRAY:
            return _lower_array(node, decode_strings)
        case GrammarKind.STR_LIT:
            return _text(node.value, decode_strings)
        case GrammarKind.NUMBER | GrammarKind.BOOL:
            return node.value
        case GrammarKind.NULL:
            return None
        case _:
            raise ValueError(f"Cannot lower a {node.kind.display_name} node on its own")


def _lower_object(node: ParseNode, decode_strings: bool) -> dict[str, JsonValue]:
    result: dict[str, JsonValue] = {}
    if not node.children:
        return result
    for member in node.child().children:
        key = _text(member.value, decode_strings)
        result[key] = lower_tree(member.child(), decode_strings=decode_strings)
    return result


def _lower_array(node: ParseNode, decode_strings: bool) -> list[JsonValue]:
    if not node.children:
        return []
    return [lower_tree(element, decode_strings=decode_strings) for element in node.child().children]


def _text(raw: str, decode_strings: bool) -> str:
    return unescape(raw) if decode_strings else raw
