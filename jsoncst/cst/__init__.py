"""Concrete syntax tree model, renderers and lowering."""

from jsoncst.cst.lower import JsonValue, lower_tree
from jsoncst.cst.node import (
    TERMINAL_KINDS,
    VALUE_KINDS,
    GrammarItem,
    GrammarKind,
    ParseNode,
    iter_nodes,
)
from jsoncst.cst.render import dump_tree, render_item, render_tree

__all__ = [
    "TERMINAL_KINDS",
    "VALUE_KINDS",
    "GrammarItem",
    "GrammarKind",
    "JsonValue",
    "ParseNode",
    "dump_tree",
    "iter_nodes",
    "lower_tree",
    "render_item",
    "render_tree",
]
