"""Concrete syntax tree: one node per grammar production."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Final


class GrammarKind(IntEnum):
    """Grammar vocabulary (nonterminals + terminal values)."""

    JSON = 1
    VALUE = 2  # resolved directly to the value node, never materialized
    OBJECT = 3
    MEMBER = 4
    MEMBERS = 5
    ARRAY = 6
    ELEMENT = 7
    ELEMENTS = 8

    # Terminal values
    NUMBER = 20
    BOOL = 21
    STR_LIT = 22
    NULL = 23

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_KINDS


_DISPLAY_NAMES: Final[dict[GrammarKind, str]] = {
    GrammarKind.JSON: "Json",
    GrammarKind.VALUE: "Value",
    GrammarKind.OBJECT: "Object",
    GrammarKind.MEMBER: "Member",
    GrammarKind.MEMBERS: "Members",
    GrammarKind.ARRAY: "Array",
    GrammarKind.ELEMENT: "Element",
    GrammarKind.ELEMENTS: "Elements",
    GrammarKind.NUMBER: "Number",
    GrammarKind.BOOL: "Bool",
    GrammarKind.STR_LIT: "StrLit",
    GrammarKind.NULL: "Null",
}

TERMINAL_KINDS: Final[frozenset[GrammarKind]] = frozenset(
    {GrammarKind.NUMBER, GrammarKind.BOOL, GrammarKind.STR_LIT, GrammarKind.NULL}
)

VALUE_KINDS: Final[frozenset[GrammarKind]] = TERMINAL_KINDS | {GrammarKind.OBJECT, GrammarKind.ARRAY}


@dataclass(frozen=True, slots=True)
class GrammarItem:
    """A grammar symbol with its payload.

    Payload is the key text for MEMBER, the float for NUMBER, the bool for
    BOOL and the raw text for STR_LIT; None otherwise.
    """

    kind: GrammarKind
    value: str | float | bool | None = None

    @staticmethod
    def of(kind: GrammarKind) -> "GrammarItem":
        """Payload-free item (Json, Object, Members, ...)."""
        return GrammarItem(kind)

    @staticmethod
    def member(key: str) -> "GrammarItem":
        return GrammarItem(GrammarKind.MEMBER, key)

    @staticmethod
    def number(value: float) -> "GrammarItem":
        return GrammarItem(GrammarKind.NUMBER, float(value))

    @staticmethod
    def boolean(value: bool) -> "GrammarItem":
        return GrammarItem(GrammarKind.BOOL, value)

    @staticmethod
    def str_lit(text: str) -> "GrammarItem":
        return GrammarItem(GrammarKind.STR_LIT, text)


@dataclass(frozen=True, slots=True)
class ParseNode:
    """Immutable CST node; `children` are owned exclusively by this node."""

    entry: GrammarItem
    children: tuple["ParseNode", ...] = ()

    @property
    def kind(self) -> GrammarKind:
        return self.entry.kind

    @property
    def value(self) -> str | float | bool | None:
        return self.entry.value

    def child(self) -> "ParseNode":
        """The single child of a one-child node (Json, Element, Member)."""
        if len(self.children) != 1:
            raise ValueError(f"{self.kind.display_name} node has {len(self.children)} children, expected 1")
        return self.children[0]


def iter_nodes(root: ParseNode) -> Iterator[ParseNode]:
    """Pre-order traversal."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
