"""Human-readable renderings of a parse tree.

These are diagnostics, not a serialization format.
"""

from jsoncst.cst.node import GrammarItem, GrammarKind, ParseNode
from jsoncst.lexer import format_number


def render_item(item: GrammarItem) -> str:
    name = item.kind.display_name
    match item.kind:
        case GrammarKind.MEMBER | GrammarKind.STR_LIT:
            return f"{name}({item.value})"
        case GrammarKind.NUMBER:
            return f"{name}({format_number(item.value)})"
        case GrammarKind.BOOL:
            return f"{name}({'true' if item.value else 'false'})"
        case _:
            return name


def render_tree(node: ParseNode) -> str:
    """Single-line rendering: `Name(payload){child child ...}`.

    Terminal values render without braces, so an empty object is `Object{}`
    while a string is `StrLit(text)`.
    """
    label = render_item(node.entry)
    if node.kind.is_terminal:
        return label
    return label + "{" + " ".join(render_tree(child) for child in node.children) + "}"


def dump_tree(node: ParseNode) -> str:
    """Indented one-node-per-line rendering for debug output."""
    lines: list[str] = []

    def walk(current: ParseNode, depth: int) -> None:
        lines.append(f"{'  ' * depth}{render_item(current.entry)}")
        for child in current.children:
            walk(child, depth + 1)

    walk(node, 0)
    return "\n".join(lines)
