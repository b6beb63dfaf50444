"""Small helpers over tree-sitter nodes shared by the extraction passes."""

from __future__ import annotations

from typing import Iterator

from tree_sitter import Node

from hookflow.analyzer.models import Location

FUNCTION_NODE_TYPES = frozenset({"arrow_function", "function_expression", "function"})
JSX_ELEMENT_TYPES = frozenset({"jsx_element", "jsx_self_closing_element"})


def walk(node: Node) -> Iterator[Node]:
    """Pre-order walk over node and all of its descendants."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace") if node.text is not None else ""


def location(node: Node) -> Location:
    """1-based line, 0-based column counted in characters."""
    row, byte_column = node.start_point
    return Location(line=row + 1, column=_char_column(node, byte_column))


def _char_column(node: Node, byte_column: int) -> int:
    # start_point counts UTF-8 bytes; re-count the line prefix as characters
    if byte_column == 0:
        return 0
    root = node
    while root.parent is not None:
        root = root.parent
    source = root.text or b""
    line_start = node.start_byte - byte_column
    # bytes before the root node are leading whitespace
    lead = max(0, root.start_byte - line_start)
    begin = max(line_start, root.start_byte) - root.start_byte
    prefix = source[begin:node.start_byte - root.start_byte]
    return lead + len(prefix.decode("utf-8", errors="replace"))


def field(node: Node, name: str) -> Node | None:
    return node.child_by_field_name(name)


def identifier_name(node: Node | None) -> str | None:
    """Return the identifier's text if node is a plain identifier."""
    if node is not None and node.type == "identifier":
        return text(node)
    return None


def call_arguments(call: Node) -> list[Node]:
    """Argument expressions of a call_expression, comments excluded."""
    args = field(call, "arguments")
    if args is None or args.type != "arguments":
        return []
    return [c for c in args.named_children if c.type != "comment"]


def array_identifiers(node: Node | None) -> list[str]:
    """Names of the direct identifier elements of an array literal.

    Member expressions, spreads and other computed elements are skipped.
    """
    if node is None or node.type != "array":
        return []
    return [text(el) for el in node.named_children if el.type == "identifier"]


def function_body(node: Node | None) -> Node | None:
    """Body of an arrow/function expression, or None for anything else."""
    if node is None or node.type not in FUNCTION_NODE_TYPES:
        return None
    return field(node, "body")


def unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))
