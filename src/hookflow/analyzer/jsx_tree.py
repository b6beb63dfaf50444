"""Extract the JSX element tree: depth, parent links and identifier props.

Elements found outside any other element are roots (depth 0). Elements nested
anywhere inside another element -- as children, inside {expressions} or in
attribute values -- become its children at depth + 1. Fragments (<>...</>)
are not recorded; their contents take the fragment's place in the tree.
"""

from __future__ import annotations

from tree_sitter import Node

from hookflow.analyzer.models import AnalyzedJsxNode
from hookflow.analyzer.syntax import JSX_ELEMENT_TYPES, field, location, text, unique, walk

UNKNOWN_ELEMENT = "Unknown"


def extract_jsx_tree(root: Node) -> list[AnalyzedJsxNode]:
    """Walk root and return its JSX elements in pre-order."""
    result: list[AnalyzedJsxNode] = []
    # (node, depth for elements found here, enclosing element id)
    stack: list[tuple[Node, int, str | None]] = [(root, 0, None)]

    while stack:
        node, depth, parent_id = stack.pop()
        child_depth, child_parent = depth, parent_id

        if node.type in JSX_ELEMENT_TYPES:
            opening = _opening_element(node)
            name_node = field(opening, "name") if opening is not None else None

            if node.type == "jsx_self_closing_element" or name_node is not None:
                jsx_id = f"jsx-{len(result) + 1}"
                result.append(AnalyzedJsxNode(
                    id=jsx_id,
                    component=jsx_element_name(name_node),
                    depth=depth,
                    parent_id=parent_id,
                    props=_identifier_props(opening) if opening is not None else [],
                    defined_at=location(opening if opening is not None else node),
                ))
                child_depth, child_parent = depth + 1, jsx_id

        for child in reversed(node.children):
            stack.append((child, child_depth, child_parent))

    return result


def jsx_element_name(name_node: Node | None) -> str:
    """<div> -> "div", <Card.Header> -> "Card.Header", <svg:rect> -> "svg:rect"."""
    if name_node is None:
        return UNKNOWN_ELEMENT

    if name_node.type == "identifier":
        return text(name_node)

    if name_node.type in ("member_expression", "nested_identifier"):
        parts = [
            text(n) for n in walk(name_node)
            if n.type in ("identifier", "property_identifier")
        ]
        return ".".join(parts) if parts else UNKNOWN_ELEMENT

    if name_node.type == "jsx_namespace_name":
        idents = [c for c in name_node.named_children if c.type == "identifier"]
        ns = text(idents[0]) if idents else "ns"
        local = text(idents[1]) if len(idents) > 1 else "name"
        return f"{ns}:{local}"

    return UNKNOWN_ELEMENT


def _opening_element(node: Node) -> Node | None:
    if node.type == "jsx_self_closing_element":
        return node
    return field(node, "open_tag")


def _identifier_props(opening: Node) -> list[str]:
    """Identifiers passed bare as attribute values: value={count} -> "count"."""
    props: list[str] = []
    for attr in opening.named_children:
        if attr.type != "jsx_attribute":
            continue
        parts = attr.named_children
        if len(parts) < 2 or parts[-1].type != "jsx_expression":
            continue
        inner = [c for c in parts[-1].named_children if c.type != "comment"]
        if len(inner) == 1 and inner[0].type == "identifier":
            props.append(text(inner[0]))
    return unique(props)
