"""Source text -> tree-sitter syntax tree.

TypeScript files (.ts/.mts/.cts) use the plain TypeScript grammar so that
angle-bracket type assertions parse; everything else uses TSX, which also
covers plain JavaScript and JSX.
"""

from __future__ import annotations

import logging
from pathlib import PurePath

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from hookflow.analyzer.syntax import field, location, text, walk
from hookflow.errors import SourceParseError

log = logging.getLogger(__name__)

TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())
TYPESCRIPT_LANGUAGE = Language(tree_sitter_typescript.language_typescript())

_TYPESCRIPT_SUFFIXES = {".ts", ".mts", ".cts"}


def language_for(file_name: str | None) -> Language:
    if file_name and PurePath(file_name).suffix.lower() in _TYPESCRIPT_SUFFIXES:
        return TYPESCRIPT_LANGUAGE
    return TSX_LANGUAGE


def parse_source(source: str, file_name: str | None = None) -> Tree:
    """Parse component source, raising SourceParseError on malformed input."""
    parser = Parser(language_for(file_name))
    tree = parser.parse(source.encode("utf-8"))

    bad: Node | None = None
    if tree.root_node.has_error:
        bad = _first_error(tree.root_node)
        if bad is None:
            log.debug("Parse error in %s with no located node", file_name or "<source>")
            raise SourceParseError(file_name)
    else:
        # tree-sitter accepts <div></span>; JSX requires the tags to match
        bad = _mismatched_closing_tag(tree.root_node)

    if bad is not None:
        loc = location(bad)
        log.debug("Parse error in %s at %s:%s", file_name or "<source>", loc.line, loc.column)
        raise SourceParseError(file_name, loc.line, loc.column)

    return tree


def _first_error(root: Node) -> Node | None:
    for node in walk(root):
        if node.is_error or node.is_missing:
            return node
    return None


def _mismatched_closing_tag(root: Node) -> Node | None:
    for node in walk(root):
        if node.type != "jsx_element":
            continue
        open_tag, close_tag = field(node, "open_tag"), field(node, "close_tag")
        if open_tag is None or close_tag is None:
            continue
        open_name, close_name = field(open_tag, "name"), field(close_tag, "name")
        if open_name is None and close_name is None:
            continue  # fragment
        if _tag_text(open_name) != _tag_text(close_name):
            return close_tag
    return None


def _tag_text(name: Node | None) -> str | None:
    return "".join(text(name).split()) if name is not None else None
