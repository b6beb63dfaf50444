"""Top-level declarations: imports, exports, and primary component selection."""

from __future__ import annotations

import logging
from pathlib import PurePath

from tree_sitter import Node

from hookflow.analyzer.models import ExportInfo
from hookflow.analyzer.syntax import FUNCTION_NODE_TYPES, field, identifier_name, text

log = logging.getLogger(__name__)

_FUNCTION_DECLARATIONS = {"function_declaration", "generator_function_declaration"}


def collect_import_map(root: Node) -> dict[str, str]:
    """Map every locally bound import name to its module source.

    import React, { useState as useS } from "react"  -> React, useS -> "react"
    import * as Q from "@tanstack/react-query"         -> Q -> "@tanstack/react-query"
    """
    import_map: dict[str, str] = {}

    for stmt in root.named_children:
        if stmt.type != "import_statement":
            continue
        source_node = field(stmt, "source")
        if source_node is None:
            continue
        source = _string_value(source_node)

        for clause in stmt.named_children:
            if clause.type != "import_clause":
                continue
            for part in clause.named_children:
                if part.type == "identifier":
                    import_map[text(part)] = source
                elif part.type == "namespace_import":
                    for ident in part.named_children:
                        if ident.type == "identifier":
                            import_map[text(ident)] = source
                elif part.type == "named_imports":
                    for spec in part.named_children:
                        if spec.type != "import_specifier":
                            continue
                        local = field(spec, "alias") or field(spec, "name")
                        if local is not None and local.type == "identifier":
                            import_map[text(local)] = source

    return import_map


def collect_exports(root: Node) -> ExportInfo:
    """Find the default-exported name and named exports, in declaration order."""
    default_export: str | None = None
    named_exports: list[str] = []

    for stmt in root.named_children:
        if stmt.type != "export_statement":
            continue

        decl = field(stmt, "declaration")
        is_default = any(c.type == "default" for c in stmt.children)

        if is_default:
            value = field(stmt, "value")
            name = _default_export_name(decl if decl is not None else value)
            if name:
                default_export = name
            continue

        if decl is not None:
            named_exports.extend(_declared_component_names(decl))

        for clause in stmt.named_children:
            if clause.type != "export_clause":
                continue
            for spec in clause.named_children:
                if spec.type != "export_specifier":
                    continue
                local = field(spec, "name")
                exported = field(spec, "alias") or local
                if exported is None:
                    continue
                exported_name = text(exported)
                if exported_name == "default":
                    # export { App as default }; a re-exported `default` names nothing here
                    if local is not None and text(local) != "default" and default_export is None:
                        default_export = text(local)
                    continue
                named_exports.append(exported_name)

    return ExportInfo(default_export=default_export, named_exports=named_exports)


def select_primary_component(exports: ExportInfo, file_name: str | None = None) -> str | None:
    """Pick the component to analyze.

    Preference: default export, the only named export, the named export
    matching the file's base name, the first named export.
    """
    if exports.default_export:
        return exports.default_export
    if len(exports.named_exports) == 1:
        return exports.named_exports[0]

    if file_name:
        base = PurePath(file_name).stem
        if base in exports.named_exports:
            return base

    if exports.named_exports:
        return exports.named_exports[0]

    log.debug("No exported component found in %s", file_name or "<source>")
    return None


# ── Helpers ───────────────────────────────────────────────────────────────


def _string_value(node: Node) -> str:
    raw = text(node)
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in "'\"`":
        return raw[1:-1]
    return raw


def _default_export_name(node: Node | None) -> str | None:
    if node is None:
        return None
    ident = identifier_name(node)
    if ident:
        return ident
    if node.type in _FUNCTION_DECLARATIONS or node.type in FUNCTION_NODE_TYPES:
        return identifier_name(field(node, "name"))
    return None


def _declared_component_names(decl: Node) -> list[str]:
    """Names bound by an exported declaration that can be components."""
    if decl.type in _FUNCTION_DECLARATIONS:
        name = identifier_name(field(decl, "name"))
        return [name] if name else []

    if decl.type in ("lexical_declaration", "variable_declaration"):
        names: list[str] = []
        for declarator in decl.named_children:
            if declarator.type != "variable_declarator":
                continue
            value = field(declarator, "value")
            name = identifier_name(field(declarator, "name"))
            if name and value is not None and value.type in FUNCTION_NODE_TYPES:
                names.append(name)
        return names

    return []
