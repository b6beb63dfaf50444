"""Render scan results as a Markdown report."""

from __future__ import annotations

from hookflow.ir.graph import FlowGraph
from hookflow.scanner import ScanResult
from hookflow.utils import format_location, snippet


def render_markdown(result: ScanResult) -> str:
    """Produce a full Markdown report from a ScanResult."""
    sections: list[str] = []
    a = result.analysis
    graph = FlowGraph.from_layout(result.layout)
    title = a.component_name or "(no exported component)"

    # ── Title ────────────────────────────────────────────────────────────
    sections.append(f"# Component Flow: {title}\n")

    # ── Summary ──────────────────────────────────────────────────────────
    summary_lines = [
        f"- **File**: `{a.file_name or '<source>'}`",
        f"- **Default export**: {_code_or_none(a.meta.default_export)}",
        f"- **Named exports**: {', '.join(f'`{n}`' for n in a.meta.exported_components) or 'none'}",
        f"- **Hooks**: {len(a.hooks)}",
        f"- **Effects**: {len(a.effects)}",
        f"- **Callbacks**: {len(a.callbacks)}",
        f"- **JSX elements**: {len(a.jsx_nodes)}",
        f"- **Graph**: {len(graph)} nodes, {len(graph.all_edges())} edges",
    ]
    sections.append("\n".join(summary_lines) + "\n")

    if a.component_name is None:
        sections.append("No component could be selected: the file has no usable export.\n")

    # ── Hooks ────────────────────────────────────────────────────────────
    if a.hooks:
        sections.append("## Hooks\n")
        sections.append("| Name | Kind | Scope | Import | Location |")
        sections.append("|---|---|---|---|---|")
        for h in a.hooks:
            source = h.meta.get("import_source") or ""
            sections.append(
                f"| `{h.name}` | {h.hook_kind.value} | {h.scope.value} "
                f"| {f'`{source}`' if source else ''} | {format_location(h.defined_at)} |"
            )
        sections.append("")

    # ── Effects ──────────────────────────────────────────────────────────
    if a.effects:
        sections.append("## Effects\n")
        for e in a.effects:
            line = e.defined_at.line if e.defined_at else 0
            deps = ", ".join(
                f"`{d.name}`" + (" (global)" if d.is_global else "") for d in e.dependencies
            )
            sections.append(f"### {e.hook_kind.value} `{e.id}` ({format_location(e.defined_at)})\n")
            code = snippet(a.source, line)
            if code:
                sections.append(f"`{code}`\n")
            sections.append(f"- Dependencies: {deps or 'none'}")
            sections.append(f"- Mutations: {_code_list(e.setters)}")
            sections.append(f"- Refs: {_code_list(e.refs)}")
            sections.append("")

    # ── Callbacks ────────────────────────────────────────────────────────
    if a.callbacks:
        sections.append("## Callbacks\n")
        sections.append("| Name | Dependencies | Mutations | Location |")
        sections.append("|---|---|---|---|")
        for cb in a.callbacks:
            sections.append(
                f"| {_code_or_none(cb.name)} | {_code_list(cb.dependencies)} "
                f"| {_code_list(cb.setters)} | {format_location(cb.defined_at)} |"
            )
        sections.append("")

    # ── State flow ───────────────────────────────────────────────────────
    state_nodes = graph.nodes_of_kind("state") + graph.nodes_of_kind("independent")
    if state_nodes:
        sections.append("## State Flow\n")
        sections.append("| State | Read by | Written by |")
        sections.append("|---|---|---|")
        for node in state_nodes:
            readers = ", ".join(n.label for n in graph.readers_of(node.id)) or "-"
            writers = ", ".join(n.label for n in graph.writers_of(node.id)) or "-"
            sections.append(f"| `{node.label}` | {readers} | {writers} |")
        sections.append("")

    # ── Element tree ─────────────────────────────────────────────────────
    if a.jsx_nodes:
        sections.append("## Element Tree\n")
        sections.append("```")
        for jsx in a.jsx_nodes:
            props = f"  [{', '.join(jsx.props)}]" if jsx.props else ""
            sections.append(f"{'  ' * jsx.depth}<{jsx.component}>{props}")
        sections.append("```\n")

    # ── Diagnostics ──────────────────────────────────────────────────────
    if a.errors:
        sections.append("## Diagnostics\n")
        for err in a.errors:
            sections.append(f"- {err}")
        sections.append("")

    return "\n".join(sections)


def _code_or_none(value: str | None) -> str:
    return f"`{value}`" if value else "none"


def _code_list(values: list[str]) -> str:
    return ", ".join(f"`{v}`" for v in values) or "none"
