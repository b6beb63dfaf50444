"""
hookflow analysis entrypoint.

Usage:
    from hookflow.analyzer.service import analyze

    analysis = analyze(source_text, "Counter.tsx")

    # analysis.component_name: the selected component (or None)
    # analysis.hooks:         AnalyzedHook list
    # analysis.effects:       AnalyzedEffect list
    # analysis.callbacks:     AnalyzedCallback list
    # analysis.jsx_nodes:     AnalyzedJsxNode list (pre-order, parent-linked)
"""

from __future__ import annotations

import logging
from pathlib import Path

from hookflow.analyzer.body_walker import analyze_component_body, find_component_body
from hookflow.analyzer.declarations import (
    collect_exports,
    collect_import_map,
    select_primary_component,
)
from hookflow.analyzer.models import ComponentAnalysis, ComponentMeta
from hookflow.analyzer.parser import parse_source
from hookflow.config import DEFAULT_CONFIG, AnalyzerConfig

log = logging.getLogger(__name__)


def analyze(
    source: str,
    file_name: str | None = None,
    config: AnalyzerConfig = DEFAULT_CONFIG,
) -> ComponentAnalysis:
    """Analyze one component source text.

    Raises:
        SourceParseError: the source is not valid JS/TS/JSX/TSX.
    """
    tree = parse_source(source, file_name)
    root = tree.root_node

    import_map = collect_import_map(root)
    exports = collect_exports(root)
    component_name = select_primary_component(exports, file_name)

    body = find_component_body(root, component_name)
    facts = analyze_component_body(body, import_map, config)

    log.info(
        "Analyzed %s (component %s): %d hooks, %d effects, %d callbacks, %d jsx nodes",
        file_name or "<source>", component_name,
        len(facts.hooks), len(facts.effects), len(facts.callbacks), len(facts.jsx_nodes),
    )

    return ComponentAnalysis(
        source=source,
        file_name=file_name,
        component_name=component_name,
        hooks=facts.hooks,
        effects=facts.effects,
        callbacks=facts.callbacks,
        jsx_nodes=facts.jsx_nodes,
        meta=ComponentMeta(
            exported_components=exports.named_exports,
            default_export=exports.default_export,
        ),
        errors=[],
    )


def analyze_file(path: Path, config: AnalyzerConfig = DEFAULT_CONFIG) -> ComponentAnalysis:
    """Read a component file and analyze it under its base file name."""
    source = path.read_text(encoding="utf-8", errors="replace")
    return analyze(source, path.name, config)
