"""Unified scanner: runs extraction + graph assembly in one pass."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from hookflow.analyzer.models import ComponentAnalysis
from hookflow.analyzer.service import analyze
from hookflow.config import DEFAULT_CONFIG, AnalyzerConfig
from hookflow.ir import build_graph
from hookflow.ir.nodes import GraphLayout

log = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Analysis facts and the graph laid out from them."""
    analysis: ComponentAnalysis
    layout: GraphLayout
    source_path: Path | None = None


def scan_source(
    source: str,
    file_name: str | None = None,
    *,
    config: AnalyzerConfig = DEFAULT_CONFIG,
) -> ScanResult:
    """Analyze source text and build its graph.

    SourceParseError propagates: a malformed component aborts the scan.
    """
    analysis = analyze(source, file_name, config)
    layout = build_graph(analysis)
    return ScanResult(analysis=analysis, layout=layout)


def scan_file(
    path: Path,
    *,
    config: AnalyzerConfig = DEFAULT_CONFIG,
) -> ScanResult:
    """Run the full pipeline on one component file."""
    path = path.resolve()
    log.info("Scanning %s", path)

    source = path.read_text(encoding="utf-8", errors="replace")
    result = scan_source(source, path.name, config=config)
    result.source_path = path
    return result
