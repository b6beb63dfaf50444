"""IR (Intermediate Representation) package for hookflow.

Provides:
    build_graph(analysis) -> GraphLayout
    FlowGraph.from_layout(layout) -> FlowGraph
"""

from __future__ import annotations

from hookflow.ir.builder import build_graph
from hookflow.ir.graph import FlowGraph
from hookflow.ir.nodes import EdgeEndpoint, GraphEdge, GraphLayout, GraphNode

__all__ = ["build_graph", "FlowGraph", "GraphLayout", "GraphNode", "GraphEdge", "EdgeEndpoint"]
