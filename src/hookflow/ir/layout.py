"""Deterministic column layout for graph nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from hookflow.ir.nodes import ColumnName, GraphNode, GraphNodeKind

COLUMNS: tuple[ColumnName, ...] = ("independent", "state", "variable", "effect", "jsx")
COLUMN_BASE_X = 80
COLUMN_GAP_X = 220

NODE_WIDTH = 120
NODE_HEIGHT = 32

START_Y = 80
INDEPENDENT_GAP_Y = 50
STATE_GAP_Y = 40
EFFECT_GAP_Y = 40

JSX_DEPTH_GAP_Y = 80   # between depth bands
JSX_INTRA_GAP_Y = 32   # between siblings within a band

CANVAS_MARGIN_X = 200
CANVAS_MARGIN_Y = 120
EMPTY_CANVAS_HEIGHT = 800


@dataclass
class NodeSpec:
    """A fact to be placed: id of the source fact, display label, metadata."""
    id: str
    label: str
    meta: dict[str, Any] = field(default_factory=dict)
    depth: int = 0


def column_x() -> dict[ColumnName, int]:
    return {name: COLUMN_BASE_X + COLUMN_GAP_X * i for i, name in enumerate(COLUMNS)}


def layout_column(
    items: list[NodeSpec],
    kind: GraphNodeKind,
    x: int,
    start_y: int,
    gap_y: int,
) -> list[GraphNode]:
    """Stack items top to bottom in their original order."""
    return [
        GraphNode(
            id=f"{kind}-{item.id}",
            label=item.label,
            kind=kind,
            x=x,
            y=start_y + index * gap_y,
            width=NODE_WIDTH,
            height=NODE_HEIGHT,
            meta=item.meta,
        )
        for index, item in enumerate(items)
    ]


def layout_by_depth(items: list[NodeSpec], kind: GraphNodeKind, x: int) -> list[GraphNode]:
    """Place items in depth bands; siblings in a band keep their original order.

    The returned list is depth-major (all depth 0, then depth 1, ...).
    """
    bands: dict[int, list[NodeSpec]] = {}
    for item in items:
        bands.setdefault(item.depth, []).append(item)

    nodes: list[GraphNode] = []
    for depth in sorted(bands):
        for index, item in enumerate(bands[depth]):
            nodes.append(GraphNode(
                id=f"{kind}-{item.id}",
                label=item.label,
                kind=kind,
                x=x,
                y=START_Y + depth * JSX_DEPTH_GAP_Y + index * JSX_INTRA_GAP_Y,
                width=NODE_WIDTH,
                height=NODE_HEIGHT,
                meta=item.meta,
            ))
    return nodes


def canvas_size(nodes: list[GraphNode], col_x: dict[ColumnName, int]) -> tuple[int, int]:
    width = max(col_x.values()) + CANVAS_MARGIN_X
    if not nodes:
        return width, EMPTY_CANVAS_HEIGHT
    return width, max(n.y for n in nodes) + CANVAS_MARGIN_Y
