"""GraphNode, GraphEdge and GraphLayout: pure data, no logic.

GraphLayout is the whole contract with the viewer: it never needs to look
back at the ComponentAnalysis it was built from.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

GraphNodeKind = Literal["independent", "state", "variable", "effect", "jsx", "external"]

# Visual edge kind, as drawn by the viewer
GraphEdgeKind = Literal["flow", "state-dependency", "state-mutation", "external"]

# What the edge means; structural JSX edges share the "flow" look
EdgeRelation = Literal["sequential-flow", "dependency", "mutation", "structural"]

ColumnName = Literal["independent", "state", "variable", "effect", "jsx"]


class GraphNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str                   # "<kind>-<fact id>", e.g. "state-hook-1"
    label: str
    kind: GraphNodeKind
    x: int                    # box center
    y: int
    width: int = 120
    height: int = 32
    meta: dict[str, Any] = Field(default_factory=dict)


class EdgeEndpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_id: str
    x: int
    y: int


class GraphEdge(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    kind: GraphEdgeKind
    relation: EdgeRelation
    source: EdgeEndpoint = Field(alias="from")
    target: EdgeEndpoint = Field(alias="to")
    label: str | None = None


class GraphLayout(BaseModel):
    model_config = ConfigDict(frozen=True)

    nodes: list[GraphNode] = Field(default_factory=list)
    edges: list[GraphEdge] = Field(default_factory=list)
    width: int
    height: int
    col_x: dict[ColumnName, int]
