"""FlowGraph: adjacency-indexed queries over a GraphLayout."""

from __future__ import annotations

from collections import defaultdict
from typing import Callable

from hookflow.ir.nodes import EdgeRelation, GraphEdge, GraphLayout, GraphNode, GraphNodeKind


class FlowGraph:
    """Read-side view of a layout: who reads, writes and renders what."""

    def __init__(self) -> None:
        self._nodes: dict[str, GraphNode] = {}
        self._edges: list[GraphEdge] = []
        # Forward adjacency: source node id → list[GraphEdge]
        self._fwd: dict[str, list[GraphEdge]] = defaultdict(list)
        # Backward adjacency: target node id → list[GraphEdge]
        self._bwd: dict[str, list[GraphEdge]] = defaultdict(list)

    @classmethod
    def from_layout(cls, layout: GraphLayout) -> FlowGraph:
        graph = cls()
        for node in layout.nodes:
            graph.add_node(node)
        for edge in layout.edges:
            graph.add_edge(edge)
        return graph

    def add_node(self, node: GraphNode) -> None:
        """Add a node (idempotent by id; later add wins on conflict)."""
        self._nodes[node.id] = node

    def add_edge(self, edge: GraphEdge) -> None:
        """Add a directed edge (duplicate edges are allowed)."""
        self._edges.append(edge)
        self._fwd[edge.source.node_id].append(edge)
        self._bwd[edge.target.node_id].append(edge)

    def get_node(self, node_id: str) -> GraphNode | None:
        return self._nodes.get(node_id)

    def nodes_matching(self, pred: Callable[[GraphNode], bool]) -> list[GraphNode]:
        """Return all nodes matching the predicate, in insertion order."""
        return [n for n in self._nodes.values() if pred(n)]

    def nodes_of_kind(self, kind: GraphNodeKind) -> list[GraphNode]:
        return self.nodes_matching(lambda n: n.kind == kind)

    def incoming_edges(self, node_id: str, relation: EdgeRelation | None = None) -> list[GraphEdge]:
        return [e for e in self._bwd.get(node_id, []) if relation is None or e.relation == relation]

    def outgoing_edges(self, node_id: str, relation: EdgeRelation | None = None) -> list[GraphEdge]:
        return [e for e in self._fwd.get(node_id, []) if relation is None or e.relation == relation]

    def readers_of(self, node_id: str) -> list[GraphNode]:
        """Effects and elements that depend on this state/ref node."""
        return self._resolve(e.target.node_id for e in self.outgoing_edges(node_id, "dependency"))

    def writers_of(self, node_id: str) -> list[GraphNode]:
        """Effects and callbacks that mutate this state node."""
        return self._resolve(e.source.node_id for e in self.incoming_edges(node_id, "mutation"))

    def children_of(self, node_id: str) -> list[GraphNode]:
        """Direct child elements of a JSX node."""
        return self._resolve(e.target.node_id for e in self.outgoing_edges(node_id, "structural"))

    def dangling_edges(self) -> list[GraphEdge]:
        """Edges whose endpoints are not nodes of this graph."""
        return [
            e for e in self._edges
            if e.source.node_id not in self._nodes or e.target.node_id not in self._nodes
        ]

    def all_edges(self) -> list[GraphEdge]:
        return list(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def _resolve(self, node_ids) -> list[GraphNode]:
        seen: dict[str, GraphNode] = {}
        for nid in node_ids:
            node = self._nodes.get(nid)
            if node is not None:
                seen.setdefault(nid, node)
        return list(seen.values())
