"""Tests for FlowGraph: node/edge management and relation queries."""

from __future__ import annotations

from hookflow.ir.graph import FlowGraph
from hookflow.ir.nodes import EdgeEndpoint, GraphEdge, GraphLayout, GraphNode


def node(nid: str, kind: str = "state", label: str | None = None) -> GraphNode:
    return GraphNode(id=nid, label=label or nid, kind=kind, x=0, y=0)


def edge(src: str, dst: str, relation: str = "dependency", kind: str = "state-dependency") -> GraphEdge:
    return GraphEdge(
        id=f"{src}->{dst}",
        kind=kind,
        relation=relation,
        source=EdgeEndpoint(node_id=src, x=0, y=0),
        target=EdgeEndpoint(node_id=dst, x=0, y=0),
    )


def sample_graph() -> FlowGraph:
    g = FlowGraph()
    for n in (
        node("state-1", label="count"),
        node("effect-1", "effect", "useEffect"),
        node("effect-2", "effect", "increment"),
        node("jsx-1", "jsx", "div"),
        node("jsx-2", "jsx", "h1"),
    ):
        g.add_node(n)
    g.add_edge(edge("state-1", "effect-1"))
    g.add_edge(edge("state-1", "jsx-2"))
    g.add_edge(edge("effect-1", "state-1", "mutation", "state-mutation"))
    g.add_edge(edge("effect-2", "state-1", "mutation", "state-mutation"))
    g.add_edge(edge("jsx-1", "jsx-2", "structural", "flow"))
    return g


class TestAddNodeEdge:
    def test_add_node(self):
        g = FlowGraph()
        n = node("state-1")
        g.add_node(n)
        assert g.get_node("state-1") is n
        assert len(g) == 1

    def test_later_add_wins(self):
        g = FlowGraph()
        g.add_node(node("a", label="first"))
        g.add_node(node("a", label="second"))
        assert g.get_node("a").label == "second"
        assert len(g) == 1

    def test_duplicate_edges_kept(self):
        g = FlowGraph()
        g.add_edge(edge("a", "b"))
        g.add_edge(edge("a", "b"))
        assert len(g.all_edges()) == 2
        assert len(g.outgoing_edges("a")) == 2

    def test_missing_node(self):
        assert FlowGraph().get_node("nope") is None


class TestQueries:
    def test_nodes_of_kind_keeps_insertion_order(self):
        g = sample_graph()
        assert [n.id for n in g.nodes_of_kind("effect")] == ["effect-1", "effect-2"]
        assert [n.id for n in g.nodes_of_kind("jsx")] == ["jsx-1", "jsx-2"]

    def test_relation_filter(self):
        g = sample_graph()
        assert len(g.incoming_edges("state-1")) == 2
        assert len(g.incoming_edges("state-1", "dependency")) == 0
        assert len(g.outgoing_edges("state-1", "dependency")) == 2

    def test_readers_and_writers(self):
        g = sample_graph()
        assert [n.label for n in g.readers_of("state-1")] == ["useEffect", "h1"]
        assert [n.label for n in g.writers_of("state-1")] == ["useEffect", "increment"]
        assert g.readers_of("jsx-2") == []

    def test_children_only_follow_structural_edges(self):
        g = sample_graph()
        assert [n.id for n in g.children_of("jsx-1")] == ["jsx-2"]
        assert g.children_of("state-1") == []

    def test_resolve_deduplicates(self):
        g = sample_graph()
        g.add_edge(edge("state-1", "effect-1"))
        assert [n.id for n in g.readers_of("state-1")] == ["effect-1", "jsx-2"]


class TestLayoutView:
    def test_from_layout(self):
        layout = GraphLayout(
            nodes=[node("state-1"), node("effect-1", "effect")],
            edges=[edge("state-1", "effect-1")],
            width=1160, height=200,
            col_x={"independent": 80, "state": 300, "variable": 520, "effect": 740, "jsx": 960},
        )
        g = FlowGraph.from_layout(layout)
        assert len(g) == 2
        assert g.dangling_edges() == []

    def test_dangling_edges(self):
        g = FlowGraph()
        g.add_node(node("a"))
        g.add_edge(edge("a", "ghost"))
        assert [e.id for e in g.dangling_edges()] == ["a->ghost"]
