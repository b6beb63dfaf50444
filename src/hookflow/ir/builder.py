"""ComponentAnalysis -> GraphLayout: positioned nodes plus inferred edges.

Edges are inferred by name, with no type information:
  * refs pair up with state nodes in column order (sequential flow);
  * an effect dependency links the first state node whose label starts with
    the dependency name;
  * a setter `setFoo` links back to the first state node starting with `foo`;
  * each JSX element links to its parent element (structural);
  * a bare identifier prop links the first state node starting with it, else
    the ref node with exactly that name.

Every lookup is first-match over nodes in construction order. Two states
sharing a prefix (`count`, `countValue`) resolve to whichever came first.
"""

from __future__ import annotations

import logging

from hookflow.analyzer.hook_registry import HookKind, StateScope, state_name_for_setter
from hookflow.analyzer.models import ComponentAnalysis
from hookflow.ir.layout import (
    EFFECT_GAP_Y,
    INDEPENDENT_GAP_Y,
    START_Y,
    STATE_GAP_Y,
    NodeSpec,
    canvas_size,
    column_x,
    layout_by_depth,
    layout_column,
)
from hookflow.ir.nodes import EdgeEndpoint, EdgeRelation, GraphEdge, GraphEdgeKind, GraphLayout, GraphNode

log = logging.getLogger(__name__)

STATE_KINDS = frozenset({HookKind.USE_STATE, HookKind.ZUSTAND, HookKind.REACT_QUERY})
GLOBAL_LABEL_SUFFIX = " (global)"
ANONYMOUS_CALLBACK_LABEL = "callback"


def build_graph(analysis: ComponentAnalysis | None) -> GraphLayout:
    """Lay out the analysis as a five-column graph.

    None yields an empty layout with the fallback canvas size.
    """
    col_x = column_x()
    if analysis is None:
        width, height = canvas_size([], col_x)
        return GraphLayout(nodes=[], edges=[], width=width, height=height, col_x=col_x)

    # ── Nodes ────────────────────────────────────────────────────────────
    independent_nodes = layout_column(
        [
            NodeSpec(id=h.id, label=h.name, meta=_hook_meta(h.hook_kind, h.scope))
            for h in analysis.hooks if h.hook_kind == HookKind.USE_REF
        ],
        "independent", col_x["independent"], START_Y, INDEPENDENT_GAP_Y,
    )

    state_nodes = layout_column(
        [
            NodeSpec(
                id=h.id,
                label=h.name + GLOBAL_LABEL_SUFFIX if h.scope == StateScope.GLOBAL else h.name,
                meta=_hook_meta(h.hook_kind, h.scope),
            )
            for h in analysis.hooks if h.hook_kind in STATE_KINDS
        ],
        "state", col_x["state"], START_Y, STATE_GAP_Y,
    )

    effect_specs = [
        NodeSpec(id=e.id, label=e.hook_kind.value,
                 meta={"type": "effect", **e.model_dump(mode="json")})
        for e in analysis.effects
    ] + [
        NodeSpec(id=cb.id, label=cb.name or ANONYMOUS_CALLBACK_LABEL,
                 meta={"type": "callback", **cb.model_dump(mode="json")})
        for cb in analysis.callbacks
    ]
    effect_nodes = layout_column(effect_specs, "effect", col_x["effect"], START_Y, EFFECT_GAP_Y)

    jsx_nodes = layout_by_depth(
        [
            NodeSpec(
                id=jsx.id,
                label=jsx.component,
                meta={"depth": jsx.depth, "props": list(jsx.props), "parent_id": jsx.parent_id},
                depth=jsx.depth,
            )
            for jsx in analysis.jsx_nodes
        ],
        "jsx", col_x["jsx"],
    )

    nodes = independent_nodes + state_nodes + effect_nodes + jsx_nodes
    by_id = {n.id: n for n in nodes}

    # ── Edges ────────────────────────────────────────────────────────────
    edges: list[GraphEdge] = []

    # refs -> state, pairwise in column order
    if independent_nodes and state_nodes:
        for index, ref_node in enumerate(independent_nodes):
            state_node = state_nodes[min(index, len(state_nodes) - 1)]
            edges.append(_connect(
                f"flow-{ref_node.id}-{state_node.id}", ref_node, state_node,
                "flow", "sequential-flow",
            ))

    for effect in analysis.effects:
        effect_node = by_id.get(f"effect-{effect.id}")
        if effect_node is None:
            continue

        # state -> effect (dependency array)
        for dep in effect.dependencies:
            state_node = _first_label_prefix(state_nodes, dep.name)
            if state_node is None:
                log.debug("Dependency %s of %s matches no state", dep.name, effect.id)
                continue
            edges.append(_connect(
                f"dep-{state_node.id}-{effect_node.id}-{dep.name}", state_node, effect_node,
                "state-dependency", "dependency", dep.name,
            ))

        # effect -> state (setter call)
        for setter in effect.setters:
            state_node = _first_label_prefix(state_nodes, state_name_for_setter(setter))
            if state_node is None:
                log.debug("Mutation %s in %s matches no state", setter, effect.id)
                continue
            edges.append(_connect(
                f"mut-{effect_node.id}-{state_node.id}-{setter}", effect_node, state_node,
                "state-mutation", "mutation", setter,
            ))

    # callback -> state (setter call)
    for cb in analysis.callbacks:
        cb_node = by_id.get(f"effect-{cb.id}")
        if cb_node is None:
            continue
        for setter in cb.setters:
            state_node = _first_label_prefix(state_nodes, state_name_for_setter(setter))
            if state_node is None:
                log.debug("Mutation %s in %s matches no state", setter, cb.id)
                continue
            edges.append(_connect(
                f"cb-mut-{cb_node.id}-{state_node.id}-{setter}", cb_node, state_node,
                "state-mutation", "mutation", setter,
            ))

    # state / ref -> JSX prop
    for jsx_node in jsx_nodes:
        for name in jsx_node.meta.get("props", []):
            source_node = _first_label_prefix(state_nodes, name) or next(
                (n for n in independent_nodes if n.label == name), None,
            )
            if source_node is None:
                continue
            edges.append(_connect(
                f"jsx-prop-{source_node.id}-{jsx_node.id}-{name}", source_node, jsx_node,
                "state-dependency", "dependency", name,
            ))

    # JSX parent -> child
    for jsx in analysis.jsx_nodes:
        if jsx.parent_id is None:
            continue
        parent_node = by_id.get(f"jsx-{jsx.parent_id}")
        child_node = by_id.get(f"jsx-{jsx.id}")
        if parent_node is None or child_node is None:
            continue
        edges.append(_connect(
            f"jsx-tree-{parent_node.id}-{child_node.id}", parent_node, child_node,
            "flow", "structural",
        ))

    width, height = canvas_size(nodes, col_x)
    log.info("Graph built: %d nodes, %d edges", len(nodes), len(edges))

    return GraphLayout(nodes=nodes, edges=edges, width=width, height=height, col_x=col_x)


# ── Helpers ───────────────────────────────────────────────────────────────


def _hook_meta(kind: HookKind, scope: StateScope) -> dict[str, str]:
    return {"hook_kind": kind.value, "scope": scope.value}


def _first_label_prefix(candidates: list[GraphNode], name: str) -> GraphNode | None:
    for node in candidates:
        if node.label.startswith(name):
            return node
    return None


def _connect(
    edge_id: str,
    src: GraphNode,
    dst: GraphNode,
    kind: GraphEdgeKind,
    relation: EdgeRelation,
    label: str | None = None,
) -> GraphEdge:
    """Right-edge center of src to left-edge center of dst, whatever the columns."""
    return GraphEdge(
        id=edge_id,
        kind=kind,
        relation=relation,
        source=EdgeEndpoint(node_id=src.id, x=src.x + src.width // 2, y=src.y),
        target=EdgeEndpoint(node_id=dst.id, x=dst.x - dst.width // 2, y=dst.y),
        label=label,
    )
