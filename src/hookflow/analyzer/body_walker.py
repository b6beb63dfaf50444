"""Walk the primary component body and emit hook, effect and callback facts.

Passes:
  1. Locate the component: `function Name() {}` or `const Name = () => {}`.
  2. Single pre-order walk of the body: variable bindings initialized by a
     call become hook facts; bare effect/callback calls become effect and
     callback drafts. Nested closures are walked like any other node.
  3. Resolve each effect dependency's is_global flag against the complete
     set of global hook names, so declaration order does not matter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field as dc_field

from tree_sitter import Node

from hookflow.analyzer.effects import EffectFacts, extract_callback_facts, extract_effect_facts
from hookflow.analyzer.hook_registry import (
    EFFECT_KINDS,
    HookKind,
    StateScope,
    classify_hook,
    scope_for,
)
from hookflow.analyzer.jsx_tree import extract_jsx_tree
from hookflow.analyzer.models import (
    AnalyzedCallback,
    AnalyzedEffect,
    AnalyzedHook,
    AnalyzedJsxNode,
    EffectDependency,
    Location,
)
from hookflow.analyzer.syntax import FUNCTION_NODE_TYPES, field, identifier_name, location, text, walk
from hookflow.config import DEFAULT_CONFIG, AnalyzerConfig

log = logging.getLogger(__name__)


@dataclass
class BodyFacts:
    hooks: list[AnalyzedHook] = dc_field(default_factory=list)
    effects: list[AnalyzedEffect] = dc_field(default_factory=list)
    callbacks: list[AnalyzedCallback] = dc_field(default_factory=list)
    jsx_nodes: list[AnalyzedJsxNode] = dc_field(default_factory=list)


@dataclass
class _EffectDraft:
    id: str
    kind: HookKind
    facts: EffectFacts
    defined_at: Location


def find_component_body(root: Node, component_name: str | None) -> Node | None:
    """Return the body node of the named component, first match in source order.

    The body is a statement_block for declarations and block-bodied arrows,
    or an expression for `const C = () => <div/>`.
    """
    if not component_name:
        return None

    for node in walk(root):
        if node.type in ("function_declaration", "generator_function_declaration"):
            if identifier_name(field(node, "name")) == component_name:
                body = field(node, "body")
                if body is not None and body.type == "statement_block":
                    return body

        elif node.type == "variable_declarator":
            if identifier_name(field(node, "name")) != component_name:
                continue
            value = field(node, "value")
            if value is not None and value.type in FUNCTION_NODE_TYPES:
                return field(value, "body")

    log.debug("Component %s has no function body in this file", component_name)
    return None


def analyze_component_body(
    body: Node | None,
    import_map: dict[str, str],
    config: AnalyzerConfig = DEFAULT_CONFIG,
) -> BodyFacts:
    """Collect all facts from a component body (None -> empty facts)."""
    if body is None:
        return BodyFacts()

    jsx_nodes = extract_jsx_tree(body)

    # An expression body can only render; there are no bindings to discover.
    if body.type != "statement_block":
        return BodyFacts(jsx_nodes=jsx_nodes)

    hooks: list[AnalyzedHook] = []
    drafts: list[_EffectDraft] = []
    callbacks: list[AnalyzedCallback] = []

    for node in walk(body):
        if node.type == "variable_declarator":
            hooks.extend(_hooks_from_binding(node, import_map, config, len(hooks)))

        elif node.type == "call_expression":
            callee = identifier_name(field(node, "function"))
            if callee is None:
                continue
            kind = classify_hook(callee, import_map.get(callee), config)

            if kind in EFFECT_KINDS:
                drafts.append(_EffectDraft(
                    id=f"effect-{len(drafts) + 1}",
                    kind=kind,
                    facts=extract_effect_facts(node, config),
                    defined_at=location(node),
                ))
            elif kind == HookKind.USE_CALLBACK:
                cb = extract_callback_facts(node)
                callbacks.append(AnalyzedCallback(
                    id=f"callback-{len(callbacks) + 1}",
                    name=cb.name,
                    dependencies=cb.dependencies,
                    setters=cb.setters,
                    defined_at=location(node),
                ))

    # Second pass: global flags against every hook, wherever it was declared
    global_names = {h.name for h in hooks if h.scope == StateScope.GLOBAL}
    effects = [
        AnalyzedEffect(
            id=d.id,
            hook_kind=d.kind,
            dependencies=[
                EffectDependency(name=dep, is_global=dep in global_names)
                for dep in d.facts.dependencies
            ],
            setters=d.facts.setters,
            refs=d.facts.refs,
            defined_at=d.defined_at,
        )
        for d in drafts
    ]

    log.debug(
        "Body facts: %d hooks, %d effects, %d callbacks, %d jsx nodes",
        len(hooks), len(effects), len(callbacks), len(jsx_nodes),
    )
    return BodyFacts(hooks=hooks, effects=effects, callbacks=callbacks, jsx_nodes=jsx_nodes)


# ── Helpers ───────────────────────────────────────────────────────────────


def _hooks_from_binding(
    declarator: Node,
    import_map: dict[str, str],
    config: AnalyzerConfig,
    next_index: int,
) -> list[AnalyzedHook]:
    """`const [a, setA] = useState()` -> one hook per bound name."""
    init = field(declarator, "value")
    if init is None or init.type != "call_expression":
        return []
    callee = identifier_name(field(init, "function"))
    if callee is None:
        return []

    source = import_map.get(callee)
    kind = classify_hook(callee, source, config)
    scope = scope_for(kind)
    loc = location(init)

    hooks: list[AnalyzedHook] = []
    for name in _bound_names(field(declarator, "name")):
        next_index += 1
        hooks.append(AnalyzedHook(
            id=f"hook-{next_index}",
            name=name,
            hook_kind=kind,
            scope=scope,
            defined_at=loc,
            meta={"import_source": source},
        ))
    if hooks:
        log.debug("%s() -> %s (%s): %s", callee, kind.value, scope.value,
                  ", ".join(h.name for h in hooks))
    return hooks


def _bound_names(pattern: Node | None) -> list[str]:
    """Identifiers bound directly by a declarator's left-hand side.

    Defaults, rest elements and nested patterns are skipped.
    """
    if pattern is None:
        return []
    if pattern.type == "identifier":
        return [text(pattern)]

    names: list[str] = []
    if pattern.type == "array_pattern":
        for el in pattern.named_children:
            if el.type == "identifier":
                names.append(text(el))
    elif pattern.type == "object_pattern":
        for prop in pattern.named_children:
            if prop.type == "shorthand_property_identifier_pattern":
                names.append(text(prop))
            elif prop.type == "pair_pattern":
                value = identifier_name(field(prop, "value"))
                if value:
                    names.append(value)
    return names
