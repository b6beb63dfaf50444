"""Dependency, mutation and ref facts for effect and callback hook calls."""

from __future__ import annotations

from dataclasses import dataclass, field as dc_field

from tree_sitter import Node

from hookflow.analyzer.hook_registry import is_setter_name
from hookflow.analyzer.syntax import (
    array_identifiers,
    call_arguments,
    field,
    function_body,
    identifier_name,
    text,
    unique,
    walk,
)
from hookflow.config import DEFAULT_CONFIG, AnalyzerConfig


@dataclass
class EffectFacts:
    dependencies: list[str] = dc_field(default_factory=list)
    setters: list[str] = dc_field(default_factory=list)
    refs: list[str] = dc_field(default_factory=list)


@dataclass
class CallbackFacts:
    name: str | None = None
    dependencies: list[str] = dc_field(default_factory=list)
    setters: list[str] = dc_field(default_factory=list)


def extract_effect_facts(call: Node, config: AnalyzerConfig = DEFAULT_CONFIG) -> EffectFacts:
    """Analyze useEffect(cb, deps) / useLayoutEffect(cb, deps).

    Setter calls, obj.mutate()/obj.mutateAsync() calls and xxxRef.member
    accesses anywhere inside the callback (nested closures included) are
    collected in first-seen order.
    """
    args = call_arguments(call)
    callback = args[0] if args else None
    deps_node = args[1] if len(args) > 1 else None

    setters: list[str] = []
    refs: list[str] = []
    mutate_methods = set(config.mutate_methods)

    body = function_body(callback)
    if body is not None:
        for node in walk(body):
            if node.type == "call_expression":
                callee = field(node, "function")
                setter = identifier_name(callee)
                if setter and is_setter_name(setter):
                    setters.append(setter)
                elif callee is not None and callee.type == "member_expression":
                    obj = identifier_name(field(callee, "object"))
                    prop = field(callee, "property")
                    if obj and prop is not None and text(prop) in mutate_methods:
                        setters.append(f"{obj}.{text(prop)}")

            elif node.type == "member_expression":
                obj = identifier_name(field(node, "object"))
                if obj and obj.endswith(config.ref_suffix):
                    refs.append(obj)

    return EffectFacts(
        dependencies=unique(array_identifiers(deps_node)),
        setters=unique(setters),
        refs=unique(refs),
    )


def extract_callback_facts(call: Node) -> CallbackFacts:
    """Analyze useCallback(cb, deps); only direct setter calls count as mutations."""
    args = call_arguments(call)
    callback = args[0] if args else None
    deps_node = args[1] if len(args) > 1 else None

    setters: list[str] = []
    body = function_body(callback)
    if body is not None:
        for node in walk(body):
            if node.type != "call_expression":
                continue
            setter = identifier_name(field(node, "function"))
            if setter and is_setter_name(setter):
                setters.append(setter)

    return CallbackFacts(
        name=_binding_name(call),
        dependencies=unique(array_identifiers(deps_node)),
        setters=unique(setters),
    )


def _binding_name(call: Node) -> str | None:
    """`const handle = useCallback(...)` -> "handle"."""
    parent = call.parent
    if parent is None or parent.type != "variable_declarator":
        return None
    if field(parent, "value") != call:
        return None
    return identifier_name(field(parent, "name"))
