"""Pydantic models for the component analysis report."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from hookflow.analyzer.hook_registry import HookKind, StateScope


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ── Shared ──────────────────────────────────────────────────────────────────

class Location(_Frozen):
    line: int      # 1-based
    column: int    # 0-based


# ── Hooks ───────────────────────────────────────────────────────────────────

class AnalyzedHook(_Frozen):
    id: str                    # "hook-3"
    name: str                  # bound name; one record per destructured name
    hook_kind: HookKind
    scope: StateScope
    defined_at: Location | None = None
    meta: dict[str, Any] = Field(default_factory=dict)  # {"import_source": ...}


class EffectDependency(_Frozen):
    name: str
    is_global: bool = False


class AnalyzedEffect(_Frozen):
    id: str
    hook_kind: Literal[HookKind.USE_EFFECT, HookKind.USE_LAYOUT_EFFECT]
    dependencies: list[EffectDependency] = Field(default_factory=list)
    setters: list[str] = Field(default_factory=list)  # "setCount", "mutation.mutate"
    refs: list[str] = Field(default_factory=list)
    defined_at: Location | None = None


class AnalyzedCallback(_Frozen):
    id: str
    name: str | None = None
    dependencies: list[str] = Field(default_factory=list)
    setters: list[str] = Field(default_factory=list)
    defined_at: Location | None = None


# ── Element tree ────────────────────────────────────────────────────────────

class AnalyzedJsxNode(_Frozen):
    id: str                        # "jsx-1", pre-order
    component: str                 # "div", "Card.Header", "svg:rect"
    depth: int                     # root = 0
    parent_id: str | None = None
    props: list[str] = Field(default_factory=list)
    defined_at: Location | None = None


# ── Aggregate ───────────────────────────────────────────────────────────────

class ExportInfo(_Frozen):
    default_export: str | None = None
    named_exports: list[str] = Field(default_factory=list)


class ComponentMeta(_Frozen):
    exported_components: list[str] = Field(default_factory=list)
    default_export: str | None = None


class ComponentAnalysis(_Frozen):
    source: str
    file_name: str | None = None
    component_name: str | None = None

    hooks: list[AnalyzedHook] = Field(default_factory=list)
    effects: list[AnalyzedEffect] = Field(default_factory=list)
    callbacks: list[AnalyzedCallback] = Field(default_factory=list)
    jsx_nodes: list[AnalyzedJsxNode] = Field(default_factory=list)

    meta: ComponentMeta = Field(default_factory=ComponentMeta)

    # Diagnostics; nothing in the extraction pipeline emits them yet
    errors: list[str] = Field(default_factory=list)
