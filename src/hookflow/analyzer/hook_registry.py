"""Hook classification: callee name + import source -> HookKind and scope.

Pure surface-syntax matching. Builtin hooks are keyed by exact name; store
and server-state hooks are recognized by naming convention plus the package
they were imported from (see AnalyzerConfig for the package patterns).
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from hookflow.config import DEFAULT_CONFIG, AnalyzerConfig

log = logging.getLogger(__name__)


class HookKind(str, Enum):
    USE_STATE = "useState"
    USE_REF = "useRef"
    USE_REDUCER = "useReducer"
    USE_EFFECT = "useEffect"
    USE_LAYOUT_EFFECT = "useLayoutEffect"
    USE_CALLBACK = "useCallback"
    USE_MEMO = "useMemo"
    ZUSTAND = "zustand"            # external store hook
    REACT_QUERY = "react-query"    # server-state query/mutation hook
    CUSTOM = "custom"              # anything else


class StateScope(str, Enum):
    LOCAL = "local"
    GLOBAL = "global"
    EXTERNAL = "external"


BUILTIN_HOOKS: dict[str, HookKind] = {
    "useState": HookKind.USE_STATE,
    "useRef": HookKind.USE_REF,
    "useReducer": HookKind.USE_REDUCER,
    "useEffect": HookKind.USE_EFFECT,
    "useLayoutEffect": HookKind.USE_LAYOUT_EFFECT,
    "useCallback": HookKind.USE_CALLBACK,
    "useMemo": HookKind.USE_MEMO,
}

EFFECT_KINDS = frozenset({HookKind.USE_EFFECT, HookKind.USE_LAYOUT_EFFECT})

GLOBAL_KINDS = frozenset({HookKind.ZUSTAND, HookKind.REACT_QUERY})

# setCount, setIsOpen -- not "setup" or "settings"
SETTER_RE = re.compile(r"^set([A-Z].*)")


def classify_hook(
    callee_name: str,
    import_source: str | None,
    config: AnalyzerConfig = DEFAULT_CONFIG,
) -> HookKind:
    """Assign a HookKind to a call by its callee name and import origin."""
    builtin = BUILTIN_HOOKS.get(callee_name)
    if builtin is not None:
        return builtin

    if not import_source:
        return HookKind.CUSTOM

    if (callee_name.startswith("use")
            and callee_name.endswith("Store")
            and _matches_any(import_source, config.external_store_sources)):
        return HookKind.ZUSTAND

    if _matches_any(import_source, config.server_query_sources):
        lower = callee_name.lower()
        if "mutation" in lower or "query" in lower:
            return HookKind.REACT_QUERY

    return HookKind.CUSTOM


def scope_for(kind: HookKind) -> StateScope:
    """Store and server-state hooks are global; everything else is local."""
    return StateScope.GLOBAL if kind in GLOBAL_KINDS else StateScope.LOCAL


def is_setter_name(name: str) -> bool:
    return SETTER_RE.match(name) is not None


def state_name_for_setter(setter: str) -> str:
    """setCount -> count. Names that aren't setters are returned unchanged."""
    m = SETTER_RE.match(setter)
    if not m:
        return setter
    rest = m.group(1)
    return rest[0].lower() + rest[1:]


def _matches_any(import_source: str, patterns: tuple[str, ...]) -> bool:
    return any(p in import_source for p in patterns)
