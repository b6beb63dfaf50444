"""Shared utilities for hookflow."""

from __future__ import annotations

from hookflow.analyzer.models import Location


def snippet(source: str, lineno: int, max_len: int = 160) -> str:
    """Return the source line at lineno (1-based), stripped and truncated."""
    lines = source.splitlines()
    if 0 < lineno <= len(lines):
        return lines[lineno - 1].strip()[:max_len]
    return ""


def format_location(loc: Location | None) -> str:
    """`12:4`, or an empty string when the location is unknown."""
    if loc is None:
        return ""
    return f"{loc.line}:{loc.column}"
