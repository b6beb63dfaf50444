"""Exception hierarchy for hookflow.

Heuristic misses (an unmatched dependency, setter or prop) are never errors;
only malformed input and unusable configuration raise.
"""

from __future__ import annotations


class HookflowError(Exception):
    """Base class for all hookflow errors."""


class SourceParseError(HookflowError):
    """The component source could not be parsed into a syntax tree."""

    def __init__(
        self,
        file_name: str | None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.file_name = file_name
        self.line = line
        self.column = column
        where = file_name or "<source>"
        if line is not None:
            where = f"{where}:{line}:{column or 0}"
        super().__init__(f"Syntax error in {where}")


class ConfigError(HookflowError):
    """The analyzer configuration file is unreadable or invalid."""
