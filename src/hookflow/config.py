"""Analyzer configuration: package patterns and naming conventions.

Loaded from an optional YAML file; every field has a default so an empty
file (or no file) yields the stock behavior.

Example hookflow.yaml:

    external_store_sources: [zustand, jotai]
    server_query_sources: ["@tanstack/react-query", swr]
    ref_suffix: Ref
    mutate_methods: [mutate, mutateAsync]
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hookflow.errors import ConfigError

log = logging.getLogger(__name__)


class AnalyzerConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Substrings of an import source that mark an external-store package
    external_store_sources: tuple[str, ...] = ("zustand",)
    # Substrings of an import source that mark a data-fetching package
    server_query_sources: tuple[str, ...] = ("reactQuery", "@tanstack/react-query")
    ref_suffix: str = Field(default="Ref", min_length=1)
    mutate_methods: tuple[str, ...] = ("mutate", "mutateAsync")


DEFAULT_CONFIG = AnalyzerConfig()


def load_config(path: Path | None) -> AnalyzerConfig:
    """Read an AnalyzerConfig from a YAML file, or return the defaults."""
    if path is None:
        return DEFAULT_CONFIG

    try:
        raw = yaml.safe_load(path.read_text())
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(raw).__name__}")

    try:
        config = AnalyzerConfig(**raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {path}: {exc}") from exc

    log.debug("Loaded config from %s: %s", path, config)
    return config
