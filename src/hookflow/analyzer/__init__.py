"""Structural extraction: component source -> ComponentAnalysis."""

from hookflow.analyzer.service import analyze, analyze_file

__all__ = ["analyze", "analyze_file"]
