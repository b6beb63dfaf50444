"""hookflow: data-flow graphs for function-based UI components."""

__version__ = "0.1.0"
