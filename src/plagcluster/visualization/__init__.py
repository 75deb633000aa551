"""Graph layout for visualizing clusters."""

from .layout import create_graph_data

__all__ = ["create_graph_data"]
