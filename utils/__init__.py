"""Utility modules for girth."""

from .graph_utils import Edge, Graph, InvalidGraphError

__all__ = [
    "Edge",
    "Graph",
    "InvalidGraphError",
]
