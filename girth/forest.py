"""Spanning forest and back-edge helpers."""

from __future__ import annotations

from typing import Iterable, List

import networkx as nx

from utils.graph_utils import Edge, Graph

__all__ = ["spanning_forest", "back_edges"]


def spanning_forest(graph: Graph) -> List[Edge]:
    """Return a spanning forest of ``graph`` built with Kruskal.

    Every edge counts as weight 1, so edges are taken in insertion order.
    Any spanning forest yields valid cycle candidates; this one keeps the
    choice deterministic.
    """

    uf = nx.utils.UnionFind(graph.vertices())
    forest: List[Edge] = []
    for e in graph.edges():
        if uf[e.u] != uf[e.v]:
            forest.append(e)
            uf.union(e.u, e.v)
    return forest


def back_edges(graph: Graph, forest: Iterable[Edge]) -> List[Edge]:
    """Edges of ``graph`` outside ``forest``; each closes one cycle."""

    in_forest = {e.id for e in forest}
    return [e for e in graph.edges() if e.id not in in_forest]
