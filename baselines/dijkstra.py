from __future__ import annotations

from typing import Dict, Hashable, List, Optional, Tuple
import heapq
import itertools

from utils.graph_utils import Edge, Graph

Adjacency = Dict[Hashable, List[Tuple[Hashable, Edge]]]


def adjacency(graph: Graph) -> Adjacency:
    """Map every vertex to its ``(neighbour, edge)`` incidences."""
    adj: Adjacency = {x: [] for x in graph.vertices()}
    for e in graph.edges():
        adj[e.u].append((e.v, e))
        adj[e.v].append((e.u, e))
    return adj


def dijkstra_path(
    adj: Adjacency,
    src: Hashable,
    dst: Hashable,
    skip: Optional[Edge] = None,
) -> Tuple[float, List[Edge]]:
    """Compute the shortest path between two vertices using Dijkstra's algorithm.

    ``adj`` comes from :func:`adjacency`.  The edge ``skip`` is ignored while
    searching, which is how a cycle through that edge is closed.  Returns the
    path weight and its edges in order from ``src`` to ``dst``.
    """
    tie = itertools.count()
    pq = [(0.0, next(tie), src, [])]
    visited = set()
    while pq:
        cost, _, node, path = heapq.heappop(pq)
        if node in visited:
            continue
        visited.add(node)
        if node == dst:
            return cost, path
        for nbr, e in adj.get(node, ()):
            if (skip is not None and e.id == skip.id) or nbr in visited:
                continue
            heapq.heappush(pq, (cost + e.weight, next(tie), nbr, path + [e]))
    raise ValueError(f"No path from {src} to {dst}")
