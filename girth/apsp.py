"""All-pairs shortest paths with a vectorised Floyd-Warshall pass.

Costs O(|V|^3) time and O(|V|^2) memory, which makes it a poor fit for
graphs above a few thousand vertices.  An optional deadline lets interactive
callers abort long runs.
"""

from __future__ import annotations

import time
from typing import Callable, Dict, Hashable, List, Optional

import numpy as np

from utils.graph_utils import Edge, Graph

__all__ = ["DistanceMatrix", "GirthTimeoutError", "floyd_warshall"]

WeightFn = Callable[[Edge], float]


class GirthTimeoutError(RuntimeError):
    """Raised when a computation passes its deadline."""


class DistanceMatrix:
    """Shortest-path distances and next hops between every vertex pair."""

    def __init__(
        self,
        index: Dict[Hashable, int],
        dist: np.ndarray,
        nxt: np.ndarray,
        direct: Dict[tuple, Edge],
    ):
        self.index = index
        self.dist = dist
        self.nxt = nxt
        self._direct = direct
        self._labels = list(index)

    def distance(self, u: Hashable, v: Hashable) -> float:
        return float(self.dist[self.index[u], self.index[v]])

    def path(self, u: Hashable, v: Hashable) -> List[Edge]:
        """Edges on a shortest ``u``-``v`` path; empty if none exists."""
        i, j = self.index[u], self.index[v]
        if i == j or not np.isfinite(self.dist[i, j]):
            return []
        edges: List[Edge] = []
        while i != j:
            k = int(self.nxt[i, j])
            edges.append(self._direct[(i, k)])
            i = k
        return edges

    def __len__(self) -> int:
        return len(self._labels)


def floyd_warshall(
    graph: Graph,
    weight: Optional[WeightFn] = None,
    deadline: Optional[float] = None,
) -> DistanceMatrix:
    """Run Floyd-Warshall over ``graph``.

    ``weight`` maps an edge to its cost and defaults to ``edge.weight``; an
    infinite cost removes the edge.  Parallel edges collapse to the lightest
    one.  ``deadline`` is a ``time.monotonic()`` instant after which
    :class:`GirthTimeoutError` is raised.
    """

    if weight is None:
        weight = lambda e: e.weight  # noqa: E731

    index = {x: i for i, x in enumerate(graph.vertices())}
    n = len(index)
    dist = np.full((n, n), np.inf)
    np.fill_diagonal(dist, 0.0)
    nxt = np.tile(np.arange(n), (n, 1))
    direct: Dict[tuple, Edge] = {}

    for e in graph.edges():
        w = float(weight(e))
        if not np.isfinite(w):
            continue
        i, j = index[e.u], index[e.v]
        if w < dist[i, j]:
            dist[i, j] = dist[j, i] = w
            direct[(i, j)] = direct[(j, i)] = e

    for k in range(n):
        if deadline is not None and time.monotonic() >= deadline:
            raise GirthTimeoutError(f"all-pairs shortest path timed out at pivot {k}/{n}")
        via = dist[:, k:k + 1] + dist[k:k + 1, :]
        better = via < dist
        dist = np.where(better, via, dist)
        nxt = np.where(better, nxt[:, k:k + 1], nxt)

    return DistanceMatrix(index, dist, nxt, direct)
