"""Girth of an undirected graph.

The girth is the length of the shortest cycle.  The search works on a
spanning forest:

* Every edge outside the forest (a *back edge*) closes exactly one cycle
  with the forest path between its endpoints.
* All back edges are given infinite weight and a single Floyd-Warshall pass
  yields the distance between the endpoints of each back edge.
* The shortest ``distance + weight`` over all back edges is reported.

Masking *all* back edges, not only the one being closed, is an
approximation: when the shortest route between two endpoints needs another
back edge the cycle found is longer than the true girth.  ``exact=True``
excludes only the closing edge and runs one Dijkstra search per back edge
instead.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

from baselines.dijkstra import adjacency, dijkstra_path
from utils.graph_utils import Edge, Graph

from .apsp import GirthTimeoutError, floyd_warshall
from .forest import back_edges, spanning_forest

__all__ = ["Cycle", "NO_CYCLE", "GirthConfig", "GirthFinder", "girth"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cycle:
    """A simple cycle: its vertices in walk order, its edges and total weight."""

    vertices: Tuple[Hashable, ...]
    edges: Tuple[Edge, ...]
    length: float

    @property
    def found(self) -> bool:
        return math.isfinite(self.length)

    def __len__(self) -> int:
        return len(self.edges)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "length": self.length if self.found else None,
            "vertices": list(self.vertices),
            "edges": [[e.u, e.v, e.weight] for e in self.edges],
        }


NO_CYCLE = Cycle(vertices=(), edges=(), length=math.inf)


@dataclass
class GirthConfig:
    """Configuration parameters for :class:`GirthFinder`."""

    exact: bool = False
    timeout_s: Optional[float] = None
    # vertex count above which the cubic all-pairs pass is reported as slow
    large_graph_warning: int = 2000


def _close(path: Sequence[Edge], closing: Edge) -> Cycle:
    """Build the cycle made of a ``closing.v``-to-``closing.u`` walk plus ``closing``."""
    vertices: List[Hashable] = [closing.u]
    x = closing.u
    for e in [closing, *path]:
        x = e.other(x)
        vertices.append(x)
    # the walk ends where it started
    vertices.pop()
    length = sum(e.weight for e in path) + closing.weight
    return Cycle(tuple(vertices), (closing, *path), length)


class GirthFinder:
    """Find the shortest cycle of a :class:`~utils.graph_utils.Graph`."""

    def __init__(self, cfg: Optional[GirthConfig] = None):
        self.cfg = cfg or GirthConfig()

    def find(self, graph: Graph) -> Cycle:
        deadline = None
        if self.cfg.timeout_s is not None:
            deadline = time.monotonic() + float(self.cfg.timeout_s)

        forest = spanning_forest(graph)
        back = back_edges(graph, forest)
        LOGGER.debug(
            "graph has %d vertices, %d forest edges, %d back edges",
            graph.num_vertices, len(forest), len(back),
        )
        if not back:
            return NO_CYCLE

        if self.cfg.exact:
            best = self._find_exact(graph, back, deadline)
        else:
            best = self._find_masked(graph, back, deadline)
        LOGGER.debug("shortest cycle has length %s through %d edges", best.length, len(best))
        return best

    # ------------------------------------------------------------------
    def _find_masked(self, graph: Graph, back: List[Edge], deadline: Optional[float]) -> Cycle:
        if graph.num_vertices > self.cfg.large_graph_warning:
            LOGGER.warning(
                "all-pairs shortest path on %d vertices is cubic and may be slow",
                graph.num_vertices,
            )
        masked = {e.id for e in back}
        fw = floyd_warshall(
            graph,
            weight=lambda e: math.inf if e.id in masked else e.weight,
            deadline=deadline,
        )

        # the forest links the endpoints of every back edge, so d is finite
        best_edge, best_len = None, math.inf
        for e in back:
            d = fw.distance(e.v, e.u)
            if d + e.weight < best_len:
                best_edge, best_len = e, d + e.weight
        if best_edge is None:
            return NO_CYCLE
        return _close(fw.path(best_edge.v, best_edge.u), best_edge)

    def _find_exact(self, graph: Graph, back: List[Edge], deadline: Optional[float]) -> Cycle:
        adj = adjacency(graph)
        best = NO_CYCLE
        for e in back:
            if deadline is not None and time.monotonic() >= deadline:
                raise GirthTimeoutError("exact girth search timed out")
            d, path = dijkstra_path(adj, e.v, e.u, skip=e)
            if d + e.weight < best.length:
                best = _close(path, e)
        return best


def girth(graph: Graph, cfg: Optional[GirthConfig] = None) -> Cycle:
    """Return the shortest cycle of ``graph`` or :data:`NO_CYCLE`."""
    return GirthFinder(cfg).find(graph)
