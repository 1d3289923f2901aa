from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Dict, Hashable, Iterable, List, Optional, Sequence

import networkx as nx

__all__ = ['Edge', 'Graph', 'InvalidGraphError']


class InvalidGraphError(ValueError):
    """Raised when malformed graph data reaches the boundary."""


@dataclass(frozen=True)
class Edge:
    """An undirected edge.  ``id`` tells parallel edges apart."""

    id: int
    u: Hashable
    v: Hashable
    weight: float = 1.0

    def other(self, x: Hashable) -> Hashable:
        return self.v if x == self.u else self.u


def _check_weight(weight) -> float:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidGraphError(f"edge weight must be a number, got {weight!r}")
    w = float(weight)
    if not math.isfinite(w) or w <= 0:
        raise InvalidGraphError(f"edge weight must be positive and finite, got {w}")
    return w


class Graph:
    """A minimal undirected multigraph with weighted edges."""

    def __init__(self, vertices: Iterable[Hashable] = ()):
        self._vertices: Dict[Hashable, None] = {}
        self._edges: List[Edge] = []
        self._pairs: Dict[frozenset, List[Edge]] = {}
        for x in vertices:
            self.add_vertex(x)

    # Vertex handling
    def add_vertex(self, x: Hashable) -> None:
        self._vertices.setdefault(x, None)

    def vertices(self) -> List[Hashable]:
        return list(self._vertices)

    def has_vertex(self, x: Hashable) -> bool:
        return x in self._vertices

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    # Edge handling
    def add_edge(self, u: Hashable, v: Hashable, weight: float = 1.0) -> Optional[Edge]:
        """Add an edge and return it; self-loops are skipped and give ``None``."""
        for x in (u, v):
            if not self.has_vertex(x):
                raise InvalidGraphError(f"edge ({u!r}, {v!r}) references unknown vertex {x!r}")
        w = _check_weight(weight)
        if u == v:
            return None
        edge = Edge(len(self._edges), u, v, w)
        self._edges.append(edge)
        self._pairs.setdefault(frozenset((u, v)), []).append(edge)
        return edge

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def edges_between(self, u: Hashable, v: Hashable) -> List[Edge]:
        return list(self._pairs.get(frozenset((u, v)), ()))

    def has_edge(self, u: Hashable, v: Hashable) -> bool:
        return frozenset((u, v)) in self._pairs

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    # Construction helpers
    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Sequence],
        vertices: Optional[Iterable[Hashable]] = None,
    ) -> "Graph":
        """Build a graph from ``(u, v)`` or ``(u, v, w)`` tuples.

        When ``vertices`` is omitted the endpoints define the vertex set.
        When it is given, edges must only reference listed vertices.
        """
        edges = [tuple(e) for e in edges]
        if vertices is None:
            G = cls(x for e in edges for x in e[:2])
        else:
            G = cls(vertices)
        for e in edges:
            if len(e) == 2:
                G.add_edge(e[0], e[1])
            elif len(e) == 3:
                G.add_edge(e[0], e[1], e[2])
            else:
                raise InvalidGraphError(f"edge must be (u, v) or (u, v, w), got {e!r}")
        return G

    @classmethod
    def from_networkx(cls, H: nx.Graph, weight: str = "weight") -> "Graph":
        """Convert an undirected networkx graph; missing weights default to 1."""
        if H.is_directed():
            raise InvalidGraphError("directed graphs are not supported")
        G = cls(H.nodes())
        for u, v, data in H.edges(data=True):
            G.add_edge(u, v, data.get(weight, 1.0))
        return G

    def to_networkx(self) -> nx.MultiGraph:
        H = nx.MultiGraph()
        H.add_nodes_from(self._vertices)
        for e in self._edges:
            H.add_edge(e.u, e.v, key=e.id, weight=e.weight)
        return H

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices}, num_edges={self.num_edges})"
