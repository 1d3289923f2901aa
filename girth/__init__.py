from .apsp import DistanceMatrix, GirthTimeoutError, floyd_warshall
from .finder import NO_CYCLE, Cycle, GirthConfig, GirthFinder, girth
from .forest import back_edges, spanning_forest

__all__ = [
    'Cycle',
    'NO_CYCLE',
    'GirthConfig',
    'GirthFinder',
    'girth',
    'DistanceMatrix',
    'GirthTimeoutError',
    'floyd_warshall',
    'spanning_forest',
    'back_edges',
]
