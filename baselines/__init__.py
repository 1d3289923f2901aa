from .dijkstra import adjacency, dijkstra_path

__all__ = ["adjacency", "dijkstra_path"]
