"""Top-level package for citypath.

Shortest routes between cities: a weighted undirected graph, a
binary-heap priority queue and a Dijkstra engine, plus a loader for
delimited vertex/edge record files and a small command-line front-end.
"""

from .domain.errors import CityPathError
from .graph import BinaryHeap, Graph, ShortestPathEngine

__all__ = ["BinaryHeap", "CityPathError", "Graph", "ShortestPathEngine"]
