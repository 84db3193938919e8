"""Graph core: topology, priority queue and shortest-path engine.

This subpackage holds the in-memory graph and the Dijkstra engine that
runs on top of it with a binary-heap priority queue.
"""

from .binary_heap import BinaryHeap
from .dijkstra import ShortestPathEngine
from .graph import AdjacencyListing, Graph

__all__ = ["AdjacencyListing", "BinaryHeap", "Graph", "ShortestPathEngine"]
