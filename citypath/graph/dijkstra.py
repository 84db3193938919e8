"""Single-source shortest paths using Dijkstra's algorithm.

``ShortestPathEngine`` runs the relaxation loop over a ``Graph`` with
the ``BinaryHeap`` priority queue and keeps the outcome of the most
recent run as a ``ShortestPathTree``. Distances, predecessors and
vertex states live in that side table, not on the vertices, so the
same graph can be reused for runs from different sources.

Edge weights must be non-negative; the graph rejects anything else.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Optional

from ..domain.errors import (
    NoComputationError,
    UnknownVertexError,
    UnreachableError,
)
from ..domain.models import (
    Edge,
    PathResult,
    ShortestPathTree,
    VertexId,
    VertexState,
)
from .binary_heap import BinaryHeap
from .graph import Graph


@dataclass
class ShortestPathEngine:
    """Dijkstra shortest-path engine bound to one graph.

    Usage:
        engine = ShortestPathEngine(graph)
        engine.compute("A")
        engine.distance_to("C")
        engine.path_to("C")

    Not re-entrant: concurrent ``compute`` calls on one instance must be
    serialized by the caller. A returned ``ShortestPathTree`` is an
    immutable snapshot and can be read freely.

    Attributes:
        graph: The graph to search
        queue_capacity: Optional bound for the priority queue; by default
            it is sized to the number of arcs plus one, which is the most
            entries lazy deletion can ever hold
    """

    graph: Graph
    queue_capacity: Optional[int] = None

    _tree: Optional[ShortestPathTree] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def tree(self) -> ShortestPathTree:
        """Result of the latest ``compute`` call.

        Raises:
            NoComputationError: If no up-to-date computation exists.
        """
        if self._tree is None:
            raise NoComputationError("compute() must be called before querying")
        if self._tree.revision != self.graph.revision:
            raise NoComputationError(
                "Graph changed since the last computation; call compute() again"
            )
        return self._tree

    @property
    def source(self) -> VertexId:
        return self.tree.source

    def compute(self, source: VertexId) -> ShortestPathTree:
        """Compute shortest distances from ``source`` to every vertex.

        Args:
            source: Identity of the start vertex.

        Returns:
            The shortest-path tree of this run.

        Raises:
            UnknownVertexError: If ``source`` is not in the graph.
        """
        self.graph.vertex(source)

        distances: Dict[VertexId, float] = {v: math.inf for v in self.graph}
        states: Dict[VertexId, VertexState] = {
            v: VertexState.UNVISITED for v in self.graph
        }
        predecessors: Dict[VertexId, Edge] = {}

        distances[source] = 0.0
        states[source] = VertexState.TENTATIVE

        capacity = self.queue_capacity
        if capacity is None:
            capacity = self.graph.edge_count + 1
        queue: BinaryHeap[VertexId] = BinaryHeap(capacity=capacity)
        queue.insert(source, 0.0)

        relaxations = 0
        while not queue.is_empty():
            v, _ = queue.extract_min()
            if states[v] is VertexState.FINALIZED:
                # stale entry
                continue
            states[v] = VertexState.FINALIZED

            for edge in self.graph.neighbors(v):
                child = edge.target
                if states[child] is VertexState.FINALIZED:
                    continue
                candidate = distances[v] + edge.weight
                if candidate < distances[child]:
                    distances[child] = candidate
                    predecessors[child] = edge
                    states[child] = VertexState.TENTATIVE
                    queue.insert(child, candidate)
                    relaxations += 1

        tree = ShortestPathTree(
            source=source,
            distances=MappingProxyType(distances),
            predecessors=MappingProxyType(predecessors),
            states=MappingProxyType(states),
            revision=self.graph.revision,
        )
        self._tree = tree

        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(
                "Shortest paths computed",
                extra={
                    "source": source,
                    "vertices": len(distances),
                    "reached": sum(1 for d in distances.values() if d < math.inf),
                    "relaxations": relaxations,
                },
            )
        return tree

    def distance_to(self, vertex: VertexId) -> float:
        """Return the shortest distance from the last source to ``vertex``.

        Unreachable vertices have distance ``math.inf``.

        Raises:
            NoComputationError: If ``compute`` has not run.
            UnknownVertexError: If ``vertex`` is not in the graph.
        """
        tree = self.tree
        self._check_known(vertex)
        return tree.distances[vertex]

    def predecessor_of(self, vertex: VertexId) -> Optional[VertexId]:
        tree = self.tree
        self._check_known(vertex)
        return tree.predecessor_of(vertex)

    def state_of(self, vertex: VertexId) -> VertexState:
        tree = self.tree
        self._check_known(vertex)
        return tree.states[vertex]

    def path_to(self, vertex: VertexId) -> PathResult:
        """Reconstruct the shortest path from the last source to ``vertex``.

        Returns:
            The ordered arcs from the source to ``vertex``; empty when
            ``vertex`` is the source itself.

        Raises:
            NoComputationError: If ``compute`` has not run.
            UnknownVertexError: If ``vertex`` is not in the graph.
            UnreachableError: If ``vertex`` has no finite distance.
        """
        tree = self.tree
        self._check_known(vertex)

        if not tree.is_reachable(vertex):
            raise UnreachableError(
                f"No path from {tree.source} to {vertex}",
                source=tree.source,
                target=vertex,
            )

        edges: List[Edge] = []
        current = vertex
        while current != tree.source:
            edge = tree.predecessors[current]
            edges.append(edge)
            current = edge.source
        edges.reverse()

        return PathResult(
            source=tree.source,
            target=vertex,
            edges=tuple(edges),
            total_weight=tree.distances[vertex],
        )

    def shortest_path(self, source: VertexId, target: VertexId) -> PathResult:
        """Compute from ``source`` and return the path to ``target``."""
        self._check_known(target)
        self.compute(source)
        return self.path_to(target)

    def routes_from(self, source: VertexId) -> Dict[VertexId, Optional[PathResult]]:
        """Compute from ``source`` and return the path to every other vertex.

        Unreachable vertices map to None.
        """
        tree = self.compute(source)
        routes: Dict[VertexId, Optional[PathResult]] = {}
        for vertex in self.graph:
            if vertex == source:
                continue
            routes[vertex] = self.path_to(vertex) if tree.is_reachable(vertex) else None
        return routes

    def _check_known(self, vertex: VertexId) -> None:
        if vertex not in self.graph:
            raise UnknownVertexError(f"Unknown vertex: {vertex}", vertex=vertex)
