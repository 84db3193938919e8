"""Weighted graph holding the static topology.

The graph owns every vertex record and the adjacency list of outgoing
arcs of each vertex. It never stores shortest-path state; see
``dijkstra.ShortestPathEngine`` for that.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..domain.errors import (
    DuplicateVertexError,
    GraphError,
    InvalidWeightError,
    NegativeWeightError,
    UnknownVertexError,
)
from ..domain.models import Edge, Point, Vertex, VertexId

AdjacencyListing = List[Tuple[VertexId, List[Tuple[VertexId, float]]]]


@dataclass
class Graph:
    """Weighted graph with per-vertex adjacency lists.

    Vertices keep their insertion order. ``revision`` is bumped on every
    topology change so shortest-path results can detect that they are
    out of date.
    """

    _vertices: Dict[VertexId, Vertex] = field(default_factory=dict, repr=False)
    _adjacency: Dict[VertexId, List[Edge]] = field(default_factory=dict, repr=False)
    _revision: int = field(default=0, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[VertexId]:
        return iter(self._vertices)

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def edge_count(self) -> int:
        """Number of directed arcs (an undirected edge counts twice)."""
        return sum(len(edges) for edges in self._adjacency.values())

    def add_vertex(
        self,
        vertex_id: VertexId,
        x: Optional[float] = None,
        y: Optional[float] = None,
    ) -> Vertex:
        """Add a vertex, optionally located at ``(x, y)``.

        Args:
            vertex_id: Unique identity of the vertex.
            x: Optional x coordinate.
            y: Optional y coordinate (required if ``x`` is given).

        Returns:
            The created vertex.

        Raises:
            DuplicateVertexError: If ``vertex_id`` is already present.
            GraphError: If only one coordinate is given, or a coordinate
                is not a finite number.
        """
        if vertex_id in self._vertices:
            raise DuplicateVertexError(
                f"Cannot create vertex with existing name: {vertex_id}",
                vertex=vertex_id,
            )
        if (x is None) != (y is None):
            raise GraphError(f"Vertex {vertex_id} needs both x and y, or neither")
        if x is not None and not (math.isfinite(x) and math.isfinite(y)):
            raise GraphError(
                f"Vertex {vertex_id} has non-finite coordinates: ({x}, {y})"
            )

        location = Point(float(x), float(y)) if x is not None and y is not None else None
        vertex = Vertex(id=vertex_id, location=location)
        self._vertices[vertex_id] = vertex
        self._adjacency[vertex_id] = []
        self._revision += 1
        return vertex

    def add_edge(self, source: VertexId, target: VertexId, weight: float) -> Edge:
        """Add a directed arc ``source -> target``.

        Raises:
            UnknownVertexError: If either endpoint does not exist.
            NegativeWeightError: If ``weight`` is negative.
            InvalidWeightError: If ``weight`` is NaN or infinite.
        """
        self._check_edge(source, target, weight)
        edge = Edge(source=source, target=target, weight=float(weight))
        self._adjacency[source].append(edge)
        self._revision += 1
        return edge

    def add_undirected_edge(
        self, u: VertexId, v: VertexId, weight: float
    ) -> Tuple[Edge, Edge]:
        """Add the two arcs ``u -> v`` and ``v -> u`` with the same weight.

        Both arcs are validated before either is added.
        """
        self._check_edge(u, v, weight)
        return self.add_edge(u, v, weight), self.add_edge(v, u, weight)

    def _check_edge(self, source: VertexId, target: VertexId, weight: float) -> None:
        for endpoint in (source, target):
            if endpoint not in self._vertices:
                raise UnknownVertexError(
                    f"{endpoint} does not exist. Cannot create edge.",
                    vertex=endpoint,
                )
        if math.isnan(weight) or math.isinf(weight):
            raise InvalidWeightError(
                f"Edge {source} - {target} has a non-finite weight: {weight}",
                weight=weight,
                source=source,
                target=target,
            )
        if weight < 0:
            raise NegativeWeightError(
                f"Edge {source} - {target} has a negative weight: {weight}",
                weight=weight,
                source=source,
                target=target,
            )

    def vertex(self, vertex_id: VertexId) -> Vertex:
        """Return the vertex with the given identity.

        Raises:
            UnknownVertexError: If the vertex does not exist.
        """
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise UnknownVertexError(
                f"Unknown vertex: {vertex_id}", vertex=vertex_id
            ) from None

    def vertices(self) -> Sequence[Vertex]:
        return list(self._vertices.values())

    def neighbors(self, vertex_id: VertexId) -> Sequence[Edge]:
        """Return the outgoing arcs of a vertex."""
        self.vertex(vertex_id)
        return tuple(self._adjacency[vertex_id])

    def edge_between(self, source: VertexId, target: VertexId) -> Optional[Edge]:
        """Return the cheapest arc ``source -> target``, or None."""
        candidates = [e for e in self.neighbors(source) if e.target == target]
        if not candidates:
            return None
        return min(candidates, key=lambda e: e.weight)

    def compute_euclidean_distances(self) -> None:
        """Replace every arc weight by the distance between its endpoints.

        Raises:
            GraphError: If an arc touches a vertex without coordinates.
            InvalidWeightError: If a distance overflows to infinity. The
                previous weights are kept.
        """
        reweighted: Dict[VertexId, List[Edge]] = {}
        for vertex_id, edges in self._adjacency.items():
            new_edges = []
            for edge in edges:
                start = self._vertices[edge.source].location
                end = self._vertices[edge.target].location
                if start is None or end is None:
                    missing = edge.source if start is None else edge.target
                    raise GraphError(
                        f"Vertex {missing} has no coordinates; "
                        "cannot compute Euclidean distances"
                    )
                weight = start.distance_to(end)
                if not math.isfinite(weight):
                    raise InvalidWeightError(
                        f"Edge {edge.source} - {edge.target} has a non-finite "
                        f"Euclidean distance: {weight}",
                        weight=weight,
                        source=edge.source,
                        target=edge.target,
                    )
                new_edges.append(Edge(edge.source, edge.target, weight))
            reweighted[vertex_id] = new_edges

        self._adjacency = reweighted
        self._revision += 1
        self._logger.debug(
            "Euclidean distances computed",
            extra={"vertices": len(self._vertices), "arcs": self.edge_count},
        )

    def adjacency_listing(self) -> AdjacencyListing:
        """Return ``(vertex, [(neighbor, weight), ...])`` for every vertex."""
        return [
            (vertex_id, [(edge.target, edge.weight) for edge in edges])
            for vertex_id, edges in self._adjacency.items()
        ]
