"""Immutable domain models for citypath.

All models are frozen dataclasses with slots for memory efficiency.
Vertices and edges describe the static topology only; the per-run
distance/predecessor state of a shortest-path computation lives in
``ShortestPathTree`` so one graph can serve many independent runs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Mapping, Optional, Union

VertexId = Union[str, int]


class VertexState(Enum):
    """Lifecycle of a vertex during one ``compute`` run."""

    UNVISITED = auto()
    TENTATIVE = auto()
    FINALIZED = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """Planar coordinates of a vertex."""

    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Return the Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True, slots=True)
class Vertex:
    """A graph vertex.

    Attributes:
        id: Unique identity (city name or integer index)
        location: Optional coordinates, used for Euclidean weights
    """

    id: VertexId
    location: Optional[Point] = None

    @property
    def has_location(self) -> bool:
        return self.location is not None


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed arc ``source -> target``.

    An undirected edge is stored as two arcs sharing the same weight.
    """

    source: VertexId
    target: VertexId
    weight: float

    def __str__(self) -> str:
        return f"{self.source} - {self.target}"


@dataclass(frozen=True, slots=True)
class PathResult:
    """Shortest path between two vertices.

    Attributes:
        source: First vertex of the path
        target: Last vertex of the path
        edges: Ordered arcs from source to target (empty if source == target)
        total_weight: Sum of the arc weights
    """

    source: VertexId
    target: VertexId
    edges: tuple[Edge, ...] = field(default_factory=tuple)
    total_weight: float = 0.0

    @property
    def vertices(self) -> tuple[VertexId, ...]:
        """Return the vertex sequence visited by the path."""
        return (self.source,) + tuple(edge.target for edge in self.edges)

    @property
    def is_empty(self) -> bool:
        """Check if the path has no edges (source == target)."""
        return len(self.edges) == 0

    @property
    def num_edges(self) -> int:
        return len(self.edges)


@dataclass(frozen=True, slots=True)
class ShortestPathTree:
    """Result of one single-source shortest-path run.

    Attributes:
        source: The vertex the run started from
        distances: Finalized distance of every vertex (inf if unreachable)
        predecessors: Arc used to reach each reached vertex except the source
        states: Final state of every vertex
        revision: Graph revision the run was computed against
    """

    source: VertexId
    distances: Mapping[VertexId, float]
    predecessors: Mapping[VertexId, Edge]
    states: Mapping[VertexId, VertexState]
    revision: int = 0

    def is_reachable(self, vertex: VertexId) -> bool:
        return not math.isinf(self.distances.get(vertex, math.inf))

    def predecessor_of(self, vertex: VertexId) -> Optional[VertexId]:
        """Return the vertex preceding ``vertex`` on its shortest path."""
        edge = self.predecessors.get(vertex)
        return edge.source if edge is not None else None
