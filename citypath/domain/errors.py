"""Typed domain errors for citypath.

Every failure raised by the graph, the priority queue, the shortest-path
engine or the record loader is one of these types, so callers can handle
each case explicitly instead of catching bare ``Exception``.

All errors inherit from CityPathError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Optional


@dataclass
class CityPathError(Exception):
    """Base error for the citypath domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(CityPathError):
    """Graph construction or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class DuplicateVertexError(GraphError):
    """A vertex with the same identity is already in the graph.

    Attributes:
        vertex: The duplicated identity
    """

    vertex: Optional[Hashable] = None


@dataclass
class UnknownVertexError(GraphError):
    """A vertex identity was not found in the graph.

    Attributes:
        vertex: The identity that was looked up
    """

    vertex: Optional[Hashable] = None


@dataclass
class NegativeWeightError(GraphError):
    """An edge was given a negative weight.

    Attributes:
        weight: The rejected weight
        source: Edge origin
        target: Edge destination
    """

    weight: float = 0.0
    source: Optional[Hashable] = None
    target: Optional[Hashable] = None


@dataclass
class InvalidWeightError(GraphError):
    """An edge weight is not a finite number (NaN or infinity)."""

    weight: float = 0.0
    source: Optional[Hashable] = None
    target: Optional[Hashable] = None


@dataclass
class QueueError(CityPathError):
    """Priority queue misuse."""


@dataclass
class EmptyQueueError(QueueError):
    """Extract or peek on an empty priority queue.

    Surfacing from the engine means an internal logic fault.
    """


@dataclass
class QueueFullError(QueueError):
    """Insert into a bounded priority queue that is already full.

    Attributes:
        capacity: The configured bound
    """

    capacity: int = 0


@dataclass
class NoComputationError(CityPathError):
    """A distance or path was queried before ``compute`` ran.

    Also raised when the graph topology changed after the last run.
    """


@dataclass
class UnreachableError(CityPathError):
    """No path exists from the source to the requested vertex.

    Attributes:
        source: Source of the last computation
        target: Requested vertex
    """

    source: Optional[Hashable] = None
    target: Optional[Hashable] = None


@dataclass
class RecordFormatError(CityPathError):
    """A delimited vertex or edge record could not be parsed.

    Attributes:
        file_path: File the record was read from
        line_number: 1-based line number of the record
        line: Raw line text
    """

    file_path: Optional[str] = None
    line_number: int = 0
    line: str = ""

