"""Domain layer - Core graph models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CityPathError,
    DuplicateVertexError,
    EmptyQueueError,
    GraphError,
    InvalidWeightError,
    NegativeWeightError,
    NoComputationError,
    QueueError,
    QueueFullError,
    RecordFormatError,
    UnknownVertexError,
    UnreachableError,
)
from .models import (
    Edge,
    PathResult,
    Point,
    ShortestPathTree,
    Vertex,
    VertexId,
    VertexState,
)

__all__ = [
    # Models
    "Point",
    "Vertex",
    "VertexId",
    "VertexState",
    "Edge",
    "PathResult",
    "ShortestPathTree",
    # Errors
    "CityPathError",
    "GraphError",
    "DuplicateVertexError",
    "UnknownVertexError",
    "NegativeWeightError",
    "InvalidWeightError",
    "QueueError",
    "EmptyQueueError",
    "QueueFullError",
    "NoComputationError",
    "UnreachableError",
    "RecordFormatError",
]
