"""Graph ports - Abstractions for graph loading.

These protocols define the contracts the route-planning service relies
on, so the record-file loader can be swapped for another source (or a
prebuilt in-memory graph in tests).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..graph.graph import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/record_repository.py

    The repository is responsible for loading and caching the graph
    from persistent storage.
    """

    def load(self) -> Graph:
        """Load the graph.

        Returns:
            The fully built graph (vertices and edges).
        """
        ...

    def clear_cache(self) -> None:
        """Drop any cached graph so the next load re-reads the source."""
        ...
