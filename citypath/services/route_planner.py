"""Route planner service - Main orchestrator.

Wires a graph repository to the shortest-path engine and turns their
results into the adjacency and path listings shown to users.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..config import AppConfig, EngineConfig, get_config
from ..domain.errors import CityPathError, UnreachableError
from ..domain.models import PathResult, VertexId
from ..graph.dijkstra import ShortestPathEngine
from ..graph.graph import AdjacencyListing, Graph
from ..ports.graph import GraphRepositoryPort


@dataclass
class RoutePlannerService:
    """Main service for shortest-route queries.

    Attributes:
        graph_repository: Loads the graph
        engine_config: Priority queue sizing for the engine
    """

    graph_repository: GraphRepositoryPort
    engine_config: EngineConfig = field(default_factory=lambda: get_config().engine)

    _engine: Optional[ShortestPathEngine] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> Graph:
        return self.graph_repository.load()

    @property
    def engine(self) -> ShortestPathEngine:
        graph = self.graph
        if self._engine is None or self._engine.graph is not graph:
            self._engine = ShortestPathEngine(
                graph, queue_capacity=self.engine_config.queue_capacity
            )
        return self._engine

    def adjacency(self) -> AdjacencyListing:
        return self.graph.adjacency_listing()

    def route(self, source: VertexId, target: VertexId) -> PathResult:
        """Find the shortest path between two vertices.

        Raises:
            UnknownVertexError: If either vertex is not in the graph.
            UnreachableError: If no path exists.
        """
        self._logger.info(
            "Computing route", extra={"source": source, "target": target}
        )
        path = self.engine.shortest_path(source, target)
        self._logger.info(
            "Route computed",
            extra={"edges": path.num_edges, "total_weight": path.total_weight},
        )
        return path

    def route_safe(
        self, source: VertexId, target: VertexId
    ) -> tuple[Optional[PathResult], Optional[str]]:
        """Find a route, returning an error message instead of raising.

        Returns:
            Tuple of (PathResult or None, error message or None).
        """
        try:
            return self.route(source, target), None
        except UnreachableError as e:
            return None, f"No path found between {e.source} and {e.target}"
        except CityPathError as e:
            return None, f"Error: {e}"

    def routes_from(self, source: VertexId) -> Dict[VertexId, Optional[PathResult]]:
        """Shortest paths from ``source`` to every other vertex."""
        routes = self.engine.routes_from(source)
        self._logger.info(
            "Routes computed",
            extra={
                "source": source,
                "reachable": sum(1 for r in routes.values() if r is not None),
                "unreachable": sum(1 for r in routes.values() if r is None),
            },
        )
        return routes

    @staticmethod
    def format_adjacency(listing: AdjacencyListing) -> str:
        """Render ``name -> [ neighbor(weight) ... ]`` lines."""
        lines = []
        for vertex, neighbors in listing:
            cells = "".join(f"{target}({weight}) " for target, weight in neighbors)
            lines.append(f"{vertex} -> [ {cells}]")
        return "\n".join(lines)

    @staticmethod
    def format_path(path: PathResult) -> str:
        path_str = " -> ".join(str(v) for v in path.vertices)
        return f"Shortest path: {path_str}\nTotal weight: {path.total_weight}"

    @staticmethod
    def format_routes(
        source: VertexId, routes: Dict[VertexId, Optional[PathResult]]
    ) -> str:
        lines = []
        for target, path in routes.items():
            if path is None:
                lines.append(f"{source} -> {target}: unreachable")
            else:
                hops = " -> ".join(str(v) for v in path.vertices)
                lines.append(f"{hops} ({path.total_weight})")
        return "\n".join(lines)


def build_route_planner(config: Optional[AppConfig] = None) -> RoutePlannerService:
    """Create a planner backed by the delimited-record repository."""
    from ..adapters.graph import DelimitedGraphRepository

    config = config or get_config()
    return RoutePlannerService(
        graph_repository=DelimitedGraphRepository(config.graph),
        engine_config=config.engine,
    )
