"""Delimited-record graph repository adapter.

Loads a graph from two plain text files:
- vertex records ``name,x,y``
- edge records ``nameU,nameV,weight`` (undirected)

Blank lines are ignored. Any other line that does not hold exactly
three fields, or whose numeric fields do not parse, is rejected with a
RecordFormatError before it reaches the graph.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError, RecordFormatError
from ...graph.graph import Graph

RECORD_FIELDS = 3


@dataclass
class DelimitedGraphRepository:
    """Graph repository that loads from delimited record files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, delimiter, weighting)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_paths(
        cls,
        vertices_path: Path,
        edges_path: Path,
        **overrides: object,
    ) -> DelimitedGraphRepository:
        """Build a repository for explicit file paths.

        Args:
            vertices_path: Vertex record file.
            edges_path: Edge record file.
            **overrides: Other GraphConfig fields (delimiter, ...).
        """
        vertices_path = Path(vertices_path).resolve()
        # An absolute edges_file overrides data_dir when the paths are joined
        config = GraphConfig(
            data_dir=vertices_path.parent,
            vertices_file=vertices_path.name,
            edges_file=str(Path(edges_path).resolve()),
            **overrides,
        )
        return cls(config)

    def load(self) -> Graph:
        """Load the graph from the record files.

        Returns:
            The graph, with Euclidean weights if configured.

        Raises:
            RecordFormatError: If a record is malformed.
            GraphError: If a file cannot be read or a record breaks a
                graph invariant (duplicate or unknown vertex, bad weight).
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "vertices_path": str(self.config.vertices_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        graph = Graph()
        self._load_vertices(graph)
        self._load_edges(graph)

        if self.config.euclidean_weights:
            graph.compute_euclidean_distances()

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(graph), "arcs": graph.edge_count},
        )
        return graph

    def _load_vertices(self, graph: Graph) -> None:
        path = self.config.vertices_path
        for line_number, line, fields in self._iter_records(path):
            name, x_str, y_str = fields
            try:
                x, y = float(x_str), float(y_str)
            except ValueError as e:
                raise RecordFormatError(
                    f"Invalid coordinates in vertex file {path}, line {line_number}",
                    file_path=str(path),
                    line_number=line_number,
                    line=line,
                    cause=e,
                )
            try:
                graph.add_vertex(name, x, y)
            except GraphError as e:
                self._logger.warning(
                    "Rejected vertex record",
                    extra={"file_path": str(path), "line_number": line_number},
                )
                e.file_path = str(path)
                raise

    def _load_edges(self, graph: Graph) -> None:
        path = self.config.edges_path
        for line_number, line, fields in self._iter_records(path):
            u, v, weight_str = fields
            try:
                weight = float(weight_str)
            except ValueError as e:
                raise RecordFormatError(
                    f"Invalid weight in edge file {path}, line {line_number}",
                    file_path=str(path),
                    line_number=line_number,
                    line=line,
                    cause=e,
                )
            try:
                graph.add_undirected_edge(u, v, weight)
            except GraphError as e:
                self._logger.warning(
                    "Rejected edge record",
                    extra={"file_path": str(path), "line_number": line_number},
                )
                e.file_path = str(path)
                raise

    def _iter_records(self, path: Path) -> Iterator[Tuple[int, str, List[str]]]:
        """Yield ``(line_number, raw_line, fields)`` for each non-blank line."""
        try:
            with path.open(newline="", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except OSError as e:
            raise GraphError(
                f"Failed to read graph file {path}",
                file_path=str(path),
                cause=e,
            )

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            row = next(csv.reader([line], delimiter=self.config.delimiter))
            fields = [value.strip() for value in row]
            if len(fields) != RECORD_FIELDS or not all(fields):
                raise RecordFormatError(
                    f"Invalid line {line_number} in {path}: {line!r}",
                    file_path=str(path),
                    line_number=line_number,
                    line=line,
                )
            yield line_number, line, fields

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
