"""Command-line entry point.

Reads a vertex file and an edge file, optionally re-weights the edges
by Euclidean distance, prints the adjacency list on request, then
prints either the shortest path to ``--target`` or the routes from
``--source`` to every other vertex.

    citypath --source SanFrancisco --target Boston --euclidean
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .adapters.graph import DelimitedGraphRepository
from .config import ObservabilityConfig, get_config
from .domain.errors import CityPathError
from .services import RoutePlannerService


def configure_logging(config: ObservabilityConfig, level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or config.level).upper(),
        format=config.format,
        force=True,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    graph_config = get_config().graph
    parser = argparse.ArgumentParser(
        prog="citypath",
        description="Shortest paths between cities with Dijkstra's algorithm.",
    )
    parser.add_argument(
        "--vertices",
        type=Path,
        default=graph_config.vertices_path,
        help="vertex records, one 'name,x,y' per line (default: %(default)s)",
    )
    parser.add_argument(
        "--edges",
        type=Path,
        default=graph_config.edges_path,
        help="edge records, one 'nameU,nameV,weight' per line (default: %(default)s)",
    )
    parser.add_argument("--source", required=True, help="start vertex")
    parser.add_argument("--target", help="end vertex (default: every vertex)")
    parser.add_argument(
        "--euclidean",
        action="store_true",
        default=graph_config.euclidean_weights,
        help="replace edge weights by the distance between coordinates",
    )
    parser.add_argument(
        "--adjacency",
        action="store_true",
        help="print the adjacency list before the routes",
    )
    parser.add_argument("--log-level", help="override CITYPATH_LOG_LEVEL")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    config = get_config()
    configure_logging(config.observability, args.log_level)

    repository = DelimitedGraphRepository.from_paths(
        args.vertices,
        args.edges,
        delimiter=config.graph.delimiter,
        euclidean_weights=args.euclidean,
    )
    planner = RoutePlannerService(repository, engine_config=config.engine)

    try:
        if args.adjacency:
            print(planner.format_adjacency(planner.adjacency()))
            print()

        if args.target is None:
            routes = planner.routes_from(args.source)
            print(planner.format_routes(args.source, routes))
            return 0

        path, error = planner.route_safe(args.source, args.target)
    except CityPathError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if error is not None:
        print(error, file=sys.stderr)
        return 1
    assert path is not None
    print(planner.format_path(path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
