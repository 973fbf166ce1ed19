"""Command-line interface for routegraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from routegraph.config import SELECTION_STRATEGIES, PathFinderConfig
from routegraph.exceptions import NotFoundError
from routegraph.io import load_graph
from routegraph.logging import get_logger, set_global_log_level
from routegraph.routing.dijkstra import DijkstraPathFinder
from routegraph.routing.path_node import INF

logger = get_logger(__name__)


def _format_cost(value: float) -> str:
    """Render integral costs without a trailing ``.0``."""
    if value == int(value):
        return str(int(value))
    return f"{value:g}"


def _find_path(
    graph_path: Path,
    origin_id: str,
    destination_id: str,
    selection: str,
    allow_empty: bool,
    as_json: bool,
) -> None:
    """Load a graph, compute a route and print it."""
    try:
        graph = load_graph(graph_path)
        config = PathFinderConfig(selection=selection, allow_empty_path=allow_empty)
        finder = DijkstraPathFinder(graph, config=config)
        path = finder.find_path(
            graph.find_vertex(origin_id), graph.find_vertex(destination_id)
        )
    except FileNotFoundError:
        logger.error(f"Graph file not found: {graph_path}")
        print(f"ERROR: Graph file not found: {graph_path}", file=sys.stderr)
        sys.exit(1)
    except (NotFoundError, ValueError) as e:
        logger.error(f"Failed to find path: {type(e).__name__}: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if as_json:
        print(json.dumps(path.to_dict(), indent=2))
        return

    route = " -> ".join(v.id for v in path.vertices) or origin_id
    print(f"{route} (cost {_format_cost(path.length)}, {path.size()} edges)")


def _reachable(graph_path: Path, origin_id: str, max_cost: float, as_json: bool) -> None:
    """Load a graph and print vertices reachable within ``max_cost``."""
    try:
        graph = load_graph(graph_path)
        finder = DijkstraPathFinder(graph)
        vertices = finder.reachable(graph.find_vertex(origin_id), max_cost)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {graph_path}")
        print(f"ERROR: Graph file not found: {graph_path}", file=sys.stderr)
        sys.exit(1)
    except (NotFoundError, ValueError) as e:
        logger.error(f"Failed to compute reachable set: {type(e).__name__}: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    costs = {v.id: finder.get_node(v).cost for v in vertices}
    if as_json:
        print(json.dumps(costs, indent=2))
        return
    for vertex_id, cost in costs.items():
        print(f"{vertex_id}\t{_format_cost(cost)}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``routegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="routegraph",
        description="Compute least-cost routes in weighted directed graphs.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{path,reach}",
        help="Available commands",
    )

    path_parser = subparsers.add_parser("path", help="Find the least-cost path")
    path_parser.add_argument("graph", type=Path, help="Path to graph YAML/JSON")
    path_parser.add_argument("origin", help="Origin vertex id")
    path_parser.add_argument("destination", help="Destination vertex id")
    path_parser.add_argument(
        "--selection",
        choices=SELECTION_STRATEGIES,
        default="heap",
        help="Vertex selection strategy (default: heap)",
    )
    path_parser.add_argument(
        "--allow-empty",
        action="store_true",
        help="Return an empty path when origin and destination are the same vertex",
    )

    reach_parser = subparsers.add_parser(
        "reach", help="List vertices reachable within a cost budget"
    )
    reach_parser.add_argument("graph", type=Path, help="Path to graph YAML/JSON")
    reach_parser.add_argument("origin", help="Origin vertex id")
    reach_parser.add_argument(
        "--max-cost",
        type=float,
        default=INF,
        help="Cost budget (default: unlimited)",
    )

    for p in (path_parser, reach_parser):
        p.add_argument("--json", action="store_true", help="Print JSON output")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "path":
        _find_path(
            graph_path=args.graph,
            origin_id=args.origin,
            destination_id=args.destination,
            selection=args.selection,
            allow_empty=args.allow_empty,
            as_json=args.json,
        )
    elif args.command == "reach":
        _reachable(args.graph, args.origin, args.max_cost, args.json)


if __name__ == "__main__":
    main()
