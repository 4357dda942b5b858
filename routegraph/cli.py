"""Command-line interface for routegraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from routegraph.algorithms.spf import RouteTable, solve
from routegraph.api import find_shortest_path
from routegraph.errors import RouteGraphError
from routegraph.loader import load_graph
from routegraph.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 8) -> str:
    """Format rows as a plain ASCII table with a header separator.

    Args:
        headers: Column headers.
        rows: Data rows, one string per column.
        min_width: Minimum column width.

    Returns:
        The table, or an empty string when there are no rows.
    """
    if not rows:
        return ""

    widths = [
        max(min_width, len(headers[i]), *(len(row[i]) for row in rows))
        for i in range(len(headers))
    ]

    def format_row(cells: List[str]) -> str:
        return "   " + " | ".join(f"{cell:<{widths[i]}}" for i, cell in enumerate(cells))

    lines = [format_row(headers), "   " + "-+-".join("-" * w for w in widths)]
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return a cost with up to three decimals and no trailing zeros.

    Examples:
        6.0 -> "6"; 2.5 -> "2.5"; 1234.5678 -> "1,234.568".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)

    s = f"{v:,.3f}"
    return s.rstrip("0").rstrip(".")


def _routes_to_dict(routes: RouteTable) -> Dict[str, Dict[str, Any]]:
    return {
        str(node): {"parent": route.parent, "total_weight": route.total_weight}
        for node, route in routes.items()
    }


def _run_path(
    graph_path: Path,
    start: str,
    finish: str,
    method: Optional[str],
    as_json: bool,
    draw: Optional[Path],
) -> None:
    """Print the shortest path between two nodes of a graph file."""
    logger.info(f"Loading graph from: {graph_path}")
    try:
        graph = load_graph(graph_path)
        result = find_shortest_path(graph, start, finish, method=method)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {graph_path}")
        print(f"❌ ERROR: Graph file not found: {graph_path}")
        sys.exit(1)
    except RouteGraphError as e:
        logger.error(f"Failed to compute path: {type(e).__name__}: {e}")
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    if as_json:
        print(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        route = " -> ".join(str(node) for node in result.nodes)
        print(f"{route} (cost {_format_cost(result.cost)})")

    if draw is not None:
        # Imported lazily so plain path queries do not pay for matplotlib
        from routegraph.render import draw_path

        draw_path(graph, list(result.nodes), output=draw)
        print(f"✅ Drawing written to: {draw}")


def _run_routes(
    graph_path: Path, start: str, method: Optional[str], as_json: bool
) -> None:
    """Print the route table of every node reachable from ``start``."""
    logger.info(f"Loading graph from: {graph_path}")
    try:
        graph = load_graph(graph_path)
        routes = solve(graph, start, method=method)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {graph_path}")
        print(f"❌ ERROR: Graph file not found: {graph_path}")
        sys.exit(1)
    except RouteGraphError as e:
        logger.error(f"Failed to solve routes: {type(e).__name__}: {e}")
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    if as_json:
        print(json.dumps(_routes_to_dict(routes), indent=2, default=str))
        return

    if not routes:
        print(f"No nodes reachable from {start}")
        return

    rows = [
        [str(node), str(route.parent), _format_cost(route.total_weight)]
        for node, route in sorted(
            routes.items(), key=lambda item: (item[1].total_weight, str(item[0]))
        )
    ]
    print(_format_table(["Node", "Parent", "Total weight"], rows))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``routegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="routegraph",
        description="Find shortest paths in weighted directed graphs.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logs"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{path,routes}",
        help="Available commands",
    )

    path_parser = subparsers.add_parser(
        "path", help="Print the shortest path between two nodes"
    )
    path_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    path_parser.add_argument("start", help="Start node")
    path_parser.add_argument("finish", help="Finish node")
    path_parser.add_argument(
        "--draw",
        type=Path,
        default=None,
        help="Save a drawing of the graph with the path highlighted to this file",
    )

    routes_parser = subparsers.add_parser(
        "routes", help="Print the route table of every node reachable from a start node"
    )
    routes_parser.add_argument("graph", type=Path, help="Path to graph YAML")
    routes_parser.add_argument("start", help="Start node")

    for p in (path_parser, routes_parser):
        p.add_argument(
            "--method",
            choices=["scan", "heap"],
            default=None,
            help="Node selection strategy of the solver (default: scan)",
        )
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
        _run_path(
            graph_path=args.graph,
            start=args.start,
            finish=args.finish,
            method=args.method,
            as_json=args.json,
            draw=args.draw,
        )
    elif args.command == "routes":
        _run_routes(
            graph_path=args.graph,
            start=args.start,
            method=args.method,
            as_json=args.json,
        )


if __name__ == "__main__":
    main()
