"""Entry points that compose route solving and path reconstruction."""

from __future__ import annotations

from typing import List, Optional

from routegraph.algorithms.paths import reconstruct
from routegraph.algorithms.spf import solve
from routegraph.graph import Graph, NodeID
from routegraph.logging import get_logger
from routegraph.path import ShortestPath

logger = get_logger(__name__)


def find_shortest_path(
    graph: Graph,
    start: NodeID,
    finish: NodeID,
    method: Optional[str] = None,
) -> ShortestPath:
    """Return the shortest path from ``start`` to ``finish`` with its cost.

    Args:
        graph: Mapping of node -> {neighbor: weight}.
        start: Source node.
        finish: Destination node.
        method: Solver node-selection strategy (``"scan"`` or ``"heap"``).

    Raises:
        InvalidGraph: If the graph has a negative or otherwise invalid weight.
        UnreachableNode: If no route leads from ``start`` to ``finish``.
    """
    routes = solve(graph, start, method=method)
    nodes = reconstruct(routes, start, finish)
    cost = routes[finish].total_weight if finish != start else 0.0
    logger.debug(
        "Shortest path %r -> %r: %d node(s), cost %s", start, finish, len(nodes), cost
    )
    return ShortestPath(nodes=tuple(nodes), cost=cost)


def shortest_path(graph: Graph, start: NodeID, finish: NodeID) -> List[NodeID]:
    """Return the nodes of the shortest path from ``start`` to ``finish``.

    Example:
        >>> graph = {"start": {"a": 6, "b": 2}, "a": {"finish": 1},
        ...          "b": {"a": 3, "finish": 5}}
        >>> shortest_path(graph, "start", "finish")
        ['start', 'b', 'a', 'finish']
    """
    return list(find_shortest_path(graph, start, finish).nodes)
