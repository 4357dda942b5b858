"""Single-source shortest paths (Dijkstra) over mapping graphs.

``solve`` builds a route table: for every node reachable from the start it
records the best predecessor and the cumulative weight of the best route.

Notes:
    Relaxation only overwrites an entry when the new total is strictly smaller,
    so among equal-weight routes the first one discovered is kept. When several
    unvisited nodes share the smallest total, the one that entered the route
    table first is expanded next. Both selection strategies follow these rules
    and therefore return identical tables:

    - ``scan``: linear scan over the route table for the next node, O(n^2).
    - ``heap``: binary heap keyed by ``(total_weight, insertion order)`` with
      lazy deletion of stale entries, O((n + m) log n).
"""

from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush
from typing import Dict, List, Optional, Set, Tuple

from routegraph.config import SOLVER_CONFIG
from routegraph.graph import Graph, NodeID, Weight, validate_graph
from routegraph.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Route:
    """Best known way to reach a node.

    Attributes:
        parent: Preceding node on the best route, ``None`` when unknown.
        total_weight: Cumulative weight from the start node.
    """

    parent: Optional[NodeID]
    total_weight: Weight


RouteTable = Dict[NodeID, Route]


def _relax(
    routes: RouteTable,
    node: NodeID,
    node_weight: Weight,
    neighbor: NodeID,
    edge_weight: Weight,
) -> bool:
    """Record ``node`` as parent of ``neighbor`` if that gives a shorter route.

    Returns:
        True if the route table changed.
    """
    candidate = node_weight + edge_weight
    current = routes.get(neighbor)
    if current is not None and not candidate < current.total_weight:
        return False
    routes[neighbor] = Route(parent=node, total_weight=candidate)
    return True


def _solve_scan(graph: Graph, start: NodeID) -> RouteTable:
    routes: RouteTable = {}
    visited: Set[NodeID] = set()

    node: NodeID = start
    node_weight: Weight = 0.0

    while True:
        for neighbor, edge_weight in graph.get(node, {}).items():
            if neighbor == start or neighbor in visited:
                continue
            _relax(routes, node, node_weight, neighbor, edge_weight)
        visited.add(node)

        # min() keeps the first of equal keys, i.e. the earliest table entry
        pending = [n for n in routes if n not in visited]
        if not pending:
            break
        node = min(pending, key=lambda n: routes[n].total_weight)
        node_weight = routes[node].total_weight

    return routes


def _solve_heap(graph: Graph, start: NodeID) -> RouteTable:
    routes: RouteTable = {}
    visited: Set[NodeID] = set()
    order: Dict[NodeID, int] = {}
    min_pq: List[Tuple[Weight, int, NodeID]] = [(0.0, -1, start)]

    while min_pq:
        node_weight, _, node = heappop(min_pq)
        if node in visited:
            continue
        if node != start and node_weight > routes[node].total_weight:
            continue

        for neighbor, edge_weight in graph.get(node, {}).items():
            if neighbor == start or neighbor in visited:
                continue
            if _relax(routes, node, node_weight, neighbor, edge_weight):
                rank = order.setdefault(neighbor, len(order))
                heappush(min_pq, (routes[neighbor].total_weight, rank, neighbor))
        visited.add(node)

    return routes


def solve(graph: Graph, start: NodeID, method: Optional[str] = None) -> RouteTable:
    """Compute the route table of every node reachable from ``start``.

    Args:
        graph: Mapping of node -> {neighbor: weight}. Weights must be
            non-negative and finite.
        start: Node to search from. It does not have to be a key of ``graph``;
            a node without outbound edges yields an empty table.
        method: ``"scan"`` or ``"heap"``. Defaults to ``SOLVER_CONFIG.method``.

    Returns:
        Mapping of reached node -> :class:`Route`. The start node and nodes
        that cannot be reached have no entry.

    Raises:
        InvalidGraph: If the graph is malformed or has an invalid weight.
        ValueError: If ``method`` is not supported.
    """
    method = SOLVER_CONFIG.validate_method(method or SOLVER_CONFIG.method)
    validate_graph(graph)

    if method == "heap":
        routes = _solve_heap(graph, start)
    else:
        routes = _solve_scan(graph, start)

    logger.debug(
        "Solved routes from %r using %s selection: %d reachable node(s)",
        start,
        method,
        len(routes),
    )
    return routes
