"""Weighted directed graphs as plain mappings.

A graph maps every node to its outbound edges, and the outbound edges map each
destination node to a non-negative weight::

    {
        "start": {"a": 6, "b": 2},
        "a": {"finish": 1},
        "b": {"a": 3, "finish": 5},
    }

Nodes that only appear as destinations (``"finish"`` above) are valid and
simply have no outbound edges. The helpers here never mutate the graph.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Hashable, Iterator, List, Mapping, Sequence, Tuple

from routegraph.errors import InvalidGraph

NodeID = Hashable
Weight = float
Graph = Mapping[NodeID, Mapping[NodeID, Weight]]
Segment = Tuple[NodeID, NodeID]


def validate_graph(graph: Graph) -> None:
    """Check that ``graph`` is a mapping of mappings with usable weights.

    Args:
        graph: Graph to check.

    Raises:
        InvalidGraph: If the graph or an adjacency is not a mapping, or if any
            weight is non-numeric, NaN, infinite, or negative.
    """
    if not isinstance(graph, Mapping):
        raise InvalidGraph(
            f"Graph must be a mapping of node -> edges, got {type(graph).__name__}"
        )

    for node, edges in graph.items():
        if not isinstance(edges, Mapping):
            raise InvalidGraph(
                f"Edges of node {node!r} must be a mapping of neighbor -> weight, "
                f"got {type(edges).__name__}"
            )
        for neighbor, weight in edges.items():
            # bool is a Real subclass but never a meaningful weight
            if isinstance(weight, bool) or not isinstance(weight, Real):
                raise InvalidGraph(
                    f"Weight of edge {node!r} -> {neighbor!r} must be a number, "
                    f"got {weight!r}"
                )
            if not math.isfinite(weight):
                raise InvalidGraph(
                    f"Weight of edge {node!r} -> {neighbor!r} must be finite, "
                    f"got {weight!r}"
                )
            if weight < 0:
                raise InvalidGraph(
                    f"Negative weight {weight!r} on edge {node!r} -> {neighbor!r}; "
                    "Dijkstra's algorithm requires non-negative weights"
                )


def graph_nodes(graph: Graph) -> List[NodeID]:
    """Return every node of ``graph`` in first-seen order.

    Includes nodes that only occur as edge destinations.
    """
    seen = {}
    for node, edges in graph.items():
        seen.setdefault(node, None)
        for neighbor in edges:
            seen.setdefault(neighbor, None)
    return list(seen)


def iter_edges(graph: Graph) -> Iterator[Tuple[NodeID, NodeID, Weight]]:
    """Yield ``(source, destination, weight)`` for every edge in mapping order."""
    for node, edges in graph.items():
        for neighbor, weight in edges.items():
            yield node, neighbor, weight


def path_segments(path: Sequence[NodeID]) -> List[Segment]:
    """Return the consecutive node pairs of ``path``.

    Examples:
        >>> path_segments(["a", "b", "c"])
        [('a', 'b'), ('b', 'c')]
    """
    return list(zip(path[:-1], path[1:]))


def path_cost(graph: Graph, path: Sequence[NodeID]) -> float:
    """Return the total weight of walking ``path`` through ``graph``.

    Raises:
        InvalidGraph: If two consecutive nodes are not joined by an edge.
    """
    total = 0.0
    for u, v in path_segments(path):
        edges = graph.get(u, {})
        if v not in edges:
            raise InvalidGraph(f"Edge {u!r} -> {v!r} not present in graph")
        total += edges[v]
    return total
