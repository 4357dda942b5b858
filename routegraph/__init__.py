"""routegraph: shortest paths in weighted directed graphs.

Graphs are plain mappings of node -> {neighbor: weight} with non-negative
weights. Paths are computed with Dijkstra's algorithm.

Primary API:
    shortest_path() - Ordered node list of the shortest path
    find_shortest_path() - Shortest path together with its total cost
    solve() - Route table (best parent and total weight) per reachable node
    reconstruct() - Node list for one destination of a solved route table
    to_digraph() - NetworkX graph annotated with the path, for renderers

Example:
    from routegraph import shortest_path

    graph = {
        "start": {"a": 6, "b": 2},
        "a": {"finish": 1},
        "b": {"a": 3, "finish": 5},
    }
    shortest_path(graph, "start", "finish")  # ['start', 'b', 'a', 'finish']
"""

from __future__ import annotations

from routegraph import cli, logging
from routegraph._version import __version__
from routegraph.algorithms import Route, RouteTable, reconstruct, solve
from routegraph.api import find_shortest_path, shortest_path
from routegraph.convert import from_digraph, to_digraph
from routegraph.errors import InvalidGraph, RouteGraphError, UnreachableNode
from routegraph.graph import (
    Graph,
    graph_nodes,
    path_cost,
    path_segments,
    validate_graph,
)
from routegraph.loader import load_graph, load_graph_yaml
from routegraph.path import ShortestPath

__all__ = [
    # Version
    "__version__",
    # Core
    "shortest_path",
    "find_shortest_path",
    "solve",
    "reconstruct",
    "Route",
    "RouteTable",
    "ShortestPath",
    # Graph helpers
    "Graph",
    "graph_nodes",
    "path_cost",
    "path_segments",
    "validate_graph",
    # Errors
    "RouteGraphError",
    "InvalidGraph",
    "UnreachableNode",
    # I/O and NetworkX integration
    "load_graph",
    "load_graph_yaml",
    "to_digraph",
    "from_digraph",
    # Utilities
    "cli",
    "logging",
]
