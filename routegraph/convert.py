"""Conversion between mapping graphs and NetworkX directed graphs.

``to_digraph`` is the hand-off point to renderers: the returned graph carries
per-edge and per-node attributes telling which elements lie on the shortest
path, so a drawing backend only has to map attributes to visual styles.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import networkx as nx

from routegraph.graph import (
    Graph,
    NodeID,
    Weight,
    graph_nodes,
    iter_edges,
    path_segments,
)

PATH_STYLE = "bold"
DEFAULT_STYLE = "dashed"


def to_digraph(graph: Graph, path: Optional[Sequence[NodeID]] = None) -> nx.DiGraph:
    """Convert ``graph`` to a NetworkX DiGraph annotated with ``path``.

    Edge attributes:
        weight: Edge weight.
        label: Edge weight, for drawing.
        on_path: Whether the edge joins two consecutive path nodes.
        style: ``"bold"`` for path edges, ``"dashed"`` otherwise.

    Node attributes:
        on_path: Whether the node is on the path.
        style: ``"bold"`` for path nodes only.

    Args:
        graph: Mapping of node -> {neighbor: weight}.
        path: Optional node sequence to highlight.

    Returns:
        A new DiGraph. ``graph`` is not modified.
    """
    path = list(path or [])
    on_path_edges = set(path_segments(path))
    on_path_nodes = set(path)

    nx_graph = nx.DiGraph()
    for node in graph_nodes(graph):
        attrs = {"on_path": node in on_path_nodes}
        if attrs["on_path"]:
            attrs["style"] = PATH_STYLE
        nx_graph.add_node(node, **attrs)

    for node, neighbor, weight in iter_edges(graph):
        on_path = (node, neighbor) in on_path_edges
        nx_graph.add_edge(
            node,
            neighbor,
            weight=weight,
            label=weight,
            on_path=on_path,
            style=PATH_STYLE if on_path else DEFAULT_STYLE,
        )
    return nx_graph


def from_digraph(
    nx_graph: nx.DiGraph, weight: str = "weight", default: Weight = 1.0
) -> Dict[NodeID, Dict[NodeID, Weight]]:
    """Convert a NetworkX directed graph to the mapping form.

    Args:
        nx_graph: Source graph. Must be directed.
        weight: Edge attribute holding the weight.
        default: Weight used for edges without that attribute.

    Returns:
        Mapping of node -> {neighbor: weight}, including isolated nodes.

    Raises:
        TypeError: If ``nx_graph`` is undirected or a multigraph.
    """
    if not nx_graph.is_directed() or nx_graph.is_multigraph():
        raise TypeError("from_digraph() expects a networkx.DiGraph")

    graph: Dict[NodeID, Dict[NodeID, Weight]] = {node: {} for node in nx_graph.nodes}
    for u, v, data in nx_graph.edges(data=True):
        graph[u][v] = data.get(weight, default)
    return graph
