"""Matplotlib drawing of a graph with its shortest path highlighted."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence, Union

import matplotlib.pyplot as plt
import networkx as nx

from routegraph.convert import to_digraph
from routegraph.graph import Graph, NodeID
from routegraph.logging import get_logger

logger = get_logger(__name__)

PATH_COLOR = "tab:red"
EDGE_COLOR = "tab:gray"
NODE_COLOR = "#A0CBE2"


def draw_path(
    graph: Graph,
    path: Optional[Sequence[NodeID]] = None,
    ax: Optional[Any] = None,
    output: Optional[Union[str, Path]] = None,
    layout_seed: int = 42,
) -> Any:
    """Draw ``graph`` with ``path`` emphasized.

    Path edges are drawn thick and colored, the remaining edges dashed. Every
    edge is labeled with its weight.

    Args:
        graph: Mapping of node -> {neighbor: weight}.
        path: Node sequence to highlight.
        ax: Matplotlib Axes to draw on; a new figure is created when omitted.
        output: If given, the figure is saved to this file and closed.
        layout_seed: Seed for the spring layout, for reproducible drawings.

    Returns:
        The Axes the graph was drawn on.
    """
    nx_graph = to_digraph(graph, path)
    pos = nx.spring_layout(nx_graph, seed=layout_seed)

    if ax is None:
        _, ax = plt.subplots(figsize=(8.0, 6.0))

    path_nodes = [n for n, on_path in nx_graph.nodes(data="on_path") if on_path]
    other_nodes = [n for n, on_path in nx_graph.nodes(data="on_path") if not on_path]
    path_edges = [(u, v) for u, v, on_path in nx_graph.edges(data="on_path") if on_path]
    other_edges = [
        (u, v) for u, v, on_path in nx_graph.edges(data="on_path") if not on_path
    ]

    nx.draw_networkx_nodes(
        nx_graph, pos, nodelist=other_nodes, node_color=NODE_COLOR, ax=ax
    )
    nx.draw_networkx_nodes(
        nx_graph,
        pos,
        nodelist=path_nodes,
        node_color=NODE_COLOR,
        edgecolors=PATH_COLOR,
        linewidths=2.0,
        ax=ax,
    )
    nx.draw_networkx_labels(nx_graph, pos, ax=ax)
    nx.draw_networkx_edges(
        nx_graph,
        pos,
        edgelist=other_edges,
        style="dashed",
        edge_color=EDGE_COLOR,
        arrows=True,
        ax=ax,
    )
    nx.draw_networkx_edges(
        nx_graph,
        pos,
        edgelist=path_edges,
        width=3.0,
        edge_color=PATH_COLOR,
        arrows=True,
        arrowsize=16,
        ax=ax,
    )
    nx.draw_networkx_edge_labels(
        nx_graph, pos, edge_labels=nx.get_edge_attributes(nx_graph, "label"), ax=ax
    )
    ax.set_axis_off()

    if output is not None:
        output = Path(output)
        output.parent.mkdir(parents=True, exist_ok=True)
        ax.figure.savefig(output)
        plt.close(ax.figure)
        logger.info("Saved graph drawing to %s", output)

    return ax
