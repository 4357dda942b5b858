"""Path reconstruction from a solved route table."""

from __future__ import annotations

from typing import List

from routegraph.algorithms.spf import RouteTable
from routegraph.errors import UnreachableNode
from routegraph.graph import NodeID


def reconstruct(routes: RouteTable, start: NodeID, finish: NodeID) -> List[NodeID]:
    """Walk parent links from ``finish`` back to ``start``.

    Args:
        routes: Route table produced by :func:`routegraph.algorithms.spf.solve`
            for ``start``.
        start: Node the table was solved from.
        finish: Destination node.

    Returns:
        Nodes from ``start`` to ``finish`` inclusive. ``[start]`` when both
        are the same node.

    Raises:
        UnreachableNode: If ``finish`` has no route, or its parent chain does
            not lead back to ``start``.
    """
    if finish == start:
        return [start]
    if finish not in routes:
        raise UnreachableNode(start, finish)

    path: List[NodeID] = []
    node = finish
    while node != start:
        route = routes.get(node)
        if route is None or route.parent is None:
            raise UnreachableNode(
                start, finish, f"route chain stops at {node!r}"
            )
        # A well-formed chain visits each table entry at most once
        if len(path) > len(routes):
            raise UnreachableNode(start, finish, "route chain contains a cycle")
        path.append(node)
        node = route.parent

    path.append(start)
    path.reverse()
    return path
