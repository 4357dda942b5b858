"""Exceptions raised by routegraph."""

from __future__ import annotations

from typing import Hashable


class RouteGraphError(Exception):
    """Base class for all routegraph errors."""


class InvalidGraph(RouteGraphError, ValueError):
    """The graph is malformed or carries a weight Dijkstra cannot handle."""


class UnreachableNode(RouteGraphError, LookupError):
    """No route leads from ``start`` to ``finish``.

    Attributes:
        start: Node the search started from.
        finish: Node that could not be reached.
    """

    def __init__(self, start: Hashable, finish: Hashable, reason: str = "") -> None:
        self.start = start
        self.finish = finish
        message = f"Node {finish!r} is not reachable from {start!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
