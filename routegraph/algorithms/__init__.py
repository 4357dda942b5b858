"""Shortest-path algorithms: route solving and path reconstruction."""

from routegraph.algorithms.paths import reconstruct
from routegraph.algorithms.spf import Route, RouteTable, solve

__all__ = ["Route", "RouteTable", "reconstruct", "solve"]
