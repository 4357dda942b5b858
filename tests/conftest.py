"""Shared sample graphs.

Every fixture returns a fresh mapping graph. Diagrams show edge weights in
brackets; arrows give the edge direction.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def detour_graph():
    #            [6]
    #   start ─────────► a ──[1]──► finish
    #     │              ▲            ▲
    #    [2]            [3]           │
    #     └────► b ──────┘            │
    #            └───────[5]──────────┘
    #
    # Shortest: start -> b -> a -> finish (2 + 3 + 1 = 6)
    return {
        "start": {"a": 6, "b": 2},
        "a": {"finish": 1},
        "b": {"a": 3, "finish": 5},
    }


@pytest.fixture
def five_node_graph():
    # Shortest: start -> a -> d -> finish (5 + 2 + 1 = 8)
    return {
        "start": {"a": 5, "c": 2},
        "a": {"b": 4, "d": 2},
        "b": {"d": 6, "finish": 3},
        "c": {"a": 8, "d": 7},
        "d": {"finish": 1},
    }


@pytest.fixture
def chain_graph():
    # Shortest: start -> a -> c -> finish (4 + 1 + 1 = 6)
    return {
        "start": {"a": 4, "b": 2},
        "a": {"c": 1, "finish": 3},
        "b": {"a": 3, "finish": 5},
        "c": {"finish": 1},
    }


@pytest.fixture
def single_node_graph():
    return {"start": {}}


@pytest.fixture
def disconnected_graph():
    # "z" has no edges at all; "y" only points into the connected part.
    return {
        "start": {"a": 1},
        "a": {"finish": 1},
        "y": {"a": 1},
        "z": {},
    }


@pytest.fixture
def cyclic_graph():
    #   start ◄─[1]─► a ◄─[0 / 1]─► b ─[2]─► finish
    #
    # a -> b costs 1 and b -> a costs 0. Also an edge back into start, a
    # zero-weight self loop on a, and finish -> b.
    # Shortest: start -> a -> b -> finish (1 + 1 + 2 = 4)
    return {
        "start": {"a": 1},
        "a": {"start": 1, "b": 1, "a": 0},
        "b": {"a": 0, "finish": 2},
        "finish": {"b": 1},
    }


@pytest.fixture
def tie_graph():
    #        [1]       [1]
    #   start ──► a ──────► finish
    #     │                   ▲
    #    [1]       [1]        │
    #     └────► b ───────────┘
    #
    # Both routes cost 2; the first route found wins.
    return {
        "start": {"a": 1, "b": 1},
        "a": {"finish": 1},
        "b": {"finish": 1},
    }
