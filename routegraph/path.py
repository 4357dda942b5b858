"""Result container for a single shortest path.

``ShortestPath`` stores the ordered node sequence and the total cost. Cached
properties expose the derived views a renderer needs: the ordered segments and
the set of edges that belong to the path.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, FrozenSet, Iterator, List, Tuple

from routegraph.graph import NodeID, Segment, path_segments


@dataclass(frozen=True)
class ShortestPath:
    """A shortest path and its cost.

    Attributes:
        nodes: Nodes from start to finish inclusive.
        cost: Sum of the edge weights along the path.
    """

    nodes: Tuple[NodeID, ...]
    cost: float

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, idx: int) -> NodeID:
        return self.nodes[idx]

    @property
    def start(self) -> NodeID:
        return self.nodes[0]

    @property
    def finish(self) -> NodeID:
        return self.nodes[-1]

    @cached_property
    def segments(self) -> List[Segment]:
        """Consecutive ``(u, v)`` node pairs in path order."""
        return path_segments(self.nodes)

    @cached_property
    def edge_set(self) -> FrozenSet[Segment]:
        """Unordered view of :attr:`segments` for membership tests."""
        return frozenset(self.segments)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "path": list(self.nodes),
            "cost": self.cost,
            "segments": [list(segment) for segment in self.segments],
        }
