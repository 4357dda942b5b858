"""Load graphs from YAML documents.

The document is a mapping of node -> {neighbor: weight}, optionally nested
under a single top-level ``graph`` key::

    graph:
      start: {a: 6, b: 2}
      a: {finish: 1}
      b: {a: 3, finish: 5}
      finish:

A node with an empty value has no outbound edges. Node names are always
returned as strings; two keys that read the same as strings (``1`` and
``'1'``) are rejected.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from routegraph.errors import InvalidGraph
from routegraph.graph import validate_graph
from routegraph.logging import get_logger
from routegraph.utils.yaml_utils import normalize_yaml_dict_keys

logger = get_logger(__name__)

WRAPPER_KEY = "graph"


def _string_keys(data: Dict[Any, Any], where: str) -> Dict[str, Any]:
    normalized = normalize_yaml_dict_keys(data)
    if len(normalized) == len(data):
        return normalized

    seen = set()
    for key in data:
        name = str(key)
        if name in seen:
            raise InvalidGraph(
                f"Duplicate key '{name}' {where} after converting keys to strings"
            )
        seen.add(name)
    return normalized


def load_graph_yaml(yaml_str: str) -> Dict[str, Dict[str, float]]:
    """Parse and validate a graph from a YAML string.

    Args:
        yaml_str: YAML document.

    Returns:
        Mapping of node -> {neighbor: weight} with string node names.

    Raises:
        InvalidGraph: If the YAML cannot be parsed, is not shaped like a graph,
            has node names that collide once converted to strings, or contains
            an invalid weight.
    """
    try:
        data: Any = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise InvalidGraph(f"Invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidGraph("The provided YAML must map to a dictionary at top-level.")

    wrapped = list(data) == [WRAPPER_KEY]
    if wrapped:
        data = data[WRAPPER_KEY] or {}
        if not isinstance(data, dict):
            raise InvalidGraph("'graph' must be a mapping of node -> edges")

    graph: Dict[str, Dict[str, float]] = {}
    for node, edges in _string_keys(data, "among nodes").items():
        if edges is None:
            edges = {}
        if not isinstance(edges, dict):
            hint = ""
            if wrapped:
                hint = (
                    "; a lone top-level 'graph' key is read as a wrapper around"
                    " the graph, not as a node"
                )
            raise InvalidGraph(
                f"Edges of node '{node}' must be a mapping of neighbor -> weight{hint}"
            )
        graph[node] = _string_keys(edges, f"in the edges of node '{node}'")

    validate_graph(graph)
    logger.debug("Loaded graph with %d node(s) with outbound edges", len(graph))
    return graph


def load_graph(path: Union[str, Path]) -> Dict[str, Dict[str, float]]:
    """Read a YAML graph file. See :func:`load_graph_yaml`."""
    return load_graph_yaml(Path(path).read_text(encoding="utf-8"))
