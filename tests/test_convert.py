import networkx as nx
import pytest

from routegraph import shortest_path
from routegraph.convert import from_digraph, to_digraph
from routegraph.graph import iter_edges


def test_to_digraph_marks_path_edges(detour_graph):
    path = shortest_path(detour_graph, "start", "finish")
    g = to_digraph(detour_graph, path)

    assert isinstance(g, nx.DiGraph)
    assert set(g.nodes) == {"start", "a", "b", "finish"}
    assert g.number_of_edges() == 5

    on_path = {(u, v) for u, v, flag in g.edges(data="on_path") if flag}
    assert on_path == {("start", "b"), ("b", "a"), ("a", "finish")}
    assert g.edges["start", "b"]["style"] == "bold"
    assert g.edges["start", "a"]["style"] == "dashed"
    assert g.edges["b", "finish"]["label"] == 5
    assert g.edges["b", "finish"]["weight"] == 5


def test_to_digraph_marks_path_nodes(five_node_graph):
    g = to_digraph(five_node_graph, ["start", "a", "d", "finish"])
    assert g.nodes["d"]["on_path"] is True
    assert g.nodes["d"]["style"] == "bold"
    assert g.nodes["c"]["on_path"] is False
    assert "style" not in g.nodes["c"]


def test_to_digraph_without_path(detour_graph):
    g = to_digraph(detour_graph)
    assert all(style == "dashed" for _, _, style in g.edges(data="style"))
    assert not any(flag for _, flag in g.nodes(data="on_path"))


def test_reverse_edge_not_highlighted():
    graph = {"a": {"b": 1}, "b": {"a": 1}}
    g = to_digraph(graph, ["a", "b"])
    assert g.edges["a", "b"]["on_path"] is True
    assert g.edges["b", "a"]["on_path"] is False


def test_to_digraph_edges_follow_graph_edges(five_node_graph):
    g = to_digraph(five_node_graph)
    assert set(g.edges(data="weight")) == set(iter_edges(five_node_graph))
    assert g.number_of_edges() == len(list(iter_edges(five_node_graph)))


def test_from_digraph(detour_graph):
    assert from_digraph(to_digraph(detour_graph)) == {
        "start": {"a": 6, "b": 2},
        "a": {"finish": 1},
        "b": {"a": 3, "finish": 5},
        "finish": {},
    }


def test_from_digraph_default_weight():
    g = nx.DiGraph()
    g.add_edge("x", "y")
    g.add_edge("y", "z", cost=4)
    assert from_digraph(g) == {"x": {"y": 1.0}, "y": {"z": 1.0}, "z": {}}
    assert from_digraph(g, weight="cost", default=0) == {
        "x": {"y": 0},
        "y": {"z": 4},
        "z": {},
    }


def test_from_digraph_rejects_undirected():
    with pytest.raises(TypeError):
        from_digraph(nx.Graph([("a", "b")]))
