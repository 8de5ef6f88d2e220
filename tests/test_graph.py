import pytest

from algorithms.graphs import bfs
from algorithms.step import StepStream
from structures import Graph, InvalidContainerError
from structures.datagen import random_graph


def square(directed=False):
    g = Graph(directed=directed)
    for nid in "0123":
        g.add_node(nid)
    for a, b in [("0", "1"), ("0", "2"), ("1", "3"), ("2", "3")]:
        g.add_edge(a, b)
    return g


def test_undirected_edges_are_reciprocal():
    g = square()
    assert g.has_edge("1", "0")
    assert g.edge_count() == 4
    assert g.degree("0") == 2


def test_directed_edges_are_one_way():
    g = square(directed=True)
    assert g.has_edge("0", "1")
    assert not g.has_edge("1", "0")


def test_self_loops_duplicates_and_unknown_nodes_are_ignored():
    g = square()
    assert g.add_edge("0", "0") is False
    assert g.add_edge("0", "1") is False
    assert g.add_edge("1", "0") is False
    assert g.add_edge("0", "9") is False
    assert g.edge_count() == 4


def test_weighted_edge_defaults_to_one():
    g = Graph(weighted=True)
    g.add_node("a")
    g.add_node("b")
    g.add_edge("a", "b")
    assert g.get_edge("a", "b").weight == 1


def test_remove_node_drops_incident_edges():
    g = square()
    g.remove_node("3")
    assert g.node_count() == 3
    assert "3" not in g.neighbors("1")
    assert g.edge_count() == 2


def test_remove_edge():
    g = square()
    g.remove_edge("0", "1")
    assert not g.has_edge("0", "1")
    assert not g.has_edge("1", "0")


def test_neighbors_keep_insertion_order():
    g = Graph()
    for nid in "abc":
        g.add_node(nid)
    g.add_edge("a", "c")
    g.add_edge("a", "b")
    assert g.neighbors("a") == ["c", "b"]


def test_dict_round_trip():
    g = square()
    copy = Graph.from_dict(g.to_dict())
    assert copy.node_ids() == g.node_ids()
    assert copy.edge_count() == g.edge_count()
    assert copy.to_dict() == g.to_dict()


def test_from_dict_rejects_malformed_edges():
    with pytest.raises(InvalidContainerError):
        Graph.from_dict({"nodes": [{"id": "a"}], "edges": [{"source": "a"}]})


def test_from_adjacency_list():
    text = """
    # weighted adjacency
    A: B(3) C(7)
    B -> C(1)
    """
    g = Graph.from_adjacency_list(text, directed=True, weighted=True)
    assert g.node_ids() == ["A", "B", "C"]
    assert g.get_edge("A", "C").weight == 7
    assert g.get_edge("B", "C").weight == 1
    assert not g.has_edge("C", "B")


def test_from_adjacency_list_bad_weight():
    with pytest.raises(InvalidContainerError):
        Graph.from_adjacency_list("A: B(x)", weighted=True)


def test_clear():
    g = square()
    g.clear()
    assert g.node_count() == 0 and g.edge_count() == 0


def test_random_graph_is_seeded_and_connected():
    a = random_graph(num_nodes=10, edge_probability=0.1, seed=3)
    b = random_graph(num_nodes=10, edge_probability=0.1, seed=3)
    assert a.to_dict() == b.to_dict()

    stream = StepStream(bfs(a, "0"))
    stream.drain()
    assert sorted(stream.result) == sorted(a.node_ids())
