import pytest

from mphmap.trigraph import INVALID_EDGE, Edge, TriGraph


def _sample_graph():
    g = TriGraph(4, 2)
    g.add_edge(Edge(0, 1, 2))
    g.add_edge(Edge(1, 3, 2))
    return g


def test_degrees_after_adding():
    g = _sample_graph()
    assert g.vertex_degree == [1, 2, 2, 1]


def test_degrees_after_removing():
    g = _sample_graph()
    g.remove_edge(0)
    assert g.vertex_degree == [0, 1, 1, 1]


def test_extract_edges_and_clear():
    g = _sample_graph()
    g.remove_edge(0)
    edges = g.extract_edges_and_clear()
    assert edges == [Edge(0, 1, 2), Edge(1, 3, 2)]
    assert g.edges == []
    assert g.vertex_degree == []
    assert g.first_edge == []


def test_first_edge_tracking():
    g = _sample_graph()
    assert g.first_edge == [0, 1, 1, 1]
    g.remove_edge(1)
    assert g.first_edge == [0, 0, 0, INVALID_EDGE]
    g.remove_edge(0)
    assert g.first_edge == [INVALID_EDGE] * 4


def test_remove_older_edge_keeps_newer_chain():
    g = _sample_graph()
    g.remove_edge(0)
    assert g.first_edge == [INVALID_EDGE, 1, 1, 1]
    g.remove_edge(1)
    assert g.vertex_degree == [0, 0, 0, 0]


def test_remove_twice_fails():
    g = _sample_graph()
    g.remove_edge(0)
    with pytest.raises(ValueError):
        g.remove_edge(0)


def test_remove_unknown_edge():
    g = _sample_graph()
    with pytest.raises(IndexError):
        g.remove_edge(5)


def test_capacity_enforced():
    g = _sample_graph()
    with pytest.raises(IndexError):
        g.add_edge(Edge(0, 1, 3))


def test_vertex_out_of_range():
    g = TriGraph(3, 1)
    with pytest.raises(IndexError):
        g.add_edge((0, 1, 3))


def test_plain_tuple_becomes_edge():
    g = TriGraph(3, 1)
    g.add_edge((2, 1, 0))
    assert g.edges == [Edge(2, 1, 0)]
    assert g.edges[0].v0 == 2


def test_debug_string():
    g = _sample_graph()
    lines = g.debug_string().splitlines()
    assert lines[0] == f"0  0 1 2 nexts {INVALID_EDGE} {INVALID_EDGE} {INVALID_EDGE}"
    assert lines[1] == f"1  1 3 2 nexts 0 {INVALID_EDGE} 0"
    assert lines[2] == "first for vertice 0 0"
    assert len(lines) == 6