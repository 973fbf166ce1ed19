import math

import pytest

from routegraph.exceptions import VertexNotFound
from routegraph.model.graph import Graph, Vertex


def build_sample_graph() -> Graph:
    g = Graph()
    g.create_vertex("A")
    g.create_vertex("B", {"x": 1.0, "y": 2.0})
    g.create_edge("A", "B", 1)
    g.create_edge("A", "B", 3)
    return g


def test_vertices_and_edges_in_insertion_order():
    g = build_sample_graph()
    assert [v.id for v in g.vertices] == ["A", "B"]
    assert [e.id for e in g.edges] == ["0", "1"]
    assert len(g) == 2
    assert [v.id for v in g] == ["A", "B"]


def test_vertex_attributes():
    g = build_sample_graph()
    assert g.find_vertex("B").attrs == {"x": 1.0, "y": 2.0}
    assert g.find_vertex("A").attrs == {}


def test_vertex_identity_is_referential():
    g = Graph()
    a = g.create_vertex("a")
    twin = Vertex("a")
    assert a != twin
    assert a in g
    assert twin not in g
    assert "a" in g


def test_vertex_attributes_are_copied():
    attrs = {"label": "x"}
    g = Graph()
    v = g.create_vertex("v", attrs)
    attrs["label"] = "y"
    assert v.attrs == {"label": "x"}


def test_non_string_attribute_key_rejected():
    g = Graph()
    with pytest.raises(ValueError, match="non-string attribute keys"):
        g.create_vertex("v", {1: 2})
    assert "v" not in g


def test_duplicate_vertex_rejected():
    g = build_sample_graph()
    with pytest.raises(ValueError, match="already exists"):
        g.create_vertex("A")


def test_find_vertex_missing():
    g = build_sample_graph()
    with pytest.raises(VertexNotFound) as exc_info:
        g.find_vertex("Z")
    assert exc_info.value.vertex_id == "Z"
    assert str(exc_info.value) == "Vertex 'Z' not found"
    # Also usable as a KeyError
    with pytest.raises(KeyError):
        g.find_vertex("Z")


def test_edge_endpoints_must_exist():
    g = build_sample_graph()
    with pytest.raises(ValueError, match="does not exist"):
        g.create_edge("A", "Z", 1)
    with pytest.raises(ValueError, match="does not belong"):
        g.create_edge(Vertex("A"), "B", 1)


@pytest.mark.parametrize("cost", [-1, math.nan])
def test_invalid_edge_cost_rejected(cost):
    g = build_sample_graph()
    with pytest.raises(ValueError, match="invalid cost"):
        g.create_edge("A", "B", cost)


def test_edge_ids_unique_and_auto_assigned():
    g = Graph()
    g.create_vertex("a")
    g.create_vertex("b")
    g.create_edge("a", "b", 1, edge_id="0")
    e = g.create_edge("a", "b", 1)
    assert e.id == "1"
    with pytest.raises(ValueError, match="already exists"):
        g.create_edge("a", "b", 1, edge_id="0")


def test_out_and_in_edges():
    g = build_sample_graph()
    a, b = g.find_vertex("A"), g.find_vertex("B")
    assert [e.id for e in g.out_edges(a)] == ["0", "1"]
    assert g.out_edges(b) == []
    assert [e.id for e in g.in_edges(b)] == ["0", "1"]
    assert g.in_edges(a) == []


def test_out_edges_returns_copy():
    g = build_sample_graph()
    a = g.find_vertex("A")
    g.out_edges(a).clear()
    assert len(g.out_edges(a)) == 2


def test_edge_is_read_only():
    g = build_sample_graph()
    edge = g.find_edge("0")
    assert edge.source is g.find_vertex("A")
    assert edge.target is g.find_vertex("B")
    assert edge.cost == 1.0
    with pytest.raises(AttributeError):
        edge.cost = 5


def test_find_edge_missing():
    g = build_sample_graph()
    with pytest.raises(KeyError):
        g.find_edge("missing")
