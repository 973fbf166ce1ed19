import json
from pathlib import Path

import pytest

from routegraph.io import graph_from_dict, graph_to_dict, load_graph
from routegraph.routing.dijkstra import find_path


def test_graph_from_dict_with_vertices():
    g = graph_from_dict(
        {
            "vertices": ["a", {"id": "b", "x": 1.5}, "c"],
            "edges": [
                {"source": "a", "target": "b", "cost": 1},
                {"id": "bc", "source": "b", "target": "c", "cost": 2.5},
            ],
        }
    )
    assert [v.id for v in g.vertices] == ["a", "b", "c"]
    assert g.find_vertex("b").attrs == {"x": 1.5}
    assert [e.id for e in g.edges] == ["0", "bc"]
    assert find_path(g, "a", "c").total_cost() == 3.5


def test_graph_from_dict_implied_vertices():
    g = graph_from_dict({"edges": [{"source": 1, "target": 2, "cost": "3"}]})
    assert [v.id for v in g.vertices] == ["1", "2"]
    assert g.edges[0].cost == 3.0


def test_graph_from_dict_attribute_named_vertex_id():
    g = graph_from_dict({"vertices": [{"id": "a", "vertex_id": 3}]})
    assert g.find_vertex("a").attrs == {"vertex_id": 3}


def test_graph_from_dict_non_string_attribute_key():
    with pytest.raises(ValueError, match="non-string attribute keys"):
        graph_from_dict({"vertices": [{"id": "a", 1: 2}], "edges": []})


def test_load_graph_non_string_attribute_key(tmp_path: Path):
    f = tmp_path / "g.yaml"
    f.write_text("vertices:\n  - {id: a, 1: 2}\n")
    with pytest.raises(ValueError, match="non-string attribute keys"):
        load_graph(f)


def test_graph_from_empty_dict():
    g = graph_from_dict({})
    assert len(g) == 0
    assert g.edges == []


@pytest.mark.parametrize(
    "data,message",
    [
        ([], "must be a mapping"),
        ({"nodes": []}, "Unrecognized top-level keys: nodes"),
        ({"edges": {}}, "must be lists"),
        ({"vertices": [{"x": 1}]}, "without 'id'"),
        ({"edges": ["a-b"]}, "must be a mapping"),
        ({"edges": [{"source": "a", "target": "b"}]}, "missing: cost"),
        ({"edges": [{"source": "a", "target": "b", "cost": "far"}]}, "non-numeric"),
        ({"edges": [{"source": "a", "target": "b", "cost": -2}]}, "invalid cost"),
        ({"vertices": ["a", "a"]}, "already exists"),
    ],
)
def test_graph_from_dict_errors(data, message):
    with pytest.raises(ValueError, match=message):
        graph_from_dict(data)


def test_graph_to_dict_roundtrip(weighted):
    data = graph_to_dict(weighted)
    assert data["vertices"][0] == "z"
    assert data["edges"][0] == {"id": "sa", "source": "s", "target": "a", "cost": 7.0}

    again = graph_from_dict(data)
    assert graph_to_dict(again) == data


def test_load_graph_yaml(tmp_path: Path):
    f = tmp_path / "g.yaml"
    f.write_text(
        """
vertices: [a, b, c]
edges:
  - {source: a, target: b, cost: 1}
  - {source: b, target: c, cost: 1}
"""
    )
    g = load_graph(f)
    assert find_path(g, "a", "c").size() == 2


def test_load_graph_json(tmp_path: Path, weighted):
    f = tmp_path / "g.json"
    f.write_text(json.dumps(graph_to_dict(weighted)))
    g = load_graph(str(f))
    assert find_path(g, "s", "e").total_cost() == 20


def test_load_graph_empty_file(tmp_path: Path):
    f = tmp_path / "empty.yaml"
    f.write_text("")
    assert len(load_graph(f)) == 0


def test_load_graph_invalid_yaml(tmp_path: Path):
    f = tmp_path / "bad.yaml"
    f.write_text("edges: [unclosed")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_graph(f)


def test_load_graph_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_graph(tmp_path / "missing.yaml")
