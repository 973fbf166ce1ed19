"""Shared graph fixtures."""

from __future__ import annotations

import pytest

from routegraph.model.graph import Graph


def build_graph(edges, vertices=()):
    """Return a Graph from ``(source, target, cost)`` triples.

    Edge ids are ``"<source><target>"``; vertices are created on first use,
    after any listed in ``vertices``.
    """
    g = Graph()
    for vertex_id in vertices:
        g.create_vertex(vertex_id)
    for src, dst, cost in edges:
        for vertex_id in (src, dst):
            if vertex_id not in g:
                g.create_vertex(vertex_id)
        g.create_edge(src, dst, cost, edge_id=f"{src}{dst}")
    return g


@pytest.fixture
def chain3():
    #     [1]     [1]
    #  a ─────► b ─────► c
    return build_graph([("a", "b", 1), ("b", "c", 1)])


@pytest.fixture
def diamond():
    # Two equal-cost routes from a to d:
    #       [1]       [1]
    #   ┌──────► b ──────┐
    #   a                ▼
    #   └──────► c ────► d
    #       [1]       [1]
    return build_graph(
        [("a", "b", 1), ("b", "d", 1), ("a", "c", 1), ("c", "d", 1)]
    )


@pytest.fixture
def detour():
    # The direct edge is reached first but the detour is cheaper:
    #         [10]
    #   a ───────────► d
    #   │              ▲
    #   └───► b ───────┘
    #    [1]      [1]
    return build_graph([("a", "d", 10), ("a", "b", 1), ("b", "d", 1)])


@pytest.fixture
def weighted():
    # Classic 6-vertex example with a cycle and an isolated vertex "z".
    return build_graph(
        [
            ("s", "a", 7),
            ("s", "b", 9),
            ("s", "f", 14),
            ("a", "b", 10),
            ("a", "c", 15),
            ("b", "c", 11),
            ("b", "f", 2),
            ("c", "e", 6),
            ("e", "f", 9),
            ("f", "e", 9),
            ("e", "s", 1),
        ],
        vertices=("z",),
    )


@pytest.fixture(params=["heap", "linear"])
def selection(request):
    return request.param
