"""Graph conversion utilities between `Graph` and NetworkX graphs.

Example:
    >>> import networkx as nx
    >>> from routegraph.model.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=10)
    >>> G.add_edge("B", "C", cost=5)
    >>> graph = from_networkx(G)
    >>> nx_out = to_networkx(graph)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

import networkx as nx

from routegraph.model.graph import Cost, Graph

if TYPE_CHECKING:
    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def from_networkx(
    G: NxGraph,
    *,
    cost_attr: str = "cost",
    default_cost: Cost = 1,
) -> Graph:
    """Convert a NetworkX graph to a `Graph`.

    Node names become vertex ids (converted with ``str``) and node attributes
    are copied to ``Vertex.attrs``. Undirected graphs produce one edge per
    direction. For multigraphs the NetworkX edge key is kept in the edge id
    as ``"<u>-<v>-<key>"``; for simple graphs the id is ``"<u>-<v>"``.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        cost_attr: Edge attribute holding the cost (default: "cost").
        default_cost: Cost used when the attribute is missing (default: 1).

    Returns:
        A new Graph.

    Raises:
        ValueError: If two node names collide after ``str`` conversion, or an
            edge cost is negative.
    """
    graph = Graph()
    for node, data in G.nodes(data=True):
        graph.create_vertex(str(node), data)

    if G.is_multigraph():
        edge_iter = (
            (u, v, f"{u}-{v}-{key}", data)
            for u, v, key, data in G.edges(keys=True, data=True)
        )
    else:
        edge_iter = ((u, v, f"{u}-{v}", data) for u, v, data in G.edges(data=True))

    for u, v, edge_id, data in edge_iter:
        cost = data.get(cost_attr, default_cost)
        graph.create_edge(str(u), str(v), cost, edge_id=edge_id)
        if not G.is_directed() and u != v:
            graph.create_edge(str(v), str(u), cost, edge_id=f"{edge_id}-r")
    return graph


def to_networkx(graph: Graph, *, cost_attr: str = "cost") -> nx.MultiDiGraph:
    """Convert a `Graph` to a NetworkX MultiDiGraph.

    Vertex ids become node names and edge ids become edge keys, so parallel
    edges survive the conversion.

    Args:
        graph: Graph to convert.
        cost_attr: Edge attribute name for the cost (default: "cost").

    Returns:
        A NetworkX MultiDiGraph.
    """
    G = nx.MultiDiGraph()
    for vertex in graph.vertices:
        G.add_node(vertex.id, **vertex.attrs)
    for edge in graph.edges:
        G.add_edge(edge.source.id, edge.target.id, key=edge.id, **{cost_attr: edge.cost})
    return G
