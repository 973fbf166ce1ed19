"""routegraph: least-cost routing in directed weighted graphs.

Primary API:
    Graph, Vertex, Edge - graph model
    DijkstraPathFinder - shortest path between two vertices
    find_path() - one-off search by vertex id
    Path - immutable result route
    PathNotFound - raised when no route exists

Example:
    from routegraph import Graph, find_path

    graph = Graph()
    for name in "abc":
        graph.create_vertex(name)
    graph.create_edge("a", "b", 1)
    graph.create_edge("b", "c", 1)

    path = find_path(graph, "a", "c")
    assert path.total_cost() == 2
"""

from __future__ import annotations

from routegraph import cli, logging
from routegraph.config import PATHFINDER_CONFIG, PathFinderConfig
from routegraph.exceptions import NotFoundError, PathNotFound, VertexNotFound
from routegraph.io import graph_from_dict, graph_to_dict, load_graph
from routegraph.model import Edge, Graph, Path, Vertex
from routegraph.model.convert import from_networkx, to_networkx
from routegraph.routing import DijkstraPathFinder, PathNode, find_path, shortest_costs

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "Graph",
    "Vertex",
    "Edge",
    "Path",
    # Routing
    "DijkstraPathFinder",
    "PathNode",
    "find_path",
    "shortest_costs",
    # Errors
    "NotFoundError",
    "PathNotFound",
    "VertexNotFound",
    # Configuration
    "PathFinderConfig",
    "PATHFINDER_CONFIG",
    # I/O and NetworkX integration
    "graph_from_dict",
    "graph_to_dict",
    "load_graph",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
