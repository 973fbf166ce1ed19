"""Shortest-path routing over `routegraph.model.Graph`."""

from routegraph.routing.dijkstra import DijkstraPathFinder, find_path, shortest_costs
from routegraph.routing.path_node import INF, PathNode

__all__ = ["DijkstraPathFinder", "INF", "PathNode", "find_path", "shortest_costs"]
