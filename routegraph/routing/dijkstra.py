"""Dijkstra shortest path between two vertices of a `Graph`.

`DijkstraPathFinder` keeps one `PathNode` per vertex and repeatedly finalizes
the cheapest unvisited vertex, relaxing its outgoing edges. Two selection
strategies are available and yield identical costs:

- ``"heap"``: binary heap keyed by tentative cost. Costs only decrease, so
  stale heap entries are skipped lazily when popped. O((V + E) log V).
- ``"linear"``: scan of every vertex per step. O(V^2).

Notes:
    The search stops as soon as the destination is selected as the next vertex
    to visit; its outgoing edges are never relaxed. Selection always returns
    the global minimum, so the destination's cost is final at that point.

    The state mapping can be supplied by the caller and is then reused (cleared
    and refilled) by every computation. Sharing one mapping between concurrent
    computations is not supported; callers must serialize access.
"""

from __future__ import annotations

import logging
from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, MutableMapping, Optional, Tuple

from routegraph.config import PATHFINDER_CONFIG, PathFinderConfig, check_selection
from routegraph.exceptions import PathNotFound
from routegraph.logging import get_logger
from routegraph.model.graph import Cost, Graph, Vertex, VertexRef
from routegraph.model.path import Path
from routegraph.routing.path_node import INF, PathNode

logger = get_logger(__name__)


class DijkstraPathFinder:
    """Least-cost path finder over a static graph with non-negative costs.

    Args:
        graph: Graph to search. Must not change during a computation.
        nodes: Optional mapping used to store per-vertex state. Defaults to a
            new dict owned by this finder.
        selection: Vertex selection strategy, ``"heap"`` or ``"linear"``.
            Defaults to ``config.selection``.
        config: Finder configuration. Defaults to the global
            ``PATHFINDER_CONFIG``.

    Raises:
        ValueError: If the selection strategy is unknown.
    """

    def __init__(
        self,
        graph: Graph,
        nodes: Optional[MutableMapping[Vertex, PathNode]] = None,
        selection: Optional[str] = None,
        config: Optional[PathFinderConfig] = None,
    ) -> None:
        self.graph = graph
        self.config = config if config is not None else PATHFINDER_CONFIG
        self.config.validate()
        if selection is None:
            selection = self.config.selection
        else:
            check_selection(selection)
        self.selection = selection

        self._nodes: MutableMapping[Vertex, PathNode] = nodes if nodes is not None else {}
        self._heap: List[Tuple[Cost, int, Vertex]] = []
        self._seq = count()

    @property
    def nodes(self) -> MutableMapping[Vertex, PathNode]:
        """State mapping of the last computation."""
        return self._nodes

    def get_node(self, vertex: Vertex) -> Optional[PathNode]:
        """Return the state of ``vertex``, or None before any computation."""
        return self._nodes.get(vertex)

    def find_path(self, origin: Vertex, destination: Vertex) -> Path:
        """Compute the least-cost path from ``origin`` to ``destination``.

        Args:
            origin: Start vertex.
            destination: End vertex.

        Returns:
            Path with edges in origin-to-destination order.

        Raises:
            PathNotFound: If ``destination`` is unreachable from ``origin``, or
                if both are the same vertex and ``config.allow_empty_path`` is
                False.
        """
        logger.info(f"find_path({origin.id}, {destination.id})...")
        self.init_state(origin)

        while True:
            current = self.find_next_vertex()
            if current is None:
                break
            if current is destination:
                if self._nodes[destination].reaching_edge is not None:
                    logger.info(f"find_path({origin.id}, {destination.id}): path found")
                    return self.build_path(destination)
                if self.config.allow_empty_path:
                    logger.info(
                        f"find_path({origin.id}, {destination.id}): same vertex, empty path"
                    )
                    return Path()
                break
            self.visit(current)

        logger.info(f"find_path({origin.id}, {destination.id}): path not found")
        raise PathNotFound(origin, destination)

    def compute_costs(
        self, origin: Vertex, max_cost: Cost = INF
    ) -> MutableMapping[Vertex, PathNode]:
        """Run the search from ``origin`` without a destination.

        Vertices are finalized in order of increasing cost until none is left
        or the next one would cost more than ``max_cost``.

        Returns:
            The state mapping; visited vertices hold their final cost.
        """
        logger.debug(f"compute_costs({origin.id}, max_cost={max_cost})")
        self.init_state(origin)
        while True:
            current = self.find_next_vertex()
            if current is None or self._nodes[current].cost > max_cost:
                break
            self.visit(current)
        return self._nodes

    def reachable(self, origin: Vertex, max_cost: Cost = INF) -> List[Vertex]:
        """Return vertices reachable from ``origin`` within ``max_cost``.

        Vertices are ordered by increasing cost, ties in graph order. The origin
        is included whenever ``max_cost`` is non-negative; a negative budget
        yields an empty list.
        """
        nodes = self.compute_costs(origin, max_cost)
        within = [v for v in self.graph.vertices if nodes[v].visited]
        return sorted(within, key=lambda v: nodes[v].cost)

    def init_state(self, origin: Vertex) -> None:
        """Reset per-vertex state: cost 0 at ``origin``, ``inf`` elsewhere."""
        logger.debug(f"init_state({origin.id})")
        self._nodes.clear()
        for vertex in self.graph.vertices:
            self._nodes[vertex] = PathNode(0.0 if vertex is origin else INF)

        self._heap = []
        self._seq = count()
        if self.selection == "heap":
            heappush(self._heap, (0.0, next(self._seq), origin))

    def find_next_vertex(self) -> Optional[Vertex]:
        """Return the unvisited, reached vertex with the lowest cost, or None.

        Among vertices of equal cost any one may be returned.
        """
        if self.selection == "heap":
            return self._pop_next_vertex()
        return self._scan_next_vertex()

    def _scan_next_vertex(self) -> Optional[Vertex]:
        min_cost = INF
        result = None
        for vertex in self.graph.vertices:
            node = self._nodes[vertex]
            if node.visited:
                continue
            if node.cost < min_cost:
                min_cost = node.cost
                result = vertex
        return result

    def _pop_next_vertex(self) -> Optional[Vertex]:
        while self._heap:
            cost, _, vertex = heappop(self._heap)
            node = self._nodes[vertex]
            # Stale entry: vertex finalized or reached more cheaply since the push
            if node.visited or cost > node.cost:
                continue
            return vertex
        return None

    def visit(self, vertex: Vertex) -> None:
        """Relax the outgoing edges of ``vertex`` and mark it visited."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"visit({vertex.id})")
        node = self._nodes[vertex]
        for edge in self.graph.out_edges(vertex):
            reached = self._nodes[edge.target]
            new_cost = node.cost + edge.cost
            if new_cost < reached.cost:
                reached.cost = new_cost
                reached.reaching_edge = edge
                if self.selection == "heap":
                    heappush(self._heap, (new_cost, next(self._seq), edge.target))
        node.visited = True

    def build_path(self, destination: Vertex) -> Path:
        """Follow reaching edges back from ``destination`` to the origin."""
        result = []
        current = self._nodes[destination].reaching_edge
        while current is not None:
            result.append(current)
            current = self._nodes[current.source].reaching_edge
        result.reverse()
        return Path(result)


def find_path(
    graph: Graph,
    origin: VertexRef,
    destination: VertexRef,
    selection: Optional[str] = None,
    config: Optional[PathFinderConfig] = None,
) -> Path:
    """Convenience wrapper: resolve endpoints by id and run `DijkstraPathFinder`.

    Args:
        graph: Graph to search.
        origin: Start vertex or its id.
        destination: End vertex or its id.
        selection: Optional selection strategy override.
        config: Optional finder configuration.

    Returns:
        The least-cost path.

    Raises:
        VertexNotFound: If an endpoint id is unknown.
        PathNotFound: If no route exists.
    """
    finder = DijkstraPathFinder(graph, selection=selection, config=config)
    return finder.find_path(graph.resolve(origin), graph.resolve(destination))


def shortest_costs(graph: Graph, origin: VertexRef) -> Dict[Vertex, Cost]:
    """Return the final cost of every vertex reachable from ``origin``."""
    finder = DijkstraPathFinder(graph)
    nodes = finder.compute_costs(graph.resolve(origin))
    return {v: n.cost for v, n in nodes.items() if n.visited}
