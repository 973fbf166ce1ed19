"""Directed weighted graph consumed by the routing algorithms.

`Graph` owns `Vertex` and `Edge` objects and keeps an adjacency index so that
outgoing and incoming edges of a vertex can be listed without scanning the
edge list. Vertices and edges compare by identity: two handles denote the same
node only if they are the same object.

Construction is strict in the same way as a strict multigraph: endpoints are
never created implicitly, ids must be unique, and edge costs must be
non-negative numbers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from routegraph.exceptions import VertexNotFound

Cost = float


@dataclass(eq=False)
class Vertex:
    """A graph node.

    Attributes:
        id: External identifier, unique within its graph.
        attrs: Free-form attributes (coordinates, labels, ...).
    """

    id: str
    attrs: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"Vertex({self.id!r})"


@dataclass(frozen=True, eq=False)
class Edge:
    """A directed arc between two vertices.

    Attributes:
        id: Edge identifier, unique within its graph.
        source: Tail vertex.
        target: Head vertex.
        cost: Non-negative traversal cost.
    """

    id: str
    source: Vertex
    target: Vertex
    cost: Cost

    def __repr__(self) -> str:
        return f"Edge({self.id!r}, {self.source.id!r}->{self.target.id!r}, cost={self.cost})"


VertexRef = Union[Vertex, str]


class Graph:
    """Directed multigraph of `Vertex` objects joined by weighted `Edge` objects.

    Parallel edges and self-loops are allowed.
    """

    def __init__(self) -> None:
        self._vertices: Dict[str, Vertex] = {}
        self._edges: Dict[str, Edge] = {}
        self._out: Dict[Vertex, List[Edge]] = {}
        self._in: Dict[Vertex, List[Edge]] = {}
        # Auto-assigned edge ids only advance; removed ids are never reused.
        self._next_edge_id: int = 0

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Vertex):
            return self._vertices.get(item.id) is item
        return item in self._vertices

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices.values())

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"

    @property
    def vertices(self) -> List[Vertex]:
        """All vertices in insertion order."""
        return list(self._vertices.values())

    @property
    def edges(self) -> List[Edge]:
        """All edges in insertion order."""
        return list(self._edges.values())

    #
    # Vertex management
    #
    def create_vertex(
        self, vertex_id: str, attrs: Optional[Mapping[str, Any]] = None
    ) -> Vertex:
        """Add a vertex with the given id.

        Args:
            vertex_id: Unique vertex identifier.
            attrs: Attributes stored (copied) on the vertex. Keys must be strings.

        Returns:
            The new vertex.

        Raises:
            ValueError: If a vertex with this id already exists, or an attribute
                key is not a string.
        """
        if vertex_id in self._vertices:
            raise ValueError(f"Vertex '{vertex_id}' already exists in this graph.")
        attrs = dict(attrs or {})
        bad_keys = [key for key in attrs if not isinstance(key, str)]
        if bad_keys:
            raise ValueError(
                f"Vertex '{vertex_id}' has non-string attribute keys: {bad_keys!r}"
            )
        vertex = Vertex(vertex_id, attrs)
        self._vertices[vertex_id] = vertex
        self._out[vertex] = []
        self._in[vertex] = []
        return vertex

    def find_vertex(self, vertex_id: str) -> Vertex:
        """Return the vertex with the given id.

        Raises:
            VertexNotFound: If no vertex has this id.
        """
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise VertexNotFound(vertex_id) from None

    def resolve(self, ref: VertexRef) -> Vertex:
        """Return ``ref`` itself if it is one of our vertices, else look it up by id.

        Raises:
            ValueError: If ``ref`` is a Vertex that belongs to another graph.
            VertexNotFound: If ``ref`` is an unknown id.
        """
        if isinstance(ref, Vertex):
            if ref not in self:
                raise ValueError(f"{ref!r} does not belong to this graph.")
            return ref
        return self.find_vertex(ref)

    #
    # Edge management
    #
    def create_edge(
        self,
        source: VertexRef,
        target: VertexRef,
        cost: Cost,
        edge_id: Optional[str] = None,
    ) -> Edge:
        """Add a directed edge from ``source`` to ``target``.

        Endpoints are not created automatically. If ``edge_id`` is omitted a
        new id is generated from an internal counter.

        Args:
            source: Tail vertex or its id. Must exist in the graph.
            target: Head vertex or its id. Must exist in the graph.
            cost: Non-negative edge cost.
            edge_id: Unique edge id (optional).

        Returns:
            The new edge.

        Raises:
            ValueError: If an endpoint is missing, the id is taken, or the cost
                is negative or NaN.
        """
        try:
            src = self.resolve(source)
            dst = self.resolve(target)
        except VertexNotFound as exc:
            raise ValueError(f"Edge endpoint '{exc.vertex_id}' does not exist.") from None

        cost = float(cost)
        if math.isnan(cost) or cost < 0:
            raise ValueError(
                f"Edge {src.id}->{dst.id} has invalid cost {cost}; costs must be non-negative."
            )

        if edge_id is None:
            edge_id = self._new_edge_id()
        elif edge_id in self._edges:
            raise ValueError(f"Edge with id '{edge_id}' already exists.")

        edge = Edge(edge_id, src, dst, cost)
        self._edges[edge_id] = edge
        self._out[src].append(edge)
        self._in[dst].append(edge)
        return edge

    def _new_edge_id(self) -> str:
        while str(self._next_edge_id) in self._edges:
            self._next_edge_id += 1
        edge_id = str(self._next_edge_id)
        self._next_edge_id += 1
        return edge_id

    def find_edge(self, edge_id: str) -> Edge:
        """Return the edge with the given id.

        Raises:
            KeyError: If no edge has this id.
        """
        try:
            return self._edges[edge_id]
        except KeyError:
            raise KeyError(f"Edge '{edge_id}' not found") from None

    def out_edges(self, vertex: Vertex) -> List[Edge]:
        """Edges leaving ``vertex`` (may be empty)."""
        return list(self._out[vertex])

    def in_edges(self, vertex: Vertex) -> List[Edge]:
        """Edges arriving at ``vertex`` (may be empty)."""
        return list(self._in[vertex])
