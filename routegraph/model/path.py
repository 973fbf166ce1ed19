"""Immutable representation of a single route.

A `Path` stores its edges in origin-to-destination order. The total cost is
derived from the edges; cached properties expose the traversed vertices and
the endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from routegraph.model.graph import Cost, Edge, Vertex


@dataclass(frozen=True)
class Path:
    """An ordered, immutable sequence of edges.

    Attributes:
        edges: Edges in origin-to-destination order.
    """

    edges: Tuple[Edge, ...] = ()

    def __init__(self, edges: Iterable[Edge] = ()) -> None:
        object.__setattr__(self, "edges", tuple(edges))

    def __getitem__(self, idx: int) -> Edge:
        return self.edges[idx]

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        route = "->".join(v.id for v in self.vertices)
        return f"Path({route or '<empty>'}, cost={self.length})"

    def edge_at(self, index: int) -> Edge:
        """Return the edge at ``index`` (negative indexes count from the end).

        Raises:
            IndexError: If ``index`` is out of range.
        """
        return self.edges[index]

    def size(self) -> int:
        """Return the number of edges."""
        return len(self.edges)

    def total_cost(self) -> Cost:
        """Return the sum of edge costs (0 for the empty path)."""
        return self.length

    @cached_property
    def length(self) -> Cost:
        """Sum of edge costs."""
        return sum((edge.cost for edge in self.edges), 0.0)

    @cached_property
    def vertices(self) -> Tuple[Vertex, ...]:
        """Vertices along the path, origin first; empty for the empty path."""
        if not self.edges:
            return ()
        return (self.edges[0].source,) + tuple(edge.target for edge in self.edges)

    @property
    def origin(self) -> Optional[Vertex]:
        """First vertex, or None for the empty path."""
        return self.edges[0].source if self.edges else None

    @property
    def destination(self) -> Optional[Vertex]:
        """Last vertex, or None for the empty path."""
        return self.edges[-1].target if self.edges else None

    def is_contiguous(self) -> bool:
        """Return True if each edge starts where the previous one ends."""
        return all(
            prev.target is nxt.source for prev, nxt in zip(self.edges, self.edges[1:])
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable summary of the path."""
        return {
            "vertices": [v.id for v in self.vertices],
            "edges": [
                {
                    "id": edge.id,
                    "source": edge.source.id,
                    "target": edge.target.id,
                    "cost": edge.cost,
                }
                for edge in self.edges
            ],
            "cost": self.length,
        }
