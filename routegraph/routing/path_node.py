"""Per-vertex state of a shortest-path computation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from routegraph.model.graph import Cost, Edge

INF: Cost = float("inf")


@dataclass
class PathNode:
    """Tentative cost, reaching edge and visited flag of one vertex.

    Once ``visited`` is True, ``cost`` is the shortest distance from the
    origin and no longer changes.

    Attributes:
        cost: Best known cost from the origin; ``inf`` until reached.
        reaching_edge: Edge whose relaxation last lowered ``cost``; None for the
            origin and for unreached vertices.
        visited: Whether the vertex has been finalized.
    """

    cost: Cost = INF
    reaching_edge: Optional[Edge] = None
    visited: bool = False

    @property
    def reached(self) -> bool:
        """True once the vertex has a finite cost."""
        return self.cost < INF
