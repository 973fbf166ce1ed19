"""Error types raised by routegraph."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from routegraph.model.graph import Vertex


class NotFoundError(LookupError):
    """Base class for lookups that found nothing."""


class VertexNotFound(NotFoundError, KeyError):
    """Raised when a vertex id is not part of a graph."""

    def __init__(self, vertex_id: str) -> None:
        super().__init__(f"Vertex '{vertex_id}' not found")
        self.vertex_id = vertex_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class PathNotFound(NotFoundError):
    """Raised when no route exists between two vertices.

    Attributes:
        origin: Vertex the search started from.
        destination: Vertex that could not be reached.
    """

    def __init__(self, origin: Vertex, destination: Vertex) -> None:
        super().__init__(
            f"Path not found from '{origin.id}' to '{destination.id}'"
        )
        self.origin = origin
        self.destination = destination
