"""Configuration classes for routegraph components."""

from dataclasses import dataclass

SELECTION_STRATEGIES = ("heap", "linear")


def check_selection(selection: str) -> None:
    """Raise ValueError if ``selection`` is not a known strategy."""
    if selection not in SELECTION_STRATEGIES:
        raise ValueError(
            f"Unknown selection strategy '{selection}'; "
            f"expected one of {', '.join(SELECTION_STRATEGIES)}"
        )


@dataclass
class PathFinderConfig:
    """Configuration for `DijkstraPathFinder`."""

    # Vertex selection: "heap" (binary heap, lazy deletion) or "linear" (O(V) scan)
    selection: str = "heap"

    # When True, find_path(v, v) returns an empty Path of cost 0 instead of
    # raising PathNotFound
    allow_empty_path: bool = False

    def validate(self) -> None:
        """Check field values.

        Raises:
            ValueError: If ``selection`` is not a known strategy.
        """
        check_selection(self.selection)


# Global configuration instance
PATHFINDER_CONFIG = PathFinderConfig()
