"""Graph model: vertices, edges, graphs and paths.

This package provides the `Graph` container consumed by the routing
algorithms, the immutable `Path` they produce, and NetworkX conversion
helpers (`convert`).
"""

from routegraph.model.graph import Cost, Edge, Graph, Vertex
from routegraph.model.path import Path

__all__ = ["Cost", "Edge", "Graph", "Path", "Vertex"]
