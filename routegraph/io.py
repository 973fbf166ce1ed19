"""Load and dump graphs as plain dictionaries or YAML files.

Document layout::

    vertices:            # optional; implied by edge endpoints
      - a
      - {id: b, x: 1.0, y: 2.0}
    edges:
      - {source: a, target: b, cost: 1}
      - {id: bc, source: b, target: c, cost: 2.5}

JSON documents with the same structure load as well, JSON being a subset of
YAML.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import yaml

from routegraph.logging import get_logger
from routegraph.model.graph import Graph

logger = get_logger(__name__)


def graph_from_dict(data: Mapping[str, Any]) -> Graph:
    """Build a `Graph` from a dictionary.

    Args:
        data: Mapping with an ``edges`` list and an optional ``vertices`` list.

    Returns:
        The new graph.

    Raises:
        ValueError: If the document is malformed (missing keys, wrong types,
            duplicate ids, negative costs).
    """
    if not isinstance(data, Mapping):
        raise ValueError("Graph document must be a mapping")

    unknown = set(data) - {"vertices", "edges"}
    if unknown:
        raise ValueError(f"Unrecognized top-level keys: {', '.join(sorted(unknown))}")

    vertices = data.get("vertices")
    edges = data.get("edges")
    if vertices is None:
        vertices = []
    if edges is None:
        edges = []
    if not isinstance(vertices, list) or not isinstance(edges, list):
        raise ValueError("'vertices' and 'edges' must be lists")

    graph = Graph()
    for entry in vertices:
        if isinstance(entry, Mapping):
            attrs = dict(entry)
            if "id" not in attrs:
                raise ValueError(f"Vertex entry without 'id': {entry!r}")
            vertex_id = str(attrs.pop("id"))
        else:
            vertex_id, attrs = str(entry), {}
        graph.create_vertex(vertex_id, attrs)

    for entry in edges:
        if not isinstance(entry, Mapping):
            raise ValueError(f"Edge entry must be a mapping: {entry!r}")
        missing = [k for k in ("source", "target", "cost") if k not in entry]
        if missing:
            raise ValueError(f"Edge entry {entry!r} is missing: {', '.join(missing)}")

        source, target = str(entry["source"]), str(entry["target"])
        for vertex_id in (source, target):
            if vertex_id not in graph:
                graph.create_vertex(vertex_id)

        try:
            cost = float(entry["cost"])
        except (TypeError, ValueError):
            raise ValueError(f"Edge entry {entry!r} has a non-numeric cost") from None

        edge_id = entry.get("id")
        graph.create_edge(
            source, target, cost, edge_id=None if edge_id is None else str(edge_id)
        )

    logger.debug(f"Built graph with {len(graph)} vertices and {len(graph.edges)} edges")
    return graph


def graph_to_dict(graph: Graph) -> Dict[str, List[Any]]:
    """Return a dictionary that `graph_from_dict` turns back into an equal graph."""
    return {
        "vertices": [
            {"id": v.id, **v.attrs} if v.attrs else v.id for v in graph.vertices
        ],
        "edges": [
            {
                "id": e.id,
                "source": e.source.id,
                "target": e.target.id,
                "cost": e.cost,
            }
            for e in graph.edges
        ],
    }


def load_graph(path: Union[str, Path]) -> Graph:
    """Read a YAML or JSON graph document from ``path``.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid YAML or the document is malformed.
    """
    path = Path(path)
    logger.info(f"Loading graph from: {path}")
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    return graph_from_dict(data if data is not None else {})
