from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import networkx as nx

from georoute.app.ports.output import IGraphRepository
from georoute.domain.exceptions import GraphFormatError
from georoute.domain.models import AdjacencyGraph, GeoPoint, build_graph

logger = logging.getLogger(__name__)


def graph_from_networkx(graph: Any) -> AdjacencyGraph:
    """Convert a networkx graph whose nodes carry ``y`` (lat) and ``x`` (lon).

    Directed and multi-edge graphs (as produced by OSMnx) are collapsed to a
    simple undirected graph first, so each street contributes one edge.
    Vertex order follows networkx node order.
    """

    if graph.is_directed() or graph.is_multigraph():
        graph = nx.Graph(graph)

    index_by_node: dict[Any, int] = {}
    vertices: list[GeoPoint] = []
    for node, data in graph.nodes(data=True):
        try:
            point = GeoPoint(lat=float(data["y"]), lon=float(data["x"]))
        except KeyError:
            raise GraphFormatError(f"node {node!r} has no x/y coordinates") from None
        except (TypeError, ValueError) as exc:
            raise GraphFormatError(f"node {node!r}: {exc}") from exc
        index_by_node[node] = len(vertices)
        vertices.append(point)

    edges = [(index_by_node[u], index_by_node[v]) for u, v in graph.edges()]
    return build_graph(vertices, edges)


@dataclass(slots=True)
class GraphmlGraphRepository(IGraphRepository):
    """Loads a graph from a GraphML file (e.g. one saved by OSMnx).

    Env vars:
      - GRAPHML_PATH: path to the .graphml file (default: data/graph.graphml)
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("GRAPHML_PATH") or "data/graph.graphml"
        return Path(value)

    def load_graph(self) -> AdjacencyGraph:
        path = self._path()
        if not path.exists():
            raise FileNotFoundError(f"GraphML file not found: {path}")
        logger.info("Reading GraphML graph from %s", path)
        return graph_from_networkx(nx.read_graphml(path))
