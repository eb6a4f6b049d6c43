from __future__ import annotations

from pathlib import Path

import networkx as nx
import pytest

from georoute.adapters.persistence.graphml_graph_repository import (
    GraphmlGraphRepository,
    graph_from_networkx,
)
from georoute.domain.exceptions import GraphFormatError
from georoute.domain.models import GeoPoint


def _tiny_graph() -> nx.Graph:
    g = nx.Graph()
    # Nodes carry lon/lat in x/y.
    g.add_node(1, x=0.0, y=0.0)
    g.add_node(2, x=0.01, y=0.0)
    g.add_node(3, x=0.02, y=0.0)
    g.add_node(4, x=1.0, y=1.0)
    g.add_edge(1, 2, length=100.0)
    g.add_edge(2, 3, length=200.0)
    return g


def test_graph_from_networkx_maps_nodes_and_edges() -> None:
    graph = graph_from_networkx(_tiny_graph())

    a = GeoPoint(lat=0.0, lon=0.0)
    b = GeoPoint(lat=0.0, lon=0.01)
    c = GeoPoint(lat=0.0, lon=0.02)

    assert graph.vertices[:3] == (a, b, c)
    assert graph.vertex_count == 4
    assert set(graph.neighbors(b)) == {a, c}
    assert GeoPoint(lat=1.0, lon=1.0) not in graph


def test_directed_multigraph_is_collapsed_to_single_edges() -> None:
    g = nx.MultiDiGraph()
    g.add_node("u", x=0.0, y=0.0)
    g.add_node("v", x=0.0, y=1.0)
    g.add_edge("u", "v")
    g.add_edge("v", "u")
    g.add_edge("u", "v")

    graph = graph_from_networkx(g)

    assert graph.edge_count == 1
    assert graph.neighbors(GeoPoint(lat=0.0, lon=0.0)) == (GeoPoint(lat=1.0, lon=0.0),)


def test_node_without_coordinates_raises() -> None:
    g = nx.Graph()
    g.add_node(1, x=0.0)

    with pytest.raises(GraphFormatError):
        graph_from_networkx(g)


def test_repository_reads_graphml_file(tmp_path: Path) -> None:
    path = tmp_path / "tiny.graphml"
    nx.write_graphml(_tiny_graph(), path)

    graph = GraphmlGraphRepository(path=path).load_graph()

    assert graph.vertex_count == 4
    assert graph.edge_count == 2


def test_repository_missing_file_raises(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("GRAPHML_PATH", str(tmp_path / "missing.graphml"))

    with pytest.raises(FileNotFoundError):
        GraphmlGraphRepository().load_graph()
