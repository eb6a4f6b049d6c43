from __future__ import annotations

from pathlib import Path

import pytest

from georoute.adapters.persistence.local_graph_repository import (
    LocalGraphRepository,
    parse_graph_text,
)
from georoute.domain.exceptions import EdgeIndexOutOfRange, GraphFormatError
from georoute.domain.models import GeoPoint

SAMPLE = """\
4 3
durham 35.9940 -78.8986
raleigh 35.7796 -78.6382
chapel_hill 35.9132 -79.0558
cary 35.7915 -78.7811
0 1 I-40
0 2 US-15
1 3
"""


def test_parse_graph_text_reads_vertices_and_edges() -> None:
    graph = parse_graph_text(SAMPLE)

    durham = GeoPoint(lat=35.9940, lon=-78.8986)
    raleigh = GeoPoint(lat=35.7796, lon=-78.6382)
    cary = GeoPoint(lat=35.7915, lon=-78.7811)

    assert graph.vertex_count == 4
    assert graph.edge_count == 3
    assert graph.vertices[0] == durham
    assert cary in graph.neighbors(raleigh)
    assert raleigh in graph.neighbors(durham)


def test_parse_graph_text_ignores_blank_lines() -> None:
    graph = parse_graph_text("\n2 1\n\na 0 0\nb 0 1\n\n0 1\n\n")

    assert graph.vertex_count == 2
    assert graph.edge_count == 1


@pytest.mark.parametrize(
    ("text", "line"),
    [
        ("2\n", 1),
        ("x 1\n", 1),
        ("1 0\na 0\n", 2),
        ("1 0\na north 0\n", 2),
        ("1 0\na 91 0\n", 2),
        ("2 1\na 0 0\nb 0 1\n0\n", 4),
        ("2 1\na 0 0\nb 0 1\n0 b\n", 4),
    ],
)
def test_malformed_lines_report_line_number(text: str, line: int) -> None:
    with pytest.raises(GraphFormatError) as excinfo:
        parse_graph_text(text)

    assert excinfo.value.line == line


@pytest.mark.parametrize("text", ["", "2 0\na 0 0\n", "2 2\na 0 0\nb 0 1\n0 1\n"])
def test_truncated_files_raise(text: str) -> None:
    with pytest.raises(GraphFormatError):
        parse_graph_text(text)


def test_edge_index_out_of_range_propagates() -> None:
    with pytest.raises(EdgeIndexOutOfRange):
        parse_graph_text("2 1\na 0 0\nb 0 1\n0 5\n")


def test_repository_reads_explicit_path(tmp_path: Path) -> None:
    path = tmp_path / "triangle.graph"
    path.write_text(SAMPLE, encoding="utf-8")

    graph = LocalGraphRepository(path=path).load_graph()

    assert graph.vertex_count == 4


def test_repository_reads_path_from_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "env.graph"
    path.write_text(SAMPLE, encoding="utf-8")
    monkeypatch.setenv("GRAPH_PATH", str(path))

    graph = LocalGraphRepository().load_graph()

    assert graph.edge_count == 3


def test_repository_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        LocalGraphRepository(path=tmp_path / "missing.graph").load_graph()
