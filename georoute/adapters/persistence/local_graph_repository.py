from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from georoute.app.ports.output import IGraphRepository
from georoute.domain.exceptions import GraphFormatError
from georoute.domain.models import AdjacencyGraph, GeoPoint, build_graph

logger = logging.getLogger(__name__)


def _content_lines(text: str) -> Iterator[tuple[int, list[str]]]:
    for lineno, raw in enumerate(text.splitlines(), start=1):
        tokens = raw.split()
        if tokens:
            yield lineno, tokens


def parse_graph_text(text: str) -> AdjacencyGraph:
    """Parse the ``.graph`` text format.

    Layout::

        <num_vertices> <num_edges>
        <name> <lat> <lon>        (num_vertices lines)
        <u> <v> [<name>]          (num_edges lines, 0-based vertex indices)
    """

    lines = _content_lines(text)

    try:
        lineno, header = next(lines)
    except StopIteration:
        raise GraphFormatError("empty graph file") from None
    if len(header) < 2:
        raise GraphFormatError("expected '<num_vertices> <num_edges>'", line=lineno)
    try:
        num_vertices, num_edges = int(header[0]), int(header[1])
    except ValueError:
        raise GraphFormatError("vertex/edge counts must be integers", line=lineno) from None
    if num_vertices < 0 or num_edges < 0:
        raise GraphFormatError("vertex/edge counts must be non-negative", line=lineno)

    vertices: list[GeoPoint] = []
    for _ in range(num_vertices):
        try:
            lineno, tokens = next(lines)
        except StopIteration:
            raise GraphFormatError(
                f"expected {num_vertices} vertices, found {len(vertices)}"
            ) from None
        if len(tokens) < 3:
            raise GraphFormatError("expected '<name> <lat> <lon>'", line=lineno)
        try:
            vertices.append(GeoPoint(lat=float(tokens[1]), lon=float(tokens[2])))
        except ValueError as exc:
            raise GraphFormatError(str(exc), line=lineno) from exc

    edges: list[tuple[int, int]] = []
    for _ in range(num_edges):
        try:
            lineno, tokens = next(lines)
        except StopIteration:
            raise GraphFormatError(
                f"expected {num_edges} edges, found {len(edges)}"
            ) from None
        if len(tokens) < 2:
            raise GraphFormatError("expected '<u> <v> [<name>]'", line=lineno)
        try:
            edges.append((int(tokens[0]), int(tokens[1])))
        except ValueError:
            raise GraphFormatError("edge endpoints must be integers", line=lineno) from None

    return build_graph(vertices, edges)


@dataclass(slots=True)
class LocalGraphRepository(IGraphRepository):
    """Loads a graph from a ``.graph`` text file.

    Env vars:
      - GRAPH_PATH: path to the .graph file (default: data/usa.graph)
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("GRAPH_PATH") or "data/usa.graph"
        return Path(value)

    def load_graph(self) -> AdjacencyGraph:
        path = self._path()
        logger.info("Reading graph from %s", path)
        text = path.read_text(encoding="utf-8")
        return parse_graph_text(text)
