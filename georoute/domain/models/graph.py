from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

from georoute.domain.exceptions import EdgeIndexOutOfRange

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class AdjacencyGraph:
    """Undirected graph of geographic points, built once and then only read.

    Adjacency is keyed by point value, not by input position: two vertex
    records with identical coordinates share one key and their neighbor
    lists merge. Vertices without any edge are kept in ``vertices`` (so they
    can still be the nearest point) but never show up in ``adjacency``.
    """

    vertices: tuple[GeoPoint, ...]
    adjacency: Mapping[GeoPoint, tuple[GeoPoint, ...]]
    edge_count: int = 0

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    def neighbors(self, point: GeoPoint) -> tuple[GeoPoint, ...]:
        return self.adjacency.get(point, ())

    def __contains__(self, point: object) -> bool:
        return point in self.adjacency


def build_graph(
    vertices: Sequence[GeoPoint], edges: Iterable[tuple[int, int]]
) -> AdjacencyGraph:
    """Build an :class:`AdjacencyGraph` from positional vertex/edge lists.

    Every edge ``(u, v)`` adds ``v`` to ``u``'s neighbors and ``u`` to ``v``'s.
    Duplicate edges produce duplicate neighbor entries; a self-loop lists the
    vertex as its own neighbor (twice, once per direction).

    Raises:
        EdgeIndexOutOfRange: if an edge index is negative or >= len(vertices).
    """

    points = tuple(vertices)
    n = len(points)
    tmp: dict[GeoPoint, list[GeoPoint]] = {}
    count = 0

    for pos, (u, v) in enumerate(edges):
        for index in (u, v):
            # Negative indices would silently wrap around in Python.
            if not 0 <= index < n:
                raise EdgeIndexOutOfRange(pos, index, n)
        a, b = points[u], points[v]
        tmp.setdefault(a, []).append(b)
        tmp.setdefault(b, []).append(a)
        count += 1

    adjacency = MappingProxyType({p: tuple(nbrs) for p, nbrs in tmp.items()})
    return AdjacencyGraph(vertices=points, adjacency=adjacency, edge_count=count)
