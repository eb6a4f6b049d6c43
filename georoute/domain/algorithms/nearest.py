from __future__ import annotations

from georoute.domain.algorithms.geo_utils import haversine_distance_mi
from georoute.domain.exceptions import EmptyGraph
from georoute.domain.models import AdjacencyGraph, GeoPoint


def nearest_point(graph: AdjacencyGraph, point: GeoPoint) -> GeoPoint:
    """Return the graph vertex closest in straight-line distance to ``point``.

    All vertices are candidates, including ones without edges. On ties the
    earliest vertex in input order wins.
    """

    if not graph.vertices:
        raise EmptyGraph("Cannot find a nearest point in a graph without vertices")

    best = graph.vertices[0]
    best_d = haversine_distance_mi(point, best)
    for v in graph.vertices[1:]:
        d = haversine_distance_mi(point, v)
        if d < best_d:
            best, best_d = v, d
    return best
