from __future__ import annotations

import heapq
import itertools
import math
from dataclasses import dataclass

from georoute.domain.algorithms.geo_utils import haversine_distance_mi
from georoute.domain.exceptions import Disconnected, EndpointNotInGraph, SameEndpoints
from georoute.domain.models import AdjacencyGraph, GeoPoint


@dataclass(frozen=True, slots=True)
class DijkstraResult:
    distance_by_point: dict[GeoPoint, float]
    prev_by_point: dict[GeoPoint, GeoPoint]


def dijkstra(
    graph: AdjacencyGraph, start: GeoPoint, *, target: GeoPoint | None = None
) -> DijkstraResult:
    """Single-source shortest distances over haversine edge weights.

    Uses a binary heap with lazy deletion: relaxing a point pushes a new
    entry and stale ones are dropped when popped. Stops as soon as
    ``target`` is settled, if given. Points never reached are absent from
    ``distance_by_point``.
    """

    dist: dict[GeoPoint, float] = {start: 0.0}
    prev: dict[GeoPoint, GeoPoint] = {}
    settled: set[GeoPoint] = set()

    # GeoPoint is not orderable, the counter breaks distance ties.
    counter = itertools.count()
    heap: list[tuple[float, int, GeoPoint]] = [(0.0, next(counter), start)]

    while heap:
        d, _, current = heapq.heappop(heap)
        if current in settled:
            continue
        settled.add(current)
        if current == target:
            break

        for neighbor in graph.neighbors(current):
            if neighbor in settled:
                continue
            nd = d + haversine_distance_mi(current, neighbor)
            if nd < dist.get(neighbor, math.inf):
                dist[neighbor] = nd
                prev[neighbor] = current
                heapq.heappush(heap, (nd, next(counter), neighbor))

    return DijkstraResult(distance_by_point=dist, prev_by_point=prev)


def reconstruct_path(result: DijkstraResult, *, dest: GeoPoint) -> list[GeoPoint]:
    """Walk predecessor links back from ``dest``; empty if it was never reached."""

    if dest not in result.distance_by_point:
        return []

    out: list[GeoPoint] = [dest]
    cur = dest
    while cur in result.prev_by_point:
        cur = result.prev_by_point[cur]
        out.append(cur)
    out.reverse()
    return out


def shortest_path(
    graph: AdjacencyGraph, start: GeoPoint, end: GeoPoint
) -> list[GeoPoint]:
    """Shortest path ``[start, ..., end]`` through the graph.

    Raises:
        EndpointNotInGraph: ``start`` or ``end`` has no edges.
        SameEndpoints: ``start == end``.
        Disconnected: no path joins the two points.
    """

    for point in (start, end):
        if point not in graph:
            raise EndpointNotInGraph(
                f"No valid path found: ({point.lat}, {point.lon}) is not on any edge"
            )
    if start == end:
        raise SameEndpoints("Start and end are the same")

    result = dijkstra(graph, start, target=end)
    path = reconstruct_path(result, dest=end)
    if len(path) < 2:
        raise Disconnected("No valid path found: start and end are not connected")
    return path
