from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable

from georoute.app.ports.output import IGraphRepository
from georoute.domain.algorithms.dijkstra import shortest_path
from georoute.domain.algorithms.geo_utils import polyline_distance_mi
from georoute.domain.algorithms.nearest import nearest_point
from georoute.domain.algorithms.reachability import connected
from georoute.domain.exceptions import NoPathFound
from georoute.domain.models import AdjacencyGraph, GeoPoint, Route

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RoutingService:
    """Application service (use case) for graph queries.

    The graph is loaded from the repository on first use and never mutated
    afterwards, so one instance can serve concurrent readers.
    """

    graph_repository: IGraphRepository

    _graph: AdjacencyGraph | None = None
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def graph(self) -> AdjacencyGraph:
        if self._graph is None:
            with self._lock:
                if self._graph is None:
                    graph = self.graph_repository.load_graph()
                    logger.info(
                        "Graph loaded: %d vertices, %d edges, %d routable points",
                        graph.vertex_count,
                        graph.edge_count,
                        len(graph.adjacency),
                    )
                    self._graph = graph
        return self._graph

    def nearest_point(self, point: GeoPoint) -> GeoPoint:
        return nearest_point(self.graph, point)

    def connected(self, a: GeoPoint, b: GeoPoint) -> bool:
        return connected(self.graph, a, b)

    def calculate_route(
        self, *, origin: GeoPoint, destination: GeoPoint, snap: bool = False
    ) -> Route:
        if snap:
            origin = self.nearest_point(origin)
            destination = self.nearest_point(destination)

        try:
            path = shortest_path(self.graph, origin, destination)
        except NoPathFound as exc:
            logger.debug("No route %s -> %s: %s", origin, destination, exc)
            raise

        return Route(origin=origin, destination=destination, path=tuple(path))

    def route_distance(self, points: Iterable[GeoPoint]) -> float:
        return polyline_distance_mi(points)
