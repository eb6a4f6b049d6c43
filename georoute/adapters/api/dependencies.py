from __future__ import annotations

import os
from functools import lru_cache

from georoute.adapters.persistence import GraphmlGraphRepository, LocalGraphRepository
from georoute.app.ports.output import IGraphRepository
from georoute.app.services.routing_service import RoutingService


def get_graph_repository() -> IGraphRepository:
    graph_format = (os.getenv("GRAPH_FORMAT", "graph") or "graph").strip().lower()
    if graph_format == "graph":
        return LocalGraphRepository()
    if graph_format == "graphml":
        return GraphmlGraphRepository()
    raise RuntimeError(f"Unsupported GRAPH_FORMAT: {graph_format}")


@lru_cache(maxsize=1)
def get_routing_service() -> RoutingService:
    # One service per process: the graph is loaded once and shared by requests.
    return RoutingService(graph_repository=get_graph_repository())
