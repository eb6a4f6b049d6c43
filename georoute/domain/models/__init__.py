from .geo import GeoPoint
from .graph import AdjacencyGraph, build_graph
from .route import METERS_PER_MILE, Route

__all__ = [
    "AdjacencyGraph",
    "GeoPoint",
    "METERS_PER_MILE",
    "Route",
    "build_graph",
]
