from .graph import EdgeIndexOutOfRange, EmptyGraph, GraphError, GraphFormatError
from .routing import (
    Disconnected,
    EndpointNotInGraph,
    NoPathFound,
    RoutingError,
    SameEndpoints,
)

__all__ = [
    "Disconnected",
    "EdgeIndexOutOfRange",
    "EmptyGraph",
    "EndpointNotInGraph",
    "GraphError",
    "GraphFormatError",
    "NoPathFound",
    "RoutingError",
    "SameEndpoints",
]
