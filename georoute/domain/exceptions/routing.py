class RoutingError(Exception):
    """Base exception for route calculation failures."""


class NoPathFound(RoutingError):
    """Raised when no feasible path exists for the given request."""

    reason = "no_path"


class EndpointNotInGraph(NoPathFound):
    """Origin or destination has no edges, so it never appears in the adjacency."""

    reason = "endpoint_not_in_graph"


class SameEndpoints(NoPathFound):
    """Origin and destination are the same point; self-routes are rejected."""

    reason = "same_endpoints"


class Disconnected(NoPathFound):
    """Both endpoints are in the graph but lie in different components."""

    reason = "disconnected"
