from .graphml_graph_repository import GraphmlGraphRepository
from .local_graph_repository import LocalGraphRepository

__all__ = [
    "GraphmlGraphRepository",
    "LocalGraphRepository",
]
