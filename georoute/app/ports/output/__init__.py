from .graph_repository import IGraphRepository

__all__ = [
    "IGraphRepository",
]
