from __future__ import annotations

from abc import ABC, abstractmethod

from georoute.domain.models import AdjacencyGraph


class IGraphRepository(ABC):
    """Persistence port for loading a route graph into memory."""

    @abstractmethod
    def load_graph(self) -> AdjacencyGraph:
        """Load the graph and return it. Called once per service instance."""
