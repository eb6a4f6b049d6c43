class GraphError(Exception):
    """Base exception for graph construction and query failures."""


class EdgeIndexOutOfRange(GraphError, IndexError):
    """An edge references a vertex position outside the vertex list."""

    def __init__(self, edge_pos: int, index: int, vertex_count: int) -> None:
        super().__init__(
            f"Edge #{edge_pos} references vertex {index}, "
            f"but only {vertex_count} vertices exist"
        )
        self.edge_pos = edge_pos
        self.index = index
        self.vertex_count = vertex_count


class EmptyGraph(GraphError):
    """Raised when a query needs at least one vertex and the graph has none."""


class GraphFormatError(GraphError, ValueError):
    """Raised when a graph source file cannot be parsed."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line
