from __future__ import annotations

from georoute.domain.models import AdjacencyGraph, GeoPoint


def connected(graph: AdjacencyGraph, a: GeoPoint, b: GeoPoint) -> bool:
    """True if ``b`` can be reached from ``a`` by following graph edges.

    Iterative depth-first search. A point is always connected to itself,
    even when it has no edges or is not a graph vertex at all.
    """

    visited: set[GeoPoint] = set()
    stack = [a]

    while stack:
        current = stack.pop()
        if current == b:
            return True
        if current in visited:
            continue
        visited.add(current)
        for neighbor in graph.neighbors(current):
            if neighbor not in visited:
                stack.append(neighbor)

    return False
