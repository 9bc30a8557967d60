"""A weighted directed graph with breadth-first search over a residual matrix."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A weighted edge to ``target``."""

    target: int
    weight: int


class Graph:
    """Adjacency-list graph."""

    def __init__(self) -> None:
        self._adjacency: defaultdict[int, list[Edge]] = defaultdict(list)

    def add_edge(self, source: int, target: int, weight: int) -> None:
        """Add a directed edge from ``source`` to ``target``."""
        self._adjacency[source].append(Edge(target, weight))

    def edges_from(self, vertex: int) -> list[Edge]:
        """Return the edges leaving ``vertex`` in the order they were added."""
        return list(self._adjacency.get(vertex, ()))

    def bfs(
        self, residual: Sequence[Sequence[int]], source: int, sink: int
    ) -> list[int] | None:
        """Search ``residual`` for a path of positive capacities.

        Returns the parent of every vertex on the search tree (-1 for the
        source and for unreached vertices) when ``sink`` is reachable, and
        None otherwise.
        """
        count = len(residual)
        for vertex in (source, sink):
            if not 0 <= vertex < count:
                raise IndexError(f"vertex {vertex} is outside the graph")

        visited = [False] * count
        parent = [-1] * count
        visited[source] = True
        queue = deque([source])

        while queue:
            current = queue.popleft()
            for neighbour, capacity in enumerate(residual[current]):
                if not visited[neighbour] and capacity > 0:
                    visited[neighbour] = True
                    parent[neighbour] = current
                    queue.append(neighbour)

        return parent if visited[sink] else None