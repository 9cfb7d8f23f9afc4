"""Graph traversal, shortest paths and topological ordering."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Hashable, Iterable, Iterator


class CycleError(ValueError):
    """Raised when a directed graph has a cycle and so no topological order."""


class Graph:
    """Adjacency-list graph whose vertices are any hashable values."""

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}

    def add_edge(self, src: Hashable, dest: Hashable, bidirectional: bool = True) -> None:
        """Add an edge from ``src`` to ``dest``, and back again if ``bidirectional``."""
        self._adjacency.setdefault(src, []).append(dest)
        if bidirectional:
            self._adjacency.setdefault(dest, []).append(src)

    def neighbours(self, vertex: Hashable) -> tuple[Hashable, ...]:
        """Return the vertices adjacent to ``vertex`` in the order they were added."""
        return tuple(self._adjacency.get(vertex, ()))

    def bfs(self, start: Hashable) -> list[Hashable]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        order: list[Hashable] = []
        visited = {start}
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency.get(vertex, ()):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: Hashable) -> list[Hashable]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        order = [start]
        visited = {start}
        stack: list[Iterator[Hashable]] = [iter(self._adjacency.get(start, ()))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency.get(neighbour, ())))
                    break
            else:
                stack.pop()
        return order


def _check_count(vertex_count: int) -> None:
    if vertex_count < 0:
        raise ValueError("vertex count must be non-negative")


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


def _directed_adjacency(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    _check_count(vertex_count)
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for src, dest in edges:
        _check_vertex(src, vertex_count)
        _check_vertex(dest, vertex_count)
        adjacency[src].append(dest)
    return adjacency


def dijkstra(
    vertex_count: int, edges: Iterable[tuple[int, int, float]], start: int
) -> list[float]:
    """Return the shortest distance from ``start`` to every vertex of an undirected graph.

    ``edges`` holds ``(v1, v2, weight)`` triples with non-negative weights.
    Vertices that cannot be reached get ``math.inf``.
    """
    _check_count(vertex_count)
    _check_vertex(start, vertex_count)
    adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for v1, v2, weight in edges:
        _check_vertex(v1, vertex_count)
        _check_vertex(v2, vertex_count)
        if weight < 0:
            raise ValueError("edge weights must be non-negative")
        adjacency[v1].append((v2, weight))
        adjacency[v2].append((v1, weight))

    distance: list[float] = [math.inf] * vertex_count
    distance[start] = 0
    queue: list[tuple[float, int]] = [(0, start)]
    while queue:
        current, vertex = heapq.heappop(queue)
        if current > distance[vertex]:
            continue
        for neighbour, weight in adjacency[vertex]:
            candidate = current + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(queue, (candidate, neighbour))
    return distance


def kahn_topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return a topological order of a directed graph by repeatedly removing sources.

    Raises :class:`CycleError` when the graph has a cycle.
    """
    adjacency = _directed_adjacency(vertex_count, edges)
    in_degree = [0] * vertex_count
    for targets in adjacency:
        for target in targets:
            in_degree[target] += 1

    queue = deque(vertex for vertex, degree in enumerate(in_degree) if degree == 0)
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for target in adjacency[vertex]:
            in_degree[target] -= 1
            if in_degree[target] == 0:
                queue.append(target)

    if len(order) != vertex_count:
        raise CycleError("no topological sort possible, there exists a cycle")
    return order


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return vertices in reverse depth-first finishing order.

    For a directed acyclic graph this is a topological order; cycles are
    not detected.
    """
    adjacency = _directed_adjacency(vertex_count, edges)
    visited = [False] * vertex_count
    finished: list[int] = []
    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]
        while stack:
            vertex, children = stack[-1]
            for child in children:
                if not visited[child]:
                    visited[child] = True
                    stack.append((child, iter(adjacency[child])))
                    break
            else:
                stack.pop()
                finished.append(vertex)
    finished.reverse()
    return finished