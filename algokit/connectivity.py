"""Minimum spanning trees and strongly connected components."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from operator import attrgetter


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    start: int
    end: int
    weight: float


class UnionFind:
    """Disjoint sets over ``0..size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))
        self._rank = [0] * size
        self._count = size

    def find(self, key: int) -> int:
        """Return the representative of the set holding ``key``."""
        if not 0 <= key < len(self._parent):
            raise IndexError(f"key {key} is outside the union-find")
        root = key
        while self._parent[root] != root:
            root = self._parent[root]
        while key != root:
            next_key = self._parent[key]
            self._parent[key] = root
            key = next_key
        return root

    def connected(self, x: int, y: int) -> bool:
        """Return whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def merge(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; return whether they were separate."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._rank[x] > self._rank[y]:
            self._parent[y] = x
        elif self._rank[x] < self._rank[y]:
            self._parent[x] = y
        else:
            self._parent[x] = y
            self._rank[y] += 1
        self._count -= 1
        return True

    def __len__(self) -> int:
        """Return the number of disjoint sets."""
        return self._count


def kruskal(edges: Iterable[Edge | tuple[int, int, float]], vertex_count: int) -> list[Edge]:
    """Return the edges of a minimum spanning forest, lightest first.

    Edges of equal weight keep the order they were given in.
    """
    ordered = sorted(
        (edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges),
        key=attrgetter("weight"),
    )
    sets = UnionFind(vertex_count)
    tree: list[Edge] = []
    for edge in ordered:
        if sets.merge(edge.start, edge.end):
            tree.append(edge)
    return tree


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(f"vertex {vertex} is outside 0..{vertex_count - 1}")


def strongly_connected_components(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[set[int]]:
    """Return the strongly connected components of a directed graph.

    Vertices are ``0..vertex_count-1``; components come in the order in which
    the second pass over the transposed graph finds them.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must be non-negative")
    forward: list[list[int]] = [[] for _ in range(vertex_count)]
    backward: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        forward[u].append(v)
        backward[v].append(u)

    visited = [False] * vertex_count
    finished: list[int] = []
    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(forward[root]))]
        while stack:
            vertex, children = stack[-1]
            for child in children:
                if not visited[child]:
                    visited[child] = True
                    stack.append((child, iter(forward[child])))
                    break
            else:
                stack.pop()
                finished.append(vertex)

    visited = [False] * vertex_count
    components: list[set[int]] = []
    for vertex in reversed(finished):
        if visited[vertex]:
            continue
        visited[vertex] = True
        component = {vertex}
        pending = [vertex]
        while pending:
            current = pending.pop()
            for previous in backward[current]:
                if not visited[previous]:
                    visited[previous] = True
                    component.add(previous)
                    pending.append(previous)
        components.append(component)
    return components