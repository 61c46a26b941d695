"""Disjoint sets, cycle detection and minimum spanning trees."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable
from dataclasses import dataclass


class DisjointSet:
    """Union-find over the integers ``0 .. size - 1``.

    Uses path compression and union by size.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))
        self._size = [1] * size

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"element {item} out of range")

    def find(self, item: int) -> int:
        """Representative of the set holding ``item``."""
        self._check(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: int, second: int) -> bool:
        """Merge the sets of two elements; False if they were already joined."""
        a, b = self.find(first), self.find(second)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True

    def __len__(self) -> int:
        return len(self._parent)


def contains_cycle(vertex_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """True when the undirected edges form a cycle."""
    sets = DisjointSet(vertex_count)
    return any(not sets.union(u, v) for u, v in edges)


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge."""

    source: int
    target: int
    weight: int


@dataclass(frozen=True)
class SpanningTree:
    """Edges chosen for a spanning tree."""

    edges: tuple[Edge, ...]

    @property
    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges)


def kruskal(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, int]]
) -> SpanningTree:
    """Minimum spanning forest by Kruskal's algorithm."""
    items = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    sets = DisjointSet(vertex_count)
    chosen: list[Edge] = []
    for edge in sorted(items, key=lambda e: e.weight):
        if len(chosen) >= vertex_count - 1:
            break
        if sets.union(edge.source, edge.target):
            chosen.append(edge)
    return SpanningTree(tuple(chosen))


class WeightedGraph:
    """Undirected weighted graph on vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must be non-negative")
        self._adjacency: list[dict[int, int]] = [{} for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, source: int, target: int, weight: int) -> None:
        """Add an edge both ways; an edge already present is left as it is."""
        self._check(source)
        self._check(target)
        if self.has_edge(source, target):
            return
        self._adjacency[source][target] = weight
        self._adjacency[target][source] = weight

    def has_edge(self, source: int, target: int) -> bool:
        self._check(source)
        return target in self._adjacency[source]

    def neighbours(self, vertex: int) -> list[tuple[int, int]]:
        """Pairs (neighbour, weight) of a vertex."""
        self._check(vertex)
        return list(self._adjacency[vertex].items())

    def prim(self) -> SpanningTree:
        """Minimum spanning tree grown from vertex 0 by Prim's algorithm."""
        count = len(self._adjacency)
        if count == 0:
            return SpanningTree(())
        key = [math.inf] * count
        parent = [-1] * count
        in_tree = [False] * count
        key[0] = 0
        heap: list[tuple[float, int]] = [(0, 0)]
        while heap:
            _, u = heapq.heappop(heap)
            if in_tree[u]:
                continue
            in_tree[u] = True
            for v, weight in self._adjacency[u].items():
                if not in_tree[v] and weight < key[v]:
                    key[v] = weight
                    parent[v] = u
                    heapq.heappush(heap, (weight, v))
        if not all(in_tree):
            raise ValueError("graph is not connected")
        return SpanningTree(
            tuple(Edge(parent[v], v, int(key[v])) for v in range(1, count))
        )