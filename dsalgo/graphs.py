"""Graph searches: shortest paths, Hamiltonian cycles, SCCs, maze paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence


def dijkstra(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], source: int = 1
) -> dict[int, float]:
    """Shortest distances from ``source`` over vertices ``1 .. vertex_count``.

    Edges are undirected; a later edge between the same pair replaces an
    earlier one, and an edge of weight 0 counts as absent. Unreachable
    vertices get ``math.inf``.
    """
    vertices = range(1, vertex_count + 1)
    adjacency: dict[int, dict[int, int]] = {v: {} for v in vertices}
    for a, b, weight in edges:
        if a not in adjacency or b not in adjacency:
            raise ValueError(f"edge ({a}, {b}) uses an unknown vertex")
        if weight < 0:
            raise ValueError("weights must be non-negative")
        adjacency[a][b] = weight
        adjacency[b][a] = weight
    if source not in adjacency:
        raise ValueError(f"unknown source vertex {source}")
    distance: dict[int, float] = {v: math.inf for v in vertices}
    distance[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        dist, u = heapq.heappop(heap)
        if dist > distance[u]:
            continue
        for v, weight in adjacency[u].items():
            if weight == 0:
                continue
            candidate = dist + weight
            if candidate < distance[v]:
                distance[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return distance


def hamiltonian_cycle(adjacency: Sequence[Sequence[int]]) -> list[int] | None:
    """A Hamiltonian cycle starting and ending at vertex 0, or None."""
    n = len(adjacency)
    if n == 0 or any(len(row) != n for row in adjacency):
        raise ValueError("adjacency must be a non-empty square matrix")
    path = [0]
    used = {0}

    def extend() -> bool:
        if len(path) == n:
            return bool(adjacency[path[-1]][0])
        for v in range(1, n):
            if v not in used and adjacency[path[-1]][v]:
                path.append(v)
                used.add(v)
                if extend():
                    return True
                path.pop()
                used.remove(v)
        return False

    return path + [0] if extend() else None


def _postorder(
    start: int, adjacency: list[list[int]], visited: list[bool], out: list[int]
) -> None:
    visited[start] = True
    stack = [(start, iter(adjacency[start]))]
    while stack:
        node, pending = stack[-1]
        for nxt in pending:
            if not visited[nxt]:
                visited[nxt] = True
                stack.append((nxt, iter(adjacency[nxt])))
                break
        else:
            stack.pop()
            out.append(node)


def strongly_connected_components(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Strongly connected components of a directed graph (Kosaraju)."""
    forward: list[set[int]] = [set() for _ in range(vertex_count)]
    backward: list[set[int]] = [set() for _ in range(vertex_count)]
    for a, b in edges:
        if not (0 <= a < vertex_count and 0 <= b < vertex_count):
            raise ValueError(f"edge ({a}, {b}) uses an unknown vertex")
        forward[a].add(b)
        backward[b].add(a)
    forward_lists = [sorted(s) for s in forward]
    backward_lists = [sorted(s) for s in backward]

    finished: list[int] = []
    visited = [False] * vertex_count
    for vertex in range(vertex_count):
        if not visited[vertex]:
            _postorder(vertex, forward_lists, visited, finished)

    components: list[list[int]] = []
    visited = [False] * vertex_count
    for vertex in reversed(finished):
        if not visited[vertex]:
            component: list[int] = []
            _postorder(vertex, backward_lists, visited, component)
            components.append(component)
    return components


_MOVES = (("U", -1, 0), ("D", 1, 0), ("L", 0, -1), ("R", 0, 1))


def maze_paths(grid: Sequence[Sequence[int]]) -> list[str]:
    """All paths (as U/D/L/R strings) from the top-left to the bottom-right.

    Open cells are non-zero; no cell is visited twice. Paths are sorted.
    """
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("grid must be square")
    if n == 0 or not grid[0][0]:
        return []
    visited = [[False] * n for _ in range(n)]
    found: list[str] = []

    def walk(x: int, y: int, route: str) -> None:
        if x == n - 1 and y == n - 1:
            found.append(route)
            return
        visited[x][y] = True
        for letter, dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and not visited[nx][ny] and grid[nx][ny]:
                walk(nx, ny, route + letter)
        visited[x][y] = False

    walk(0, 0, "")
    return sorted(found)