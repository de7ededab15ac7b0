"""Shortest paths: Bellman-Ford, Dijkstra, Floyd-Warshall and paths in a binary search tree."""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _TreeNode:
    key: int
    left: Optional[_TreeNode] = None
    right: Optional[_TreeNode] = None


class BinarySearchTree:
    """Binary search tree in which larger keys go right and all others go left."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root: _TreeNode | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Add ``key`` as a new leaf."""
        node = _TreeNode(key)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if key > current.key:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return
                current = current.left

    def _path_to(self, key: int) -> list[_TreeNode]:
        path: list[_TreeNode] = []
        current = self._root
        while current is not None:
            path.append(current)
            if key == current.key:
                return path
            current = current.right if key > current.key else current.left
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        try:
            self._path_to(key)  # type: ignore[arg-type]
        except (KeyError, TypeError):
            return False
        return True

    def _split(self, p: int, q: int) -> tuple[list[_TreeNode], list[_TreeNode], int]:
        to_p, to_q = self._path_to(p), self._path_to(q)
        shared = 0
        for a, b in zip(to_p, to_q):
            if a is not b:
                break
            shared += 1
        return to_p, to_q, shared

    def lowest_common_ancestor(self, p: int, q: int) -> int:
        """Key of the deepest node that has both ``p`` and ``q`` below or at it."""
        to_p, _, shared = self._split(p, q)
        return to_p[shared - 1].key

    def path_length(self, p: int, q: int) -> int:
        """Number of edges on the path between the nodes holding ``p`` and ``q``."""
        to_p, to_q, shared = self._split(p, q)
        return len(to_p) + len(to_q) - 2 * shared


def bellman_ford(
    edges: Iterable[tuple[Hashable, Hashable, float]], source: Hashable
) -> dict[Hashable, float]:
    """Distances from ``source`` over directed, possibly negative, edges.

    Unreachable nodes get ``math.inf``; nodes reachable through a negative
    cycle get ``-math.inf``.
    """
    edge_list = [(u, v, w) for u, v, w in edges]
    nodes: dict[Hashable, None] = {}
    for u, v, _ in edge_list:
        nodes.setdefault(u)
        nodes.setdefault(v)
    if source not in nodes:
        raise ValueError(f"source node {source!r} is not in the graph")

    distance: dict[Hashable, float] = {node: math.inf for node in nodes}
    distance[source] = 0
    rounds = len(nodes) - 1
    for _ in range(rounds):
        changed = False
        for u, v, w in edge_list:
            if distance[u] != math.inf and distance[u] + w < distance[v]:
                distance[v] = distance[u] + w
                changed = True
        if not changed:
            break

    for _ in range(rounds):
        for u, v, w in edge_list:
            if distance[u] + w < distance[v]:
                distance[v] = -math.inf
    return distance


def _square(cost: Sequence[Sequence[float | None]]) -> list[list[float]]:
    size = len(cost)
    if any(len(row) != size for row in cost):
        raise ValueError("cost matrix must be square")
    return [[math.inf if value is None else value for value in row] for row in cost]


def dijkstra_matrix(cost: Sequence[Sequence[float | None]], source: int) -> dict[int, float]:
    """Distances from ``source`` using a cost matrix (``None`` or ``inf`` for no edge).

    The result holds the reachable vertices in the order they were settled.
    """
    weights = _square(cost)
    size = len(weights)
    if not 0 <= source < size:
        raise ValueError(f"source vertex {source} is out of range")
    if any(value < 0 for row in weights for value in row):
        raise ValueError("edge weights cannot be negative")

    distance = [math.inf] * size
    distance[source] = 0
    settled: dict[int, float] = {}
    for _ in range(size):
        candidates = [v for v in range(size) if v not in settled and distance[v] < math.inf]
        if not candidates:
            break
        chosen = min(candidates, key=distance.__getitem__)
        settled[chosen] = distance[chosen]
        for vertex, weight in enumerate(weights[chosen]):
            if vertex in settled or weight == math.inf:
                continue
            if distance[chosen] + weight < distance[vertex]:
                distance[vertex] = distance[chosen] + weight
    return settled


def dijkstra(
    vertex_count: int, edges: Iterable[tuple[int, int, float]], source: int
) -> dict[int, float]:
    """Distances from ``source`` over undirected, non-negative edges.

    The result holds the reachable vertices in the order they were settled.
    """
    if not 0 <= source < vertex_count:
        raise ValueError(f"source vertex {source} is out of range")
    adjacency: list[list[tuple[float, int]]] = [[] for _ in range(vertex_count)]
    for u, v, w in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")
        if w < 0:
            raise ValueError("edge weights cannot be negative")
        adjacency[u].append((w, v))
        adjacency[v].append((w, u))

    best = [math.inf] * vertex_count
    best[source] = 0
    settled: dict[int, float] = {}
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        dist, node = heapq.heappop(heap)
        if node in settled:
            continue
        settled[node] = dist
        for weight, neighbour in adjacency[node]:
            if neighbour not in settled and dist + weight < best[neighbour]:
                best[neighbour] = dist + weight
                heapq.heappush(heap, (best[neighbour], neighbour))
    return settled


def floyd_warshall(cost: Sequence[Sequence[float | None]]) -> list[list[float]]:
    """All-pairs shortest distances from a cost matrix (``None`` or ``inf`` for no edge)."""
    dist = _square(cost)
    size = len(dist)
    for k in range(size):
        through = dist[k]
        for i in range(size):
            row = dist[i]
            via = row[k]
            for j in range(size):
                if via + through[j] < row[j]:
                    row[j] = via + through[j]
    return dist