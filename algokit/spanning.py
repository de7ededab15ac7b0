"""Minimum spanning trees: Kruskal, spanning forests and Prim."""

from __future__ import annotations

import heapq
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class WeightedEdge:
    """An undirected edge between ``u`` and ``v``."""

    u: int
    v: int
    weight: float


@dataclass(frozen=True)
class SpanningTree:
    """Edges of a spanning tree, in the order they were chosen, and the vertices it spans."""

    edges: tuple[WeightedEdge, ...]
    vertices: tuple[int, ...]

    @property
    def cost(self) -> float:
        return sum(edge.weight for edge in self.edges)


EdgeLike = Union[WeightedEdge, tuple[int, int, float]]


def _as_edges(vertex_count: int, edges: Iterable[EdgeLike]) -> list[WeightedEdge]:
    if vertex_count < 0:
        raise ValueError("vertex count cannot be negative")
    result = []
    for edge in edges:
        if not isinstance(edge, WeightedEdge):
            edge = WeightedEdge(*edge)
        for vertex in (edge.u, edge.v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")
        result.append(edge)
    return result


def _oriented(edge: WeightedEdge) -> WeightedEdge:
    if edge.u <= edge.v:
        return edge
    return WeightedEdge(edge.v, edge.u, edge.weight)


class _DisjointSets:
    def __init__(self, size: int) -> None:
        self._parent = list(range(size))

    def find(self, vertex: int) -> int:
        root = vertex
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[vertex] != root:
            self._parent[vertex], vertex = root, self._parent[vertex]
        return root

    def union(self, a: int, b: int) -> bool:
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_a] = root_b
        return True


def _kruskal_edges(
    vertex_count: int, edges: Iterable[EdgeLike]
) -> tuple[list[WeightedEdge], _DisjointSets]:
    candidates = sorted(_as_edges(vertex_count, edges), key=lambda edge: edge.weight)
    sets = _DisjointSets(vertex_count)
    chosen: list[WeightedEdge] = []
    for edge in candidates:
        if len(chosen) >= vertex_count - 1:
            break
        if sets.union(edge.u, edge.v):
            chosen.append(_oriented(edge))
    return chosen, sets


def kruskal(vertex_count: int, edges: Iterable[EdgeLike]) -> SpanningTree:
    """Minimum spanning tree of a connected graph by taking edges in order of weight."""
    chosen, _ = _kruskal_edges(vertex_count, edges)
    if len(chosen) != max(vertex_count - 1, 0):
        raise ValueError("graph is disconnected")
    return SpanningTree(tuple(chosen), tuple(range(vertex_count)))


def minimum_spanning_forest(vertex_count: int, edges: Iterable[EdgeLike]) -> list[SpanningTree]:
    """One minimum spanning tree per connected component, ordered by smallest vertex."""
    chosen, sets = _kruskal_edges(vertex_count, edges)
    members: dict[int, list[int]] = defaultdict(list)
    for vertex in range(vertex_count):
        members[sets.find(vertex)].append(vertex)
    tree_edges: dict[int, list[WeightedEdge]] = defaultdict(list)
    for edge in chosen:
        tree_edges[sets.find(edge.u)].append(edge)
    trees = [
        SpanningTree(tuple(tree_edges[root]), tuple(vertices))
        for root, vertices in members.items()
    ]
    trees.sort(key=lambda tree: tree.vertices[0])
    return trees


def prim(vertex_count: int, edges: Iterable[EdgeLike], source: int) -> SpanningTree:
    """Minimum spanning tree of the component holding ``source``, grown from ``source``."""
    edge_list = _as_edges(vertex_count, edges)
    if not 0 <= source < vertex_count:
        raise ValueError(f"source vertex {source} is out of range")
    adjacency: list[list[tuple[float, int]]] = [[] for _ in range(vertex_count)]
    for edge in edge_list:
        adjacency[edge.u].append((edge.weight, edge.v))
        adjacency[edge.v].append((edge.weight, edge.u))

    visited: set[int] = set()
    chosen: list[WeightedEdge] = []
    heap: list[tuple[float, int, int]] = [(0, source, source)]
    while heap:
        weight, vertex, parent = heapq.heappop(heap)
        if vertex in visited:
            continue
        visited.add(vertex)
        if vertex != parent:
            chosen.append(_oriented(WeightedEdge(parent, vertex, weight)))
        for next_weight, neighbour in adjacency[vertex]:
            if neighbour not in visited:
                heapq.heappush(heap, (next_weight, neighbour, vertex))
    return SpanningTree(tuple(chosen), tuple(sorted(visited)))