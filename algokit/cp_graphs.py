"""Graph puzzles: second-shortest travel time, shortest paths after added roads,
and reaching a rectangle corner around circles."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence


def second_minimum_time(
    n: int, edges: Iterable[Sequence[int]], time: int, change: int
) -> int | None:
    """Second smallest time to travel from city 1 to city n.

    Every edge takes ``time`` minutes; all signals turn green and red every
    ``change`` minutes, starting green. Returns None when there is no such time.
    """
    if n < 1:
        raise ValueError("there must be at least one city")
    if change <= 0:
        raise ValueError("signal change interval must be positive")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u - 1].append(v - 1)
        adjacency[v - 1].append(u - 1)

    visits = [0] * n
    arrival: list[int | None] = [None] * n
    arrival[0] = 0
    visits[0] = 1
    heap = [(0, 0)]
    while heap:
        elapsed, city = heapq.heappop(heap)
        turns = elapsed // change
        if turns % 2:
            elapsed = change * (turns + 1)
        reach = elapsed + time
        for neighbour in adjacency[city]:
            if arrival[neighbour] != reach and visits[neighbour] < 2:
                if neighbour == n - 1 and visits[neighbour] == 1:
                    return reach
                visits[neighbour] += 1
                arrival[neighbour] = reach
                heapq.heappush(heap, (reach, neighbour))
    return None


def _shortest_hops(graph: list[list[int]]) -> int | None:
    target = len(graph) - 1
    seen = {0}
    queue = deque([(0, 0)])
    while queue:
        city, hops = queue.popleft()
        if city == target:
            return hops
        for neighbour in graph[city]:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append((neighbour, hops + 1))
    return None


def shortest_distance_after_queries(n: int, queries: Iterable[Sequence[int]]) -> list[int]:
    """Shortest path length from city 0 to city n-1 after each added one-way road.

    The cities start joined by roads from each city i to i + 1.
    """
    if n < 1:
        raise ValueError("there must be at least one city")
    graph: list[list[int]] = [[i + 1] for i in range(n - 1)] + [[]]
    answers: list[int] = []
    for u, v in queries:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"road {u} -> {v} is out of range")
        graph[u].append(v)
        hops = _shortest_hops(graph)
        if hops is not None:
            answers.append(hops)
    return answers


def can_reach_corner(x: int, y: int, circles: Iterable[Sequence[int]]) -> bool:
    """Whether (0, 0) and (x, y) are joined inside the rectangle without meeting a circle.

    Circles touching the bottom or right side are joined to one barrier, those
    touching the top or left side to another; the way is blocked when a chain
    of touching circles links the two.
    """
    discs = [(cx, cy, r) for cx, cy, r in circles]
    start, goal = len(discs), len(discs) + 1
    parent = list(range(len(discs) + 2))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            parent[vertex] = parent[parent[vertex]]
            vertex = parent[vertex]
        return vertex

    def union(a: int, b: int) -> None:
        root_a, root_b = find(a), find(b)
        if root_a != root_b:
            parent[root_a] = root_b

    for i, (x1, y1, r1) in enumerate(discs):
        if y1 - r1 <= 0 or x1 + r1 >= x:
            union(i, start)
        if y1 + r1 >= y or x1 - r1 <= 0:
            union(i, goal)
        for j, (x2, y2, r2) in enumerate(discs[:i]):
            if (x2 - x1) ** 2 + (y2 - y1) ** 2 <= (r1 + r2) ** 2:
                union(i, j)
    return find(start) != find(goal)