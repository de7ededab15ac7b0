"""Dynamic programming: 0/1 knapsack, Fibonacci, LCS, matrix chains, multistage graphs."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


def knapsack_01(weights: Sequence[float], profits: Sequence[float], capacity: int) -> float:
    """Largest total profit of items whose total weight fits in ``capacity``."""
    weights = list(weights)
    profits = list(profits)
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    capacity = operator.index(capacity)
    if capacity < 0:
        raise ValueError("capacity cannot be negative")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weight of an item cannot be zero or negative")

    best = [0] * (capacity + 1)
    for weight, profit in zip(weights, profits):
        # Walking capacities downwards keeps best[j - w] at the previous item's row.
        for j in range(capacity, 0, -1):
            if weight <= j:
                candidate = profit + best[j - int(weight)]
                if candidate > best[j]:
                    best[j] = candidate
    return best[capacity]


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    n = operator.index(n)
    if n < 0:
        raise ValueError("Fibonacci index must be a non-negative integer")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def longest_common_subsequence(x: str, y: str) -> str:
    """One longest common subsequence of two strings.

    On a tie between dropping a character of ``x`` and one of ``y``,
    the character of ``x`` is dropped.
    """
    rows, columns = len(x), len(y)
    table = [[0] * (columns + 1) for _ in range(rows + 1)]
    for i, xc in enumerate(x, start=1):
        above, row = table[i - 1], table[i]
        for j, yc in enumerate(y, start=1):
            if xc == yc:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])

    picked: list[str] = []
    i, j = rows, columns
    while i > 0 and j > 0:
        if x[i - 1] == y[j - 1]:
            picked.append(x[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] >= table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))


@dataclass(frozen=True)
class MatrixChain:
    """Fewest scalar multiplications for a chain and the bracketing that achieves it."""

    cost: int
    parenthesization: str


def matrix_chain_order(dimensions: Sequence[int]) -> MatrixChain:
    """Optimal bracketing of matrices A1..An where Ai is dimensions[i-1] x dimensions[i]."""
    p = [operator.index(d) for d in dimensions]
    if len(p) < 2:
        raise ValueError("at least one matrix (two dimensions) is required")
    if any(d < 1 for d in p):
        raise ValueError("matrix dimensions must be positive integers")
    n = len(p) - 1

    cost = [[0] * (n + 1) for _ in range(n + 1)]
    split = [[0] * (n + 1) for _ in range(n + 1)]
    for length in range(2, n + 1):
        for i in range(1, n - length + 2):
            j = i + length - 1
            best: int | None = None
            for k in range(i, j):
                candidate = cost[i][k] + cost[k + 1][j] + p[i - 1] * p[k] * p[j]
                if best is None or candidate < best:
                    best = candidate
                    split[i][j] = k
            cost[i][j] = best if best is not None else 0

    def render(i: int, j: int) -> str:
        if i == j:
            return f"A{i}"
        k = split[i][j]
        return f"({render(i, k)}{render(k + 1, j)})"

    return MatrixChain(cost[1][n], render(1, n))


@dataclass(frozen=True)
class StagePath:
    """Cheapest route from the first vertex to the last and its total cost."""

    cost: float
    path: tuple[int, ...]


def multistage_shortest_path(
    vertex_count: int, edges: Iterable[tuple[int, int, float]]
) -> StagePath:
    """Cheapest path from vertex 0 to vertex ``vertex_count - 1`` in a directed acyclic graph."""
    if vertex_count < 1:
        raise ValueError("graph needs at least one vertex")
    graph: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")
        graph[u].append((v, weight))

    sink = vertex_count - 1
    best: dict[int, float] = {sink: 0.0}
    successor: dict[int, int] = {}
    active: set[int] = set()

    def solve(vertex: int) -> float:
        if vertex in best:
            return best[vertex]
        if vertex in active:
            raise ValueError("multistage graph must not contain a cycle")
        active.add(vertex)
        cheapest = math.inf
        for following, weight in graph[vertex]:
            through = weight + solve(following)
            if through < cheapest:
                cheapest = through
                successor[vertex] = following
        active.discard(vertex)
        best[vertex] = cheapest
        return cheapest

    total = solve(0)
    if math.isinf(total):
        raise ValueError("sink is not reachable from the source")
    path = [0]
    while path[-1] != sink:
        path.append(successor[path[-1]])
    return StagePath(total, tuple(path))