"""Backtracking searches: graph colouring, Hamiltonian paths and N-queens."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import count

Adjacency = Sequence[Sequence[int]]


def undirected_adjacency(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build adjacency lists for an unweighted, undirected graph."""
    if vertex_count < 0:
        raise ValueError("vertex count cannot be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def graph_colorings(adjacency: Adjacency, colors: int) -> Iterator[tuple[int, ...]]:
    """Yield every assignment of colours 1..colors in which no edge joins equal colours."""
    vertex_count = len(adjacency)
    if vertex_count == 0:
        return
    assignment = [0] * vertex_count

    def extend(vertex: int) -> Iterator[tuple[int, ...]]:
        if vertex == vertex_count:
            yield tuple(assignment)
            return
        for color in range(1, colors + 1):
            if all(assignment[neighbour] != color for neighbour in adjacency[vertex]):
                assignment[vertex] = color
                yield from extend(vertex + 1)
                assignment[vertex] = 0

    yield from extend(0)


def chromatic_number(adjacency: Adjacency) -> int:
    """Number of colours used by a greedy colouring in vertex order."""
    assignment = [0] * len(adjacency)
    for vertex, neighbours in enumerate(adjacency):
        used = {assignment[neighbour] for neighbour in neighbours}
        assignment[vertex] = next(color for color in count(1) if color not in used)
    return max(assignment, default=0)


def hamiltonian_path(adjacency: Adjacency, start: int) -> list[int] | None:
    """Return a path from ``start`` visiting every vertex once, or None."""
    vertex_count = len(adjacency)
    if vertex_count == 0:
        return None
    if not 0 <= start < vertex_count:
        raise ValueError(f"start vertex {start} is out of range")
    path = [start]
    visited = {start}

    def extend(vertex: int) -> bool:
        if len(path) == vertex_count:
            return True
        for neighbour in adjacency[vertex]:
            if neighbour not in visited:
                visited.add(neighbour)
                path.append(neighbour)
                if extend(neighbour):
                    return True
                visited.discard(neighbour)
                path.pop()
        return False

    return list(path) if extend(start) else None


@dataclass(frozen=True)
class QueensResult:
    """All N-queens placements and the number of placements tried."""

    solutions: tuple[tuple[int, ...], ...]
    attempts: int

    @property
    def count(self) -> int:
        return len(self.solutions)


def solve_n_queens(n: int) -> QueensResult:
    """Find every placement of n non-attacking queens, one per row."""
    if n <= 0:
        raise ValueError("number of queens must be a positive integer")
    solutions: list[tuple[int, ...]] = []
    rows: list[int] = []
    attempts = 0

    def is_legal(column: int) -> bool:
        nonlocal attempts
        attempts += 1
        if column in rows:
            return False
        return all(
            abs(column - placed) != offset
            for offset, placed in enumerate(reversed(rows), start=1)
        )

    def place() -> None:
        if len(rows) == n:
            solutions.append(tuple(rows))
            return
        for column in range(n):
            if is_legal(column):
                rows.append(column)
                place()
                rows.pop()

    place()
    return QueensResult(tuple(solutions), attempts)