"""Greedy algorithms: activity selection, fractional knapsack, optimal merge,
job sequencing, tape storage and tree vertex splitting."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import count
from typing import Union


def select_activities(activities: Iterable[tuple[float, float]]) -> list[tuple[float, float]]:
    """Pick a largest set of mutually compatible (start, finish) activities.

    Activities are taken in increasing order of finish time; each one chosen
    starts no earlier than the previous one finishes.
    """
    pairs = [(start, finish) for start, finish in activities]
    for start, finish in pairs:
        if finish < start:
            raise ValueError(f"finish time {finish} is not possible for start time {start}")
    chosen: list[tuple[float, float]] = []
    for start, finish in sorted(pairs, key=lambda pair: pair[1]):
        if not chosen or start >= chosen[-1][1]:
            chosen.append((start, finish))
    return chosen


@dataclass(frozen=True)
class KnapsackItem:
    """An object that can be cut: its weight, its profit and an optional label."""

    weight: float
    profit: float
    label: object = None

    @property
    def ratio(self) -> float:
        return self.profit / self.weight


@dataclass(frozen=True)
class FractionalSelection:
    """Items put in the knapsack, each with the fraction of it taken."""

    choices: tuple[tuple[KnapsackItem, float], ...]

    @property
    def profit(self) -> float:
        return sum(item.profit * fraction for item, fraction in self.choices)

    @property
    def weight(self) -> float:
        return sum(item.weight * fraction for item, fraction in self.choices)


ItemLike = Union[KnapsackItem, tuple[float, float]]


def fractional_knapsack(items: Iterable[ItemLike], capacity: float) -> FractionalSelection:
    """Fill a knapsack in decreasing order of profit per unit weight, cutting the last item."""
    goods = [item if isinstance(item, KnapsackItem) else KnapsackItem(*item) for item in items]
    if any(item.weight <= 0 for item in goods):
        raise ValueError("weight of an object cannot be zero or negative")
    if capacity < 0:
        raise ValueError("capacity cannot be negative")

    remaining = capacity
    choices: list[tuple[KnapsackItem, float]] = []
    for item in sorted(goods, key=lambda item: item.ratio, reverse=True):
        if item.weight < remaining:
            choices.append((item, 1.0))
            remaining -= item.weight
            continue
        fraction = remaining / item.weight
        if fraction > 0:
            choices.append((item, fraction))
        break
    return FractionalSelection(tuple(choices))


@dataclass(frozen=True)
class MergeNode:
    """A node of a two-way merge tree; leaves are the original files."""

    weight: float
    left: MergeNode | None = None
    right: MergeNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def merge_cost(self) -> float:
        """Total record moves: the sum of the weights of all merged nodes."""
        total: float = 0
        pending: list[MergeNode] = [self]
        while pending:
            node = pending.pop()
            if node.is_leaf:
                continue
            total += node.weight
            pending.extend(child for child in (node.left, node.right) if child is not None)
        return total


def optimal_merge(weights: Iterable[float]) -> MergeNode:
    """Build an optimal merge tree by always merging the two lightest nodes."""
    order = count()
    heap = [(weight, next(order), MergeNode(weight)) for weight in weights]
    if not heap:
        raise ValueError("at least one file is required")
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = MergeNode(left.weight + right.weight, left, right)
        heapq.heappush(heap, (merged.weight, next(order), merged))
    return heap[0][2]


@dataclass(frozen=True)
class Job:
    """A unit-time job that earns ``profit`` if finished by ``deadline``."""

    id: int
    deadline: int
    profit: float


def sequence_jobs(jobs: Iterable[Job]) -> list[Job]:
    """Schedule jobs for the largest total profit, returned in the order they run.

    Jobs with a non-positive deadline can never be scheduled and are left out.
    """
    candidates = [job for job in jobs if job.deadline > 0]
    slots: dict[int, Job] = {}
    horizon = len(candidates)
    for job in sorted(candidates, key=lambda job: job.profit, reverse=True):
        slot = min(job.deadline, horizon)
        while slot > 0 and slot in slots:
            slot -= 1
        if slot > 0:
            slots[slot] = job
    return [slots[slot] for slot in sorted(slots)]


def distribute_programs(lengths: Iterable[int], tapes: int) -> list[list[int]]:
    """Store programs on tapes in increasing length, dealing them out in turn."""
    if tapes <= 0:
        raise ValueError("number of tapes must be positive")
    storage: list[list[int]] = [[] for _ in range(tapes)]
    for position, length in enumerate(sorted(lengths)):
        storage[position % tapes].append(length)
    return storage


def mean_retrieval_time(tape: Sequence[int]) -> float:
    """Mean time to retrieve a program from a tape read from its start."""
    if not tape:
        raise ValueError("tape holds no programs")
    elapsed = 0
    total = 0
    for length in tape:
        elapsed += length
        total += elapsed
    return total / len(tape)


@dataclass(eq=False)
class TreeNode:
    """A vertex of a weighted tree; ``weight`` is the weight of the edge from its parent."""

    value: str
    weight: float
    children: list[TreeNode] = field(default_factory=list)


def build_tree(edges: Iterable[tuple[str, str, float]]) -> TreeNode:
    """Build a tree from (parent, child, weight) edges; the first parent is the root."""
    root: TreeNode | None = None
    nodes: dict[str, TreeNode] = {}
    for parent_value, child_value, weight in edges:
        if root is None:
            root = TreeNode(parent_value, 0)
            nodes[parent_value] = root
        parent = nodes.get(parent_value)
        if parent is None:
            raise ValueError(f"vertex {parent_value!r} is not in the tree")
        child = TreeNode(child_value, weight)
        parent.children.append(child)
        nodes.setdefault(child_value, child)
    if root is None:
        raise ValueError("tree needs at least one edge")
    return root


def split_vertices(root: TreeNode, tolerance: float) -> list[TreeNode]:
    """Vertices at which to split so no path delay exceeds ``tolerance``, in depth-first order."""
    splits: list[TreeNode] = []

    def visit(node: TreeNode, delay: float) -> None:
        for child in node.children:
            cost = delay + child.weight
            if cost > tolerance:
                cost = 0
                splits.append(child)
            visit(child, cost)

    visit(root, 0)
    return splits