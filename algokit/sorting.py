"""Comparison sorts returning new ascending lists."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by recursive halving and merging."""
    values = list(items)
    if len(values) <= 1:
        return values
    middle = len(values) // 2
    left = merge_sort(values[:middle])
    right = merge_sort(values[middle:])
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[low]
    i, j = low, high
    while i < j:
        while values[i] <= pivot and i < high:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
            j -= 1
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first element of each range."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = _partition(values, low, high)
        pending.append((low, pivot_index - 1))
        pending.append((pivot_index + 1, high))
    return values


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    values = list(items)
    for end in range(len(values) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break
    return values


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix."""
    values = list(items)
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key
    return values