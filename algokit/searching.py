"""Binary search for integer square roots."""

from __future__ import annotations


def exact_square_root(n: int) -> int | None:
    """Return the integer whose square is n, or None when n is not a positive square."""
    low, high = 1, n
    while low <= high:
        mid = (low + high) // 2
        square = mid * mid
        if square == n:
            return mid
        if square < n:
            low = mid + 1
        else:
            high = mid - 1
    return None