"""Array puzzles: bookshelf heights, palindromic grids, bit changes, rating teams,
special numbers, circular swaps, dominant-ones substrings and subarray sums."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import lru_cache
from itertools import accumulate

_MODULUS = 1_000_000_007


def _books(books: Iterable[Sequence[int]], shelf_width: int) -> list[tuple[int, int]]:
    result = [(width, height) for width, height in books]
    for width, _ in result:
        if width > shelf_width:
            raise ValueError(f"book of width {width} does not fit on a shelf of width {shelf_width}")
    return result


def min_height_shelves(books: Iterable[Sequence[int]], shelf_width: int) -> int:
    """Smallest total height of shelves holding the (width, height) books in order."""
    items = _books(books, shelf_width)
    best = [0] + [math.inf] * len(items)
    for i in range(1, len(items) + 1):
        width = 0
        tallest = 0
        for j in range(i, 0, -1):
            width += items[j - 1][0]
            if width > shelf_width:
                break
            tallest = max(tallest, items[j - 1][1])
            best[i] = min(best[i], tallest + best[j - 1])
    return int(best[-1])


def min_height_shelves_recursive(books: Iterable[Sequence[int]], shelf_width: int) -> int:
    """Same result as :func:`min_height_shelves`, by memoised recursion over each book's shelf."""
    items = _books(books, shelf_width)
    if not items:
        return 0
    last = len(items) - 1

    @lru_cache(maxsize=None)
    def best(index: int, room: int, tallest: int) -> int:
        width, height = items[index]
        if index == last:
            return max(tallest, height) if room >= width else tallest + height
        fresh = tallest + best(index + 1, shelf_width - width, height)
        if room >= width:
            return min(fresh, best(index + 1, room - width, max(tallest, height)))
        return fresh

    return best(0, shelf_width, 0)


def min_flips(grid: Sequence[Sequence[int]]) -> int:
    """Fewest cell flips making every row and column palindromic with a multiple of 4 ones."""
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid cannot be empty")
    m, n = len(rows), len(rows[0])
    if any(len(row) != n for row in rows):
        raise ValueError("grid rows must all have the same length")
    if any(cell not in (0, 1) for row in rows for cell in row):
        raise ValueError("grid cells must be 0 or 1")

    if m * n < 4:
        return sum(map(sum, rows))

    flips = 0
    for i in range(m // 2):
        top, bottom = rows[i], rows[m - 1 - i]
        for k in range(n // 2):
            ones = top[k] + top[n - 1 - k] + bottom[k] + bottom[n - 1 - k]
            flips += min(ones, 4 - ones)

    unequal = 0
    one_pairs = 0
    mirrored: list[tuple[int, int]] = []
    if m % 2:
        middle = rows[m // 2]
        mirrored += [(middle[i], middle[n - 1 - i]) for i in range(n // 2)]
    if n % 2:
        column = n // 2
        mirrored += [(rows[i][column], rows[m - 1 - i][column]) for i in range(m // 2)]
    for a, b in mirrored:
        if a == b:
            one_pairs += a
        else:
            unequal += 1

    flips += unequal
    if one_pairs % 2 and unequal == 0:
        flips += 2
    if m % 2 and n % 2:
        flips += rows[m // 2][n // 2]
    return flips


def min_bit_changes(n: int, k: int) -> int | None:
    """Number of 1 bits of ``n`` to clear to reach ``k``, or None when that cannot be done."""
    if n < 0 or k < 0:
        raise ValueError("numbers cannot be negative")
    changes = 0
    while n or k:
        a, b = n % 2, k % 2
        n //= 2
        k //= 2
        if a == b:
            continue
        if b == 1:
            return None
        changes += 1
    return changes


def num_teams(rating: Sequence[int]) -> int:
    """Count index triples i < j < k whose ratings strictly rise or strictly fall."""
    values = list(rating)
    teams = 0
    for middle, value in enumerate(values):
        left_small = sum(1 for other in values[:middle] if other < value)
        left_big = sum(1 for other in values[:middle] if other > value)
        right_small = sum(1 for other in values[middle + 1:] if other < value)
        right_big = sum(1 for other in values[middle + 1:] if other > value)
        teams += left_small * right_big + left_big * right_small
    return teams


def _primes_up_to(limit: int) -> list[int]:
    if limit < 2:
        return []
    is_prime = bytearray([1]) * (limit + 1)
    is_prime[0] = is_prime[1] = 0
    for p in range(2, math.isqrt(limit) + 1):
        if is_prime[p]:
            is_prime[p * p::p] = bytearray(len(range(p * p, limit + 1, p)))
    return [p for p, flag in enumerate(is_prime) if flag]


def non_special_count(low: int, high: int) -> int:
    """Count numbers in [low, high] that are not squares of primes.

    Squares of primes are exactly the numbers with two proper divisors.
    """
    if low < 1:
        raise ValueError("range must start at a positive integer")
    if low > high:
        raise ValueError("range start cannot exceed its end")
    special = sum(1 for p in _primes_up_to(math.isqrt(high)) if low <= p * p <= high)
    return high - low + 1 - special


def min_swaps(nums: Sequence[int]) -> int:
    """Fewest swaps grouping all 1s of a circular binary array together."""
    values = list(nums)
    if any(value not in (0, 1) for value in values):
        raise ValueError("array must be binary")
    n = len(values)
    if n == 0:
        return 0
    window = sum(values)
    extended = values + values[: max(window - 1, 0)]
    ones = sum(values[:window])
    best = window - ones
    for start in range(1, n):
        ones += extended[start + window - 1] - extended[start - 1]
        best = min(best, window - ones)
    return min(n, best)


def number_of_substrings(s: str) -> int:
    """Count substrings whose number of ones is at least the square of their number of zeros."""
    if any(ch not in "01" for ch in s):
        raise ValueError("string must be binary")
    n = len(s)
    prefix = list(accumulate(1 if ch == "1" else 0 for ch in s))
    total = 0
    for left in range(n):
        first_one = 1 if s[left] == "1" else 0
        right = left
        while right < n:
            ones = prefix[right] - prefix[left] + first_one
            zeros = right - left + 1 - ones
            skip = 0
            if ones >= zeros * zeros:
                total += 1
                if ones > zeros * zeros:
                    # Up to this many further characters keep the substring dominant.
                    skip = math.isqrt(ones) - zeros
                    total += min(skip, n - right - 1)
            else:
                # At least this many more characters are needed before it can become dominant.
                skip = zeros * zeros - ones - 1
            right += skip + 1
    return total


def range_sum(nums: Sequence[int], left: int, right: int) -> int:
    """Sum of positions left..right (1-based) of all sorted subarray sums, modulo 10**9 + 7."""
    values = list(nums)
    sums = sorted(
        subtotal
        for start in range(len(values))
        for subtotal in accumulate(values[start:])
    )
    if not 1 <= left <= right <= len(sums):
        raise ValueError(f"positions must satisfy 1 <= left <= right <= {len(sums)}")
    return sum(sums[left - 1:right]) % _MODULUS