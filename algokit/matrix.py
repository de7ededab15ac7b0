"""Square matrix arithmetic and Strassen multiplication."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]
MatrixLike = Sequence[Sequence[int]]


def _shape(m: MatrixLike) -> tuple[int, int]:
    rows = len(m)
    columns = len(m[0]) if rows else 0
    if any(len(row) != columns for row in m):
        raise ValueError("matrix rows must all have the same length")
    return rows, columns


def _add(a: MatrixLike, b: MatrixLike) -> Matrix:
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def _sub(a: MatrixLike, b: MatrixLike) -> Matrix:
    return [[x - y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def add_matrices(a: MatrixLike, b: MatrixLike) -> Matrix:
    """Element-wise sum of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape")
    return _add(a, b)


def subtract_matrices(a: MatrixLike, b: MatrixLike) -> Matrix:
    """Element-wise difference of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape")
    return _sub(a, b)


def _quadrants(m: MatrixLike, half: int) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    top, bottom = m[:half], m[half:]
    return (
        [list(row[:half]) for row in top],
        [list(row[half:]) for row in top],
        [list(row[:half]) for row in bottom],
        [list(row[half:]) for row in bottom],
    )


def _strassen(a: MatrixLike, b: MatrixLike) -> Matrix:
    n = len(a)
    if n == 1:
        return [[a[0][0] * b[0][0]]]
    half = n // 2
    a11, a12, a21, a22 = _quadrants(a, half)
    b11, b12, b21, b22 = _quadrants(b, half)

    p = _strassen(_add(a11, a22), _add(b11, b22))
    q = _strassen(_add(a21, a22), b11)
    r = _strassen(a11, _sub(b12, b22))
    s = _strassen(a22, _sub(b21, b11))
    t = _strassen(_add(a11, a12), b22)
    u = _strassen(_sub(a21, a11), _add(b11, b12))
    v = _strassen(_sub(a12, a22), _add(b21, b22))

    c11 = _add(_sub(_add(p, s), t), v)
    c12 = _add(r, t)
    c21 = _add(q, s)
    c22 = _add(_sub(_add(p, r), q), u)

    top = [left + right for left, right in zip(c11, c12)]
    bottom = [left + right for left, right in zip(c21, c22)]
    return top + bottom


def strassen_multiply(a: MatrixLike, b: MatrixLike) -> Matrix:
    """Multiply two n x n matrices, n a power of two, with seven products per level."""
    rows, columns = _shape(a)
    if rows != columns or _shape(b) != (rows, columns):
        raise ValueError("matrices must be square and of the same order")
    if rows == 0 or rows & (rows - 1):
        raise ValueError("matrix order must be a positive power of two")
    return _strassen(a, b)