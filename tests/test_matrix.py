import random

import pytest

from algokit.matrix import add_matrices, strassen_multiply, subtract_matrices


def _identity(n):
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def _random_matrix(n, seed):
    rng = random.Random(seed)
    return [[rng.randint(-9, 9) for _ in range(n)] for _ in range(n)]


def test_add_then_subtract_round_trip():
    a = [[1, 2, 3], [4, 5, 6]]
    b = [[7, -8, 9], [0, 1, -2]]
    assert subtract_matrices(add_matrices(a, b), b) == a


def test_subtract_self_is_zero():
    a = _random_matrix(3, 1)
    assert subtract_matrices(a, a) == [[0] * 3 for _ in range(3)]


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        add_matrices([[1, 2]], [[1], [2]])


def test_subtract_ragged_rows():
    with pytest.raises(ValueError):
        subtract_matrices([[1, 2], [3]], [[1, 2], [3, 4]])


def test_two_by_two_product():
    assert strassen_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_one_by_one_product():
    assert strassen_multiply([[3]], [[4]]) == [[12]]


@pytest.mark.parametrize("n", [1, 2, 4, 8])
def test_identity_is_neutral(n):
    a = _random_matrix(n, n)
    assert strassen_multiply(a, _identity(n)) == a
    assert strassen_multiply(_identity(n), a) == a


def test_permutation_swaps_rows():
    a = _random_matrix(4, 7)
    swap = [[0, 1, 0, 0], [1, 0, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]]
    assert strassen_multiply(swap, a) == [a[1], a[0], a[2], a[3]]


def test_distributive_over_addition():
    a, b, c = (_random_matrix(4, seed) for seed in (11, 12, 13))
    left = strassen_multiply(add_matrices(a, b), c)
    right = add_matrices(strassen_multiply(a, c), strassen_multiply(b, c))
    assert left == right


def test_associative():
    a, b, c = (_random_matrix(4, seed) for seed in (21, 22, 23))
    assert strassen_multiply(strassen_multiply(a, b), c) == strassen_multiply(
        a, strassen_multiply(b, c)
    )


def test_rejects_non_power_of_two():
    a = _random_matrix(3, 5)
    with pytest.raises(ValueError):
        strassen_multiply(a, a)


def test_rejects_empty():
    with pytest.raises(ValueError):
        strassen_multiply([], [])


def test_rejects_different_orders():
    with pytest.raises(ValueError):
        strassen_multiply(_identity(2), _identity(4))


def test_rejects_non_square():
    with pytest.raises(ValueError):
        strassen_multiply([[1, 2]], [[1, 2]])