import math
import random

import pytest

from dsalgo.arrays import (
    binary_search,
    is_sorted,
    longest_consecutive_run,
    max_subarray_sum,
    primes_up_to,
    product_except_self,
    remove_duplicates_sorted,
    rotate_clockwise,
    spiral_order,
    sort_012,
)


def test_sort_012_matches_sorted():
    values = [0, 1, 2, 0, 2, 1, 0]
    assert sort_012(values) == sorted(values)


def test_sort_012_random():
    rng = random.Random(7)
    values = [rng.choice((0, 1, 2)) for _ in range(50)]
    assert sort_012(values) == sorted(values)


def test_is_sorted_true():
    assert is_sorted([2, 4, 6, 7, 9, 11, 13, 15]) is True


def test_is_sorted_false():
    assert is_sorted([3, 1, 4]) is False


def test_is_sorted_empty():
    assert is_sorted([]) is True


def test_longest_consecutive_run_with_noise():
    run = list(range(5, 12))
    values = run + [20, 30, 0]
    random.Random(3).shuffle(values)
    assert longest_consecutive_run(values) == len(run)


def test_longest_consecutive_run_empty():
    assert longest_consecutive_run([]) == 0


def test_longest_consecutive_run_negative_rejected():
    with pytest.raises(ValueError):
        longest_consecutive_run([1, -2])


def test_max_subarray_sum_mixed():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_sum_all_positive():
    values = [3, 1, 4, 1, 5]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_sum_all_negative():
    values = [-8, -3, -6, -2, -5]
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_sum_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_primes_small():
    assert primes_up_to(10) == [1, 2, 3, 5, 7]


def test_primes_have_no_divisors():
    primes = primes_up_to(100)
    assert primes[0] == 1
    assert all(all(p % d for d in range(2, p)) for p in primes)
    assert all(p <= 100 for p in primes)


def test_remove_duplicates_sorted():
    values = sorted([5, 1, 1, 3, 3, 3, 9, 5])
    assert remove_duplicates_sorted(values) == sorted(set(values))


def test_remove_duplicates_empty():
    assert remove_duplicates_sorted([]) == []


@pytest.mark.parametrize("target", [1, 4, 9, 16, 25, 36])
def test_binary_search_found(target):
    values = [1, 4, 9, 16, 25, 36]
    index = binary_search(values, target)
    assert values[index] == target


def test_binary_search_missing():
    assert binary_search([1, 4, 9], 5) is None


def test_rotate_small():
    assert rotate_clockwise([[1, 2], [3, 4]]) == [[3, 1], [4, 2]]


def test_rotate_four_times_is_identity():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    rotated = matrix
    for _ in range(4):
        rotated = rotate_clockwise(rotated)
    assert rotated == matrix


def test_rotate_first_column_becomes_first_row_reversed():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert rotate_clockwise(matrix)[0] == [row[0] for row in reversed(matrix)]


def test_rotate_non_square():
    with pytest.raises(ValueError):
        rotate_clockwise([[1, 2, 3], [4, 5, 6]])


def test_spiral_visits_everything_once():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
    order = spiral_order(matrix)
    assert sorted(order) == sorted(v for row in matrix for v in row)
    assert order[:4] == matrix[0]
    assert order[4:7] == [row[3] for row in matrix[1:]]


def test_spiral_single_column():
    matrix = [[1], [2], [3]]
    assert spiral_order(matrix) == [1, 2, 3]


def test_spiral_empty():
    assert spiral_order([]) == []


def test_product_except_self_no_zero():
    values = [3, -2, 5, 7]
    total = math.prod(values)
    result = product_except_self(values)
    assert all(r * v == total for r, v in zip(result, values))


def test_product_except_self_one_zero():
    values = [4, 0, 3]
    result = product_except_self(values)
    assert result[1] == math.prod(v for v in values if v)
    assert result[0] == 0 and result[2] == 0


def test_product_except_self_two_zeros():
    values = [0, 2, 0, 5]
    assert product_except_self(values) == [0] * len(values)