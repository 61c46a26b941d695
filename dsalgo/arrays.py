"""Array algorithms: partitioning, searching, scanning and matrix walks."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def sort_012(values: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s by counting.

    Every value that is neither 0 nor 1 ends up as a 2, as the counting
    fills the remainder of the output with 2s.
    """
    items = list(values)
    zeros = items.count(0)
    ones = items.count(1)
    return [0] * zeros + [1] * ones + [2] * (len(items) - zeros - ones)


def is_sorted(values: Sequence[int]) -> bool:
    """Return True when the values are in non-decreasing order."""
    return all(left <= right for left, right in zip(values, values[1:]))


def longest_consecutive_run(values: Iterable[int]) -> int:
    """Length of the longest set of consecutive integers among non-negative values."""
    present = set(values)
    if any(value < 0 for value in present):
        raise ValueError("values must be non-negative")
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        length = 1
        while value + length in present:
            length += 1
        best = max(best, length)
    return best


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous slice (Kadane's algorithm)."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() of an empty sequence")
    return best


def primes_up_to(limit: int) -> list[int]:
    """Numbers from 1 to ``limit`` with no divisor between 2 and themselves.

    By this trial-division rule 1 is included.
    """
    return [
        number
        for number in range(1, limit + 1)
        if not any(number % divisor == 0 for divisor in range(2, number))
    ]


def remove_duplicates_sorted(values: Iterable[int]) -> list[int]:
    """Distinct values of a sorted sequence, keeping their order."""
    result: list[int] = []
    for value in values:
        if not result or result[-1] != value:
            result.append(value)
    return result


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Index of ``target`` in the sorted ``values``, or None if absent."""
    first, last = 0, len(values) - 1
    while first <= last:
        middle = (first + last) // 2
        if values[middle] < target:
            first = middle + 1
        elif values[middle] == target:
            return middle
        else:
            last = middle - 1
    return None


def rotate_clockwise(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the square matrix rotated by 90 degrees clockwise."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return [list(column) for column in zip(*reversed(matrix))]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements of a rectangular matrix in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    top, left = 0, 0
    bottom, right = len(matrix) - 1, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def product_except_self(values: Iterable[int]) -> list[int]:
    """For each position, the product of all the other values."""
    items = list(values)
    zeros = items.count(0)
    product = math.prod(value for value in items if value)
    if zeros > 1:
        return [0] * len(items)
    if zeros == 1:
        return [product if value == 0 else 0 for value in items]
    return [product // value for value in items]