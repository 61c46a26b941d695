"""Dynamic programming: longest common subsequence and rod cutting."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, auto
from functools import lru_cache

DEFAULT_PRICES: tuple[int, ...] = (1, 5, 8, 9, 10, 17, 17, 20, 24, 30)


class _Step(Enum):
    UP = auto()
    DIAGONAL = auto()
    LEFT = auto()
    NONE = auto()


def longest_common_subsequence(first: str, second: str) -> str:
    """One longest common subsequence of two strings."""
    rows, cols = len(first), len(second)
    lengths = [[0] * cols for _ in range(rows)]
    steps = [[_Step.NONE] * cols for _ in range(rows)]
    for i, a in enumerate(first):
        for j, b in enumerate(second):
            if a == b:
                lengths[i][j] = lengths[i - 1][j - 1] + 1 if i and j else 1
                steps[i][j] = _Step.DIAGONAL
            elif i and j:
                if lengths[i][j - 1] > lengths[i - 1][j]:
                    lengths[i][j] = lengths[i][j - 1]
                    steps[i][j] = _Step.LEFT
                else:
                    lengths[i][j] = lengths[i - 1][j]
                    steps[i][j] = _Step.UP
            elif i:
                lengths[i][j] = lengths[i - 1][j]
                steps[i][j] = _Step.UP
            elif j:
                lengths[i][j] = lengths[i][j - 1]
                steps[i][j] = _Step.LEFT

    collected: list[str] = []
    i, j = rows - 1, cols - 1
    while i >= 0 and j >= 0 and steps[i][j] is not _Step.NONE:
        step = steps[i][j]
        if step is _Step.UP:
            i -= 1
        elif step is _Step.LEFT:
            j -= 1
        else:
            collected.append(second[j])
            i -= 1
            j -= 1
    return "".join(reversed(collected))


def rod_cutting(length: int, prices: Sequence[int] = DEFAULT_PRICES) -> int:
    """Best price for a rod of ``length``; ``prices[k]`` sells a piece of k + 1."""
    if length < 0:
        raise ValueError("length must be non-negative")
    best = [0] * (length + 1)
    for size in range(1, length + 1):
        best[size] = max(
            (prices[piece] + best[size - piece - 1] for piece in range(min(len(prices), size))),
            default=0,
        )
    return best[length]


def rod_cutting_memo(length: int, prices: Sequence[int] = DEFAULT_PRICES) -> int:
    """Same as :func:`rod_cutting`, computed top-down with memoisation."""
    if length < 0:
        raise ValueError("length must be non-negative")
    price_list = tuple(prices)

    @lru_cache(maxsize=None)
    def best(size: int) -> int:
        if size == 0:
            return 0
        return max(
            (price_list[piece] + best(size - piece - 1)
             for piece in range(min(len(price_list), size))),
            default=0,
        )

    return best(length)