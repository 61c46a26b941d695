"""Recursive classics: subsets, powers, series, Hanoi, combinations."""

from __future__ import annotations

import math
from collections.abc import Iterator
from itertools import groupby


def subsets(word: str) -> list[str]:
    """All subsequences of ``word``, each character first left out then kept."""

    def walk(index: int, current: str) -> Iterator[str]:
        if index == len(word):
            yield current
            return
        yield from walk(index + 1, current)
        yield from walk(index + 1, current + word[index])

    return list(walk(0, ""))


def power(base: int, exponent: int) -> int:
    """base ** exponent by repeated multiplication."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def fast_power(base: int, exponent: int) -> int:
    """base ** exponent by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    if exponent % 2 == 0:
        return fast_power(base * base, exponent // 2)
    return base * fast_power(base * base, (exponent - 1) // 2)


def taylor_exp(x: int, terms: int) -> float:
    """Partial sum of the Taylor series of e**x up to x**terms / terms!."""
    if terms < 0:
        raise ValueError("terms must be non-negative")
    return sum(fast_power(x, n) / math.factorial(n) for n in range(terms + 1))


def hanoi_moves(
    n: int, source: str = "a", auxiliary: str = "b", destination: str = "c"
) -> list[tuple[str, str]]:
    """Moves (from, to) that carry ``n`` discs from source to destination."""
    if n < 0:
        raise ValueError("disc count must be non-negative")

    def moves(count: int, src: str, aux: str, dst: str) -> Iterator[tuple[str, str]]:
        if count == 0:
            return
        yield from moves(count - 1, src, dst, aux)
        yield (src, dst)
        yield from moves(count - 1, aux, src, dst)

    return list(moves(n, source, auxiliary, destination))


def n_choose_r(n: int, r: int) -> int:
    """Binomial coefficient n! / (r! (n - r)!)."""
    if n < 0 or r < 0 or r > n:
        raise ValueError("require 0 <= r <= n")
    return math.factorial(n) // (math.factorial(r) * math.factorial(n - r))


def remove_consecutive_duplicates(text: str) -> str:
    """Collapse each run of equal adjacent characters to one."""
    return "".join(char for char, _ in groupby(text))


def josephus(n: int, k: int) -> int:
    """Zero-based safe position among ``n`` people counting by ``k``."""
    if n < 1:
        raise ValueError("n must be positive")
    position = 0
    for size in range(2, n + 1):
        position = (position + k) % size
    return position