"""String algorithms: rotations, prefix functions, pattern search."""

from __future__ import annotations

from collections.abc import Sequence

ALPHABET_SIZE = 256
DEFAULT_PRIME = 101


def are_rotations(first: str, second: str) -> bool:
    """True when ``second`` is a rotation of ``first``."""
    return len(first) == len(second) and second in first + first


def covers_characters(first: str, second: str) -> bool:
    """True when every character of ``first`` occurs somewhere in ``second``."""
    available = set(second)
    return all(char in available for char in first)


def longest_prefix_suffix(text: str) -> int:
    """Length of the longest proper prefix that is also a suffix."""
    if not text:
        return 0
    table = [0] * len(text)
    matched = 0
    index = 1
    while index < len(text):
        if text[index] == text[matched]:
            matched += 1
            table[index] = matched
            index += 1
        elif matched:
            matched = table[matched - 1]
        else:
            table[index] = 0
            index += 1
    return table[-1]


def count_concat_pairs(words: Sequence[str], target: str) -> int:
    """Number of ordered pairs of distinct positions whose concatenation is ``target``."""
    return sum(
        1
        for i, head in enumerate(words)
        for j, tail in enumerate(words)
        if i != j and head + tail == target
    )


def rabin_karp_search(pattern: str, text: str, prime: int = DEFAULT_PRIME) -> list[int]:
    """Start indices of every occurrence of ``pattern`` in ``text``."""
    m, n = len(pattern), len(text)
    if m > n:
        return []
    high = pow(ALPHABET_SIZE, m - 1, prime) if m else 1
    pattern_hash = window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (ALPHABET_SIZE * pattern_hash + ord(p_char)) % prime
        window_hash = (ALPHABET_SIZE * window_hash + ord(t_char)) % prime
    matches = []
    for start in range(n - m + 1):
        if pattern_hash == window_hash and text[start:start + m] == pattern:
            matches.append(start)
        if start < n - m:
            window_hash = (
                ALPHABET_SIZE * (window_hash - ord(text[start]) * high)
                + ord(text[start + m])
            ) % prime
    return matches


def remove_duplicate_chars(text: str) -> str:
    """Keep only the first occurrence of each character."""
    return "".join(dict.fromkeys(text))