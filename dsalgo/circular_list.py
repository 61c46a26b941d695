"""A singly linked circular list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class CircularList:
    """Circular singly linked list; positions for deletion count from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Insert a value after the last node."""
        self._insert(value)
        self._tail = self._tail.next if self._size > 1 else self._tail

    def prepend(self, value: Any) -> None:
        """Insert a value before the first node."""
        self._insert(value)

    def _insert(self, value: Any) -> None:
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove and return the value at the 1-based ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError("position out of range")
        assert self._tail is not None
        previous = self._tail
        for _ in range(position - 1):
            previous = previous.next
        removed = previous.next
        if self._size == 1:
            self._tail = None
        else:
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        self._size -= 1
        return removed.value

    def __iter__(self) -> Iterator[Any]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"