"""Singly linked lists: reversal, merging, sorting, loops and intersections."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: ListNode | None = None


def from_iterable(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list holding the values in order."""
    dummy = ListNode(None)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def values_of(head: ListNode | None) -> list[Any]:
    """Values of an acyclic list in order."""
    return [node.value for node in _nodes(head)]


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def reverse_recursive(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place recursively and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def reverse_in_groups(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each run of ``k`` nodes, a shorter last run included."""
    if k < 1:
        raise ValueError("k must be positive")
    dummy = ListNode(None, head)
    group_tail_before = dummy
    current = head
    while current is not None:
        group_first = current
        previous = None
        for _ in range(k):
            if current is None:
                break
            current.next, previous, current = previous, current, current.next
        group_tail_before.next = previous
        group_first.next = current
        group_tail_before = group_first
    return dummy.next


def middle(head: ListNode | None) -> ListNode | None:
    """Middle node; for an even length, the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def merge_sorted(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Merge two sorted lists by relinking their nodes; ties take ``first`` first."""
    dummy = ListNode(None)
    tail = dummy
    while first is not None and second is not None:
        if first.value <= second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def merge_sort(head: ListNode | None) -> ListNode | None:
    """Sort the list by merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = slow.next
    slow.next = None
    return merge_sorted(merge_sort(head), merge_sort(second))


def loop_length(head: ListNode | None) -> int:
    """Number of nodes in the list's cycle, or 0 when it has none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            count = 1
            node = slow.next
            while node is not slow:
                count += 1
                node = node.next
            return count
    return 0


def join_at(first: ListNode | None, second: ListNode | None, position: int) -> None:
    """Link the tail of ``second`` to the ``position``-th node (1-based) of ``first``."""
    if second is None:
        raise ValueError("second list is empty")
    if position < 1:
        raise IndexError("position must be at least 1")
    target = first
    for _ in range(position - 1):
        if target is None:
            break
        target = target.next
    if target is None:
        raise IndexError("position is past the end of the first list")
    tail = second
    while tail.next is not None:
        tail = tail.next
    tail.next = target


def intersection_value(first: ListNode | None, second: ListNode | None) -> Any | None:
    """Value of the first node shared by both lists, or None when they do not meet."""
    len_first = sum(1 for _ in _nodes(first))
    len_second = sum(1 for _ in _nodes(second))
    for _ in range(len_first - len_second):
        first = first.next
    for _ in range(len_second - len_first):
        second = second.next
    while first is not None and second is not None:
        if first is second:
            return first.value
        first, second = first.next, second.next
    return None


class LinkedList:
    """A singly linked list that grows at its head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Insert a value at the front."""
        self.head = ListNode(value, self.head)

    def reverse(self) -> None:
        """Reverse the list in place."""
        self.head = reverse(self.head)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _nodes(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _nodes(self.head))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"