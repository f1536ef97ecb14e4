"""Singly linked list of integers and conversions to and from Python lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: ListNode | None = None

    def append(self, elem: int) -> None:
        """Attach a new node holding ``elem`` at the end of the list."""
        node = self
        while node.next is not None:
            node = node.next
        node.next = ListNode(elem)

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def to_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list from ``values``; an empty input gives ``None``."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_vector(head: ListNode | None) -> list[int]:
    """Collect the values of a non-empty linked list into a list."""
    if head is None:
        raise ValueError("cannot convert an empty list")
    return list(head)