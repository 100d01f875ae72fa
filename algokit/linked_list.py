"""Singly linked lists and merging of sorted lists."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; ``None`` when empty."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted linked lists into one sorted list by relinking their nodes."""
    order = count()
    heap = [(node.val, next(order), node) for node in lists if node is not None]
    heapq.heapify(heap)

    dummy = ListNode(-1)
    tail = dummy
    while heap:
        _, _, node = heapq.heappop(heap)
        tail.next = node
        tail = node
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, next(order), node.next))
    return dummy.next