"""Selection and scheduling problems solved with binary heaps."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from typing import Hashable, Iterable, Sequence


def kth_largest(nums: Iterable[int], k: int) -> int:
    """Return the ``k``-th largest value of ``nums``.

    When ``k`` exceeds the number of values, the smallest value is returned.
    """
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    heap: list[int] = []
    for num in nums:
        heapq.heappush(heap, num)
        if len(heap) > k:
            heapq.heappop(heap)
    if not heap:
        raise ValueError("nums must not be empty")
    return heap[0]


def top_k_frequent(nums: Iterable[Hashable], k: int) -> list[Hashable]:
    """Return up to ``k`` values of ``nums``, most frequent first."""
    if k <= 0:
        return []
    return [value for value, _ in Counter(nums).most_common(k)]


def k_smallest_pairs(
    nums1: Sequence[int], nums2: Sequence[int], k: int
) -> list[tuple[int, int]]:
    """Return the ``k`` pairs ``(a, b)`` with ``a`` from ``nums1`` and ``b`` from
    ``nums2`` that have the smallest sums, in increasing order of sum.

    Both sequences are expected to be sorted in ascending order.
    """
    if not nums1 or not nums2 or k <= 0:
        return []
    heap = [(a + nums2[0], i, 0) for i, a in enumerate(nums1[:k])]
    heapq.heapify(heap)
    result: list[tuple[int, int]] = []
    while heap and len(result) < k:
        _, i, j = heapq.heappop(heap)
        result.append((nums1[i], nums2[j]))
        if j + 1 < len(nums2):
            heapq.heappush(heap, (nums1[i] + nums2[j + 1], i, j + 1))
    return result


def least_interval(tasks: Iterable[Hashable], n: int) -> int:
    """Return the fewest time units needed to run ``tasks`` when equal tasks
    must be at least ``n`` units apart, idling where necessary."""
    ready = [-count for count in Counter(tasks).values()]
    heapq.heapify(ready)
    cooling: deque[tuple[int, int]] = deque()
    time = 0

    while ready or cooling:
        time += 1
        if cooling and cooling[0][1] == time:
            heapq.heappush(ready, -cooling.popleft()[0])
        if ready:
            remaining = -heapq.heappop(ready) - 1
            if remaining > 0:
                cooling.append((remaining, time + n + 1))

    return time