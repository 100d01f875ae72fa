"""Sliding-window problems solved with monotonic deques."""

from __future__ import annotations

from collections import deque
from itertools import accumulate
from typing import Sequence


def sliding_window_max(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError(f"window size must be at least 1, got {k}")
    result: list[int] = []
    window: deque[int] = deque()

    for i, num in enumerate(nums):
        while window and nums[window[-1]] < num:
            window.pop()
        window.append(i)
        if window[0] <= i - k:
            window.popleft()
        if i >= k - 1:
            result.append(nums[window[0]])

    return result


def shortest_subarray(nums: Sequence[int], k: int) -> int:
    """Return the length of the shortest non-empty contiguous subarray whose sum
    is at least ``k``, or -1 if there is none."""
    prefix = list(accumulate(nums, initial=0))
    best = len(nums) + 1
    candidates: deque[int] = deque()

    for i, total in enumerate(prefix):
        while candidates and total - prefix[candidates[0]] >= k:
            best = min(best, i - candidates.popleft())
        while candidates and total <= prefix[candidates[-1]]:
            candidates.pop()
        candidates.append(i)

    return -1 if best == len(nums) + 1 else best