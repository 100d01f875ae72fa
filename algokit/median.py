"""Median of a growing stream of integers."""

from __future__ import annotations

import heapq
from typing import Iterable


def running_median(values: Iterable[int]) -> list[float]:
    """Return the median after each value of ``values`` has been added."""
    low: list[int] = []  # max-heap of the smaller half, stored negated
    high: list[int] = []  # min-heap of the larger half
    medians: list[float] = []

    for value in values:
        if not low or value <= -low[0]:
            heapq.heappush(low, -value)
        else:
            heapq.heappush(high, value)

        if len(low) > len(high) + 1:
            heapq.heappush(high, -heapq.heappop(low))
        elif len(high) > len(low):
            heapq.heappush(low, -heapq.heappop(high))

        if len(low) == len(high):
            medians.append((-low[0] + high[0]) / 2.0)
        else:
            medians.append(float(-low[0]))

    return medians