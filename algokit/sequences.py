"""Counting problems over integer sequences and digit strings."""

from __future__ import annotations

from collections import Counter
from functools import reduce
from itertools import accumulate
from operator import xor
from typing import Iterable, Sequence

MOD = 10**9 + 7


def candies(ratings: Sequence[int]) -> int:
    """Return the fewest candies for children in a row with the given ratings.

    Every child gets at least one candy, and a child rated higher than a
    neighbour gets more candies than that neighbour.
    """
    ratings = list(ratings)
    if not ratings:
        return 0

    counts = [1] * len(ratings)
    for i, (prev, cur) in enumerate(zip(ratings, ratings[1:]), start=1):
        if cur > prev:
            counts[i] = counts[i - 1] + 1
    for i in reversed(range(len(ratings) - 1)):
        if ratings[i] > ratings[i + 1]:
            counts[i] = max(counts[i], counts[i + 1] + 1)
    return sum(counts)


def count_divisible_subarrays(values: Iterable[int], k: int) -> int:
    """Count contiguous, non-empty subarrays whose sum is divisible by ``k``."""
    if k <= 0:
        raise ValueError(f"k must be positive, got {k}")

    seen = Counter({0: 1})
    total = 0
    for prefix in accumulate(values):
        remainder = prefix % k
        total += seen[remainder]
        seen[remainder] += 1
    return total


def substring_sum(digits: str) -> int:
    """Sum every substring of a decimal digit string as a number, modulo 10**9 + 7."""
    total = 0
    running = 0
    for position, char in enumerate(digits, start=1):
        if not ("0" <= char <= "9"):
            raise ValueError(f"not a decimal digit: {char!r}")
        running = (running * 10 + position * int(char)) % MOD
        total = (total + running) % MOD
    return total


def sansa_xor(values: Sequence[int]) -> int:
    """XOR together the XOR of every contiguous subarray of ``values``."""
    n = len(values)
    return reduce(
        xor,
        (value for i, value in enumerate(values) if (i + 1) * (n - i) % 2 == 1),
        0,
    )