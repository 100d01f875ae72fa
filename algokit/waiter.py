"""The plate-stacking waiter puzzle driven by successive primes."""

from __future__ import annotations

from typing import Iterable


def generate_primes(count: int) -> list[int]:
    """Return the first ``count`` prime numbers in increasing order."""
    primes: list[int] = []
    candidate = 2
    while len(primes) < count:
        if all(candidate % p for p in primes):
            primes.append(candidate)
        candidate += 1
    return primes


def waiter(numbers: Iterable[int], q: int) -> list[int]:
    """Return the plate numbers in the order the waiter hands them out.

    ``numbers`` lists the plates from the bottom of the stack to the top.
    On each of ``q`` rounds, plates divisible by the next prime are moved
    out, top first, and the remaining plates form the new stack.
    """
    stack = list(numbers)
    result: list[int] = []

    for prime in generate_primes(q):
        result.extend(v for v in stack if v % prime == 0)
        stack = [v for v in reversed(stack) if v % prime != 0]

    result.extend(reversed(stack))
    return result