"""Non-comparison sorts of integers: binary MSD radix, counting, and LSD radix."""

from __future__ import annotations

from typing import Iterable

from algolab.fifo import LinkedQueue

_WORD_BITS = 32


def _partition_by_bit(values: list[int], bit: int) -> list[int]:
    if len(values) < 2 or bit < 0:
        return values
    zeros = [v for v in values if not (v >> bit) & 1]
    ones = [v for v in values if (v >> bit) & 1]
    return _partition_by_bit(zeros, bit - 1) + _partition_by_bit(ones, bit - 1)


def binary_msd_sort(values: Iterable[int]) -> list[int]:
    """Sort 32-bit unsigned integers by splitting on bits, highest first."""
    items = list(values)
    for v in items:
        if not 0 <= v < 1 << _WORD_BITS:
            raise ValueError(f"value out of 32-bit unsigned range: {v}")
    return _partition_by_bit(items, _WORD_BITS - 1)


def counting_sort(values: Iterable[int]) -> list[int]:
    """Stable counting sort over the range between the smallest and largest value."""
    items = list(values)
    if not items:
        return []
    low = min(items)
    counts = [0] * (max(items) - low + 1)
    for v in items:
        counts[v - low] += 1
    total = 0
    for index, count in enumerate(counts):
        total += count
        counts[index] = total
    result = [0] * len(items)
    for v in reversed(items):
        counts[v - low] -= 1
        result[counts[v - low]] = v
    return result


def lsd_radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit, least significant decimal first."""
    items = list(values)
    if any(v < 0 for v in items):
        raise ValueError("values must not be negative")
    buckets = [LinkedQueue() for _ in range(10)]
    largest = max(items, default=0)
    place = 1
    while place <= largest:
        for v in items:
            buckets[(v // place) % 10].enqueue(v)
        items = []
        for bucket in buckets:
            while not bucket.is_empty():
                items.append(bucket.dequeue())
        place *= 10
    return items