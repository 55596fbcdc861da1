"""Bucket sort of real numbers over ten equal-width buckets."""

from __future__ import annotations

from typing import Iterable

from algolab.linkedlist import LinkedList

BUCKET_COUNT = 10
_EQUAL_SPREAD = 1e-9


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Return the values sorted, distributing them over buckets by range."""
    items = list(values)
    if not items:
        return []
    low = min(items)
    spread = max(items) - low
    if abs(spread) < _EQUAL_SPREAD:
        return items

    buckets = [LinkedList() for _ in range(BUCKET_COUNT)]
    for value in items:
        key = min(int((value - low) / spread * BUCKET_COUNT), BUCKET_COUNT - 1)
        bucket = buckets[key]
        bucket.insert(bucket.last(), value)

    result: list[float] = []
    for bucket in buckets:
        bucket.sort()
        result.extend(bucket)
    return result