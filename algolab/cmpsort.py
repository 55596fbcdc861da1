"""Comparison sorts that work in place and report how many comparisons they made.

Every sort takes a mutable sequence and a three-way comparator
``cmp(a, b)``, which is negative, zero or positive as ``a`` is less than,
equal to or greater than ``b``. The sequence is sorted in ascending order
and the number of comparisons counted by the algorithm is returned.
"""

from __future__ import annotations

import random
from typing import Any, Callable, MutableSequence, Optional

Comparator = Callable[[Any, Any], int]


def three_way(a: Any, b: Any) -> int:
    """Natural ordering as -1, 0 or 1."""
    return (a > b) - (a < b)


def bubble_sort(items: MutableSequence[Any], cmp: Comparator = three_way) -> int:
    """Bubble sort; always makes n*(n-1)/2 comparisons."""
    count = 0
    for length in range(len(items), 0, -1):
        for cur in range(length - 1):
            if cmp(items[cur + 1], items[cur]) < 0:
                items[cur], items[cur + 1] = items[cur + 1], items[cur]
            count += 1
    return count


def _sift_down(
    items: MutableSequence[Any], root: int, size: int, cmp: Comparator
) -> int:
    count = 0
    while True:
        left = 2 * root + 1
        right = left + 1
        largest = root
        if left < size:
            count += 1
            if cmp(items[left], items[root]) > 0:
                largest = left
        if right < size:
            count += 1
            if cmp(items[right], items[largest]) > 0:
                largest = right
        if largest == root:
            return count
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(items: MutableSequence[Any], cmp: Comparator = three_way) -> int:
    """Heap sort using a max-heap."""
    n = len(items)
    count = 0
    for root in range(n // 2 - 1, -1, -1):
        count += _sift_down(items, root, n, cmp)
    for heap_size in range(n, 0, -1):
        items[0], items[heap_size - 1] = items[heap_size - 1], items[0]
        count += _sift_down(items, 0, heap_size - 1, cmp)
    return count


def insertion_sort(items: MutableSequence[Any], cmp: Comparator = three_way) -> int:
    """Stable insertion sort."""
    count = 0
    for sorted_size in range(1, len(items)):
        key = items[sorted_size]
        pos = sorted_size - 1
        while pos >= 0:
            count += 1
            if cmp(items[pos], key) > 0:
                items[pos + 1] = items[pos]
                pos -= 1
            else:
                break
        items[pos + 1] = key
    return count


def _merge(
    items: MutableSequence[Any], left: int, mid: int, right: int, cmp: Comparator
) -> int:
    first = items[left:mid + 1]
    second = items[mid + 1:right + 1]
    merged: list[Any] = []
    count = 0
    i = j = 0
    while i < len(first) and j < len(second):
        if cmp(first[i], second[j]) < 0:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
        count += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    items[left:right + 1] = merged
    return count


def merge_sort(items: MutableSequence[Any], cmp: Comparator = three_way) -> int:
    """Bottom-up merge sort; on a tie the right-hand run's element goes first."""
    n = len(items)
    count = 0
    width = 1
    while width < n:
        for left in range(0, n, 2 * width):
            mid = min(left + width - 1, n - 1)
            right = min(mid + width, n - 1)
            count += _merge(items, left, mid, right, cmp)
        width *= 2
    return count


def _partition(
    items: MutableSequence[Any],
    left: int,
    right: int,
    cmp: Comparator,
    rng: Any,
) -> tuple[int, int]:
    pivot = items[rng.randrange(left, right + 1)]
    count = 0
    i = left - 1
    j = right + 1
    while True:
        while True:
            count += 1
            j -= 1
            if cmp(items[j], pivot) <= 0:
                break
        while True:
            count += 1
            i += 1
            if cmp(items[i], pivot) >= 0:
                break
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            return j, count


def quick_sort(
    items: MutableSequence[Any],
    cmp: Comparator = three_way,
    rng: Optional[Any] = None,
) -> int:
    """Quicksort with Hoare partitioning around a randomly chosen pivot.

    ``rng`` supplies ``randrange``; the ``random`` module is used by default.
    """
    chooser = rng if rng is not None else random
    count = 0
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        split, made = _partition(items, left, right, cmp, chooser)
        count += made
        pending.append((split + 1, right))
        pending.append((left, split))
    return count


def selection_sort(items: MutableSequence[Any], cmp: Comparator = three_way) -> int:
    """Selection sort; always makes n*(n-1)/2 comparisons."""
    n = len(items)
    count = 0
    for sorted_size in range(n - 1):
        smallest = sorted_size
        for i in range(sorted_size + 1, n):
            count += 1
            if cmp(items[smallest], items[i]) > 0:
                smallest = i
        items[sorted_size], items[smallest] = items[smallest], items[sorted_size]
    return count


def shell_sort(items: MutableSequence[Any], cmp: Comparator = three_way) -> int:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    n = len(items)
    count = 0
    gap = n // 2
    while gap:
        for j in range(gap, n):
            key = items[j]
            pos = j - gap
            while pos >= 0:
                count += 1
                if cmp(items[pos], key) > 0:
                    items[pos + gap] = items[pos]
                    pos -= gap
                else:
                    break
            items[pos + gap] = key
        gap //= 2
    return count


def tournament_sort(items: MutableSequence[Any], cmp: Comparator = three_way) -> int:
    """Tournament (winner tree) sort.

    The count covers building the tree and replaying matches after each
    winner is removed; locating the winner's leaf is not counted.
    """
    n = len(items)
    if n == 0:
        return 0
    count = 0
    tour: list[Any] = [None] * (n - 1) + list(items)
    alive = [True] * (2 * n - 1)

    for cur in range(n - 2, -1, -1):
        count += 1
        left = 2 * cur + 1
        right = left + 1
        tour[cur] = tour[left] if cmp(tour[left], tour[right]) < 0 else tour[right]

    for i in range(n):
        items[i] = tour[0]
        j = 0
        while j < n - 1:
            left = 2 * j + 1
            j = left if alive[left] and cmp(tour[j], tour[left]) == 0 else left + 1
        alive[j] = False

        while j:
            j = (j - 1) // 2
            left = 2 * j + 1
            right = left + 1
            if not alive[left] and not alive[right]:
                alive[j] = False
            elif not alive[left]:
                tour[j] = tour[right]
            elif not alive[right]:
                tour[j] = tour[left]
            else:
                tour[j] = tour[left] if cmp(tour[left], tour[right]) <= 0 else tour[right]
            count += 1
    return count


class _Leaf:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional[_Leaf] = None
        self.right: Optional[_Leaf] = None


def tree_sort(items: MutableSequence[Any], cmp: Comparator = three_way) -> int:
    """Sort by inserting into a binary search tree and reading it in order.

    Equal elements go to the right subtree, so the sort is stable.
    """
    count = 0
    root: Optional[_Leaf] = None
    for value in items:
        if root is None:
            root = _Leaf(value)
            continue
        node = root
        while True:
            count += 1
            if cmp(value, node.value) < 0:
                if node.left is None:
                    node.left = _Leaf(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Leaf(value)
                    break
                node = node.right

    ordered: list[Any] = []
    pending: list[_Leaf] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        ordered.append(node.value)
        node = node.right
    items[:] = ordered
    return count