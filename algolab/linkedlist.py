"""Singly linked list with node handles, plus a fixed-size pooled variant."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

Comparator = Callable[[Any, Any], int]

DEFAULT_POOL_SIZE = 16384


class NodeNotInListError(ValueError):
    """Raised when a node handle does not belong to the list."""


class ListFullError(Exception):
    """Raised when a pooled list has no free slots left."""


@dataclass(eq=False)
class Node:
    """A list cell: a value and the link to the following cell."""

    value: Any
    next: Optional[Node] = None
    _owner: Optional[LinkedList] = field(default=None, repr=False)


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class LinkedList:
    """Singly linked list addressed through Node handles."""

    def __init__(self) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0

    def first(self) -> Optional[Node]:
        return self._head

    def last(self) -> Optional[Node]:
        return self._tail

    def _check_owned(self, node: Node) -> None:
        if node._owner is not self:
            raise NodeNotInListError("node does not belong to list")

    def insert(self, after: Optional[Node], value: Any) -> Node:
        """Insert value after the given node, or at the head if after is None."""
        if after is not None:
            self._check_owned(after)
        new = Node(value, _owner=self)
        if after is None:
            new.next = self._head
            self._head = new
        else:
            new.next = after.next
            after.next = new
        if after is self._tail:
            self._tail = new
        self._size += 1
        return new

    def search(self, key: Any, cmp: Optional[Comparator] = None) -> Optional[Node]:
        """Return the first node matching key, or None.

        With a comparator, a node matches when cmp(value, key) == 0;
        otherwise values are compared with ==.
        """
        for node in self.nodes():
            if (cmp(node.value, key) == 0) if cmp else node.value == key:
                return node
        return None

    def delete(self, node: Optional[Node]) -> None:
        """Unlink a node; None is ignored."""
        if node is None:
            return
        self._check_owned(node)
        if node is self._head:
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            prev = self._head
            while prev is not None and prev.next is not node:
                prev = prev.next
            assert prev is not None
            prev.next = node.next
            if node is self._tail:
                self._tail = prev
        node.next = None
        node._owner = None
        self._size -= 1

    def is_empty(self) -> bool:
        return self._head is None

    def sort(self, cmp: Optional[Comparator] = None) -> None:
        """Bottom-up merge sort of the nodes, relinking them in place.

        On a tie the element of the right-hand run is taken first.
        """
        compare = cmp or _natural
        runs = list(self.nodes())
        width = 1
        while width < len(runs):
            merged: list[Node] = []
            for start in range(0, len(runs), 2 * width):
                left = runs[start:start + width]
                right = runs[start + width:start + 2 * width]
                i = j = 0
                while i < len(left) and j < len(right):
                    if compare(left[i].value, right[j].value) < 0:
                        merged.append(left[i])
                        i += 1
                    else:
                        merged.append(right[j])
                        j += 1
                merged.extend(left[i:])
                merged.extend(right[j:])
            runs = merged
            width *= 2
        for current, following in zip(runs, runs[1:] + [None]):
            current.next = following
        self._head = runs[0] if runs else None
        self._tail = runs[-1] if runs else None

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self._head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __len__(self) -> int:
        return self._size


class PoolLinkedList(LinkedList):
    """Linked list drawing its cells from a pool of fixed size."""

    def __init__(self, capacity: int = DEFAULT_POOL_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        super().__init__()
        self.capacity = capacity
        self._free = capacity

    def insert(self, after: Optional[Node], value: Any) -> Node:
        """Insert like LinkedList.insert; raise ListFullError if the pool is empty."""
        if self._free == 0:
            raise ListFullError("no free slots in list pool")
        node = super().insert(after, value)
        self._free -= 1
        return node

    def delete(self, node: Optional[Node]) -> None:
        """Unlink a node and return its slot to the pool."""
        if node is None:
            return
        super().delete(node)
        self._free += 1

    def free_slots(self) -> int:
        return self._free