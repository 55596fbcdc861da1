"""FIFO queues: a bounded ring-style queue and an unbounded linked one."""

from __future__ import annotations

from collections import deque
from typing import Any


class QueueUnderflowError(IndexError):
    """Raised when dequeuing or peeking an empty queue."""


class QueueOverflowError(Exception):
    """Raised when enqueuing onto a full bounded queue."""


class ArrayQueue:
    """Queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Append a value; raise QueueOverflowError if the queue is full."""
        if len(self._items) == self.capacity:
            raise QueueOverflowError("queue overflow")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the oldest value."""
        value = self.peek()
        self._items.popleft()
        return value

    def peek(self) -> Any:
        """Return the oldest value without removing it."""
        if not self._items:
            raise QueueUnderflowError("queue underflow")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class LinkedQueue:
    """Unbounded queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the oldest value."""
        value = self.peek()
        self._items.popleft()
        return value

    def peek(self) -> Any:
        """Return the oldest value without removing it."""
        if not self._items:
            raise QueueUnderflowError("queue underflow")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)