"""LIFO stacks: a bounded array-backed stack and an unbounded linked one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class StackOverflowError(Exception):
    """Raised when pushing onto a full bounded stack."""


class ArrayStack:
    """Stack with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Push a value; raise StackOverflowError if the stack is full."""
        if len(self._items) == self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        value = self.peek()
        self._items.pop()
        return value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Cell:
    value: Any
    below: Optional[_Cell]


class LinkedStack:
    """Unbounded stack built from a chain of cells."""

    def __init__(self) -> None:
        self._top: Optional[_Cell] = None
        self._size = 0

    def push(self, value: Any) -> None:
        self._top = _Cell(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        value = self.peek()
        assert self._top is not None
        self._top = self._top.below
        self._size -= 1
        return value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size