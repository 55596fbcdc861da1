"""Unbalanced binary search tree of distinct keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    key: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


class BinarySearchTree:
    """Binary search tree; duplicate keys are ignored on insertion."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: Optional[TreeNode] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> bool:
        """Insert key; return False if it was already present."""
        if self.root is None:
            self.root = TreeNode(key)
            self._size += 1
            return True
        node = self.root
        while True:
            if key == node.key:
                return False
            side = "left" if key < node.key else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, TreeNode(key))
                self._size += 1
                return True
            node = child

    def search(self, key: Any) -> Optional[TreeNode]:
        """Return the node holding key, or None."""
        node = self.root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        return node

    def delete(self, key: Any) -> bool:
        """Remove key; return False if it was not present."""
        parent, node = None, self.root
        while node is not None and node.key != key:
            parent, node = node, (node.left if key < node.key else node.right)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.key = succ.key
            parent, node = succ_parent, succ
        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1
        return True

    def prefix(self) -> Iterator[Any]:
        """Yield keys in pre-order (node, left, right)."""
        pending = [self.root] if self.root else []
        while pending:
            node = pending.pop()
            yield node.key
            if node.right is not None:
                pending.append(node.right)
            if node.left is not None:
                pending.append(node.left)

    def infix(self) -> Iterator[Any]:
        """Yield keys in order (left, node, right)."""
        pending: list[TreeNode] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.key
            node = node.right

    def postfix(self) -> Iterator[Any]:
        """Yield keys in post-order (left, right, node)."""
        pending = [self.root] if self.root else []
        reverse: list[Any] = []
        while pending:
            node = pending.pop()
            reverse.append(node.key)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        yield from reversed(reverse)

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __len__(self) -> int:
        return self._size