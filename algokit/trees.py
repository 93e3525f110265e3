"""Unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """A binary search tree that keeps smaller values on the left.

    With ``allow_duplicates`` an equal value goes to the right subtree;
    without it an equal value is ignored.
    """

    def __init__(self, allow_duplicates: bool = True) -> None:
        self.allow_duplicates = allow_duplicates
        self._root: _Node | None = None
        self._size = 0

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False if it was rejected as a duplicate."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return True
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = _Node(value)
                    break
                current = current.left
            elif value > current.value or self.allow_duplicates:
                if current.right is None:
                    current.right = _Node(value)
                    break
                current = current.right
            else:
                return False
        self._size += 1
        return True

    def inorder(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.value
            current = current.right

    def preorder(self) -> Iterator[Any]:
        """Yield each node's value before those of its subtrees."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        current = self._root
        while current is not None:
            if value == current.value:
                return True
            current = current.left if value < current.value else current.right
        return False