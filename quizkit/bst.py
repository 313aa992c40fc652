"""An unbalanced binary search tree of integers."""

from __future__ import annotations

from typing import Optional


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: int) -> None:
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class BinarySearchTree:
    """A set of distinct integers kept in an unbalanced binary search tree."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def add(self, value: int) -> bool:
        """Insert ``value``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(value)
            return True
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return True
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    return True
                node = node.right
            else:
                return False

    def remove(self, value: int) -> bool:
        """Remove ``value``; return False if it was not present."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            # Take the value of the leftmost node of the right subtree,
            # then unlink that node instead.
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            self._replace(successor_parent, successor, successor.right)
        else:
            child = node.left if node.left is not None else node.right
            self._replace(parent, node, child)
        return True

    def contains(self, value: int) -> bool:
        """Return True if ``value`` is in the tree."""
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def _replace(
        self, parent: Optional[_Node], node: _Node, child: Optional[_Node]
    ) -> None:
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child