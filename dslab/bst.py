"""Binary search tree that can be mirrored and still searched, trimmed and queried."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class MirrorableBST:
    """A BST whose left/right roles can be swapped; lookups follow the current orientation.

    Insertion always places values not greater than a node to its left, whatever the
    orientation.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: _Node | None = None
        self.mirrored = False
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value``; equal values go to the left subtree."""
        node = _Node(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value <= current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def inorder(self) -> list[int]:
        """Values in left, node, right order."""
        result: list[int] = []
        stack: list[_Node] = []
        current = self.root
        while stack or current is not None:
            if current is not None:
                stack.append(current)
                current = current.left
            else:
                current = stack.pop()
                result.append(current.value)
                current = current.right
        return result

    def mirror(self) -> None:
        """Swap children at every node and flip the orientation."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            node.left, node.right = node.right, node.left
            stack.extend(child for child in (node.left, node.right) if child is not None)
        self.mirrored = not self.mirrored

    def _goes_left(self, value: int, node_value: int) -> bool:
        return value > node_value if self.mirrored else value < node_value

    def _goes_right(self, value: int, node_value: int) -> bool:
        return value < node_value if self.mirrored else value > node_value

    def search(self, value: int) -> tuple[bool, list[int]]:
        """Look up ``value``; return whether it was found and the values compared with."""
        path: list[int] = []
        current = self.root
        while current is not None:
            path.append(current.value)
            if current.value == value:
                return True, path
            current = current.left if self._goes_left(value, current.value) else current.right
        return False, path

    def _extreme(self, leftwards: bool) -> int:
        if self.root is None:
            raise ValueError("tree is empty")
        node = self.root
        while True:
            child = node.left if leftwards else node.right
            if child is None:
                return node.value
            node = child

    def minimum(self) -> int:
        """Smallest value; raises ValueError if the tree is empty."""
        return self._extreme(leftwards=not self.mirrored)

    def maximum(self) -> int:
        """Largest value; raises ValueError if the tree is empty."""
        return self._extreme(leftwards=self.mirrored)

    def delete(self, value: int) -> bool:
        """Remove one occurrence of ``value``; return whether anything was removed."""
        self.root, removed = self._delete(self.root, value)
        return removed

    def _delete(self, node: _Node | None, value: int) -> tuple[_Node | None, bool]:
        if node is None:
            return None, False
        if self._goes_left(value, node.value):
            node.left, removed = self._delete(node.left, value)
            return node, removed
        if self._goes_right(value, node.value):
            node.right, removed = self._delete(node.right, value)
            return node, removed
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        replacement = node.right
        while replacement.left is not None:
            replacement = replacement.left
        node.value = replacement.value
        node.right, _ = self._delete(node.right, replacement.value)
        return node, True