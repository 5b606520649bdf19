"""Binary search tree threaded in inorder, walked without a stack or recursion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ThreadedNode:
    """A node whose empty child links are threads to its inorder neighbours.

    When ``lthread`` is true, ``left`` is the inorder predecessor (or None at the
    far left); when ``rthread`` is true, ``right`` is the inorder successor (or
    None at the far right). Otherwise the link is a real child.
    """

    key: int
    left: ThreadedNode | None = None
    right: ThreadedNode | None = None
    lthread: bool = True
    rthread: bool = True


class ThreadedBST:
    """An inorder-threaded binary search tree; equal keys go to the right."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self.root: ThreadedNode | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Add ``key`` as a new leaf, keeping the threads intact."""
        node = ThreadedNode(key)
        if self.root is None:
            self.root = node
            return
        parent = self.root
        while True:
            if key < parent.key:
                if parent.lthread:
                    break
                parent = parent.left
            else:
                if parent.rthread:
                    break
                parent = parent.right
        if key < parent.key:
            node.left = parent.left
            node.right = parent
            parent.left = node
            parent.lthread = False
        else:
            node.right = parent.right
            node.left = parent
            parent.right = node
            parent.rthread = False

    def delete(self, key: int) -> None:
        """Remove one node holding ``key``; raises KeyError if there is none."""
        parent: ThreadedNode | None = None
        current = self.root
        while current is not None and current.key != key:
            parent = current
            if key < current.key:
                if current.lthread:
                    break
                current = current.left
            else:
                if current.rthread:
                    break
                current = current.right
        if current is None or current.key != key:
            raise KeyError(key)

        if current.lthread and current.rthread:
            self._remove_leaf(parent, current)
        elif current.lthread or current.rthread:
            self._remove_single_child(parent, current)
        else:
            self._remove_with_two_children(current)

    def _remove_leaf(self, parent: ThreadedNode | None, node: ThreadedNode) -> None:
        if parent is None:
            self.root = None
        elif parent.left is node:
            parent.left = node.left
            parent.lthread = True
        else:
            parent.right = node.right
            parent.rthread = True

    def _remove_single_child(
        self, parent: ThreadedNode | None, node: ThreadedNode
    ) -> None:
        if not node.lthread:
            child = node.left
            last = child
            while not last.rthread:
                last = last.right
            last.right = node.right
        else:
            child = node.right
            first = child
            while not first.lthread:
                first = first.left
            first.left = node.left
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    @staticmethod
    def _remove_with_two_children(node: ThreadedNode) -> None:
        successor_parent = node
        successor = node.right
        while not successor.lthread:
            successor_parent = successor
            successor = successor.left
        node.key = successor.key

        if successor.rthread:
            if successor_parent is node:
                node.right = successor.right
                node.rthread = True
            else:
                successor_parent.left = successor.left
                successor_parent.lthread = True
            return

        # The successor's right subtree takes its place; the first node of that
        # subtree threaded back to the successor and must now thread to its predecessor.
        first = successor.right
        while not first.lthread:
            first = first.left
        first.left = successor.left
        if successor_parent is node:
            node.right = successor.right
        else:
            successor_parent.left = successor.right

    def _inorder_nodes(self) -> Iterator[ThreadedNode]:
        current = self.root
        if current is None:
            return
        while not current.lthread:
            current = current.left
        while current is not None:
            yield current
            if current.rthread:
                current = current.right
            else:
                current = current.right
                while current is not None and not current.lthread:
                    current = current.left

    def inorder(self) -> list[int]:
        """Keys in ascending order, found by following threads."""
        return [node.key for node in self._inorder_nodes()]

    def preorder(self) -> list[int]:
        """Keys in node, left, right order, found by following threads."""
        result: list[int] = []
        current = self.root
        while current is not None:
            result.append(current.key)
            if not current.lthread:
                current = current.left
            elif not current.rthread:
                current = current.right
            else:
                while current is not None and current.rthread:
                    current = current.right
                if current is not None:
                    current = current.right
        return result