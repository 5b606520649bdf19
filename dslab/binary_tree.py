"""Plain binary tree built from a preorder description, with traversals and statistics."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

EMPTY = -1
"""Value that marks a missing child in a preorder description."""


@dataclass(eq=False)
class TreeNode:
    """A node holding an integer and links to two children."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


class BinaryTree:
    """A binary tree with recursive and iterative operations."""

    def __init__(self, root: TreeNode | None = None) -> None:
        self.root = root

    @classmethod
    def from_preorder(cls, values: Iterable[int]) -> BinaryTree:
        """Build a tree from values given in preorder, with -1 marking an absent child.

        Values left over once the tree is complete are ignored.
        """
        stream = iter(values)

        def build() -> TreeNode | None:
            try:
                value = next(stream)
            except StopIteration:
                raise ValueError(
                    "preorder description ended before the tree was complete"
                ) from None
            if value == EMPTY:
                return None
            node = TreeNode(value)
            node.left = build()
            node.right = build()
            return node

        return cls(build())

    # Recursive traversals

    def inorder(self) -> list[int]:
        """Values in left, node, right order."""

        def walk(node: TreeNode | None) -> Iterator[int]:
            if node is None:
                return
            yield from walk(node.left)
            yield node.data
            yield from walk(node.right)

        return list(walk(self.root))

    def preorder(self) -> list[int]:
        """Values in node, left, right order."""

        def walk(node: TreeNode | None) -> Iterator[int]:
            if node is None:
                return
            yield node.data
            yield from walk(node.left)
            yield from walk(node.right)

        return list(walk(self.root))

    def postorder(self) -> list[int]:
        """Values in left, right, node order."""

        def walk(node: TreeNode | None) -> Iterator[int]:
            if node is None:
                return
            yield from walk(node.left)
            yield from walk(node.right)
            yield node.data

        return list(walk(self.root))

    # Iterative traversals

    def inorder_iterative(self) -> list[int]:
        """Inorder traversal using an explicit stack."""
        result: list[int] = []
        stack: list[TreeNode] = []
        current = self.root
        while stack or current is not None:
            if current is not None:
                stack.append(current)
                current = current.left
            else:
                current = stack.pop()
                result.append(current.data)
                current = current.right
        return result

    def preorder_iterative(self) -> list[int]:
        """Preorder traversal using an explicit stack."""
        if self.root is None:
            return []
        result: list[int] = []
        stack = [self.root]
        while stack:
            current = stack.pop()
            result.append(current.data)
            if current.right is not None:
                stack.append(current.right)
            if current.left is not None:
                stack.append(current.left)
        return result

    def postorder_iterative(self) -> list[int]:
        """Postorder traversal using two explicit stacks."""
        if self.root is None:
            return []
        pending = [self.root]
        output: list[TreeNode] = []
        while pending:
            current = pending.pop()
            output.append(current)
            if current.left is not None:
                pending.append(current.left)
            if current.right is not None:
                pending.append(current.right)
        return [node.data for node in reversed(output)]

    # Structure

    def mirror(self) -> None:
        """Swap the left and right children at every node."""

        def swap(node: TreeNode | None) -> None:
            if node is None:
                return
            node.left, node.right = node.right, node.left
            swap(node.left)
            swap(node.right)

        swap(self.root)

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path; -1 for an empty tree."""

        def measure(node: TreeNode | None) -> int:
            if node is None:
                return -1
            return 1 + max(measure(node.left), measure(node.right))

        return measure(self.root)

    def count_leaves(self) -> int:
        """Number of nodes without children."""

        def count(node: TreeNode | None) -> int:
            if node is None:
                return 0
            if node.left is None and node.right is None:
                return 1
            return count(node.left) + count(node.right)

        return count(self.root)

    def count_internal(self) -> int:
        """Number of nodes with at least one child."""

        def count(node: TreeNode | None) -> int:
            if node is None:
                return 0
            own = 1 if node.left is not None or node.right is not None else 0
            return own + count(node.left) + count(node.right)

        return count(self.root)

    def clear(self) -> None:
        """Detach every node, children before parents, recursively."""

        def erase(node: TreeNode | None) -> None:
            if node is None:
                return
            erase(node.left)
            erase(node.right)
            node.left = node.right = None

        erase(self.root)
        self.root = None

    def clear_iterative(self) -> None:
        """Detach every node using an explicit stack."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
            node.left = node.right = None
        self.root = None

    def copy(self) -> BinaryTree:
        """Return an independent deep copy of this tree."""

        def duplicate(node: TreeNode | None) -> TreeNode | None:
            if node is None:
                return None
            return TreeNode(node.data, duplicate(node.left), duplicate(node.right))

        return BinaryTree(duplicate(self.root))