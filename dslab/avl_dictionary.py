"""Dictionary of keywords and meanings kept in a self-balancing AVL tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class _Node:
    keyword: str
    meaning: str
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _refresh(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _refresh(y)
    _refresh(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _refresh(x)
    _refresh(y)
    return y


class AVLDictionary:
    """Keyword-to-meaning mapping ordered by keyword and balanced by rotations."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _insert(
        self, node: _Node | None, keyword: str, meaning: str, rotations: list[tuple[str, str]]
    ) -> _Node:
        if node is None:
            self._size += 1
            return _Node(keyword, meaning)
        if keyword < node.keyword:
            node.left = self._insert(node.left, keyword, meaning, rotations)
        elif keyword > node.keyword:
            node.right = self._insert(node.right, keyword, meaning, rotations)
        else:
            node.meaning = meaning
            return node

        _refresh(node)
        balance = _balance(node)
        if balance > 1 and keyword < node.left.keyword:
            rotations.append(("LL", node.keyword))
            return _rotate_right(node)
        if balance < -1 and keyword > node.right.keyword:
            rotations.append(("RR", node.keyword))
            return _rotate_left(node)
        if balance > 1 and keyword > node.left.keyword:
            rotations.append(("LR", node.keyword))
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and keyword < node.right.keyword:
            rotations.append(("RL", node.keyword))
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def add(self, keyword: str, meaning: str) -> list[tuple[str, str]]:
        """Insert or overwrite a word.

        Returns the rotations performed as ``(kind, keyword)`` pairs, where kind
        is LL, RR, LR or RL and keyword is the node the rotation was done at.
        """
        rotations: list[tuple[str, str]] = []
        self._root = self._insert(self._root, keyword, meaning, rotations)
        return rotations

    def update(self, keyword: str, meaning: str) -> None:
        """Set the meaning of ``keyword``, adding it if it is not present."""
        self._root = self._insert(self._root, keyword, meaning, [])

    def _walk(self, node: _Node | None, descending: bool) -> Iterator[tuple[str, str]]:
        if node is None:
            return
        first, second = (node.right, node.left) if descending else (node.left, node.right)
        yield from self._walk(first, descending)
        yield node.keyword, node.meaning
        yield from self._walk(second, descending)

    def items(self) -> list[tuple[str, str]]:
        """All ``(keyword, meaning)`` pairs in ascending keyword order."""
        return list(self._walk(self._root, descending=False))

    def reversed_items(self) -> list[tuple[str, str]]:
        """All ``(keyword, meaning)`` pairs in descending keyword order."""
        return list(self._walk(self._root, descending=True))

    def find(self, keyword: str) -> tuple[str | None, int]:
        """Return the meaning (or None) and the number of nodes visited, empty links included."""
        comparisons = 0
        node = self._root
        while True:
            comparisons += 1
            if node is None:
                return None, comparisons
            if node.keyword == keyword:
                return node.meaning, comparisons
            node = node.left if keyword < node.keyword else node.right

    def render(self) -> str:
        """Preorder outline of the tree with each node's balance factor."""

        def lines(node: _Node | None, level: int) -> Iterator[str]:
            if node is None:
                return
            prefix = " " * (4 * level) + ("|-- " if level > 0 else "")
            yield f"{prefix}{node.keyword} (BF: {_balance(node)})\n"
            yield from lines(node.left, level + 1)
            yield from lines(node.right, level + 1)

        return "".join(lines(self._root, 0))