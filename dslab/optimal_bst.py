"""Optimal binary search tree from success and failure search probabilities."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class OBSTNode:
    """A node of the optimal search tree."""

    key: int
    left: OBSTNode | None = None
    right: OBSTNode | None = None


def build_optimal_bst(
    keys: Sequence[int],
    success_probs: Sequence[float],
    failure_probs: Sequence[float],
) -> tuple[float, OBSTNode | None]:
    """Build the tree with the least expected search cost.

    ``keys`` must be sorted; ``success_probs`` has one entry per key and
    ``failure_probs`` one more. Returns the minimum cost and the tree's root.
    """
    n = len(keys)
    if len(success_probs) != n:
        raise ValueError("need one success probability per key")
    if len(failure_probs) != n + 1:
        raise ValueError("need one more failure probability than keys")

    prefix_s = [0.0] * (n + 1)
    prefix_u = [0.0] * (n + 2)
    for i in range(1, n + 1):
        prefix_s[i] = prefix_s[i - 1] + success_probs[i - 1]
        prefix_u[i] = prefix_u[i - 1] + failure_probs[i - 1]
    prefix_u[n + 1] = prefix_u[n] + failure_probs[n]

    cost = [[0.0] * (n + 1) for _ in range(n + 2)]
    choice = [[-1] * (n + 1) for _ in range(n + 2)]
    for i in range(1, n + 2):
        cost[i][i - 1] = failure_probs[i - 1]

    for length in range(1, n + 1):
        for i in range(1, n - length + 2):
            j = i + length - 1
            weight = (prefix_s[j] - prefix_s[i - 1]) + (prefix_u[j + 1] - prefix_u[i - 1])
            best = math.inf
            for k in range(i, j + 1):
                candidate = cost[i][k - 1] + cost[k + 1][j] + weight
                if candidate < best:
                    best = candidate
                    choice[i][j] = k
            cost[i][j] = best

    def build(i: int, j: int) -> OBSTNode | None:
        if i > j:
            return None
        k = choice[i][j]
        return OBSTNode(keys[k - 1], build(i, k - 1), build(k + 1, j))

    return cost[1][n], build(1, n)


def render_tree(root: OBSTNode | None) -> str:
    """Preorder listing, one key per line, indented two spaces per level."""

    def lines(node: OBSTNode | None, level: int) -> Iterator[str]:
        if node is None:
            return
        yield " " * (2 * level) + f"{node.key}\n"
        yield from lines(node.left, level + 1)
        yield from lines(node.right, level + 1)

    return "".join(lines(root, 0))