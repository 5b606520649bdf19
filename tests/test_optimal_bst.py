import pytest

from dslab.optimal_bst import OBSTNode, build_optimal_bst, render_tree


def inorder(node):
    if node is None:
        return []
    return inorder(node.left) + [node.key] + inorder(node.right)


def test_single_key_cost_and_tree():
    cost, root = build_optimal_bst([5], [0.5], [0.25, 0.25])
    assert cost == pytest.approx(1.5)
    assert root.key == 5
    assert root.left is None and root.right is None


def test_no_keys_gives_empty_tree_with_failure_cost():
    cost, root = build_optimal_bst([], [], [0.4])
    assert root is None
    assert cost == pytest.approx(0.4)


def test_tree_keeps_keys_in_order():
    keys = [10, 20, 30, 40]
    cost, root = build_optimal_bst(
        keys, [0.1, 0.2, 0.4, 0.3], [0.05, 0.1, 0.05, 0.05, 0.05]
    )
    assert inorder(root) == keys
    assert cost > 0


def test_heavily_searched_key_becomes_root():
    _, root = build_optimal_bst([1, 2, 3], [0.01, 0.01, 0.9], [0.0, 0.0, 0.0, 0.0])
    assert root.key == 3


def test_more_probability_never_lowers_cost():
    keys = [1, 2, 3]
    low, _ = build_optimal_bst(keys, [0.1, 0.1, 0.1], [0.05] * 4)
    high, _ = build_optimal_bst(keys, [0.2, 0.1, 0.1], [0.05] * 4)
    assert high >= low


@pytest.mark.parametrize(
    "success, failure",
    [([0.5], [0.1, 0.1]), ([0.5, 0.5], [0.1]), ([0.5, 0.5], [0.1, 0.1])],
)
def test_mismatched_lengths_raise(success, failure):
    with pytest.raises(ValueError):
        build_optimal_bst([1, 2], success, failure)


def test_render_tree_indents_by_depth():
    root = OBSTNode(2, OBSTNode(1), OBSTNode(3))
    assert render_tree(root) == "2\n  1\n  3\n"
    assert render_tree(None) == ""


def test_render_of_built_tree_lists_every_key():
    keys = [10, 20, 30, 40]
    _, root = build_optimal_bst(keys, [0.25] * 4, [0.0] * 5)
    lines = render_tree(root).splitlines()
    assert sorted(int(line) for line in lines) == keys
    assert not lines[0].startswith(" ")