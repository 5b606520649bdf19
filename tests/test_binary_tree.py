import pytest

from dslab.binary_tree import BinaryTree

SAMPLE = [1, 2, 4, -1, -1, 5, -1, -1, 3, -1, 6, -1, -1]
FULL = [10, 20, 40, -1, -1, 50, -1, -1, 30, -1, -1]
CHAIN = [7, -1, 8, -1, 9, -1, 11, -1, -1]


def values_of(description):
    return [v for v in description if v != -1]


def test_preorder_matches_description():
    tree = BinaryTree.from_preorder(SAMPLE)
    assert tree.preorder() == values_of(SAMPLE)


def test_inorder_of_sample():
    tree = BinaryTree.from_preorder(SAMPLE)
    assert tree.inorder() == [4, 2, 5, 1, 3, 6]


def test_postorder_of_sample():
    tree = BinaryTree.from_preorder(SAMPLE)
    assert tree.postorder() == [4, 5, 2, 6, 3, 1]


@pytest.mark.parametrize("description", [SAMPLE, FULL, CHAIN, [5, -1, -1], [-1]])
def test_iterative_traversals_agree_with_recursive(description):
    tree = BinaryTree.from_preorder(description)
    assert tree.inorder_iterative() == tree.inorder()
    assert tree.preorder_iterative() == tree.preorder()
    assert tree.postorder_iterative() == tree.postorder()


def test_empty_tree():
    tree = BinaryTree.from_preorder([-1])
    assert tree.inorder() == []
    assert tree.height() == -1
    assert tree.count_leaves() + tree.count_internal() == 0


def test_truncated_description_raises():
    with pytest.raises(ValueError):
        BinaryTree.from_preorder([1, 2, -1])


def test_extra_values_are_ignored():
    tree = BinaryTree.from_preorder([5, -1, -1, 6, 7])
    assert tree.preorder() == [5]


def test_height_of_sample():
    assert BinaryTree.from_preorder(SAMPLE).height() == 2


def test_height_of_chain_is_node_count_minus_one():
    tree = BinaryTree.from_preorder(CHAIN)
    assert tree.height() == len(values_of(CHAIN)) - 1


@pytest.mark.parametrize("description", [SAMPLE, FULL, CHAIN])
def test_leaves_plus_internal_is_node_count(description):
    tree = BinaryTree.from_preorder(description)
    assert tree.count_leaves() + tree.count_internal() == len(values_of(description))


def test_full_tree_has_one_more_leaf_than_internal_nodes():
    tree = BinaryTree.from_preorder(FULL)
    assert tree.count_leaves() == tree.count_internal() + 1


def test_mirror_reverses_inorder():
    tree = BinaryTree.from_preorder(SAMPLE)
    original = tree.inorder()
    tree.mirror()
    assert tree.inorder() == list(reversed(original))
    assert tree.height() == BinaryTree.from_preorder(SAMPLE).height()


def test_mirror_twice_restores_tree():
    tree = BinaryTree.from_preorder(SAMPLE)
    tree.mirror()
    tree.mirror()
    assert tree.preorder() == values_of(SAMPLE)
    assert tree.postorder() == BinaryTree.from_preorder(SAMPLE).postorder()


def test_copy_is_independent():
    tree = BinaryTree.from_preorder(SAMPLE)
    clone = tree.copy()
    assert clone.inorder() == tree.inorder()
    assert clone.root is not tree.root
    clone.mirror()
    assert tree.preorder() == values_of(SAMPLE)
    assert clone.inorder() == list(reversed(tree.inorder()))


@pytest.mark.parametrize("method", ["clear", "clear_iterative"])
def test_clear_empties_tree_but_not_copy(method):
    tree = BinaryTree.from_preorder(SAMPLE)
    clone = tree.copy()
    getattr(tree, method)()
    assert tree.root is None
    assert tree.inorder() == []
    assert clone.preorder() == values_of(SAMPLE)


@pytest.mark.parametrize("method", ["clear", "clear_iterative"])
def test_clear_detaches_nodes(method):
    tree = BinaryTree.from_preorder(SAMPLE)
    old_root = tree.root
    getattr(tree, method)()
    assert old_root.left is None and old_root.right is None