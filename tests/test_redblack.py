import random

import pytest

from dsakit.redblack import Color, RedBlackTree, main


def _black_height(node, parent=None):
    if node is None:
        return 1
    assert node.parent is parent
    if node.color is Color.RED:
        for child in (node.left, node.right):
            assert child is None or child.color is Color.BLACK
    left = _black_height(node.left, node)
    right = _black_height(node.right, node)
    assert left == right
    return left + (node.color is Color.BLACK)


def _check(tree):
    root = tree._root
    assert root is None or root.color is Color.BLACK
    _black_height(root)


def test_demo_render():
    tree = RedBlackTree([10, 20, 30, 5, 15, 25, 1])
    assert tree.render() == "1[R] 5[B] 10[R] 15[B] 20[B] 25[R] 30[B]"


def test_zigzag_insert_is_rebalanced():
    tree = RedBlackTree([10, 5, 7])
    assert tree.inorder() == [(5, Color.RED), (7, Color.BLACK), (10, Color.RED)]
    _check(tree)


def test_single_value_is_black():
    assert RedBlackTree([42]).inorder() == [(42, Color.BLACK)]


@pytest.mark.parametrize(
    "values",
    [list(range(100)), list(range(100, 0, -1)), random.Random(7).sample(range(1000), 200)],
)
def test_properties_hold(values):
    tree = RedBlackTree(values)
    assert [value for value, _ in tree.inorder()] == sorted(values)
    _check(tree)


def test_duplicates_are_kept():
    tree = RedBlackTree([5, 5, 5])
    assert [value for value, _ in tree.inorder()] == [5, 5, 5]
    _check(tree)


def test_empty_tree():
    tree = RedBlackTree()
    assert tree.inorder() == []
    assert tree.render() == ""


def test_main_prints_listing(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Inorder:")
    assert "30[B]" in out