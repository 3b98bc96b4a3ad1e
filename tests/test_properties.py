from random import Random
from typing import Optional
from pytest import mark
from avl import AVLTree
from avl.node import Node
from avl.util import height_bound

SEEDS = range(10)


def check(node: Optional[Node]) -> int:
    """recompute height from scratch and compare against cached fields"""

    if node is None:
        return -1

    lheight = check(node.left)
    rheight = check(node.right)

    assert node.height == 1 + max(lheight, rheight)
    assert node.balance_factor == lheight - rheight
    assert abs(node.balance_factor) <= 1

    return node.height


def check_tree(tree: AVLTree, expected: set):
    values = tree.inorder()

    assert values == sorted(expected)
    assert tree.size() == len(values)
    assert check(tree.root) == tree.height()
    assert tree.height() <= height_bound(tree.size())
    assert tree.is_valid()


@mark.parametrize("seed", SEEDS)
def test_random_operations(seed: int):
    rand = Random(seed)
    tree = AVLTree[int]()
    expected: set = set()

    for _ in range(500):
        value = rand.randint(0, 200)

        if rand.random() < 0.6:
            tree.insert(value)
            expected.add(value)
        else:
            removed = tree.remove(value)

            if value in expected:
                assert removed == value
                expected.remove(value)
            else:
                assert removed is None

        assert tree.contains(value) == (value in expected)

    check_tree(tree, expected)


@mark.parametrize("seed", SEEDS)
def test_insert_then_drain(seed: int):
    rand = Random(seed)
    values = rand.sample(range(10000), 300)
    tree = AVLTree[int]()

    for value in values:
        tree.insert(value)

    check_tree(tree, set(values))
    rand.shuffle(values)
    remaining = set(values)

    for value in values:
        size = tree.size()

        assert tree.remove(value) == value
        assert not tree.contains(value)
        assert tree.size() == size - 1

        remaining.remove(value)
        check_tree(tree, remaining)

    assert tree.is_empty()
    assert tree.height() == -1


@mark.parametrize("count", [1, 2, 3, 7, 15, 100, 1023, 1024])
def test_sequential_height(count: int):
    tree = AVLTree[int]()

    for i in range(count):
        tree.insert(i)

    check_tree(tree, set(range(count)))
