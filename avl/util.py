from math import ceil, log2
from typing import Any, Optional
from avl import const, types
from avl.node import Node
from avl.traversal import inorder


def compare(comparison_key: types.ComparisonKey, one: Any, other: Any) -> int:
    """simple comparator"""

    keyone, keyother = comparison_key(one), comparison_key(other)

    if keyone == keyother:
        return 0
    if keyone < keyother:
        return -1

    return 1


def height_bound(size: int) -> int:
    """max height an avl tree holding size elements can reach"""

    return ceil(const.HEIGHT_BOUND_FACTOR * log2(size + 2))


def recompute_height(node: Optional[Node]) -> int:
    """height from scratch, ignores cached values"""

    if node is None:
        return const.EMPTY_HEIGHT

    return 1 + max(recompute_height(node.left), recompute_height(node.right))


def _is_valid_node(node: Optional[Node]) -> bool:
    """cached height/balance match reality and balance is in range"""

    if node is None:
        return True

    lheight = recompute_height(node.left)
    rheight = recompute_height(node.right)
    balance = lheight - rheight

    if node.height != 1 + max(lheight, rheight) or node.balance_factor != balance:
        return False
    if abs(balance) > const.MAX_IMBALANCE:
        return False

    return _is_valid_node(node.left) and _is_valid_node(node.right)


def is_valid(
    root: Optional[Node], size: int, comparison_key: types.ComparisonKey
) -> bool:
    """check order, balance, heights, duplicates and size of a whole tree"""

    values = inorder(root)

    if len(values) != size:
        return False

    for prev, cur in zip(values, values[1:]):
        if compare(comparison_key, prev, cur) >= 0:
            return False

    if recompute_height(root) > height_bound(size):
        return False

    return _is_valid_node(root)
