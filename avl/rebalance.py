"""
rotation primitives. every function takes the root of a subtree whose children
are already up to date and returns the (possibly new) root of that subtree
"""

from avl import const
from avl.node import Node, update


def rotate_right(node: Node) -> Node:
    """r rotate. left child becomes the subtree root"""

    left = node.left
    if not left:
        return node
    node.left = left.right
    left.right = node
    update(node)
    update(left)
    return left


def rotate_left(node: Node) -> Node:
    """l rotate. right child becomes the subtree root"""

    right = node.right
    if not right:
        return node
    node.right = right.left
    right.left = node
    update(node)
    update(right)
    return right


def rotate_left_right(node: Node) -> Node:
    """left child is right heavy"""

    if node.left:
        node.left = rotate_left(node.left)
        update(node)

    return rotate_right(node)


def rotate_right_left(node: Node) -> Node:
    """right child is left heavy"""

    if node.right:
        node.right = rotate_right(node.right)
        update(node)

    return rotate_left(node)


def rebalance(node: Node) -> Node:
    """pick a rotation if balance factor is +/- 2"""

    if node.balance_factor > const.MAX_IMBALANCE:
        if node.left and node.left.balance_factor < 0:
            return rotate_left_right(node)

        return rotate_right(node)

    if node.balance_factor < -const.MAX_IMBALANCE:
        if node.right and node.right.balance_factor > 0:
            return rotate_right_left(node)

        return rotate_left(node)

    return node
