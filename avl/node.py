from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional
from avl import const, types


@dataclass
class Node(Generic[types.T]):
    """tree nodes"""

    data: types.T
    left: Optional[Node[types.T]] = None
    right: Optional[Node[types.T]] = None
    height: int = const.LEAF_HEIGHT
    balance_factor: int = 0


def height(node: Optional[Node]) -> int:
    """cached height, -1 for an empty subtree"""

    if node is None:
        return const.EMPTY_HEIGHT

    return node.height


def update(node: Node) -> Node:
    """re-derive height and balance factor from the children"""

    lheight = height(node.left)
    rheight = height(node.right)
    node.height = 1 + max(lheight, rheight)
    node.balance_factor = lheight - rheight

    return node
