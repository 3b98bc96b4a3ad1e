from collections import deque
from typing import Deque, List, Optional
from avl import types
from avl.node import Node


def preorder(root: Optional[Node[types.T]]) -> List[types.T]:
    """node, left, right"""

    result: List[types.T] = []
    _preorder(root, result)
    return result


def _preorder(node: Optional[Node[types.T]], result: List[types.T]) -> None:
    if node is None:
        return

    result.append(node.data)
    _preorder(node.left, result)
    _preorder(node.right, result)


def inorder(root: Optional[Node[types.T]]) -> List[types.T]:
    """left, node, right. ascending order"""

    result: List[types.T] = []
    _inorder(root, result)
    return result


def _inorder(node: Optional[Node[types.T]], result: List[types.T]) -> None:
    if node is None:
        return

    _inorder(node.left, result)
    result.append(node.data)
    _inorder(node.right, result)


def postorder(root: Optional[Node[types.T]]) -> List[types.T]:
    """left, right, node"""

    result: List[types.T] = []
    _postorder(root, result)
    return result


def _postorder(node: Optional[Node[types.T]], result: List[types.T]) -> None:
    if node is None:
        return

    _postorder(node.left, result)
    _postorder(node.right, result)
    result.append(node.data)


def levelorder(root: Optional[Node[types.T]]) -> List[types.T]:
    """breadth first, left to right within a level"""

    result: List[types.T] = []

    if root is None:
        return result

    queue: Deque[Node[types.T]] = deque([root])

    while queue:
        node = queue.popleft()
        result.append(node.data)

        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)

    return result
