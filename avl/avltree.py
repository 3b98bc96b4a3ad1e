from __future__ import annotations
from typing import Generic, Iterator, List, Optional, Tuple
from uuid import uuid4 as uuid
from structlog import get_logger
from avl import const, rebalance as rbl, traversal, types, util
from avl.errors import InvalidInput
from avl.node import Node, update

_LOGGER = get_logger()


class AVLTree(Generic[types.T]):
    """avl tree implementation"""

    def __init__(
        self,
        comparison_key: types.ComparisonKey = lambda x: x,
        name: Optional[str] = None,
    ):
        self.name = name or str(uuid())
        self.logger = _LOGGER.bind(name=self.name)
        self._cmp = comparison_key
        self._root: Optional[Node[types.T]] = None
        self._size = 0

    @property
    def root(self) -> Optional[Node[types.T]]:
        """top node, for inspecting the structure directly"""

        return self._root

    def insert(self, value: types.T) -> None:
        """add value. values comparing equal to a stored one are ignored"""

        self._check(value, "insert")
        self._root = self._insert(self._root, value)

    def _insert(self, root: Optional[Node[types.T]], value: types.T) -> Node[types.T]:
        """bst insert then rebalance on the way back up"""

        if root is None:
            self._size += 1
            return Node[types.T](data=value)

        cmp = self._compare(value, root.data)

        if cmp == 0:
            self.logger.debug("avltree.insert.duplicate", value=value)
            return root
        if cmp < 0:
            root.left = self._insert(root.left, value)
        else:
            root.right = self._insert(root.right, value)

        return rbl.rebalance(update(root))

    def remove(self, value: types.T) -> Optional[types.T]:
        """remove value, returning the stored element or None if absent"""

        self._check(value, "remove")
        self._root, removed = self._remove(self._root, value)

        if removed is None:
            self.logger.debug("avltree.remove.missing", value=value)

        return removed

    def _remove(
        self, root: Optional[Node[types.T]], value: types.T
    ) -> Tuple[Optional[Node[types.T]], Optional[types.T]]:
        """
        bst delete then rebalance on the way back up. a node with two children
        takes over its in-order successor's data and the successor is unlinked
        instead
        """

        if root is None:
            return None, None

        cmp = self._compare(value, root.data)

        if cmp < 0:
            root.left, removed = self._remove(root.left, value)
        elif cmp > 0:
            root.right, removed = self._remove(root.right, value)
        else:
            self._size -= 1
            removed = root.data

            if root.left is None:
                return root.right, removed
            if root.right is None:
                return root.left, removed

            root.right, root.data = self._unlink_successor(root.right)

        return rbl.rebalance(update(root)), removed

    def _unlink_successor(
        self, root: Node[types.T]
    ) -> Tuple[Optional[Node[types.T]], types.T]:
        """
        detach the leftmost node of this subtree, re-deriving every node on
        its path. returns the new subtree root and the detached data
        """

        if root.left is None:
            return root.right, root.data

        root.left, data = self._unlink_successor(root.left)
        return rbl.rebalance(update(root)), data

    def get(self, value: types.T) -> Optional[types.T]:
        """stored element comparing equal to value, if any"""

        self._check(value, "get")
        return self._find(value)

    def _find(self, value: types.T) -> Optional[types.T]:
        """bst search"""

        node = self._root

        while node is not None:
            cmp = self._compare(value, node.data)

            if cmp == 0:
                return node.data

            node = node.left if cmp < 0 else node.right

        return None

    def contains(self, value: types.T) -> bool:
        """membership test"""

        self._check(value, "contains")
        return self._find(value) is not None

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        return self._size

    def height(self) -> int:
        """cached height of the root, -1 when empty"""

        if self._root is None:
            return const.EMPTY_HEIGHT

        return self._root.height

    def clear(self) -> None:
        """drop every node"""

        self.logger.info("avltree.clear", size=self._size)
        self._root = None
        self._size = 0

    def preorder(self) -> List[types.T]:
        return traversal.preorder(self._root)

    def inorder(self) -> List[types.T]:
        return traversal.inorder(self._root)

    def postorder(self) -> List[types.T]:
        return traversal.postorder(self._root)

    def levelorder(self) -> List[types.T]:
        return traversal.levelorder(self._root)

    def is_valid(self) -> bool:
        """recheck every invariant from scratch. O(n log n), for debugging"""

        return util.is_valid(self._root, self._size, self._cmp)

    def _compare(self, one: types.T, other: types.T) -> int:
        return util.compare(self._cmp, one, other)

    def _check(self, value: Optional[types.T], operation: str) -> None:
        """reject missing values"""

        if value is None:
            self.logger.warning("avltree.invalid_input", operation=operation)
            raise InvalidInput(f"{operation} requires a value, got None")

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: types.T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[types.T]:
        return iter(self.inorder())

    def __repr__(self) -> str:
        return f"AVLTree(name={self.name!r}, size={self._size}, height={self.height()})"
