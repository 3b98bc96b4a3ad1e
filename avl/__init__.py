from .avltree import AVLTree
from .node import Node
from .errors import InvalidInput

__all__ = [
    "AVLTree",
    "Node",
    "InvalidInput",
]
