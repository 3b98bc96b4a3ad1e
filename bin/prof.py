from cProfile import run
from avl import AVLTree

tree = AVLTree[int]()

run(
    "[tree.insert(i) for i in range(0, 100000)]",
    filename="tmp/avl.prof",
)
