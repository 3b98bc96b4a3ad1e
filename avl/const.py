EMPTY_HEIGHT = -1
LEAF_HEIGHT = 0
MAX_IMBALANCE = 1

# avl trees never exceed ~1.44 * log2(n + 2) levels
HEIGHT_BOUND_FACTOR = 1.44
