# rangetree/core/node_arena.py

import numpy as np
from typing import Optional, Tuple

NO_CHILD = -1


class NodeArena:
    """
    Flat storage for tree nodes addressed by integer index.

    Every node owns a closed interval [lo, hi] and an aggregate value.
    Children are stored as indices into the same arena, NO_CHILD when absent.
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.lo = np.zeros(capacity, dtype=np.int64)
        self.hi = np.zeros(capacity, dtype=np.int64)
        self.left = np.full(capacity, NO_CHILD, dtype=np.int64)
        self.right = np.full(capacity, NO_CHILD, dtype=np.int64)
        # Object dtype keeps Python ints, so sums never overflow
        self.value = np.zeros(capacity, dtype=object)
        self.size = 0

    def allocate(self, lo: int, hi: int) -> int:
        """Reserve the next free slot for the interval [lo, hi]."""
        if self.size >= self.capacity:
            raise RuntimeError(f"Node arena is full ({self.capacity} nodes)")
        node = self.size
        self.lo[node] = lo
        self.hi[node] = hi
        self.size += 1
        return node

    def bounds(self, node: int) -> Tuple[int, int]:
        return int(self.lo[node]), int(self.hi[node])

    def children(self, node: int) -> Tuple[Optional[int], Optional[int]]:
        left = int(self.left[node])
        right = int(self.right[node])
        return (
            None if left == NO_CHILD else left,
            None if right == NO_CHILD else right
        )

    def set_children(self, node: int, left: int, right: int):
        self.left[node] = left
        self.right[node] = right

    def is_leaf(self, node: int) -> bool:
        return bool(self.left[node] == NO_CHILD and self.right[node] == NO_CHILD)

    def __len__(self):
        return self.size
