"""
Range-aggregate (segment) tree over a fixed-size integer array.
Supports range sum queries, point assignment and eager range increments.
"""

import logging
import operator
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple

from .errors import IndexOutOfRangeError, InvalidInputError
from .highlight import HighlightTag, VisualizationState
from .node_arena import NodeArena

logger = logging.getLogger(__name__)


class Trace(NamedTuple):
    """Outcome of one traversal: its result and the tag of every visited node."""
    result: Optional[int]
    tags: Dict[int, HighlightTag]


def _as_int(value, what: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidInputError(f"{what} must be an integer, got {value!r}") from None


def _ordered(l: int, r: int) -> Tuple[int, int]:
    return (r, l) if l > r else (l, r)


class RangeAggregateTree:
    """Sum segment tree with nodes stored in a NodeArena.

    Every internal node covering [lo, hi] is split at mid = (lo + hi) // 2,
    the left child taking [lo, mid] and the right child [mid + 1, hi].
    Each traversal returns the tags it assigned and merges them into
    `self.visuals` for renderers.
    """

    def __init__(self, values: Iterable[int]):
        """Build the tree.

        Args:
            values (iterable of int): Initial array, must not be empty

        Raises:
            InvalidInputError: If the array is empty or holds non-integers
        """
        try:
            data = [_as_int(v, "Array element") for v in values]
        except TypeError:
            raise InvalidInputError(f"Expected an iterable of integers, got {values!r}") from None
        if not data:
            raise InvalidInputError("Cannot build a range tree from an empty array")

        self.n = len(data)
        self.arena = NodeArena(2 * self.n - 1)
        self.root = self._build(0, self.n - 1, data)
        self.visuals = VisualizationState(self.arena.capacity)

        logger.debug(f"Built range tree over {self.n} elements ({len(self.arena)} nodes)")

    @classmethod
    def build(cls, values: Iterable[int]) -> 'RangeAggregateTree':
        return cls(values)

    def _build(self, lo: int, hi: int, data: List[int]) -> int:
        node = self.arena.allocate(lo, hi)
        if lo == hi:
            self.arena.value[node] = data[lo]
            return node

        mid = (lo + hi) // 2
        left = self._build(lo, mid, data)
        right = self._build(mid + 1, hi, data)
        self.arena.set_children(node, left, right)
        self._recalc(node)
        return node

    def _recalc(self, node: int):
        """Recompute an internal node's value from its children."""
        if self.arena.is_leaf(node):
            return
        left, right = self.arena.children(node)
        left_val = self.arena.value[left] if left is not None else 0
        right_val = self.arena.value[right] if right is not None else 0
        self.arena.value[node] = left_val + right_val

    # ------------------------------------------------------------------
    # Query

    def _query(self, node: int, l: int, r: int, tags: Dict[int, HighlightTag]) -> int:
        lo, hi = self.arena.bounds(node)

        if r < lo or hi < l:
            tags[node] = HighlightTag.OUTSIDE
            return 0

        if l <= lo and hi <= r:
            tags[node] = HighlightTag.CONTAINED
            return self.arena.value[node]

        tags[node] = HighlightTag.PARTIAL
        total = 0
        for child in self.arena.children(node):
            if child is not None:
                total += self._query(child, l, r, tags)
        return total

    def trace_query(self, l: int, r: int) -> Trace:
        """Sum of elements in [min(l, r), max(l, r)], with the visited tags.

        Indices outside [0, n-1] are tolerated and contribute nothing.
        """
        l, r = _ordered(_as_int(l, "Index"), _as_int(r, "Index"))
        tags = {}
        result = self._query(self.root, l, r, tags)
        self.visuals.apply(tags)
        return Trace(int(result), tags)

    def query(self, l: int, r: int) -> int:
        """Returns arr[l] + ... + arr[r] (bounds inclusive, any order)."""
        return self.trace_query(l, r).result

    # ------------------------------------------------------------------
    # Point update

    def _update(self, node: int, idx: int, new_value: int, tags: Dict[int, HighlightTag]):
        lo, hi = self.arena.bounds(node)

        if idx < lo or idx > hi:
            tags[node] = HighlightTag.OUTSIDE
            return

        if lo == hi:
            tags[node] = HighlightTag.CONTAINED
            self.arena.value[node] = new_value
            return

        tags[node] = HighlightTag.PARTIAL
        left, right = self.arena.children(node)
        if left is not None and idx <= self.arena.hi[left]:
            self._update(left, idx, new_value, tags)
        elif right is not None:
            self._update(right, idx, new_value, tags)

        self._recalc(node)

    def trace_update(self, idx: int, new_value: int, strict: bool = False) -> Trace:
        """Set arr[idx] = new_value and return the visited tags.

        Args:
            idx (int): Array index to assign
            new_value (int): Value to store
            strict (bool): Raise instead of ignoring an index outside [0, n-1]

        Raises:
            IndexOutOfRangeError: If strict and idx is out of range
        """
        idx = _as_int(idx, "Index")
        new_value = _as_int(new_value, "Value")
        if not 0 <= idx < self.n:
            if strict:
                raise IndexOutOfRangeError(f"Index {idx} out of range for array of size {self.n}")
            logger.warning(f"Ignoring update at index {idx}: outside [0, {self.n - 1}]")

        tags = {}
        self._update(self.root, idx, new_value, tags)
        self.visuals.apply(tags)
        logger.debug(f"Set index {idx} to {new_value}")
        return Trace(None, tags)

    def update(self, idx: int, new_value: int, strict: bool = False):
        self.trace_update(idx, new_value, strict=strict)

    # ------------------------------------------------------------------
    # Range update

    def _update_range(self, node: int, l: int, r: int, delta: int, tags: Dict[int, HighlightTag]):
        lo, hi = self.arena.bounds(node)

        if r < lo or l > hi:
            tags[node] = HighlightTag.OUTSIDE
            return

        if lo == hi:
            tags[node] = HighlightTag.CONTAINED
            self.arena.value[node] += delta
            return

        # No lazy increments: always walk down to the affected leaves
        tags[node] = HighlightTag.PARTIAL
        for child in self.arena.children(node):
            if child is not None:
                self._update_range(child, l, r, delta, tags)

        self._recalc(node)

    def trace_update_range(self, l: int, r: int, delta: int) -> Trace:
        """Add delta to every element in [min(l, r), max(l, r)] ∩ [0, n-1]."""
        l, r = _ordered(_as_int(l, "Index"), _as_int(r, "Index"))
        delta = _as_int(delta, "Delta")
        tags = {}
        self._update_range(self.root, l, r, delta, tags)
        self.visuals.apply(tags)
        logger.debug(f"Added {delta} to range [{l}, {r}]")
        return Trace(None, tags)

    def update_range(self, l: int, r: int, delta: int):
        self.trace_update_range(l, r, delta)

    # ------------------------------------------------------------------
    # Read access

    def reset_visuals(self):
        """Set every node's highlight tag back to DEFAULT."""
        self.visuals.reset()

    def get_leaves(self) -> List[int]:
        """Current leaf values, left to right."""
        leaves = []
        self._collect_leaves(self.root, leaves)
        return leaves

    def _collect_leaves(self, node: int, leaves: List[int]):
        if self.arena.is_leaf(node):
            leaves.append(int(self.arena.value[node]))
            return
        for child in self.arena.children(node):
            if child is not None:
                self._collect_leaves(child, leaves)

    def bounds(self, node: int) -> Tuple[int, int]:
        return self.arena.bounds(node)

    def value(self, node: int) -> int:
        return int(self.arena.value[node])

    def children(self, node: int) -> Tuple[Optional[int], Optional[int]]:
        return self.arena.children(node)

    def is_leaf(self, node: int) -> bool:
        return self.arena.is_leaf(node)

    def tag(self, node: int) -> HighlightTag:
        return self.visuals[node]

    def iter_nodes(self) -> Iterator[int]:
        """Yield node indices in pre-order (root first)."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            left, right = self.arena.children(node)
            if right is not None:
                stack.append(right)
            if left is not None:
                stack.append(left)

    def depth(self) -> int:
        """Number of levels, 1 for a single leaf."""
        def _depth(node):
            if self.arena.is_leaf(node):
                return 1
            return 1 + max(_depth(child) for child in self.arena.children(node) if child is not None)
        return _depth(self.root)

    @property
    def node_count(self) -> int:
        return len(self.arena)

    @property
    def total(self) -> int:
        return self.value(self.root)

    def check_invariants(self):
        """Assert interval splits and sums hold for every node."""
        for node in self.iter_nodes():
            lo, hi = self.bounds(node)
            assert lo <= hi, f"Node {node} has empty interval [{lo}, {hi}]"
            left, right = self.children(node)
            if lo == hi:
                assert left is None and right is None, f"Leaf {node} has children"
                continue
            assert left is not None and right is not None, f"Internal node {node} is missing a child"
            mid = (lo + hi) // 2
            assert self.bounds(left) == (lo, mid), f"Bad left split under node {node}"
            assert self.bounds(right) == (mid + 1, hi), f"Bad right split under node {node}"
            expected = self.value(left) + self.value(right)
            assert self.value(node) == expected, (
                f"Node {node} [{lo}, {hi}] holds {self.value(node)}, children sum to {expected}"
            )

    def __getitem__(self, idx: int) -> int:
        """Current value at array index idx."""
        idx = _as_int(idx, "Index")
        if not 0 <= idx < self.n:
            raise IndexOutOfRangeError(f"Index {idx} out of range for array of size {self.n}")
        node = self.root
        while not self.arena.is_leaf(node):
            left, right = self.arena.children(node)
            node = left if idx <= self.arena.hi[left] else right
        return int(self.arena.value[node])

    def __len__(self):
        return self.n

    def __repr__(self):
        return f"RangeAggregateTree(n={self.n}, total={self.total})"
