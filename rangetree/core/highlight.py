# rangetree/core/highlight.py

from enum import Enum
from typing import Dict

import numpy as np


class HighlightTag(Enum):
    """Classification of a node relative to the most recent operation."""
    DEFAULT = 0
    CONTAINED = 1
    OUTSIDE = 2
    PARTIAL = 3


class VisualizationState:
    """Current highlight tag of every node, as read by a renderer."""

    def __init__(self, size: int):
        self.tags = np.full(size, HighlightTag.DEFAULT.value, dtype=np.int8)

    def reset(self):
        """Set every node back to DEFAULT."""
        self.tags.fill(HighlightTag.DEFAULT.value)

    def apply(self, tags: Dict[int, HighlightTag]):
        """Overwrite the tags of the nodes visited by a traversal."""
        for node, tag in tags.items():
            self.tags[node] = tag.value

    def as_dict(self) -> Dict[int, HighlightTag]:
        return {node: HighlightTag(int(code)) for node, code in enumerate(self.tags)}

    def __getitem__(self, node: int) -> HighlightTag:
        return HighlightTag(int(self.tags[node]))

    def __len__(self):
        return len(self.tags)
