# rangetree/core/__init__.py

from .errors import InvalidInputError, IndexOutOfRangeError
from .highlight import HighlightTag, VisualizationState
from .node_arena import NodeArena
from .segment_tree import RangeAggregateTree, Trace

__all__ = [
    'InvalidInputError',
    'IndexOutOfRangeError',
    'HighlightTag',
    'VisualizationState',
    'NodeArena',
    'RangeAggregateTree',
    'Trace'
]
