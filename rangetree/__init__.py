# rangetree/__init__.py

__version__ = '0.1.0'

from .core import (
    RangeAggregateTree,
    Trace,
    HighlightTag,
    InvalidInputError,
    IndexOutOfRangeError
)
from .utils.logger import get_logger, setup_logger
from . import core
from . import utils
from . import demo

__all__ = [
    'core',
    'utils',
    'demo',
    'RangeAggregateTree',
    'Trace',
    'HighlightTag',
    'InvalidInputError',
    'IndexOutOfRangeError',
    'get_logger',
    'setup_logger'
]
