# rangetree/demo/__init__.py

from .operations import Operation, default_operations, build_operations
from .driver import StepThroughDriver

__all__ = ['Operation', 'default_operations', 'build_operations', 'StepThroughDriver']
