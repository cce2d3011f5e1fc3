# rangetree/core/errors.py

class InvalidInputError(ValueError):
    """Raised when a tree cannot be built from the given input."""


class IndexOutOfRangeError(IndexError):
    """Raised by strict point access outside [0, n-1]."""
