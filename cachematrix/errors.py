"""Exception types raised by cachematrix.

Each one also derives from the closest builtin so callers can catch
``ValueError``/``TypeError``/``ArithmeticError`` without importing this module.
"""


class CacheMatrixError(Exception):
    """Base class for all cachematrix errors."""


class StructureError(CacheMatrixError, ValueError):
    """The value is not a square numeric matrix."""


class InversionError(CacheMatrixError, ArithmeticError):
    """The inversion backend could not invert the matrix."""


class InterfaceError(CacheMatrixError, TypeError):
    """The object does not expose the cached-matrix operations."""
