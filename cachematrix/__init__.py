from .errors import CacheMatrixError, InterfaceError, InversionError, StructureError
from .handle import CachedMatrix, cache_solve, make_cache_matrix, validate_structure
from .solve import METHODS, invert

__version__ = "0.1.0"

__all__ = [
    "CacheMatrixError",
    "CachedMatrix",
    "InterfaceError",
    "InversionError",
    "METHODS",
    "StructureError",
    "cache_solve",
    "invert",
    "make_cache_matrix",
    "validate_structure",
]
