"""A square matrix that remembers its inverse.

Inverting is expensive, so :class:`CachedMatrix` computes the inverse on the
first request and hands back the stored result afterwards. Installing a new
matrix with :meth:`CachedMatrix.set` drops the stored inverse, even if the new
matrix has the same values as the old one.

    a = CachedMatrix(np.array([[2.0, 0.0], [0.0, 4.0]]))
    cache_solve(a)    # computed
    cache_solve(a)    # served from the cache
    a.set(np.eye(3))  # cache dropped
"""
import numpy as np

from .errors import InterfaceError, StructureError
from .solve import invert, is_tensor

HANDLE_OPERATIONS = ("set", "get", "getinverse")


def validate_structure(m):
    """Raise StructureError unless ``m`` is a square 2-D real numeric array."""
    if is_tensor(m):
        import torch

        numeric = m.dtype != torch.bool and not m.dtype.is_complex
    elif isinstance(m, np.ndarray):
        # signed, unsigned and floating kinds only; timedelta64 is kind "m"
        numeric = m.dtype.kind in "iuf"
    else:
        raise StructureError("not a matrix")

    if m.ndim != 2 or not numeric:
        raise StructureError("not a matrix")
    if m.shape[0] != m.shape[1]:
        raise StructureError("not square")


class CachedMatrix:
    """
    Holds one square matrix and, once computed, its inverse.

    Construction only validates the matrix. The inverse is computed by the
    first ``getinverse`` call, so a singular matrix is accepted here and only
    fails when someone asks for its inverse.

    Args:
        x: square 2-D NumPy array or torch.Tensor. Defaults to an empty 0x0
            matrix.

    Raises:
        StructureError: if ``x`` is not a square numeric matrix.
    """

    def __init__(self, x=None):
        if x is None:
            x = np.empty((0, 0))
        validate_structure(x)
        self._matrix = x
        self._inverse = None

    def set(self, new_matrix):
        """Replace the matrix and drop the cached inverse.

        Validation runs first; on StructureError the handle is unchanged.
        """
        validate_structure(new_matrix)
        self._matrix = new_matrix
        self._inverse = None

    def get(self):
        """Return the current matrix (not a copy)."""
        return self._matrix

    def getinverse(self, **options):
        """Return the inverse of the current matrix, computing it on a miss.

        ``options`` go to :func:`cachematrix.solve.invert` on a miss and are
        ignored on a hit.

        Raises:
            InversionError: the matrix is singular or the backend failed.
                The cache stays empty, so a later call retries.
        """
        if self._inverse is None:
            self._inverse = invert(self._matrix, **options)
        return self._inverse

    @property
    def is_cached(self):
        return self._inverse is not None

    def __repr__(self):
        shape = "x".join(str(d) for d in self._matrix.shape)
        state = "cached" if self.is_cached else "not cached"
        return f"<CachedMatrix {shape}, inverse {state}>"


def make_cache_matrix(x=None):
    return CachedMatrix(x)


def cache_solve(x, **options):
    """Return the inverse of the matrix held by ``x``.

    ``x`` may be any object with callable ``set``, ``get`` and ``getinverse``
    attributes. Errors from ``x.getinverse`` propagate unchanged.

    Raises:
        InterfaceError: ``x`` lacks one of those operations.
    """
    missing = [name for name in HANDLE_OPERATIONS if not callable(getattr(x, name, None))]
    if missing:
        raise InterfaceError(
            f"{type(x).__name__} is not a cached matrix (missing {', '.join(missing)})"
        )
    return x.getinverse(**options)
