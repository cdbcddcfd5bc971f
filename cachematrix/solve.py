"""Matrix inversion primitive.

``invert`` picks a backend by name and forwards every other keyword argument
to it untouched. Backends work on NumPy arrays (or nested lists, for the pure
Python ones); the ``torch`` backend works on tensors. The result comes back as
the same array type the caller passed in.
"""
import sys

import numpy as np

from . import gauss_jordan, lu_decomposition, lu_numpy
from .errors import InversionError


def _numpy_inv(A):
    return np.linalg.inv(A)


def _lu_inv(A, tol=1e-12):
    return lu_numpy.invert_matrix(A, tol=tol)


def _lu_python_inv(A, tol=1e-12):
    return np.array(lu_decomposition.invert_matrix(A.tolist(), tol=tol))


def _gauss_jordan_inv(A, tol=1e-12):
    return np.array(gauss_jordan.invert_matrix(A.tolist(), tol=tol))


def _torch_inv(A, device=None, tol=1e-12):
    try:
        from . import lu_torch
    except ImportError as exc:
        raise InversionError(
            "the 'torch' method needs PyTorch (pip install cachematrix[torch])"
        ) from exc
    import torch

    return lu_torch.invert_matrix(torch.as_tensor(A), device=device, tol=tol)


METHODS = {
    "numpy": _numpy_inv,
    "lu": _lu_inv,
    "lu_python": _lu_python_inv,
    "gauss_jordan": _gauss_jordan_inv,
    "torch": _torch_inv,
}

# Backends that take and return tensors instead of NumPy arrays
TENSOR_METHODS = {"torch"}

# Backends that only handle real matrices
REAL_METHODS = {"lu", "lu_python", "gauss_jordan", "torch"}

_BACKEND_ERRORS = (ValueError, ZeroDivisionError, np.linalg.LinAlgError, RuntimeError)


def is_tensor(m):
    """True if ``m`` is a torch.Tensor. Never imports torch itself."""
    torch = sys.modules.get("torch")
    return torch is not None and isinstance(m, torch.Tensor)


def _to_numpy(m):
    if is_tensor(m):
        return m.detach().cpu().numpy()
    return np.asanyarray(m)


def _like(result, original):
    """Convert a backend result back to the caller's array type."""
    if is_tensor(original):
        import torch

        if is_tensor(result):
            return result
        return torch.from_numpy(np.asarray(result)).to(original.device)
    result = _to_numpy(result)
    # keep ndarray subclasses such as np.matrix
    if isinstance(original, np.ndarray) and type(result) is not type(original):
        result = result.view(type(original))
    return result


def _is_complex(m):
    if is_tensor(m):
        return m.is_complex()
    return np.iscomplexobj(m)


def invert(matrix, method="numpy", **options):
    """Return the inverse of a square matrix.

    Args:
        matrix: 2-D NumPy array, array-like, or torch.Tensor.
        method: backend name, one of ``METHODS``.
        **options: forwarded to the backend (``tol`` for the LU and
            Gauss-Jordan backends, ``device`` and ``tol`` for ``torch``).

    Raises:
        InversionError: unknown method, non-square or non-numeric input,
            complex input to a real-only backend, or a singular matrix.
        TypeError: an option the backend does not accept.
    """
    try:
        backend = METHODS[method]
    except KeyError:
        raise InversionError(
            f"unknown inversion method {method!r} (expected one of {', '.join(sorted(METHODS))})"
        ) from None

    shape = tuple(matrix.shape) if is_tensor(matrix) else np.shape(matrix)
    if len(shape) != 2 or shape[0] != shape[1]:
        raise InversionError("not square")

    A = matrix if is_tensor(matrix) else _to_numpy(matrix)
    if not is_tensor(A) and A.dtype.kind not in "iufc":
        raise InversionError(f"not a numeric matrix (dtype {A.dtype})")
    if method in REAL_METHODS and _is_complex(A):
        raise InversionError(f"the {method!r} method does not support complex matrices")

    # 0x0 is its own inverse
    if shape == (0, 0):
        if is_tensor(matrix):
            return matrix.new_empty((0, 0))
        return _like(np.empty((0, 0)), matrix)

    if is_tensor(A) and method not in TENSOR_METHODS:
        A = _to_numpy(A)
    try:
        result = backend(A, **options)
    except _BACKEND_ERRORS as exc:
        raise InversionError(str(exc)) from exc
    return _like(result, matrix)
