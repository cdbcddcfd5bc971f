import numpy as np
import pytest

torch = pytest.importorskip("torch")

from cachematrix import CachedMatrix, InversionError, StructureError, cache_solve, invert
from cachematrix.lu_torch import LUPyTorch


@pytest.fixture
def A_torch(A):
    return torch.from_numpy(A)


def test_lu_decomposition(A_torch):
    lu = LUPyTorch(device="cpu")
    P, L, U = lu.lu_decomposition(A_torch)
    assert torch.allclose(P @ L @ U, A_torch)


def test_invert_tensor(A_torch):
    A_inv = invert(A_torch, method="torch")

    assert isinstance(A_inv, torch.Tensor)
    I = A_torch @ A_inv
    assert torch.norm(I - torch.eye(5, dtype=A_inv.dtype)).item() < 1e-9


def test_invert_numpy_with_torch_backend(A):
    A_inv = invert(A, method="torch")
    assert isinstance(A_inv, np.ndarray)
    assert np.allclose(A_inv, np.linalg.inv(A), atol=1e-9)


def test_invert_tensor_with_numpy_backend(A_torch):
    A_inv = invert(A_torch, method="numpy")
    assert isinstance(A_inv, torch.Tensor)
    assert torch.allclose(A_inv, torch.linalg.inv(A_torch))


def test_singular_tensor():
    with pytest.raises(InversionError):
        invert(torch.ones(3, 3, dtype=torch.float64), method="torch")


def test_cached_tensor(A_torch):
    cm = CachedMatrix(A_torch)
    inv = cache_solve(cm, method="torch", device="cpu")
    assert cache_solve(cm) is inv

    with pytest.raises(StructureError, match="not square"):
        cm.set(torch.ones(2, 3))
    with pytest.raises(StructureError, match="not a matrix"):
        cm.set(torch.ones(2, 2, dtype=torch.bool))
    assert cm.get() is A_torch


def test_empty_tensor():
    cm = CachedMatrix(torch.empty(0, 0))
    assert tuple(cache_solve(cm, method="torch").shape) == (0, 0)


def test_complex_tensor_rejected():
    C = torch.tensor([[1+1j, 0], [0, 2+1j]])
    with pytest.raises(StructureError, match="not a matrix"):
        CachedMatrix(C)
    with pytest.raises(InversionError, match="does not support complex matrices"):
        invert(C, method="torch")


def test_complex_numpy_with_torch_backend():
    with pytest.raises(InversionError, match="does not support complex matrices"):
        invert(np.array([[1+1j, 0], [0, 2j]]), method="torch")
