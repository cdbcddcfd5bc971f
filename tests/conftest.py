import numpy as np
import pytest

import cachematrix.handle


@pytest.fixture
def A():
    np.random.seed(0)
    return np.random.rand(5, 5) + 5*np.eye(5)


@pytest.fixture
def invert_calls(monkeypatch):
    """Count calls to the inversion primitive made by CachedMatrix."""
    calls = []
    real_invert = cachematrix.handle.invert

    def counting_invert(matrix, **options):
        calls.append(options)
        return real_invert(matrix, **options)

    monkeypatch.setattr(cachematrix.handle, "invert", counting_invert)
    return calls
