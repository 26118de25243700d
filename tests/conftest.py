"""Shared fixtures for the LINALGtools test suite."""
import numpy as np
import pytest

from LINALGtools.funcs.complex_mat import Times, Zmat, Zdiagmat
from LINALGtools.funcs.matrix import DenseMatrix


# ---------------------------------------------------------------------------
# Complex matrix fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(params=[True, False], ids=["numba", "numpy"])
def times(request):
    """Times instance for both the Numba and the NumPy code path."""
    return Times(use_numba=request.param)


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def random_zmat(rng):
    """Factory for random complex matrices of a given shape."""
    def make(nr, nc):
        return Zmat(rng.standard_normal((nr, nc)), rng.standard_normal((nr, nc)))
    return make


@pytest.fixture
def random_zdiagmat(rng):
    def make(order):
        return Zdiagmat(rng.standard_normal(order), rng.standard_normal(order))
    return make


# ---------------------------------------------------------------------------
# Real matrix fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def small_matrix():
    """Symmetric 3x3 matrix with spectrum {-1, 1, 2}."""
    return DenseMatrix.from_values(3, 3, 0, 1, -1, 1, 1, 0, -1, 0, 1)


@pytest.fixture
def random_symmetric_matrix(rng):
    """Factory for random symmetric matrices with zero diagonal."""
    def make(n):
        S = DenseMatrix.dense(n, n)
        for i in range(n):
            for j in range(i):
                value = rng.random() * 23
                S.put(i, j, value)
                S.put(j, i, value)
        return S
    return make
