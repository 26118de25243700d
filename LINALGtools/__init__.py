"""
LINALGtools

Dense eigenvalue extraction and complex matrix products, JIT compiled with Numba.
"""

from .funcs.complex_mat import Times, Z, Zmat, Zdiagmat
from .funcs.eigen_vals import AllEigenvalues, Eigenvalues, Eigenpair, run_all
from .funcs.matrix import DenseMatrix
from .funcs.exceptions import (
    InvalidDimensionsError,
    NonConformableError,
    DecompositionError,
    ComplexSpectrumError,
    ComplexSpectrumWarning
)

__version__ = "0.1.0"

__all__ = [
    'Times',
    'Z',
    'Zmat',
    'Zdiagmat',
    'AllEigenvalues',
    'Eigenvalues',
    'Eigenpair',
    'run_all',
    'DenseMatrix',
    'InvalidDimensionsError',
    'NonConformableError',
    'DecompositionError',
    'ComplexSpectrumError',
    'ComplexSpectrumWarning'
]
