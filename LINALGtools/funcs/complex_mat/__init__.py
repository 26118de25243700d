"""
LINALGtools Complex Matrix Module

Provides complex scalar, dense complex matrix and complex diagonal matrix types
together with every product between them, including the Hermitian products
A^H A and A A^H used by Schur and QR based eigensolvers.

Features:
- Numba-compiled kernels with NumPy fallbacks
- Hermitian products computed from the upper triangle only, exactly Hermitian
- Conformity checks on every product
"""

# Import main classes
from .operations import Times
from .types import Z, Zmat, Zdiagmat

# Import core functions for advanced users
from .core_functions import (
    scalar_times_matrix_nb_core,
    matrix_times_matrix_nb_core,
    hermitian_aha_nb_core,
    hermitian_aah_nb_core,
    scalar_times_diagonal_nb_core,
    diagonal_times_diagonal_nb_core,
    diagonal_times_matrix_nb_core,
    matrix_times_diagonal_nb_core,
    scalar_times_matrix_np_core,
    matrix_times_matrix_np_core,
    hermitian_aha_np_core,
    hermitian_aah_np_core,
    diagonal_times_diagonal_np_core,
    diagonal_times_matrix_np_core,
    matrix_times_diagonal_np_core
)

# Define public API
__all__ = [
    'Times',
    'Z',
    'Zmat',
    'Zdiagmat',
    # Core functions for advanced use
    'scalar_times_matrix_nb_core',
    'matrix_times_matrix_nb_core',
    'hermitian_aha_nb_core',
    'hermitian_aah_nb_core',
    'scalar_times_diagonal_nb_core',
    'diagonal_times_diagonal_nb_core',
    'diagonal_times_matrix_nb_core',
    'matrix_times_diagonal_nb_core',
    'scalar_times_matrix_np_core',
    'matrix_times_matrix_np_core',
    'hermitian_aha_np_core',
    'hermitian_aah_np_core',
    'diagonal_times_diagonal_np_core',
    'diagonal_times_matrix_np_core',
    'matrix_times_diagonal_np_core'
]
