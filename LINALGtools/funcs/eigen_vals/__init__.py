"""
LINALGtools Eigenvalue Module

Full-spectrum eigenvalue extraction for dense real matrices. Wraps a dense
non-symmetric eigensolver (dgeev) behind a routine interface, handles its
workspace query, and returns the nev largest eigenvalues in ascending order
together with their eigenvectors.

Features:
- Workspace query with a static fallback when the query is unsupported
- Stable ascending sort of eigenpairs, ties kept in routine order
- Explicit policy for complex spectra (warn, raise or ignore)
- Thread-pool batch runner for many independent matrices
"""

# Import main classes
from .operations import Eigenvalues, AllEigenvalues, Eigenpair, run_all
from .routines import EigenRoutine, ScipyLapackRoutine

# Import core functions for advanced users
from .core_functions import (
    workspace_fallback_np_core,
    split_vectors_np_core,
    select_largest_np_core,
    postprocess_np_core
)

# Define public API
__all__ = [
    'Eigenvalues',
    'AllEigenvalues',
    'Eigenpair',
    'run_all',
    'EigenRoutine',
    'ScipyLapackRoutine',
    # Core functions for advanced use
    'workspace_fallback_np_core',
    'split_vectors_np_core',
    'select_largest_np_core',
    'postprocess_np_core'
]
