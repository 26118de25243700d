"""
LINALGtools Matrix Module

Real dense matrix storage consumed by the eigenvalue driver.
"""

from .dense import DenseMatrix

__all__ = [
    'DenseMatrix'
]
