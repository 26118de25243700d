"""
LINALGtools: Complex Matrix Operations

This module provides products between complex scalars (Z), dense complex
matrices (Zmat) and complex diagonal matrices (Zdiagmat), plus the Hermitian
products A^H A and A A^H. Each product has a Numba kernel and a NumPy
fallback; both return freshly allocated results and never modify operands.

These are the building blocks used by Schur and QR style decompositions.

"""

import numbers
import numpy as np
from .core_functions import *
from .types import Z, Zmat, Zdiagmat
from ..exceptions import NonConformableError


class Times:
    """
    A class to compute products of complex matrices.
    No data objects. Only methods.

    """

    def __init__(
        self,
        use_numba: bool = True) -> None:
        """
        Initialize the Times class.

        Args:
            use_numba (bool, optional): use Numba core functions. Defaults to True.
        """
        self.use_numba = use_numba


    def o(
        self,
        a,
        b):
        """
        Product of any supported pair of operands, dispatched on type.

        Args:
            a: Z (or any Python or NumPy scalar), Zmat or Zdiagmat
            b: Zmat or Zdiagmat

        Returns:
            Zmat or Zdiagmat: the product ab
        """
        if isinstance(a, (Z, numbers.Number)):
            if isinstance(b, Zmat):
                return self.scalar_times_matrix(a, b)
            if isinstance(b, Zdiagmat):
                return self.scalar_times_diagonal(a, b)
        elif isinstance(a, Zmat):
            if isinstance(b, Zmat):
                return self.matrix_times_matrix(a, b)
            if isinstance(b, Zdiagmat):
                return self.matrix_times_diagonal(a, b)
        elif isinstance(a, Zdiagmat):
            if isinstance(b, Zmat):
                return self.diagonal_times_matrix(a, b)
            if isinstance(b, Zdiagmat):
                return self.diagonal_times_diagonal(a, b)
        raise TypeError(
            f"Unsupported operands for product: {type(a).__name__} and {type(b).__name__}")


    def scalar_times_matrix(
        self,
        z,
        A: Zmat) -> Zmat:
        """
        Compute zA.

        Args:
            z (Z or complex): complex scalar
            A (Zmat): complex matrix

        Returns:
            Zmat: zA, same shape as A
        """
        z = Z(z)
        if self.use_numba:
            B = Zmat(A.nr, A.nc)
            scalar_times_matrix_nb_core(z.re, z.im, A.re, A.im, B.re, B.im)
            return B
        return Zmat(*scalar_times_matrix_np_core(z.re, z.im, A.re, A.im))


    def matrix_times_matrix(
        self,
        A: Zmat,
        B: Zmat) -> Zmat:
        """
        Compute AB.

        Args:
            A (Zmat): left operand (nr, nk)
            B (Zmat): right operand (nk, nc)

        Returns:
            Zmat: AB of shape (A.nr, B.nc)

        Raises:
            NonConformableError: if A.nc != B.nr
        """
        if A.nc != B.nr:
            raise NonConformableError("matrix_times_matrix")
        if self.use_numba:
            C = Zmat(A.nr, B.nc)
            matrix_times_matrix_nb_core(A.re, A.im, B.re, B.im, C.re, C.im)
            return C
        return Zmat(*matrix_times_matrix_np_core(A.re, A.im, B.re, B.im))


    def hermitian_aha(
        self,
        A: Zmat) -> Zmat:
        """
        Compute A^H A.

        The result is Hermitian by construction: the Numba kernel accumulates
        only the upper triangle, the NumPy fallback forms the full product and
        keeps its upper triangle. Either way the diagonal imaginary part is
        exactly zero and the lower triangle is the conjugate of the upper one.

        Args:
            A (Zmat): complex matrix (nr, nc)

        Returns:
            Zmat: A^H A of shape (nc, nc)
        """
        if self.use_numba:
            C = Zmat(A.nc, A.nc)
            hermitian_aha_nb_core(A.re, A.im, C.re, C.im)
            return C
        return Zmat(*hermitian_aha_np_core(A.re, A.im))


    def hermitian_aah(
        self,
        A: Zmat) -> Zmat:
        """
        Compute A A^H, with the same symmetric treatment as hermitian_aha.

        Args:
            A (Zmat): complex matrix (nr, nc)

        Returns:
            Zmat: A A^H of shape (nr, nr)
        """
        if self.use_numba:
            C = Zmat(A.nr, A.nr)
            hermitian_aah_nb_core(A.re, A.im, C.re, C.im)
            return C
        return Zmat(*hermitian_aah_np_core(A.re, A.im))


    def scalar_times_diagonal(
        self,
        z,
        D: Zdiagmat) -> Zdiagmat:
        """Compute zD"""
        z = Z(z)
        if self.use_numba:
            B = Zdiagmat(D.order)
            scalar_times_diagonal_nb_core(z.re, z.im, D.re, D.im, B.re, B.im)
            return B
        return Zdiagmat(*scalar_times_matrix_np_core(z.re, z.im, D.re, D.im))


    def diagonal_times_diagonal(
        self,
        D1: Zdiagmat,
        D2: Zdiagmat) -> Zdiagmat:
        """
        Compute D1 D2.

        Raises:
            NonConformableError: if the orders differ
        """
        if D1.order != D2.order:
            raise NonConformableError("diagonal_times_diagonal")
        if self.use_numba:
            D3 = Zdiagmat(D1.order)
            diagonal_times_diagonal_nb_core(D1.re, D1.im, D2.re, D2.im, D3.re, D3.im)
            return D3
        return Zdiagmat(*diagonal_times_diagonal_np_core(D1.re, D1.im, D2.re, D2.im))


    def diagonal_times_matrix(
        self,
        D: Zdiagmat,
        A: Zmat) -> Zmat:
        """
        Compute DA, scaling row i of A by D[i].

        Raises:
            NonConformableError: if D.order != A.nr
        """
        if D.order != A.nr:
            raise NonConformableError("diagonal_times_matrix")
        if self.use_numba:
            B = Zmat(A.nr, A.nc)
            diagonal_times_matrix_nb_core(D.re, D.im, A.re, A.im, B.re, B.im)
            return B
        return Zmat(*diagonal_times_matrix_np_core(D.re, D.im, A.re, A.im))


    def matrix_times_diagonal(
        self,
        A: Zmat,
        D: Zdiagmat) -> Zmat:
        """
        Compute AD, scaling column j of A by D[j].

        Raises:
            NonConformableError: if D.order != A.nc
        """
        if D.order != A.nc:
            raise NonConformableError("matrix_times_diagonal")
        if self.use_numba:
            B = Zmat(A.nr, A.nc)
            matrix_times_diagonal_nb_core(D.re, D.im, A.re, A.im, B.re, B.im)
            return B
        return Zmat(*matrix_times_diagonal_np_core(D.re, D.im, A.re, A.im))
