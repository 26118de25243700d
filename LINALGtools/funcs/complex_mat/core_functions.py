from numba import njit
import numpy as np
from .constants import *
from typing import Tuple

##########################################################################################
# Core numba JIT functions for complex matrix products
##########################################################################################


@njit(scalar_times_matrix_sig_64, fastmath=True, cache=True)
def scalar_times_matrix_nb_core(z_re, z_im, a_re, a_im, out_re, out_im):
    """
    Compute zA for a complex scalar z and a complex matrix A.

    Args:
        z_re, z_im: Real and imaginary part of the scalar
        a_re, a_im: Input matrix (nr, nc)
        out_re, out_im: Output matrix (nr, nc)
    """
    nr, nc = a_re.shape
    for i in range(nr):
        for j in range(nc):
            out_re[i, j] = z_re * a_re[i, j] - z_im * a_im[i, j]
            out_im[i, j] = z_im * a_re[i, j] + z_re * a_im[i, j]


@njit(matrix_times_matrix_sig_64, fastmath=True, cache=True)
def matrix_times_matrix_nb_core(a_re, a_im, b_re, b_im, out_re, out_im):
    """
    Compute AB for complex matrices A (nr, nk) and B (nk, nc).

    The output must be zero initialised; the k loop sits outside the j loop
    so that rows of B are streamed contiguously.

    Args:
        a_re, a_im: Left operand (nr, nk)
        b_re, b_im: Right operand (nk, nc)
        out_re, out_im: Output matrix (nr, nc)
    """
    nr, nk = a_re.shape
    nc = b_re.shape[1]
    for i in range(nr):
        for k in range(nk):
            ar = a_re[i, k]
            ai = a_im[i, k]
            for j in range(nc):
                out_re[i, j] += ar * b_re[k, j] - ai * b_im[k, j]
                out_im[i, j] += ai * b_re[k, j] + ar * b_im[k, j]


@njit(hermitian_sig_64, fastmath=True, cache=True)
def hermitian_aha_nb_core(a_re, a_im, out_re, out_im):
    """
    Compute A^H A (nc, nc) for a complex matrix A (nr, nc).

    Only the diagonal and the upper triangle are accumulated. The diagonal
    imaginary part is set to exactly zero and the lower triangle is the
    conjugate transpose of the upper one.

    Args:
        a_re, a_im: Input matrix (nr, nc)
        out_re, out_im: Output matrix (nc, nc), zero initialised
    """
    nr, nc = a_re.shape
    for k in range(nr):
        for i in range(nc):
            out_re[i, i] += a_re[k, i] * a_re[k, i] + a_im[k, i] * a_im[k, i]
            for j in range(i + 1, nc):
                out_re[i, j] += a_re[k, i] * a_re[k, j] + a_im[k, i] * a_im[k, j]
                out_im[i, j] += a_re[k, i] * a_im[k, j] - a_im[k, i] * a_re[k, j]
    for i in range(nc):
        out_im[i, i] = 0.0
        for j in range(i + 1, nc):
            out_re[j, i] = out_re[i, j]
            out_im[j, i] = -out_im[i, j]


@njit(hermitian_sig_64, fastmath=True, cache=True)
def hermitian_aah_nb_core(a_re, a_im, out_re, out_im):
    """
    Compute A A^H (nr, nr) for a complex matrix A (nr, nc).

    Same symmetric treatment as hermitian_aha_nb_core with the roles of
    rows and columns exchanged.

    Args:
        a_re, a_im: Input matrix (nr, nc)
        out_re, out_im: Output matrix (nr, nr), zero initialised
    """
    nr, nc = a_re.shape
    for i in range(nr):
        for k in range(nc):
            out_re[i, i] += a_re[i, k] * a_re[i, k] + a_im[i, k] * a_im[i, k]
        out_im[i, i] = 0.0
        for j in range(i + 1, nr):
            for k in range(nc):
                out_re[i, j] += a_re[i, k] * a_re[j, k] + a_im[i, k] * a_im[j, k]
                out_im[i, j] += a_im[i, k] * a_re[j, k] - a_re[i, k] * a_im[j, k]
            out_re[j, i] = out_re[i, j]
            out_im[j, i] = -out_im[i, j]


@njit(scalar_times_diagonal_sig_64, fastmath=True, cache=True)
def scalar_times_diagonal_nb_core(z_re, z_im, d_re, d_im, out_re, out_im):
    """
    Compute zD for a complex scalar z and a complex diagonal D.
    """
    for i in range(d_re.shape[0]):
        out_re[i] = z_re * d_re[i] - z_im * d_im[i]
        out_im[i] = z_im * d_re[i] + z_re * d_im[i]


@njit(diagonal_times_diagonal_sig_64, fastmath=True, cache=True)
def diagonal_times_diagonal_nb_core(d1_re, d1_im, d2_re, d2_im, out_re, out_im):
    """
    Compute D1 D2 for two complex diagonals of the same order.
    """
    for i in range(d1_re.shape[0]):
        out_re[i] = d1_re[i] * d2_re[i] - d1_im[i] * d2_im[i]
        out_im[i] = d1_re[i] * d2_im[i] + d1_im[i] * d2_re[i]


@njit(diagonal_matrix_sig_64, fastmath=True, cache=True)
def diagonal_times_matrix_nb_core(d_re, d_im, a_re, a_im, out_re, out_im):
    """
    Compute DA: row i of A is scaled by D[i].

    Args:
        d_re, d_im: Diagonal (nr,)
        a_re, a_im: Input matrix (nr, nc)
        out_re, out_im: Output matrix (nr, nc)
    """
    nr, nc = a_re.shape
    for i in range(nr):
        for j in range(nc):
            out_re[i, j] = d_re[i] * a_re[i, j] - d_im[i] * a_im[i, j]
            out_im[i, j] = d_re[i] * a_im[i, j] + d_im[i] * a_re[i, j]


@njit(diagonal_matrix_sig_64, fastmath=True, cache=True)
def matrix_times_diagonal_nb_core(d_re, d_im, a_re, a_im, out_re, out_im):
    """
    Compute AD: column j of A is scaled by D[j].

    Args:
        d_re, d_im: Diagonal (nc,)
        a_re, a_im: Input matrix (nr, nc)
        out_re, out_im: Output matrix (nr, nc)
    """
    nr, nc = a_re.shape
    for i in range(nr):
        for j in range(nc):
            out_re[i, j] = d_re[j] * a_re[i, j] - d_im[j] * a_im[i, j]
            out_im[i, j] = d_re[j] * a_im[i, j] + d_im[j] * a_re[i, j]


##########################################################################################
# Core numpy functions for complex matrix products
##########################################################################################


def scalar_times_matrix_np_core(
    z_re: float,
    z_im: float,
    a_re: np.ndarray,
    a_im: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute zA with vectorised numpy arithmetic.

    Returns:
        (out_re, out_im): real and imaginary grids of zA
    """
    return (z_re * a_re - z_im * a_im,
            z_im * a_re + z_re * a_im)


def matrix_times_matrix_np_core(
    a_re: np.ndarray,
    a_im: np.ndarray,
    b_re: np.ndarray,
    b_im: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute AB using four real matrix products.
    """
    return (a_re @ b_re - a_im @ b_im,
            a_im @ b_re + a_re @ b_im)


def _mirror_upper_np_core(
    c_re: np.ndarray,
    c_im: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Rebuild a Hermitian matrix from the diagonal and upper triangle of c.
    The diagonal imaginary part comes out as exactly zero.
    """
    upper_re = np.triu(c_re, 1)
    upper_im = np.triu(c_im, 1)
    out_re = upper_re + upper_re.T
    out_re[np.diag_indices_from(out_re)] = np.diag(c_re)
    out_im = upper_im - upper_im.T
    out_im[np.diag_indices_from(out_im)] = 0.0
    return out_re, out_im


def hermitian_aha_np_core(
    a_re: np.ndarray,
    a_im: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute A^H A. The full product is formed with BLAS and only its
    diagonal and upper triangle are kept; the lower triangle is rebuilt as
    their conjugate transpose.
    """
    c_re = a_re.T @ a_re + a_im.T @ a_im
    c_im = a_re.T @ a_im - a_im.T @ a_re
    return _mirror_upper_np_core(c_re, c_im)


def hermitian_aah_np_core(
    a_re: np.ndarray,
    a_im: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute A A^H. Full product, upper triangle kept, as in
    hermitian_aha_np_core.
    """
    c_re = a_re @ a_re.T + a_im @ a_im.T
    c_im = a_im @ a_re.T - a_re @ a_im.T
    return _mirror_upper_np_core(c_re, c_im)


def diagonal_times_diagonal_np_core(
    d1_re: np.ndarray,
    d1_im: np.ndarray,
    d2_re: np.ndarray,
    d2_im: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    return (d1_re * d2_re - d1_im * d2_im,
            d1_re * d2_im + d1_im * d2_re)


def diagonal_times_matrix_np_core(
    d_re: np.ndarray,
    d_im: np.ndarray,
    a_re: np.ndarray,
    a_im: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    d_re = d_re[:, np.newaxis]
    d_im = d_im[:, np.newaxis]
    return (d_re * a_re - d_im * a_im,
            d_re * a_im + d_im * a_re)


def matrix_times_diagonal_np_core(
    d_re: np.ndarray,
    d_im: np.ndarray,
    a_re: np.ndarray,
    a_im: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    d_re = d_re[np.newaxis, :]
    d_im = d_im[np.newaxis, :]
    return (d_re * a_re - d_im * a_im,
            d_re * a_im + d_im * a_re)
