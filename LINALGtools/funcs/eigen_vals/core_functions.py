import numpy as np
from .constants import *
from typing import List, Optional, Tuple

##########################################################################################
# Core numpy functions for eigenpair post-processing
##########################################################################################


def workspace_fallback_np_core(
    n: int,
    want_vectors: bool) -> int:
    """
    Conservative workspace size for when the routine cannot answer a query.

    Args:
        n (int): order of the matrix
        want_vectors (bool): left or right eigenvectors are requested

    Returns:
        int: 4n if eigenvectors are wanted, else 3n
    """
    factor = WORKSPACE_FACTOR_VECTORS if want_vectors else WORKSPACE_FACTOR_VALUES
    return max(1, factor * n)


def split_vectors_np_core(
    vectors: np.ndarray,
    n: int) -> List[Optional[np.ndarray]]:
    """
    Cut a column-major n*n eigenvector buffer into n independent copies.
    Eigenvector i is the contiguous block i*n .. i*n + n.

    Args:
        vectors (np.ndarray): buffer of length n*n, or empty
        n (int): order of the matrix

    Returns:
        list: n arrays of length n, or n Nones when the buffer is empty
    """
    if vectors.size == 0:
        return [None] * n
    return [vectors[i * n:(i + 1) * n].copy() for i in range(n)]


def select_largest_np_core(
    values: np.ndarray,
    nev: int) -> np.ndarray:
    """
    Indices of the nev largest values, in ascending order of value.

    A stable sort is used so equal values keep their original relative
    order.

    Args:
        values (np.ndarray): eigenvalues (n,)
        nev (int): number of values to keep, 1 <= nev <= n

    Returns:
        np.ndarray: indices into values (nev,)
    """
    order = np.argsort(values, kind='stable')
    return order[values.shape[0] - nev:]


def postprocess_np_core(
    wr: np.ndarray,
    wi: np.ndarray,
    vectors: np.ndarray,
    nev: int) -> Tuple[np.ndarray, np.ndarray, List[Optional[np.ndarray]]]:
    """
    Pair raw eigenvalues with their eigenvectors, sort ascending and keep
    the nev largest.

    Args:
        wr (np.ndarray): real parts of the eigenvalues (n,)
        wi (np.ndarray): imaginary parts of the eigenvalues (n,)
        vectors (np.ndarray): column-major eigenvector buffer (n*n,) or empty
        nev (int): number of eigenpairs to keep

    Returns:
        value: selected real parts, ascending (nev,)
        imag: matching imaginary parts (nev,)
        vector: matching eigenvectors, fresh copies
    """
    n = wr.shape[0]
    chosen = select_largest_np_core(wr, nev)
    split = split_vectors_np_core(vectors, n)
    return (wr[chosen].copy(),
            wi[chosen].copy(),
            [split[i] for i in chosen])
