"""
LINALGtools: Eigenvalue Routines

The driver talks to the dense non-symmetric eigensolver through the
EigenRoutine interface, which mirrors the LAPACK dgeev parameter contract:
job flags, leading dimensions, caller supplied output buffers, a workspace
and its length, and an integer status. A workspace length of -1 is a query;
the routine then writes the optimal workspace size to work[0] and computes
nothing else.

ScipyLapackRoutine binds that contract to scipy.linalg.lapack.

"""

import numpy as np
from scipy.linalg import lapack
from .constants import *


class EigenRoutine:
    """
    Interface for a dense non-symmetric eigenvalue routine.
    """

    name = "dgeev"

    def dgeev(
        self,
        jobvl: str,
        jobvr: str,
        n: int,
        a: np.ndarray,
        lda: int,
        wr: np.ndarray,
        wi: np.ndarray,
        vl: np.ndarray,
        ldvl: int,
        vr: np.ndarray,
        ldvr: int,
        work: np.ndarray,
        lwork: int) -> int:
        """
        Compute eigenvalues and, optionally, left and right eigenvectors.

        Args:
            jobvl, jobvr: JOB_COMPUTE or JOB_SKIP for left / right eigenvectors
            n: order of the matrix
            a: column-major matrix buffer of length n*n, overwritten on output
            lda: leading dimension of a
            wr, wi: outputs, real and imaginary parts of the eigenvalues (n,)
            vl, vr: outputs, column-major eigenvector buffers (n*n, or empty
                    when the matching job flag is JOB_SKIP)
            ldvl, ldvr: leading dimensions of vl and vr
            work: workspace buffer
            lwork: length of work, or WORKSPACE_QUERY

        Returns:
            int: status, 0 on success
        """
        raise NotImplementedError


class ScipyLapackRoutine(EigenRoutine):
    """
    dgeev from the LAPACK bundled with SciPy.
    """

    def dgeev(
        self,
        jobvl: str,
        jobvr: str,
        n: int,
        a: np.ndarray,
        lda: int,
        wr: np.ndarray,
        wi: np.ndarray,
        vl: np.ndarray,
        ldvl: int,
        vr: np.ndarray,
        ldvr: int,
        work: np.ndarray,
        lwork: int) -> int:
        compute_vl = int(jobvl == JOB_COMPUTE)
        compute_vr = int(jobvr == JOB_COMPUTE)

        if lwork == WORKSPACE_QUERY:
            optimal, info = lapack.dgeev_lwork(
                n,
                compute_vl=compute_vl,
                compute_vr=compute_vr)
            if info == 0:
                work[0] = optimal
            return int(info)

        # F-ordered view of the caller's buffer so LAPACK overwrites it in place
        a_view = a.reshape((lda, n), order='F')
        out_wr, out_wi, out_vl, out_vr, info = lapack.dgeev(
            a_view,
            compute_vl=compute_vl,
            compute_vr=compute_vr,
            lwork=lwork,
            overwrite_a=1)
        if info != 0:
            return int(info)

        wr[:n] = out_wr
        wi[:n] = out_wi
        if compute_vl:
            vl[:ldvl * n] = out_vl.ravel(order='F')
        if compute_vr:
            vr[:ldvr * n] = out_vr.ravel(order='F')
        return 0
