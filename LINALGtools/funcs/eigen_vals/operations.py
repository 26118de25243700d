"""
LINALGtools: Eigenvalue Operations

This module drives a dense non-symmetric eigenvalue routine (dgeev) over a real
square matrix and turns its raw output into the nev largest eigenvalues,
sorted ascending, each paired with a fresh copy of its eigenvector.

Typical use:

    eigen = AllEigenvalues.of(A).largest(10).run()
    eigen.value      # (10,) ascending
    eigen.vector     # list of 10 eigenvectors of length n

"""

import operator
import warnings
import numpy as np
from joblib import Parallel, delayed
from typing import Iterable, List, NamedTuple, Optional
from .constants import *
from .core_functions import *
from .routines import EigenRoutine, ScipyLapackRoutine
from ..exceptions import (
    InvalidDimensionsError,
    DecompositionError,
    ComplexSpectrumError,
    ComplexSpectrumWarning,
)


class Eigenpair(NamedTuple):
    value: float
    vector: Optional[np.ndarray]


class Eigenvalues:
    """
    Base class for eigenvalue computations on an n x n matrix.

    Subclasses implement run(), which fills value (ascending, length nev)
    and vector (length nev, each of length n).
    """

    def __init__(
        self,
        n: int) -> None:
        self.n = n
        self.nev = n
        self.value = None
        self.vector = None


    def largest(
        self,
        nev: int) -> "Eigenvalues":
        """
        Request only the nev largest eigenvalues.

        Args:
            nev (int): number of eigenvalues, 1 <= nev <= n

        Returns:
            self, for chaining
        """
        try:
            count = operator.index(nev)
        except TypeError:
            raise InvalidDimensionsError(f"nev must be an integer, got {nev!r}") from None
        if not 1 <= count <= self.n:
            raise InvalidDimensionsError(
                f"nev must lie in [1, {self.n}], got {count}")
        self.nev = count
        return self


    def pairs(self) -> List[Eigenpair]:
        """Selected eigenpairs in ascending order of eigenvalue"""
        if self.value is None:
            raise RuntimeError("Eigenvalues have not been computed, call run() first")
        return [Eigenpair(float(v), vec) for v, vec in zip(self.value, self.vector)]


    def run(self) -> "Eigenvalues":
        raise NotImplementedError


class AllEigenvalues(Eigenvalues):
    """
    Finds all eigenvalues of a real n x n non-symmetric matrix and keeps the
    nev largest.

    The routine computes the eigenvalues and, optionally, the left and/or
    right eigenvectors, normalised to unit Euclidean norm with largest
    component real. Eigenvectors are taken from the left set when it is
    computed and from the right set otherwise.

    Only real parts of the eigenvalues are kept. Whether a complex spectrum
    is accepted silently, with a ComplexSpectrumWarning, or rejected with
    ComplexSpectrumError is set by on_complex.
    """

    def __init__(
        self,
        A,
        nev: Optional[int] = None,
        left: bool = True,
        right: bool = False,
        routine: Optional[EigenRoutine] = None,
        on_complex: str = "warn") -> None:
        """
        Initialize the AllEigenvalues driver.

        Args:
            A: square matrix exposing column_count(), is_square() and
               as_column_major_array()
            nev (int, optional): number of largest eigenvalues to keep. Defaults to n.
            left (bool, optional): compute left eigenvectors. Defaults to True.
            right (bool, optional): compute right eigenvectors. Defaults to False.
            routine (EigenRoutine, optional): eigenvalue routine. Defaults to ScipyLapackRoutine.
            on_complex (str, optional): "warn", "raise" or "ignore". Defaults to "warn".
        """
        super().__init__(A.column_count())
        self.state = CONSTRUCTED
        if not A.is_square():
            raise InvalidDimensionsError("A is not square")
        if on_complex not in COMPLEX_POLICIES:
            raise InvalidDimensionsError(
                f"on_complex must be one of {COMPLEX_POLICIES}, got {on_complex!r}")
        self.A = A
        self.left = left
        self.right = right
        self.routine = routine if routine is not None else ScipyLapackRoutine()
        self.on_complex = on_complex
        self.imag = None
        self.largest(nev if nev is not None else self.n)
        self.state = READY


    @classmethod
    def of(
        cls,
        A,
        **kwargs) -> "AllEigenvalues":
        return cls(A, **kwargs)


    def _jobv(
        self,
        want: bool) -> str:
        return JOB_COMPUTE if want else JOB_SKIP


    def allocate_workspace(self) -> np.ndarray:
        """
        Size the workspace with a query call (lwork = -1). If the routine
        reports a failure for the query, fall back to 4n when eigenvectors
        are wanted and 3n otherwise.

        Returns:
            np.ndarray: workspace buffer
        """
        n = self.n
        lwork = workspace_fallback_np_core(n, self.left or self.right)
        query = np.zeros(1)
        empty = np.empty(0)
        info = self.routine.dgeev(
            self._jobv(self.left),
            self._jobv(self.right),
            n,
            empty, n,
            empty, empty,
            empty, n,
            empty, n,
            query,
            WORKSPACE_QUERY)
        if info == 0:
            lwork = int(query[0])
        return np.zeros(lwork)


    def run(self) -> "AllEigenvalues":
        """
        Compute the eigenvalues and keep the nev largest.

        Returns:
            self, with value, vector and imag filled in

        Raises:
            DecompositionError: if the routine returns a non-zero status
            ComplexSpectrumError: if on_complex is "raise" and the spectrum is complex
        """
        n = self.n
        wr = np.zeros(n)
        wi = np.zeros(n)
        vl = np.zeros(n * n if self.left else 0)
        vr = np.zeros(n * n if self.right else 0)
        work = self.allocate_workspace()

        # consumed by the routine, never read after the call
        a = self.A.as_column_major_array()
        info = self.routine.dgeev(
            self._jobv(self.left),
            self._jobv(self.right),
            n,
            a, n,
            wr, wi,
            vl, n,
            vr, n,
            work,
            work.shape[0])
        del a
        if info != 0:
            self.state = FAILED
            raise DecompositionError(info, self.routine.name)

        self._check_spectrum(wi)
        vectors = vl if self.left else vr
        self.value, self.imag, self.vector = postprocess_np_core(wr, wi, vectors, self.nev)
        self.state = COMPLETE
        return self


    def _check_spectrum(
        self,
        wi: np.ndarray) -> None:
        largest_imag = float(np.max(np.abs(wi))) if wi.size else 0.0
        if largest_imag <= COMPLEX_TOLERANCE or self.on_complex == "ignore":
            return
        message = (f"Complex eigenvalues found (max |imag| = {largest_imag:.3e}); "
                   "only real parts are kept")
        if self.on_complex == "raise":
            self.state = FAILED
            raise ComplexSpectrumError(message)
        warnings.warn(message, ComplexSpectrumWarning, stacklevel=3)


def run_all(
    matrices: Iterable,
    nev: Optional[int] = None,
    n_jobs: int = 1,
    **kwargs) -> List[AllEigenvalues]:
    """
    Run one AllEigenvalues driver per matrix on a thread pool.

    Drivers share no state, so they can run concurrently as long as no
    other owner mutates the matrices meanwhile.

    Args:
        matrices: iterable of square matrices
        nev (int, optional): number of largest eigenvalues per matrix
        n_jobs (int, optional): number of worker threads. Defaults to 1.
        **kwargs: passed to AllEigenvalues

    Returns:
        list: completed drivers, in input order
    """
    drivers = [AllEigenvalues(A, nev=nev, **kwargs) for A in matrices]
    return Parallel(n_jobs=n_jobs, prefer="threads")(
        delayed(driver.run)() for driver in drivers)
