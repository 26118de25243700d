"""
LINALGtools: Complex Matrix Types

Value types for complex dense linear algebra. Complex data is held as two
parallel float64 arrays (real and imaginary parts) rather than as a single
complex array, so the numba kernels only ever see real grids.

"""

import numpy as np
from typing import Union


class Z:
    """
    A complex scalar with real part re and imaginary part im.
    """

    def __init__(
        self,
        re: Union[float, complex, "Z"] = 0.0,
        im: float = 0.0) -> None:
        if isinstance(re, Z):
            re, im = re.re, re.im
        elif isinstance(re, (complex, np.complexfloating)):
            re, im = re.real, re.imag
        self.re = float(re)
        self.im = float(im)

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __eq__(self, other) -> bool:
        if isinstance(other, (Z, complex, int, float, np.number)):
            other = Z(other)
            return self.re == other.re and self.im == other.im
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.re, self.im))

    def __repr__(self) -> str:
        return f"Z({self.re!r}, {self.im!r})"


class Zmat:
    """
    Dense nr x nc complex matrix stored as parallel real/imaginary grids.

    Zmat(nr, nc)              zero matrix
    Zmat(complex_array)       copy of a 2D numpy array (real or complex)
    Zmat(re_array, im_array)  copy of two real grids of identical shape
    Zmat(other_zmat)          copy
    """

    def __init__(
        self,
        a,
        b=None) -> None:
        if isinstance(a, Zmat):
            re, im = a.re.copy(), a.im.copy()
        elif isinstance(a, (int, np.integer)):
            nc = a if b is None else b
            re = np.zeros((a, nc), dtype=np.float64)
            im = np.zeros((a, nc), dtype=np.float64)
        elif b is None:
            arr = np.asarray(a)
            if arr.ndim != 2:
                raise ValueError("Zmat requires a 2D array")
            re = np.array(arr.real, dtype=np.float64)
            im = np.array(arr.imag, dtype=np.float64)
        else:
            re = np.array(a, dtype=np.float64)
            im = np.array(b, dtype=np.float64)
            if re.ndim != 2 or re.shape != im.shape:
                raise ValueError("Real and imaginary grids must be 2D with identical shape")
        self.re = re
        self.im = im

    @property
    def nr(self) -> int:
        return self.re.shape[0]

    @property
    def nc(self) -> int:
        return self.re.shape[1]

    @property
    def shape(self) -> tuple:
        return self.re.shape

    def get(
        self,
        i: int,
        j: int) -> Z:
        return Z(self.re[i, j], self.im[i, j])

    def put(
        self,
        i: int,
        j: int,
        z) -> None:
        z = Z(z)
        self.re[i, j] = z.re
        self.im[i, j] = z.im

    def to_complex(self) -> np.ndarray:
        """Return the matrix as a numpy complex128 array."""
        return self.re + 1j * self.im

    def __eq__(self, other) -> bool:
        if not isinstance(other, Zmat):
            return NotImplemented
        return (self.shape == other.shape
                and np.array_equal(self.re, other.re)
                and np.array_equal(self.im, other.im))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Zmat({self.nr}x{self.nc})"


class Zdiagmat:
    """
    Complex diagonal matrix of a given order. Only the diagonal is stored;
    off-diagonal entries are implicitly zero.

    Zdiagmat(order)             zero diagonal
    Zdiagmat(values)            copy of a 1D numpy array (real or complex)
    Zdiagmat(re_seq, im_seq)    copy of two real sequences of equal length
    Zdiagmat(other_zdiagmat)    copy
    """

    def __init__(
        self,
        a,
        b=None) -> None:
        if isinstance(a, Zdiagmat):
            re, im = a.re.copy(), a.im.copy()
        elif isinstance(a, (int, np.integer)):
            re = np.zeros(a, dtype=np.float64)
            im = np.zeros(a, dtype=np.float64)
        elif b is None:
            arr = np.asarray(a)
            if arr.ndim != 1:
                raise ValueError("Zdiagmat requires a 1D array")
            re = np.array(arr.real, dtype=np.float64)
            im = np.array(arr.imag, dtype=np.float64)
        else:
            re = np.array(a, dtype=np.float64)
            im = np.array(b, dtype=np.float64)
            if re.ndim != 1 or re.shape != im.shape:
                raise ValueError("Real and imaginary parts must be 1D with identical length")
        self.re = re
        self.im = im

    @property
    def order(self) -> int:
        return self.re.shape[0]

    def get(
        self,
        i: int) -> Z:
        return Z(self.re[i], self.im[i])

    def put(
        self,
        i: int,
        z) -> None:
        z = Z(z)
        self.re[i] = z.re
        self.im[i] = z.im

    def to_zmat(self) -> Zmat:
        """Materialise the diagonal as a dense Zmat."""
        return Zmat(np.diag(self.re), np.diag(self.im))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Zdiagmat):
            return NotImplemented
        return (self.order == other.order
                and np.array_equal(self.re, other.re)
                and np.array_equal(self.im, other.im))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Zdiagmat({self.order})"
