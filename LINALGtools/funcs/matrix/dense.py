"""
LINALGtools: Dense Matrix

A minimal real dense matrix backed by a NumPy array. It implements the
interface the eigenvalue driver consumes (column_count, is_square,
as_column_major_array) along with element access and a tolerant equality
check for verifying eigenpairs.

"""

import numpy as np


class DenseMatrix:
    """
    Real dense matrix of shape (rows, columns).
    """

    def __init__(
        self,
        values: np.ndarray) -> None:
        values = np.array(values, dtype=np.float64)
        if values.ndim != 2:
            raise ValueError("DenseMatrix requires a 2D array")
        self.values = values


    @classmethod
    def dense(
        cls,
        rows: int,
        columns: int) -> "DenseMatrix":
        """Zero matrix of the given shape"""
        return cls(np.zeros((rows, columns)))


    @classmethod
    def from_values(
        cls,
        rows: int,
        columns: int,
        *values: float) -> "DenseMatrix":
        """
        Build a matrix from rows*columns values given in row-major order.
        """
        if len(values) != rows * columns:
            raise ValueError(f"Expected {rows * columns} values, got {len(values)}")
        return cls(np.asarray(values, dtype=np.float64).reshape(rows, columns))


    def row_count(self) -> int:
        return self.values.shape[0]

    def column_count(self) -> int:
        return self.values.shape[1]

    def is_square(self) -> bool:
        return self.values.shape[0] == self.values.shape[1]

    def get(
        self,
        row: int,
        column: int) -> float:
        return float(self.values[row, column])

    def put(
        self,
        row: int,
        column: int,
        value: float) -> None:
        self.values[row, column] = value


    def as_column_major_array(self) -> np.ndarray:
        """
        Fresh 1D copy of every entry, walking down each column in turn.
        The caller may overwrite it freely.
        """
        return self.values.flatten(order='F')


    def mult(
        self,
        vector: np.ndarray) -> np.ndarray:
        """Matrix-vector product"""
        return self.values @ np.asarray(vector, dtype=np.float64)


    def equals(
        self,
        other,
        tolerance: float) -> bool:
        """Elementwise equality within an absolute tolerance"""
        other = other.values if isinstance(other, DenseMatrix) else np.asarray(other)
        return (self.values.shape == other.shape
                and bool(np.all(np.abs(self.values - other) <= tolerance)))
