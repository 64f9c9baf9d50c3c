"""Dense matrices and vectors over float64 numpy storage."""

from __future__ import annotations

import numpy as np

from .base import MatrixBase, VectorBase


Array = np.ndarray


class Matrix(MatrixBase):
    """Row-major matrix wrapping a 2D float64 array.

    A float64 ndarray passed in is wrapped without copying, so the caller and
    the matrix share storage.
    """

    def __init__(self, data) -> None:
        arr = np.asarray(data, dtype=float)
        if arr.ndim != 2:
            raise ValueError("Matrix data must be a 2D array.")
        self._data = arr

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Matrix:
        return cls(np.zeros((rows, columns), dtype=float))

    @classmethod
    def copy_of(cls, source: MatrixBase) -> Matrix:
        return cls(source.to_numpy())

    @property
    def rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def columns(self) -> int:
        return int(self._data.shape[1])

    def _get(self, row: int, column: int) -> float:
        return float(self._data[row, column])

    def _set(self, row: int, column: int, value: float) -> None:
        self._data[row, column] = value

    def to_numpy(self) -> Array:
        return self._data.copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()!r})"


class SquareMatrix(Matrix):
    """Matrix with equal row and column counts."""

    def __init__(self, data) -> None:
        super().__init__(data)
        if self.rows != self.columns:
            raise ValueError("Array is not square.")

    @classmethod
    def zeros(cls, size: int, columns: int | None = None) -> SquareMatrix:
        if columns is not None and columns != size:
            raise ValueError("Array is not square.")
        return cls(np.zeros((size, size), dtype=float))

    @classmethod
    def identity(cls, size: int) -> SquareMatrix:
        return cls(np.eye(size, dtype=float))

    @property
    def size(self) -> int:
        return self.rows


class Vector(VectorBase):
    """Vector wrapping a 1D float64 array."""

    def __init__(self, data) -> None:
        arr = np.asarray(data, dtype=float)
        if arr.ndim != 1:
            raise ValueError("Vector data must be a 1D array.")
        self._data = arr

    @classmethod
    def of(cls, *values: float) -> Vector:
        return cls(np.array(values, dtype=float))

    @classmethod
    def zeros(cls, length: int) -> Vector:
        return cls(np.zeros(length, dtype=float))

    @classmethod
    def copy_of(cls, source: VectorBase) -> Vector:
        return cls(source.to_numpy())

    @property
    def length(self) -> int:
        return int(self._data.shape[0])

    def _get(self, index: int) -> float:
        return float(self._data[index])

    def _set(self, index: int, value: float) -> None:
        self._data[index] = value

    def to_numpy(self) -> Array:
        return self._data.copy()

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()!r})"
