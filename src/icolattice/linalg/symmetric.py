"""Symmetric matrices in packed lower-triangular storage."""

from __future__ import annotations

from numbers import Real

import numpy as np

from .base import MatrixBase, VectorBase, checked_offset


Array = np.ndarray


def packed_length(size: int) -> int:
    return size * (size + 1) // 2


class SymmetricMatrix(MatrixBase):
    """Square symmetric matrix storing only its lower triangle.

    Item assignment is rejected: writing ``m[r, c]`` on a symmetric matrix
    necessarily also writes ``m[c, r]``, so mutation goes through
    :meth:`set_symmetric` instead.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative.")
        self._size = int(size)
        self._packed = np.zeros(packed_length(self._size), dtype=float)

    @classmethod
    def from_packed(cls, packed) -> SymmetricMatrix:
        """Build from row-major lower-triangle data ``[m00, m10, m11, m20, ...]``."""

        arr = np.asarray(packed, dtype=float).ravel()
        size = 0
        while packed_length(size) < arr.size:
            size += 1
        if packed_length(size) != arr.size:
            raise ValueError(f"{arr.size} values do not fill a packed lower triangle.")
        out = cls(size)
        out._packed[:] = arr
        return out

    @property
    def size(self) -> int:
        return self._size

    @property
    def rows(self) -> int:
        return self._size

    @property
    def columns(self) -> int:
        return self._size

    @property
    def packed(self) -> Array:
        return self._packed.copy()

    @staticmethod
    def _resolve(row: int, column: int) -> int:
        if column <= row:
            return row * (row + 1) // 2 + column
        return column * (column + 1) // 2 + row

    def _get(self, row: int, column: int) -> float:
        return float(self._packed[self._resolve(row, column)])

    def _set(self, row: int, column: int, value: float) -> None:
        raise TypeError("Use set_symmetric to mutate a symmetric matrix.")

    def set_symmetric(self, row: int, column: int, value: float) -> None:
        """Set both ``m[row, column]`` and ``m[column, row]``."""

        r = checked_offset(row, self._size)
        c = checked_offset(column, self._size)
        self._packed[self._resolve(r, c)] = float(value)

    def to_numpy(self) -> Array:
        out = np.zeros((self._size, self._size), dtype=float)
        lower = np.tril_indices(self._size)
        out[lower] = self._packed
        return out + np.tril(out, -1).T

    def _with_packed(self, packed: Array) -> SymmetricMatrix:
        out = SymmetricMatrix(self._size)
        out._packed[:] = packed
        return out

    def __add__(self, other: object) -> MatrixBase:
        if isinstance(other, SymmetricMatrix):
            if other.size != self._size:
                raise ValueError(f"Cannot add matrices of shapes {self.shape} and {other.shape}.")
            return self._with_packed(self._packed + other._packed)
        return super().__add__(other)

    def __sub__(self, other: object) -> MatrixBase:
        if isinstance(other, SymmetricMatrix):
            if other.size != self._size:
                raise ValueError(f"Cannot subtract matrices of shapes {self.shape} and {other.shape}.")
            return self._with_packed(self._packed - other._packed)
        return super().__sub__(other)

    def __mul__(self, other: object) -> MatrixBase:
        if not isinstance(other, Real):
            return NotImplemented
        return self._with_packed(float(other) * self._packed)

    __rmul__ = __mul__

    def __neg__(self) -> SymmetricMatrix:
        return self._with_packed(-self._packed)

    def __repr__(self) -> str:
        return f"SymmetricMatrix(size={self._size})"


def self_outer_product(v: VectorBase) -> SymmetricMatrix:
    """Return ``v @ v.T`` as a symmetric matrix."""

    values = v.to_numpy()
    rows, columns = np.tril_indices(values.size)
    out = SymmetricMatrix(values.size)
    out._packed[:] = values[rows] * values[columns]
    return out
