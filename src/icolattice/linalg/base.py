"""Index-addressed matrix and vector abstractions with lazy arithmetic."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from numbers import Real
from typing import TYPE_CHECKING, Iterator

import numpy as np

if TYPE_CHECKING:
    from .views import MatrixView, VectorView


Array = np.ndarray


def checked_offset(index: int, length: int) -> int:
    """Resolve a possibly negative index against ``length``."""

    offset = operator.index(index)
    if offset < 0:
        offset += length
    if offset < 0 or offset >= length:
        raise IndexError(f"Index {index} out of range for length {length}.")
    return offset


class MatrixBase(ABC):
    """Shape plus indexed get/set; arithmetic yields lazily evaluated views."""

    # Keeps numpy scalars from broadcasting over us in ``np.float64(2) * m``.
    __array_ufunc__ = None

    @property
    @abstractmethod
    def rows(self) -> int: ...

    @property
    @abstractmethod
    def columns(self) -> int: ...

    @abstractmethod
    def _get(self, row: int, column: int) -> float: ...

    def _set(self, row: int, column: int, value: float) -> None:
        raise TypeError(f"{type(self).__name__} is read-only.")

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, column = key
        return self._get(checked_offset(row, self.rows), checked_offset(column, self.columns))

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, column = key
        self._set(checked_offset(row, self.rows), checked_offset(column, self.columns), float(value))

    def __iter__(self) -> Iterator[float]:
        for row in range(self.rows):
            for column in range(self.columns):
                yield self._get(row, column)

    def row(self, index: int) -> VectorView:
        from .views import VectorView

        r = checked_offset(index, self.rows)
        return VectorView(
            self.columns,
            lambda column: self[r, column],
            lambda column, value: self.__setitem__((r, column), value),
        )

    def column(self, index: int) -> VectorView:
        from .views import VectorView

        c = checked_offset(index, self.columns)
        return VectorView(
            self.rows,
            lambda row: self[row, c],
            lambda row, value: self.__setitem__((row, c), value),
        )

    def transpose(self) -> MatrixView:
        from .views import MatrixView

        return MatrixView(
            self.columns,
            self.rows,
            lambda row, column: self[column, row],
            lambda row, column, value: self.__setitem__((column, row), value),
        )

    @property
    def T(self) -> MatrixView:
        return self.transpose()

    def assign(self, source: MatrixBase) -> None:
        """Copy every element of ``source`` into this matrix."""

        if source.shape != self.shape:
            raise ValueError(f"Cannot assign a {source.shape} matrix to a {self.shape} matrix.")
        for row in range(self.rows):
            for column in range(self.columns):
                self[row, column] = source[row, column]

    def to_numpy(self) -> Array:
        out = np.empty(self.shape, dtype=float)
        for row in range(self.rows):
            for column in range(self.columns):
                out[row, column] = self._get(row, column)
        return out

    def __array__(self, dtype=None, copy=None) -> Array:
        out = self.to_numpy()
        return out if dtype is None else out.astype(dtype)

    def __mul__(self, other: object) -> MatrixBase:
        from .views import MatrixView

        if not isinstance(other, Real):
            return NotImplemented
        c = float(other)
        return MatrixView(self.rows, self.columns, lambda row, column: c * self[row, column])

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> MatrixBase:
        if not isinstance(other, Real):
            return NotImplemented
        return self * (1.0 / float(other))

    def __neg__(self) -> MatrixBase:
        return self * -1.0

    def __add__(self, other: object) -> MatrixBase:
        from .views import MatrixView

        if not isinstance(other, MatrixBase):
            return NotImplemented
        if other.shape != self.shape:
            raise ValueError(f"Cannot add matrices of shapes {self.shape} and {other.shape}.")
        return MatrixView(self.rows, self.columns, lambda row, column: self[row, column] + other[row, column])

    def __sub__(self, other: object) -> MatrixBase:
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self + -other

    def __matmul__(self, other: object) -> VectorBase:
        from .views import VectorView

        if not isinstance(other, VectorBase):
            return NotImplemented
        if other.length != self.columns:
            raise ValueError(
                f"Cannot multiply a {self.shape} matrix by a vector of length {other.length}."
            )
        return VectorView(self.rows, lambda row: self.row(row).dot(other))

    def __str__(self) -> str:
        lines = [str(self.row(row)) for row in range(self.rows)]
        return "(" + "\n".join(lines) + ")"


class VectorBase(ABC):
    """Length plus indexed get/set; arithmetic yields lazily evaluated views."""

    __array_ufunc__ = None

    @property
    @abstractmethod
    def length(self) -> int: ...

    @abstractmethod
    def _get(self, index: int) -> float: ...

    def _set(self, index: int, value: float) -> None:
        raise TypeError(f"{type(self).__name__} is read-only.")

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int) -> float:
        return self._get(checked_offset(index, self.length))

    def __setitem__(self, index: int, value: float) -> None:
        self._set(checked_offset(index, self.length), float(value))

    def __iter__(self) -> Iterator[float]:
        for i in range(self.length):
            yield self._get(i)

    def dot(self, other: VectorBase) -> float:
        if other.length != self.length:
            raise ValueError(f"Cannot dot vectors of lengths {self.length} and {other.length}.")
        return float(sum(self._get(i) * other[i] for i in range(self.length)))

    def assign(self, source: VectorBase) -> None:
        """Copy every element of ``source`` into this vector."""

        if source.length != self.length:
            raise ValueError(f"Cannot assign a vector of length {source.length} to length {self.length}.")
        for i in range(self.length):
            self[i] = source[i]

    def to_numpy(self) -> Array:
        return np.fromiter(iter(self), dtype=float, count=self.length)

    def __array__(self, dtype=None, copy=None) -> Array:
        out = self.to_numpy()
        return out if dtype is None else out.astype(dtype)

    def __mul__(self, other: object) -> VectorBase:
        from .views import VectorView

        if not isinstance(other, Real):
            return NotImplemented
        c = float(other)
        return VectorView(self.length, lambda i: c * self[i])

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> VectorBase:
        if not isinstance(other, Real):
            return NotImplemented
        return self * (1.0 / float(other))

    def __neg__(self) -> VectorBase:
        return self * -1.0

    def __add__(self, other: object) -> VectorBase:
        from .views import VectorView

        if not isinstance(other, VectorBase):
            return NotImplemented
        if other.length != self.length:
            raise ValueError(f"Cannot add vectors of lengths {self.length} and {other.length}.")
        return VectorView(self.length, lambda i: self[i] + other[i])

    def __sub__(self, other: object) -> VectorBase:
        if not isinstance(other, VectorBase):
            return NotImplemented
        return self + -other

    def __str__(self) -> str:
        return "(" + ", ".join(str(value) for value in self) + ")"
