"""Non-owning matrix and vector views backed by index-mapping callables."""

from __future__ import annotations

from typing import Callable

from .base import MatrixBase, VectorBase


MatrixGetter = Callable[[int, int], float]
MatrixSetter = Callable[[int, int, float], None]
VectorGetter = Callable[[int], float]
VectorSetter = Callable[[int, float], None]


class MatrixView(MatrixBase):
    """Matrix whose elements are computed by ``getter`` and written by ``setter``.

    A view holds references to whatever its callables close over, so writes
    through the view (or to the backing storage) are visible on both sides.
    Views built without a setter are read-only.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        getter: MatrixGetter,
        setter: MatrixSetter | None = None,
    ) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("View dimensions must be non-negative.")
        self._rows = int(rows)
        self._columns = int(columns)
        self._getter = getter
        self._setter = setter

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def writable(self) -> bool:
        return self._setter is not None

    def _get(self, row: int, column: int) -> float:
        return float(self._getter(row, column))

    def _set(self, row: int, column: int, value: float) -> None:
        if self._setter is None:
            raise TypeError("MatrixView is read-only.")
        self._setter(row, column, value)

    def __repr__(self) -> str:
        return f"MatrixView(rows={self._rows}, columns={self._columns})"


class VectorView(VectorBase):
    """Vector whose elements are computed by ``getter`` and written by ``setter``."""

    def __init__(
        self,
        length: int,
        getter: VectorGetter,
        setter: VectorSetter | None = None,
    ) -> None:
        if length < 0:
            raise ValueError("View length must be non-negative.")
        self._length = int(length)
        self._getter = getter
        self._setter = setter

    @property
    def length(self) -> int:
        return self._length

    @property
    def writable(self) -> bool:
        return self._setter is not None

    def _get(self, index: int) -> float:
        return float(self._getter(index))

    def _set(self, index: int, value: float) -> None:
        if self._setter is None:
            raise TypeError("VectorView is read-only.")
        self._setter(index, value)

    def __repr__(self) -> str:
        return f"VectorView(length={self._length})"
