"""Dense square-system solver (Gaussian elimination with partial pivoting)."""

from __future__ import annotations

import logging

import numpy as np

from icolattice.config import SolveConfig
from icolattice.errors import SingularMatrixError

from .base import MatrixBase, VectorBase
from .dense import Vector


Array = np.ndarray

logger = logging.getLogger(__name__)


def _as_array(value: MatrixBase | VectorBase | Array, ndim: int, name: str) -> Array:
    if isinstance(value, (MatrixBase, VectorBase)):
        arr = value.to_numpy()
    else:
        arr = np.array(value, dtype=float)
    if arr.ndim != ndim:
        raise ValueError(f"{name} must be a {ndim}D array.")
    return arr


def solve(
    coefficients: MatrixBase | Array,
    constants: VectorBase | Array,
    config: SolveConfig | None = None,
) -> Vector:
    """Return x with ``coefficients @ x == constants``.

    Elimination runs on a local augmented copy; the inputs are never modified.
    Raises SingularMatrixError when some column has no usable pivot.
    """

    cfg = SolveConfig() if config is None else config
    a = _as_array(coefficients, 2, "coefficients")
    b = _as_array(constants, 1, "constants")
    n = a.shape[0]
    if a.shape != (n, n):
        raise ValueError(f"coefficients must be a square matrix, got shape {a.shape}.")
    if b.shape != (n,):
        raise ValueError(f"constants must have length {n}, got {b.shape[0]}.")

    aug = np.empty((n, n + 1), dtype=float)
    aug[:, :n] = a
    aug[:, n] = b

    for col in range(n):
        pivot = col + int(np.argmax(np.abs(aug[col:, col])))
        if abs(aug[pivot, col]) <= cfg.pivot_tolerance:
            logger.debug(f"No usable pivot in column {col} of a {n}x{n} system.")
            raise SingularMatrixError(f"System is underconstrained: column {col} has no nonzero pivot.")
        if pivot != col:
            logger.debug(f"Swapping rows {col} and {pivot}.")
            aug[[col, pivot]] = aug[[pivot, col]]
        aug[col] /= aug[col, col]
        aug[col + 1:] -= np.outer(aug[col + 1:, col], aug[col])

    x = np.empty(n, dtype=float)
    for row in range(n - 1, -1, -1):
        x[row] = aug[row, n] - aug[row, row + 1:n] @ x[row + 1:]
    return Vector(x)
