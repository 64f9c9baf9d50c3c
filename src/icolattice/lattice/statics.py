"""Linearized statics over a set of contact directions."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from icolattice.config import SolveConfig
from icolattice.linalg import SymmetricMatrix, Vector, self_outer_product, solve


Array = np.ndarray


def distribute_forces(
    normals: Iterable,
    force,
    k: float,
    config: SolveConfig | None = None,
) -> Array:
    """Return the scalar load each normal bears to balance ``force``.

    Every normal acts as a linear spring of stiffness ``k``. The result is in
    input order and satisfies ``sum(load_i * normal_i) == -force``.
    """

    directions = [np.asarray(normal, dtype=float).reshape(3) for normal in normals]

    stiffness = SymmetricMatrix(3)
    for normal in directions:
        stiffness = stiffness + self_outer_product(Vector(normal))
    stiffness = -k * stiffness

    dx = solve(stiffness, Vector(np.asarray(force, dtype=float).reshape(3)), config=config).to_numpy()
    return np.array([k * float(dx @ normal) for normal in directions], dtype=float)
