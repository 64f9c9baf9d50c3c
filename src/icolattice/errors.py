"""Exception types shared by the lattice and linear-algebra modules."""

from __future__ import annotations


class UnrepresentableCoordinateError(ValueError):
    """A coordinate that cannot name a lattice vertex."""


class SingularMatrixError(ValueError):
    """A linear system without a unique solution."""
