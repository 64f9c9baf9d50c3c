from .config import SolveConfig
from .errors import SingularMatrixError, UnrepresentableCoordinateError
from .lattice import (
    IcoLattice,
    Lattice,
    LatticeGrid,
    PolarCoordinate,
    Projection,
    SubdividedCoordinate,
    distribute_forces,
)
from .linalg import Matrix, SquareMatrix, SymmetricMatrix, Vector, solve

__all__ = [
    "SolveConfig",
    "SingularMatrixError",
    "UnrepresentableCoordinateError",
    "IcoLattice",
    "Lattice",
    "LatticeGrid",
    "PolarCoordinate",
    "Projection",
    "SubdividedCoordinate",
    "distribute_forces",
    "Matrix",
    "SquareMatrix",
    "SymmetricMatrix",
    "Vector",
    "solve",
]
