from .base import MatrixBase, VectorBase
from .dense import Matrix, SquareMatrix, Vector
from .solver import solve
from .symmetric import SymmetricMatrix, self_outer_product
from .views import MatrixView, VectorView

__all__ = [
    "MatrixBase",
    "VectorBase",
    "Matrix",
    "SquareMatrix",
    "Vector",
    "MatrixView",
    "VectorView",
    "SymmetricMatrix",
    "self_outer_product",
    "solve",
]
