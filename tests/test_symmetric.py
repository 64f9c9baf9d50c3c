import numpy as np
import pytest

from icolattice.linalg import Matrix, SymmetricMatrix, Vector, self_outer_product


def test_set_symmetric_mirrors_value() -> None:
    m = SymmetricMatrix(3)
    m.set_symmetric(0, 2, 4.0)
    m.set_symmetric(-1, 1, 1.5)
    assert m[2, 0] == m[0, 2] == 4.0
    assert m[1, 2] == 1.5
    assert m.packed.size == 6
    assert np.array_equal(m.to_numpy(), m.to_numpy().T)


def test_item_assignment_is_rejected() -> None:
    m = SymmetricMatrix(2)
    with pytest.raises(TypeError):
        m[0, 1] = 1.0
    with pytest.raises(IndexError):
        m.set_symmetric(2, 0, 1.0)


def test_from_packed() -> None:
    m = SymmetricMatrix.from_packed([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    assert m.size == 3
    assert m.to_numpy().tolist() == [[1.0, 2.0, 4.0], [2.0, 3.0, 5.0], [4.0, 5.0, 6.0]]
    with pytest.raises(ValueError):
        SymmetricMatrix.from_packed([1.0, 2.0])


def test_symmetric_arithmetic_stays_symmetric() -> None:
    a = SymmetricMatrix.from_packed([1.0, 2.0, 3.0])
    b = SymmetricMatrix.from_packed([1.0, 1.0, 1.0])
    assert isinstance(a + b, SymmetricMatrix)
    assert isinstance(a - b, SymmetricMatrix)
    assert isinstance(-2.0 * a, SymmetricMatrix)
    assert isinstance(-a, SymmetricMatrix)
    assert (a - b).to_numpy().tolist() == [[0.0, 1.0], [1.0, 2.0]]
    assert (np.float64(0.5) * a)[1, 1] == 1.5

    mixed = a + Matrix([[0.0, 1.0], [0.0, 0.0]])
    assert not isinstance(mixed, SymmetricMatrix)
    assert mixed[0, 1] == 3.0 and mixed[1, 0] == 2.0


def test_self_outer_product() -> None:
    v = Vector.of(1.0, -2.0, 3.0)
    outer = self_outer_product(v)
    assert isinstance(outer, SymmetricMatrix)
    assert np.allclose(outer.to_numpy(), np.outer(v.to_numpy(), v.to_numpy()))
