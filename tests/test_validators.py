import numpy as np
import pytest

from icolattice.lattice import (
    IcoLattice,
    Lattice,
    lattice_adjacency,
    validate_edge_lengths,
    validate_mesh_regularity,
    vertex_degrees,
)


def test_adjacency_is_symmetric() -> None:
    lattice = Lattice.from_geometry(IcoLattice(3))
    adjacency = lattice_adjacency(lattice.n_vertices, lattice.edges)
    assert (adjacency != adjacency.T).nnz == 0
    degrees = vertex_degrees(lattice.n_vertices, lattice.edges)
    assert int(degrees.sum()) == 2 * lattice.n_edges
    assert np.count_nonzero(degrees == 5) == 12


def test_duplicate_edge_is_rejected() -> None:
    lattice = Lattice.from_geometry(IcoLattice(2))
    a, b = lattice.edges[0]
    broken = Lattice(vertices=lattice.vertices, edges=lattice.edges + ((b, a),))
    with pytest.raises(ValueError, match="Duplicate edge"):
        validate_mesh_regularity(broken)


def test_missing_edge_is_rejected() -> None:
    lattice = Lattice.from_geometry(IcoLattice(2))
    broken = Lattice(vertices=lattice.vertices, edges=lattice.edges[1:])
    with pytest.raises(ValueError):
        validate_mesh_regularity(broken)


def test_self_loop_and_range_are_rejected() -> None:
    lattice = Lattice.from_geometry(IcoLattice(1))
    with pytest.raises(ValueError, match="self loop"):
        validate_mesh_regularity(Lattice(vertices=lattice.vertices, edges=lattice.edges + ((3, 3),)))
    with pytest.raises(ValueError):
        lattice_adjacency(12, [(0, 12)])


def test_edge_length_band() -> None:
    lattice = Lattice.from_geometry(IcoLattice(5))
    validate_edge_lengths(lattice, subdivisions=5)
    with pytest.raises(ValueError, match="squared length"):
        validate_edge_lengths(lattice, subdivisions=5, tolerance=0.01)
