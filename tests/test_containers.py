import dataclasses

import numpy as np
import pytest

from icolattice.lattice import IcoLattice, Lattice, LatticeGrid


class _Triangle:
    @property
    def vertices(self):
        return iter(["a", "b", "c"])

    @property
    def edges(self):
        return iter([(0, 1), (1, 2), (2, 0)])


def test_lattice_snapshots_geometry() -> None:
    geometry = IcoLattice(2)
    lattice = Lattice.from_geometry(geometry)

    assert lattice.n_vertices == geometry.vertex_count
    assert lattice.n_edges == geometry.edge_count
    assert isinstance(lattice.vertices, tuple)
    assert isinstance(lattice.edges, tuple)
    assert lattice.vertex_array().shape == (geometry.vertex_count, 3)
    assert lattice.edge_array().shape == (geometry.edge_count, 2)
    assert np.allclose(lattice.vertices[5], geometry.to_cartesian(geometry.from_index(5)))

    with pytest.raises(dataclasses.FrozenInstanceError):
        lattice.vertices = ()


def test_lattice_accepts_any_geometry() -> None:
    lattice = Lattice.from_geometry(_Triangle())
    assert lattice.vertices == ("a", "b", "c")
    assert lattice.edges == ((0, 1), (1, 2), (2, 0))


def test_lattice_grid_payloads_are_shared_through_edges() -> None:
    grid = LatticeGrid.from_geometry(IcoLattice(1), initial=lambda v: 0)
    assert grid.values() == [0] * 12

    first, second = grid.edges[0]
    first.value = 3
    second.value = 4
    a, b = grid.edge_indices[0]
    assert grid.nodes[a].value == 3
    assert grid.nodes[b].value == 4
    assert sorted(grid.values()) == [0] * 10 + [3, 4]


def test_lattice_grid_neighbors() -> None:
    grid = LatticeGrid.from_geometry(IcoLattice(2))
    assert grid.values() == [None] * len(grid.nodes)
    assert len(grid.neighbors(0)) == 5
    assert len(grid.neighbors(7)) == 6
    assert np.allclose(grid.vertices[0], [0.0, 1.0, 0.0])
    with pytest.raises(IndexError):
        grid.neighbors(len(grid.nodes))
