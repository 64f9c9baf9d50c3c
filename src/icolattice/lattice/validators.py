"""Topology and spacing checks for materialized lattices."""

from __future__ import annotations

from typing import Iterable

import numpy as np
from scipy.sparse import coo_matrix, csr_matrix

from .containers import Lattice
from .geometry import Edge


Array = np.ndarray


def lattice_adjacency(n_vertices: int, edges: Iterable[Edge]) -> csr_matrix:
    """Symmetric vertex adjacency; a repeated undirected edge shows up as an entry of 2."""

    pairs = np.asarray(list(edges), dtype=int).reshape(-1, 2)
    if pairs.size and (np.any(pairs < 0) or np.any(pairs >= n_vertices)):
        raise ValueError("Edge endpoints out of vertex range.")
    rows = np.concatenate([pairs[:, 0], pairs[:, 1]])
    cols = np.concatenate([pairs[:, 1], pairs[:, 0]])
    data = np.ones(rows.size, dtype=int)
    return coo_matrix((data, (rows, cols)), shape=(n_vertices, n_vertices)).tocsr()


def vertex_degrees(n_vertices: int, edges: Iterable[Edge]) -> Array:
    adjacency = lattice_adjacency(n_vertices, edges)
    return np.asarray(adjacency.sum(axis=1)).ravel()


def validate_mesh_regularity(lattice: Lattice) -> None:
    """Check that the edges form an icosahedral triangulation without repeats.

    Expects no self loops, no duplicate undirected edges, exactly 12 vertices
    of degree 5 and every other vertex of degree 6.
    """

    n_vertices = lattice.n_vertices
    pairs = lattice.edge_array()
    if np.any(pairs[:, 0] == pairs[:, 1]):
        raise ValueError("Lattice contains a self loop.")

    adjacency = lattice_adjacency(n_vertices, lattice.edges)
    entries = adjacency.tocoo()
    repeated = np.flatnonzero(entries.data > 1)
    if repeated.size:
        k = int(repeated[0])
        raise ValueError(f"Duplicate edge between vertices {int(entries.row[k])} and {int(entries.col[k])}.")

    degrees = np.asarray(adjacency.sum(axis=1)).ravel()
    irregular = np.flatnonzero((degrees != 5) & (degrees != 6))
    if irregular.size:
        i = int(irregular[0])
        raise ValueError(f"Edge count of vertex {i} should be 5 or 6; was {int(degrees[i])}.")
    fives = int(np.count_nonzero(degrees == 5))
    if fives != 12:
        raise ValueError(f"Expected exactly 12 vertices with 5 edges, found {fives}.")


def validate_edge_lengths(lattice: Lattice, subdivisions: int, tolerance: float = 0.25) -> None:
    """Check every squared chord length against the nominal spacing ``2*pi / (5n)``."""

    if not 0.0 < tolerance < 1.0:
        raise ValueError("tolerance must be in (0, 1).")
    delta = 2.0 * np.pi / (5 * subdivisions)
    dsq = delta * delta
    band = (1.0 - (1.0 - tolerance) ** 2) * dsq

    points = lattice.vertex_array()
    pairs = lattice.edge_array()
    lengths_sq = np.sum((points[pairs[:, 0]] - points[pairs[:, 1]]) ** 2, axis=1)
    bad = np.flatnonzero(np.abs(lengths_sq - dsq) > band)
    if bad.size:
        a, b = (int(x) for x in pairs[bad[0]])
        raise ValueError(
            f"Edge ({a}, {b}) has squared length {lengths_sq[bad[0]]:.6f}, "
            f"outside {dsq:.6f} +/- {band:.6f}."
        )
