"""Materialized lattices: fixed snapshots of a geometry's vertices and edges."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

import numpy as np

from .geometry import Edge, LatticeGeometry


Array = np.ndarray
T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Lattice(Generic[T]):
    """Read-only vertex and edge lists, built once from a geometry."""

    vertices: tuple[T, ...]
    edges: tuple[Edge, ...]

    @classmethod
    def from_geometry(cls, geometry: LatticeGeometry[T]) -> Lattice[T]:
        vertices = tuple(geometry.vertices)
        edges = tuple(geometry.edges)
        logger.debug(f"Materialized lattice with {len(vertices)} vertices and {len(edges)} edges.")
        return cls(vertices=vertices, edges=edges)

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    def vertex_array(self) -> Array:
        """Stack the vertices into an ``(n_vertices, dim)`` array."""

        return np.stack([np.asarray(v, dtype=float) for v in self.vertices])

    def edge_array(self) -> Array:
        return np.asarray(self.edges, dtype=int).reshape(-1, 2)


@dataclass(eq=False)
class LatticeNode(Generic[T, U]):
    """A lattice vertex with a mutable payload."""

    vertex: T
    value: U | None = None


@dataclass(frozen=True)
class LatticeGrid(Generic[T, U]):
    """Lattice whose vertices carry independently mutable payloads.

    ``nodes[i]`` wraps vertex ``i`` of the source geometry; edges reference
    the node objects themselves, so writing a node's value through an edge is
    visible everywhere that node appears.
    """

    nodes: tuple[LatticeNode[T, U], ...]
    edges: tuple[tuple[LatticeNode[T, U], LatticeNode[T, U]], ...]
    edge_indices: tuple[Edge, ...]

    @classmethod
    def from_geometry(
        cls,
        geometry: LatticeGeometry[T],
        initial: Callable[[T], U] | None = None,
    ) -> LatticeGrid[T, U]:
        nodes = tuple(
            LatticeNode(vertex=v, value=None if initial is None else initial(v)) for v in geometry.vertices
        )
        edge_indices = tuple(geometry.edges)
        edges = tuple((nodes[a], nodes[b]) for a, b in edge_indices)
        logger.debug(f"Materialized lattice grid with {len(nodes)} nodes and {len(edges)} edges.")
        return cls(nodes=nodes, edges=edges, edge_indices=edge_indices)

    @property
    def vertices(self) -> tuple[T, ...]:
        return tuple(node.vertex for node in self.nodes)

    def values(self) -> list[U | None]:
        return [node.value for node in self.nodes]

    def neighbors(self, index: int) -> list[LatticeNode[T, U]]:
        """Nodes sharing an edge with node ``index``, in edge order."""

        if index < 0 or index >= len(self.nodes):
            raise IndexError(f"Node index {index} out of range for {len(self.nodes)} nodes.")
        out = []
        for a, b in self.edge_indices:
            if a == index:
                out.append(self.nodes[b])
            elif b == index:
                out.append(self.nodes[a])
        return out
