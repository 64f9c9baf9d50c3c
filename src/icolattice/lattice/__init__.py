from .containers import Lattice, LatticeGrid, LatticeNode
from .coordinates import PolarCoordinate, SubdividedCoordinate, polar_coordinates, pyramid_size
from .geometry import IcoLattice, LatticeGeometry
from .projection import Projection, project_direction
from .statics import distribute_forces
from .validators import lattice_adjacency, validate_edge_lengths, validate_mesh_regularity, vertex_degrees

__all__ = [
    "Lattice",
    "LatticeGrid",
    "LatticeNode",
    "PolarCoordinate",
    "SubdividedCoordinate",
    "polar_coordinates",
    "pyramid_size",
    "IcoLattice",
    "LatticeGeometry",
    "Projection",
    "project_direction",
    "distribute_forces",
    "lattice_adjacency",
    "vertex_degrees",
    "validate_mesh_regularity",
    "validate_edge_lengths",
]
