"""Reference corners and face planes of the unit icosahedron.

The lattice starts at +y (north), descends towards +z, and circles
left-handed about +y. Upper tropic corner k sits at azimuth 72k degrees from
+z towards +x; lower corner k sits at 36 + 72k degrees, so that
``LOWER[k] == -UPPER[(k + 3) % 5]``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


Array = np.ndarray

# Points are interpolated linearly between corners, so each latitude ring is
# planar and only the tropic height matters.
TROPIC_Y = 1.0 / math.sqrt(5.0)
TROPIC_RADIUS = 2.0 * TROPIC_Y

NORTH = np.array([0.0, 1.0, 0.0])
SOUTH = -NORTH


def _ring_corners() -> tuple[Array, Array]:
    sqrt5 = math.sqrt(5.0)
    cos72 = (sqrt5 - 1.0) / 4.0
    sin72 = math.sqrt((5.0 + sqrt5) / 8.0)
    # Acts on (x, z) pairs, turning +z towards +x by 72 degrees.
    rotate = np.array([[cos72, sin72], [-sin72, cos72]])

    ring = np.empty((5, 2))
    ring[0] = (0.0, TROPIC_RADIUS)
    for k in range(1, 5):
        ring[k] = rotate @ ring[k - 1]

    upper = np.column_stack([ring[:, 0], np.full(5, TROPIC_Y), ring[:, 1]])
    lower = -upper[[(k + 3) % 5 for k in range(5)]]
    return upper, lower


UPPER, LOWER = _ring_corners()


@dataclass(frozen=True)
class FacePlane:
    """One icosahedron face: ``origin + s*basis[0] + t*basis[1]`` for s, t >= 0, s + t <= 1.

    ``kind`` is one of "north", "tropic_down", "tropic_up", "south" and
    ``lon_face`` is the longitude face the triangle belongs to.
    """

    kind: str
    lon_face: int
    origin: Array
    basis: Array
    normal: Array
    height: float
    area: float


def _face(kind: str, lon_face: int, origin: Array, first: Array, second: Array) -> FacePlane:
    basis = np.stack([first - origin, second - origin])
    normal = np.cross(basis[0], basis[1])
    normal = normal / np.linalg.norm(normal)
    if normal @ origin < 0.0:
        normal = -normal
    area = float(np.cross(basis[0], basis[1]) @ normal)
    return FacePlane(
        kind=kind,
        lon_face=lon_face,
        origin=origin,
        basis=basis,
        normal=normal,
        height=float(origin @ normal),
        area=area,
    )


def _face_table() -> tuple[FacePlane, ...]:
    north = [_face("north", f, NORTH, UPPER[f], UPPER[(f + 1) % 5]) for f in range(5)]
    down = [_face("tropic_down", f, UPPER[f], UPPER[(f + 1) % 5], LOWER[f]) for f in range(5)]
    # Face k + 10 is the antipode of face k: north f <-> south f + 2, down f <-> up f + 2.
    south = []
    up = []
    for f in range(5):
        g = (f + 2) % 5
        south.append(_face("south", g, SOUTH, LOWER[g], LOWER[(g + 1) % 5]))
        up.append(_face("tropic_up", g, UPPER[(g + 1) % 5], LOWER[g], LOWER[(g + 1) % 5]))
    return tuple(north + down + south + up)


FACES = _face_table()
UPPER_NORMALS = np.stack([face.normal for face in FACES[:10]])
