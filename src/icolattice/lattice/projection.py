"""Inverse projection of arbitrary directions onto lattice triangles."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from .coordinates import NORTH_CAP, SOUTH_CAP, TROPICS, PolarCoordinate
from .icosahedron import FACES, UPPER_NORMALS, FacePlane

if TYPE_CHECKING:
    from .geometry import IcoLattice


Array = np.ndarray


class Projection(NamedTuple):
    """Triangle ``(a, b, c)`` containing a direction, with its position inside it.

    ``remainder`` is ``(0, 0)`` at ``a``, ``(1, 0)`` at ``b`` and ``(0, 1)`` at ``c``.
    """

    a: int
    b: int
    c: int
    remainder: Array


def _select_face(v: Array) -> FacePlane:
    dots = UPPER_NORMALS @ v
    k = int(np.argmax(np.abs(dots)))
    # Lower face k + 10 is the antipode of upper face k.
    return FACES[k] if dots[k] >= 0.0 else FACES[k + 10]


def _cell_to_polar(face: FacePlane, s: int, t: int, n: int) -> PolarCoordinate:
    """Coordinate of the lattice point ``origin + (s*basis[0] + t*basis[1]) / n``."""

    f = face.lon_face
    if face.kind == "north":
        return PolarCoordinate.of(NORTH_CAP, s + t, f, t)
    if face.kind == "tropic_down":
        return PolarCoordinate.of(TROPICS, t, f, s)
    if face.kind == "tropic_up":
        return PolarCoordinate.of(TROPICS, s + t, f, n - s)
    return PolarCoordinate.of(SOUTH_CAP, n - s - t, f, t)


def face_coordinates(face: FacePlane, v: Array, n: int) -> tuple[float, float]:
    """Return ``(u, w)`` in subdivision units, clamped onto the face triangle."""

    point = v * (face.height / float(v @ face.normal))
    q = point - face.origin
    e1, e2 = face.basis
    u = n * float(np.cross(q, e2) @ face.normal) / face.area
    w = n * float(np.cross(e1, q) @ face.normal) / face.area

    # Absorb floating-point drift at the triangle's edges.
    u = min(max(u, 0.0), float(n))
    w = min(max(w, 0.0), float(n))
    if u + w > n:
        scale = n / (u + w)
        u *= scale
        w *= scale
    return u, w


def project_direction(lattice: IcoLattice, direction) -> Projection:
    """Return the lattice triangle hit by the ray along ``direction``."""

    v = np.asarray(direction, dtype=float).reshape(3)
    norm = float(np.linalg.norm(v))
    if not math.isfinite(norm) or norm == 0.0:
        raise ValueError("Cannot project a zero or non-finite direction.")

    n = lattice.subdivisions
    face = _select_face(v)
    u, w = face_coordinates(face, v, n)

    i = min(int(math.floor(u)), n - 1)
    j = min(int(math.floor(w)), n - 1)
    fu = u - i
    fw = w - j
    if i + j >= n:
        # Lattice point on the far edge; take the cell on its near side.
        i -= 1
        fu += 1.0

    if fu + fw > 1.0 and i + j < n - 1:
        corners = ((i + 1, j + 1), (i, j + 1), (i + 1, j))
        remainder = np.array([1.0 - fu, 1.0 - fw])
    else:
        corners = ((i, j), (i + 1, j), (i, j + 1))
        remainder = np.array([fu, fw])

    a, b, c = (lattice.to_index(_cell_to_polar(face, s, t, n)) for s, t in corners)
    return Projection(a=a, b=b, c=c, remainder=remainder)
