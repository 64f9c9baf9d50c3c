"""Icosahedral lattice geometry: coordinate, index and Cartesian mappings."""

from __future__ import annotations

import logging
import math
import operator
from dataclasses import dataclass
from typing import Iterable, Iterator, Protocol, TypeVar

import numpy as np

from .coordinates import (
    LON_FACES,
    NORTH_CAP,
    SOUTH_CAP,
    SOUTH_POLE,
    TROPICS,
    PolarCoordinate,
    polar_coordinates,
    pyramid_size,
)
from .icosahedron import LOWER, NORTH, SOUTH, UPPER
from .projection import Projection, project_direction


Array = np.ndarray
Edge = tuple[int, int]
T_co = TypeVar("T_co", covariant=True)

logger = logging.getLogger(__name__)


class LatticeGeometry(Protocol[T_co]):
    """Anything that can enumerate lattice vertices and the edges between them."""

    @property
    def vertices(self) -> Iterable[T_co]: ...

    @property
    def edges(self) -> Iterable[Edge]: ...


def _lerp(a: Array, b: Array, t: float) -> Array:
    return a + (b - a) * t


def _unit(v: Array) -> Array:
    return v / np.linalg.norm(v)


def _pyramid_height(count: int) -> int:
    """Largest h with pyramid_size(h) <= count, for count >= 1."""

    t = 2 * (count - 1) // 5
    return (1 + math.isqrt(1 + 4 * t)) // 2


@dataclass(frozen=True)
class IcoLattice:
    """Spherical lattice from an icosahedron whose edges are split into ``subdivisions`` steps.

    Vertices are normalized linear interpolations of the icosahedron corners
    rather than great-circle subdivisions, which keeps every face boundary
    continuous at the cost of slightly uneven spacing.
    """

    subdivisions: int

    def __post_init__(self) -> None:
        try:
            n = operator.index(self.subdivisions)
        except TypeError as exc:
            raise ValueError(f"subdivisions must be an integer, got {self.subdivisions!r}.") from exc
        if n < 1:
            raise ValueError(f"subdivisions must be >= 1, got {n}.")
        object.__setattr__(self, "subdivisions", n)
        logger.debug(f"Icosahedral lattice with {n} subdivisions ({self.vertex_count} vertices).")

    @property
    def vertex_count(self) -> int:
        n = self.subdivisions
        return pyramid_size(n) + LON_FACES * n * n + pyramid_size(n + 1)

    @property
    def edge_count(self) -> int:
        return 3 * (self.vertex_count - 2)

    @property
    def _north_tropic(self) -> int:
        return pyramid_size(self.subdivisions)

    @property
    def _south_tropic(self) -> int:
        n = self.subdivisions
        return self._north_tropic + LON_FACES * n * n

    def to_cartesian(self, c: PolarCoordinate) -> Array:
        """Return the unit vector of the vertex named by ``c``."""

        n = self.subdivisions
        c = c.normalize(n)
        lat, lon = c.lat, c.lon

        if lat.face == NORTH_CAP:
            if lat.div == 0:
                return NORTH.copy()
            a, b = UPPER[lon.face], UPPER[(lon.face + 1) % 5]
            v = _lerp(a, b, lon.div / lat.div)
            return _unit(_lerp(NORTH, v, lat.div / n))

        if lat.face == TROPICS:
            t = lat.div / n
            nxt = (lon.face + 1) % 5
            qa, qb, qc, qd = UPPER[lon.face], UPPER[nxt], LOWER[lon.face], LOWER[nxt]
            boundary = n - lat.div
            if lon.div < boundary:
                a = _lerp(qa, qc, t)
                b = _lerp(qb, qc, t)
                s = lon.div / boundary
            else:
                a = _lerp(qb, qc, t)
                b = _lerp(qb, qd, t)
                s = (lon.div - boundary) / lat.div
            return _unit(_lerp(a, b, s))

        if lat.face == SOUTH_CAP:
            ring = n - lat.div
            a, b = LOWER[lon.face], LOWER[(lon.face + 1) % 5]
            v = _lerp(a, b, lon.div / ring)
            return _unit(_lerp(SOUTH, v, ring / n))

        return SOUTH.copy()

    def to_index(self, c: PolarCoordinate) -> int:
        """Return the dense vertex index of ``c`` in [0, vertex_count)."""

        n = self.subdivisions
        c = c.normalize(n)
        lat, lon = c.lat, c.lon

        if lat.face == NORTH_CAP:
            if lat.div == 0:
                return 0
            return pyramid_size(lat.div) + lon.face * lat.div + lon.div

        if lat.face == TROPICS:
            return self._north_tropic + lat.div * LON_FACES * n + lon.face * n + lon.div

        # Count down from the south pole, whose ring has length 0.
        ring = n - lat.div if lat.face == SOUTH_CAP else 0
        return self.vertex_count - pyramid_size(ring + 1) + lon.face * ring + lon.div

    def from_index(self, index: int) -> PolarCoordinate:
        """Return the normalized coordinate of vertex ``index``."""

        n = self.subdivisions
        total = self.vertex_count
        i = operator.index(index)
        if i < 0 or i >= total:
            raise IndexError(f"Vertex index {index} out of range for {total} vertices.")

        if i == 0:
            return PolarCoordinate()

        if i < self._north_tropic:
            lat_div = _pyramid_height(i)
            lon_face, lon_div = divmod(i - pyramid_size(lat_div), lat_div)
            return PolarCoordinate.of(NORTH_CAP, lat_div, lon_face, lon_div)

        if i < self._south_tropic:
            lat_div, offset = divmod(i - self._north_tropic, LON_FACES * n)
            lon_face, lon_div = divmod(offset, n)
            return PolarCoordinate.of(TROPICS, lat_div, lon_face, lon_div)

        remaining = total - i
        if remaining == 1:
            return PolarCoordinate.of(SOUTH_POLE, 0)
        ring = _pyramid_height(remaining - 1)
        lon_face, lon_div = divmod(i - (total - pyramid_size(ring + 1)), ring)
        return PolarCoordinate.of(SOUTH_CAP, n - ring, lon_face, lon_div)

    @property
    def polar_coordinates(self) -> Iterator[PolarCoordinate]:
        return polar_coordinates(self.subdivisions)

    @property
    def vertices(self) -> Iterator[Array]:
        return (self.to_cartesian(c) for c in polar_coordinates(self.subdivisions))

    @property
    def edges(self) -> Iterator[Edge]:
        return self._iter_edges()

    def _iter_edges(self) -> Iterator[Edge]:
        # Mostly south-pointing triangles; each emits the edges it owns.
        yield from self._north_cap_edges()
        yield from self._tropic_edges()
        yield from self._south_cap_edges()

    def _north_cap_edges(self) -> Iterator[Edge]:
        n = self.subdivisions

        def vertex(lat: int, face: int, div: int) -> int:
            if lat == 0:
                return 0
            return pyramid_size(lat) + (face * lat + div) % (LON_FACES * lat)

        for lat in range(n):
            for face in range(LON_FACES):
                yield vertex(lat, face, 0), vertex(lat + 1, face, 0)
                for div in range(lat):
                    a = vertex(lat, face, div)
                    b = vertex(lat, face, div + 1)
                    c = vertex(lat + 1, face, div + 1)
                    yield a, b
                    yield a, c
                    yield b, c

    def _tropic_edges(self) -> Iterator[Edge]:
        n = self.subdivisions
        start = self._north_tropic
        row_length = LON_FACES * n

        # Every tropic row looks the same, so faces are folded into the row position.
        def vertex(lat: int, div: int) -> int:
            return start + lat * row_length + div % row_length

        for lat in range(n):
            for div in range(row_length):
                a = vertex(lat, div)
                b = vertex(lat, div + 1)
                c = vertex(lat + 1, div)
                yield a, b
                yield a, c
                yield b, c

    def _south_cap_edges(self) -> Iterator[Edge]:
        n = self.subdivisions
        start = self._south_tropic

        def vertex(lat: int, face: int, div: int) -> int:
            ring = n - lat
            ring_start = start + LON_FACES * lat * (n + ring + 1) // 2
            if lat == n:
                return ring_start
            return ring_start + (face * ring + div) % (LON_FACES * ring)

        for lat in range(n):
            for face in range(LON_FACES):
                for div in range(n - lat):
                    a = vertex(lat, face, div)
                    b = vertex(lat, face, div + 1)
                    c = vertex(lat + 1, face, div)
                    yield a, b
                    # The face's first spoke is the previous face's last (b, c).
                    if div > 0:
                        yield a, c
                    yield b, c

    def project(self, direction) -> Projection:
        """Locate ``direction`` on the lattice; see :func:`project_direction`."""

        return project_direction(self, direction)
