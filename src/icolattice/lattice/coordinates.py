"""Discrete coordinates on the subdivided icosahedron."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Iterator

from icolattice.errors import UnrepresentableCoordinateError


LAT_FACES = 6
LON_FACES = 5

NORTH_CAP = 0
TROPICS = 1
SOUTH_CAP = 2
# lat.face + ANTIPODE names the antipode of a front-face coordinate.
ANTIPODE = 3
SOUTH_POLE = NORTH_CAP + ANTIPODE

# Longitude face shift applied when a back-face latitude is rewritten onto the
# front region it lands in. The tropics also shift lon.div by the old lat.div.
_FLIP_LON_FACES = {SOUTH_CAP: 2, TROPICS: 2, NORTH_CAP: 3}


def pyramid_size(height: int) -> int:
    """Vertex count of the pentagonal pyramid formed by the first ``height`` rings of a cap."""

    return 1 + 5 * height * (height - 1) // 2


def _as_int(value: object, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError as exc:
        raise UnrepresentableCoordinateError(f"{name} must be an integer, got {value!r}.") from exc


@dataclass(frozen=True)
class SubdividedCoordinate:
    """A step in a cyclic group of ``faces`` segments of ``subdivisions`` steps each."""

    face: int = 0
    div: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "face", _as_int(self.face, "face"))
        object.__setattr__(self, "div", _as_int(self.div, "div"))

    def normalize(self, faces: int, subdivisions: int) -> SubdividedCoordinate:
        """Return the equivalent coordinate with face in [0, faces) and div in [0, subdivisions).

        Uses floor division, so a negative ``div`` borrows from the previous face.
        """

        if faces < 1 or subdivisions < 1:
            raise ValueError("faces and subdivisions must be >= 1.")
        carry, div = divmod(self.div, subdivisions)
        return SubdividedCoordinate(face=(self.face + carry) % faces, div=div)


@dataclass(frozen=True)
class PolarCoordinate:
    """Latitude (down, 6 faces) and longitude (left, 5 faces) on the lattice.

    Latitude faces 0, 1, 2 are the north cap, the tropic band and the south
    cap. Faces 3, 4, 5 alias their antipodes. In the tropics each longitude
    face is a pair of triangles, the left one pointing down. The normalized
    form is up/left-inclusive with the south pole at latitude (3, 0).
    """

    lat: SubdividedCoordinate = field(default_factory=SubdividedCoordinate)
    lon: SubdividedCoordinate = field(default_factory=SubdividedCoordinate)

    @classmethod
    def of(cls, lat_face: int, lat_div: int, lon_face: int = 0, lon_div: int = 0) -> PolarCoordinate:
        return cls(SubdividedCoordinate(lat_face, lat_div), SubdividedCoordinate(lon_face, lon_div))

    def as_tuple(self) -> tuple[int, int, int, int]:
        return self.lat.face, self.lat.div, self.lon.face, self.lon.div

    def antipode(self) -> PolarCoordinate:
        """Return the (unnormalized) coordinate of the diametrically opposite point."""

        return PolarCoordinate(SubdividedCoordinate(self.lat.face + ANTIPODE, self.lat.div), self.lon)

    def __neg__(self) -> PolarCoordinate:
        return self.antipode()

    def normalize(self, subdivisions: int) -> PolarCoordinate:
        lat = self.lat.normalize(LAT_FACES, subdivisions)
        lon = self.lon

        if lat.div == 0 and lat.face in (NORTH_CAP, SOUTH_POLE):
            return PolarCoordinate(lat, SubdividedCoordinate())

        if lat.face >= ANTIPODE:
            region = LAT_FACES - 1 - lat.face
            lon_div = lon.div + lat.div if region == TROPICS else lon.div
            lon = SubdividedCoordinate(lon.face + _FLIP_LON_FACES[region], lon_div)
            # A flipped division of exactly ``subdivisions`` is the first ring of the next region.
            lat = SubdividedCoordinate(region, subdivisions - lat.div).normalize(LAT_FACES, subdivisions)

        return PolarCoordinate(lat, lon.normalize(LON_FACES, ring_subdivisions(lat, subdivisions)))


def ring_subdivisions(lat: SubdividedCoordinate, subdivisions: int) -> int:
    """Longitude steps per face at a normalized, non-polar latitude."""

    if lat.face == NORTH_CAP:
        return lat.div
    if lat.face == TROPICS:
        return subdivisions
    return subdivisions - lat.div


def polar_coordinates(subdivisions: int) -> Iterator[PolarCoordinate]:
    """Yield every normalized coordinate in vertex-index order."""

    n = subdivisions
    yield PolarCoordinate()

    for lat_div in range(1, n):
        for lon_face in range(LON_FACES):
            for lon_div in range(lat_div):
                yield PolarCoordinate.of(NORTH_CAP, lat_div, lon_face, lon_div)

    for lat_div in range(n):
        for lon_face in range(LON_FACES):
            for lon_div in range(n):
                yield PolarCoordinate.of(TROPICS, lat_div, lon_face, lon_div)

    for lat_div in range(n):
        ring = n - lat_div
        for lon_face in range(LON_FACES):
            for lon_div in range(ring):
                yield PolarCoordinate.of(SOUTH_CAP, lat_div, lon_face, lon_div)

    yield PolarCoordinate.of(SOUTH_POLE, 0)
