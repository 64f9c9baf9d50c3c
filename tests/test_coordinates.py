import pytest

from icolattice.errors import UnrepresentableCoordinateError
from icolattice.lattice import PolarCoordinate, SubdividedCoordinate, polar_coordinates, pyramid_size


def test_subdivided_coordinate_borrows_across_faces() -> None:
    assert SubdividedCoordinate(0, -1).normalize(5, 3) == SubdividedCoordinate(4, 2)
    assert SubdividedCoordinate(4, 3).normalize(5, 3) == SubdividedCoordinate(0, 0)
    assert SubdividedCoordinate(2, -7).normalize(5, 3) == SubdividedCoordinate(4, 2)
    assert SubdividedCoordinate(-6, 10).normalize(6, 4) == SubdividedCoordinate(2, 2)


def test_subdivided_coordinate_rejects_non_integers() -> None:
    with pytest.raises(UnrepresentableCoordinateError):
        SubdividedCoordinate(0, 1.5)
    with pytest.raises(ValueError):
        SubdividedCoordinate(0, 1).normalize(5, 0)


def test_pyramid_size() -> None:
    assert [pyramid_size(h) for h in range(1, 5)] == [1, 6, 16, 31]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ((0, 0, 1, 1), (0, 0, 0, 0)),  # north pole
        ((5, 3, 1, 1), (0, 0, 0, 0)),  # north pole alias
        ((3, 0, 1, 1), (3, 0, 0, 0)),  # south pole
        ((2, 3, 1, 1), (3, 0, 0, 0)),  # south pole alias
        ((1, -1, 0, -1), (0, 2, 4, 1)),
        ((1, -1, 4, 2), (0, 2, 0, 0)),
        ((1, 1, 0, -1), (1, 1, 4, 2)),
        ((1, 1, 4, 3), (1, 1, 0, 0)),
        ((1, 2, 0, -1), (1, 2, 4, 2)),
        ((1, 2, 4, 3), (1, 2, 0, 0)),
        ((1, 3, 0, -1), (2, 0, 4, 2)),
        ((1, 3, 4, 3), (2, 0, 0, 0)),
    ],
)
def test_polar_coordinate_normalize(raw: tuple, expected: tuple) -> None:
    assert PolarCoordinate.of(*raw).normalize(3) == PolarCoordinate.of(*expected)


def test_back_face_flips() -> None:
    n = 3
    # north cap (1, 0, 0) seen from the back lands in the south cap two faces over
    assert PolarCoordinate.of(3, 1, 0, 0).normalize(n) == PolarCoordinate.of(2, 2, 2, 0)
    # south cap seen from the back lands in the north cap three faces over
    assert PolarCoordinate.of(5, 1, 0, 1).normalize(n) == PolarCoordinate.of(0, 2, 3, 1)
    # tropics shift by two faces plus the old latitude division
    assert PolarCoordinate.of(4, 1, 0, 2).normalize(n) == PolarCoordinate.of(1, 2, 3, 0)
    # back-face division 0 flips onto the first ring of the next region
    assert PolarCoordinate.of(4, 0, 1, 1).normalize(n) == PolarCoordinate.of(2, 0, 3, 1)
    assert PolarCoordinate.of(5, 0, 1, 1).normalize(n) == PolarCoordinate.of(1, 0, 4, 1)


def test_normalize_is_pure() -> None:
    c = PolarCoordinate.of(1, -1, 0, -1)
    c.normalize(3)
    assert c.as_tuple() == (1, -1, 0, -1)


def test_antipode_is_an_involution() -> None:
    n = 4
    for c in polar_coordinates(n):
        assert (-(-c)).normalize(n) == c
        assert (-(-c).normalize(n)).normalize(n) == c


def test_polar_coordinates_are_normalized_and_distinct() -> None:
    n = 4
    coords = list(polar_coordinates(n))
    assert len(coords) == 10 * n * n + 2
    assert len(set(coords)) == len(coords)
    for c in coords:
        assert c.normalize(n) == c
