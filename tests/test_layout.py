import math

import pytest

from hexboard.shared.errors import InvalidConfiguration
from hexboard.shared.hex_math import ORIGIN, CubeCoordinate, disk
from hexboard.shared.layout import (
    Point, cell_height, cell_width, center, grid_extent, pixel_to_cube, polygon, vertices
)


def test_center_of_origin():
    assert center(ORIGIN, 1) == Point(0.0, 0.0)


def test_center_projection():
    p = center(CubeCoordinate(1, 0, -1), 1)
    assert p.x == pytest.approx(1.5)
    assert p.y == pytest.approx(-math.sqrt(3) / 2)

    p = center(CubeCoordinate(0, -1, 1), 2)
    assert p.x == pytest.approx(0.0)
    assert p.y == pytest.approx(2 * math.sqrt(3))


def test_center_scales_with_size():
    a = center(CubeCoordinate(2, -1, -1), 3)
    assert a.x == pytest.approx(9.0)
    assert a.y == pytest.approx(0.0)


def test_dimensions():
    assert cell_width(2) == 4
    assert cell_height(2) == pytest.approx(2 * math.sqrt(3))


def test_vertices_order():
    h = math.sqrt(3)
    expected = [(-1, 0), (-0.5, h / 2), (0.5, h / 2), (1, 0), (0.5, -h / 2), (-0.5, -h / 2)]
    got = vertices(1)
    assert len(got) == 6
    for v, (ex, ey) in zip(got, expected):
        assert v.x == pytest.approx(ex)
        assert v.y == pytest.approx(ey)


def test_vertices_circumradius():
    for v in vertices(2.5):
        assert math.hypot(v.x, v.y) == pytest.approx(2.5)


def test_polygon_translates_vertices():
    coord = CubeCoordinate(1, 0, -1)
    c = center(coord, 1)
    for absolute, offset in zip(polygon(coord, 1), vertices(1)):
        assert absolute.x == pytest.approx(c.x + offset.x)
        assert absolute.y == pytest.approx(c.y + offset.y)


def test_pixel_to_cube_inverts_center():
    for coord in disk(ORIGIN, 4):
        assert pixel_to_cube(center(coord, 1.7), 1.7) == coord


def test_pixel_to_cube_inside_cell():
    coord = CubeCoordinate(2, -1, -1)
    c = center(coord, 1)
    assert pixel_to_cube(Point(c.x + 0.3, c.y - 0.2), 1) == coord


def test_grid_extent():
    assert grid_extent(5, 1) == (-10, -10, 20, 20)
    assert grid_extent(0, 2) == (0, 0, 0, 0)


@pytest.mark.parametrize("levels", [-1, 1.5, True])
def test_grid_extent_rejects_bad_levels(levels):
    with pytest.raises(InvalidConfiguration):
        grid_extent(levels, 1)


@pytest.mark.parametrize("size", [0, -1, True, float("inf"), float("nan")])
def test_size_must_be_positive(size):
    with pytest.raises(InvalidConfiguration):
        center(ORIGIN, size)
    with pytest.raises(InvalidConfiguration):
        vertices(size)
