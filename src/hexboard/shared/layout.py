"""
Flat-topped hex layout.

Maps cube coordinates to pixel centers and gives the polygon of a cell.
The layout uses the cube x-axis as "q" and the z-axis as "r"; y is redundant
given the invariant and never enters the projection.

      b____c
      /    \\
    a/      \\d
     \\      /
      \\____/
      f    e
"""

import math
from dataclasses import dataclass
from typing import Tuple

from hexboard.shared.errors import InvalidConfiguration
from hexboard.shared.hex_math import CubeCoordinate

SQRT3 = math.sqrt(3)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


def _check_size(size: float) -> None:
    if (isinstance(size, bool) or not isinstance(size, (int, float))
            or not size > 0 or not math.isfinite(size)):
        raise InvalidConfiguration(f"cell size must be a finite positive number, got {size!r}")


def cell_width(size: float) -> float:
    return 2 * size


def cell_height(size: float) -> float:
    return SQRT3 * size


def center(coord: CubeCoordinate, size: float) -> Point:
    """Get the co-ordinates of the hex center."""
    _check_size(size)
    q = coord.x
    r = coord.z
    px = size * 3 * q / 2.0
    py = size * SQRT3 * (r + q / 2.0)
    return Point(px, py)


def vertices(size: float) -> Tuple[Point, ...]:
    """
    Offsets of the six vertices relative to the cell center, a to f in the
    diagram above (leftmost vertex first). Identical for every cell.
    """
    _check_size(size)
    s = size
    h = cell_height(size)
    return (
        Point(-s, 0.0),
        Point(-s / 2.0, h / 2.0),
        Point(s / 2.0, h / 2.0),
        Point(s, 0.0),
        Point(s / 2.0, -h / 2.0),
        Point(-s / 2.0, -h / 2.0),
    )


def polygon(coord: CubeCoordinate, size: float) -> Tuple[Point, ...]:
    """Absolute vertex positions of one cell."""
    origin = center(coord, size)
    return tuple(origin + v for v in vertices(size))


def _cube_round(frac_x: float, frac_y: float, frac_z: float) -> CubeCoordinate:
    """
    Rounds floating point cube coordinates to the nearest valid integer hex.
    Maintains the constraint x + y + z = 0.
    """
    x = round(frac_x)
    y = round(frac_y)
    z = round(frac_z)

    x_diff = abs(x - frac_x)
    y_diff = abs(y - frac_y)
    z_diff = abs(z - frac_z)

    # Reset the component with the largest change to satisfy constraint
    if x_diff > y_diff and x_diff > z_diff:
        x = -y - z
    elif y_diff > z_diff:
        y = -x - z
    else:
        z = -x - y

    return CubeCoordinate(int(x), int(y), int(z))


def pixel_to_cube(point: Point, size: float) -> CubeCoordinate:
    """Inverse of center(): the cell containing a pixel position."""
    _check_size(size)
    q = (2.0 / 3.0) * point.x / size
    r = point.y / (SQRT3 * size) - q / 2.0
    return _cube_round(q, -q - r, r)


def grid_extent(levels: int, size: float) -> Tuple[float, float, float, float]:
    """Square view box (min_x, min_y, width, height) that fits `levels` rings."""
    _check_size(size)
    if isinstance(levels, bool) or not isinstance(levels, int) or levels < 0:
        raise InvalidConfiguration(f"levels must be a non-negative integer, got {levels!r}")
    t = size * levels * 2
    return (-t, -t, 2 * t, 2 * t)
