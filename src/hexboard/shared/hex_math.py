"""
Hexagonal Grid Math Library
System: Cube (x, y, z) with x + y + z == 0
Reference: https://www.redblobgames.com/grids/hexagons/
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Tuple

from hexboard.shared.errors import InvalidConfiguration, InvariantViolation


@dataclass(frozen=True, eq=True)
class CubeCoordinate:
    """
    Immutable hex address in Cube format.
    Frozen allows this to be used as dictionary keys and set members.
    """
    x: int
    y: int
    z: int

    def __post_init__(self):
        for axis in (self.x, self.y, self.z):
            # bool is an int subclass, but True/False are never valid axes
            if not isinstance(axis, int) or isinstance(axis, bool):
                raise InvariantViolation(f"Cube axes must be integers, got {self.as_tuple()!r}")
        if self.x + self.y + self.z != 0:
            raise InvariantViolation(f"x + y + z must be 0, got {self.as_tuple()!r}")

    @classmethod
    def from_axial(cls, x: int, y: int) -> 'CubeCoordinate':
        """Builds a coordinate from two free axes, deriving z = -x - y."""
        return cls(x, y, -x - y)

    @classmethod
    def from_key(cls, key: str) -> 'CubeCoordinate':
        """Parses the canonical "x,y,z" encoding."""
        parts = key.split(",")
        if len(parts) != 3:
            raise InvariantViolation(f"Expected 'x,y,z', got {key!r}")
        try:
            x, y, z = (int(p) for p in parts)
        except ValueError:
            raise InvariantViolation(f"Expected integer axes in {key!r}") from None
        return cls(x, y, z)

    def key(self) -> str:
        """Canonical "x,y,z" encoding."""
        return f"{self.x},{self.y},{self.z}"

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def __add__(self, other: 'CubeCoordinate') -> 'CubeCoordinate':
        return CubeCoordinate(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'CubeCoordinate') -> 'CubeCoordinate':
        return CubeCoordinate(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: int) -> 'CubeCoordinate':
        return CubeCoordinate(self.x * k, self.y * k, self.z * k)

    def __repr__(self):
        return f"CubeCoordinate({self.x}, {self.y}, {self.z})"


# --- Constants ---

ORIGIN = CubeCoordinate(0, 0, 0)

# The 6 neighbors of a hex, in the order the grid has always reported them
HEX_DIRECTIONS = [
    CubeCoordinate(-1, 0, 1), CubeCoordinate(-1, 1, 0), CubeCoordinate(0, -1, 1),
    CubeCoordinate(1, -1, 0), CubeCoordinate(0, 1, -1), CubeCoordinate(1, 0, -1),
]

# Same directions in angular order, for walking around a ring
_RING_WALK = [HEX_DIRECTIONS[i] for i in (3, 5, 4, 1, 0, 2)]

# --- Core Math Functions ---

def add(a: CubeCoordinate, b: CubeCoordinate) -> CubeCoordinate:
    return a + b


def subtract(a: CubeCoordinate, b: CubeCoordinate) -> CubeCoordinate:
    return a - b


def scale(a: CubeCoordinate, k: int) -> CubeCoordinate:
    return a * k


def hex_length(coord: CubeCoordinate) -> int:
    """Calculates the distance from (0,0,0) to the hex."""
    return (abs(coord.x) + abs(coord.y) + abs(coord.z)) // 2


def hex_distance(a: CubeCoordinate, b: CubeCoordinate) -> int:
    """
    Calculates the Manhattan distance between two hexes.
    Formula: (|dx| + |dy| + |dz|) / 2, always an integer for valid coordinates.
    """
    return hex_length(a - b)


def neighbors6(coord: CubeCoordinate) -> List[CubeCoordinate]:
    """Returns the 6 adjacent hexes in a fixed order."""
    return [coord + d for d in HEX_DIRECTIONS]

# --- Range & Area ---

def _check_radius(radius: int, name: str = "range") -> None:
    if isinstance(radius, bool) or not isinstance(radius, int):
        raise InvalidConfiguration(f"{name} must be an integer, got {radius!r}")
    if radius < 0:
        raise InvalidConfiguration(f"{name} must be non-negative, got {radius}")


def iter_disk(center: CubeCoordinate, radius: int) -> Iterator[CubeCoordinate]:
    """
    Yields all hexes within a certain radius of the center (filled circle).
    Useful for highlight and movement range lookups.
    """
    _check_radius(radius)
    for dx in range(-radius, radius + 1):
        # dy bounds depend on dx to maintain hex shape
        dy1 = max(-radius, -dx - radius)
        dy2 = min(radius, -dx + radius)
        for dy in range(dy1, dy2 + 1):
            yield CubeCoordinate(
                center.x + dx,
                center.y + dy,
                -center.x - center.y - dx - dy,
            )


def disk(center: CubeCoordinate, radius: int) -> FrozenSet[CubeCoordinate]:
    """All hexes with hex_distance(center, p) <= radius; 3r^2 + 3r + 1 cells."""
    return frozenset(iter_disk(center, radius))


def ring(center: CubeCoordinate, radius: int) -> Iterator[CubeCoordinate]:
    """Yields only the hexes at exactly distance == radius."""
    _check_radius(radius, "radius")
    if radius == 0:
        yield center
        return

    # Start at one corner and walk around
    current = center + HEX_DIRECTIONS[0] * radius
    for direction in _RING_WALK:
        for _ in range(radius):
            yield current
            current = current + direction


def grid_outline(levels: int) -> List[CubeCoordinate]:
    """
    Every cell with max(|x|, |y|, |z|) <= levels, x-major then y.
    This is the static outline drawn under the tokens.
    """
    _check_radius(levels, "levels")
    cells = []
    for x in range(-levels, levels + 1):
        for y in range(-levels, levels + 1):
            z = -x - y
            if abs(z) > levels:
                continue
            cells.append(CubeCoordinate(x, y, z))
    return cells
