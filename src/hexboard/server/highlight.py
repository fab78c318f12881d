"""
Highlight State
Holds the set of cells currently highlighted around a center.
"""

from typing import FrozenSet

from hexboard.shared.hex_math import CubeCoordinate, disk


class HighlightState:
    """
    The disk of highlighted cells around the latest center.

    `recenter` is the only mutator and always recomputes the whole disk, so
    `current` is exactly disk(center, range) at all times.
    """

    def __init__(self, center: CubeCoordinate, range: int):
        self.center: CubeCoordinate = center
        self.range: int = range
        self.current: FrozenSet[CubeCoordinate] = disk(center, range)

    def recenter(self, new_center: CubeCoordinate, range: int) -> FrozenSet[CubeCoordinate]:
        # disk() validates range before anything is replaced
        current = disk(new_center, range)
        self.current = current
        self.center = new_center
        self.range = range
        return current

    def contains(self, coord: CubeCoordinate) -> bool:
        return coord in self.current

    def snapshot(self) -> FrozenSet[CubeCoordinate]:
        return self.current

    def __len__(self):
        return len(self.current)

    def __repr__(self):
        return f"HighlightState(center={self.center!r}, range={self.range}, size={len(self.current)})"
