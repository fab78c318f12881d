from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from hexboard.shared.errors import InvalidConfiguration
from hexboard.shared.hex_math import CubeCoordinate
from hexboard.shared.layout import Point

# --- Enums (Strict Vocabulary) ---

class InteractionKind(str, Enum):
    CLICK = "click"
    HOVER_START = "hoverStart"
    HOVER_END = "hoverEnd"

# --- Basic Primitives ---

class CoordinateModel(BaseModel):
    """
    Data Transfer Object for cube coordinates.
    Maps to {"x": int, "y": int, "z": int} JSON.
    """
    x: int
    y: int
    z: int

    @field_validator('z')
    def check_cube_invariant(cls, v, values):
        x = values.data.get('x')
        y = values.data.get('y')
        # x or y already failed their own validation
        if x is None or y is None:
            return v
        if x + y + v != 0:
            raise ValueError(f'x + y + z must be 0, got ({x}, {y}, {v})')
        return v

    def to_cube(self) -> CubeCoordinate:
        return CubeCoordinate(self.x, self.y, self.z)

    @classmethod
    def from_cube(cls, coord: CubeCoordinate) -> 'CoordinateModel':
        return cls(x=coord.x, y=coord.y, z=coord.z)


class PointModel(BaseModel):
    x: float
    y: float

    @classmethod
    def from_point(cls, point: Point) -> 'PointModel':
        return cls(x=point.x, y=point.y)


def coordinate_list(coords: Iterable[CubeCoordinate]) -> List[CoordinateModel]:
    """Stable (sorted) wire form of a coordinate set."""
    return [CoordinateModel.from_cube(c) for c in sorted(coords, key=CubeCoordinate.as_tuple)]

# --- Configuration ---

class GridConfig(BaseModel):
    """
    Construction parameters for one grid instance.
    range=None turns highlighting off: every click is accepted and forwarded.
    """
    levels: int = Field(default=5, ge=0)
    range: Optional[int] = Field(default=1, ge=0)
    initial_center: CoordinateModel = Field(default_factory=lambda: CoordinateModel(x=0, y=0, z=0))
    cell_size: float = Field(default=1.0, gt=0, allow_inf_nan=False)
    outline: bool = True

    @classmethod
    def parse(cls, data: Dict[str, Any]) -> 'GridConfig':
        """Validates raw config data, reporting problems as InvalidConfiguration."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidConfiguration(f"Invalid grid configuration: {e}") from e

# --- Interaction (request/response) ---

class Interaction(BaseModel):
    """Payload sent by a renderer for every pointer event."""
    kind: InteractionKind
    coord: CoordinateModel


class InteractionResult(BaseModel):
    accepted: bool
    center: CoordinateModel
    highlight: List[CoordinateModel]

# --- Grid views ---

class GridState(BaseModel):
    grid_id: str
    config: GridConfig
    center: CoordinateModel
    highlight_enabled: bool
    highlight: List[CoordinateModel]
    # Host-side record of forwarded events
    selections: List[CoordinateModel] = []
    hovered: Optional[CoordinateModel] = None


class CellView(BaseModel):
    """Everything a renderer needs to draw one outline cell."""
    coord: CoordinateModel
    key: str
    center: PointModel
    polygon: List[PointModel]
    highlighted: bool
