import pytest
from pydantic import ValidationError

from hexboard.shared.errors import InvalidConfiguration
from hexboard.shared.hex_math import CubeCoordinate
from hexboard.shared.schemas import (
    CoordinateModel, GridConfig, Interaction, InteractionKind, coordinate_list
)


def test_coordinate_model_invariant():
    assert CoordinateModel(x=1, y=-1, z=0).to_cube() == CubeCoordinate(1, -1, 0)
    with pytest.raises(ValidationError):
        CoordinateModel(x=1, y=1, z=1)


def test_coordinate_model_from_cube():
    model = CoordinateModel.from_cube(CubeCoordinate(-2, 0, 2))
    assert model.model_dump() == {"x": -2, "y": 0, "z": 2}


def test_coordinate_list_is_sorted():
    coords = {CubeCoordinate(1, 0, -1), CubeCoordinate(-1, 0, 1), CubeCoordinate(0, 0, 0)}
    assert [c.x for c in coordinate_list(coords)] == [-1, 0, 1]


def test_grid_config_defaults():
    config = GridConfig()
    assert config.levels == 5
    assert config.range == 1
    assert config.cell_size == 1.0
    assert config.outline is True
    assert config.initial_center.to_cube() == CubeCoordinate(0, 0, 0)


@pytest.mark.parametrize("data", [
    {"range": -1},
    {"levels": -3},
    {"cell_size": 0},
    {"cell_size": "inf"},
    {"initial_center": {"x": 1, "y": 1, "z": 1}},
])
def test_grid_config_parse_rejects(data):
    with pytest.raises(InvalidConfiguration):
        GridConfig.parse(data)


def test_grid_config_parse_disabled_range():
    config = GridConfig.parse({"range": None, "levels": 2})
    assert config.range is None
    assert config.levels == 2


def test_interaction_kind_values():
    interaction = Interaction(kind="hoverStart", coord={"x": 0, "y": 1, "z": -1})
    assert interaction.kind is InteractionKind.HOVER_START
    assert interaction.model_dump(mode="json")["kind"] == "hoverStart"
