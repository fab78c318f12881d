import json
import logging
import os
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

from fastapi import FastAPI, HTTPException

from hexboard.server.engine import GridController
from hexboard.shared.errors import HexboardError, InvalidConfiguration
from hexboard.shared.hex_math import CubeCoordinate
from hexboard.shared.schemas import (
    CellView, CoordinateModel, GridConfig, GridState,
    Interaction, InteractionResult, PointModel, coordinate_list
)

logger = logging.getLogger(__name__)

# --- Configuration Loading Helpers ---

CONFIG_DIR = os.getenv("HEXBOARD_CONFIG_DIR", "configs")
# Only the most recent selections are kept per grid
MAX_SELECTIONS = 100


def load_grid_config(grid_id: str) -> GridConfig:
    """Loads {grid_id}.json from the config directory."""
    path = os.path.join(CONFIG_DIR, f"{os.path.basename(grid_id)}.json")
    if not os.path.exists(path):
        raise FileNotFoundError(f"Grid config not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidConfiguration(f"Grid config {path} is not valid JSON: {e}") from e
    return GridConfig.parse(data)


class GridSession:
    """
    A controller plus the host-side record of what it forwarded.
    Endpoints run in a threadpool; `lock` serializes every access to the
    controller so interactions are processed one at a time, in arrival order.
    """

    def __init__(self, grid_id: str, config: GridConfig):
        self.grid_id = grid_id
        self.config = config
        self.lock = threading.Lock()
        self.selections: Deque[CubeCoordinate] = deque(maxlen=MAX_SELECTIONS)
        self.hovered: Optional[CubeCoordinate] = None
        self.controller = GridController.from_config(
            config,
            on_select=self.selections.append,
            on_hover_start=self._hover_start,
            on_hover_end=self._hover_end,
            logger=logger,
        )

    def _hover_start(self, coord: CubeCoordinate):
        self.hovered = coord

    def _hover_end(self, coord: CubeCoordinate):
        if self.hovered == coord:
            self.hovered = None

    def interact(self, interaction: Interaction) -> InteractionResult:
        with self.lock:
            accepted = self.controller.on_interaction(interaction.kind, interaction.coord.to_cube())
            return InteractionResult(
                accepted=accepted,
                center=CoordinateModel.from_cube(self.controller.center),
                highlight=coordinate_list(self.controller.get_highlight_set()),
            )

    def cells(self) -> List[CellView]:
        controller = self.controller
        with self.lock:
            highlight = controller.get_highlight_set()
        cells = []
        for coord in controller.grid_cells():
            cells.append(CellView(
                coord=CoordinateModel.from_cube(coord),
                key=coord.key(),
                center=PointModel.from_point(controller.get_cell_center(coord)),
                polygon=[PointModel.from_point(p) for p in controller.get_cell_polygon(coord)],
                highlighted=coord in highlight,
            ))
        return cells

    def state(self) -> GridState:
        with self.lock:
            return GridState(
                grid_id=self.grid_id,
                config=self.config,
                center=CoordinateModel.from_cube(self.controller.center),
                highlight_enabled=self.controller.highlight_enabled,
                highlight=coordinate_list(self.controller.get_highlight_set()),
                selections=[CoordinateModel.from_cube(c) for c in self.selections],
                hovered=CoordinateModel.from_cube(self.hovered) if self.hovered else None,
            )

# --- Global State ---
grids: Dict[str, GridSession] = {}
# Guards the registry itself (lazy creation, replace, delete)
grids_lock = threading.Lock()

app = FastAPI(title="hexboard")


def get_session(grid_id: str) -> GridSession:
    """Returns the live grid, lazily creating it from its config file."""
    with grids_lock:
        if grid_id in grids:
            return grids[grid_id]

        try:
            config = load_grid_config(grid_id)
        except FileNotFoundError as e:
            raise HTTPException(status_code=404, detail=f"Grid not found: {e}")
        except HexboardError as e:
            raise HTTPException(status_code=422, detail=str(e))

        logger.info(f"Initializing grid {grid_id} from config file.")
        session = GridSession(grid_id, config)
        grids[grid_id] = session
        return session


@app.get("/")
def health_check():
    with grids_lock:
        active = list(grids.keys())
    return {"status": "ok", "active_grids": active}


@app.post("/grid/{grid_id}", response_model=GridState)
def create_grid(grid_id: str, config: GridConfig):
    try:
        session = GridSession(grid_id, config)
    except HexboardError as e:
        raise HTTPException(status_code=422, detail=str(e))
    with grids_lock:
        grids[grid_id] = session
    logger.info(f"Grid {grid_id} created (levels={config.levels}, range={config.range}).")
    return session.state()


@app.get("/grid/{grid_id}", response_model=GridState)
def get_grid(grid_id: str):
    return get_session(grid_id).state()


@app.delete("/grid/{grid_id}")
def delete_grid(grid_id: str):
    with grids_lock:
        removed = grids.pop(grid_id, None)
    if removed is None:
        raise HTTPException(status_code=404, detail="Grid not found")
    return {"status": "deleted"}


@app.get("/grid/{grid_id}/cells", response_model=List[CellView])
def get_cells(grid_id: str):
    return get_session(grid_id).cells()


@app.get("/grid/{grid_id}/vertices", response_model=List[PointModel])
def get_vertices(grid_id: str):
    controller = get_session(grid_id).controller
    return [PointModel.from_point(p) for p in controller.get_cell_vertices()]


@app.post("/grid/{grid_id}/interaction", response_model=InteractionResult)
def post_interaction(grid_id: str, interaction: Interaction):
    return get_session(grid_id).interact(interaction)
