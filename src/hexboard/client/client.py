import logging
from typing import Any, Dict, List, Optional, Set, Union

import httpx

from hexboard.shared.hex_math import CubeCoordinate
from hexboard.shared.schemas import (
    CellView, CoordinateModel, GridConfig, GridState,
    Interaction, InteractionKind, InteractionResult, PointModel
)

logger = logging.getLogger(__name__)


class GridClient:
    """
    Remote renderer side of a grid served by hexboard.server.main.
    Pass an existing httpx.Client (e.g. a FastAPI TestClient) or a server URL.
    """

    def __init__(self, server_url: str = "http://localhost:8000",
                 client: Optional[httpx.Client] = None, timeout: float = 5.0):
        self.server_url = server_url
        self.client = client or httpx.Client(base_url=server_url, timeout=timeout)

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _get(self, path: str) -> Any:
        resp = self.client.get(path)
        resp.raise_for_status()
        return resp.json()

    def _post(self, path: str, payload: Dict[str, Any]) -> Any:
        resp = self.client.post(path, json=payload)
        resp.raise_for_status()
        return resp.json()

    # --- Grid lifecycle ---

    def create_grid(self, grid_id: str, config: Optional[GridConfig] = None) -> GridState:
        config = config or GridConfig()
        logger.info(f"Creating grid {grid_id}")
        return GridState(**self._post(f"/grid/{grid_id}", config.model_dump(mode="json")))

    def get_grid(self, grid_id: str) -> GridState:
        return GridState(**self._get(f"/grid/{grid_id}"))

    def delete_grid(self, grid_id: str) -> None:
        self.client.delete(f"/grid/{grid_id}").raise_for_status()

    # --- Queries ---

    def highlight_set(self, grid_id: str) -> Set[CubeCoordinate]:
        return {c.to_cube() for c in self.get_grid(grid_id).highlight}

    def cells(self, grid_id: str) -> List[CellView]:
        return [CellView(**c) for c in self._get(f"/grid/{grid_id}/cells")]

    def vertices(self, grid_id: str) -> List[PointModel]:
        return [PointModel(**p) for p in self._get(f"/grid/{grid_id}/vertices")]

    # --- Interaction ---

    def interact(self, grid_id: str, kind: Union[InteractionKind, str],
                 coord: CubeCoordinate) -> InteractionResult:
        interaction = Interaction(kind=InteractionKind(kind), coord=CoordinateModel.from_cube(coord))
        data = self._post(f"/grid/{grid_id}/interaction", interaction.model_dump(mode="json"))
        result = InteractionResult(**data)
        if not result.accepted:
            logger.debug(f"Select {coord.key()} rejected on grid {grid_id}")
        return result

    def click(self, grid_id: str, coord: CubeCoordinate) -> InteractionResult:
        return self.interact(grid_id, InteractionKind.CLICK, coord)

    def hover(self, grid_id: str, coord: CubeCoordinate, end: bool = False) -> InteractionResult:
        kind = InteractionKind.HOVER_END if end else InteractionKind.HOVER_START
        return self.interact(grid_id, kind, coord)
