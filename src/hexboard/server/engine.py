import logging
import math
from typing import Callable, FrozenSet, List, Optional, Tuple, Union

from hexboard.server.highlight import HighlightState
from hexboard.shared import layout
from hexboard.shared.errors import InvalidConfiguration
from hexboard.shared.hex_math import ORIGIN, CubeCoordinate, grid_outline
from hexboard.shared.layout import Point
from hexboard.shared.schemas import GridConfig, InteractionKind

CoordCallback = Callable[[CubeCoordinate], None]
HighlightCallback = Callable[[FrozenSet[CubeCoordinate]], None]

# --- Defaults ---
DEFAULT_LEVELS = 5
DEFAULT_RANGE = 1
DEFAULT_CELL_SIZE = 1.0


class GridController:
    """
    Owns the highlight state of one grid and reacts to pointer interactions.

    There is a single (idle) state: every interaction is processed to
    completion before the call returns. A click is accepted only when it
    lands on a highlighted cell; accepted clicks recenter the highlight and
    are forwarded to the host's on_select. Hover events are forwarded as-is
    and never touch the highlight.

    range=None disables highlighting altogether: the set stays empty and
    every click is accepted.
    """

    def __init__(self,
                 levels: int = DEFAULT_LEVELS,
                 range: Optional[int] = DEFAULT_RANGE,
                 initial_center: CubeCoordinate = ORIGIN,
                 cell_size: float = DEFAULT_CELL_SIZE,
                 outline: bool = True,
                 on_select: Optional[CoordCallback] = None,
                 on_hover_start: Optional[CoordCallback] = None,
                 on_hover_end: Optional[CoordCallback] = None,
                 on_highlight: Optional[HighlightCallback] = None,
                 logger: Optional[logging.Logger] = None):
        self._validate(levels, range, initial_center, cell_size)

        self.levels = levels
        self.cell_size = float(cell_size)
        self.outline = outline
        self.logger = logger or logging.getLogger(__name__)

        # Host callbacks
        self.on_select_callback = on_select
        self.on_hover_start_callback = on_hover_start
        self.on_hover_end_callback = on_hover_end
        self.on_highlight_callback = on_highlight

        self._range = range
        self._center = initial_center
        self._highlight: Optional[HighlightState] = None
        if range is not None:
            self._highlight = HighlightState(initial_center, range)

        self.logger.debug(f"Grid ready: levels={levels}, range={range}, center={initial_center.key()}")

    @classmethod
    def from_config(cls, config: GridConfig, **callbacks) -> 'GridController':
        return cls(
            levels=config.levels,
            range=config.range,
            initial_center=config.initial_center.to_cube(),
            cell_size=config.cell_size,
            outline=config.outline,
            **callbacks
        )

    @staticmethod
    def _validate(levels, range, initial_center, cell_size):
        if isinstance(levels, bool) or not isinstance(levels, int) or levels < 0:
            raise InvalidConfiguration(f"levels must be a non-negative integer, got {levels!r}")
        if range is not None and (isinstance(range, bool) or not isinstance(range, int) or range < 0):
            raise InvalidConfiguration(f"range must be a non-negative integer or None, got {range!r}")
        if not isinstance(initial_center, CubeCoordinate):
            raise InvalidConfiguration(f"initial_center must be a CubeCoordinate, got {initial_center!r}")
        if (isinstance(cell_size, bool) or not isinstance(cell_size, (int, float))
                or not cell_size > 0 or not math.isfinite(cell_size)):
            raise InvalidConfiguration(f"cell_size must be a finite positive number, got {cell_size!r}")

    # --- State ---

    @property
    def center(self) -> CubeCoordinate:
        return self._center

    @property
    def range(self) -> Optional[int]:
        return self._range

    @property
    def highlight_enabled(self) -> bool:
        return self._highlight is not None

    def get_highlight_set(self) -> FrozenSet[CubeCoordinate]:
        """Read-only snapshot for the renderer."""
        if self._highlight is None:
            return frozenset()
        return self._highlight.snapshot()

    def is_highlighted(self, coord: CubeCoordinate) -> bool:
        return self._highlight is not None and self._highlight.contains(coord)

    # --- Interaction ---

    def on_interaction(self, kind: Union[InteractionKind, str], coord: CubeCoordinate) -> bool:
        """
        Single entry point for renderer events.
        Returns True when the event was forwarded to the host.
        """
        kind = InteractionKind(kind)
        if kind == InteractionKind.CLICK:
            return self.on_select(coord)
        if kind == InteractionKind.HOVER_START:
            self.on_hover_start(coord)
        else:
            self.on_hover_end(coord)
        return True

    def on_select(self, target: CubeCoordinate) -> bool:
        if self._highlight is not None:
            if not self._highlight.contains(target):
                self.logger.debug(f"Rejected select {target.key()}: outside highlight around {self._center.key()}")
                return False
            self._highlight.recenter(target, self._range)

        self._center = target
        self.logger.debug(f"Accepted select {target.key()}")

        if self._highlight is not None and self.on_highlight_callback:
            self.on_highlight_callback(self._highlight.snapshot())
        if self.on_select_callback:
            self.on_select_callback(target)
        return True

    def on_hover_start(self, coord: CubeCoordinate) -> None:
        if self.on_hover_start_callback:
            self.on_hover_start_callback(coord)

    def on_hover_end(self, coord: CubeCoordinate) -> None:
        if self.on_hover_end_callback:
            self.on_hover_end_callback(coord)

    # --- Geometry for the renderer ---

    def get_cell_center(self, coord: CubeCoordinate) -> Point:
        return layout.center(coord, self.cell_size)

    def get_cell_vertices(self) -> Tuple[Point, ...]:
        return layout.vertices(self.cell_size)

    def get_cell_polygon(self, coord: CubeCoordinate) -> Tuple[Point, ...]:
        return layout.polygon(coord, self.cell_size)

    def get_extent(self) -> Tuple[float, float, float, float]:
        return layout.grid_extent(self.levels, self.cell_size)

    def grid_cells(self) -> List[CubeCoordinate]:
        """Cells of the static outline; empty when the outline is switched off."""
        if not self.outline:
            return []
        return grid_outline(self.levels)

    def in_bounds(self, coord: CubeCoordinate) -> bool:
        return max(abs(coord.x), abs(coord.y), abs(coord.z)) <= self.levels

    def __repr__(self):
        return f"GridController(levels={self.levels}, range={self._range}, center={self._center!r})"
