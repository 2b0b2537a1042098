from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from pipeworks.components.coordinate import Coordinate
from pipeworks.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    HUD_HEIGHT,
    MIN_TILE_SIZE,
)


@dataclass(slots=True)
class BoardGeometry:
    """Screen placement of a square board. Row 0 is drawn at the top."""
    size: int
    tile_size: int
    left: float
    bottom: float

    @property
    def width(self) -> float:
        return self.size * self.tile_size

    @property
    def top(self) -> float:
        return self.bottom + self.width

    def cell_center(self, row: int, col: int) -> Tuple[float, float]:
        x = self.left + col * self.tile_size + self.tile_size / 2
        y = self.top - row * self.tile_size - self.tile_size / 2
        return x, y

    def cell_at(self, x: float, y: float) -> Coordinate | None:
        if x < self.left or x >= self.left + self.width:
            return None
        if y < self.bottom or y >= self.top:
            return None
        col = int((x - self.left) // self.tile_size)
        row = int((self.top - y) // self.tile_size)
        if 0 <= row < self.size and 0 <= col < self.size:
            return Coordinate(row, col)
        return None


def compute_board_geometry(window_width: int, window_height: int, size: int) -> BoardGeometry:
    """Board placement shared by rendering and input so clicks land on drawn cells."""
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - HUD_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    cells = max(size, 1)
    tile_size = int(min(max_board_w / cells, max_board_h / cells))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    start_x = (window_width - cells * tile_size) / 2
    return BoardGeometry(size=cells, tile_size=tile_size, left=start_x, bottom=BOTTOM_MARGIN)
