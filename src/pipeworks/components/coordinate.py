from __future__ import annotations

from typing import NamedTuple

from pipeworks.components.direction import Direction


class Coordinate(NamedTuple):
    """Grid index pair. Compares equal to a plain (row, col) tuple."""
    row: int
    col: int

    def step(self, direction: Direction) -> Coordinate:
        d_row, d_col = direction.delta
        return Coordinate(self.row + d_row, self.col + d_col)

    def in_bounds(self, size: int) -> bool:
        return 0 <= self.row < size and 0 <= self.col < size
