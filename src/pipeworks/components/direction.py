from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Direction(Enum):
    """Tile edge directions. Values are (d_row, d_col) steps; row 0 is the top row.

    Iteration order (UP, RIGHT, DOWN, LEFT) is the neighbour order used by the
    connectivity search.
    """
    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    @classmethod
    def from_delta(cls, d_row: int, d_col: int) -> Direction:
        """Direction of a unit step; raises ValueError for non-adjacent deltas."""
        return cls((d_row, d_col))


_OPPOSITES: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
