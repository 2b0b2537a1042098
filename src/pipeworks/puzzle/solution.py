from __future__ import annotations

from typing import Mapping

from pipeworks.components.coordinate import Coordinate
from pipeworks.components.level_state import Grid, SolutionTile


def is_solved(grid: Grid, solution_tiles: Mapping[Coordinate, SolutionTile]) -> bool:
    """True when every planted path cell shows exactly its recorded kind and rotation.

    Stricter than ``find_path``: an alternative route, or a straight pipe turned
    half a revolution from its recorded rotation, does not count.
    """
    for coord, expected in solution_tiles.items():
        tile = grid[coord.row][coord.col]
        if tile.kind is not expected.kind or tile.rotation != expected.rotation:
            return False
    return True


def apply_solution(grid: Grid, solution_tiles: Mapping[Coordinate, SolutionTile]) -> None:
    """Put every recorded path tile back into its solved orientation."""
    for coord, expected in solution_tiles.items():
        tile = grid[coord.row][coord.col]
        tile.kind = expected.kind
        tile.rotation = expected.rotation
