from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from pipeworks.components.coordinate import Coordinate
from pipeworks.components.tile import Tile, TileKind

Grid = List[List[Tile]]


@dataclass(slots=True)
class SolutionTile:
    """Ground-truth orientation a path cell must show to count as solved."""
    coordinate: Coordinate
    kind: TileKind
    rotation: int


@dataclass(slots=True)
class LevelState:
    """The live puzzle: grid plus the planted path and its recorded solution.

    Lives on the board entity and is replaced as a whole whenever a level is
    generated. Only tile rotations mutate it in between.
    """
    size: int
    grid: Grid
    solution_path: List[Coordinate] = field(default_factory=list)
    solution_tiles: Dict[Coordinate, SolutionTile] = field(default_factory=dict)

    def tile_at(self, row: int, col: int) -> Tile:
        return self.grid[row][col]

    @property
    def start(self) -> Coordinate:
        return Coordinate(0, 0)

    @property
    def finish(self) -> Coordinate:
        return Coordinate(self.size - 1, self.size - 1)
