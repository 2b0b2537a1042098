from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional

from pipeworks.components.coordinate import Coordinate
from pipeworks.components.direction import Direction
from pipeworks.components.level_state import Grid
from pipeworks.puzzle.tiles import tiles_connect


@dataclass(slots=True)
class PathResult:
    connected: bool
    path: List[Coordinate] = field(default_factory=list)


def find_path(grid: Grid) -> PathResult:
    """Breadth-first search from the top-left cell to the bottom-right one.

    A step is taken only when both tiles open toward each other. The grid is
    read, never modified; each cell is visited at most once, so the returned
    path is a shortest one, with ties settled by UP, RIGHT, DOWN, LEFT order.
    """
    size = len(grid)
    if size == 0:
        return PathResult(False)
    start = Coordinate(0, 0)
    goal = Coordinate(size - 1, size - 1)
    came_from: Dict[Coordinate, Optional[Coordinate]] = {start: None}
    queue: Deque[Coordinate] = deque([start])
    while queue:
        current = queue.popleft()
        if current == goal:
            return PathResult(True, _reconstruct(came_from, current))
        tile = grid[current.row][current.col]
        for direction in Direction:
            neighbour = current.step(direction)
            if not neighbour.in_bounds(size) or neighbour in came_from:
                continue
            if tiles_connect(tile, grid[neighbour.row][neighbour.col], direction):
                came_from[neighbour] = current
                queue.append(neighbour)
    return PathResult(False)


def _reconstruct(came_from: Dict[Coordinate, Optional[Coordinate]], end: Coordinate) -> List[Coordinate]:
    path: List[Coordinate] = []
    node: Optional[Coordinate] = end
    while node is not None:
        path.append(node)
        node = came_from[node]
    path.reverse()
    return path
