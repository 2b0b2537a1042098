"""Level generation: plant a monotone path, record its solution, then scramble it."""
from __future__ import annotations

import random
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from pipeworks.components.coordinate import Coordinate
from pipeworks.components.direction import Direction
from pipeworks.components.level_state import Grid, LevelState, SolutionTile
from pipeworks.components.tile import Tile, TileKind
from pipeworks.puzzle.connectivity import find_path
from pipeworks.puzzle.tiles import corner_rotation_for

DECOY_KINDS: Tuple[TileKind, ...] = (TileKind.STRAIGHT, TileKind.CORNER)
MAX_SCRAMBLE_ATTEMPTS = 200


class PathStrategy(Enum):
    """How the guaranteed start-to-finish route is laid out."""
    RANDOM_WALK = "random_walk"
    FIXED_WAYPOINTS = "fixed_waypoints"


def random_walk_path(size: int, rng: random.Random) -> List[Coordinate]:
    """Right/down walk from the top-left to the bottom-right corner.

    Each step is a coin flip, except on the last row (forced right) and the last
    column (forced down).
    """
    last = size - 1
    row, col = 0, 0
    path = [Coordinate(0, 0)]
    while row < last or col < last:
        if row == last:
            col += 1
        elif col == last:
            row += 1
        elif rng.random() < 0.5:
            col += 1
        else:
            row += 1
        path.append(Coordinate(row, col))
    return path


def default_waypoints(size: int) -> List[Coordinate]:
    """Top edge to the middle column, down to the middle row, across, then down."""
    last = size - 1
    mid = last // 2
    points = [
        Coordinate(0, 0),
        Coordinate(0, mid),
        Coordinate(mid, mid),
        Coordinate(mid, last),
        Coordinate(last, last),
    ]
    deduped: List[Coordinate] = []
    for point in points:
        if not deduped or deduped[-1] != point:
            deduped.append(point)
    return deduped


def waypoint_path(size: int, waypoints: Sequence[Tuple[int, int]] | None = None) -> List[Coordinate]:
    """Join waypoints with right-then-down legs.

    The start and finish corners are added when missing. Raises ValueError if a
    waypoint is out of bounds or would need an up/left move to reach.
    """
    last = size - 1
    points = [Coordinate(*p) for p in (waypoints if waypoints is not None else default_waypoints(size))]
    if not points or points[0] != (0, 0):
        points.insert(0, Coordinate(0, 0))
    if points[-1] != (last, last):
        points.append(Coordinate(last, last))
    for point in points:
        if not point.in_bounds(size):
            raise ValueError(f"Waypoint {tuple(point)} outside a {size}x{size} grid")
    path = [points[0]]
    for target in points[1:]:
        current = path[-1]
        if target.row < current.row or target.col < current.col:
            raise ValueError(f"Waypoint {tuple(target)} is not reachable moving only right/down from {tuple(current)}")
        row, col = current
        while col < target.col:
            col += 1
            path.append(Coordinate(row, col))
        while row < target.row:
            row += 1
            path.append(Coordinate(row, col))
    return path


def solved_tile(prev: Coordinate, curr: Coordinate, nxt: Coordinate) -> Tile:
    """Tile at ``curr`` in the orientation that links ``prev`` to ``nxt``."""
    incoming = Direction.from_delta(curr.row - prev.row, curr.col - prev.col)
    outgoing = Direction.from_delta(nxt.row - curr.row, nxt.col - curr.col)
    if incoming.is_horizontal == outgoing.is_horizontal:
        return Tile(TileKind.STRAIGHT, 0 if outgoing.is_horizontal else 1)
    # The corner opens back toward prev and forward toward next.
    return Tile(TileKind.CORNER, corner_rotation_for((incoming.opposite, outgoing)))


def _blank_grid(size: int) -> Grid:
    return [[Tile() for _ in range(size)] for _ in range(size)]


def _decoy_grid(size: int, rng: random.Random) -> Grid:
    return [
        [Tile(rng.choice(DECOY_KINDS), rng.randrange(4)) for _ in range(size)]
        for _ in range(size)
    ]


def build_path(
    size: int,
    strategy: PathStrategy,
    rng: random.Random,
    waypoints: Sequence[Tuple[int, int]] | None = None,
) -> List[Coordinate]:
    if strategy is PathStrategy.FIXED_WAYPOINTS:
        return waypoint_path(size, waypoints)
    return random_walk_path(size, rng)


def generate(
    size: int,
    *,
    strategy: PathStrategy = PathStrategy.RANDOM_WALK,
    rng: random.Random | None = None,
    fill_decoys: bool = False,
    waypoints: Sequence[Tuple[int, int]] | None = None,
    max_scramble_attempts: int = MAX_SCRAMBLE_ATTEMPTS,
) -> LevelState:
    """Create a fresh puzzle with a guaranteed start-to-finish route.

    Interior path tiles get their solved orientation recorded in
    ``solution_tiles`` and are then given a random rotation. With
    ``fill_decoys`` every other cell holds a random straight or corner pipe.
    The scramble is re-rolled while it still connects start to finish, up to
    ``max_scramble_attempts`` times.
    """
    if size < 1:
        raise ValueError(f"Level size must be positive, got {size}")
    rng = rng or random.Random()
    grid = _decoy_grid(size, rng) if fill_decoys else _blank_grid(size)
    path = build_path(size, strategy, rng, waypoints)

    last = size - 1
    if size > 1:
        grid[last][last] = Tile(TileKind.FINISH)
    grid[0][0] = Tile(TileKind.START)

    solution: Dict[Coordinate, SolutionTile] = {}
    for prev, curr, nxt in zip(path, path[1:], path[2:]):
        tile = solved_tile(prev, curr, nxt)
        grid[curr.row][curr.col] = tile
        solution[curr] = SolutionTile(coordinate=curr, kind=tile.kind, rotation=tile.rotation)

    for _ in range(max(1, max_scramble_attempts)):
        for coord in solution:
            grid[coord.row][coord.col].rotation = rng.randrange(4)
        if not solution or not find_path(grid).connected:
            break

    return LevelState(size=size, grid=grid, solution_path=path, solution_tiles=solution)
