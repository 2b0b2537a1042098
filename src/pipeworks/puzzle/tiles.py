"""Tile connection table and the rotation command."""
from __future__ import annotations

from typing import Dict, FrozenSet, Iterable

from pipeworks.components.direction import Direction
from pipeworks.components.level_state import Grid
from pipeworks.components.tile import Tile, TileKind

Connections = FrozenSet[Direction]

_NONE: Connections = frozenset()

# Straight pipes only have two distinct states; rotation parity picks one.
STRAIGHT_CONNECTIONS: Dict[int, Connections] = {
    0: frozenset({Direction.LEFT, Direction.RIGHT}),
    1: frozenset({Direction.UP, Direction.DOWN}),
}

# Fixed lookup, not derived geometrically. Generation picks corner rotations from it.
CORNER_CONNECTIONS: Dict[int, Connections] = {
    0: frozenset({Direction.DOWN, Direction.RIGHT}),
    1: frozenset({Direction.UP, Direction.RIGHT}),
    2: frozenset({Direction.UP, Direction.LEFT}),
    3: frozenset({Direction.DOWN, Direction.LEFT}),
}

# Start also opens down and Finish also opens up, so routes that leave Start
# downward or reach Finish from above can connect.
FIXED_CONNECTIONS: Dict[TileKind, Connections] = {
    TileKind.EMPTY: _NONE,
    TileKind.START: frozenset({Direction.RIGHT, Direction.DOWN}),
    TileKind.FINISH: frozenset({Direction.LEFT, Direction.UP}),
}


def connections(tile: Tile) -> Connections:
    """Edge directions the tile opens toward at its current rotation.

    Unknown kinds yield the empty set so the connectivity search treats them as walls.
    """
    if tile.kind is TileKind.STRAIGHT:
        return STRAIGHT_CONNECTIONS[tile.rotation % 2]
    if tile.kind is TileKind.CORNER:
        return CORNER_CONNECTIONS[tile.rotation % 4]
    return FIXED_CONNECTIONS.get(tile.kind, _NONE)


def corner_rotation_for(openings: Iterable[Direction]) -> int:
    wanted = frozenset(openings)
    for rotation, dirs in CORNER_CONNECTIONS.items():
        if dirs == wanted:
            return rotation
    raise ValueError(f"No corner rotation opens exactly {sorted(d.name for d in wanted)}")


def tiles_connect(source: Tile, target: Tile, direction: Direction) -> bool:
    """True when ``source`` opens toward ``target`` and ``target`` opens back."""
    return direction in connections(source) and direction.opposite in connections(target)


def rotate_tile(grid: Grid, row: int, col: int) -> Tile:
    """Turn the tile at (row, col) a quarter clockwise and return it.

    Start, finish and empty cells are returned untouched.
    """
    assert 0 <= row < len(grid) and 0 <= col < len(grid[row]), f"cell ({row}, {col}) outside grid"
    tile = grid[row][col]
    if not tile.rotatable:
        return tile
    tile.rotation = (tile.rotation + 1) % 4
    return tile
