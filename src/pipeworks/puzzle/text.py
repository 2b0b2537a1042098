from __future__ import annotations

from typing import Dict, FrozenSet, Iterable

from pipeworks.components.coordinate import Coordinate
from pipeworks.components.direction import Direction
from pipeworks.components.level_state import Grid
from pipeworks.components.tile import Tile, TileKind
from pipeworks.puzzle.tiles import connections

_UP, _RIGHT, _DOWN, _LEFT = Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT

# Glyphs follow the live connection set so they never disagree with the solver.
PIPE_GLYPHS: Dict[FrozenSet[Direction], str] = {
    frozenset({_LEFT, _RIGHT}): "─",
    frozenset({_UP, _DOWN}): "│",
    frozenset({_DOWN, _RIGHT}): "┌",
    frozenset({_UP, _RIGHT}): "└",
    frozenset({_UP, _LEFT}): "┘",
    frozenset({_DOWN, _LEFT}): "┐",
}
ENDPOINT_GLYPHS: Dict[TileKind, str] = {
    TileKind.START: "S",
    TileKind.FINISH: "F",
}
EMPTY_GLYPH = "·"


def glyph_for(tile: Tile) -> str:
    if tile.kind in ENDPOINT_GLYPHS:
        return ENDPOINT_GLYPHS[tile.kind]
    return PIPE_GLYPHS.get(connections(tile), EMPTY_GLYPH)


def format_grid(grid: Grid, highlight: Iterable[Coordinate] = ()) -> str:
    """Render the grid as lines of box-drawing glyphs; highlighted cells are bracketed."""
    marked = {Coordinate(*c) for c in highlight}
    lines = []
    for row, tiles in enumerate(grid):
        cells = []
        for col, tile in enumerate(tiles):
            glyph = glyph_for(tile)
            cells.append(f"[{glyph}]" if (row, col) in marked else f" {glyph} ")
        lines.append("".join(cells))
    return "\n".join(lines)
