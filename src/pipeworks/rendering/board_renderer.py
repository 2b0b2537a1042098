from __future__ import annotations

from typing import TYPE_CHECKING

from pipeworks.components.tile import TileKind
from pipeworks.puzzle import connections

if TYPE_CHECKING:
    from pipeworks.rendering.context import RenderContext
    from pipeworks.systems.render import RenderSystem

START_BACKGROUND = (255, 201, 7)
FINISH_BACKGROUND = (79, 203, 83)
TILE_BACKGROUND = (224, 247, 250)
PIPE_COLOR = (21, 154, 72)
ENDPOINT_PIPE_COLOR = (46, 157, 247)
CONNECTED_PIPE_COLOR = (46, 157, 247)
GRID_LINE_COLOR = (120, 144, 156)

BACKGROUNDS = {
    TileKind.START: START_BACKGROUND,
    TileKind.FINISH: FINISH_BACKGROUND,
}


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 2):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        rs = self._rs
        rs._last_tile_layout = {}
        level = ctx.level
        geometry = ctx.geometry
        if level is None or geometry is None:
            return

        tile_size = geometry.tile_size
        half = tile_size / 2
        pipe_width = max(tile_size * 0.28, 3)

        for row, tiles in enumerate(level.grid):
            for col, tile in enumerate(tiles):
                cx, cy = geometry.cell_center(row, col)
                openings = connections(tile)
                rs._last_tile_layout[(row, col)] = {
                    "center": (cx, cy),
                    "size": tile_size,
                    "kind": tile.kind,
                    "rotation": tile.rotation,
                    "connections": openings,
                    "highlighted": (row, col) in ctx.highlighted,
                }
                if headless:
                    continue

                background = BACKGROUNDS.get(tile.kind, TILE_BACKGROUND)
                inner = tile_size - self._padding
                arcade.draw_lbwh_rectangle_filled(cx - inner / 2, cy - inner / 2, inner, inner, background)
                arcade.draw_lbwh_rectangle_outline(cx - half, cy - half, tile_size, tile_size, GRID_LINE_COLOR, 1)

                if not openings:
                    continue
                if (row, col) in ctx.highlighted:
                    color = CONNECTED_PIPE_COLOR
                elif tile.kind in BACKGROUNDS:
                    color = ENDPOINT_PIPE_COLOR
                else:
                    color = PIPE_COLOR
                for direction in openings:
                    d_row, d_col = direction.delta
                    # Screen y grows upward while grid rows grow downward.
                    end_x = cx + d_col * half
                    end_y = cy - d_row * half
                    arcade.draw_line(cx, cy, end_x, end_y, color, pipe_width)
                arcade.draw_circle_filled(cx, cy, pipe_width / 2, color)
                if tile.kind in BACKGROUNDS:
                    label = "S" if tile.kind == TileKind.START else "F"
                    arcade.draw_text(
                        label,
                        cx,
                        cy,
                        arcade.color.WHITE,
                        font_size=max(int(tile_size * 0.3), 8),
                        anchor_x="center",
                        anchor_y="center",
                        bold=True,
                    )
