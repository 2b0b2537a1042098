from __future__ import annotations

from typing import TYPE_CHECKING, List

from pipeworks.components.game_state import GameState
from pipeworks.components.level_settings import LevelSettings

if TYPE_CHECKING:
    from pipeworks.rendering.context import RenderContext
    from pipeworks.systems.render import RenderSystem

HUD_TEXT_COLOR = (236, 239, 241)
FEEDBACK_COLOR = (79, 203, 83)
HINT_COLOR = (144, 164, 174)
HINT_TEXT = "Click a pipe to rotate   1/2/3 difficulty   R randomize   N next level"


class HudRenderer:
    """Level, score, timer and feedback line drawn above the board."""

    def __init__(self, render_system: RenderSystem):
        self._rs = render_system

    def lines(self, ctx: RenderContext) -> List[str]:
        rs = self._rs
        level = 1
        score = 0
        for _, state in ctx.world.get_component(GameState):
            level, score = state.level, state.score
            break
        difficulty = ""
        for _, settings in ctx.world.get_component(LevelSettings):
            difficulty = settings.difficulty
            break
        return [
            f"Level: {level}",
            f"Score: {score}",
            f"Time: {rs.elapsed_seconds}s",
            f"Difficulty: {difficulty}",
        ]

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        rs = self._rs
        lines = self.lines(ctx)
        rs._last_hud_lines = lines
        if headless:
            return
        top = ctx.window_height - 30
        spacing = ctx.window_width / (len(lines) + 1)
        for index, text in enumerate(lines):
            arcade.draw_text(
                text,
                spacing * (index + 1),
                top,
                HUD_TEXT_COLOR,
                font_size=16,
                anchor_x="center",
            )
        if rs.feedback:
            arcade.draw_text(
                rs.feedback,
                ctx.window_width / 2,
                top - 30,
                FEEDBACK_COLOR,
                font_size=18,
                anchor_x="center",
                bold=True,
            )
        else:
            arcade.draw_text(
                HINT_TEXT,
                ctx.window_width / 2,
                top - 28,
                HINT_COLOR,
                font_size=11,
                anchor_x="center",
            )
