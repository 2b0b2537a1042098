from typing import Any, Dict, List, Tuple

from esper import World

from pipeworks.events.bus import (
    EventBus,
    EVENT_LEVEL_GENERATED,
    EVENT_LEVEL_SOLVED,
    EVENT_TIMER_UPDATED,
)
from pipeworks.rendering.board_renderer import BoardRenderer
from pipeworks.rendering.context import RenderContext, build_render_context
from pipeworks.rendering.hud_renderer import HudRenderer

SOLVED_FEEDBACK = "Connected! Press N for the next level."


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_LEVEL_GENERATED, self.on_level_generated)
        self.event_bus.subscribe(EVENT_LEVEL_SOLVED, self.on_level_solved)
        self.event_bus.subscribe(EVENT_TIMER_UPDATED, self.on_timer_updated)
        self.elapsed_seconds = 0
        self.feedback = ""
        self._render_ctx: RenderContext | None = None
        self._last_tile_layout: Dict[Tuple[int, int], Dict[str, Any]] = {}
        self._last_hud_lines: List[str] = []
        self._board_renderer = BoardRenderer(self)
        self._hud_renderer = HudRenderer(self)

    def on_level_generated(self, sender, **kwargs):
        self.feedback = ""
        self.elapsed_seconds = 0

    def on_level_solved(self, sender, **kwargs):
        self.feedback = SOLVED_FEEDBACK

    def on_timer_updated(self, sender, **kwargs):
        seconds = kwargs.get('seconds')
        if seconds is None:
            return
        self.elapsed_seconds = int(seconds)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: without an active window skip draw calls but still build layout caches.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        ctx = build_render_context(self.world, self.window.width, self.window.height)
        self._render_ctx = ctx
        self._board_renderer.render(arcade, ctx, headless=headless)
        self._hud_renderer.render(arcade, ctx, headless=headless)
