import logging
import random
from typing import Optional

from esper import World

from pipeworks.components.game_state import GameMode
from pipeworks.components.level_state import LevelState
from pipeworks.events.bus import (
    EventBus,
    EVENT_LEVEL_REQUEST,
    EVENT_LEVEL_GENERATED,
    EVENT_TILE_CLICK,
    EVENT_TILE_ROTATED,
    EVENT_TILE_ROTATE_REJECTED,
)
from pipeworks.puzzle import format_grid, generate, rotate_tile
from pipeworks.systems.board_ops import get_level_settings
from pipeworks.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns the board entity: generates levels into it and applies tile rotations."""

    def __init__(self, world: World, event_bus: EventBus, *, rng: random.Random | None = None):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        # Single board entity; each generated LevelState replaces the previous one on it.
        self.board_entity = self.world.create_entity()
        self.event_bus.subscribe(EVENT_LEVEL_REQUEST, self.on_level_request)
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)

    @property
    def level_state(self) -> Optional[LevelState]:
        try:
            return self.world.component_for_entity(self.board_entity, LevelState)
        except KeyError:
            return None

    def on_level_request(self, sender, **kwargs):
        settings = get_level_settings(self.world)
        size = kwargs.get('size')
        if size is None:
            size = settings.board_size
        try:
            size = int(size)
        except (TypeError, ValueError):
            return
        if size < 1:
            logger.debug("Ignoring level request for size %s", size)
            return
        reason = kwargs.get('reason', 'new_level')
        level = generate(
            size,
            strategy=settings.strategy,
            rng=self._rng,
            fill_decoys=settings.fill_decoys,
            waypoints=settings.waypoints,
        )
        # add_component replaces the existing LevelState in one step.
        self.world.add_component(self.board_entity, level)
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        logger.info("Generated %dx%d level (%s), path length %d", size, size, reason, len(level.solution_path))
        logger.debug("Level layout:\n%s", format_grid(level.grid))
        self.event_bus.emit(
            EVENT_LEVEL_GENERATED,
            size=size,
            reason=reason,
            path_length=len(level.solution_path),
        )

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        level = self.level_state
        if level is None:
            return
        if not (0 <= row < level.size and 0 <= col < level.size):
            return
        if get_game_state(self.world).mode == GameMode.SOLVED:
            self._reject(row, col, 'level_solved')
            return
        tile = level.tile_at(row, col)
        if not tile.rotatable:
            self._reject(row, col, tile.kind.name.lower())
            return
        rotate_tile(level.grid, row, col)
        self.event_bus.emit(EVENT_TILE_ROTATED, row=row, col=col, kind=tile.kind, rotation=tile.rotation)

    def _reject(self, row: int, col: int, reason: str):
        logger.debug("Rotation at (%d, %d) rejected: %s", row, col, reason)
        self.event_bus.emit(EVENT_TILE_ROTATE_REJECTED, row=row, col=col, reason=reason)
