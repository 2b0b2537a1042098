from __future__ import annotations

import logging

from esper import World

from pipeworks.components.board_evaluation import BoardEvaluation
from pipeworks.components.game_state import GameMode
from pipeworks.components.level_settings import WinMode
from pipeworks.events.bus import (
    EVENT_BOARD_EVALUATED,
    EVENT_LEVEL_GENERATED,
    EVENT_LEVEL_SOLVED,
    EVENT_TILE_ROTATED,
    EventBus,
)
from pipeworks.puzzle import PathResult, find_path, is_solved
from pipeworks.systems.board_ops import find_level, get_level_settings
from pipeworks.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class WinCheckSystem:
    """Re-evaluates the board after every rotation with the configured evaluator.

    ``WinMode.CONNECTIVITY`` accepts any start-to-finish route; ``WinMode.SOLUTION``
    only accepts the planted route in its recorded rotations. Nothing is cached
    between checks since one rotation can change connectivity anywhere.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_ROTATED, self._on_tile_rotated)
        self.event_bus.subscribe(EVENT_LEVEL_GENERATED, self._on_level_generated)

    def _on_level_generated(self, sender, **payload) -> None:
        # A fresh level starts unevaluated; it can only be won by rotating.
        found = find_level(self.world)
        if found is None:
            return
        self.world.add_component(found[0], BoardEvaluation())

    def _on_tile_rotated(self, sender, **payload) -> None:
        self.evaluate()

    def evaluate(self) -> PathResult | None:
        found = find_level(self.world)
        if found is None:
            return None
        entity, level = found
        mode = get_level_settings(self.world).win_mode
        if mode is WinMode.SOLUTION:
            solved = is_solved(level.grid, level.solution_tiles)
            result = PathResult(solved, list(level.solution_path) if solved else [])
        else:
            result = find_path(level.grid)
        self.world.add_component(entity, BoardEvaluation(connected=result.connected, path=list(result.path)))
        self.event_bus.emit(EVENT_BOARD_EVALUATED, connected=result.connected, path=result.path, mode=mode)

        state = get_game_state(self.world)
        if result.connected and state.mode == GameMode.PLAYING:
            set_game_mode(self.world, self.event_bus, GameMode.SOLVED)
            logger.info("Level %d solved (%s, route of %d cells)", state.level, mode.value, len(result.path))
            self.event_bus.emit(EVENT_LEVEL_SOLVED, level=state.level, size=level.size, path=result.path)
        return result
