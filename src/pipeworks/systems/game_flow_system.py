"""High-level coordinator for difficulty, level progression and score."""
from __future__ import annotations

import logging

from esper import World

from pipeworks.components.game_state import GameMode
from pipeworks.constants import DIFFICULTY_SIZES, POINTS_PER_PATH_TILE
from pipeworks.events.bus import (
    EVENT_DIFFICULTY_SELECTED,
    EVENT_LEVEL_REQUEST,
    EVENT_LEVEL_SOLVED,
    EVENT_NEXT_LEVEL_REQUEST,
    EVENT_RANDOMIZE_REQUEST,
    EVENT_SCORE_CHANGED,
    EventBus,
)
from pipeworks.systems.board_ops import get_level_settings
from pipeworks.utils.game_state import get_game_state

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Turns player commands into level requests and keeps level/score counters."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus

        self.event_bus.subscribe(EVENT_DIFFICULTY_SELECTED, self._on_difficulty_selected)
        self.event_bus.subscribe(EVENT_RANDOMIZE_REQUEST, self._on_randomize)
        self.event_bus.subscribe(EVENT_NEXT_LEVEL_REQUEST, self._on_next_level)
        self.event_bus.subscribe(EVENT_LEVEL_SOLVED, self._on_level_solved)

    def start(self) -> None:
        """Request the opening level for the configured difficulty."""
        self._request_level(reason="new_game")

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_difficulty_selected(self, sender, **payload) -> None:
        difficulty = payload.get("difficulty")
        if difficulty not in DIFFICULTY_SIZES:
            logger.debug("Unknown difficulty %r ignored", difficulty)
            return
        size = DIFFICULTY_SIZES[difficulty]
        # Settings and counters change only once the new board exists.
        self.event_bus.emit(EVENT_LEVEL_REQUEST, size=size, reason="difficulty")
        settings = get_level_settings(self.world)
        settings.difficulty = difficulty
        settings.board_size = size
        state = get_game_state(self.world)
        state.level = 1
        previous_score = state.score
        state.score = 0
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=0, level=1, delta=-previous_score)

    def _on_randomize(self, sender, **payload) -> None:
        self._request_level(reason="randomize")

    def _on_next_level(self, sender, **payload) -> None:
        state = get_game_state(self.world)
        if state.mode != GameMode.SOLVED:
            logger.debug("Next level requested before level %d was solved", state.level)
            return
        state.level += 1
        self._request_level(reason="next_level")

    def _on_level_solved(self, sender, **payload) -> None:
        path = payload.get("path") or []
        points = POINTS_PER_PATH_TILE * len(path)
        state = get_game_state(self.world)
        state.score += points
        self.event_bus.emit(EVENT_SCORE_CHANGED, score=state.score, level=state.level, delta=points)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _request_level(self, *, reason: str) -> None:
        settings = get_level_settings(self.world)
        self.event_bus.emit(EVENT_LEVEL_REQUEST, size=settings.board_size, reason=reason)
