from __future__ import annotations

import random
from typing import Sequence, Tuple

from esper import World

from pipeworks.components.game_state import GameState, GameMode
from pipeworks.components.level_settings import LevelSettings, WinMode
from pipeworks.constants import (
    DEFAULT_DIFFICULTY,
    DEFAULT_FILL_DECOYS,
    DEFAULT_PATH_STRATEGY,
    DEFAULT_WIN_MODE,
    DIFFICULTY_SIZES,
)
from pipeworks.puzzle.generator import PathStrategy, waypoint_path


def create_world(
    *,
    difficulty: str = DEFAULT_DIFFICULTY,
    win_mode: WinMode = DEFAULT_WIN_MODE,
    strategy: PathStrategy = DEFAULT_PATH_STRATEGY,
    fill_decoys: bool = DEFAULT_FILL_DECOYS,
    waypoints: Sequence[Tuple[int, int]] | None = None,
    rng: random.Random | None = None,
) -> World:
    if difficulty not in DIFFICULTY_SIZES:
        raise ValueError(f"Unknown difficulty {difficulty!r}; expected one of {sorted(DIFFICULTY_SIZES)}")
    if waypoints is not None:
        # Waypoints are shared by every difficulty, so they must fit the smallest board too.
        for size in sorted(set(DIFFICULTY_SIZES.values())):
            waypoint_path(size, waypoints)
    world = World()
    setattr(world, "random", rng or random.Random())

    # Single entity carrying the global game state and level settings.
    world.create_entity(
        GameState(mode=GameMode.PLAYING),
        LevelSettings(
            difficulty=difficulty,
            board_size=DIFFICULTY_SIZES[difficulty],
            win_mode=win_mode,
            strategy=strategy,
            fill_decoys=fill_decoys,
            waypoints=list(waypoints) if waypoints is not None else None,
        ),
    )
    return world
