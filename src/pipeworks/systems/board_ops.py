from __future__ import annotations

from typing import Tuple

from esper import World

from pipeworks.components.level_settings import LevelSettings
from pipeworks.components.level_state import LevelState


def get_level_settings(world: World) -> LevelSettings:
    for _, settings in world.get_component(LevelSettings):
        return settings
    raise RuntimeError("LevelSettings not found")


def find_level(world: World) -> Tuple[int, LevelState] | None:
    """Return (board entity, LevelState) for the live level, if one was generated."""
    for entity, level in world.get_component(LevelState):
        return entity, level
    return None


def get_level_state(world: World) -> LevelState | None:
    found = find_level(world)
    return found[1] if found else None
