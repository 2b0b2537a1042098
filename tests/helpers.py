from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from esper import World

from pipeworks.components.level_state import LevelState
from pipeworks.components.tile import Tile, TileKind
from pipeworks.events.bus import EventBus, EVENT_TILE_CLICK
from pipeworks.systems.board import BoardSystem
from pipeworks.systems.game_flow_system import GameFlowSystem
from pipeworks.systems.win_check_system import WinCheckSystem
from pipeworks.world import create_world


@dataclass
class Game:
    bus: EventBus
    world: World
    board: BoardSystem
    win_check: WinCheckSystem
    flow: GameFlowSystem

    @property
    def level(self) -> LevelState:
        level = self.board.level_state
        assert level is not None, "no level generated yet"
        return level


def build_game(seed: int = 1, **world_kwargs: Any) -> Game:
    bus = EventBus()
    world = create_world(rng=random.Random(seed), **world_kwargs)
    return Game(
        bus=bus,
        world=world,
        board=BoardSystem(world, bus),
        win_check=WinCheckSystem(world, bus),
        flow=GameFlowSystem(world, bus),
    )


def record(bus: EventBus, name: str) -> List[Dict[str, Any]]:
    """Subscribe to ``name`` and collect every payload emitted for it."""
    received: List[Dict[str, Any]] = []
    bus.subscribe(name, lambda sender, **payload: received.append(payload))
    return received


def click_until(bus: EventBus, level: LevelState, row: int, col: int, done: Callable[[Tile], bool]) -> None:
    for _ in range(4):
        if done(level.tile_at(row, col)):
            return
        bus.emit(EVENT_TILE_CLICK, row=row, col=col)


def click_into_solution(bus: EventBus, level: LevelState) -> None:
    """Rotate every planted tile to its recorded orientation through tile clicks."""
    for coord, expected in level.solution_tiles.items():
        click_until(bus, level, coord.row, coord.col, lambda t, r=expected.rotation: t.rotation == r)


def grid_from_rows(rows: List[List[tuple]]) -> List[List[Tile]]:
    """Build a grid from (kind, rotation) pairs; ``None`` means an empty cell."""
    return [
        [Tile(*cell) if cell is not None else Tile(TileKind.EMPTY) for cell in row]
        for row in rows
    ]
