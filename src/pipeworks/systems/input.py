from typing import Dict, Optional

from esper import World

from pipeworks.constants import KEY_DIFFICULTY, KEY_NEXT_LEVEL, KEY_RANDOMIZE, LEFT_MOUSE_BUTTON
from pipeworks.events.bus import (
    EventBus,
    EVENT_DIFFICULTY_SELECTED,
    EVENT_MOUSE_PRESS,
    EVENT_NEXT_LEVEL_REQUEST,
    EVENT_RANDOMIZE_REQUEST,
    EVENT_TILE_CLICK,
)
from pipeworks.systems.board_ops import get_level_state
from pipeworks.ui.layout import compute_board_geometry


class InputSystem:
    def __init__(
        self,
        event_bus: EventBus,
        window,
        world: World,
        *,
        difficulty_keys: Optional[Dict[int, str]] = None,
        randomize_key: int = KEY_RANDOMIZE,
        next_level_key: int = KEY_NEXT_LEVEL,
    ):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.difficulty_keys = dict(KEY_DIFFICULTY if difficulty_keys is None else difficulty_keys)
        self.randomize_key = randomize_key
        self.next_level_key = next_level_key
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Only the left button rotates tiles.
        if button != LEFT_MOUSE_BUTTON:
            return
        level = get_level_state(self.world)
        if level is None:
            return
        geometry = compute_board_geometry(self.window.width, self.window.height, level.size)
        cell = geometry.cell_at(x, y)
        if cell is None:
            return
        self.event_bus.emit(EVENT_TILE_CLICK, row=cell.row, col=cell.col)

    def handle_key_press(self, symbol: int, modifiers: int = 0):
        if symbol in self.difficulty_keys:
            self.event_bus.emit(EVENT_DIFFICULTY_SELECTED, difficulty=self.difficulty_keys[symbol])
        elif symbol == self.randomize_key:
            self.event_bus.emit(EVENT_RANDOMIZE_REQUEST)
        elif symbol == self.next_level_key:
            self.event_bus.emit(EVENT_NEXT_LEVEL_REQUEST)
