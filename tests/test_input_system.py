from typing import Any

from pipeworks.constants import KEY_NEXT_LEVEL, KEY_RANDOMIZE
from pipeworks.events.bus import (
    EVENT_DIFFICULTY_SELECTED,
    EVENT_LEVEL_REQUEST,
    EVENT_MOUSE_PRESS,
    EVENT_NEXT_LEVEL_REQUEST,
    EVENT_RANDOMIZE_REQUEST,
    EVENT_TILE_CLICK,
)
from pipeworks.systems.input import InputSystem
from pipeworks.ui.layout import compute_board_geometry
from tests.helpers import build_game, record


class DummyWindow:
    def __init__(self, width=800, height=700):
        self.width = width
        self.height = height
        self.render_system: Any | None = None


def _setup(size=5):
    game = build_game()
    window = DummyWindow()
    input_system = InputSystem(game.bus, window, game.world)
    game.bus.emit(EVENT_LEVEL_REQUEST, size=size)
    return game, window, input_system


def test_mouse_press_translates_to_tile_click():
    game, window, _ = _setup()
    clicks = record(game.bus, EVENT_TILE_CLICK)
    geometry = compute_board_geometry(window.width, window.height, 5)
    x, y = geometry.cell_center(2, 3)
    game.bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert clicks == [{"row": 2, "col": 3}]


def test_top_left_click_maps_to_start_cell():
    game, window, _ = _setup(size=7)
    clicks = record(game.bus, EVENT_TILE_CLICK)
    geometry = compute_board_geometry(window.width, window.height, 7)
    game.bus.emit(EVENT_MOUSE_PRESS, x=geometry.left + 1, y=geometry.top - 1, button=1)
    assert clicks == [{"row": 0, "col": 0}]


def test_non_left_buttons_and_misses_are_ignored():
    game, window, _ = _setup()
    clicks = record(game.bus, EVENT_TILE_CLICK)
    geometry = compute_board_geometry(window.width, window.height, 5)
    x, y = geometry.cell_center(1, 1)
    game.bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=4)
    game.bus.emit(EVENT_MOUSE_PRESS, x=1, y=1, button=1)
    game.bus.emit(EVENT_MOUSE_PRESS, button=1)
    assert clicks == []


def test_clicks_before_a_level_exists_are_ignored():
    game = build_game()
    InputSystem(game.bus, DummyWindow(), game.world)
    clicks = record(game.bus, EVENT_TILE_CLICK)
    game.bus.emit(EVENT_MOUSE_PRESS, x=400, y=300, button=1)
    assert clicks == []


def test_key_bindings_emit_commands():
    game, _, input_system = _setup()
    difficulties = record(game.bus, EVENT_DIFFICULTY_SELECTED)
    randomize = record(game.bus, EVENT_RANDOMIZE_REQUEST)
    next_level = record(game.bus, EVENT_NEXT_LEVEL_REQUEST)
    input_system.handle_key_press(ord('3'), 0)
    input_system.handle_key_press(KEY_RANDOMIZE, 0)
    input_system.handle_key_press(KEY_NEXT_LEVEL, 0)
    input_system.handle_key_press(ord('z'), 0)
    assert difficulties == [{"difficulty": "hard"}]
    assert len(randomize) == 1
    assert len(next_level) == 1


def test_custom_key_bindings():
    game = build_game()
    input_system = InputSystem(game.bus, DummyWindow(), game.world, difficulty_keys={ord('e'): 'easy'})
    difficulties = record(game.bus, EVENT_DIFFICULTY_SELECTED)
    input_system.handle_key_press(ord('1'))
    input_system.handle_key_press(ord('e'))
    assert difficulties == [{"difficulty": "easy"}]
