import pytest

from pipeworks.components.game_state import GameMode
from pipeworks.components.level_settings import WinMode
from pipeworks.constants import DIFFICULTY_SIZES
from pipeworks.puzzle import PathStrategy
from pipeworks.systems.board_ops import find_level, get_level_settings
from pipeworks.utils.game_state import get_game_state
from pipeworks.world import create_world


def test_defaults():
    world = create_world()
    settings = get_level_settings(world)
    assert settings.difficulty == "easy"
    assert settings.board_size == DIFFICULTY_SIZES["easy"]
    assert settings.win_mode == WinMode.CONNECTIVITY
    assert settings.strategy == PathStrategy.RANDOM_WALK
    state = get_game_state(world)
    assert (state.mode, state.level, state.score) == (GameMode.PLAYING, 1, 0)
    assert find_level(world) is None


def test_overrides():
    world = create_world(
        difficulty="hard",
        win_mode=WinMode.SOLUTION,
        strategy=PathStrategy.FIXED_WAYPOINTS,
        waypoints=[(0, 0), (0, 4), (3, 4)],
    )
    settings = get_level_settings(world)
    assert settings.board_size == 9
    assert settings.win_mode == WinMode.SOLUTION
    assert settings.waypoints == [(0, 0), (0, 4), (3, 4)]


def test_unknown_difficulty_raises():
    with pytest.raises(ValueError):
        create_world(difficulty="extreme")


def test_waypoints_must_fit_every_difficulty():
    # (6, 6) fits the hard board but not the easy one.
    with pytest.raises(ValueError):
        create_world(difficulty="hard", strategy=PathStrategy.FIXED_WAYPOINTS, waypoints=[(6, 6)])


def test_backtracking_waypoints_rejected():
    with pytest.raises(ValueError):
        create_world(strategy=PathStrategy.FIXED_WAYPOINTS, waypoints=[(0, 3), (2, 1)])
