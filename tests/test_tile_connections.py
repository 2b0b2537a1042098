import pytest

from pipeworks.components.direction import Direction
from pipeworks.components.tile import Tile, TileKind
from pipeworks.puzzle import connections, corner_rotation_for, rotate_tile, tiles_connect

UP, RIGHT, DOWN, LEFT = Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT


def test_fixed_tiles():
    assert connections(Tile(TileKind.EMPTY)) == frozenset()
    assert connections(Tile(TileKind.START)) == {RIGHT, DOWN}
    assert connections(Tile(TileKind.FINISH)) == {LEFT, UP}


def test_fixed_tiles_ignore_rotation():
    for rotation in range(4):
        assert connections(Tile(TileKind.START, rotation)) == {RIGHT, DOWN}
        assert connections(Tile(TileKind.FINISH, rotation)) == {LEFT, UP}


def test_straight_uses_rotation_parity():
    assert connections(Tile(TileKind.STRAIGHT, 0)) == {LEFT, RIGHT}
    assert connections(Tile(TileKind.STRAIGHT, 1)) == {UP, DOWN}
    assert connections(Tile(TileKind.STRAIGHT, 2)) == {LEFT, RIGHT}
    assert connections(Tile(TileKind.STRAIGHT, 3)) == {UP, DOWN}


@pytest.mark.parametrize("rotation, expected", [
    (0, {DOWN, RIGHT}),
    (1, {UP, RIGHT}),
    (2, {UP, LEFT}),
    (3, {DOWN, LEFT}),
])
def test_corner_table(rotation, expected):
    assert connections(Tile(TileKind.CORNER, rotation)) == expected


def test_unknown_kind_is_a_wall():
    class Odd:
        kind = "mystery"
        rotation = 0

    assert connections(Odd()) == frozenset()


def test_corner_rotation_lookup():
    assert corner_rotation_for({LEFT, DOWN}) == 3
    assert corner_rotation_for([RIGHT, DOWN]) == 0
    with pytest.raises(ValueError):
        corner_rotation_for({LEFT, RIGHT})


def test_four_rotations_restore_connections():
    for kind in TileKind:
        for rotation in range(4):
            grid = [[Tile(kind, rotation)]]
            before = connections(grid[0][0])
            for _ in range(4):
                rotate_tile(grid, 0, 0)
            assert connections(grid[0][0]) == before
            assert grid[0][0].rotation == rotation


def test_rotate_advances_quarter_turn_and_wraps():
    grid = [[Tile(TileKind.CORNER, 3)]]
    tile = rotate_tile(grid, 0, 0)
    assert tile is grid[0][0]
    assert tile.rotation == 0
    rotate_tile(grid, 0, 0)
    assert connections(tile) == {UP, RIGHT}


def test_rotating_start_is_a_no_op():
    grid = [[Tile(TileKind.START), Tile(TileKind.FINISH), Tile(TileKind.EMPTY)]]
    for col in range(3):
        before = grid[0][col].rotation
        rotate_tile(grid, 0, col)
        assert grid[0][col].rotation == before


def test_rotate_out_of_bounds_fails_fast():
    grid = [[Tile(TileKind.STRAIGHT)]]
    with pytest.raises(AssertionError):
        rotate_tile(grid, 1, 0)


def test_tiles_connect_requires_both_sides():
    horizontal = Tile(TileKind.STRAIGHT, 0)
    vertical = Tile(TileKind.STRAIGHT, 1)
    assert tiles_connect(horizontal, horizontal, RIGHT)
    assert not tiles_connect(horizontal, vertical, RIGHT)
    # A corner opening right next to a vertical pipe is still a one-way edge.
    assert not tiles_connect(Tile(TileKind.CORNER, 0), vertical, RIGHT)
    assert tiles_connect(Tile(TileKind.CORNER, 0), vertical, DOWN)


def test_direction_opposites():
    assert UP.opposite is DOWN
    assert LEFT.opposite is RIGHT
    for direction in Direction:
        assert direction.opposite.opposite is direction
    assert Direction.from_delta(0, 1) is RIGHT
    with pytest.raises(ValueError):
        Direction.from_delta(1, 1)
