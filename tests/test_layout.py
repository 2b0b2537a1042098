from pipeworks.constants import BOTTOM_MARGIN, MIN_TILE_SIZE
from pipeworks.ui.layout import compute_board_geometry


def test_board_is_centered_horizontally():
    geometry = compute_board_geometry(800, 700, 5)
    assert geometry.bottom == BOTTOM_MARGIN
    assert geometry.left + geometry.width / 2 == 400


def test_cell_center_round_trips_through_cell_at():
    geometry = compute_board_geometry(800, 700, 7)
    for row in range(7):
        for col in range(7):
            x, y = geometry.cell_center(row, col)
            assert geometry.cell_at(x, y) == (row, col)


def test_row_zero_is_drawn_at_the_top():
    geometry = compute_board_geometry(800, 700, 5)
    _, top_y = geometry.cell_center(0, 0)
    _, bottom_y = geometry.cell_center(4, 0)
    assert top_y > bottom_y


def test_points_outside_board_map_to_nothing():
    geometry = compute_board_geometry(800, 700, 5)
    assert geometry.cell_at(geometry.left - 1, geometry.bottom + 5) is None
    assert geometry.cell_at(geometry.left + 5, geometry.top + 1) is None
    assert geometry.cell_at(geometry.left + geometry.width, geometry.bottom + 5) is None


def test_tiny_window_keeps_minimum_tile_size():
    geometry = compute_board_geometry(50, 120, 9)
    assert geometry.tile_size == MIN_TILE_SIZE
