"""Pure puzzle core: tile connections, level generation and win checks."""

from .tiles import (
    CORNER_CONNECTIONS,
    connections,
    corner_rotation_for,
    rotate_tile,
    tiles_connect,
)
from .generator import (
    PathStrategy,
    generate,
    random_walk_path,
    waypoint_path,
)
from .connectivity import PathResult, find_path
from .solution import apply_solution, is_solved
from .text import format_grid, glyph_for

__all__ = [
    "CORNER_CONNECTIONS",
    "PathResult",
    "PathStrategy",
    "apply_solution",
    "connections",
    "corner_rotation_for",
    "find_path",
    "format_grid",
    "generate",
    "glyph_for",
    "is_solved",
    "random_walk_path",
    "rotate_tile",
    "tiles_connect",
    "waypoint_path",
]
