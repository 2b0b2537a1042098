from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from esper import World

from pipeworks.components.board_evaluation import BoardEvaluation
from pipeworks.components.coordinate import Coordinate
from pipeworks.components.level_state import LevelState
from pipeworks.systems.board_ops import find_level
from pipeworks.ui.layout import BoardGeometry, compute_board_geometry


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    world: World
    window_width: int
    window_height: int
    level: Optional[LevelState]
    geometry: Optional[BoardGeometry]
    highlighted: FrozenSet[Coordinate] = field(default_factory=frozenset)


def build_render_context(world: World, window_width: int, window_height: int) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    found = find_level(world)
    if found is None:
        return RenderContext(world, window_width, window_height, level=None, geometry=None)
    entity, level = found
    highlighted: FrozenSet[Coordinate] = frozenset()
    try:
        evaluation = world.component_for_entity(entity, BoardEvaluation)
    except KeyError:
        evaluation = None
    if evaluation is not None and evaluation.connected:
        highlighted = frozenset(Coordinate(*c) for c in evaluation.path)
    return RenderContext(
        world=world,
        window_width=window_width,
        window_height=window_height,
        level=level,
        geometry=compute_board_geometry(window_width, window_height, level.size),
        highlighted=highlighted,
    )
