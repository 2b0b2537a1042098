from dataclasses import dataclass, field
from typing import List

from pipeworks.components.coordinate import Coordinate


@dataclass(slots=True)
class BoardEvaluation:
    """Latest win-check outcome, stored next to the LevelState it was computed from."""
    connected: bool = False
    path: List[Coordinate] = field(default_factory=list)
