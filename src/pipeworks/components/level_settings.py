from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from pipeworks.puzzle.generator import PathStrategy


class WinMode(Enum):
    """Which evaluator decides that a level is won."""
    CONNECTIVITY = "connectivity"  # any connected start-to-finish route
    SOLUTION = "solution"          # only the planted route, exact rotations


@dataclass(slots=True)
class LevelSettings:
    """Singleton component with the generation and win-check choices for this world."""
    difficulty: str
    board_size: int
    win_mode: WinMode = WinMode.CONNECTIVITY
    strategy: PathStrategy = PathStrategy.RANDOM_WALK
    fill_decoys: bool = False
    waypoints: Optional[List[Tuple[int, int]]] = None
