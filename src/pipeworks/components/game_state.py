"""Game state resource describing the active level and progress counters."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """Whether the current level still accepts rotations."""
    PLAYING = auto()
    SOLVED = auto()


@dataclass
class GameState:
    """Singleton component storing the mode, level number and score."""
    mode: GameMode = GameMode.PLAYING
    level: int = 1
    score: int = 0
