from dataclasses import dataclass
from enum import Enum, auto


class TileKind(Enum):
    """Pipe segment shapes that can occupy a grid cell."""
    EMPTY = auto()
    START = auto()
    FINISH = auto()
    STRAIGHT = auto()
    CORNER = auto()


ROTATABLE_KINDS = frozenset({TileKind.STRAIGHT, TileKind.CORNER})


@dataclass(slots=True)
class Tile:
    """One grid cell: a pipe kind plus its quarter-turn count.

    Rotation turns the kind's base connection set clockwise by ``rotation * 90``
    degrees. Tiles carry no identity and are mutated in place by rotation only.
    """
    kind: TileKind = TileKind.EMPTY
    rotation: int = 0

    @property
    def rotatable(self) -> bool:
        return self.kind in ROTATABLE_KINDS
