from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep bound methods of systems alive even when nobody stores the system.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float
EVENT_TIMER_UPDATED = "timer_updated"      # payload: seconds=int, running=bool


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button, modifiers
EVENT_TILE_CLICK = "tile_click"            # payload: row, col


# ============================================================================
# BOARD & TILES
# ============================================================================
EVENT_TILE_ROTATED = "tile_rotated"                    # payload: row, col, kind=TileKind, rotation=int
EVENT_TILE_ROTATE_REJECTED = "tile_rotate_rejected"    # payload: row, col, reason=str
EVENT_BOARD_EVALUATED = "board_evaluated"              # payload: connected=bool, path=list[Coordinate], mode=WinMode


# ============================================================================
# LEVELS
# ============================================================================
EVENT_LEVEL_REQUEST = "level_request"          # payload: size=int|None, reason=str
EVENT_LEVEL_GENERATED = "level_generated"      # payload: size=int, reason=str, path_length=int
EVENT_LEVEL_SOLVED = "level_solved"            # payload: level=int, size=int, path=list[Coordinate]


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_DIFFICULTY_SELECTED = "difficulty_selected"  # payload: difficulty=str
EVENT_RANDOMIZE_REQUEST = "randomize_request"      # payload: None
EVENT_NEXT_LEVEL_REQUEST = "next_level_request"    # payload: None
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, level=int, delta=int
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
