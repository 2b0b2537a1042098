from pipeworks.components.level_settings import WinMode
from pipeworks.puzzle.generator import PathStrategy

# Difficulty presets map to square board sizes.
DIFFICULTY_SIZES = {
    'easy': 5,
    'medium': 7,
    'hard': 9,
}
DEFAULT_DIFFICULTY = 'easy'

DEFAULT_WIN_MODE = WinMode.CONNECTIVITY
DEFAULT_PATH_STRATEGY = PathStrategy.RANDOM_WALK
DEFAULT_FILL_DECOYS = False

# Score awarded per cell of the winning route reported when a level is solved.
POINTS_PER_PATH_TILE = 10

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 700
WINDOW_TITLE = "Pipeworks"
BOTTOM_MARGIN = 20
# Band above the board reserved for level / score / timer text.
HUD_HEIGHT = 90

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.80
BOARD_MAX_HEIGHT_PCT = 0.95
MIN_TILE_SIZE = 20

# Key codes as reported by arcade/pyglet (lowercase ASCII for letters and digits).
KEY_DIFFICULTY = {
    ord('1'): 'easy',
    ord('2'): 'medium',
    ord('3'): 'hard',
}
KEY_RANDOMIZE = ord('r')
KEY_NEXT_LEVEL = ord('n')

LEFT_MOUSE_BUTTON = 1
