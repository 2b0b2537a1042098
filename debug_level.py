import sys, os
ROOT = os.path.dirname(__file__)
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)
import random
from pipeworks.events.bus import EventBus, EVENT_LEVEL_REQUEST, EVENT_TILE_CLICK, EVENT_LEVEL_SOLVED
from pipeworks.systems.board import BoardSystem
from pipeworks.systems.win_check_system import WinCheckSystem
from pipeworks.puzzle import format_grid, find_path
from pipeworks.world import create_world

size = int(sys.argv[1]) if len(sys.argv) > 1 else 5
bus = EventBus()
world = create_world(rng=random.Random(7))
board = BoardSystem(world, bus)
WinCheckSystem(world, bus)

solved = []
bus.subscribe(EVENT_LEVEL_SOLVED, lambda s, **k: solved.append(k))
bus.emit(EVENT_LEVEL_REQUEST, size=size, reason='debug')
level = board.level_state
print('Scrambled:')
print(format_grid(level.grid))

# Click every planted tile until it shows its recorded rotation.
for coord, expected in level.solution_tiles.items():
    while level.tile_at(*coord).rotation != expected.rotation:
        bus.emit(EVENT_TILE_CLICK, row=coord.row, col=coord.col)
        if solved:
            break
    if solved:
        break

result = find_path(level.grid)
print('Solved:' if result.connected else 'Still disconnected:')
print(format_grid(level.grid, highlight=result.path))
print('level_solved events:', solved)
