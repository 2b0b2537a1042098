"""Entry point for the Pipeworks pipe-rotation puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
from arcade import Window, run, set_background_color, color

from pipeworks.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from pipeworks.events.bus import EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from pipeworks.logging_config import configure_logging
from pipeworks.systems.board import BoardSystem
from pipeworks.systems.game_flow_system import GameFlowSystem
from pipeworks.systems.input import InputSystem
from pipeworks.systems.level_timer_system import LevelTimerSystem
from pipeworks.systems.render import RenderSystem
from pipeworks.systems.win_check_system import WinCheckSystem
from pipeworks.world import create_world


class PipeworksWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world()

        # Board and rule systems
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.win_check_system = WinCheckSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.level_timer_system = LevelTimerSystem(self.world, self.event_bus)

        # Interface systems
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus, self, self.world)

        set_background_color(color.DARK_SLATE_GRAY)
        self.game_flow_system.start()

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button, modifiers=modifiers)

    def on_key_press(self, symbol: int, modifiers: int):
        self.input_system.handle_key_press(symbol, modifiers)


def main():
    configure_logging()
    PipeworksWindow()
    run()


if __name__ == "__main__":
    main()
