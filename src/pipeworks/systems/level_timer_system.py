from __future__ import annotations

from time import monotonic
from typing import Any, Callable

from esper import World

from pipeworks.components.level_timer import LevelTimer
from pipeworks.events.bus import (
    EVENT_LEVEL_GENERATED,
    EVENT_LEVEL_SOLVED,
    EVENT_TICK,
    EVENT_TIMER_UPDATED,
    EventBus,
)


class LevelTimerSystem:
    """Elapsed-time display driver.

    Reads a monotonic start stamp on each arcade tick and reports whole seconds.
    A new level replaces the timer rather than adding a second one; solving the
    level freezes it.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._clock = clock or monotonic
        self.timer_entity = self.world.create_entity(LevelTimer())
        self.event_bus.subscribe(EVENT_TICK, self._on_tick)
        self.event_bus.subscribe(EVENT_LEVEL_GENERATED, self._on_level_generated)
        self.event_bus.subscribe(EVENT_LEVEL_SOLVED, self._on_level_solved)

    @property
    def timer(self) -> LevelTimer:
        return self.world.component_for_entity(self.timer_entity, LevelTimer)

    @property
    def elapsed_seconds(self) -> int:
        return int(self.timer.elapsed(self._clock()))

    def _on_level_generated(self, sender: Any, **payload: Any) -> None:
        self.world.add_component(self.timer_entity, LevelTimer(started_at=self._clock()))
        self._report(force=True)

    def _on_tick(self, sender: Any, **payload: Any) -> None:
        if not self.timer.running:
            return
        self._report()

    def _on_level_solved(self, sender: Any, **payload: Any) -> None:
        timer = self.timer
        if not timer.running:
            return
        timer.stopped_at = self._clock()
        self._report(force=True)

    def _report(self, *, force: bool = False) -> None:
        timer = self.timer
        seconds = int(timer.elapsed(self._clock()))
        if seconds == timer.last_reported and not force:
            return
        timer.last_reported = seconds
        self.event_bus.emit(EVENT_TIMER_UPDATED, seconds=seconds, running=timer.running)
