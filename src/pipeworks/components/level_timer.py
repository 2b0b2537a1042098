from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class LevelTimer:
    """Elapsed-time bookkeeping for the current level, in monotonic clock seconds."""
    started_at: float | None = None
    stopped_at: float | None = None
    last_reported: int = -1

    @property
    def running(self) -> bool:
        return self.started_at is not None and self.stopped_at is None

    def elapsed(self, now: float) -> float:
        if self.started_at is None:
            return 0.0
        end = self.stopped_at if self.stopped_at is not None else now
        return max(0.0, end - self.started_at)
