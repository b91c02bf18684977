"""Full-screen "LEVEL N" overlay shown for two seconds after a level-up.

Fades in over the first 20% of its lifetime, out over the last 20%,
and shrinks from 1.5x to 1x scale during the first 30%.
"""

from __future__ import annotations

from lumberjack.constants import ANNOUNCEMENT_MS
from lumberjack.timer import Clock


class LevelAnnouncement:
    def __init__(self, clock: Clock, duration_ms: int = ANNOUNCEMENT_MS):
        self.clock = clock
        self.duration_ms = duration_ms
        self.level = 1
        self.started_at: int | None = None

    @property
    def active(self) -> bool:
        return self.started_at is not None

    def show(self, level: int) -> None:
        self.level = level
        self.started_at = self.clock()

    def cancel(self) -> None:
        self.started_at = None

    def progress(self) -> float:
        if self.started_at is None:
            return 1.0
        return (self.clock() - self.started_at) / self.duration_ms

    def update(self) -> None:
        if self.started_at is not None and self.progress() >= 1:
            self.started_at = None

    def alpha(self) -> float:
        p = self.progress()
        if p < 0.2:
            return max(0.0, p / 0.2)
        if p > 0.8:
            return max(0.0, (1 - p) / 0.2)
        return 1.0

    def scale(self) -> float:
        p = self.progress()
        if p < 0.3:
            return 1.5 - (p / 0.3) * 0.5
        return 1.0

    @property
    def text(self) -> str:
        return f"LEVEL {self.level}"


__all__ = ["LevelAnnouncement"]
