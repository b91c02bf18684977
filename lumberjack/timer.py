# timer.py
from typing import Callable

import pygame

Clock = Callable[[], int]


class RunTimer:
    """Whole-run stopwatch: idle -> running -> stopped.

    Started when play begins, stopped on reaching the final level and
    only returned to idle by a full reset. Once stopped, ``elapsed_ms``
    keeps returning the captured final value.
    """

    def __init__(self, clock: Clock = pygame.time.get_ticks):
        self.clock = clock
        self.start_time: int | None = None
        self.running = False
        self.final_time: int | None = None

    @property
    def state(self) -> str:
        if self.final_time is not None:
            return "stopped"
        return "running" if self.running else "idle"

    def start(self):
        if not self.running:
            self.start_time = self.clock()
            self.running = True
            self.final_time = None

    def stop(self):
        if self.running:
            self.final_time = self.clock() - self.start_time
            self.running = False

    def reset(self):
        self.start_time = None
        self.running = False
        self.final_time = None

    def elapsed_ms(self) -> int:
        if self.final_time is not None:
            return self.final_time
        if self.running and self.start_time is not None:
            return self.clock() - self.start_time
        return 0

    @property
    def text(self) -> str:
        return self.format_time(self.elapsed_ms())

    @staticmethod
    def format_time(time: int) -> str:
        """``M:SS.CC``; minutes are not padded."""
        centis = time % 1000 // 10
        seconds = (time % 60000) // 1000
        minutes = time // 60000
        return f"{minutes}:{seconds:02}.{centis:02}"


__all__ = ["RunTimer"]
