"""Leveled logging wrapper shared by every subsystem.

Minimum level comes from ``LUMBERJACK_LOG_LEVEL`` (DEBUG, INFO, WARN,
ERROR). Lines look like ``[12:03:44] INFO  session: Level up 3``.
"""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from typing import TextIO

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def _threshold_from_env() -> int:
    wanted = os.environ.get("LUMBERJACK_LOG_LEVEL", "INFO").strip().upper()
    return _LEVELS.get(wanted, _LEVELS["INFO"])


@dataclass
class Logger:
    name: str
    stream: TextIO | None = sys.stdout
    min_level: int = _threshold_from_env()

    def format_line(self, level: str, parts) -> str:
        stamp = time.strftime("%H:%M:%S")
        text = " ".join(str(p) for p in parts)
        return f"[{stamp}] {level:<5} {self.name}: {text}\n"

    def _emit(self, level: str, parts) -> None:
        if self.stream is None or _LEVELS[level] < self.min_level:
            return
        try:
            self.stream.write(self.format_line(level, parts))
            self.stream.flush()
        except (OSError, ValueError):
            # pythonw and some wrapped terminals have no usable stdout.
            pass

    def debug(self, *parts):
        self._emit("DEBUG", parts)

    def info(self, *parts):
        self._emit("INFO", parts)

    def warn(self, *parts):
        self._emit("WARN", parts)

    def error(self, *parts):
        self._emit("ERROR", parts)


def get_logger(name: str = "lumberjack") -> Logger:
    return Logger(name)


__all__ = ["get_logger", "Logger"]
