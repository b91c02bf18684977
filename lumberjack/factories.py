"""Level-scaled entity factories.

Stateless: each call draws fresh values from the given ``RNGService``
and returns a new entity positioned just past the right screen edge.
"""

from __future__ import annotations

from lumberjack.constants import (
    ALLIGATOR_BASE_SPEED,
    ALLIGATOR_COLOR,
    ALLIGATOR_H,
    ALLIGATOR_MIN_LEVEL,
    ALLIGATOR_SPEED_PER_LEVEL,
    ALLIGATOR_SPEED_RANGE,
    ALLIGATOR_W,
    ALLIGATOR_Y_OFFSETS,
    CLOUD_SPAWN_MARGIN,
    LOG_BASE_SPEED,
    LOG_COLOR,
    LOG_H,
    LOG_L1_MAX_SPEED,
    LOG_L1_MIN_SPEED,
    LOG_L1_MIN_W,
    LOG_L1_W_RANGE,
    LOG_MIN_W,
    LOG_SPEED_PER_LEVEL,
    LOG_SPEED_RANGE,
    LOG_W_RANGE,
    LOG_Y_OFFSETS,
)
from lumberjack.entities import Alligator, Arena, Cloud, CloudPart, Log
from lumberjack.rng_service import RNGService


def log_speed_range(level: int) -> tuple[float, float]:
    if level == 1:
        return LOG_L1_MIN_SPEED, LOG_L1_MAX_SPEED
    base = LOG_BASE_SPEED + (level - 2) * LOG_SPEED_PER_LEVEL
    return base, base + LOG_SPEED_RANGE


def alligator_speed_range(level: int) -> tuple[float, float]:
    base = ALLIGATOR_BASE_SPEED + (level - ALLIGATOR_MIN_LEVEL) * ALLIGATOR_SPEED_PER_LEVEL
    return base, base + ALLIGATOR_SPEED_RANGE


def create_log(level: int, rng: RNGService, arena: Arena) -> Log:
    """Level 1 logs are slower and wider; later levels speed up by 0.3 per level."""
    if level == 1:
        width = rng.uniform_span(LOG_L1_MIN_W, LOG_L1_W_RANGE)
    else:
        width = rng.uniform_span(LOG_MIN_W, LOG_W_RANGE)
    low, high = log_speed_range(level)
    speed = rng.uniform_span(low, high - low)
    y = arena.river_top + rng.pick(LOG_Y_OFFSETS)
    return Log(x=arena.width, y=y, width=width, height=LOG_H, speed=speed, color=LOG_COLOR)


def create_alligator(level: int, rng: RNGService, arena: Arena) -> Alligator | None:
    if level < ALLIGATOR_MIN_LEVEL:
        return None
    low, high = alligator_speed_range(level)
    speed = rng.uniform_span(low, high - low)
    y = arena.river_top + rng.pick(ALLIGATOR_Y_OFFSETS)
    return Alligator(
        x=arena.width,
        y=y,
        width=ALLIGATOR_W,
        height=ALLIGATOR_H,
        speed=speed,
        color=ALLIGATOR_COLOR,
    )


def create_cloud(rng: RNGService, arena: Arena) -> Cloud:
    """An irregular cloud built from 3-6 overlapping rectangles."""
    base_w = rng.uniform_span(60, 40)
    base_h = rng.uniform_span(20, 15)
    cloud = Cloud(
        x=arena.width + CLOUD_SPAWN_MARGIN,
        y=rng.uniform_span(20, 80),
        speed=rng.uniform_span(0.2, 0.3),
    )
    for _ in range(3 + int(rng.random() * 4)):
        cloud.parts.append(
            CloudPart(
                offset_x=(rng.random() - 0.5) * base_w * 0.8,
                offset_y=(rng.random() - 0.5) * base_h * 0.6,
                width=base_w * rng.uniform_span(0.6, 0.8),
                height=base_h * rng.uniform_span(0.5, 1.0),
            )
        )
    return cloud


__all__ = ["create_log", "create_alligator", "create_cloud", "log_speed_range", "alligator_speed_range"]
