"""River traffic: logs, alligators and the decorative cloud layer.

``HazardSystem`` moves everything floating down the river, emits water
particles from it, prunes what has left the screen and runs the
per-kind spawn timers. Spawn intervals tighten with the level.

Spawn schedule (ticks between spawns):

    logs        level 1: 110, later: max(50, 120 - (level - 2) * 5)
    alligators  level >= 3 only: max(120, 180 - (level - 3) * 15)
"""

from __future__ import annotations

from typing import Dict, List

from lumberjack.constants import (
    ALLIGATOR_MIN_LEVEL,
    ALLIGATOR_RIPPLE_CHANCE,
    ALLIGATOR_SPAWN_INTERVAL,
    ALLIGATOR_SPAWN_INTERVAL_MIN,
    ALLIGATOR_SPAWN_INTERVAL_STEP,
    ALLIGATOR_SPLASH_CHANCE,
    ALLIGATOR_SPLASH_INTENSITY,
    CLOUD_PRUNE_X,
    CLOUD_SPAWN_INTERVAL_INITIAL,
    CLOUD_SPAWN_INTERVAL_MIN,
    CLOUD_SPAWN_INTERVAL_RANGE,
    LOG_SPAWN_INTERVAL,
    LOG_SPAWN_INTERVAL_L1,
    LOG_SPAWN_INTERVAL_MIN,
    LOG_SPAWN_INTERVAL_STEP,
    LOG_SPLASH_CHANCE,
    LOG_SPLASH_INTENSITY,
)
from lumberjack.entities import Alligator, Arena, Cloud, Log
from lumberjack.factories import create_alligator, create_cloud, create_log
from lumberjack.logger import get_logger
from lumberjack.particle_system import ParticleSystem
from lumberjack.rng_service import RNGService

log = get_logger("hazards")


def log_spawn_interval(level: int) -> int:
    if level == 1:
        return LOG_SPAWN_INTERVAL_L1
    return max(LOG_SPAWN_INTERVAL_MIN, LOG_SPAWN_INTERVAL - (level - 2) * LOG_SPAWN_INTERVAL_STEP)


def alligator_spawn_interval(level: int) -> int:
    return max(
        ALLIGATOR_SPAWN_INTERVAL_MIN,
        ALLIGATOR_SPAWN_INTERVAL - (level - ALLIGATOR_MIN_LEVEL) * ALLIGATOR_SPAWN_INTERVAL_STEP,
    )


class HazardSystem:
    def __init__(self, arena: Arena, rng: RNGService, particles: ParticleSystem):
        self.arena = arena
        self.rng = rng
        self.particles = particles
        self.logs: List[Log] = []
        self.alligators: List[Alligator] = []
        self.log_timer = 0
        self.alligator_timer = 0
        self._level: int | None = None

    # --- Simulation ----------------------------------------------------------
    def update(self, level: int) -> Dict[str, int]:
        """Advance one tick at the given level.

        Returns a summary dict (spawned / pruned counts) for tests and
        instrumentation.
        """
        if level != self._level:
            self._level = level
            gators = alligator_spawn_interval(level) if level >= ALLIGATOR_MIN_LEVEL else "-"
            log.debug("Spawn intervals, level", level, "logs", log_spawn_interval(level), "alligators", gators)
        pruned = self._move_logs() + self._move_alligators()
        spawned = 0

        self.log_timer += 1
        if self.log_timer >= log_spawn_interval(level):
            self.logs.append(create_log(level, self.rng, self.arena))
            self.log_timer = 0
            spawned += 1

        if level >= ALLIGATOR_MIN_LEVEL:
            self.alligator_timer += 1
            if self.alligator_timer >= alligator_spawn_interval(level):
                gator = create_alligator(level, self.rng, self.arena)
                if gator is not None:
                    self.alligators.append(gator)
                    spawned += 1
                self.alligator_timer = 0

        return {
            "spawned": spawned,
            "pruned": pruned,
            "logs": len(self.logs),
            "alligators": len(self.alligators),
        }

    def _move_logs(self) -> int:
        kept = []
        for lg in self.logs:
            lg.advance()
            if self.rng.chance(LOG_SPLASH_CHANCE):
                self.particles.spawn_splash(lg.right - 5, lg.bottom + 2, LOG_SPLASH_INTENSITY)
            if not lg.off_screen():
                kept.append(lg)
        pruned = len(self.logs) - len(kept)
        self.logs = kept
        return pruned

    def _move_alligators(self) -> int:
        kept = []
        for gator in self.alligators:
            gator.advance()
            if self.rng.chance(ALLIGATOR_RIPPLE_CHANCE):
                self.particles.spawn_ripple(gator.x + gator.width / 2, gator.bottom + 3)
                if self.rng.chance(ALLIGATOR_SPLASH_CHANCE):
                    self.particles.spawn_splash(gator.right - 10, gator.bottom, ALLIGATOR_SPLASH_INTENSITY)
            if not gator.off_screen():
                kept.append(gator)
        pruned = len(self.alligators) - len(kept)
        self.alligators = kept
        return pruned

    def clear(self) -> None:
        """Drop all logs and alligators and restart both spawn timers."""
        self.logs = []
        self.alligators = []
        self.log_timer = 0
        self.alligator_timer = 0
        log.debug("Hazards cleared")


class CloudLayer:
    """Slow background clouds with a randomized spawn interval."""

    def __init__(self, arena: Arena, rng: RNGService, enabled: bool = True):
        self.arena = arena
        self.rng = rng
        self.enabled = enabled
        self.clouds: List[Cloud] = []
        self.timer = 0
        self.interval: float = CLOUD_SPAWN_INTERVAL_INITIAL

    def update(self) -> None:
        if not self.enabled:
            return
        for cloud in self.clouds:
            cloud.advance()
        self.clouds = [c for c in self.clouds if c.x >= CLOUD_PRUNE_X]

        self.timer += 1
        if self.timer >= self.interval:
            self.clouds.append(create_cloud(self.rng, self.arena))
            self.timer = 0
            self.interval = self.rng.uniform_span(CLOUD_SPAWN_INTERVAL_MIN, CLOUD_SPAWN_INTERVAL_RANGE)


__all__ = ["HazardSystem", "CloudLayer", "log_spawn_interval", "alligator_spawn_interval"]
