"""The simulation core: one ``World`` owns all game state.

``World.step`` is the per-frame driver:

    player physics -> river traffic (+ particle emission) -> clouds
    -> particle aging -> collision rules -> session housekeeping

Everything except clouds and housekeeping is skipped while the session
is not running (title screen, game over, won). Entity collections only
change inside ``step`` and the explicit transitions below.
"""

from __future__ import annotations

from lumberjack.announcement import LevelAnnouncement
from lumberjack.collisions import CollisionResult, Outcome, check_collisions
from lumberjack.constants import DEFAULT_SCREEN_H, DEFAULT_SCREEN_W
from lumberjack.entities import Arena, Player
from lumberjack.hazard_system import CloudLayer, HazardSystem
from lumberjack.input_router import InputState
from lumberjack.logger import get_logger
from lumberjack.particle_system import ParticleSystem
from lumberjack.physics import update_player
from lumberjack.rng_service import RNGService
from lumberjack.session import Session
from lumberjack.snapshot import SnapshotService, WorldSnapshot
from lumberjack.timer import Clock, RunTimer

log = get_logger("world")


class World:
    def __init__(
        self,
        width: int = DEFAULT_SCREEN_W,
        height: int = DEFAULT_SCREEN_H,
        rng: RNGService | None = None,
        clock: Clock | None = None,
        clouds_enabled: bool = True,
        checkpoint_policy: str = "exact",
    ):
        self.arena = Arena(width, height)
        self.rng = rng or RNGService.get()
        self.timer = RunTimer(clock) if clock is not None else RunTimer()
        self.clock = self.timer.clock
        self.session = Session(self.timer, checkpoint_policy=checkpoint_policy)
        self.announcement = LevelAnnouncement(self.clock)
        self.player = Player.spawn(self.arena)
        self.particles = ParticleSystem(self.rng)
        self.hazards = HazardSystem(self.arena, self.rng, self.particles)
        self.clouds = CloudLayer(self.arena, self.rng, enabled=clouds_enabled)
        self.tick_count = 0
        log.debug("World created", f"{width}x{height}", "policy", checkpoint_policy)

    # Convenience views ------------------------------------------------
    @property
    def logs(self):
        return self.hazards.logs

    @property
    def alligators(self):
        return self.hazards.alligators

    @property
    def running(self) -> bool:
        return self.session.game_running

    # Frame driver -----------------------------------------------------
    def step(self, inputs: InputState) -> CollisionResult:
        self.tick_count += 1
        result = CollisionResult()
        session = self.session

        if session.game_running:
            update_player(self.player, self.arena, inputs)
            self.hazards.update(session.level)
        self.clouds.update()
        if session.game_running:
            self.particles.update()
            result = check_collisions(self.player, self.hazards.logs, self.hazards.alligators, self.arena)
            self._apply(result)

        session.tick()
        self.announcement.update()
        return result

    def _apply(self, result: CollisionResult) -> None:
        if result.outcome is Outcome.LOSS:
            self.session.game_over(result.cause)
        elif result.outcome is Outcome.LEVEL_UP:
            self.next_level()

    # Transitions ------------------------------------------------------
    def start(self) -> bool:
        return self.session.begin()

    def next_level(self) -> None:
        if self.session.advance_level():
            return
        self.announcement.show(self.session.level)
        self._reset_field()

    def restart(self) -> None:
        self._reset_field()
        self.session.restart()

    def full_reset(self) -> None:
        self._reset_field()
        self.session.full_reset()

    def debug_jump_to_level_3(self) -> bool:
        if not self.session.debug_jump():
            return False
        self._reset_field()
        return True

    def _reset_field(self) -> None:
        self.player.reset(self.arena)
        self.hazards.clear()

    def snapshot(self) -> WorldSnapshot:
        return SnapshotService.capture(self)


__all__ = ["World"]
