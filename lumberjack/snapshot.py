"""Read-only view of a ``World`` for the presentation layer.

The renderer and HUD draw from a ``WorldSnapshot`` instead of touching
live simulation objects; entity records are copies, so nothing drawn can
leak back into the simulation.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, List, Tuple

from lumberjack.entities import Alligator, Box, Cloud, Log, Player
from lumberjack.particle_system import Particle


@dataclass
class SessionSnapshot:
    score: int
    level: int
    checkpoint_level: int
    checkpoint_score: int
    game_running: bool
    game_started: bool
    won: bool
    show_restart: bool
    status_text: str
    status_style: str
    timer_text: str


@dataclass
class AnnouncementSnapshot:
    active: bool
    text: str
    alpha: float
    scale: float


@dataclass
class WorldSnapshot:
    tick: int
    width: int
    height: int
    river_top: float
    river_bottom: float
    ground_top: float
    bank_width: float
    island: Box
    flag: Box
    player: Player
    session: SessionSnapshot
    announcement: AnnouncementSnapshot
    logs: List[Log] = field(default_factory=list)
    alligators: List[Alligator] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    clouds: List[Cloud] = field(default_factory=list)
    rng_state: Tuple[Any, ...] = ()


class SnapshotService:
    @staticmethod
    def capture(world, with_rng: bool = False) -> WorldSnapshot:
        s = world.session
        ann = world.announcement
        arena = world.arena
        return WorldSnapshot(
            tick=world.tick_count,
            width=arena.width,
            height=arena.height,
            river_top=arena.river_top,
            river_bottom=arena.river_bottom,
            ground_top=arena.ground_top,
            bank_width=arena.bank_width,
            island=copy.copy(arena.island),
            flag=copy.copy(arena.flag),
            player=copy.copy(world.player),
            session=SessionSnapshot(
                score=s.score,
                level=s.level,
                checkpoint_level=s.checkpoint_level,
                checkpoint_score=s.checkpoint_score,
                game_running=s.game_running,
                game_started=s.game_started,
                won=s.won,
                show_restart=s.show_restart,
                status_text=s.status.text,
                status_style=s.status.style,
                timer_text=world.timer.text,
            ),
            announcement=AnnouncementSnapshot(
                active=ann.active,
                text=ann.text,
                alpha=ann.alpha() if ann.active else 0.0,
                scale=ann.scale() if ann.active else 1.0,
            ),
            logs=[copy.copy(lg) for lg in world.hazards.logs],
            alligators=[copy.copy(g) for g in world.hazards.alligators],
            particles=[copy.copy(p) for p in world.particles.particles],
            clouds=copy.deepcopy(world.clouds.clouds),
            rng_state=world.rng.get_state() if with_rng else (),
        )


__all__ = ["SnapshotService", "WorldSnapshot", "SessionSnapshot", "AnnouncementSnapshot"]
