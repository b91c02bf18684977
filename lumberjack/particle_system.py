"""Water effect particles.

Two particle kinds exist: ``splash`` droplets following a damped
ballistic arc and ``ripple`` rings that ease outward while fading. The
system owns the only particle list; emitters call ``spawn_splash`` /
``spawn_ripple`` and the world calls ``update`` once per tick.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Dict, List, Tuple, Union

from lumberjack.constants import (
    RIPPLE_ALPHA,
    RIPPLE_EASE,
    RIPPLE_FADE,
    RIPPLE_LIFE,
    SPLASH_DAMPING,
    SPLASH_GRAVITY,
)
from lumberjack.rng_service import RNGService

SPLASH_RGB = (135, 206, 235)


@dataclass
class SplashParticle:
    kind: ClassVar[str] = "splash"
    x: float
    y: float
    velocity_x: float
    velocity_y: float
    life: float
    max_life: float
    size: float
    color: Tuple[int, int, int, int]

    def update(self) -> bool:
        """Advance one tick; returns True once the particle is dead."""
        self.life -= 1
        self.x += self.velocity_x
        self.y += self.velocity_y
        self.velocity_y += SPLASH_GRAVITY
        self.velocity_x *= SPLASH_DAMPING
        return self.life <= 0

    @property
    def opacity(self) -> float:
        return max(0.0, self.life / self.max_life)


@dataclass
class RippleParticle:
    kind: ClassVar[str] = "ripple"
    x: float
    y: float
    radius: float
    max_radius: float
    life: float
    max_life: float
    alpha: float

    def update(self) -> bool:
        self.life -= 1
        self.radius += (self.max_radius - self.radius) * RIPPLE_EASE
        self.alpha = self.life / self.max_life * RIPPLE_FADE
        return self.life <= 0


Particle = Union[SplashParticle, RippleParticle]


class ParticleSystem:
    def __init__(self, rng: RNGService):
        self.rng = rng
        self.particles: List[Particle] = []

    def __len__(self) -> int:
        return len(self.particles)

    # ---- Spawn helpers ----
    def spawn_splash(self, x: float, y: float, intensity: float = 1.0) -> List[SplashParticle]:
        """Emit a small burst of droplets; weaker intensity means slower, lower droplets."""
        rng = self.rng
        count = math.ceil(1 + int(rng.random() * 2) * intensity)
        spawned = []
        for _ in range(count):
            alpha = rng.uniform_span(0.3, 0.2)
            p = SplashParticle(
                x=x + rng.random() * 10 - 5,
                y=y + rng.random() * 5 - 2,
                velocity_x=(rng.random() - 0.5) * intensity,
                velocity_y=-rng.random() * 1.5 * intensity,
                life=rng.uniform_span(20, 15),
                max_life=rng.uniform_span(20, 15),
                size=rng.uniform_span(1, 1),
                color=(*SPLASH_RGB, int(alpha * 255)),
            )
            spawned.append(p)
        self.particles.extend(spawned)
        return spawned

    def spawn_ripple(self, x: float, y: float) -> RippleParticle:
        p = RippleParticle(
            x=x,
            y=y,
            radius=1.0,
            max_radius=self.rng.uniform_span(8, 5),
            life=RIPPLE_LIFE,
            max_life=RIPPLE_LIFE,
            alpha=RIPPLE_ALPHA,
        )
        self.particles.append(p)
        return p

    # ---- Update & draw collection ----
    def update(self) -> int:
        """Age every particle by one tick; returns how many expired."""
        alive = [p for p in self.particles if not p.update()]
        expired = len(self.particles) - len(alive)
        self.particles = alive
        return expired

    def get_draw_commands(self) -> Dict[str, List[Particle]]:
        return {
            "splash": [p for p in self.particles if p.kind == "splash"],
            "ripple": [p for p in self.particles if p.kind == "ripple"],
        }

    def clear(self) -> None:
        self.particles.clear()


__all__ = ["ParticleSystem", "SplashParticle", "RippleParticle", "Particle"]
