"""Simulation entities.

Plain dataclasses with float coordinates; screen y grows downward. The
moving entities form a closed set (``Log``, ``Alligator``, ``Cloud``)
and carry a ``kind`` tag so systems and the renderer dispatch on kind
instead of probing attributes. Particles live in ``particle_system``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, List

import pygame

from lumberjack.constants import (
    BANK_WIDTH,
    FLAG_FROM_RIGHT,
    FLAG_H,
    FLAG_RAISE,
    FLAG_W,
    GROUND_HEIGHT,
    ISLAND_H,
    ISLAND_RAISE,
    ISLAND_W,
    PLAYER_GRAVITY,
    PLAYER_H,
    PLAYER_JUMP_POWER,
    PLAYER_SPEED,
    PLAYER_START_X,
    PLAYER_START_Y_FROM_BOTTOM,
    PLAYER_W,
    RIVER_BOTTOM_FROM_BOTTOM,
    RIVER_TOP_FROM_BOTTOM,
)


@dataclass
class Box:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def overlaps(self, other: "Box") -> bool:
        """Strict axis-aligned overlap; touching edges do not count."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )

    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))


@dataclass
class Player(Box):
    x: float = PLAYER_START_X
    y: float = 0.0
    width: float = PLAYER_W
    height: float = PLAYER_H
    velocity_y: float = 0.0
    on_ground: bool = False
    on_log: bool = False
    speed: float = PLAYER_SPEED
    jump_power: float = PLAYER_JUMP_POWER
    gravity: float = PLAYER_GRAVITY

    @classmethod
    def spawn(cls, arena: "Arena") -> "Player":
        p = cls()
        p.reset(arena)
        return p

    @property
    def feet(self) -> float:
        return self.y + self.height

    def reset(self, arena: "Arena") -> None:
        self.x = PLAYER_START_X
        self.y = arena.height - PLAYER_START_Y_FROM_BOTTOM
        self.velocity_y = 0.0
        self.on_ground = False
        self.on_log = False

    def land_on(self, surface_y: float) -> None:
        self.y = surface_y - self.height
        self.velocity_y = 0.0


@dataclass
class Drifter(Box):
    """Anything floating leftward down the river at a fixed speed."""

    speed: float = 0.0
    color: str = ""

    def advance(self) -> None:
        self.x -= self.speed

    def off_screen(self) -> bool:
        return self.x + self.width < 0


@dataclass
class Log(Drifter):
    kind: ClassVar[str] = "log"


@dataclass
class Alligator(Drifter):
    kind: ClassVar[str] = "alligator"


@dataclass
class CloudPart:
    offset_x: float
    offset_y: float
    width: float
    height: float


@dataclass
class Cloud:
    kind: ClassVar[str] = "cloud"
    x: float
    y: float
    speed: float
    parts: List[CloudPart] = field(default_factory=list)

    def advance(self) -> None:
        self.x -= self.speed


@dataclass
class Arena:
    """Static level geometry derived from the screen size."""

    width: int
    height: int
    river_top: float = field(init=False)
    river_bottom: float = field(init=False)
    ground_height: float = GROUND_HEIGHT
    bank_width: float = BANK_WIDTH
    island: Box = field(init=False)
    flag: Box = field(init=False)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"arena size must be positive, got {self.width}x{self.height}")
        self.river_top = self.height - RIVER_TOP_FROM_BOTTOM
        self.river_bottom = self.height - RIVER_BOTTOM_FROM_BOTTOM
        self.island = Box(self.width / 2 - ISLAND_W / 2, self.river_top - ISLAND_RAISE, ISLAND_W, ISLAND_H)
        self.flag = Box(self.width - FLAG_FROM_RIGHT, self.river_top - FLAG_RAISE, FLAG_W, FLAG_H)

    @property
    def ground_top(self) -> float:
        return self.height - self.ground_height

    def over_river(self, x: float) -> bool:
        """True when ``x`` lies between the two bank platforms."""
        return self.bank_width <= x <= self.width - self.bank_width


__all__ = ["Box", "Player", "Drifter", "Log", "Alligator", "Cloud", "CloudPart", "Arena"]
