"""Shared random source for spawners and particle effects.

Every random draw in the simulation goes through one ``RNGService`` so a
run can be made repeatable by seeding it (tests, bug reports). Gameplay
never seeds it, so ordinary runs differ every time.
"""

import random
from typing import Any, Sequence

from lumberjack.logger import get_logger

log = get_logger("rng")


class RNGService:
    _instance: "RNGService | None" = None

    def __init__(self, seed: int | str | None = None):
        self._generator = random.Random(seed)
        self._seed_val = seed
        log.debug(f"RNG initialized with seed: {seed!r}")

    @classmethod
    def get(cls) -> "RNGService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def initialize(cls, seed: int | str | None = None) -> "RNGService":
        cls._instance = cls(seed)
        return cls._instance

    @property
    def seed_value(self) -> int | str | None:
        return self._seed_val

    def seed(self, a: int | str | None = None) -> None:
        self._seed_val = a
        self._generator.seed(a)
        log.debug(f"RNG re-seeded: {a!r}")

    def random(self) -> float:
        """Uniform float in [0.0, 1.0)."""
        return self._generator.random()

    def uniform_span(self, low: float, span: float) -> float:
        """``low + random() * span``; the upper bound is exclusive."""
        return low + self._generator.random() * span

    def chance(self, probability: float) -> bool:
        """True with the given per-call probability."""
        return self._generator.random() < probability

    def pick(self, seq: Sequence[Any]) -> Any:
        return seq[int(self._generator.random() * len(seq))]

    def get_state(self) -> tuple[Any, ...]:
        return self._generator.getstate()

    def set_state(self, state: tuple[Any, ...]) -> None:
        self._generator.setstate(state)


__all__ = ["RNGService"]
