"""Per-tick rule evaluation: what the player's position means this frame.

Rules run in a fixed priority order and the first loss stops the pass:

1. touching an alligator            -> loss ("alligator")
2. standing on a log                -> ride it (snap, carry with the log)
3. standing on the island           -> safe from drowning
4. in the river, not on log/island  -> loss ("drowned")
5. touching the flag                -> level advance
6. below the bottom of the screen   -> loss ("fell")

The engine mutates only the player (log riding). Level and session
changes are left to the caller, which reads the returned
``CollisionResult``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

from lumberjack.constants import ISLAND_OCCUPY_TOLERANCE, LOG_LAND_ABOVE, LOG_LAND_BELOW
from lumberjack.entities import Alligator, Arena, Log, Player


class Outcome(enum.Enum):
    NONE = "none"
    LOSS = "loss"
    LEVEL_UP = "level_up"


@dataclass
class CollisionResult:
    outcome: Outcome = Outcome.NONE
    cause: str = ""
    on_log: bool = False
    on_island: bool = False
    riding: Log | None = None


def touching_alligator(player: Player, alligators: Sequence[Alligator]) -> Alligator | None:
    for gator in alligators:
        if player.overlaps(gator):
            return gator
    return None


def find_log_under(player: Player, logs: Sequence[Log]) -> Log | None:
    """First log (in list order) whose surface is within reach of the player's feet."""
    for lg in logs:
        if (
            player.x < lg.right
            and player.right > lg.x
            and lg.y - LOG_LAND_ABOVE <= player.feet <= lg.bottom + LOG_LAND_BELOW
        ):
            return lg
    return None


def ride_log(player: Player, lg: Log) -> None:
    player.land_on(lg.y)
    player.on_log = True
    player.x -= lg.speed
    if player.x < 0:
        player.x = 0


def on_island(player: Player, arena: Arena) -> bool:
    island = arena.island
    return (
        player.right > island.x
        and player.x < island.right
        and island.y <= player.feet <= island.bottom + ISLAND_OCCUPY_TOLERANCE
    )


def in_water(player: Player, arena: Arena) -> bool:
    return player.feet > arena.river_top and player.y < arena.river_bottom and arena.over_river(player.x)


def reached_flag(player: Player, arena: Arena) -> bool:
    # Inclusive on every edge: grazing the pole is enough.
    flag = arena.flag
    return player.right >= flag.x and player.x <= flag.right and player.feet >= flag.y and player.y <= flag.bottom


def fell_off(player: Player, arena: Arena) -> bool:
    return player.y > arena.height


def check_collisions(
    player: Player,
    logs: Sequence[Log],
    alligators: Sequence[Alligator],
    arena: Arena,
) -> CollisionResult:
    result = CollisionResult()

    if touching_alligator(player, alligators) is not None:
        result.outcome = Outcome.LOSS
        result.cause = "alligator"
        return result

    riding = find_log_under(player, logs)
    if riding is not None:
        ride_log(player, riding)
        result.on_log = True
        result.riding = riding

    result.on_island = on_island(player, arena)

    if in_water(player, arena) and not result.on_log and not result.on_island:
        result.outcome = Outcome.LOSS
        result.cause = "drowned"
        return result

    if reached_flag(player, arena):
        result.outcome = Outcome.LEVEL_UP
        return result

    if fell_off(player, arena):
        result.outcome = Outcome.LOSS
        result.cause = "fell"
    return result


__all__ = [
    "Outcome",
    "CollisionResult",
    "check_collisions",
    "find_log_under",
    "ride_log",
    "on_island",
    "in_water",
    "reached_flag",
    "fell_off",
    "touching_alligator",
]
