"""Player movement and static-platform landing."""

from __future__ import annotations

from lumberjack.constants import ISLAND_LAND_TOLERANCE
from lumberjack.entities import Arena, Player
from lumberjack.input_router import InputCode, InputState


def apply_input(player: Player, arena: Arena, inputs: InputState) -> None:
    if inputs.is_pressed(InputCode.LEFT) and player.x > 0:
        player.x -= player.speed
    if inputs.is_pressed(InputCode.RIGHT) and player.x < arena.width - player.width:
        player.x += player.speed
    if inputs.is_pressed(InputCode.JUMP) and (player.on_ground or player.on_log):
        player.velocity_y = -player.jump_power
        player.on_ground = False
        player.on_log = False


def integrate(player: Player) -> None:
    player.velocity_y += player.gravity
    player.y += player.velocity_y


def resolve_platforms(player: Player, arena: Arena) -> None:
    """Clamp the player onto any static surface they have reached.

    Surfaces are checked in order (start bank, end bank, island, bottom
    ground) and each one that matches re-clamps, so the lowest matching
    surface wins.
    """
    bank_surface = arena.river_top - player.height
    if player.x < arena.bank_width and player.y >= bank_surface:
        _land(player, arena.river_top)
    if player.x > arena.width - arena.bank_width and player.y >= bank_surface:
        _land(player, arena.river_top)

    island = arena.island
    if (
        player.right > island.x
        and player.x < island.right
        and island.y <= player.feet <= island.bottom + ISLAND_LAND_TOLERANCE
    ):
        _land(player, island.y)

    if player.y >= arena.ground_top - player.height:
        _land(player, arena.ground_top)


def _land(player: Player, surface_y: float) -> None:
    player.land_on(surface_y)
    player.on_ground = True


def update_player(player: Player, arena: Arena, inputs: InputState) -> None:
    """One physics tick for the player.

    ``on_log`` is cleared at the end; the collision pass re-attaches the
    player to a log later in the same tick, so a rider is airborne for
    the gravity step of every tick.
    """
    apply_input(player, arena, inputs)
    integrate(player)
    resolve_platforms(player, arena)
    player.on_log = False


__all__ = ["update_player", "apply_input", "integrate", "resolve_platforms"]
