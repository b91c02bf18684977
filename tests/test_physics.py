from lumberjack.entities import Arena, Player
from lumberjack.input_router import InputCode, InputState
from lumberjack.physics import resolve_platforms, update_player

ARENA = Arena(800, 400)


def make_player(x, y, vy=0.0):
    p = Player.spawn(ARENA)
    p.x, p.y, p.velocity_y = x, y, vy
    return p


def test_spawn_position():
    p = Player.spawn(ARENA)
    assert (p.x, p.y) == (30, 240)
    assert p.velocity_y == 0
    assert not p.on_ground and not p.on_log


def test_player_settles_on_start_bank():
    p = Player.spawn(ARENA)
    for _ in range(20):
        update_player(p, ARENA, InputState())
    assert p.y == ARENA.river_top - p.height
    assert p.velocity_y == 0
    assert p.on_ground


def test_jump_only_when_supported():
    p = make_player(30, 250)
    p.on_ground = True
    update_player(p, ARENA, InputState([InputCode.JUMP]))
    assert p.velocity_y == -12 + 0.5
    assert p.y == 250 - 11.5
    assert not p.on_ground

    # Airborne: holding jump does nothing more than gravity.
    vy = p.velocity_y
    update_player(p, ARENA, InputState([InputCode.JUMP]))
    assert p.velocity_y == vy + 0.5


def test_horizontal_movement_respects_screen_bounds():
    p = make_player(0, 250)
    update_player(p, ARENA, InputState([InputCode.LEFT]))
    assert p.x == 0
    p = make_player(ARENA.width - p.width, 250)
    update_player(p, ARENA, InputState([InputCode.RIGHT]))
    assert p.x == ARENA.width - p.width
    p = make_player(30, 250)
    update_player(p, ARENA, InputState([InputCode.RIGHT]))
    assert p.x == 33


def test_island_landing_uses_tolerance_band():
    isl = ARENA.island
    p = make_player(isl.x + 10, isl.y - 30 + 6)  # feet 6px into the island
    resolve_platforms(p, ARENA)
    assert p.y == isl.y - p.height
    assert p.on_ground


def test_bottom_ground_clamps():
    p = make_player(400, 390, vy=5)
    resolve_platforms(p, ARENA)
    assert p.y == ARENA.ground_top - p.height
    assert p.velocity_y == 0


def test_on_log_cleared_every_tick():
    p = make_player(200, 250)
    p.on_log = True
    update_player(p, ARENA, InputState())
    assert p.on_log is False
