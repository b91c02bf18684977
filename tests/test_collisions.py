from lumberjack.collisions import (
    Outcome,
    check_collisions,
    fell_off,
    find_log_under,
    in_water,
    on_island,
    reached_flag,
)
from lumberjack.entities import Alligator, Arena, Log, Player

ARENA = Arena(800, 400)


def player_at(x, y):
    p = Player.spawn(ARENA)
    p.x, p.y = x, y
    return p


def test_alligator_beats_log_riding():
    p = player_at(200, 250.5)
    lg = Log(190, 280, 100, 15, speed=1.0)
    gator = Alligator(195, 275, 40, 12, speed=0.0)
    result = check_collisions(p, [lg], [gator], ARENA)
    assert result.outcome is Outcome.LOSS
    assert result.cause == "alligator"
    assert not p.on_log
    assert p.x == 200  # not carried


def test_ride_first_log_only():
    p = player_at(120, 250.5)
    first = Log(100, 280, 100, 15, speed=1.5)
    second = Log(110, 282, 100, 15, speed=3.0)
    result = check_collisions(p, [first, second], [], ARENA)
    assert result.outcome is Outcome.NONE
    assert result.riding is first
    assert p.on_log
    assert p.y == 280 - p.height
    assert p.x == 120 - 1.5


def test_ride_clamps_at_left_edge():
    p = player_at(0.5, 250)
    lg = Log(-50, 280, 100, 15, speed=1.5)
    check_collisions(p, [lg], [], ARENA)
    assert p.x == 0


def test_log_landing_band():
    lg = Log(100, 280, 100, 15, speed=1)
    assert find_log_under(player_at(120, 280 - 30 - 5), [lg]) is lg  # 5 px above
    assert find_log_under(player_at(120, 280 - 30 - 5.5), [lg]) is None
    assert find_log_under(player_at(120, 280 + 15 + 8 - 30), [lg]) is lg  # 8 px below bottom
    assert find_log_under(player_at(120, 280 + 15 + 8.5 - 30), [lg]) is None
    assert find_log_under(player_at(200, 250), [lg]) is None  # touching edge only


def test_drowning_between_banks():
    p = player_at(200, 260)
    result = check_collisions(p, [], [], ARENA)
    assert result.outcome is Outcome.LOSS
    assert result.cause == "drowned"


def test_banks_are_not_water():
    assert not in_water(player_at(79, 260), ARENA)
    assert in_water(player_at(80, 260), ARENA)
    assert in_water(player_at(720, 260), ARENA)
    assert not in_water(player_at(721, 260), ARENA)


def test_island_is_safe():
    isl = ARENA.island
    p = player_at(isl.x + 10, isl.y - 30)
    assert on_island(p, ARENA)
    result = check_collisions(p, [], [], ARENA)
    assert result.outcome is Outcome.NONE
    assert result.on_island


def test_flag_triggers_level_up():
    p = player_at(735, 240)
    assert reached_flag(p, ARENA)
    result = check_collisions(p, [], [], ARENA)
    assert result.outcome is Outcome.LEVEL_UP


def test_fell_off_exactly_below_height():
    assert not fell_off(player_at(10, 400), ARENA)
    assert fell_off(player_at(10, 400.01), ARENA)
    result = check_collisions(player_at(10, 401), [], [], ARENA)
    assert result.outcome is Outcome.LOSS
    assert result.cause == "fell"
