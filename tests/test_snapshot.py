from lumberjack.entities import Alligator, Log
from lumberjack.snapshot import SnapshotService


def test_snapshot_copies_entities(world):
    world.hazards.logs.append(Log(300, 280, 80, 15, speed=1.5))
    world.hazards.alligators.append(Alligator(500, 285, 40, 12, speed=1.0))
    world.particles.spawn_ripple(100, 300)

    snap = SnapshotService.capture(world)
    assert len(snap.logs) == 1 and len(snap.alligators) == 1 and len(snap.particles) == 1

    snap.logs[0].x = -500
    snap.player.x = 999
    snap.island.x = 0
    assert world.logs[0].x == 300
    assert world.player.x != 999
    assert world.arena.island.x == 360


def test_snapshot_session_fields(world, clock):
    world.session.score = 40
    clock.advance(61230)
    snap = world.snapshot()
    s = snap.session
    assert s.score == 40 and s.level == 1
    assert s.game_running and s.game_started
    assert s.timer_text == "1:01.23"
    assert snap.tick == world.tick_count
    assert snap.announcement.active is False
    assert snap.rng_state == ()


def test_snapshot_announcement_and_rng(world):
    world.next_level()
    snap = SnapshotService.capture(world, with_rng=True)
    assert snap.announcement.active
    assert snap.announcement.text == "LEVEL 2"
    assert snap.announcement.scale == 1.5
    assert snap.rng_state == world.rng.get_state()
    assert snap.session.status_text == "Level 2! Progress Saved!"
