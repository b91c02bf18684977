import pytest

from lumberjack.particle_system import ParticleSystem, RippleParticle, SplashParticle


def test_splash_follows_damped_arc(rng):
    p = SplashParticle(x=10, y=20, velocity_x=1.0, velocity_y=-1.0, life=5, max_life=5, size=1, color=(0, 0, 0, 0))
    assert p.update() is False
    assert (p.x, p.y) == (11.0, 19.0)
    assert p.velocity_y == pytest.approx(-0.9)
    assert p.velocity_x == pytest.approx(0.98)
    assert p.life == 4


def test_ripple_eases_toward_max_radius():
    p = RippleParticle(x=0, y=0, radius=1, max_radius=11, life=30, max_life=30, alpha=0.4)
    p.update()
    assert p.radius == pytest.approx(2.0)
    assert p.alpha == pytest.approx(29 / 30 * 0.8)
    for _ in range(28):
        p.update()
    assert p.radius < 11


def test_particles_removed_when_life_runs_out(rng):
    ps = ParticleSystem(rng)
    ps.spawn_ripple(5, 5)
    for _ in range(29):
        ps.update()
    assert len(ps) == 1
    assert ps.update() == 1
    assert len(ps) == 0


def test_splash_spawn_counts(rng):
    ps = ParticleSystem(rng)
    for _ in range(100):
        spawned = ps.spawn_splash(100, 300, intensity=1)
        assert 1 <= len(spawned) <= 2
        light = ps.spawn_splash(100, 300, intensity=0.5)
        assert 1 <= len(light) <= 2
    for p in ps.particles:
        assert 20 <= p.life < 35
        assert 95 <= p.x < 105
        assert p.velocity_y <= 0


def test_draw_commands_grouped_by_kind(rng):
    ps = ParticleSystem(rng)
    ps.spawn_ripple(0, 0)
    ps.spawn_splash(0, 0)
    cmds = ps.get_draw_commands()
    assert len(cmds["ripple"]) == 1
    assert len(cmds["splash"]) >= 1
    ps.clear()
    assert len(ps) == 0
