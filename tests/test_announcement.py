import pytest

from lumberjack.announcement import LevelAnnouncement


def test_fade_and_scale_curve(clock):
    ann = LevelAnnouncement(clock)
    assert not ann.active
    ann.show(4)
    assert ann.text == "LEVEL 4"
    assert ann.alpha() == 0.0 and ann.scale() == 1.5

    clock.advance(200)  # 10%
    assert ann.alpha() == pytest.approx(0.5)
    assert ann.scale() == pytest.approx(1.5 - 0.5 / 3)

    clock.advance(800)  # 50%
    assert ann.alpha() == 1.0 and ann.scale() == 1.0

    clock.advance(700)  # 85%
    assert ann.alpha() == pytest.approx(0.75)


def test_expires_after_duration(clock):
    ann = LevelAnnouncement(clock)
    ann.show(2)
    clock.advance(1999)
    ann.update()
    assert ann.active
    clock.advance(1)
    ann.update()
    assert not ann.active


def test_cancel(clock):
    ann = LevelAnnouncement(clock)
    ann.show(3)
    ann.cancel()
    assert not ann.active
    assert ann.progress() == 1.0
