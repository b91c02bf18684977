import pytest

from lumberjack.session import Session
from lumberjack.timer import RunTimer


def make_session(clock, policy="exact"):
    s = Session(RunTimer(clock), checkpoint_policy=policy)
    s.begin()
    return s


def test_scores_accumulate_per_level(clock):
    s = make_session(clock)
    for _ in range(4):
        s.advance_level()
    assert s.level == 5
    assert s.score == 100 * (2 + 3 + 4 + 5)


def test_checkpoint_never_exceeds_level_and_only_moves_forward(clock):
    s = make_session(clock)
    history = []
    for _ in range(7):
        s.advance_level()
        assert s.checkpoint_level <= s.level
        history.append(s.checkpoint_level)
        s.game_over("drowned")
        s.restart()
        assert s.level == s.checkpoint_level
    assert history == sorted(history)


def test_pinned_checkpoint_policy(clock):
    s = make_session(clock, policy="pin_level_3")
    s.advance_level()
    assert (s.checkpoint_level, s.checkpoint_score) == (2, 200)
    s.advance_level()
    assert (s.checkpoint_level, s.checkpoint_score) == (3, 500)
    s.advance_level()
    s.advance_level()
    assert s.level == 5
    assert (s.checkpoint_level, s.checkpoint_score) == (3, 500)
    s.game_over()
    assert s.status.text == "You died! Restarting from Level 3"
    s.restart()
    assert (s.level, s.score) == (3, 500)


def test_unknown_policy_rejected(clock):
    with pytest.raises(ValueError):
        Session(RunTimer(clock), checkpoint_policy="latest")


def test_game_over_messages(clock):
    s = make_session(clock)
    s.game_over("drowned")
    assert s.status.text == "You fell in the water! Game Over!"
    assert s.status.style == "lose"
    assert not s.game_running and s.show_restart
    s.restart()
    s.advance_level()
    s.game_over("alligator")
    assert s.status.text == "You died! Restarting from Level 2"


def test_status_clear_guarded_by_running(clock):
    s = make_session(clock)
    s.advance_level()
    assert s.status_clear_pending
    s.game_running = False
    clock.advance(2000)
    s.tick()
    assert s.status.text == "Level 2! Progress Saved!"
    assert not s.status_clear_pending


def test_newer_status_cancels_pending_clear(clock):
    s = make_session(clock)
    s.advance_level()
    clock.advance(1500)
    s.debug_jump()
    clock.advance(1000)
    s.tick()
    assert s.status.text == "Jumped to Level 3!"
    clock.advance(1000)
    s.tick()
    assert s.status.text == ""


def test_restart_after_win_keeps_final_time(clock):
    s = make_session(clock)
    s.level = 9
    clock.advance(4000)
    assert s.advance_level() is True
    s.restart()
    assert s.level == 1 and s.game_running
    clock.advance(9000)
    assert s.timer.elapsed_ms() == 4000


def test_debug_jump_pins_checkpoint_even_from_later_level(clock):
    s = Session(RunTimer(clock))
    s.begin()
    for _ in range(4):
        s.advance_level()
    assert s.checkpoint_level == 5
    assert s.debug_jump()
    assert (s.level, s.checkpoint_level, s.checkpoint_score) == (3, 3, 200)
