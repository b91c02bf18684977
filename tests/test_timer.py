from lumberjack.timer import RunTimer


def test_idle_timer_reads_zero(clock):
    t = RunTimer(clock)
    assert t.state == "idle"
    assert t.elapsed_ms() == 0
    assert t.text == "0:00.00"


def test_running_and_stopped(clock):
    t = RunTimer(clock)
    t.start()
    clock.advance(1234)
    assert t.state == "running"
    assert t.elapsed_ms() == 1234
    t.start()  # no-op while running
    clock.advance(100)
    assert t.elapsed_ms() == 1334
    t.stop()
    assert t.state == "stopped"
    clock.advance(99_999)
    assert t.elapsed_ms() == 1334
    t.stop()
    assert t.elapsed_ms() == 1334


def test_reset_returns_to_idle(clock):
    t = RunTimer(clock)
    t.start()
    clock.advance(50)
    t.stop()
    t.reset()
    assert t.state == "idle"
    assert t.elapsed_ms() == 0


def test_clock_starting_at_zero_still_counts():
    now = [0]
    t = RunTimer(lambda: now[0])
    t.start()
    now[0] = 500
    assert t.elapsed_ms() == 500


def test_format_time():
    assert RunTimer.format_time(0) == "0:00.00"
    assert RunTimer.format_time(9_050) == "0:09.05"
    assert RunTimer.format_time(61_234) == "1:01.23"
    assert RunTimer.format_time(12 * 60_000 + 999) == "12:00.99"
