import pytest

from countdown import Countdown, ManualClock


def test_idle_countdown_reports_zero(clock):
    cd = Countdown(clock)
    clock.advance(5)
    assert not cd.running
    assert cd.elapsed() == 0.0


def test_elapsed_follows_clock(clock):
    cd = Countdown(clock)
    cd.start()
    clock.advance(1.5)
    assert cd.elapsed() == 1.5
    assert cd.expired(1.5)
    assert not cd.expired(2.0)


def test_reset_zeroes_without_stopping(clock):
    cd = Countdown(clock)
    cd.start()
    clock.advance(3)
    cd.reset()
    assert cd.running
    assert cd.elapsed() == 0.0
    clock.advance(1)
    assert cd.elapsed() == 1.0


def test_double_reset_same_as_single(clock):
    a = Countdown(clock)
    b = Countdown(clock)
    a.start(); b.start()
    clock.advance(2)
    a.reset()
    b.reset(); b.reset()
    clock.advance(0.5)
    assert a.elapsed() == b.elapsed() == 0.5


def test_elapsed_never_runs_backwards():
    readings = iter([10.0, 12.0, 11.0])
    cd = Countdown(lambda: next(readings))
    cd.start()
    assert cd.elapsed() == 2.0
    # clock jittered back to 11.0
    assert cd.elapsed() == 2.0


def test_independent_countdowns(clock):
    fuse = Countdown(clock)
    thinking = Countdown(clock)
    fuse.start(); thinking.start()
    clock.advance(2)
    thinking.reset()
    assert fuse.elapsed() == 2.0
    assert thinking.elapsed() == 0.0


def test_manual_clock_ignores_stale_time():
    c = ManualClock(5.0)
    c.set(4.0)
    assert c() == 5.0
    c.set(6.5)
    assert c() == 6.5


def test_manual_clock_rejects_negative_advance():
    with pytest.raises(ValueError):
        ManualClock().advance(-1)
