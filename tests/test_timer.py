import pytest

from slugrace.timer import Timer


def test_new_timer_is_done():
    timer = Timer()
    assert timer.is_done()
    assert timer.seconds_remaining() == 0.0


def test_set_records_remaining_and_maximum():
    timer = Timer()
    timer.set(3.0)
    assert timer.seconds_remaining() == 3.0
    assert timer.maximum == 3.0
    assert not timer.is_done()


def test_tick_counts_down():
    timer = Timer()
    timer.set(3.0)
    timer.tick(0.5)
    assert timer.seconds_remaining() == pytest.approx(2.5)
    assert timer.maximum == 3.0


def test_overshoot_clamps_to_zero_and_is_done():
    timer = Timer()
    timer.set(1.0)
    timer.tick(4.0)
    assert timer.is_done()
    assert timer.seconds_remaining() == 0.0
    assert timer.remaining < 0.0


def test_tick_after_done_does_not_change_remaining():
    timer = Timer()
    timer.set(1.0)
    timer.tick(2.0)
    before = timer.remaining
    timer.tick(2.0)
    assert timer.remaining == before


def test_reset_restarts_countdown():
    timer = Timer()
    timer.set(1.0)
    timer.tick(2.0)
    timer.set(2.0)
    assert not timer.is_done()
    assert timer.seconds_remaining() == 2.0