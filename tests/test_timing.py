import math

import pytest

from clashtui.timing import Interval, Pulse, TicksCounter


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.slept = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.slept.append(seconds)
        self.now += seconds


def test_interval():
    clock = FakeClock()
    interval = Interval(0.1, clock=clock, sleep=clock.sleep)
    assert interval.next_tick() == pytest.approx(0.1)
    clock.now += 0.05
    assert interval.next_tick() == pytest.approx(0.05)


def test_interval_stays_on_grid_after_overrun():
    clock = FakeClock()
    interval = Interval(0.1, clock=clock, sleep=clock.sleep)
    interval.next_tick()
    clock.now = 0.25
    assert interval.next_tick() == pytest.approx(0.05)


def test_interval_tick_sleeps_until_deadline():
    clock = FakeClock()
    interval = Interval(0.1, clock=clock, sleep=clock.sleep)
    interval.tick()
    interval.tick()
    assert clock.slept == [pytest.approx(0.1), pytest.approx(0.1)]
    assert clock.now == pytest.approx(0.2)


def test_interval_rejects_non_positive():
    with pytest.raises(ValueError):
        Interval(0)


def test_pulse_fires_first_and_every_nth():
    pulse = Pulse(3)
    assert [pulse.tick() for _ in range(7)] == [True, False, False, True, False, False, True]


def test_pulse_is_pulse_does_not_advance():
    pulse = Pulse(2)
    assert pulse.is_pulse() is True
    assert pulse.is_pulse() is True
    pulse.tick()
    assert pulse.is_pulse() is False


def test_pulse_rejects_zero():
    with pytest.raises(ValueError):
        Pulse(0)


def test_ticks_counter_rate_none_before_ticks():
    clock = FakeClock()
    counter = TicksCounter(clock=clock)
    assert counter.tick_rate() is None
    assert counter.tick_num() == 0


def test_ticks_counter_single_tick_is_infinite_rate():
    clock = FakeClock()
    counter = TicksCounter(clock=clock)
    counter.new_tick()
    assert counter.tick_rate() == math.inf


def test_ticks_counter_rate_from_twenty_ticks_back():
    clock = FakeClock()
    counter = TicksCounter(clock=clock)
    for i in range(21):
        clock.now = i * 0.01
        counter.new_tick()
    assert counter.samples[0] == 200
    assert counter.samples[20] == 0
    assert counter.tick_rate() == pytest.approx(100.0)
    assert counter.tick_num() == 21


def test_ticks_counter_truncates_samples():
    clock = FakeClock()
    counter = TicksCounter(clock=clock)
    for _ in range(128):
        counter.new_tick()
    assert len(counter.samples) == 128
    counter.new_tick()
    assert len(counter.samples) == 64
    assert counter.tick_num() == 129