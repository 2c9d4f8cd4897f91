import logging
import random

import pytest

from neonpong.clock import SimulationClock

STEP = 1000 / 60


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def test_first_frame_only_seeds():
    clock = SimulationClock(STEP)
    step = Counter()
    assert clock.tick(123456.0, step) == 0
    assert step.calls == 0
    assert clock.accumulator == 0.0


def test_two_and_a_half_steps_runs_two_and_keeps_half():
    clock = SimulationClock(STEP)
    step = Counter()
    clock.tick(0.0, step)
    assert clock.tick(2.5 * STEP, step) == 2
    assert step.calls == 2
    assert clock.accumulator == pytest.approx(0.5 * STEP)


def test_fast_frames_accumulate_until_a_step_is_due():
    clock = SimulationClock(STEP)
    step = Counter()
    clock.tick(0.0, step)
    assert clock.tick(STEP * 0.4, step) == 0
    assert clock.tick(STEP * 0.8, step) == 0
    assert clock.tick(STEP * 1.2, step) == 1
    assert clock.accumulator == pytest.approx(STEP * 0.2)


def test_accumulator_stays_below_one_step():
    clock = SimulationClock(STEP)
    rand = random.Random(7)
    now = 0.0
    clock.tick(now, lambda: None)
    for _ in range(500):
        now += rand.uniform(0, 5 * STEP)
        clock.tick(now, lambda: None)
        assert 0 <= clock.accumulator < STEP


def test_uncapped_clock_catches_up_fully():
    clock = SimulationClock(STEP, max_steps=None)
    step = Counter()
    clock.tick(0.0, step)
    clock.tick(20.5 * STEP, step)
    assert step.calls == 20


def test_cap_drops_excess_time(caplog):
    clock = SimulationClock(STEP, max_steps=5)
    step = Counter()
    clock.tick(0.0, step)
    with caplog.at_level(logging.WARNING, logger="neonpong.clock"):
        assert clock.tick(20.5 * STEP, step) == 5
    assert step.calls == 5
    assert clock.accumulator == pytest.approx(0.5 * STEP)
    assert "dropped" in caplog.text


def test_clock_going_backwards_runs_nothing():
    clock = SimulationClock(STEP)
    step = Counter()
    clock.tick(1000.0, step)
    assert clock.tick(900.0, step) == 0
    assert clock.accumulator == 0.0


def test_reset_reseeds():
    clock = SimulationClock(STEP)
    step = Counter()
    clock.tick(0.0, step)
    clock.tick(STEP * 0.5, step)
    clock.reset()
    assert clock.tick(10_000.0, step) == 0
    assert step.calls == 0
    assert clock.accumulator == 0.0
