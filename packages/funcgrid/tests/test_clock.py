"""Tests for free-running and cycling animation time."""

import pytest
from funcgrid.clock import AnimationClock, ClockState, advance_cycle, fold_into_range


class FakeTime:
    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


# --- advance_cycle ---

def test_cycle_sequence_overshoots_then_flips():
    """cycle_range=5, dt=1: 1..5 going up, 6 flips the direction."""
    state = ClockState()
    timers = []
    for _ in range(6):
        state = advance_cycle(state, 1.0, 5.0)
        timers.append(state.timer)
        if state.timer <= 5.0:
            assert state.direction == 1
    assert timers == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert state.direction == -1


def test_cycle_heads_back_after_flip():
    state = ClockState(timer=6.0, direction=-1)
    state = advance_cycle(state, 1.0, 5.0)
    assert state.timer == 5.0
    assert state.direction == -1


def test_cycle_flips_up_below_lower_bound():
    state = ClockState(timer=-4.5, direction=-1)
    state = advance_cycle(state, 1.0, 5.0)
    assert state.timer == -5.5
    assert state.direction == 1


def test_exact_bound_does_not_flip():
    state = advance_cycle(ClockState(timer=4.0), 1.0, 5.0)
    assert state.timer == 5.0
    assert state.direction == 1


def test_cycle_state_is_immutable():
    state = ClockState()
    with pytest.raises(AttributeError):
        state.timer = 1.0  # type: ignore[misc]


def test_one_flip_per_crossing_and_bounded():
    """Over many ticks the timer stays within one tick of the range."""
    deltas = [0.3, 0.7, 0.1, 0.9, 0.5]
    max_dt = max(deltas)
    cycle_range = 2.0
    state = ClockState()
    flips = 0
    crossings = 0
    for i in range(2000):
        previous = state
        state = advance_cycle(state, deltas[i % len(deltas)], cycle_range)
        assert -cycle_range - max_dt <= state.timer <= cycle_range + max_dt
        if state.direction != previous.direction:
            flips += 1
        was_inside = -cycle_range <= previous.timer <= cycle_range
        if was_inside and not -cycle_range <= state.timer <= cycle_range:
            crossings += 1
    assert flips > 0
    assert flips == crossings


# --- AnimationClock ---

def test_free_running_follows_external_clock():
    fake = FakeTime(100.0)
    clock = AnimationClock(time_fn=fake)
    fake.now = 101.5
    assert clock.advance(0.016) == pytest.approx(1.5)
    fake.now = 103.0
    assert clock.advance(10.0) == pytest.approx(3.0)
    assert clock.time == pytest.approx(3.0)


def test_free_running_ignores_delta():
    fake = FakeTime()
    clock = AnimationClock(time_fn=fake)
    assert clock.advance(5.0) == 0.0
    assert clock.state == ClockState()


def test_cycling_uses_delta():
    clock = AnimationClock(cycle=True, cycle_range=5.0)
    values = [clock.advance(1.0) for _ in range(7)]
    assert values == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 5.0]
    assert clock.state.direction == -1


def test_cycling_starts_from_initial_timer():
    clock = AnimationClock(cycle=True, cycle_range=2.0, timer=1.5)
    assert clock.time == 1.5
    assert clock.advance(1.0) == 2.5
    assert clock.state.direction == -1


def test_set_cycle_switches_mode():
    fake = FakeTime()
    clock = AnimationClock(time_fn=fake)
    clock.set_cycle(True, 3.0)
    assert clock.cycle
    assert clock.cycle_range == 3.0
    assert clock.advance(0.5) == 0.5


def test_set_cycle_rejects_non_positive_range():
    clock = AnimationClock()
    with pytest.raises(ValueError):
        clock.set_cycle(True, 0.0)


def test_reset_restores_initial_state():
    fake = FakeTime()
    clock = AnimationClock(cycle=True, cycle_range=1.0, time_fn=fake)
    for _ in range(5):
        clock.advance(0.4)
    clock.reset()
    assert clock.state == ClockState()
    assert clock.time == 0.0


def test_reset_restarts_free_running_origin():
    fake = FakeTime(10.0)
    clock = AnimationClock(time_fn=fake)
    fake.now = 20.0
    clock.reset()
    fake.now = 21.0
    assert clock.advance(0.0) == pytest.approx(1.0)


def test_rejects_timer_outside_range():
    with pytest.raises(ValueError):
        AnimationClock(cycle=True, cycle_range=1.0, timer=50.0)


def test_fold_into_range():
    assert fold_into_range(ClockState(7.1, 1), 1.0) == ClockState(1.0, -1)
    assert fold_into_range(ClockState(-3.0, -1), 2.0) == ClockState(-2.0, 1)
    inside = ClockState(0.5, -1)
    assert fold_into_range(inside, 1.0) is inside


def test_narrowing_range_keeps_timer_bounded():
    """Shrinking the range mid-run stays within one tick of the new bound."""
    clock = AnimationClock(cycle=True, cycle_range=8.0)
    for _ in range(70):
        clock.advance(0.1)
    assert clock.time > 5.0

    clock.set_cycle(True, 1.0)
    assert clock.time == 1.0
    assert clock.state.direction == -1
    for _ in range(100):
        assert -1.1 <= clock.advance(0.1) <= 1.1


def test_narrowing_range_folds_reset_target():
    clock = AnimationClock(cycle=True, cycle_range=4.0, timer=-3.0)
    clock.set_cycle(True, 2.0)
    clock.reset()
    assert clock.state == ClockState(-2.0, 1)
