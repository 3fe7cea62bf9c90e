"""AnimationClock and ClockState for free-running and cycling time."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class ClockState:
    timer: float = 0.0
    direction: int = 1


def advance_cycle(state: ClockState, dt: float, cycle_range: float) -> ClockState:
    """Move the cycle timer by ``dt`` and reflect once it leaves the range.

    The direction flips on the tick that crosses a bound, so the timer may
    overshoot by up to one tick's motion before heading back.
    """
    timer = state.timer + dt * state.direction
    direction = state.direction
    if timer > cycle_range:
        direction = -1
    elif timer < -cycle_range:
        direction = 1
    return ClockState(timer=timer, direction=direction)


def fold_into_range(state: ClockState, cycle_range: float) -> ClockState:
    """Move a timer that lies beyond +/-cycle_range onto the bound, heading inward."""
    if state.timer > cycle_range:
        return ClockState(timer=cycle_range, direction=-1)
    if state.timer < -cycle_range:
        return ClockState(timer=-cycle_range, direction=1)
    return state


class AnimationClock:
    """Time source for one grid.

    Free-running mode reports seconds elapsed on ``time_fn`` since the clock
    was built (or last reset), not since process start. Cycling mode moves a
    timer by ``dt`` per advance and reflects it at +/-cycle_range.
    """

    def __init__(
        self,
        cycle: bool = False,
        cycle_range: float = 1.0,
        timer: float = 0.0,
        time_fn: Callable[[], float] = time.monotonic,
    ) -> None:
        if cycle_range <= 0:
            raise ValueError("cycle_range must be positive")
        if not abs(timer) <= cycle_range:
            raise ValueError(f"timer must be within +/-{cycle_range:g}, got {timer!r}")
        self._cycle = cycle
        self._cycle_range = cycle_range
        self._initial = ClockState(timer=timer)
        self._state = self._initial
        self._time_fn = time_fn
        self._origin = time_fn()
        self._time = timer if cycle else 0.0

    @property
    def cycle(self) -> bool:
        return self._cycle

    @property
    def cycle_range(self) -> float:
        return self._cycle_range

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def time(self) -> float:
        """The value returned by the last advance()."""
        return self._time

    def advance(self, dt: float) -> float:
        if self._cycle:
            self._state = advance_cycle(self._state, dt, self._cycle_range)
            self._time = self._state.timer
        else:
            self._time = self._time_fn() - self._origin
        return self._time

    def set_cycle(self, cycle: bool, cycle_range: float | None = None) -> None:
        """Switch mode; a narrower range pulls the timer back onto its bound."""
        if cycle_range is not None:
            if cycle_range <= 0:
                raise ValueError("cycle_range must be positive")
            self._cycle_range = cycle_range
            self._state = fold_into_range(self._state, cycle_range)
            self._initial = fold_into_range(self._initial, cycle_range)
        self._cycle = cycle
        if cycle:
            self._time = self._state.timer

    def reset(self) -> None:
        self._state = self._initial
        self._origin = self._time_fn()
        self._time = self._state.timer if self._cycle else 0.0
