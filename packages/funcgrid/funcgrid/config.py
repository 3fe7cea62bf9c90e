"""Grid configuration dataclass and its bounds."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from funcgrid.types import ConfigurationError

RESOLUTION_BOUNDS = (10, 400)
SPAN_BOUNDS = (2.0, 8.0)
CYCLE_RANGE_BOUNDS = (1.0, 8.0)


def _check_bounds(name: str, value: float, bounds: tuple[float, float]) -> None:
    low, high = bounds
    if not (low <= value <= high):
        raise ConfigurationError(f"{name} must be in [{low:g}, {high:g}], got {value!r}")


def check_grid_bounds(resolution: int, span: float) -> None:
    """Raise ConfigurationError unless resolution and span are within bounds."""
    if isinstance(resolution, bool) or not isinstance(resolution, int):
        raise ConfigurationError(f"resolution must be an integer, got {resolution!r}")
    _check_bounds("resolution", resolution, RESOLUTION_BOUNDS)
    _check_bounds("span", span, SPAN_BOUNDS)


@dataclass(frozen=True)
class GridConfig:
    """Immutable settings for one function grid.

    Attributes:
        resolution: Samples per axis, N.
        span: Total range R covered by the samples, centred on 0.
        function: Active function tag, or its name. None selects the first
            tag of the variant's catalog.
        animate: Re-evaluate the grid on every tick.
        cycle: Oscillate time between -cycle_range and +cycle_range instead
            of following the monotonic clock.
        cycle_range: Bound of the cycling timer.
        cycle_timer: Starting value of the cycling timer.
    """

    resolution: int = 50
    span: float = 2.0
    function: Enum | str | None = None
    animate: bool = True
    cycle: bool = False
    cycle_range: float = 1.0
    cycle_timer: float = 0.0

    def __post_init__(self) -> None:
        check_grid_bounds(self.resolution, self.span)
        _check_bounds("cycle_range", self.cycle_range, CYCLE_RANGE_BOUNDS)
        if not abs(self.cycle_timer) <= self.cycle_range:
            raise ConfigurationError(
                f"cycle_timer must be in [-{self.cycle_range:g}, {self.cycle_range:g}], "
                f"got {self.cycle_timer!r}"
            )

    @property
    def resolution_step(self) -> float:
        return self.span / self.resolution
