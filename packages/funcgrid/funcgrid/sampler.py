"""GridSampler - evenly spaced, origin-centred sample coordinates."""
from __future__ import annotations

from funcgrid.types import Coordinate


class GridSampler:
    def __init__(self, resolution: int, span: float) -> None:
        if resolution <= 0:
            raise ValueError("resolution must be positive")
        if span <= 0:
            raise ValueError("span must be positive")
        self._resolution = resolution
        self._span = span
        self._step = span / resolution

    @property
    def resolution(self) -> int:
        return self._resolution

    @property
    def span(self) -> float:
        return self._span

    @property
    def step(self) -> float:
        return self._step

    def axis(self) -> tuple[float, ...]:
        half = self._span / 2.0
        return tuple(i * self._step - half for i in range(self._resolution))

    def coordinates(self, dimensions: int = 1) -> tuple[Coordinate, ...]:
        """Realize every sample coordinate, row-major over the first axis."""
        values = self.axis()
        if dimensions == 1:
            return tuple((a,) for a in values)
        if dimensions == 2:
            return tuple((a, b) for a in values for b in values)
        raise ValueError(f"dimensions must be 1 or 2, got {dimensions}")


def coordinates(resolution: int, span: float, dimensions: int = 1) -> tuple[Coordinate, ...]:
    return GridSampler(resolution, span).coordinates(dimensions)
