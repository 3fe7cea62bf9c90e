"""GridInstance variants - the live sample points of one grid."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator

from funcgrid.config import check_grid_bounds
from funcgrid.registry import FunctionRegistry
from funcgrid.sampler import GridSampler
from funcgrid.types import Coordinate, GridKind, PointId, SamplePoint, Update, Vec3

logger = logging.getLogger(__name__)


class GridInstance:
    """Owns one point per sample coordinate and re-evaluates them on update().

    Points are built and evaluated at t = 0 on construction. Changing the
    active function takes effect on the next update; resolution and span
    are fixed for the lifetime of the instance and must lie within the
    GridConfig bounds.
    """

    kind: GridKind
    dimensions: int = 1

    def __init__(
        self,
        registry: FunctionRegistry,
        function: Enum | str,
        resolution: int,
        span: float,
    ) -> None:
        check_grid_bounds(resolution, span)
        self._registry = registry
        self._function = registry.resolve(function)
        self._sampler = GridSampler(resolution, span)
        self._points: list[SamplePoint] = []
        for identity, coordinate in enumerate(self._sampler.coordinates(self.dimensions)):
            point = SamplePoint(
                identity=identity,
                coordinate=coordinate,
                position=self._origin(coordinate),
            )
            self._place(point, 0.0)
            self._points.append(point)
        logger.debug(
            "Built %s grid: %d points, step %g, function %s",
            self.kind.value, len(self._points), self._sampler.step, self._function.name,
        )

    @property
    def function(self) -> Enum:
        return self._function

    @property
    def resolution(self) -> int:
        return self._sampler.resolution

    @property
    def span(self) -> float:
        return self._sampler.span

    @property
    def point_scale(self) -> float:
        """Edge length for the primitive drawn at each point."""
        return self._sampler.step

    def set_function(self, function: Enum | str) -> None:
        self._function = self._registry.resolve(function)

    def point(self, identity: PointId) -> SamplePoint:
        if not 0 <= identity < len(self._points):
            raise KeyError(f"Grid has no point {identity}")
        return self._points[identity]

    def points(self) -> list[SamplePoint]:
        return list(self._points)

    def update(self, t: float) -> list[Update]:
        updates: list[Update] = []
        for point in self._points:
            self._place(point, t)
            updates.append((point.identity, point.output))
        return updates

    def _origin(self, coordinate: Coordinate) -> Vec3:
        return (0.0, 0.0, 0.0)

    def _place(self, point: SamplePoint, t: float) -> None:
        raise NotImplementedError

    def __iter__(self) -> Iterator[SamplePoint]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)


class CurveGrid(GridInstance):
    kind = GridKind.CURVE
    dimensions = 1

    def _origin(self, coordinate: Coordinate) -> Vec3:
        return (coordinate[0], 0.0, 0.0)

    def _place(self, point: SamplePoint, t: float) -> None:
        x = point.coordinate[0]
        y = self._registry.evaluate(self._function, x, t)
        point.output = y
        point.position = (x, y, 0.0)


class HeightGrid(GridInstance):
    """Height field that feeds each point's current x/z back in as input.

    Anything that moves a point along x or z (see displace()) changes the
    input of every later evaluation of that point.
    """

    kind = GridKind.HEIGHT
    dimensions = 2

    def _origin(self, coordinate: Coordinate) -> Vec3:
        return (coordinate[0], 0.0, coordinate[1])

    def _place(self, point: SamplePoint, t: float) -> None:
        x, _, z = point.position
        y = self._registry.evaluate(self._function, x, z, t)
        point.output = y
        point.position = (x, y, z)

    def displace(self, identity: PointId, x: float, z: float) -> None:
        """Record an external move of a point along x/z."""
        point = self.point(identity)
        point.position = (x, point.position[1], z)


class SurfaceGrid(GridInstance):
    kind = GridKind.SURFACE
    dimensions = 2

    def _place(self, point: SamplePoint, t: float) -> None:
        u, v = point.coordinate
        position = self._registry.evaluate(self._function, u, v, t)
        point.output = position
        point.position = position
