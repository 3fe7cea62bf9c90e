"""GridEngine - configuration surface, rebuilds and the per-frame tick."""

from __future__ import annotations

import dataclasses
import logging
import time
from enum import Enum
from typing import Callable

from funcgrid.clock import AnimationClock
from funcgrid.config import GridConfig
from funcgrid.curves import CURVE_FUNCTIONS, CurveFunction
from funcgrid.grid import CurveGrid, GridInstance, HeightGrid, SurfaceGrid
from funcgrid.heights import HEIGHT_FUNCTIONS, HeightFunction
from funcgrid.registry import FunctionRegistry
from funcgrid.surfaces import SURFACE_FUNCTIONS, SurfaceFunction
from funcgrid.types import GridKind, UnknownFunctionTag, Update

logger = logging.getLogger(__name__)

RebuildHook = Callable[[GridInstance], None]

_VARIANTS: dict[GridKind, tuple[type[Enum], dict, type[GridInstance]]] = {
    GridKind.CURVE: (CurveFunction, CURVE_FUNCTIONS, CurveGrid),
    GridKind.HEIGHT: (HeightFunction, HEIGHT_FUNCTIONS, HeightGrid),
    GridKind.SURFACE: (SurfaceFunction, SURFACE_FUNCTIONS, SurfaceGrid),
}


def make_registry(kind: GridKind | str) -> FunctionRegistry:
    tags, functions, _ = _VARIANTS[GridKind(kind)]
    return FunctionRegistry(tags, functions)


class GridEngine:
    """Drives one function grid from a host loop it does not own.

    The host calls create_grid() once, binds a primitive to each point, then
    calls tick(dt) every frame and applies the returned outputs. Resolution
    and span changes only mark the grid for rebuilding; the host decides when
    to call create_grid() again.
    """

    def __init__(
        self,
        kind: GridKind | str,
        config: GridConfig | None = None,
        *,
        strict: bool = True,
        time_fn: Callable[[], float] = time.monotonic,
    ) -> None:
        self._kind = GridKind(kind)
        _, _, self._grid_type = _VARIANTS[self._kind]
        self._registry = make_registry(self._kind)
        self._strict = strict
        self._time_fn = time_fn
        self._grid: GridInstance | None = None
        self._rebuild_required = True
        self._rebuild_hooks: list[RebuildHook] = []
        self._configure(config if config is not None else GridConfig())

    def _configure(self, config: GridConfig) -> None:
        if config.function is None:
            function = self._registry.first()
        else:
            function = self._registry.resolve(config.function)
        self._config = dataclasses.replace(config, function=function)
        self._clock = AnimationClock(
            cycle=config.cycle,
            cycle_range=config.cycle_range,
            timer=config.cycle_timer,
            time_fn=self._time_fn,
        )

    @property
    def kind(self) -> GridKind:
        return self._kind

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def registry(self) -> FunctionRegistry:
        return self._registry

    @property
    def clock(self) -> AnimationClock:
        return self._clock

    @property
    def grid(self) -> GridInstance | None:
        return self._grid

    @property
    def rebuild_required(self) -> bool:
        return self._rebuild_required

    def on_rebuild(self, hook: RebuildHook) -> None:
        self._rebuild_hooks.append(hook)

    def off_rebuild(self, hook: RebuildHook) -> None:
        try:
            self._rebuild_hooks.remove(hook)
        except ValueError:
            pass

    def create_grid(self, config: GridConfig | None = None) -> GridInstance:
        if config is not None:
            self._configure(config)
        cfg = self._config
        self._grid = self._grid_type(
            self._registry, cfg.function, cfg.resolution, cfg.span
        )
        self._rebuild_required = False
        logger.info(
            "Created %s grid: resolution %d, span %g, %d points",
            self._kind.value, cfg.resolution, cfg.span, len(self._grid),
        )
        for hook in self._rebuild_hooks:
            hook(self._grid)
        return self._grid

    def tick(self, dt: float) -> list[Update]:
        if self._grid is None:
            raise RuntimeError("create_grid() must be called before tick()")
        if not self._config.animate:
            return []
        t = self._clock.advance(dt)
        return self._grid.update(t)

    def run(self, n: int, dt: float) -> list[Update]:
        """Tick ``n`` times with a fixed ``dt``; returns the last tick's updates."""
        updates: list[Update] = []
        for _ in range(n):
            updates = self.tick(dt)
        return updates

    # -- Configuration surface --

    def set_resolution(self, resolution: int) -> bool:
        config = dataclasses.replace(self._config, resolution=resolution)
        if config.resolution != self._config.resolution:
            self._config = config
            self._rebuild_required = True
            logger.info("Resolution set to %d, rebuild required", resolution)
        return self._rebuild_required

    def set_range(self, span: float) -> bool:
        config = dataclasses.replace(self._config, span=span)
        if config.span != self._config.span:
            self._config = config
            self._rebuild_required = True
            logger.info("Range set to %g, rebuild required", span)
        return self._rebuild_required

    def set_active_function(self, function: Enum | str) -> None:
        try:
            tag = self._registry.resolve(function)
        except UnknownFunctionTag:
            if self._strict:
                raise
            logger.warning(
                "Ignoring unknown %s function %r, keeping %s",
                self._kind.value, function, self._config.function.name,
            )
            return
        self._config = dataclasses.replace(self._config, function=tag)
        if self._grid is not None:
            self._grid.set_function(tag)
        logger.debug("Active %s function: %s", self._kind.value, tag.name)

    def next_function(self) -> Enum:
        """Switch to the next function in catalog order and return it."""
        tag = self._registry.next_after(self._config.function)
        self.set_active_function(tag)
        return tag

    def set_animate(self, animate: bool) -> None:
        self._config = dataclasses.replace(self._config, animate=bool(animate))

    def set_cycle(self, cycle: bool, cycle_range: float | None = None) -> None:
        if cycle_range is None:
            cycle_range = self._config.cycle_range
        # A narrower range also narrows the starting timer used by reset().
        cycle_timer = max(-cycle_range, min(cycle_range, self._config.cycle_timer))
        self._config = dataclasses.replace(
            self._config, cycle=bool(cycle), cycle_range=cycle_range, cycle_timer=cycle_timer
        )
        self._clock.set_cycle(self._config.cycle, self._config.cycle_range)
