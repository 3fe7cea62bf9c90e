"""funcgrid - Animated grids of sampled mathematical functions."""

import logging

from funcgrid.clock import AnimationClock, ClockState, advance_cycle
from funcgrid.config import GridConfig
from funcgrid.curves import CURVE_FUNCTIONS, CurveFunction
from funcgrid.engine import GridEngine, make_registry
from funcgrid.grid import CurveGrid, GridInstance, HeightGrid, SurfaceGrid
from funcgrid.heights import HEIGHT_FUNCTIONS, HeightFunction
from funcgrid.markers import AxisMarker, axis_markers
from funcgrid.registry import FunctionRegistry
from funcgrid.sampler import GridSampler, coordinates
from funcgrid.surfaces import SURFACE_FUNCTIONS, SurfaceFunction
from funcgrid.types import (
    ConfigurationError,
    FuncGridError,
    GridKind,
    IncompleteCatalogError,
    SamplePoint,
    UnknownFunctionTag,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "GridEngine",
    "GridConfig",
    "GridKind",
    "GridInstance",
    "CurveGrid",
    "HeightGrid",
    "SurfaceGrid",
    "SamplePoint",
    "GridSampler",
    "coordinates",
    "AnimationClock",
    "ClockState",
    "advance_cycle",
    "FunctionRegistry",
    "make_registry",
    "CurveFunction",
    "HeightFunction",
    "SurfaceFunction",
    "CURVE_FUNCTIONS",
    "HEIGHT_FUNCTIONS",
    "SURFACE_FUNCTIONS",
    "AxisMarker",
    "axis_markers",
    "FuncGridError",
    "ConfigurationError",
    "UnknownFunctionTag",
    "IncompleteCatalogError",
]
