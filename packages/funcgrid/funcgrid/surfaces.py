"""UV surface functions: (u, v, t) -> (x, y, z).

u and v are measured in half-turns; each evaluator multiplies them by pi.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Callable

from funcgrid.types import Vec3

PI = math.pi


class SurfaceFunction(Enum):
    CYLINDER = "cylinder"
    SPHERE = "sphere"
    PULSING_SPHERE = "pulsing_sphere"
    SUPER_SPHERE = "super_sphere"
    TORUS = "torus"


def cylinder(u: float, v: float, t: float) -> Vec3:
    r = 0.8 + math.sin(PI * (6.0 * u + 2.0 * v + t)) * 0.2
    return (
        r * math.sin(PI * u),
        v,
        r * math.cos(PI * u),
    )


def sphere(u: float, v: float, t: float) -> Vec3:
    r = math.cos(PI * 0.5 * v)
    return (
        r * math.sin(PI * u),
        math.sin(PI * 0.5 * v),
        r * math.cos(PI * u),
    )


def _pulse_radius(u: float, v: float, t: float) -> float:
    r = 0.8 + math.sin(PI * (6.0 * u + t)) * 0.1
    r += math.sin(PI * (4.0 * v + t)) * 0.1
    return r


def pulsing_sphere(u: float, v: float, t: float) -> Vec3:
    r = _pulse_radius(u, v, t)
    s = r * math.cos(PI * 0.5 * v)
    return (
        s * math.sin(PI * u),
        r * math.sin(PI * 0.5 * v),
        s * math.cos(PI * u),
    )


def super_sphere(u: float, v: float, t: float) -> Vec3:
    r = _pulse_radius(u, v, t)
    s = r * math.cos(PI * 0.5 * v)
    return (
        s * math.sin(PI * u),
        r * math.tan(PI * 0.5 * v),
        s * math.cos(PI * u),
    )


def torus(u: float, v: float, t: float) -> Vec3:
    r1 = 0.65 + math.sin(PI * (6.0 * u + t)) * 0.1
    r2 = 0.2 + math.sin(PI * (4.0 * v + t)) * 0.05
    s = r2 * math.cos(PI * v) + r1
    return (
        s * math.sin(PI * u),
        r2 * math.sin(PI * v),
        s * math.cos(PI * u),
    )


SURFACE_FUNCTIONS: dict[SurfaceFunction, Callable[[float, float, float], Vec3]] = {
    SurfaceFunction.CYLINDER: cylinder,
    SurfaceFunction.SPHERE: sphere,
    SurfaceFunction.PULSING_SPHERE: pulsing_sphere,
    SurfaceFunction.SUPER_SPHERE: super_sphere,
    SurfaceFunction.TORUS: torus,
}
