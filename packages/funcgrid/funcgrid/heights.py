"""Height-field functions: (x, z, t) -> y."""
from __future__ import annotations

import math
from enum import Enum
from typing import Callable


class HeightFunction(Enum):
    SQUARE = "square"
    SIN = "sin"
    MULTI_SIN = "multi_sin"
    SIN_2D = "sin_2d"
    MULTI_SIN_2D = "multi_sin_2d"
    COS = "cos"
    TAN = "tan"
    RIPPLE = "ripple"


def square(x: float, z: float, t: float) -> float:
    return x * x


def sin(x: float, z: float, t: float) -> float:
    return math.sin(x + z + t)


def multi_sin(x: float, z: float, t: float) -> float:
    y = sin(x, z, t)
    y += math.sin(2 * x) / 2
    return y


def sin_2d(x: float, z: float, t: float) -> float:
    return (math.sin(x) + math.sin(z)) * 0.5


def multi_sin_2d(x: float, z: float, t: float) -> float:
    a = sin_2d(x * 3, z, t)
    b = sin_2d(x, z * 4, t)
    c = 2 * sin_2d(x, z, t)
    d = sin_2d(x * 1.5, z * 2.5, t)
    return (a + b + c + d) * 0.25


def cos(x: float, z: float, t: float) -> float:
    return math.cos(x)


def tan(x: float, z: float, t: float) -> float:
    return math.tan(x)


def ripple(x: float, z: float, t: float) -> float:
    # Distance term keeps the literal ``z * +z`` arithmetic.
    d = math.sqrt(x * x + z * +z)
    y = math.sin(6 * d - t)
    y /= 1.0 + 2.0 * d
    return y


HEIGHT_FUNCTIONS: dict[HeightFunction, Callable[[float, float, float], float]] = {
    HeightFunction.SQUARE: square,
    HeightFunction.SIN: sin,
    HeightFunction.MULTI_SIN: multi_sin,
    HeightFunction.SIN_2D: sin_2d,
    HeightFunction.MULTI_SIN_2D: multi_sin_2d,
    HeightFunction.COS: cos,
    HeightFunction.TAN: tan,
    HeightFunction.RIPPLE: ripple,
}
