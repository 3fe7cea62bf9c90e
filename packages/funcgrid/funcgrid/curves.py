"""Curve functions: one scalar input, one scalar output.

Time enters as a phase shift of the input, so every evaluator computes
``g(x + t)``.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Callable


class CurveFunction(Enum):
    SQUARE = "square"
    SIN = "sin"
    MULTI_SIN = "multi_sin"
    COS = "cos"
    TAN = "tan"


def square(x: float, t: float = 0.0) -> float:
    x += t
    return x * x


def sin(x: float, t: float = 0.0) -> float:
    return math.sin(x + t)


def multi_sin(x: float, t: float = 0.0) -> float:
    x += t
    y = math.sin(x)
    y += math.sin(2 * x) / 2
    return y


def cos(x: float, t: float = 0.0) -> float:
    return math.cos(x + t)


def tan(x: float, t: float = 0.0) -> float:
    # Unbounded near the asymptotes; passed through as-is.
    return math.tan(x + t)


CURVE_FUNCTIONS: dict[CurveFunction, Callable[[float, float], float]] = {
    CurveFunction.SQUARE: square,
    CurveFunction.SIN: sin,
    CurveFunction.MULTI_SIN: multi_sin,
    CurveFunction.COS: cos,
    CurveFunction.TAN: tan,
}
