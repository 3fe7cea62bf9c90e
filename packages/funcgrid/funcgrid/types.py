"""Shared type aliases, errors and the sample point record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

PointId = int
Vec3 = tuple[float, float, float]
Coordinate = tuple[float, ...]
Output = Union[float, Vec3]
Update = tuple[PointId, Output]


class GridKind(Enum):
    """The three grid variants: what goes into an evaluator and what comes out."""

    CURVE = "curve"
    HEIGHT = "height"
    SURFACE = "surface"


@dataclass(slots=True)
class SamplePoint:
    identity: PointId
    coordinate: Coordinate
    output: Output = 0.0
    position: Vec3 = (0.0, 0.0, 0.0)


class FuncGridError(Exception):
    """Base class for every error raised by funcgrid."""


class ConfigurationError(FuncGridError, ValueError):
    """Raised when a resolution, range or cycle range is out of bounds."""


class UnknownFunctionTag(FuncGridError, KeyError):
    """Raised when a function tag is not part of the variant's catalog."""

    def __init__(self, tag: Any, message: str) -> None:
        self.tag = tag
        super().__init__(message)


class IncompleteCatalogError(FuncGridError):
    """Raised when a registry is built without an evaluator for every tag."""
