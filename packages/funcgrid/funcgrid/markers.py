"""Axis tick-mark layout for drawing reference axes behind a grid."""
from __future__ import annotations

from dataclasses import dataclass

from funcgrid.types import Vec3

MAJOR_EVERY = 10
MAJOR_LENGTH = 0.2
MINOR_LENGTH = 0.1
THICKNESS = 0.01


@dataclass(frozen=True, slots=True)
class AxisMarker:
    """One tick mark.

    Attributes:
        axis: "x" for marks laid along the X axis, "y" for the Y axis.
        position: Centre of the mark.
        scale: Size of the mark along x, y and z.
        major: Every tenth mark is major and drawn longer.
    """

    axis: str
    position: Vec3
    scale: Vec3
    major: bool


def axis_markers(count: int = 100, spacing: float = 0.1) -> list[AxisMarker]:
    """Lay out ``count`` marks along X followed by ``count`` along Y."""
    if count <= 0:
        raise ValueError(f"count must be > 0, got {count}")
    markers: list[AxisMarker] = []
    for axis in ("x", "y"):
        for i in range(count):
            major = i % MAJOR_EVERY == 0
            length = MAJOR_LENGTH if major else MINOR_LENGTH
            offset = (i - count // 2) * spacing
            if axis == "x":
                position = (offset, 0.0, 0.0)
                scale = (THICKNESS, length, 1.0)
            else:
                position = (0.0, offset, 0.0)
                scale = (length, THICKNESS, 1.0)
            markers.append(AxisMarker(axis, position, scale, major))
    return markers
