"""
Type Definitions for Planar Geodesy.

This module defines the geometric value types exchanged between the
ruler and its callers. Geometry stays in plain tuples and sequences so
that callers can pass GeoJSON-style coordinate lists without wrapping.

Conventions
-----------
- A point is ``(longitude, latitude)`` in DEGREES.
- Longitudes are not normalised; a line may step from 179.9 to -179.9.
- Distances are in the unit the ruler was calibrated with.
"""

from dataclasses import dataclass
from typing import NamedTuple, Sequence, Tuple


Point = Tuple[float, float]  # (lon, lat) degrees
Line = Sequence[Sequence[float]]
Ring = Sequence[Sequence[float]]  # implicitly closed
Polygon = Sequence[Ring]  # outer ring first, then holes


class BoundingBox(NamedTuple):
    """Axis-aligned box in degrees.

    A box with ``west > east`` crosses the antimeridian.
    """
    west: float
    south: float
    east: float
    north: float

    @property
    def crosses_antimeridian(self) -> bool:
        return self.west > self.east


@dataclass(frozen=True)
class PointOnLineResult:
    """Nearest location on a line to a query point.

    Attributes
    ----------
    point : Point
        The nearest point on the line.
    index : int
        Index of the segment ``line[index] -> line[index + 1]`` holding it.
    t : float
        Fractional position along that segment, in [0, 1].
    """
    point: Point
    index: int
    t: float


def as_point(p: Sequence[float]) -> Point:
    """Convert any ``(lon, lat)`` pair to a tuple of floats."""
    return float(p[0]), float(p[1])
