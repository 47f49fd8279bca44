"""
Tangent-plane ruler.

All distance, bearing, interpolation, area and bounding-box calculations
go through a `Ruler` calibrated at one reference latitude. Results are
flat-plane approximations, valid for geometry that stays within a few
hundred kilometers of that latitude.

This module provides:
- WGS84/GRS80 radii of curvature
- Calibration from a latitude, a tile row, or a settings mapping
- The `Ruler` facade and the functional operations behind it
"""

from ruler.ellipsoid import (
    EllipsoidParameters,
    WGS84Ellipsoid,
    GRS80Ellipsoid,
    radius_of_curvature_meridian,
    radius_of_curvature_prime_vertical,
)

from ruler.calibration import (
    Calibration,
    RulerConfig,
    calibrate,
)

from ruler.tiles import tile_latitude

from ruler.primitives import wrap_longitude

from ruler.core import Ruler

__all__ = [
    # Ellipsoids
    "EllipsoidParameters",
    "WGS84Ellipsoid",
    "GRS80Ellipsoid",
    "radius_of_curvature_meridian",
    "radius_of_curvature_prime_vertical",
    # Calibration
    "Calibration",
    "RulerConfig",
    "calibrate",
    "tile_latitude",
    "wrap_longitude",
    # Facade
    "Ruler",
]
