"""
Geodetic Constants for Tangent-Plane Distance Approximation.

This module provides the reference-ellipsoid constants the ruler is
calibrated from, with their uncertainty bounds and sources. Lengths are
in SI units (meters); angles are in degrees unless stated otherwise.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- GRS80 parameters: Moritz, H. (2000). Geodetic Reference System 1980.
- Web Mercator: EPSG:3857 (Popular Visualisation Pseudo-Mercator)
"""

from dataclasses import dataclass
from typing import Final
import numpy as np


@dataclass(frozen=True)
class Constant:
    """A geodetic constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of geodetic constants used by the calibration.

    All constants are class attributes with full metadata including
    uncertainty bounds and authoritative sources.
    """

    # =========================================================================
    # Reference Ellipsoids
    # =========================================================================

    WGS84_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    WGS84_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Flattening of WGS84 ellipsoid: f = (a - b) / a"
    )

    GRS80_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="GRS80, Moritz (2000)",
        description="Semi-major axis (equatorial radius) of GRS80 ellipsoid"
    )

    GRS80_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257222101,
        uncertainty=1e-15,
        unit="dimensionless",
        source="GRS80, Moritz (2000) (derived from J2)",
        description="Flattening of GRS80 ellipsoid: f = (a - b) / a"
    )

    # =========================================================================
    # Angles and Tile Pyramid
    # =========================================================================

    DEGREES_TO_RADIANS: Final[Constant] = Constant(
        value=np.pi / 180.0,
        uncertainty=0.0,  # Defined exactly
        unit="rad/deg",
        source="Definition",
        description="Radians per degree of arc"
    )

    WEB_MERCATOR_MAX_LATITUDE: Final[Constant] = Constant(
        value=85.0511287798066,
        uncertainty=0.0,  # Defined exactly: atan(sinh(pi))
        unit="deg",
        source="EPSG:3857",
        description="Latitude of the top edge of zoom-0 Web Mercator tile"
    )

    POLAR_WARNING_MARGIN: Final[Constant] = Constant(
        value=5.0,
        uncertainty=0.0,
        unit="deg",
        source="Tangent-plane error budget",
        description="Distance from a pole below which calibration is flagged"
    )
