"""
Reference Ellipsoids and Local Radii of Curvature.

The ruler replaces ellipsoidal trigonometry with two constant scale
factors. Those factors are the lengths of one degree of longitude and
one degree of latitude at the calibration latitude, which follow from
the two principal radii of curvature of the reference ellipsoid:

- Meridian radius M: curvature for north-south motion.
- Prime-vertical radius N: curvature for east-west motion, so that a
  parallel at latitude phi has radius N cos(phi).

References
----------
- NIMA TR8350.2: WGS84 parameters
- Torge, W. (2001). Geodesy (3rd ed.). de Gruyter.
"""

from dataclasses import dataclass
from typing import Dict
import numpy as np

from common.constants import GeodeticConstants
from common.errors import ConfigurationError


@dataclass(frozen=True)
class EllipsoidParameters:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    e2 : float
        First eccentricity squared: e² = (a² - b²) / a²
    """
    a: float
    f: float
    name: str

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)


WGS84Ellipsoid = EllipsoidParameters(
    a=GeodeticConstants.WGS84_SEMI_MAJOR_AXIS.value,
    f=GeodeticConstants.WGS84_FLATTENING.value,
    name="WGS84"
)

GRS80Ellipsoid = EllipsoidParameters(
    a=GeodeticConstants.GRS80_SEMI_MAJOR_AXIS.value,
    f=GeodeticConstants.GRS80_FLATTENING.value,
    name="GRS80"
)

ELLIPSOIDS: Dict[str, EllipsoidParameters] = {
    WGS84Ellipsoid.name: WGS84Ellipsoid,
    GRS80Ellipsoid.name: GRS80Ellipsoid,
}


def get_ellipsoid(name: str) -> EllipsoidParameters:
    """Look up a reference ellipsoid by name."""
    try:
        return ELLIPSOIDS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown ellipsoid {name!r}. Use one of: {', '.join(ELLIPSOIDS)}"
        ) from None


def radius_of_curvature_meridian(
    latitude_rad: float,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> float:
    """Compute the radius of curvature in the meridian plane.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    float
        Radius of curvature M in meters.

    Notes
    -----
    M = a(1 - e²) / (1 - e² sin²φ)^(3/2)

    At the equator (φ=0): M ≈ 6,335,439 m
    At the poles (φ=±90°): M ≈ 6,399,594 m
    """
    cos_lat = np.cos(latitude_rad)
    w2 = 1.0 / (1.0 - ellipsoid.e2 * (1.0 - cos_lat * cos_lat))
    return float(ellipsoid.a * np.sqrt(w2) * w2 * (1.0 - ellipsoid.e2))


def radius_of_curvature_prime_vertical(
    latitude_rad: float,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> float:
    """Compute the radius of curvature in the prime vertical.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    float
        Radius of curvature N in meters.

    Notes
    -----
    N = a / (1 - e² sin²φ)^(1/2)

    At the equator (φ=0): N = a ≈ 6,378,137 m
    At the poles (φ=±90°): N ≈ 6,399,594 m
    """
    cos_lat = np.cos(latitude_rad)
    w2 = 1.0 / (1.0 - ellipsoid.e2 * (1.0 - cos_lat * cos_lat))
    return float(ellipsoid.a * np.sqrt(w2))
