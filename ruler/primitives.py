"""
Point-pair primitives in the calibrated plane.

Every function takes a calibrated ruler (anything exposing ``kx``, ``ky``
and ``unit``) followed by its geometric arguments. Coordinates are
``(lon, lat)`` degrees; longitude deltas are wrapped into [-180, 180] so
that a pair straddling the antimeridian is measured the short way round,
while the input coordinates themselves are never normalised.
"""

from typing import Sequence, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

import pint

from common.constants import GeodeticConstants
from common.types import Point
from common.units import to_magnitude

RAD = GeodeticConstants.DEGREES_TO_RADIANS.value

Distance = Union[float, pint.Quantity]


def wrap_longitude(deg: float) -> float:
    """Bring a longitude delta into [-180, 180] by whole turns.

    Values already in range are returned unchanged. Positive deltas that
    land on the seam map to 180, negative ones to -180.
    """
    if -180 <= deg <= 180:
        return deg
    wrapped = (deg + 180) % 360 - 180
    if wrapped == -180 and deg > 0:
        return 180.0
    return wrapped


def equals(a: Sequence[float], b: Sequence[float]) -> bool:
    return a[0] == b[0] and a[1] == b[1]


def interpolate(a: Sequence[float], b: Sequence[float], t: float) -> Point:
    """Point at fraction ``t`` of the way from ``a`` to ``b``."""
    dx = wrap_longitude(b[0] - a[0])
    dy = b[1] - a[1]
    return float(a[0] + dx * t), float(a[1] + dy * t)


def distance(ruler, a: Sequence[float], b: Sequence[float]) -> float:
    """Planar distance between two points in ruler units."""
    dx = wrap_longitude(a[0] - b[0]) * ruler.kx
    dy = (a[1] - b[1]) * ruler.ky
    return float(np.sqrt(dx * dx + dy * dy))


def bearing(ruler, a: Sequence[float], b: Sequence[float]) -> float:
    """Bearing from ``a`` to ``b``.

    Returns
    -------
    float
        Degrees clockwise from north, in [0, 360).
    """
    dx = wrap_longitude(b[0] - a[0]) * ruler.kx
    dy = (b[1] - a[1]) * ruler.ky
    result = float(np.arctan2(dx, dy) / RAD) % 360.0
    # tiny negative angles round up to a full turn
    return 0.0 if result >= 360.0 else result


def offset(ruler, p: Sequence[float], dx: Distance, dy: Distance) -> Point:
    """Move ``p`` by ``dx`` east and ``dy`` north (ruler units)."""
    dx = to_magnitude(dx, ruler.unit)
    dy = to_magnitude(dy, ruler.unit)
    return float(p[0] + dx / ruler.kx), float(p[1] + dy / ruler.ky)


def destination(ruler, p: Sequence[float], dist: Distance, bearing_deg: float) -> Point:
    """Point reached by travelling ``dist`` from ``p`` along a bearing.

    Parameters
    ----------
    ruler : Ruler
        Calibrated ruler.
    p : Point
        Origin ``(lon, lat)``.
    dist : float or pint.Quantity
        Distance in ruler units, or a length quantity.
    bearing_deg : float
        Degrees clockwise from north.

    Returns
    -------
    Point
        Destination ``(lon, lat)``.
    """
    dist = to_magnitude(dist, ruler.unit)
    a = bearing_deg * RAD
    return offset(ruler, p, float(np.sin(a)) * dist, float(np.cos(a)) * dist)


def distance_batch(ruler, a: ArrayLike, b: ArrayLike) -> NDArray[np.float64]:
    """Vectorized distances between arrays of ``(lon, lat)`` points.

    Parameters
    ----------
    a, b : array_like
        Arrays of shape (N, 2), or broadcastable to each other
        (e.g. one point against many).

    Returns
    -------
    ndarray
        Distances of shape (N,) in ruler units.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    dlon = a[..., 0] - b[..., 0]
    # Same wrapping as wrap_longitude, applied elementwise
    wrapped = np.mod(dlon + 180, 360) - 180
    wrapped = np.where((wrapped == -180) & (dlon > 0), 180.0, wrapped)
    dlon = np.where((dlon < -180) | (dlon > 180), wrapped, dlon)
    dx = dlon * ruler.kx
    dy = (a[..., 1] - b[..., 1]) * ruler.ky
    return np.sqrt(dx * dx + dy * dy)
