"""
Point-to-segment projection.

Projection happens in scaled coordinates, so "perpendicular" means
perpendicular in the calibrated plane rather than in raw degrees.
"""

from typing import Sequence, Tuple
import numpy as np

from ruler.primitives import wrap_longitude


def project_on_segment(
    ruler,
    p: Sequence[float],
    a: Sequence[float],
    b: Sequence[float]
) -> Tuple[float, float, float]:
    """Foot of the perpendicular from ``p`` onto segment ``[a, b]``.

    Parameters
    ----------
    ruler : Ruler
        Calibrated ruler.
    p : Point
        Query point.
    a, b : Point
        Segment endpoints. A degenerate segment (a == b) projects
        everything onto ``a``.

    Returns
    -------
    Tuple[float, float, float]
        ``(lon, lat, t)``. The point always lies on the segment, and
        ``t`` is the fractional position clamped to [0, 1].
    """
    x, y = a[0], a[1]
    dx = wrap_longitude(b[0] - x) * ruler.kx
    dy = (b[1] - y) * ruler.ky
    t = 0.0

    if dx != 0 or dy != 0:
        t = (wrap_longitude(p[0] - x) * ruler.kx * dx + (p[1] - y) * ruler.ky * dy) / (dx * dx + dy * dy)
        if t > 1:
            x, y = b[0], b[1]
            t = 1.0
        elif t > 0:
            x += (dx / ruler.kx) * t
            y += (dy / ruler.ky) * t
        else:
            t = 0.0

    return float(x), float(y), float(t)


def squared_distance(ruler, p: Sequence[float], x: float, y: float) -> float:
    dx = wrap_longitude(p[0] - x) * ruler.kx
    dy = (p[1] - y) * ruler.ky
    return dx * dx + dy * dy


def point_to_segment_distance(
    ruler,
    p: Sequence[float],
    a: Sequence[float],
    b: Sequence[float]
) -> float:
    """Shortest planar distance from ``p`` to segment ``[a, b]``."""
    x, y, _ = project_on_segment(ruler, p, a, b)
    return float(np.sqrt(squared_distance(ruler, p, x, y)))
