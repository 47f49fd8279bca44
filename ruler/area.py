"""
Planar polygon area.

The shoelace sum is accumulated in raw degrees (with wrapped longitude
deltas) and converted to squared ruler units once at the end with
``kx * ky``.
"""

from common.types import Polygon
from ruler.primitives import wrap_longitude


def ring_shoelace(ring) -> float:
    """Twice the signed area of an implicitly closed ring, in square degrees.

    Rings with fewer than three points enclose nothing and give zero.
    """
    n = len(ring)
    if n < 3:
        return 0.0
    total = 0.0
    k = n - 1
    for j in range(n):
        total += wrap_longitude(ring[j][0] - ring[k][0]) * (ring[j][1] + ring[k][1])
        k = j
    return total


def area(ruler, polygon: Polygon) -> float:
    """Area of a polygon in squared ruler units.

    Parameters
    ----------
    ruler : Ruler
        Calibrated ruler.
    polygon : Polygon
        Sequence of rings: the outer boundary first, then holes. A ring
        need not repeat its first point at the end.

    Returns
    -------
    float
        Outer-ring area minus the hole areas. Ring orientation does not
        matter; holes always subtract.
    """
    total = 0.0
    for i, ring in enumerate(polygon):
        ring_area = abs(ring_shoelace(ring))
        total += -ring_area if i else ring_area
    return total / 2 * ruler.kx * ruler.ky
