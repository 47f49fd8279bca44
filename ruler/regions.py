"""
Bounding-box construction and membership.

Buffers are built from two diagonal `destination` calls at √2 times the
radius, which puts the box corners exactly ``dist`` east/west and
north/south of the input. This is a square around the circle of radius
``dist``, not a circle.
"""

from typing import Sequence
import numpy as np

from common.types import BoundingBox
from common.units import to_magnitude
from ruler.primitives import Distance, destination

SOUTH_WEST = -135.0
NORTH_EAST = 45.0


def buffer_point(ruler, p: Sequence[float], dist: Distance) -> BoundingBox:
    """Box extending ``dist`` in each direction from ``p``."""
    return buffer_bbox(ruler, (p[0], p[1], p[0], p[1]), dist)


def buffer_bbox(ruler, bbox: Sequence[float], dist: Distance) -> BoundingBox:
    """Grow a ``(west, south, east, north)`` box by ``dist`` on every side.

    The south-west corner moves along bearing -135° and the north-east
    corner along 45°, each by ``dist * √2``.
    """
    diagonal = to_magnitude(dist, ruler.unit) * float(np.sqrt(2))
    west, south = destination(ruler, (bbox[0], bbox[1]), diagonal, SOUTH_WEST)
    east, north = destination(ruler, (bbox[2], bbox[3]), diagonal, NORTH_EAST)
    return BoundingBox(west, south, east, north)


def inside_bbox(p: Sequence[float], bbox: Sequence[float]) -> bool:
    """Whether ``p`` lies in a ``(west, south, east, north)`` box, edges included.

    A box with ``west > east`` crosses the antimeridian and covers
    longitudes from ``west`` to 180 and from -180 to ``east``.
    """
    west, south, east, north = bbox
    lon, lat = p[0], p[1]

    if not south <= lat <= north:
        return False
    if west <= east:
        return west <= lon <= east
    return lon >= west or lon <= east
