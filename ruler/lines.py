"""
Polyline Operations.

Length, interpolation, nearest-point search and sub-line extraction on
polylines given as sequences of ``(lon, lat)`` points. All of them walk
the line segment by segment using the planar primitives, so each call is
O(n) in the number of vertices.

Degenerate Input
----------------
- Consecutive duplicate vertices form zero-length segments. They add
  nothing to lengths and are never chosen as the interpolation segment.
- A single-point line has zero length; searching or slicing it returns
  that point.
- An empty line has no defined answer and raises ValueError.
"""

from typing import List, Sequence
import numpy as np

from common.types import Line, Point, PointOnLineResult, as_point
from common.units import to_magnitude
from ruler.primitives import Distance, distance, equals, interpolate
from ruler.segments import project_on_segment, squared_distance


def _require_points(line: Line) -> None:
    if len(line) == 0:
        raise ValueError("Line must contain at least one point")


def _fraction(offset: float, length: float) -> float:
    return offset / length if length > 0 else 0.0


def line_distance(ruler, line: Line) -> float:
    """Total length of a polyline; zero for fewer than two points."""
    total = 0.0
    for i in range(len(line) - 1):
        total += distance(ruler, line[i], line[i + 1])
    return total


def along(ruler, line: Line, dist: Distance) -> Point:
    """Point at a given distance along a line.

    Parameters
    ----------
    ruler : Ruler
        Calibrated ruler.
    line : Line
        Polyline with at least one point.
    dist : float or pint.Quantity
        Distance from the first point, in ruler units.

    Returns
    -------
    Point
        The first point if ``dist <= 0``, the last point if ``dist`` reaches
        the line's length, otherwise the interpolated point.
    """
    _require_points(line)
    dist = to_magnitude(dist, ruler.unit)
    if dist <= 0:
        return as_point(line[0])

    walked = 0.0
    for i in range(len(line) - 1):
        p0, p1 = line[i], line[i + 1]
        d = distance(ruler, p0, p1)
        walked += d
        if walked > dist:
            return interpolate(p0, p1, (dist - (walked - d)) / d)

    return as_point(line[-1])


def point_on_line(ruler, line: Line, p: Sequence[float]) -> PointOnLineResult:
    """Nearest point on a line to ``p``.

    Scans every segment and keeps the first one achieving the minimum
    distance. The returned ``t`` is local to that segment and clamped to
    [0, 1]; past either end of the line the result snaps to the endpoint.

    Returns
    -------
    PointOnLineResult
        ``point``, segment ``index`` in [0, len(line) - 2] and ``t``.
    """
    _require_points(line)
    best_sq = np.inf
    best_x, best_y = line[0][0], line[0][1]
    best_index = 0
    best_t = 0.0

    for i in range(len(line) - 1):
        x, y, t = project_on_segment(ruler, p, line[i], line[i + 1])
        sq = squared_distance(ruler, p, x, y)
        if sq < best_sq:
            best_sq = sq
            best_x, best_y = x, y
            best_index = i
            best_t = t

    return PointOnLineResult(point=as_point((best_x, best_y)), index=best_index, t=best_t)


def line_slice(ruler, start: Sequence[float], stop: Sequence[float], line: Line) -> List[Point]:
    """Part of a line between the projections of two points.

    ``start`` and ``stop`` are snapped onto the line with `point_on_line`.
    The result runs in line order from whichever projection comes first,
    so swapping ``start`` and ``stop`` yields the same sub-path.

    Returns
    -------
    List[Point]
        The first projection, the original vertices strictly between the
        two projections, then the second projection.
    """
    p1 = point_on_line(ruler, line, start)
    p2 = point_on_line(ruler, line, stop)

    if p1.index > p2.index or (p1.index == p2.index and p1.t > p2.t):
        p1, p2 = p2, p1

    result = [p1.point]
    left = p1.index + 1
    right = p2.index

    if left <= right and not equals(line[left], result[0]):
        result.append(as_point(line[left]))
    for i in range(left + 1, right + 1):
        result.append(as_point(line[i]))
    if not equals(line[right], p2.point):
        result.append(p2.point)

    return result


def line_slice_along(ruler, start: Distance, stop: Distance, line: Line) -> List[Point]:
    """Part of a line between two distances measured along it.

    Works on the line's own length parameterisation rather than on
    nearest-point projection, so it stays unambiguous on lines that
    revisit the same place.

    Parameters
    ----------
    start, stop : float or pint.Quantity
        Distances from the first point, in ruler units. They are put in
        increasing order and clamped at zero.

    Returns
    -------
    List[Point]
        ``along(line, start)``, the vertices in between, then
        ``along(line, stop)``. When ``start`` is at or beyond the end of
        the line, only the last point is returned.
    """
    _require_points(line)
    start = to_magnitude(start, ruler.unit)
    stop = to_magnitude(stop, ruler.unit)
    if start > stop:
        start, stop = stop, start
    start = max(start, 0.0)
    stop = max(stop, 0.0)

    walked = 0.0
    result: List[Point] = []
    for i in range(len(line) - 1):
        p0, p1 = line[i], line[i + 1]
        d = distance(ruler, p0, p1)
        walked += d

        if walked > start and not result:
            result.append(interpolate(p0, p1, _fraction(start - (walked - d), d)))

        if walked >= stop:
            result.append(interpolate(p0, p1, _fraction(stop - (walked - d), d)))
            return result

        if walked > start:
            result.append(as_point(p1))

    if not result:
        result.append(as_point(line[-1]))
    return result
