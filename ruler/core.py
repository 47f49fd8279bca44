"""
Ruler: fast geodesy near a fixed latitude.

A `Ruler` is calibrated once at a reference latitude and then answers
distance, bearing, interpolation, area and bounding-box queries with
flat-plane arithmetic. It never changes after construction, so a single
instance can be shared freely between threads.

Examples
--------
>>> ruler = Ruler(32.8351)
>>> round(ruler.distance((30.5, 32.8351), (30.51, 32.8451)), 6)
1.451382
>>> miles = Ruler.from_tile(11041, 15, unit="miles")
"""

from typing import Any, List, Mapping, Optional, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from common.types import BoundingBox, Line, Point, PointOnLineResult, Polygon
from common.units import DEFAULT_UNIT, UNITS
from ruler import area as _area
from ruler import lines as _lines
from ruler import primitives as _primitives
from ruler import regions as _regions
from ruler import segments as _segments
from ruler.calibration import (
    Calibration,
    RulerConfig,
    calibrate,
    calibrate_from_config,
)
from ruler.ellipsoid import EllipsoidParameters, WGS84Ellipsoid
from ruler.primitives import Distance
from ruler.tiles import tile_latitude


class Ruler:
    """Calibrated tangent-plane ruler.

    Parameters
    ----------
    latitude : float
        Reference latitude in degrees.
    unit : str
        Distance unit, one of `Ruler.units` (default: kilometers).
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Raises
    ------
    ConfigurationError
        If the latitude is missing, non-numeric, non-finite or beyond ±90°,
        or the unit is unknown.
    """

    __slots__ = ("_calibration",)

    units: Mapping[str, float] = UNITS

    def __init__(
        self,
        latitude: Optional[float] = None,
        unit: str = DEFAULT_UNIT,
        ellipsoid: EllipsoidParameters = WGS84Ellipsoid
    ):
        self._calibration = calibrate(latitude, unit, ellipsoid)

    @classmethod
    def _from_calibration(cls, calibration: Calibration) -> 'Ruler':
        ruler = cls.__new__(cls)
        ruler._calibration = calibration
        return ruler

    @classmethod
    def from_tile(
        cls,
        row: int,
        zoom: int,
        unit: str = DEFAULT_UNIT,
        ellipsoid: EllipsoidParameters = WGS84Ellipsoid
    ) -> 'Ruler':
        """Ruler calibrated at the centre latitude of a Web Mercator tile row."""
        return cls(tile_latitude(row, zoom), unit, ellipsoid)

    @classmethod
    def from_config(cls, config: Any) -> 'Ruler':
        """Ruler from a `RulerConfig` or a plain settings mapping."""
        if not isinstance(config, RulerConfig):
            config = RulerConfig.from_mapping(config)
        return cls._from_calibration(calibrate_from_config(config))

    # ------------------------------------------------------------------
    # Calibration state
    # ------------------------------------------------------------------

    @property
    def calibration(self) -> Calibration:
        return self._calibration

    @property
    def kx(self) -> float:
        """Distance units per degree of longitude."""
        return self._calibration.kx

    @property
    def ky(self) -> float:
        """Distance units per degree of latitude."""
        return self._calibration.ky

    @property
    def unit(self) -> str:
        return self._calibration.unit

    @property
    def latitude(self) -> float:
        return self._calibration.latitude

    @property
    def ellipsoid(self) -> EllipsoidParameters:
        return self._calibration.ellipsoid

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_calibration"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ruler):
            return NotImplemented
        return self._calibration == other._calibration

    def __hash__(self) -> int:
        return hash(self._calibration)

    def __repr__(self) -> str:
        return (
            f"Ruler(latitude={self.latitude!r}, unit={self.unit!r}, "
            f"ellipsoid={self.ellipsoid.name!r})"
        )

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def distance(self, a: Sequence[float], b: Sequence[float]) -> float:
        """Distance between two points."""
        return _primitives.distance(self, a, b)

    def bearing(self, a: Sequence[float], b: Sequence[float]) -> float:
        """Bearing from ``a`` to ``b`` in degrees, [0, 360)."""
        return _primitives.bearing(self, a, b)

    def destination(self, p: Sequence[float], dist: Distance, bearing: float) -> Point:
        """Point ``dist`` away from ``p`` along ``bearing`` degrees."""
        return _primitives.destination(self, p, dist, bearing)

    def offset(self, p: Sequence[float], dx: Distance, dy: Distance) -> Point:
        """Point ``dx`` east and ``dy`` north of ``p``."""
        return _primitives.offset(self, p, dx, dy)

    def distance_batch(self, a: ArrayLike, b: ArrayLike) -> NDArray[np.float64]:
        """Vectorized `distance` over (N, 2) coordinate arrays."""
        return _primitives.distance_batch(self, a, b)

    # ------------------------------------------------------------------
    # Lines and polygons
    # ------------------------------------------------------------------

    def line_distance(self, line: Line) -> float:
        """Total length of a polyline."""
        return _lines.line_distance(self, line)

    def area(self, polygon: Polygon) -> float:
        """Area of a polygon given as rings (outer first, then holes)."""
        return _area.area(self, polygon)

    def along(self, line: Line, dist: Distance) -> Point:
        """Point at distance ``dist`` along a line."""
        return _lines.along(self, line, dist)

    def point_on_line(self, line: Line, p: Sequence[float]) -> PointOnLineResult:
        """Nearest point on a line, with its segment index and position."""
        return _lines.point_on_line(self, line, p)

    def point_to_segment_distance(
        self,
        p: Sequence[float],
        a: Sequence[float],
        b: Sequence[float]
    ) -> float:
        """Shortest distance from ``p`` to segment ``[a, b]``."""
        return _segments.point_to_segment_distance(self, p, a, b)

    def line_slice(
        self,
        start: Sequence[float],
        stop: Sequence[float],
        line: Line
    ) -> List[Point]:
        """Part of a line between the points nearest ``start`` and ``stop``."""
        return _lines.line_slice(self, start, stop, line)

    def line_slice_along(self, start: Distance, stop: Distance, line: Line) -> List[Point]:
        """Part of a line between two distances along it."""
        return _lines.line_slice_along(self, start, stop, line)

    # ------------------------------------------------------------------
    # Bounding boxes
    # ------------------------------------------------------------------

    def buffer_point(self, p: Sequence[float], dist: Distance) -> BoundingBox:
        """Box reaching ``dist`` from ``p`` in each direction."""
        return _regions.buffer_point(self, p, dist)

    def buffer_bbox(self, bbox: Sequence[float], dist: Distance) -> BoundingBox:
        """Box grown by ``dist`` on every side."""
        return _regions.buffer_bbox(self, bbox, dist)

    @staticmethod
    def inside_bbox(p: Sequence[float], bbox: Sequence[float]) -> bool:
        """Whether ``p`` lies inside ``bbox``; antimeridian-aware."""
        return _regions.inside_bbox(p, bbox)

