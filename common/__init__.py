"""
Common utilities and infrastructure for the tangent-plane ruler.

This package provides foundational components used across the engine:
- Geodetic constants with provenance
- Unit table derived from the pint registry
- Geometric value types
- Error types and logging infrastructure
"""

from common.constants import GeodeticConstants
from common.errors import ConfigurationError
from common.units import UNITS, Q_, unit_factor, to_magnitude
from common.types import (
    Point,
    Line,
    BoundingBox,
    PointOnLineResult,
)
from common.logging_config import get_logger

__all__ = [
    "GeodeticConstants",
    "ConfigurationError",
    "UNITS",
    "Q_",
    "unit_factor",
    "to_magnitude",
    "Point",
    "Line",
    "BoundingBox",
    "PointOnLineResult",
    "get_logger",
]
