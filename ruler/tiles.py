"""
Tile-pyramid helpers.

Vector-tile pipelines usually know the tile they are working on rather
than a latitude, so a ruler can be calibrated at the centre latitude of a
Web Mercator tile row instead.
"""

from numbers import Integral
import numpy as np

from common.constants import GeodeticConstants
from common.errors import ConfigurationError
from common.logging_config import get_logger

logger = get_logger(__name__)


def tile_latitude(row: int, zoom: int) -> float:
    """Latitude in degrees of the centre of tile row ``row`` at ``zoom``.

    Inverts the Web Mercator y mapping at ``row + 0.5``:
    lat = atan(sinh(π(1 - 2(row + 0.5) / 2^zoom))).

    Raises
    ------
    ConfigurationError
        If ``row`` or ``zoom`` is not an integer, ``zoom`` is negative,
        or the pair does not yield a finite latitude.
    """
    if isinstance(zoom, bool) or not isinstance(zoom, Integral) or zoom < 0:
        raise ConfigurationError(f"Zoom must be a non-negative integer, got {zoom!r}")
    if isinstance(row, bool) or not isinstance(row, Integral):
        raise ConfigurationError(f"Tile row must be an integer, got {row!r}")

    try:
        n = np.pi * (1 - 2 * (int(row) + 0.5) / 2.0 ** int(zoom))
    except OverflowError as e:
        raise ConfigurationError(
            f"Tile row {row} at zoom {zoom} is out of floating-point range"
        ) from e

    with np.errstate(over='ignore', invalid='ignore'):
        latitude = float(np.degrees(np.arctan(np.sinh(n))))

    if not np.isfinite(latitude):
        raise ConfigurationError(
            f"Tile row {row} at zoom {zoom} does not map to a finite latitude"
        )

    if abs(latitude) > GeodeticConstants.WEB_MERCATOR_MAX_LATITUDE.value:
        logger.warning(f"Tile row {row} lies outside the tile pyramid at zoom {zoom}")

    logger.debug(f"Tile row {row} at zoom {zoom} centred on latitude {latitude:.6f}")
    return latitude
