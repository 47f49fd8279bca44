"""Error types raised by the ruler."""


class ConfigurationError(ValueError):
    """Raised when a ruler cannot be calibrated from the given settings.

    Covers a missing, non-numeric, non-finite or out-of-range latitude,
    an unknown unit or ellipsoid name, and a tile row/zoom pair that does
    not map to a finite latitude. No ruler instance is produced.
    """
