"""Shared fixtures for the ruler test suite."""

from __future__ import annotations

import pytest

from ruler import Ruler

# Reference latitude shared by most scenarios
CALIBRATION_LATITUDE = 32.8351


@pytest.fixture(scope="session")
def ruler() -> Ruler:
    return Ruler(CALIBRATION_LATITUDE)


@pytest.fixture(scope="session")
def miles_ruler() -> Ruler:
    return Ruler(CALIBRATION_LATITUDE, "miles")


@pytest.fixture
def zigzag():
    """A few hundred meters of street-scale polyline near the reference latitude."""
    return [
        (30.5000, 32.8300),
        (30.5030, 32.8320),
        (30.5045, 32.8310),
        (30.5080, 32.8345),
        (30.5110, 32.8351),
        (30.5125, 32.8390),
    ]


@pytest.fixture
def lines(zigzag):
    return [
        zigzag,
        [(30.49, 32.81), (30.50, 32.82)],
        [(30.52, 32.85), (30.521, 32.852), (30.519, 32.855), (30.523, 32.857)],
        [(30.60, 32.80), (30.61, 32.80), (30.61, 32.81), (30.60, 32.81)],
    ]
