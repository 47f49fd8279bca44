"""
Unit Table for Calibrated Distances.

This module derives the fixed table of distance units a ruler can be
calibrated in, using the `pint` library as the single source of truth
for conversion lengths. The table is built once at import time and is
exposed read-only.

Each factor converts a distance in kilometers into the named unit, so
that a ruler calibrated in unit ``u`` multiplies its kilometer scale
factors by ``UNITS[u]``.

Example Usage
-------------
>>> from common.units import UNITS, Q_, to_magnitude
>>> UNITS["meters"]
1000.0
>>> to_magnitude(Q_(500, "m"), "kilometers")
0.5
"""

from types import MappingProxyType
from typing import Mapping, Union

import pint
from pint import UnitRegistry as PintUnitRegistry

from common.errors import ConfigurationError

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

# Ruler unit name -> pint unit expression
PINT_UNIT_NAMES: Mapping[str, str] = MappingProxyType({
    "kilometers": "kilometer",
    "miles": "mile",
    "nauticalmiles": "nautical_mile",
    "meters": "meter",
    "metres": "meter",
    "yards": "yard",
    "feet": "foot",
    "inches": "inch",
})

DEFAULT_UNIT = "kilometers"


def _kilometer_factor(pint_unit: str) -> float:
    """Number of ``pint_unit`` in one kilometer."""
    return float(Q_(1.0, "kilometer").to(pint_unit).magnitude)


UNITS: Mapping[str, float] = MappingProxyType({
    name: _kilometer_factor(pint_unit)
    for name, pint_unit in PINT_UNIT_NAMES.items()
})


def unit_factor(unit: str) -> float:
    """Look up the kilometer-to-unit factor for a ruler unit name.

    Parameters
    ----------
    unit : str
        One of the keys of `UNITS`.

    Returns
    -------
    float
        Number of ``unit`` in one kilometer.

    Raises
    ------
    ConfigurationError
        If the unit name is not in the table.
    """
    try:
        return UNITS[unit]
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"Unknown unit {unit!r}. Use one of: {', '.join(UNITS)}"
        ) from None


def to_magnitude(value: Union[float, pint.Quantity], unit: str) -> float:
    """Express a distance argument as a bare number in a ruler unit.

    Bare numbers are taken to already be in ``unit``. Quantities are
    converted, so ``Q_(250, "m")`` passed to a kilometer ruler is 0.25.

    Raises
    ------
    ValueError
        If a quantity does not have length dimensionality.
    """
    if isinstance(value, pint.Quantity):
        try:
            return float(value.to(PINT_UNIT_NAMES[unit]).magnitude)
        except pint.DimensionalityError as e:
            raise ValueError(
                f"Distance has incompatible units. "
                f"Expected a length, got {value.units}"
            ) from e
    return float(value)
