"""Length units for distances and elevations.

All lengths are stored in meters (the SI base unit). Distances produced by the
geodesy engine are Meter instances; callers may pass any Length when
projecting a destination point or giving an elevation.

Classes:
    Meter: Base length unit in meters (SI unit).
    Kilometer: 1000 meters.
    NauticalMile: 1852 meters, one minute of arc along a meridian.

Type Aliases:
    Length: Union type for all length units.

Example:
    >>> leg = NauticalMile(2)
    >>> float(leg)
    3704.0
    >>> leg.to(Kilometer)
    3.704
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length unit: Meter (SI base unit for length).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root length unit.
        SCALE_TO_SI (float): 1.0, no conversion needed for SI base unit.
        SYMBOL (str): "m", the standard symbol for meters.
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length unit: Kilometer (1000 meters)."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class NauticalMile(Meter):
    """Length unit: international nautical mile (1852 meters)."""

    SCALE_TO_SI = 1852.0
    SYMBOL = "NM"


Length = Meter | Kilometer | NauticalMile  # Type alias for any length unit
