"""Angular units for bearings, headings and coordinate components.

Angles are stored in radians (the SI base unit) so the trigonometry in the geo
core can use them directly, while still being created and displayed in degrees.

Classes:
    Radian: Base angular unit in radians (SI unit).
    Degree: Angular unit in degrees with automatic radian conversion.

Type Aliases:
    Angle: Union type for all angular units (Radian | Degree).

Example:
    >>> heading = Degree(90)
    >>> print(heading)
    90.0 °
    >>> round(float(heading), 4)
    1.5708
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: Radian (SI base unit for angles).

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root angular unit.
        SCALE_TO_SI (float): 1.0, no conversion needed for SI base unit.
        SYMBOL (str): "rad", the standard symbol for radians.
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: Degree (1/360 of a full rotation).

    Bearings returned by the geodesy engine are Degree instances, so
    ``bearing.to(Degree)`` yields the familiar 0-360 compass value.

    Attributes:
        SCALE_TO_SI (float): π/180, conversion factor from degrees to radians.
        SYMBOL (str): "°", the standard symbol for degrees.
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree  # Type alias for any angle unit
