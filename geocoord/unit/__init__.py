"""Physical quantities consumed by the geo core.

The geo core never converts units itself: it asks an angle for its value in
radians and a length for its value in meters, and wraps its own results in
``Degree`` and ``Meter``. This package supplies those quantities.

Architecture:
    - unit_base: Unit class with the family (ROOT) management system
    - unit_float: float-based units stored in SI
    - unit_angle: Radian (root), Degree
    - unit_distance: Meter (root), Kilometer, NauticalMile

Units of one family combine and convert freely; mixing families raises
``TypeError``.

Example:
    >>> from geocoord.unit import Degree, Meter, NauticalMile
    >>> leg = Meter(500) + NauticalMile(1)
    >>> print(leg)
    2352.0 m
    >>> # Degree(45) + Meter(1) raises TypeError: different families
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter, NauticalMile
from .unit_float import UnitFloat

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Length units
    "Meter",
    "Kilometer",
    "NauticalMile",
    "Length",
]
