"""Library-wide constants and type definitions for geocoord.

There is no runtime configuration: geocoord is a library of pure functions and
reads no environment variables or files. Every tunable value the geo core
relies on is defined here so that it has a single home.

Type Definitions:
    BASE_TYPE: Numeric types accepted by the vectorized geodesy kernels.
               Python scalars and NumPy arrays are both valid, so a single
               haversine implementation serves point-to-point distances and
               whole-route lengths.

Constants:
    EARTH_RADIUS: Radius of the spherical Earth model, the WGS-84 equatorial
                  radius (6 378 137 m).
    DEGREE_SYMBOL, MINUTE_SYMBOL, SECOND_SYMBOL, ELEVATION_SYMBOL:
                  Symbols used when rendering coordinates as text.

Example:
    >>> from geocoord.config import EARTH_RADIUS
    >>> float(EARTH_RADIUS)
    6378137.0
"""

from numpy import ndarray

from .unit import Meter

BASE_TYPE = int | float | ndarray

EARTH_RADIUS = Meter(6_378_137)

DEGREE_SYMBOL = "º"
MINUTE_SYMBOL = "'"
SECOND_SYMBOL = '"'
ELEVATION_SYMBOL = "m"
