"""Error taxonomy for geocoord.

Every failure is raised synchronously where it is detected (a constructor,
a parser or the offending call) and is never converted into a default value.
Each error also derives from the built-in exception a caller would naturally
expect, so ``except ValueError`` keeps working for code that does not know
about geocoord.
"""


class GeoError(Exception):
    """Base class for all geocoord errors."""


class RangeError(GeoError, ValueError):
    """A latitude, longitude or derived value lies outside its valid bounds."""


class SchemeError(GeoError, ValueError):
    """A URI does not use the ``geo`` scheme."""


class MalformedCoordinateError(GeoError, ValueError):
    """Coordinate text or components could not be interpreted."""


class DimensionalMismatchError(GeoError, TypeError):
    """A 2-D coordinate and a 3-D (elevation) coordinate were combined."""


class EmptyRouteError(GeoError, ValueError):
    """Route tracking was asked to work on a route with no vertices."""
