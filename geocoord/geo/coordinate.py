"""Coordinate value types.

This module defines the two location kinds the library works with: a plain
latitude/longitude ``Coordinate`` and an ``ElevationCoordinate`` that embeds a
Coordinate together with an elevation. Both are frozen dataclasses, validated
once at construction and never mutated afterwards.

The kinds are kept apart by their ``DIMENSIONS`` class attribute (2 or 3). The
geodesy engine compares that attribute before mixing two locations, so a 2-D
and a 3-D location can never be combined by accident.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from ..config import DEGREE_SYMBOL, ELEVATION_SYMBOL
from ..errors import MalformedCoordinateError, RangeError
from ..unit import Degree, Meter, Radian, Unit
from ._format import format_decimal

if TYPE_CHECKING:
    from ..unit import Angle, Length


def _same_bits(a: float, b: float) -> bool:
    """Exact float comparison that also tells 0.0 and -0.0 apart."""
    return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)


@dataclass(frozen=True, eq=False)
class Coordinate:
    """A point on Earth's surface in decimal degrees.

    Construction is the single validation point: a Coordinate with a
    latitude outside [-90, 90], a longitude outside [-180, 180] or a
    non-finite component cannot exist.

    Equality is exact on both fields, with no tolerance; ``0.0`` and ``-0.0``
    are different values. Coordinates have no ordering.

    Attributes:
        latitude (float): Degrees north (negative south), -90 to +90.
        longitude (float): Degrees east (negative west), -180 to +180.

    Example:
        >>> fort_myers = Coordinate(26.522385, -81.993888)
        >>> print(Coordinate(25.0, -80.125))
        25º, -80.125º
        >>> Coordinate(91, 0)
        Traceback (most recent call last):
            ...
        geocoord.errors.RangeError: invalid latitude 91.0
    """

    DIMENSIONS: ClassVar[int] = 2

    latitude: float
    longitude: float

    def __post_init__(self):
        latitude = float(self.latitude)
        longitude = float(self.longitude)

        if not math.isfinite(latitude) or abs(latitude) > 90:
            raise RangeError(f"invalid latitude {latitude}")
        if not math.isfinite(longitude) or abs(longitude) > 180:
            raise RangeError(f"invalid longitude {longitude}")

        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "longitude", longitude)

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> Coordinate:
        """Create a Coordinate from latitude and longitude in radians."""
        return cls(Radian(lat).to(Degree), Radian(lon).to(Degree))

    @classmethod
    def from_geo_uri(cls, text: str) -> Coordinate:
        """Create a Coordinate from ``geo:<lat>,<long>`` text.

        Raises:
            SchemeError: If the scheme is not ``geo``.
            MalformedCoordinateError: If the text does not hold exactly two
                numeric fields (use ElevationCoordinate.from_geo_uri for three).
            RangeError: If a parsed value is out of range.
        """
        from .geo_uri import parse_geo_uri

        location = parse_geo_uri(text)
        if location.DIMENSIONS != cls.DIMENSIONS:
            raise MalformedCoordinateError(f"'{text}' carries an elevation; expected a 2-D coordinate")
        return location

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return _same_bits(self.latitude, other.latitude) and _same_bits(self.longitude, other.longitude)

    def __hash__(self) -> int:
        return hash((self.latitude, self.longitude))

    def __str__(self) -> str:
        return (
            f"{format_decimal(self.latitude)}{DEGREE_SYMBOL}, "
            f"{format_decimal(self.longitude)}{DEGREE_SYMBOL}"
        )

    # -------------------------------- Geodesy shortcuts --------------------------------
    def distance_to(self, other: Coordinate) -> Meter:
        """Great-circle distance to another Coordinate."""
        from .geodesy import distance

        return distance(self, other)

    def distance_squared_to(self, other: Coordinate) -> float:
        """Square of ``distance_to``, in square meters."""
        from .geodesy import distance_squared

        return distance_squared(self, other)

    def bearing_to(self, other: Coordinate) -> Degree:
        """Initial bearing toward another Coordinate, in [0, 360) degrees."""
        from .geodesy import bearing

        return bearing(self, other)

    def forward(self, azimuth: Angle | float, distance: Length | float) -> Coordinate:
        """Project a new Coordinate along ``azimuth`` for ``distance``."""
        from .geodesy import destination_point

        return destination_point(self, azimuth, distance)

    def remaining_route(self, route: Sequence[Coordinate]) -> list[Coordinate]:
        """Untravelled part of ``route`` with this Coordinate as the current position."""
        from .route import remaining_route

        return remaining_route(self, route)

    def to_geo_uri(self) -> str:
        """This Coordinate as ``geo:<lat>,<long>``."""
        from .geo_uri import to_geo_uri

        return to_geo_uri(self)


@dataclass(frozen=True, eq=False)
class ElevationCoordinate:
    """A Coordinate together with an elevation above (or below) sea level.

    The base position is embedded rather than inherited, so an
    ElevationCoordinate is only ever compared with, or measured against,
    another ElevationCoordinate.

    ``elevation`` accepts any length quantity or a bare number of meters and
    is always stored as ``Meter``.

    Attributes:
        position (Coordinate): Latitude/longitude of the location.
        elevation (Meter): Signed height relative to sea level.

    Example:
        >>> summit = ElevationCoordinate.from_deg(27.9881, 86.9250, 8848.86)
        >>> print(summit)
        27.9881º, 86.925º, 8848.86m
        >>> summit.latitude
        27.9881
    """

    DIMENSIONS: ClassVar[int] = 3

    position: Coordinate
    elevation: Meter

    def __post_init__(self):
        if not isinstance(self.position, Coordinate):
            raise TypeError(f"position must be a Coordinate, not {type(self.position).__name__}")

        elevation = self.elevation
        if isinstance(elevation, Unit):
            # TypeError for anything that is not a length
            elevation = elevation.as_unit(Meter)
        else:
            elevation = Meter(elevation)

        if not math.isfinite(elevation):
            raise RangeError(f"invalid elevation {float(elevation)}")

        object.__setattr__(self, "elevation", elevation)

    @classmethod
    def from_deg(cls, lat: float, lon: float, elevation: Length | float) -> ElevationCoordinate:
        """Create an ElevationCoordinate from degrees and an elevation."""
        return cls(Coordinate(lat, lon), elevation)

    @classmethod
    def from_geo_uri(cls, text: str) -> ElevationCoordinate:
        """Create an ElevationCoordinate from ``geo:<lat>,<long>,<elevation>`` text.

        Raises:
            SchemeError: If the scheme is not ``geo``.
            MalformedCoordinateError: If the text does not hold exactly three
                numeric fields.
            RangeError: If a parsed value is out of range.
        """
        from .geo_uri import parse_geo_uri

        location = parse_geo_uri(text)
        if location.DIMENSIONS != cls.DIMENSIONS:
            raise MalformedCoordinateError(f"'{text}' has no elevation; expected a 3-D coordinate")
        return location

    @property
    def latitude(self) -> float:
        return self.position.latitude

    @property
    def longitude(self) -> float:
        return self.position.longitude

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.position == other.position and _same_bits(float(self.elevation), float(other.elevation))

    def __hash__(self) -> int:
        return hash((self.position, float(self.elevation)))

    def __str__(self) -> str:
        return f"{self.position}, {format_decimal(self.elevation)}{ELEVATION_SYMBOL}"

    # -------------------------------- Geodesy shortcuts --------------------------------
    def distance_to(self, other: ElevationCoordinate) -> Meter:
        """Distance to another ElevationCoordinate, elevation difference included."""
        from .geodesy import distance

        return distance(self, other)

    def distance_squared_to(self, other: ElevationCoordinate) -> float:
        """Square of ``distance_to``, in square meters."""
        from .geodesy import distance_squared

        return distance_squared(self, other)

    def bearing_to(self, other: Location) -> Degree:
        """Initial bearing toward another location; elevation plays no part."""
        from .geodesy import bearing

        return bearing(self, other)

    def forward(self, azimuth: Angle | float, distance: Length | float) -> ElevationCoordinate:
        """Project a new location at the same elevation."""
        from .geodesy import destination_point

        return destination_point(self, azimuth, distance)

    def remaining_route(self, route: Sequence[ElevationCoordinate]) -> list[ElevationCoordinate]:
        """Untravelled part of ``route`` with this location as the current position."""
        from .route import remaining_route

        return remaining_route(self, route)

    def to_geo_uri(self) -> str:
        """This location as ``geo:<lat>,<long>,<elevation>``."""
        from .geo_uri import to_geo_uri

        return to_geo_uri(self)


Location = Coordinate | ElevationCoordinate  # Type alias for either location kind
Route = Sequence[Location]  # Ordered vertices; index order is travel order
