"""Sexagesimal (base-60) forms of a Coordinate.

Two decompositions are supported:

    DegreesDecimalMinutes   27º 37.5', -82º 52.5'
    DegreesMinutesSeconds   27º 37' 30", -82º 52' 30"

Degrees are truncated toward zero from the decimal value, so they carry the
sign; minutes and seconds are always non-negative and come from the
fractional remainder.

The sign of a zero degree component cannot be told from the integer alone
(-0.5° has 0 whole degrees). Each decomposition therefore carries the
hemisphere explicitly in ``latitude_negative`` / ``longitude_negative``.
``from_coordinate`` always sets them from the source value, so a round trip
through a decomposition reproduces the Coordinate exactly. When a
decomposition is built by hand the flags default to the sign of the degree
component; a zero degree component without a flag is read as north or east.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..config import DEGREE_SYMBOL, MINUTE_SYMBOL, SECOND_SYMBOL
from ..errors import MalformedCoordinateError, RangeError
from ._format import format_decimal
from .coordinate import Coordinate

logger = logging.getLogger(__name__)


def _whole(value, name: str) -> int:
    """Return ``value`` as an int, rejecting anything with a fractional part."""
    if isinstance(value, bool) or not math.isfinite(value) or int(value) != value:
        raise MalformedCoordinateError(f"{name} must be a whole number, not {value!r}")
    return int(value)


def _degrees(value, limit: int, name: str) -> int:
    """Return a whole degree component, rejecting magnitudes above ``limit``."""
    degrees = _whole(value, name)
    if abs(degrees) > limit:
        raise RangeError(f"{name} must lie in [-{limit}, {limit}], not {degrees}")
    return degrees


def _fraction(value, name: str) -> float:
    """Return ``value`` as a float in [0, 60)."""
    value = float(value)
    if not 0 <= value < 60:
        raise RangeError(f"{name} must lie in [0, 60), not {value}")
    return value


def _hemisphere(degrees: int, negative: bool | None, name: str) -> bool:
    """Resolve whether an angle lies south/west of zero."""
    if negative is None:
        if degrees == 0:
            logger.debug("%s has 0 whole degrees and no hemisphere; assuming north/east", name)
        return degrees < 0
    if degrees != 0 and negative != (degrees < 0):
        raise MalformedCoordinateError(f"{name} of {degrees} degrees contradicts negative={negative}")
    return bool(negative)


def _is_negative(value: float) -> bool:
    return math.copysign(1.0, value) < 0


def _signed_degrees(degrees: int, negative: bool) -> str:
    """Degree component with its sign; a southern/western zero renders as -0."""
    if degrees == 0 and negative:
        return "-0"
    return str(degrees)


def _angle(negative: bool, magnitude: float) -> float:
    return -magnitude if negative else magnitude


@dataclass(frozen=True)
class DegreesDecimalMinutes:
    """A Coordinate as whole degrees and decimal minutes.

    Attributes:
        latitude_degrees (int): Whole degrees of latitude, truncated toward zero.
        latitude_decimal_minutes (float): Minutes of latitude in [0, 60).
        longitude_degrees (int): Whole degrees of longitude, truncated toward zero.
        longitude_decimal_minutes (float): Minutes of longitude in [0, 60).
        latitude_negative (bool): True for southern latitudes.
        longitude_negative (bool): True for western longitudes.

    Example:
        >>> ddm = DegreesDecimalMinutes.from_coordinate(Coordinate(27.625, -82.875))
        >>> str(ddm)
        "27º 37.5', -82º 52.5'"
        >>> ddm.to_cardinal_string()
        "27º 37.5' N, 82º 52.5' W"
    """

    latitude_degrees: int
    latitude_decimal_minutes: float
    longitude_degrees: int
    longitude_decimal_minutes: float
    latitude_negative: bool | None = None
    longitude_negative: bool | None = None

    def __post_init__(self):
        lat_deg = _degrees(self.latitude_degrees, 90, "latitude degrees")
        lon_deg = _degrees(self.longitude_degrees, 180, "longitude degrees")
        object.__setattr__(self, "latitude_degrees", lat_deg)
        object.__setattr__(self, "longitude_degrees", lon_deg)
        object.__setattr__(
            self, "latitude_decimal_minutes", _fraction(self.latitude_decimal_minutes, "latitude minutes")
        )
        object.__setattr__(
            self, "longitude_decimal_minutes", _fraction(self.longitude_decimal_minutes, "longitude minutes")
        )
        object.__setattr__(self, "latitude_negative", _hemisphere(lat_deg, self.latitude_negative, "latitude"))
        object.__setattr__(self, "longitude_negative", _hemisphere(lon_deg, self.longitude_negative, "longitude"))

    @classmethod
    def from_coordinate(cls, c: Coordinate) -> DegreesDecimalMinutes:
        """Decompose a Coordinate into degrees and decimal minutes."""
        lat_deg = int(c.latitude)
        lon_deg = int(c.longitude)
        return cls(
            lat_deg,
            (abs(c.latitude) - abs(lat_deg)) * 60,
            lon_deg,
            (abs(c.longitude) - abs(lon_deg)) * 60,
            latitude_negative=_is_negative(c.latitude),
            longitude_negative=_is_negative(c.longitude),
        )

    def to_coordinate(self) -> Coordinate:
        """Recombine the components into a Coordinate.

        Raises:
            RangeError: If the recombined angles are out of range.
        """
        return Coordinate(
            _angle(self.latitude_negative, abs(self.latitude_degrees) + self.latitude_decimal_minutes / 60),
            _angle(self.longitude_negative, abs(self.longitude_degrees) + self.longitude_decimal_minutes / 60),
        )

    def __str__(self) -> str:
        return (
            f"{_signed_degrees(self.latitude_degrees, self.latitude_negative)}{DEGREE_SYMBOL} "
            f"{format_decimal(self.latitude_decimal_minutes)}{MINUTE_SYMBOL}, "
            f"{_signed_degrees(self.longitude_degrees, self.longitude_negative)}{DEGREE_SYMBOL} "
            f"{format_decimal(self.longitude_decimal_minutes)}{MINUTE_SYMBOL}"
        )

    def to_cardinal_string(self) -> str:
        """Render with N/S and E/W in place of signs."""
        return (
            f"{abs(self.latitude_degrees)}{DEGREE_SYMBOL} "
            f"{format_decimal(self.latitude_decimal_minutes)}{MINUTE_SYMBOL} "
            f"{'S' if self.latitude_negative else 'N'}, "
            f"{abs(self.longitude_degrees)}{DEGREE_SYMBOL} "
            f"{format_decimal(self.longitude_decimal_minutes)}{MINUTE_SYMBOL} "
            f"{'W' if self.longitude_negative else 'E'}"
        )


@dataclass(frozen=True)
class DegreesMinutesSeconds:
    """A Coordinate as whole degrees, whole minutes and decimal seconds.

    Attributes:
        latitude_degrees (int): Whole degrees of latitude, truncated toward zero.
        latitude_minutes (int): Whole minutes of latitude in [0, 60).
        latitude_seconds (float): Seconds of latitude in [0, 60).
        longitude_degrees (int): Whole degrees of longitude, truncated toward zero.
        longitude_minutes (int): Whole minutes of longitude in [0, 60).
        longitude_seconds (float): Seconds of longitude in [0, 60).
        latitude_negative (bool): True for southern latitudes.
        longitude_negative (bool): True for western longitudes.

    Example:
        >>> dms = DegreesMinutesSeconds.from_coordinate(Coordinate(27.625, -82.875))
        >>> dms.to_cardinal_string()
        '27º 37\\' 30" N, 82º 52\\' 30" W'
    """

    latitude_degrees: int
    latitude_minutes: int
    latitude_seconds: float
    longitude_degrees: int
    longitude_minutes: int
    longitude_seconds: float
    latitude_negative: bool | None = None
    longitude_negative: bool | None = None

    def __post_init__(self):
        lat_deg = _degrees(self.latitude_degrees, 90, "latitude degrees")
        lon_deg = _degrees(self.longitude_degrees, 180, "longitude degrees")
        lat_min = _whole(_fraction(self.latitude_minutes, "latitude minutes"), "latitude minutes")
        lon_min = _whole(_fraction(self.longitude_minutes, "longitude minutes"), "longitude minutes")
        object.__setattr__(self, "latitude_degrees", lat_deg)
        object.__setattr__(self, "longitude_degrees", lon_deg)
        object.__setattr__(self, "latitude_minutes", lat_min)
        object.__setattr__(self, "longitude_minutes", lon_min)
        object.__setattr__(self, "latitude_seconds", _fraction(self.latitude_seconds, "latitude seconds"))
        object.__setattr__(self, "longitude_seconds", _fraction(self.longitude_seconds, "longitude seconds"))
        object.__setattr__(self, "latitude_negative", _hemisphere(lat_deg, self.latitude_negative, "latitude"))
        object.__setattr__(self, "longitude_negative", _hemisphere(lon_deg, self.longitude_negative, "longitude"))

    @classmethod
    def from_coordinate(cls, c: Coordinate) -> DegreesMinutesSeconds:
        """Decompose a Coordinate into degrees, minutes and seconds."""
        lat_deg = int(c.latitude)
        lat_minutes_exact = (abs(c.latitude) - abs(lat_deg)) * 60
        lat_min = int(lat_minutes_exact)

        lon_deg = int(c.longitude)
        lon_minutes_exact = (abs(c.longitude) - abs(lon_deg)) * 60
        lon_min = int(lon_minutes_exact)

        return cls(
            lat_deg,
            lat_min,
            (lat_minutes_exact - lat_min) * 60,
            lon_deg,
            lon_min,
            (lon_minutes_exact - lon_min) * 60,
            latitude_negative=_is_negative(c.latitude),
            longitude_negative=_is_negative(c.longitude),
        )

    def to_coordinate(self) -> Coordinate:
        """Recombine the components into a Coordinate.

        Raises:
            RangeError: If the recombined angles are out of range.
        """
        latitude = abs(self.latitude_degrees) + self.latitude_minutes / 60 + self.latitude_seconds / 3600
        longitude = abs(self.longitude_degrees) + self.longitude_minutes / 60 + self.longitude_seconds / 3600
        return Coordinate(_angle(self.latitude_negative, latitude), _angle(self.longitude_negative, longitude))

    def __str__(self) -> str:
        return (
            f"{_signed_degrees(self.latitude_degrees, self.latitude_negative)}{DEGREE_SYMBOL} "
            f"{self.latitude_minutes}{MINUTE_SYMBOL} "
            f"{format_decimal(self.latitude_seconds)}{SECOND_SYMBOL}, "
            f"{_signed_degrees(self.longitude_degrees, self.longitude_negative)}{DEGREE_SYMBOL} "
            f"{self.longitude_minutes}{MINUTE_SYMBOL} "
            f"{format_decimal(self.longitude_seconds)}{SECOND_SYMBOL}"
        )

    def to_cardinal_string(self) -> str:
        """Render with N/S and E/W in place of signs."""
        return (
            f"{abs(self.latitude_degrees)}{DEGREE_SYMBOL} "
            f"{self.latitude_minutes}{MINUTE_SYMBOL} "
            f"{format_decimal(self.latitude_seconds)}{SECOND_SYMBOL} "
            f"{'S' if self.latitude_negative else 'N'}, "
            f"{abs(self.longitude_degrees)}{DEGREE_SYMBOL} "
            f"{self.longitude_minutes}{MINUTE_SYMBOL} "
            f"{format_decimal(self.longitude_seconds)}{SECOND_SYMBOL} "
            f"{'W' if self.longitude_negative else 'E'}"
        )
