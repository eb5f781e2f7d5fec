"""Spherical-Earth geodesy: distance, bearing and destination-point projection.

Earth is modelled as a sphere whose radius is the WGS-84 equatorial radius
(``config.EARTH_RADIUS``). All angles are converted to radians on the way in;
results come back as ``Meter`` for lengths and ``Degree`` for bearings.

The haversine kernel works on NumPy arrays as well as on scalars, so
``route_distance`` measures every leg of a route in a single vectorized pass
and point-to-point calls share exactly the same arithmetic.

Distances involving elevation use a flat-Earth-with-altitude approximation:
the squared elevation difference is added to the squared surface distance.
Mixing a 2-D Coordinate with a 3-D ElevationCoordinate raises
``DimensionalMismatchError``.

Functions:
    distance_squared: Squared distance in square meters
    distance: Great-circle (or elevation-aware) distance
    bearing: Initial bearing in [0, 360) degrees
    destination_point: Direct problem, start + bearing + distance
    route_distance: Sum of the legs of a route

Example:
    >>> from geocoord import Coordinate
    >>> a, b = Coordinate(0, -81), Coordinate(0, -80)
    >>> round(bearing(a, b).to(Degree), 6)
    90.0
    >>> round(float(distance(a, b)))
    111319
"""

from __future__ import annotations

import math

import numpy as np

from ..config import BASE_TYPE, EARTH_RADIUS
from ..errors import DimensionalMismatchError
from ..unit import Degree, Meter, Radian, Unit
from .coordinate import Coordinate, ElevationCoordinate, Location, Route


def _haversine(lat_a: BASE_TYPE, lon_a: BASE_TYPE, lat_b: BASE_TYPE, lon_b: BASE_TYPE) -> BASE_TYPE:
    """Central angle in radians between points given in degrees.

    Accepts scalars or equally shaped NumPy arrays.
    """
    phi_a = np.radians(lat_a)
    phi_b = np.radians(lat_b)
    d_lat = np.radians(np.subtract(lat_b, lat_a))
    d_lon = np.radians(np.subtract(lon_b, lon_a))

    h = np.sin(d_lat / 2) ** 2 + np.cos(phi_a) * np.cos(phi_b) * np.sin(d_lon / 2) ** 2
    return 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))


def _check_same_kind(a: Location, b: Location):
    """Raise DimensionalMismatchError unless both locations have the same dimensions."""
    if a.DIMENSIONS != b.DIMENSIONS:
        raise DimensionalMismatchError(
            f"cannot measure between a {a.DIMENSIONS}-D and a {b.DIMENSIONS}-D location"
        )


def _radians(angle: Radian | float) -> float:
    """Angle quantity, or bare degrees, as radians."""
    if isinstance(angle, Unit):
        return angle.to(Radian)
    return math.radians(float(angle))


def _meters(length: Meter | float) -> float:
    """Length quantity, or bare meters, as meters."""
    if isinstance(length, Unit):
        return length.to(Meter)
    return float(length)


def distance_squared(a: Location, b: Location) -> float:
    """Squared distance between two locations of the same kind, in square meters.

    This is the primitive the other distance functions build on, so ranking
    locations by ``distance_squared`` always agrees with ranking them by
    ``distance``.

    Args:
        a: First location.
        b: Second location, of the same kind as ``a``.

    Returns:
        float: Squared distance in m².

    Raises:
        DimensionalMismatchError: If one location carries an elevation and the
            other does not.
    """
    _check_same_kind(a, b)
    surface = float(EARTH_RADIUS) * float(_haversine(a.latitude, a.longitude, b.latitude, b.longitude))
    squared = surface**2
    if a.DIMENSIONS == ElevationCoordinate.DIMENSIONS:
        squared += (float(b.elevation) - float(a.elevation)) ** 2
    return squared


def distance(a: Location, b: Location) -> Meter:
    """Distance between two locations of the same kind.

    For plain Coordinates this is the haversine great-circle distance; for
    ElevationCoordinates the elevation difference is folded in.
    ``distance(a, b) == distance(b, a)`` and ``distance(a, a) == 0``.

    Raises:
        DimensionalMismatchError: If the locations are of different kinds.
    """
    return Meter(math.sqrt(distance_squared(a, b)))


def bearing(a: Location, b: Location) -> Degree:
    """Initial great-circle bearing from ``a`` toward ``b``.

    Elevation plays no part, so the two locations may be of either kind.

    Returns:
        Degree: Bearing clockwise from true north, in [0, 360).
    """
    phi_a = math.radians(a.latitude)
    phi_b = math.radians(b.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    theta = math.atan2(
        math.sin(d_lon) * math.cos(phi_b),
        math.cos(phi_a) * math.sin(phi_b) - math.sin(phi_a) * math.cos(phi_b) * math.cos(d_lon),
    )
    result = Degree(math.degrees(theta) % 360.0)
    # a tiny negative angle wraps to exactly 360
    if result.to(Degree) >= 360.0:
        result = Degree(0)
    return result


def destination_point(origin: Location, azimuth: Radian | float, length: Meter | float) -> Location:
    """Project the point reached from ``origin`` along ``azimuth`` after ``length``.

    Solves the direct problem on the sphere. The result goes back through the
    Coordinate constructor, so a projection that ends beyond ±180° longitude
    raises ``RangeError`` rather than being wrapped.

    Args:
        origin: Starting location. An ElevationCoordinate yields an
            ElevationCoordinate at the same elevation.
        azimuth: Bearing from north as an angle quantity, or bare degrees.
        length: Distance to travel as a length quantity, or bare meters.

    Returns:
        Location: The projected location.

    Raises:
        RangeError: If the projected longitude leaves [-180, 180].

    Example:
        >>> from geocoord import Coordinate
        >>> from geocoord.unit import Degree, Kilometer
        >>> p = destination_point(Coordinate(0, 0), Degree(0), Kilometer(111.32))
        >>> round(p.latitude, 2)
        1.0
    """
    theta = _radians(azimuth)
    delta = _meters(length) / float(EARTH_RADIUS)
    phi = math.radians(origin.latitude)
    lam = math.radians(origin.longitude)

    new_phi = math.asin(math.sin(phi) * math.cos(delta) + math.cos(phi) * math.sin(delta) * math.cos(theta))
    new_lam = lam + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi),
        math.cos(delta) - math.sin(phi) * math.sin(new_phi),
    )

    position = Coordinate(math.degrees(new_phi), math.degrees(new_lam))
    if origin.DIMENSIONS == ElevationCoordinate.DIMENSIONS:
        return ElevationCoordinate(position, origin.elevation)
    return position


def route_distance(route: Route) -> Meter:
    """Total length of a route, the sum of the distances between consecutive vertices.

    An empty or single-vertex route has length 0 m.

    Raises:
        DimensionalMismatchError: If the route mixes 2-D and 3-D locations.
    """
    if len(route) < 2:
        return Meter(0)

    first = route[0]
    for location in route[1:]:
        _check_same_kind(first, location)

    lat = np.fromiter((p.latitude for p in route), dtype=float, count=len(route))
    lon = np.fromiter((p.longitude for p in route), dtype=float, count=len(route))

    legs = float(EARTH_RADIUS) * _haversine(lat[:-1], lon[:-1], lat[1:], lon[1:])
    if first.DIMENSIONS == ElevationCoordinate.DIMENSIONS:
        elevation = np.fromiter((float(p.elevation) for p in route), dtype=float, count=len(route))
        legs = np.sqrt(legs**2 + np.diff(elevation) ** 2)

    return Meter(float(np.sum(legs)))
