"""Spherical-Earth geographic coordinates.

geocoord represents points on Earth's surface and computes distances, bearings
and projected destinations between them using a spherical Earth of radius
6 378 137 m. It converts coordinates to and from degrees-decimal-minutes and
degrees-minutes-seconds, reads and writes ``geo:`` URIs (RFC 5870), and tracks
progress along a route by returning the portion not yet travelled.

Components:
    Coordinate: Immutable, validated latitude/longitude pair
    ElevationCoordinate: A Coordinate plus an elevation above sea level
    geodesy: distance, distance_squared, bearing, destination_point, route_distance
    remaining_route: Untravelled remainder of a route
    DegreesDecimalMinutes, DegreesMinutesSeconds: Sexagesimal forms
    parse_geo_uri, to_geo_uri: GeoURI codec

Known Limitations:
    Routes and projections crossing the ±180° meridian or passing near a pole
    are not handled: the route tracker and the destination projection work on
    raw degree differences.

Typical Usage:
    >>> from geocoord import Coordinate, remaining_route
    >>> from geocoord.unit import Degree, NauticalMile
    >>>
    >>> origin = Coordinate(0, 0)
    >>> east = origin.forward(Degree(90), NauticalMile(1))
    >>> round(float(origin.distance_to(east)))
    1852
    >>> remaining_route(Coordinate(5, -80), [Coordinate(5, -81), Coordinate(5, -82)])
    [Coordinate(latitude=5.0, longitude=-80.0), Coordinate(latitude=5.0, longitude=-81.0), Coordinate(latitude=5.0, longitude=-82.0)]
"""

import logging

from .errors import (
    DimensionalMismatchError,
    EmptyRouteError,
    GeoError,
    MalformedCoordinateError,
    RangeError,
    SchemeError,
)
from .geo import (
    Coordinate,
    DegreesDecimalMinutes,
    DegreesMinutesSeconds,
    ElevationCoordinate,
    Location,
    Route,
    bearing,
    destination_point,
    distance,
    distance_squared,
    parse_geo_uri,
    remaining_route,
    route_distance,
    to_geo_uri,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Coordinates
    "Coordinate",
    "ElevationCoordinate",
    "Location",
    "Route",
    # Geodesy
    "distance",
    "distance_squared",
    "bearing",
    "destination_point",
    "route_distance",
    # Route tracking
    "remaining_route",
    # Sexagesimal forms
    "DegreesDecimalMinutes",
    "DegreesMinutesSeconds",
    # GeoURI
    "parse_geo_uri",
    "to_geo_uri",
    # Errors
    "GeoError",
    "RangeError",
    "SchemeError",
    "MalformedCoordinateError",
    "DimensionalMismatchError",
    "EmptyRouteError",
]
