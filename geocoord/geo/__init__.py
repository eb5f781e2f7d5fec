"""Spherical-Earth coordinate types and the computations built on them.

Modules:
    coordinate: Coordinate and ElevationCoordinate value types
    geodesy: distance, bearing and destination-point projection
    route: remaining_route, progress along a polyline
    sexagesimal: degrees-decimal-minutes and degrees-minutes-seconds forms
    geo_uri: ``geo:`` URI parsing and serialization

Typical Usage:
    >>> from geocoord.geo import Coordinate, DegreesMinutesSeconds
    >>> tampa = Coordinate(27.5, -82.75)
    >>> str(DegreesMinutesSeconds.from_coordinate(tampa))
    '27º 30\\' 0", -82º 45\\' 0"'
    >>> tampa.to_geo_uri()
    'geo:27.5,-82.75'
"""

from .coordinate import Coordinate, ElevationCoordinate, Location, Route
from .geo_uri import parse_geo_uri, to_geo_uri
from .geodesy import bearing, destination_point, distance, distance_squared, route_distance
from .route import remaining_route
from .sexagesimal import DegreesDecimalMinutes, DegreesMinutesSeconds

__all__ = [
    "Coordinate",
    "ElevationCoordinate",
    "Location",
    "Route",
    "distance",
    "distance_squared",
    "bearing",
    "destination_point",
    "route_distance",
    "remaining_route",
    "DegreesDecimalMinutes",
    "DegreesMinutesSeconds",
    "parse_geo_uri",
    "to_geo_uri",
]
