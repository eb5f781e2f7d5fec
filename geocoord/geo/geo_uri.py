"""GeoURI codec, a subset of RFC 5870.

Accepted text::

    geo:<lat>,<long>[,<elevation>][;param=value...]

Latitude and longitude are signed decimal degrees and the elevation is signed
decimal meters. Anything after the first ``;`` (``crs``, ``u`` and other
parameters) is accepted and discarded; serialization never emits parameters.

Example:
    >>> parse_geo_uri("geo:25.25,-80.125;u=10")
    Coordinate(latitude=25.25, longitude=-80.125)
    >>> to_geo_uri(parse_geo_uri("geo:25.250,-80.125,12.0"))
    'geo:25.25,-80.125,12'
"""

from __future__ import annotations

import logging
import re

from ..errors import MalformedCoordinateError, SchemeError
from ..unit import Meter
from ._format import format_decimal
from .coordinate import Coordinate, ElevationCoordinate, Location

logger = logging.getLogger(__name__)

SCHEME = "geo"

_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _parse_number(field: str, text: str) -> float:
    """Parse one comma-separated field as a decimal number."""
    if not _NUMBER.fullmatch(field):
        raise MalformedCoordinateError(f"'{field}' is not a decimal number in '{text}'")
    return float(field)


def parse_geo_uri(text: str) -> Location:
    """Parse a ``geo:`` URI into a Coordinate or an ElevationCoordinate.

    The scheme is matched case-insensitively. Two fields give a Coordinate,
    three give an ElevationCoordinate whose third field is meters.

    Args:
        text: URI text, e.g. ``"geo:25.25,-80.125"``.

    Returns:
        Location: The parsed location.

    Raises:
        SchemeError: If the scheme is missing or is not ``geo``.
        MalformedCoordinateError: If there are not two or three fields, or a
            field is not a decimal number.
        RangeError: If a latitude or longitude is out of range.
    """
    scheme, sep, rest = text.partition(":")
    if not sep or scheme.lower() != SCHEME:
        raise SchemeError(f"unexpected scheme '{scheme if sep else ''}' in '{text}'")

    location, _, params = rest.partition(";")
    if params:
        logger.debug("Ignoring GeoURI parameters '%s' in '%s'", params, text)

    fields = location.split(",")
    if len(fields) not in (2, 3):
        raise MalformedCoordinateError(f"expected 2 or 3 comma-separated values in '{text}', got {len(fields)}")

    values = [_parse_number(field, text) for field in fields]
    position = Coordinate(values[0], values[1])
    if len(values) == 3:
        return ElevationCoordinate(position, Meter(values[2]))
    return position


def to_geo_uri(location: Location) -> str:
    """Serialize a location as ``geo:<lat>,<long>[,<elevation>]``.

    Numbers use the shortest decimal that parses back to the same value,
    without exponent notation.
    """
    text = f"{SCHEME}:{format_decimal(location.latitude)},{format_decimal(location.longitude)}"
    if location.DIMENSIONS == ElevationCoordinate.DIMENSIONS:
        text += f",{format_decimal(location.elevation)}"
    return text
