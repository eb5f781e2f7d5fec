"""Route progress tracking.

Given an ordered route and the current position of something travelling along
it (the locator), ``remaining_route`` returns what is left to travel: the
locator itself followed by the route vertices that still lie ahead.

The locator does not have to sit on the route. The nearest vertex is found by
distance, and a planar dot product then decides whether the locator has
already passed that vertex:

    closest ──────────► next          (route direction)
        └────► locator                (closest → locator)

A negative dot product means the locator is still behind the closest vertex,
so the closest vertex stays in the remaining route; otherwise it is dropped.

Known Limitations:
    The dot product works on raw (longitude, latitude) degree differences, a
    flat-plane approximation. Near the ±180° meridian or the poles both the
    direction test and the nearest-vertex search may pick the wrong vertex.
"""

from __future__ import annotations

import logging

from ..errors import EmptyRouteError
from .coordinate import Location, Route
from .geodesy import distance_squared

logger = logging.getLogger(__name__)


def _dot_product(a: Location, b: Location, c: Location) -> float:
    """Dot product of the vectors a→b and a→c in (longitude, latitude) degrees."""
    abx = b.longitude - a.longitude
    aby = b.latitude - a.latitude
    acx = c.longitude - a.longitude
    acy = c.latitude - a.latitude
    return abx * acx + aby * acy


def remaining_route(locator: Location, route: Route) -> list[Location]:
    """Return the untravelled part of ``route`` as seen from ``locator``.

    Args:
        locator: Current position. Must be the same kind (with or without
            elevation) as the route vertices.
        route: Ordered, non-empty sequence of vertices in travel order.

    Returns:
        list: ``[locator]`` followed by the vertices still ahead. When the
        nearest vertex is the last one the result is ``[locator, last]``.

    Raises:
        EmptyRouteError: If ``route`` has no vertices.
        DimensionalMismatchError: If locator and vertices differ in kind.

    Example:
        >>> from geocoord import Coordinate
        >>> route = [Coordinate(5, -80), Coordinate(5, -82), Coordinate(5, -83)]
        >>> [str(p) for p in remaining_route(Coordinate(6, -81), route)]
        ['6º, -81º', '5º, -82º', '5º, -83º']
    """
    if len(route) == 0:
        raise EmptyRouteError("an empty route is not valid")

    n = len(route)
    closest_distance = float("inf")
    closest_index = -1
    for i, vertex in enumerate(route):
        d = distance_squared(locator, vertex)
        if d < closest_distance:
            closest_distance = d
            closest_index = i

    if closest_index == n - 1:
        logger.debug("Closest vertex is the last of %d; nothing left beyond it", n)
        return [locator, route[-1]]

    dot = _dot_product(route[closest_index], route[closest_index + 1], locator)
    best_index = closest_index if dot < 0 else closest_index + 1
    logger.debug(
        "Closest vertex %d of %d (dot product %g); remaining route resumes at %d",
        closest_index,
        n,
        dot,
        best_index,
    )

    return [locator, *route[best_index:]]
