"""
Inverse-problem helpers on a spherical Earth: the distance and initial bearing
between two known coordinates. Used to check destination() results against.
"""

__all__ = ['haversine_distance', 'initial_bearing']

import math

from geodesic_destination._const import EARTH_RADIUS_M, HALF_PI, TWO_PI
from geodesic_destination.calc import validate_radius
from geodesic_destination.coordinates import Coordinate
from geodesic_destination.normalization import clamp_unit, wrap_longitude


def haversine_distance(
    coord1: Coordinate,
    coord2: Coordinate,
    radius_m: float = EARTH_RADIUS_M
) -> float:
    """
    Calculate the Haversine (great-circle) distance in meters between two points

    Args:
        coord1:
            A coordinate

        coord2:
            A second coordinate

        radius_m:
            (Default EARTH_RADIUS_M) The radius of the sphere, in meters

    Returns:
        (float) the distance in meters
    """
    radius_m = validate_radius(radius_m)

    d_lat = coord2.lat - coord1.lat
    d_lon = wrap_longitude(coord2.lon - coord1.lon)

    var1 = clamp_unit(
        math.sin(d_lat / 2) ** 2
        + math.cos(coord1.lat) * math.cos(coord2.lat) * math.sin(d_lon / 2) ** 2
    )
    return radius_m * 2 * math.atan2(math.sqrt(var1), math.sqrt(1 - var1))


def initial_bearing(start: Coordinate, end: Coordinate) -> float:
    """
    Calculate the initial bearing from start to end along the great circle joining them.

    Args:
        start:
            The start point Coordinate

        end:
            The finish point Coordinate

    Coincident points, including two coordinates on the same pole, have a bearing of 0.

    Returns:
        (float) the bearing in radians clockwise from North, within [0, 2pi)
    """
    if start == end:
        return 0.0

    # every longitude at a pole is the same point
    if abs(start.lat) == HALF_PI and start.lat == end.lat:
        return 0.0

    d_lon = end.lon - start.lon
    y_val = math.sin(d_lon) * math.cos(end.lat)
    x_val = (
        math.cos(start.lat) * math.sin(end.lat)
        - math.sin(start.lat) * math.cos(end.lat) * math.cos(d_lon)
    )
    bearing = math.atan2(y_val, x_val) % TWO_PI

    # -0.0 and tiny negatives round up to 2pi under modulo
    return 0.0 if bearing == TWO_PI else bearing
