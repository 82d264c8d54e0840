""" Destination-point calculations on a spherical Earth """

__all__ = ['destination', 'destination_with_radius', 'validate_radius']

import math

from geodesic_destination._const import EARTH_RADIUS_M, HALF_PI
from geodesic_destination.coordinates import Coordinate
from geodesic_destination.exceptions import InvalidInputError, InvalidRadiusError
from geodesic_destination.normalization import clamp_unit, ensure_finite
from geodesic_destination.utils.logging import LOGGER


def validate_radius(radius_m: float) -> float:
    """
    Raises InvalidRadiusError unless the radius is a finite, positive number.

    Returns:
        The radius as a float
    """
    radius_m = float(radius_m)
    if not (math.isfinite(radius_m) and radius_m > 0):
        raise InvalidRadiusError(
            f'radius_m must be a finite, positive number of meters, got {radius_m!r}'
        )

    return radius_m


def destination(start: Coordinate, distance_m: float, bearing_rad: float) -> Coordinate:
    """
    Given a start location, a distance of travel and a direction of travel, returns the
    finish location on a sphere with the mean Earth radius.

    See destination_with_radius() for the full contract.

    Args:
        start: (Coordinate)
            The starting location

        distance_m: (float)
            The amount of movement, in meters

        bearing_rad: (float)
            The initial heading, in radians clockwise from North

    Returns:
        (Coordinate)
    """
    return destination_with_radius(start, distance_m, bearing_rad, EARTH_RADIUS_M)


def destination_with_radius(
    start: Coordinate,
    distance_m: float,
    bearing_rad: float,
    radius_m: float,
) -> Coordinate:
    """
    Given a start location, a distance of travel and a direction of travel, returns the
    finish location on a sphere of the given radius.

    The bearing may be any real value; it only enters the calculation through sin/cos.
    A negative distance travels backwards, i.e. along the reciprocal bearing.

    When starting exactly at a pole, the bearing is taken relative to the start
    coordinate's meridian: from the North pole the destination lies on meridian
    lon + pi - bearing, from the South pole on meridian lon + bearing.

    Args:
        start: (Coordinate)
            The starting location

        distance_m: (float)
            The amount of movement, in meters

        bearing_rad: (float)
            The initial heading, in radians clockwise from North

        radius_m: (float)
            The radius of the sphere, in meters

    Raises:
        InvalidRadiusError: if radius_m is not a finite, positive number
        InvalidInputError: if distance_m or bearing_rad is NaN or infinite, or the
            angular distance overflows

    Returns:
        (Coordinate)
    """
    radius_m = validate_radius(radius_m)
    distance_m, bearing_rad = float(distance_m), float(bearing_rad)
    ensure_finite(distance_m=distance_m, bearing_rad=bearing_rad)

    if distance_m == 0:
        return start

    ang_dist = distance_m / radius_m
    if not math.isfinite(ang_dist):
        raise InvalidInputError(
            f'distance_m / radius_m overflows: {distance_m!r} / {radius_m!r}'
        )

    sin_lat1, cos_lat1 = math.sin(start.lat), math.cos(start.lat)
    sin_dist, cos_dist = math.sin(ang_dist), math.cos(ang_dist)
    sin_bearing, cos_bearing = math.sin(bearing_rad), math.cos(bearing_rad)

    lat2 = math.asin(
        clamp_unit(sin_lat1 * cos_dist + cos_lat1 * sin_dist * cos_bearing)
    )

    if abs(start.lat) == HALF_PI:
        # cos(lat1) is only approximately zero here, so the general formula
        # would yield an arbitrary meridian
        LOGGER.debug('Destination requested from a pole; holding bearing to start meridian')
        lon2 = start.lon + math.atan2(
            sin_bearing * sin_dist,
            -math.copysign(1.0, start.lat) * cos_bearing * sin_dist
        )
    else:
        lon2 = start.lon + math.atan2(
            sin_bearing * sin_dist * cos_lat1,
            cos_dist - sin_lat1 * math.sin(lat2)
        )

    return Coordinate(lat2, lon2)
