"""
Spherical direct geodesic (destination point) calculations.

Latitudes, longitudes and bearings are in radians; distances and radii are in meters.
Bearings are measured clockwise from geographic North (0 = North, pi/2 = East).
"""

from geodesic_destination._version import __version__  # noqa: F401
from geodesic_destination._const import EARTH_RADIUS_M
from geodesic_destination.utils.logging import LOGGER
from geodesic_destination.exceptions import (
    GeodesicError, InvalidInputError, InvalidRadiusError
)
from geodesic_destination.normalization import clamp_latitude, clamp_unit, wrap_longitude
from geodesic_destination.coordinates import Coordinate
from geodesic_destination.calc import destination, destination_with_radius
from geodesic_destination.distance import haversine_distance, initial_bearing


__all__ = [
    'Coordinate',
    'EARTH_RADIUS_M',
    'GeodesicError',
    'InvalidInputError',
    'InvalidRadiusError',
    'LOGGER',
    'clamp_latitude',
    'clamp_unit',
    'destination',
    'destination_with_radius',
    'haversine_distance',
    'initial_bearing',
    'wrap_longitude',
]
