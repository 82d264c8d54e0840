"""
Representation of a specific point on a sphere
"""

__all__ = ['Coordinate']

import math
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.linalg import norm

from geodesic_destination.normalization import (
    clamp_latitude, clamp_unit, ensure_finite, wrap_longitude
)
from geodesic_destination.utils.logging import warn_once


class Coordinate:
    """
    Representation of a coordinate on the globe (i.e., a lat/lon pair), in radians.

    Coordinates are immutable. Out-of-range inputs are normalized rather than
    rejected: latitudes beyond a pole saturate at that pole, and longitudes
    wrap into (-pi, pi].

    Args:
        lat:
            The latitude, in radians

        lon:
            The longitude, in radians

    Raises:
        InvalidInputError: if either value is NaN or infinite
    """

    def __init__(
        self,
        lat: Union[float, int, str],
        lon: Union[float, int, str],
    ):
        lat, lon = float(lat), float(lon)
        ensure_finite(lat=lat, lon=lon)

        clamped = clamp_latitude(lat)
        if clamped != lat:
            warn_once(
                'Latitude outside [-pi/2, pi/2] was clamped to the nearest pole. '
                '(this warning will not repeat)'
            )

        self._lat = clamped
        self._lon = wrap_longitude(lon)

    @property
    def lat(self) -> float:
        """Latitude in radians, within [-pi/2, pi/2]"""
        return self._lat

    @property
    def lon(self) -> float:
        """Longitude in radians, within (-pi, pi]"""
        return self._lon

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return self.lat == other.lat and self.lon == other.lon

    def __hash__(self):
        return hash((self.lat, self.lon))

    def __repr__(self):
        return f'<Coordinate({self.lat}, {self.lon})>'

    @property
    def xyz(self) -> np.ndarray:
        """Converts lat/lon to a read-only unit vector [x, y, z]"""
        vec = np.array([
            math.cos(self.lat) * math.cos(self.lon),
            math.cos(self.lat) * math.sin(self.lon),
            math.sin(self.lat)
        ])
        vec.flags.writeable = False
        return vec

    @classmethod
    def from_xyz(cls, xyz: Sequence[float]) -> 'Coordinate':
        """
        Creates a Coordinate from a cartesian vector. The vector does not need to
        be of unit length, but must not be zero.

        Args:
            xyz:
                A 3-element vector [x, y, z]

        Returns:
            Coordinate
        """
        vec = np.asarray(xyz, dtype=float)
        if vec.shape != (3,):
            raise ValueError(f'Expected a 3-element vector, got shape {vec.shape}')

        length = norm(vec)
        if not length > 0:
            raise ValueError('Cannot derive a Coordinate from a zero-length vector')

        x, y, z = vec / length
        return cls(math.asin(clamp_unit(z)), math.atan2(y, x))

    @classmethod
    def from_degrees(cls, lat_degrees: float, lon_degrees: float) -> 'Coordinate':
        """
        Creates a Coordinate from a latitude/longitude pair in decimal degrees.

        Args:
            lat_degrees:
                The latitude, in degrees

            lon_degrees:
                The longitude, in degrees

        Returns:
            Coordinate
        """
        return cls(math.radians(float(lat_degrees)), math.radians(float(lon_degrees)))

    def to_degrees(self) -> Tuple[float, float]:
        """
        Converts the coordinate to a (latitude, longitude) tuple in decimal degrees.
        """
        return math.degrees(self.lat), math.degrees(self.lon)

    def to_float(self) -> Tuple[float, float]:
        """
        Converts the coordinate to a (latitude, longitude) tuple in radians.
        """
        return self.lat, self.lon
