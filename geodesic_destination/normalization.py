"""
Normalization helpers that keep angles inside their canonical ranges.

Every public entry point of geodesic_destination routes latitude, longitude and
inverse-trig arguments through these functions, so the clamp/wrap policy is
defined in exactly one place:

    * latitudes saturate at the poles, [-pi/2, pi/2]
    * longitudes wrap around the antimeridian, (-pi, pi]
    * asin/acos arguments saturate at [-1, 1]
"""

__all__ = ['clamp_latitude', 'clamp_unit', 'ensure_finite', 'wrap_longitude']

import math

from geodesic_destination._const import HALF_PI, TWO_PI
from geodesic_destination.exceptions import InvalidInputError


def clamp_unit(value: float) -> float:
    """
    Clamps a value intended as an asin/acos argument into [-1, 1], absorbing
    floating point overshoot such as 1.0000000000000002.

    Args:
        value:
            The value to clamp

    Returns:
        float
    """
    return max(-1.0, min(1.0, value))


def clamp_latitude(lat: float) -> float:
    """
    Saturates a latitude (radians) into [-pi/2, pi/2]. Latitudes do not wrap;
    anything beyond a pole is held at that pole.

    Args:
        lat:
            The latitude, in radians

    Returns:
        float
    """
    return max(-HALF_PI, min(HALF_PI, lat))


def wrap_longitude(lon: float) -> float:
    """
    Wraps a longitude (radians) into (-pi, pi]. Values already in range are
    returned as-is, so canonical longitudes never drift. The antimeridian is
    always represented as +pi.

    Args:
        lon:
            The longitude, in radians

    Returns:
        float
    """
    if -math.pi < lon <= math.pi:
        return lon

    wrapped = math.pi - (math.pi - lon) % TWO_PI

    # float modulo can round up to the divisor itself
    if wrapped <= -math.pi:
        wrapped += TWO_PI

    return wrapped


def ensure_finite(**values: float) -> None:
    """
    Raises InvalidInputError for the first keyword argument that is NaN or
    infinite.

    Example:
        ensure_finite(distance_m=distance_m, bearing_rad=bearing_rad)
    """
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidInputError(f'{name} must be a finite number, got {value!r}')
