"""Exception types raised by geodesic_destination"""

__all__ = ['GeodesicError', 'InvalidInputError', 'InvalidRadiusError']


class GeodesicError(ValueError):
    """Base class for all geodesic_destination errors"""


class InvalidRadiusError(GeodesicError):
    """The sphere radius is not a finite, positive number of meters"""


class InvalidInputError(GeodesicError):
    """A coordinate, distance or bearing is NaN or infinite"""
