"""
Constants declarations for geodesic_destination
"""
import math

# Mean Earth radius (spherical model)
EARTH_RADIUS_M = 6_371_000.0

# Angle bounds, radians
HALF_PI = math.pi / 2
TWO_PI = 2 * math.pi
