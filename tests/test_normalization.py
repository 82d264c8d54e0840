
import math

import pytest
from pytest import approx

from geodesic_destination import InvalidInputError
from geodesic_destination.normalization import *


def test_wrap_longitude_canonical_untouched():
    for lon in (0., 0.5, -3., 3.14, -3.14, math.pi):
        assert wrap_longitude(lon) == lon


def test_wrap_longitude():
    assert wrap_longitude(1.5 * math.pi) == approx(-0.5 * math.pi)
    assert wrap_longitude(-1.5 * math.pi) == approx(0.5 * math.pi)
    assert wrap_longitude(2 * math.pi) == approx(0., abs=1e-15)
    assert wrap_longitude(100.) == approx(100. - 16 * 2 * math.pi)
    assert wrap_longitude(-100.) == approx(-100. + 16 * 2 * math.pi)

    # Antimeridian
    assert wrap_longitude(-math.pi) == math.pi
    assert wrap_longitude(-math.pi - 1e-15) == approx(math.pi)

    # Just past the antimeridian flips sign
    assert wrap_longitude(math.pi + 0.01) == approx(-math.pi + 0.01)


def test_wrap_longitude_range():
    values = [x * 0.37 for x in range(-200, 200)] + [1e6, -1e6, 1e-300, -1e-300]
    for lon in values:
        wrapped = wrap_longitude(lon)
        assert -math.pi < wrapped <= math.pi
        assert math.sin(wrapped) == approx(math.sin(lon), abs=1e-9)
        assert math.cos(wrapped) == approx(math.cos(lon), abs=1e-9)


def test_clamp_latitude():
    assert clamp_latitude(0.3) == 0.3
    assert clamp_latitude(-1.2) == -1.2
    assert clamp_latitude(2.) == math.pi / 2
    assert clamp_latitude(-5.) == -math.pi / 2
    assert clamp_latitude(math.pi / 2) == math.pi / 2


def test_clamp_unit():
    assert clamp_unit(0.25) == 0.25
    assert clamp_unit(1.0000000000000002) == 1.
    assert clamp_unit(-1.0000000000000002) == -1.
    assert clamp_unit(-1.5) == -1.
    assert clamp_unit(1.) == 1.


def test_ensure_finite():
    ensure_finite(a=0., b=-1e300)

    with pytest.raises(InvalidInputError, match='bearing_rad'):
        ensure_finite(distance_m=1., bearing_rad=float('nan'))

    with pytest.raises(InvalidInputError, match='distance_m'):
        ensure_finite(distance_m=float('-inf'))
