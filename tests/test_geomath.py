import math

import pytest

from cvmgeo.geomath import (
    HALF_PI,
    PI,
    TWO_PI,
    ProjectionCode,
    ProjectionError,
    adjust_lon,
    asinz,
    e0fn,
    e1fn,
    e2fn,
    e3fn,
    mlfn,
    sign,
)


@pytest.mark.parametrize("value", [0.0, 1.0, -3.0, PI, -PI])
def test_adjust_lon_keeps_values_in_range(value):
    assert adjust_lon(value) == value


@pytest.mark.parametrize("value", [4.0, -4.0, 7.5, -20.0, 1000.0, -12345.678])
def test_adjust_lon_wraps_into_range(value):
    result = adjust_lon(value)
    assert -PI <= result <= PI
    turns = (value - result) / TWO_PI
    assert turns == pytest.approx(round(turns), abs=1e-9)


def test_asinz_clamps():
    assert asinz(2.0) == pytest.approx(HALF_PI)
    assert asinz(-5.0) == pytest.approx(-HALF_PI)


def test_asinz_matches_asin_in_range():
    for v in (-0.9, -0.1, 0.0, 0.3, 0.99):
        assert asinz(v) == math.asin(v)


def test_series_coefficients_for_sphere():
    assert e0fn(0.0) == 1.0
    assert e1fn(0.0) == 0.0
    assert e2fn(0.0) == 0.0
    assert e3fn(0.0) == 0.0


def test_series_coefficients_monotonic():
    assert e0fn(0.01) < 1.0
    assert e1fn(0.01) > 0.0
    assert e2fn(0.01) > 0.0
    assert e3fn(0.01) > 0.0


def test_mlfn_sphere_is_identity():
    for phi in (-1.2, 0.0, 0.5, 1.4):
        assert mlfn(1.0, 0.0, 0.0, 0.0, phi) == pytest.approx(phi)


def test_mlfn_is_odd():
    es = 0.006694
    args = (e0fn(es), e1fn(es), e2fn(es), e3fn(es))
    assert mlfn(*args, 0.7) == pytest.approx(-mlfn(*args, -0.7))


def test_sign():
    assert sign(-2.0) == -1
    assert sign(0.0) == 1
    assert sign(3.0) == 1


def test_projection_codes():
    assert ProjectionCode.UTM == 1
    assert ProjectionCode.USDEF == 99
    assert ProjectionCode(29) is ProjectionCode.WAGVII


def test_projection_error_code():
    err = ProjectionError("Point projects into infinity", 103)
    assert err.code == 103
    assert str(err) == "Point projects into infinity"