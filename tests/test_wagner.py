import math

import pytest

from cvmgeo.geomath import ProjectionError
from cvmgeo.wagner import WagnerIV, WagnerVII

R = 6370997.0
POINTS = [
    (0.3, 0.2),
    (-1.2, 0.9),
    (2.5, -0.7),
    (-0.01, -1.3),
    (1.0, 0.0),
]


@pytest.mark.parametrize("cls", [WagnerIV, WagnerVII])
@pytest.mark.parametrize("lon,lat", POINTS)
def test_round_trip(cls, lon, lat):
    proj = cls(R, 0.1, 1000.0, -2000.0)
    x, y = proj.forward(lon + 0.1, lat)
    back_lon, back_lat = proj.inverse(x, y)
    assert back_lon == pytest.approx(lon + 0.1, abs=1e-7)
    assert back_lat == pytest.approx(lat, abs=1e-7)


@pytest.mark.parametrize("cls", [WagnerIV, WagnerVII])
def test_center_maps_to_false_origin(cls):
    proj = cls(R, 0.5, 300.0, 400.0)
    x, y = proj.forward(0.5, 0.0)
    assert x == pytest.approx(300.0)
    assert y == pytest.approx(400.0)


@pytest.mark.parametrize("cls", [WagnerIV, WagnerVII])
def test_false_origin_inverts_to_center(cls):
    proj = cls(R, -0.4, 300.0, 400.0)
    lon, lat = proj.inverse(300.0, 400.0)
    assert lon == pytest.approx(-0.4)
    assert lat == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("cls", [WagnerIV, WagnerVII])
def test_symmetry(cls):
    proj = cls(R, 0.0, 0.0, 0.0)
    x1, y1 = proj.forward(0.8, 0.6)
    x2, y2 = proj.forward(-0.8, -0.6)
    assert x2 == pytest.approx(-x1)
    assert y2 == pytest.approx(-y1)


@pytest.mark.parametrize("cls", [WagnerIV, WagnerVII])
def test_northing_grows_with_latitude(cls):
    proj = cls(R, 0.0, 0.0, 0.0)
    ys = [proj.forward(0.2, lat)[1] for lat in (-1.0, -0.3, 0.0, 0.4, 1.2)]
    assert ys == sorted(ys)


def test_wagner_iv_inverse_outside_raises():
    proj = WagnerIV(R, 0.0, 0.0, 0.0)
    with pytest.raises(ProjectionError):
        proj.inverse(0.0, 2.0 * R)


def test_wagner_iv_equator_scale():
    proj = WagnerIV(1.0, 0.0, 0.0, 0.0)
    x, y = proj.forward(1.0, 0.0)
    assert x == pytest.approx(0.86310)
    assert y == pytest.approx(0.0, abs=1e-12)


def test_wagner_vii_longitude_wraps():
    proj = WagnerVII(R, 0.0, 0.0, 0.0)
    a = proj.forward(0.5, 0.3)
    b = proj.forward(0.5 + 2 * math.pi, 0.3)
    assert b[0] == pytest.approx(a[0])
    assert b[1] == pytest.approx(a[1])