"""Wagner IV and Wagner VII projections on the sphere."""

from __future__ import annotations

import logging
import math

from .geomath import EPSLN, ProjectionError, adjust_lon, asinz

logger = logging.getLogger(__name__)

_WIV_CON = 2.9604205062
_WIV_X = 0.86310
_WIV_Y = 1.56548
_WVII_X = 2.66723
_WVII_Y = 1.24104
_WVII_S = 0.90631


class WagnerIV:
    """Wagner IV mapping between radians and metres."""

    def __init__(
        self,
        radius: float,
        center_lon: float,
        false_easting: float,
        false_northing: float,
    ) -> None:
        self.radius = radius
        self.lon_center = center_lon
        self.false_easting = false_easting
        self.false_northing = false_northing

    def forward(self, lon: float, lat: float) -> tuple[float, float]:
        """Map longitude and latitude in radians to easting and northing."""
        delta_lon = adjust_lon(lon - self.lon_center)
        theta = lat
        con = _WIV_CON * math.sin(lat)

        iteration = 0
        warned = False
        while True:
            delta_theta = -(theta + math.sin(theta) - con) / (1.0 + math.cos(theta))
            theta += delta_theta
            if abs(delta_theta) < EPSLN:
                break
            if iteration >= 30 and not warned:
                logger.error("Iteration failed to converge (wagneriv-forward)")
                warned = True
            iteration += 1

        theta /= 2.0
        x = _WIV_X * self.radius * delta_lon * math.cos(theta) + self.false_easting
        y = _WIV_Y * self.radius * math.sin(theta) + self.false_northing
        return x, y

    def inverse(self, x: float, y: float) -> tuple[float, float]:
        """Map easting and northing in metres to longitude and latitude."""
        x -= self.false_easting
        y -= self.false_northing
        ratio = y / (_WIV_Y * self.radius)
        if abs(ratio) > 1.0:
            raise ProjectionError("Point lies outside the projection")
        theta = math.asin(ratio)
        lon = adjust_lon(
            self.lon_center + x / (_WIV_X * self.radius * math.cos(theta))
        )
        lat = asinz((2.0 * theta + math.sin(2.0 * theta)) / _WIV_CON)
        return lon, lat


class WagnerVII:
    """Wagner VII mapping between radians and metres."""

    def __init__(
        self,
        radius: float,
        center_lon: float,
        false_easting: float,
        false_northing: float,
    ) -> None:
        self.radius = radius
        self.lon_center = center_lon
        self.false_easting = false_easting
        self.false_northing = false_northing

    def forward(self, lon: float, lat: float) -> tuple[float, float]:
        """Map longitude and latitude in radians to easting and northing."""
        delta_lon = adjust_lon(lon - self.lon_center)
        sin_lon = math.sin(delta_lon / 3.0)
        cos_lon = math.cos(delta_lon / 3.0)
        s = _WVII_S * math.sin(lat)
        c0 = math.sqrt(1 - s * s)
        c1 = math.sqrt(2.0 / (1.0 + c0 * cos_lon))
        x = _WVII_X * self.radius * c0 * c1 * sin_lon + self.false_easting
        y = _WVII_Y * self.radius * s * c1 + self.false_northing
        return x, y

    def inverse(self, x: float, y: float) -> tuple[float, float]:
        """Map easting and northing in metres to longitude and latitude."""
        x -= self.false_easting
        y -= self.false_northing
        t1 = (x / _WVII_X) ** 2
        t2 = (y / _WVII_Y) ** 2
        p = math.sqrt(t1 + t2)
        if p == 0.0:
            return self.lon_center, 0.0
        c = 2.0 * asinz(p / (2.0 * self.radius))
        lat = asinz(y * math.sin(c) / (_WVII_Y * _WVII_S * p))
        lon = adjust_lon(
            self.lon_center + 3.0 * math.atan2(x * math.tan(c), _WVII_X * p)
        )
        return lon, lat