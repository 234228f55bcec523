"""Van der Grinten projection on the sphere."""

from __future__ import annotations

import math

from .geomath import EPSLN, HALF_PI, PI, adjust_lon, asinz


class VanDerGrinten:
    """Van der Grinten mapping between radians and metres."""

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
        r = self.radius
        dlon = adjust_lon(lon - self.lon_center)

        if abs(lat) <= EPSLN:
            return self.false_easting + r * dlon, self.false_northing

        theta = asinz(2.0 * abs(lat / PI))
        if abs(dlon) <= EPSLN or abs(abs(lat) - HALF_PI) <= EPSLN:
            offset = PI * r * math.tan(0.5 * theta)
            if lat < 0:
                offset = -offset
            return self.false_easting, self.false_northing + offset

        al = 0.5 * abs(PI / dlon - dlon / PI)
        asq = al * al
        sinth = math.sin(theta)
        costh = math.cos(theta)
        g = costh / (sinth + costh - 1.0)
        gsq = g * g
        m = g * (2.0 / sinth - 1.0)
        msq = m * m
        con = PI * r * (
            al * (g - msq)
            + math.sqrt(asq * (g - msq) * (g - msq) - (msq + asq) * (gsq - msq))
        ) / (msq + asq)
        if dlon < 0:
            con = -con
        x = self.false_easting + con
        con = abs(con / (PI * r))
        offset = PI * r * math.sqrt(1.0 - con * con - 2.0 * al * con)
        if lat >= 0:
            y = self.false_northing + offset
        else:
            y = self.false_northing - offset
        return x, y

    def inverse(self, x: float, y: float) -> tuple[float, float]:
        """Map easting and northing in metres to longitude and latitude."""
        x -= self.false_easting
        y -= self.false_northing
        scale = PI * self.radius
        xx = x / scale
        yy = y / scale
        if xx == 0.0 and yy == 0.0:
            return self.lon_center, 0.0

        xys = xx * xx + yy * yy
        c1 = -abs(yy) * (1.0 + xys)
        c2 = c1 - 2.0 * yy * yy + xx * xx
        c3 = -2.0 * c1 + 1.0 + 2.0 * yy * yy + xys * xys
        d = yy * yy / c3 + (
            2.0 * c2 * c2 * c2 / c3 / c3 / c3 - 9.0 * c1 * c2 / c3 / c3
        ) / 27.0
        a1 = (c1 - c2 * c2 / 3.0 / c3) / c3
        m1 = 2.0 * math.sqrt(-a1 / 3.0)
        con = ((3.0 * d) / a1) / m1
        con = max(-1.0, min(1.0, con))
        th1 = math.acos(con) / 3.0
        lat = (-m1 * math.cos(th1 + PI / 3.0) - c2 / 3.0 / c3) * PI
        if y < 0:
            lat = -lat

        if abs(xx) < EPSLN:
            return self.lon_center, lat
        lon = adjust_lon(
            self.lon_center
            + PI
            * (xys - 1.0 + math.sqrt(1.0 + 2.0 * (xx * xx - yy * yy) + xys * xys))
            / 2.0
            / xx
        )
        return lon, lat