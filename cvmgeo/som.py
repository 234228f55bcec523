"""Inverse Space Oblique Mercator projection."""

from __future__ import annotations

import math

from .geomath import D2R, PI, ProjectionError, adjust_lon

LANDSAT_RATIO = 0.5201613

_MAX_ITER = 50


class SpaceObliqueMercatorInverse:
    """Space Oblique Mercator mapping from metres to radians.

    With ``flag`` zero the orbit is taken from the Landsat satellite and path
    numbers; otherwise ``alf``, ``lon`` and ``time`` (minutes per revolution)
    describe it directly.
    """

    def __init__(
        self,
        r_major: float,
        r_minor: float,
        satnum: int,
        path: int,
        alf: float,
        lon: float,
        false_easting: float,
        false_northing: float,
        time: float,
        start: float,
        flag: int,
    ) -> None:
        self.false_easting = false_easting
        self.false_northing = false_northing
        self.a = r_major
        self.es = 1.0 - (r_minor / r_major) ** 2
        self.satnum = satnum
        self.path = path

        if flag != 0:
            self.alf = alf
            self.lon_center = lon
            self.p21 = time / 1440.0
            self.start = start
        else:
            if satnum < 4:
                self.alf = 99.092 * D2R
                self.p21 = 103.2669323 / 1440.0
                self.lon_center = (128.87 - (360.0 / 251.0 * path)) * D2R
            else:
                self.alf = 98.2 * D2R
                self.p21 = 98.8841202 / 1440.0
                self.lon_center = (129.30 - (360.0 / 233.0 * path)) * D2R
            self.start = 0.0

        es = self.es
        ca = math.cos(self.alf)
        if abs(ca) < 1.0e-9:
            ca = 1.0e-9
        self.ca = ca
        self.sa = math.sin(self.alf)
        e2c = es * ca * ca
        e2s = es * self.sa * self.sa
        w = (1.0 - e2c) / (1.0 - es)
        self.w = w * w - 1.0
        one_es = 1.0 - es
        self.q = e2s / one_es
        self.t = (e2s * (2.0 - es)) / (one_es * one_es)
        self.u = e2c / one_es
        self.xj = one_es * one_es * one_es

        # Simpson's rule over 0..90 degrees in 9-degree steps.
        weights = [(0.0, 1.0)]
        weights += [(float(d), 4.0) for d in range(9, 82, 18)]
        weights += [(float(d), 2.0) for d in range(18, 73, 18)]
        weights.append((90.0, 1.0))
        sums = [0.0] * 5
        for dlam, weight in weights:
            for index, value in enumerate(self._series(dlam)):
                sums[index] += weight * value
        sumb, suma2, suma4, sumc1, sumc3 = sums
        self.a2 = suma2 / 30.0
        self.a4 = suma4 / 60.0
        self.b = sumb / 30.0
        self.c1 = sumc1 / 15.0
        self.c3 = sumc3 / 45.0

    def _s(self, angle: float) -> float:
        sdsq = math.sin(angle) ** 2
        return (
            self.p21 * self.sa * math.cos(angle)
            * math.sqrt((1.0 + self.t * sdsq) / ((1.0 + self.w * sdsq) * (1.0 + self.q * sdsq)))
        )

    def _series(self, dlam: float) -> tuple[float, float, float, float, float]:
        """Return the b, a2, a4, c1 and c3 series terms at ``dlam`` degrees."""
        dlam = dlam * 0.0174532925
        sdsq = math.sin(dlam) ** 2
        s = self._s(dlam)
        q, w, xj = self.q, self.w, self.xj
        h = math.sqrt((1.0 + q * sdsq) / (1.0 + w * sdsq)) * (
            ((1.0 + w * sdsq) / ((1.0 + q * sdsq) * (1.0 + q * sdsq))) - self.p21 * self.ca
        )
        sq = math.sqrt(xj * xj + s * s)
        fb = (h * xj - s * s) / sq
        fc = s * (h + xj) / sq
        return (
            fb,
            fb * math.cos(2.0 * dlam),
            fb * math.cos(4.0 * dlam),
            fc * math.cos(dlam),
            fc * math.cos(3.0 * dlam),
        )

    def inverse(self, x: float, y: float) -> tuple[float, float]:
        """Map projection coordinates in metres to longitude and latitude.

        ``x`` is the along-track coordinate, offset by the false northing;
        ``y`` is the cross-track coordinate, offset by the false easting.
        """
        along = x - self.false_northing
        across = y - self.false_easting
        a, b, xj = self.a, self.b, self.xj

        tlon = along / (a * b)
        s = 0.0
        for _ in range(_MAX_ITER):
            sav = tlon
            s = self._s(tlon)
            blon = (
                (along / a) + (across / a) * s / xj
                - self.a2 * math.sin(2.0 * tlon) - self.a4 * math.sin(4.0 * tlon)
                - (s / xj) * (self.c1 * math.sin(tlon) + self.c3 * math.sin(3.0 * tlon))
            )
            tlon = blon / b
            if abs(tlon - sav) < 1.0e-9:
                break
        else:
            raise ProjectionError("50 iterations without convergence", 214)

        st = math.sin(tlon)
        defac = math.exp(
            math.sqrt(1.0 + s * s / xj / xj)
            * (across / a - self.c1 * st - self.c3 * math.sin(3.0 * tlon))
        )
        tlat = 2.0 * (math.atan(defac) - (PI / 4.0))

        es, ca, sa, q, u = self.es, self.ca, self.sa, self.q, self.u
        dd = st * st
        if abs(math.cos(tlon)) < 1.0e-7:
            tlon -= 1.0e-7
        bigk = math.sin(tlat)
        bigk2 = bigk * bigk
        xlamt = math.atan(
            ((1.0 - bigk2 / (1.0 - es)) * math.tan(tlon) * ca
             - bigk * sa * math.sqrt((1.0 + q * dd) * (1.0 - bigk2) - bigk2 * u)
             / math.cos(tlon))
            / (1.0 - bigk2 * (1.0 + u))
        )

        sl = 1.0 if xlamt >= 0.0 else -1.0
        scl = 1.0 if math.cos(tlon) >= 0.0 else -1.0
        xlamt -= (PI / 2.0) * (1.0 - scl) * sl
        dlon = xlamt - self.p21 * tlon

        if abs(sa) < 1.0e-7:
            dlat = math.asin(bigk / math.sqrt((1.0 - es) * (1.0 - es) + es * bigk2))
        else:
            dlat = math.atan(
                (math.tan(tlon) * math.cos(xlamt) - ca * math.sin(xlamt))
                / ((1.0 - es) * sa)
            )
        return adjust_lon(dlon + self.lon_center), dlat