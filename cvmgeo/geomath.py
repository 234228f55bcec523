"""Shared constants and helper functions for the map projection code."""

from __future__ import annotations

import math
from enum import IntEnum

PI = 3.141592653589793238
HALF_PI = PI * 0.5
TWO_PI = PI * 2.0
EPSLN = 1.0e-10
R2D = 57.2957795131
D2R = 1.745329251994328e-2
S2R = 4.848136811095359e-6

COEFCT = 15
PROJCT = 31
DATMCT = 20
MAXPROJ = 30
MAXUNIT = 5


class ProjectionError(Exception):
    """Raised when a projection computation or setup fails.

    ``code`` carries the numeric error code of the failing routine, if any.
    """

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class ProjectionCode(IntEnum):
    """Numeric identifiers of the supported projection systems."""

    GEO = 0
    UTM = 1
    SPCS = 2
    ALBERS = 3
    LAMCC = 4
    MERCAT = 5
    PS = 6
    POLYC = 7
    EQUIDC = 8
    TM = 9
    STEREO = 10
    LAMAZ = 11
    AZMEQD = 12
    GNOMON = 13
    ORTHO = 14
    GVNSP = 15
    SNSOID = 16
    EQRECT = 17
    MILLER = 18
    VGRINT = 19
    HOM = 20
    ROBIN = 21
    SOM = 22
    ALASKA = 23
    GOOD = 24
    MOLL = 25
    IMOLL = 26
    HAMMER = 27
    WAGIV = 28
    WAGVII = 29
    OBEQA = 30
    USDEF = 99


def sign(x: float) -> int:
    """Return -1 for negative values and 1 otherwise."""
    if x < 0.0:
        return -1
    return 1


def adjust_lon(x: float) -> float:
    """Bring a longitude in radians into the range [-PI, PI]."""
    if math.isnan(x) or math.isinf(x):
        return x
    if abs(x) <= PI:
        return x
    x = math.fmod(x, TWO_PI)
    while abs(x) > PI:
        x -= sign(x) * TWO_PI
    return x


def asinz(con: float) -> float:
    """Arc sine that clamps its argument to [-1, 1] first."""
    if abs(con) > 1.0:
        con = 1.0 if con > 1.0 else -1.0
    return math.asin(con)


def e0fn(x: float) -> float:
    """First meridian-distance series coefficient for eccentricity squared x."""
    return 1.0 - 0.25 * x * (1.0 + x / 16.0 * (3.0 + 1.25 * x))


def e1fn(x: float) -> float:
    """Second meridian-distance series coefficient."""
    return 0.375 * x * (1.0 + 0.25 * x * (1.0 + 0.46875 * x))


def e2fn(x: float) -> float:
    """Third meridian-distance series coefficient."""
    return 0.05859375 * x * x * (1.0 + 0.75 * x)


def e3fn(x: float) -> float:
    """Fourth meridian-distance series coefficient."""
    return x * x * x * (35.0 / 3072.0)


def mlfn(e0: float, e1: float, e2: float, e3: float, phi: float) -> float:
    """Meridian distance factor for latitude ``phi`` (radians)."""
    return (
        e0 * phi
        - e1 * math.sin(2.0 * phi)
        + e2 * math.sin(4.0 * phi)
        - e3 * math.sin(6.0 * phi)
    )