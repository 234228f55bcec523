"""Selection of ellipsoid axes from a spheroid code or explicit parameters."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import sqrt
from typing import Sequence

from .geomath import DATMCT

logger = logging.getLogger(__name__)

MAJOR_AXES = (
    6378206.4, 6378249.145, 6377397.155, 6378157.5,
    6378388.0, 6378135.0, 6377276.3452, 6378145.0,
    6378137.0, 6377563.396, 6377304.063, 6377340.189,
    6378137.0, 6378155.0, 6378160.0, 6378245.0,
    6378270.0, 6378166.0, 6378150.0, 6370997.0,
)

MINOR_AXES = (
    6356583.8, 6356514.86955, 6356078.96284, 6356772.2,
    6356911.94613, 6356750.519915, 6356075.4133,
    6356759.769356, 6356752.31414, 6356256.91,
    6356103.039, 6356034.448, 6356752.314245,
    6356773.3205, 6356774.719, 6356863.0188,
    6356794.343479, 6356784.283666, 6356768.337303,
    6370997.0,
)

SPHERE_RADIUS = MAJOR_AXES[DATMCT - 1]


@dataclass(frozen=True)
class SpheroidAxes:
    """Semi-major axis, semi-minor axis and sphere radius in metres."""

    r_major: float
    r_minor: float
    radius: float


def spheroid_axes(code: int, parm: Sequence[float] | None = None) -> SpheroidAxes:
    """Return the axes for spheroid ``code``.

    A negative code takes the axes from the first two projection parameters;
    codes above 19 fall back to Clarke 1866.
    """
    if code < 0:
        values = list(parm or ()) + [0.0, 0.0]
        t_major = abs(values[0])
        t_minor = abs(values[1])
        if t_major > 0.0:
            if t_minor > 1.0:
                return SpheroidAxes(t_major, t_minor, t_major)
            if t_minor > 0.0:
                return SpheroidAxes(t_major, sqrt(1.0 - t_minor) * t_major, t_major)
            return SpheroidAxes(t_major, t_major, t_major)
        if t_minor > 0.0:
            return SpheroidAxes(MAJOR_AXES[0], MINOR_AXES[0], MAJOR_AXES[0])
        return SpheroidAxes(SPHERE_RADIUS, 6370997.0, SPHERE_RADIUS)

    index = abs(code)
    if index > 19:
        logger.info("Invalid spheroid selection %d; reset to 0", code)
        index = 0
    return SpheroidAxes(MAJOR_AXES[index], MINOR_AXES[index], SPHERE_RADIUS)