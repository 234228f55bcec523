"""Conversion factors between linear and angular units."""

from __future__ import annotations

from enum import IntEnum

from .geomath import MAXUNIT, ProjectionError


class Unit(IntEnum):
    """Unit codes."""

    RADIANS = 0
    US_FEET = 1
    METERS = 2
    SECONDS = 3
    DEGREES = 4
    INTERNATIONAL_FEET = 5


class UnitError(ProjectionError, ValueError):
    """Raised for unknown or incompatible unit codes."""


_FACTORS = (
    (1.0, 0.0, 0.0, 206264.8062470963, 57.29577951308231, 0.0),
    (0.0, 1.0, 0.3048006096012192, 0.0, 0.0, 1.000002000004),
    (0.0, 3.280833333333333, 1.0, 0.0, 0.0, 3.280839895013124),
    (0.484813681109536e-5, 0.0, 0.0, 1.0, 0.27777777777778e-3, 0.0),
    (0.0174532925199433, 0.0, 0.0, 3600.0, 1.0, 0.0),
    (0.0, 0.999998, 0.3048, 0.0, 0.0, 1.0),
)


def unit_factor(inunit: int, outunit: int) -> float:
    """Return the factor that converts values in ``inunit`` to ``outunit``."""
    if not (0 <= inunit <= MAXUNIT and 0 <= outunit <= MAXUNIT):
        raise UnitError("Illegal source or target unit code", 5)
    factor = _FACTORS[inunit][outunit]
    if factor == 0.0:
        raise UnitError("Incompatible unit codes", 1101)
    return factor