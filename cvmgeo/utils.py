"""Small numeric helpers and shared enumerations for model queries."""

from __future__ import annotations

import math
import sys
from enum import IntEnum

NIL = -999.25
CMLEN = 256

UCVM_SOURCE_NONE = -1
UCVM_SOURCE_CRUST = -2
UCVM_SOURCE_GTL = -3


class ByteOrder(IntEnum):
    """Byte order of binary data."""

    LSB = 0
    MSB = 1


class UcvmCode(IntEnum):
    """Result codes of model queries."""

    SUCCESS = 0
    ERROR = 1
    DATAGAP = 2
    NODATA = 3


class UcvmDomain(IntEnum):
    """Domains for query points."""

    NONE = 0
    GTL = 1
    INTERP = 2
    CRUST = 3


class UcvmParam(IntEnum):
    """Settable model parameters."""

    QUERY_MODE = 1
    IFUNC_ZRANGE = 2
    MODEL_CONF = 3


class CoordType(IntEnum):
    """Coordinate query modes."""

    GEO_DEPTH = 0
    GEO_ELEV = 1


class ModelParam(IntEnum):
    """Internal model parameters."""

    FORCE_DEPTH_ABOVE_SURF = 0


def system_endian() -> ByteOrder:
    """Return the byte order of the running machine."""
    return ByteOrder.LSB if sys.byteorder == "little" else ByteOrder.MSB


def minf(v1: float, v2: float) -> float:
    """Return the smaller of two values, preferring ``v2`` on ties."""
    return v1 if v1 < v2 else v2


def interpolate(v1: float, v2: float, ratio: float) -> float:
    """Linearly interpolate between ``v1`` (ratio 0) and ``v2`` (ratio 1)."""
    return ratio * v2 + v1 * (1 - ratio)


def dist_2d(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points in the plane."""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)