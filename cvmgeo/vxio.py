"""Reading of voxet header files and their binary property volumes."""

from __future__ import annotations

import os
import re
from enum import IntEnum
from typing import Iterable

from .utils import ByteOrder, system_endian

MAX_PROPERTIES = 512

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_WORD = re.compile(r"\s*(\S+)")


class PropertyNumber(IntEnum):
    """Property numbers used in voxet headers."""

    VP = 1
    TAG = 2
    VS = 3


class VoxetError(Exception):
    """Raised when a voxet header or volume cannot be read."""


def _scan(text: str, kinds: str) -> list:
    """Parse leading fields of ``text`` like scanf with %d, %f and %s.

    Parsing stops at the first field that does not match.
    """
    values: list = []
    pos = 0
    for kind in kinds:
        if kind == "d":
            match = _INT.match(text, pos)
            convert = int
        elif kind == "f":
            match = _FLOAT.match(text, pos)
            convert = float
        else:
            match = _WORD.match(text, pos)
            convert = str
        if match is None:
            break
        values.append(convert(match.group(1)))
        pos = match.end()
    return values


class VoxetHeader:
    """The lines of a voxet header with lookups of its keyed entries."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.lines = [line.rstrip("\n") for line in lines]

    @classmethod
    def load(cls, path: str | os.PathLike) -> "VoxetHeader":
        """Read a header file; it must hold fewer than 512 lines."""
        try:
            with open(path, encoding="latin-1") as handle:
                lines = [line.rstrip("\n") for line in handle]
        except OSError as exc:
            raise VoxetError(f"cannot open voxet header {path}") from exc
        if len(lines) >= MAX_PROPERTIES:
            raise VoxetError(f"voxet header {path} has too many lines")
        return cls(lines)

    def property_key(self, search: str) -> int:
        """Return the number of the PROPERTY line that mentions ``search``."""
        prefix = "PROPERTY "
        for line in self.lines:
            if prefix in line:
                rest = line[len(prefix):]
                if search in rest:
                    values = _scan(rest, "d")
                    if values and values[0]:
                        return values[0]
        raise KeyError(search)

    def vector(self, search: str) -> tuple[float, float, float]:
        """Return the three numbers following the key ``search``."""
        size = len(search)
        for line in self.lines:
            if search in line and size + 1 < len(line) and line[size] == " ":
                values = _scan(line[size + 1:], "fff")
                if len(values) != 3:
                    raise VoxetError(f"malformed vector for {search}")
                return (values[0], values[1], values[2])
        raise KeyError(search)

    def dimensions(self, search: str) -> tuple[int, int, int]:
        """Return the three integers following the key ``search``."""
        for line in self.lines:
            if search in line:
                values = _scan(line[len(search):], "ddd")
                if len(values) != 3:
                    raise VoxetError(f"malformed dimensions for {search}")
                return (values[0], values[1], values[2])
        raise KeyError(search)

    def _property_fields(self, search: str, pnumber: int, kind: str):
        target = int(pnumber)
        for line in self.lines:
            if search in line:
                rest = line[len(search) + 1:]
                values = _scan(rest, "d" + kind)
                if values and values[0] == target:
                    if len(values) != 2:
                        raise VoxetError(f"malformed entry for {search} {target}")
                    return values[1]
        raise KeyError(f"{search} {target}")

    def property_name(self, search: str, pnumber: int) -> str:
        """Return the name given for property ``pnumber`` under ``search``."""
        return self._property_fields(search, pnumber, "s")

    def property_size(self, search: str, pnumber: int) -> int:
        """Return the integer given for property ``pnumber`` under ``search``."""
        return self._property_fields(search, pnumber, "d")

    def property_value(self, search: str, pnumber: int) -> float:
        """Return the number given for property ``pnumber`` under ``search``."""
        return self._property_fields(search, pnumber, "f")


def load_volume(data_dir: str, filename: str, esize: int, ncells: int) -> bytes:
    """Read ``ncells`` big-endian cells of ``esize`` bytes, in native order.

    The first four bytes of every cell are swapped on little-endian machines.
    """
    if esize < 4:
        raise ValueError("element size must be at least 4 bytes")
    path = f"{data_dir}/{filename}"
    want = esize * ncells
    try:
        with open(path, "rb") as handle:
            data = bytearray(handle.read(want))
    except OSError as exc:
        raise VoxetError(f"cannot open volume {path}") from exc
    if len(data) != want:
        raise VoxetError(
            f"Failed to read {ncells} cells of size {esize} from {path} "
            f"(read {len(data) // esize})"
        )
    if system_endian() is ByteOrder.LSB:
        for start in range(0, want, esize):
            data[start:start + 4] = data[start:start + 4][::-1]
    return bytes(data)