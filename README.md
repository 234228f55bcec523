# cvmgeo

This package provides geodetic helpers for working with community velocity models:
a few map projections, spheroid and unit tables, and readers for voxet header
files and binary property volumes.

## Installation

```
pip install cvmgeo
```

## Projections

Each projection is a class. You give the projection's parameters when you create it.
`forward(lon, lat)` takes radians and returns `(x, y)` in metres. `inverse(x, y)`
takes metres and returns `(lon, lat)` in radians.

```python
import math
from cvmgeo.spheroid import spheroid_axes
from cvmgeo.wagner import WagnerVII

axes = spheroid_axes(19)                      # sphere of radius 6370997 m
proj = WagnerVII(axes.radius, 0.0, 0.0, 0.0)
x, y = proj.forward(math.radians(-118.0), math.radians(34.0))
lon, lat = proj.inverse(x, y)
```

The package provides these projections:

- `cvmgeo.van_der_grinten.VanDerGrinten`
- `cvmgeo.wagner.WagnerIV` and `cvmgeo.wagner.WagnerVII`
- `cvmgeo.som.SpaceObliqueMercatorInverse`, which supports the inverse direction
  only. If `flag` is zero, the orbit comes from the Landsat satellite and path
  numbers.

`WagnerIV.inverse` raises `cvmgeo.geomath.ProjectionError` when the point lies
outside the projection. `SpaceObliqueMercatorInverse.inverse` raises it when the
iteration does not converge in 50 steps.

`cvmgeo.geomath` holds the lower-level helpers: `adjust_lon`, `asinz`, `e0fn`
through `e3fn`, `mlfn` and `sign`. It also has the `ProjectionCode` enumeration
of projection system numbers.

## What is not included

The package does not provide Transverse Mercator, UTM or Stereographic
projections. It has no conversion driver that chains projections together. It
has no command-line tool.

## Units and spheroids

```python
from cvmgeo.units import Unit, unit_factor

unit_factor(Unit.DEGREES, Unit.RADIANS)   # 0.0174532925199433
```

`unit_factor` raises `UnitError` in two cases: when a unit code is unknown, and
when no conversion exists between the two units.

`spheroid_axes(code, parm)` returns a `SpheroidAxes` holding `r_major`, `r_minor`
and `radius`. For a negative code, the axes come from the first two values of
`parm`. A code above 19 falls back to Clarke 1866.

## Voxet files

```python
from cvmgeo.vxio import VoxetHeader, PropertyNumber, load_volume

header = VoxetHeader.load("model.vo")
origin = header.vector("AXIS_O")
dims = header.dimensions("AXIS_N")
name = header.property_name("PROP_FILE", PropertyNumber.VP)
data = load_volume("data", name, 4, dims[0] * dims[1] * dims[2])
```

Header lookups behave as follows:

- A key that is missing raises `KeyError`.
- A malformed entry raises `VoxetError`.
- A header file that cannot be opened, or that has 512 lines or more, raises `VoxetError`.

`load_volume` reads `ncells` cells of `esize` bytes each. On little-endian
machines it reverses the first four bytes of every cell. It raises `VoxetError`
when the file cannot be opened or is too short.

## Small utilities

`cvmgeo.utils` provides `system_endian`, `minf`, `interpolate` and `dist_2d`.
It also has these model query enumerations: `ByteOrder`, `UcvmCode`, `UcvmDomain`,
`UcvmParam`, `CoordType` and `ModelParam`.

## Running the tests

```
pip install cvmgeo[test]
pytest
```