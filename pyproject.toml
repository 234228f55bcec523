[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cvmgeo"
version = "0.1.0"
description = "Spherical map projections, unit and spheroid tables, and voxet header and volume reading for velocity models"
requires-python = ">=3.10"
dependencies = []
keywords = ["projection", "van der grinten", "wagner", "space oblique mercator", "voxet", "velocity model", "gis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cvmgeo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
