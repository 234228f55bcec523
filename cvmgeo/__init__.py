"""Spherical map projections, unit and spheroid tables, and voxet readers for velocity models."""

__version__ = "0.1.0"