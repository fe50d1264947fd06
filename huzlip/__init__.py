"""Geometry, CAD-template and utility toolkit: vectors, boxes, meshes, assemblies and helpers."""

__version__ = "0.1.0"