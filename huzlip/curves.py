"""Abstract curves and surfaces, and curve tessellation."""

from __future__ import annotations

from abc import ABC, abstractmethod

from huzlip.mesh import Mesh
from huzlip.vector3d import Vector3D


class Curve(ABC):
    """A parametric curve."""

    @abstractmethod
    def discretize(self, segments: int) -> list[Vector3D]:
        """Return sample points along the curve."""

    @abstractmethod
    def eval(self, t: float) -> Vector3D:
        """Return the point at parameter t."""


class Surface(ABC):
    """A parametric surface."""

    @abstractmethod
    def eval(self, u: float, v: float) -> Vector3D:
        """Return the point at parameters (u, v)."""

    @abstractmethod
    def discretize(self, u_segments: int, v_segments: int) -> list[list[Vector3D]]:
        """Return a grid of sample points over the surface."""


def tessellate_curve(curve: Curve, segments: int) -> Mesh:
    """Build a polyline mesh: one two-vertex face per consecutive pair of samples."""
    points = list(curve.discretize(segments))
    faces = [[i - 1, i] for i in range(1, len(points))]
    return Mesh(vertices=points, faces=faces)