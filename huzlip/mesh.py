"""Polygon mesh with per-vertex adjacency."""

from __future__ import annotations

from dataclasses import dataclass, field

from huzlip.vector3d import Vector3D


@dataclass
class Mesh:
    """Vertices, faces as index lists, and the computed vertex adjacency."""

    vertices: list[Vector3D] = field(default_factory=list)
    faces: list[list[int]] = field(default_factory=list)
    vertex_adjacency: list[list[int]] = field(default_factory=list)

    def clear(self) -> None:
        """Remove all vertices, faces and adjacency."""
        self.vertices.clear()
        self.faces.clear()
        self.vertex_adjacency.clear()

    def compute_adjacency(self) -> None:
        """Rebuild the neighbour list of each vertex from the face edges.

        Edges that refer to a vertex outside the mesh are ignored.
        """
        count = len(self.vertices)
        adjacency: list[list[int]] = [[] for _ in range(count)]
        for face in self.faces:
            for vi, vj in zip(face, face[1:] + face[:1]):
                if 0 <= vi < count and 0 <= vj < count:
                    if vj not in adjacency[vi]:
                        adjacency[vi].append(vj)
                    if vi not in adjacency[vj]:
                        adjacency[vj].append(vi)
        self.vertex_adjacency = adjacency