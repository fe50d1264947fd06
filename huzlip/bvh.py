"""Bounding volume hierarchy over a set of points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from huzlip.aabb import AABB
from huzlip.vector3d import Vector3D


@dataclass
class BVHNode:
    """A node holding its bounds, its primitive indices and its children."""

    lower: Vector3D
    upper: Vector3D
    primitive_indices: list[int] = field(default_factory=list)
    left: BVHNode | None = None
    right: BVHNode | None = None

    @property
    def bounds(self) -> AABB:
        return AABB(self.lower, self.upper)


class BVH:
    """Hierarchy whose root bounds every point; primitives are kept at a single leaf."""

    def __init__(self, points: Sequence[Vector3D]) -> None:
        self.root: BVHNode | None = None
        if not points:
            return
        box = AABB()
        for p in points:
            box.expand(p)
        self.root = BVHNode(box.lower, box.upper, list(range(len(points))))

    def query(self, lower: Vector3D, upper: Vector3D) -> list[int]:
        """Return candidate primitive indices from nodes whose bounds overlap the box."""
        region = AABB(lower, upper)
        found: list[int] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            if not node.bounds.overlaps(region):
                continue
            found.extend(node.primitive_indices)
            stack.extend(child for child in (node.right, node.left) if child is not None)
        return found