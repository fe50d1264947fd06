"""Axis-aligned bounding boxes."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from huzlip.vector3d import Vector3D

_BIG = sys.float_info.max


@dataclass
class AABB:
    """Box given by its lower and upper corners; the default box is empty."""

    lower: Vector3D = field(default_factory=lambda: Vector3D(_BIG, _BIG, _BIG))
    upper: Vector3D = field(default_factory=lambda: Vector3D(-_BIG, -_BIG, -_BIG))

    def _expand_point(self, p: Vector3D) -> None:
        self.lower = Vector3D(min(self.lower.x, p.x), min(self.lower.y, p.y), min(self.lower.z, p.z))
        self.upper = Vector3D(max(self.upper.x, p.x), max(self.upper.y, p.y), max(self.upper.z, p.z))

    def expand(self, item: Vector3D | AABB) -> None:
        """Grow the box to include a point or another box."""
        if isinstance(item, AABB):
            self._expand_point(item.lower)
            self._expand_point(item.upper)
        else:
            self._expand_point(item)

    def overlaps(self, other: AABB) -> bool:
        """True if the two boxes intersect (touching counts)."""
        return all(
            lo <= o_hi and hi >= o_lo
            for lo, hi, o_lo, o_hi in zip(self.lower, self.upper, other.lower, other.upper)
        )

    def contains(self, point: Vector3D) -> bool:
        """True if the point lies inside or on the box."""
        return all(lo <= p <= hi for p, lo, hi in zip(point, self.lower, self.upper))