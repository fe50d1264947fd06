from huzlip.aabb import AABB
from huzlip.vector3d import Vector3D


def test_default_box_contains_nothing():
    box = AABB()
    assert not box.contains(Vector3D(0, 0, 0))


def test_expand_with_point_makes_it_contained():
    box = AABB()
    p = Vector3D(1, 2, 3)
    box.expand(p)
    assert box.contains(p)
    assert box.lower == p
    assert box.upper == p


def test_expand_with_points_bounds_all():
    points = [Vector3D(1, -2, 3), Vector3D(-4, 5, 0), Vector3D(2, 2, -1)]
    box = AABB()
    for p in points:
        box.expand(p)
    assert all(box.contains(p) for p in points)
    assert box.lower == Vector3D(-4, -2, -1)
    assert box.upper == Vector3D(2, 5, 3)


def test_expand_with_box():
    a = AABB(Vector3D(0, 0, 0), Vector3D(1, 1, 1))
    b = AABB(Vector3D(2, 2, 2), Vector3D(3, 3, 3))
    a.expand(b)
    assert a.lower == Vector3D(0, 0, 0)
    assert a.upper == Vector3D(3, 3, 3)


def test_overlaps_is_symmetric():
    a = AABB(Vector3D(0, 0, 0), Vector3D(2, 2, 2))
    b = AABB(Vector3D(1, 1, 1), Vector3D(3, 3, 3))
    c = AABB(Vector3D(5, 5, 5), Vector3D(6, 6, 6))
    assert a.overlaps(b) and b.overlaps(a)
    assert not a.overlaps(c) and not c.overlaps(a)


def test_touching_boxes_overlap():
    a = AABB(Vector3D(0, 0, 0), Vector3D(1, 1, 1))
    b = AABB(Vector3D(1, 0, 0), Vector3D(2, 1, 1))
    assert a.overlaps(b)


def test_contains_boundary_and_outside():
    box = AABB(Vector3D(0, 0, 0), Vector3D(1, 1, 1))
    assert box.contains(Vector3D(1, 1, 1))
    assert box.contains(Vector3D(0, 0.5, 1))
    assert not box.contains(Vector3D(1, 1, 1.5))