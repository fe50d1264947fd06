from huzlip.bvh import BVH
from huzlip.vector3d import Vector3D

POINTS = [Vector3D(0, 0, 0), Vector3D(1, 2, 3), Vector3D(-1, 4, 2)]


def test_empty_bvh_has_no_root_and_no_results():
    bvh = BVH([])
    assert bvh.root is None
    assert bvh.query(Vector3D(-10, -10, -10), Vector3D(10, 10, 10)) == []


def test_root_bounds_cover_points():
    bvh = BVH(POINTS)
    assert bvh.root.lower == Vector3D(-1, 0, 0)
    assert bvh.root.upper == Vector3D(1, 4, 3)
    assert all(bvh.root.bounds.contains(p) for p in POINTS)


def test_query_overlapping_returns_every_index():
    bvh = BVH(POINTS)
    result = bvh.query(Vector3D(0, 0, 0), Vector3D(1, 1, 1))
    assert sorted(result) == list(range(len(POINTS)))


def test_query_disjoint_returns_nothing():
    bvh = BVH(POINTS)
    assert bvh.query(Vector3D(50, 50, 50), Vector3D(60, 60, 60)) == []


def test_query_result_is_a_copy():
    bvh = BVH(POINTS)
    result = bvh.query(Vector3D(-5, -5, -5), Vector3D(5, 5, 5))
    result.clear()
    assert len(bvh.query(Vector3D(-5, -5, -5), Vector3D(5, 5, 5))) == len(POINTS)