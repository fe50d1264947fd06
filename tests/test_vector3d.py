import math

import pytest

from huzlip.vector3d import Vector3D


def test_basic_arithmetic():
    v1, v2 = Vector3D(1, 2, 3), Vector3D(4, 5, 6)
    assert (v1 + v2).x == 5
    assert (v1 - v2).y == -3
    assert (v1 * 2).z == 6
    assert (2 * v2).x == 8
    assert v1.dot(v2) == pytest.approx(32)
    assert v1.cross(v2).x == pytest.approx(-3)


def test_default_is_zero():
    assert Vector3D() == Vector3D(0, 0, 0)


def test_indexing_reads_and_writes():
    v = Vector3D(1, 2, 3)
    assert [v[0], v[1], v[2]] == [1, 2, 3]
    v[1] = 7
    assert v.y == 7


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_index_out_of_range(index):
    v = Vector3D(1, 2, 3)
    with pytest.raises(IndexError):
        v[index]
    with pytest.raises(IndexError):
        v[index] = 1.0
    assert tuple(v) == (1, 2, 3)


def test_division_inverts_multiplication():
    v = Vector3D(1.5, -2.0, 4.0)
    assert (v * 3) / 3 == v


def test_cross_is_orthogonal():
    a, b = Vector3D(1, 2, 3), Vector3D(-2, 0.5, 4)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0)
    assert c.dot(b) == pytest.approx(0)


def test_normalized_has_unit_length():
    v = Vector3D(3, -4, 12)
    assert v.normalized().norm() == pytest.approx(1.0)
    assert math.isclose(v.normalized().x * v.norm(), v.x)


def test_normalized_zero_vector_unchanged():
    assert Vector3D().normalized() == Vector3D()


def test_iteration_unpacks():
    assert tuple(Vector3D(1, 2, 3)) == (1, 2, 3)