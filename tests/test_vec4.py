import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from intvec import Vec2u, Vec3i, Vec3u, Vec4i, Vec4u
from intvec.errors import ComponentIndexError


def test_unit_vectors():
    assert Vec4i.unit_x() == Vec4i(1, 0, 0, 0)
    assert Vec4i.unit_y() == Vec4i(0, 1, 0, 0)
    assert Vec4i.unit_z() == Vec4i(0, 0, 1, 0)
    assert Vec4i.unit_w() == Vec4i(0, 0, 0, 1)
    assert sum(Vec4u.unit_w()) == 1


def test_dot_and_magnitude():
    a = Vec4i(1, 2, 3, 4)
    b = Vec4i(-1, 0, 2, 1)
    assert a.dot(b) == -1 + 0 + 6 + 4
    assert a.dot(b) == b.dot(a)
    assert a.mag_sq() == 30
    assert a.mag() == 5
    assert Vec4u(2, 2, 2, 2).mag() == 4


def test_dot_rejects_other_kind():
    with pytest.raises(TypeError):
        Vec4i.one().dot(Vec4u.one())


def test_arithmetic():
    a = Vec4i(8, -6, 4, 2)
    b = Vec4i(2, 3, -4, 1)
    assert a + b == Vec4i(10, -3, 0, 3)
    assert a - b == Vec4i(6, -9, 8, 1)
    assert a * b == Vec4i(16, -18, -16, 2)
    assert a / b == Vec4i(4, -2, -1, 2)
    assert a / 2 == Vec4i(4, -3, 2, 1)
    assert -1 * a == -a


def test_in_place_arithmetic():
    v = Vec4u(1, 2, 3, 4)
    v += Vec4u.broadcast(1)
    v *= 3
    v -= Vec4u(0, 0, 0, 15)
    v /= Vec4u(2, 3, 4, 5)
    assert v == Vec4u(3, 3, 3, 0)
    v *= Vec4u(5, 5, 5, 5)
    v /= 5
    assert v == Vec4u(3, 3, 3, 0)


def test_reflect():
    v = Vec4i(1, 2, -3, 4)
    n = Vec4i.unit_z()
    assert v.reflected(n) == Vec4i(1, 2, 3, 4)
    v.reflect(n)
    assert v == Vec4i(1, 2, 3, 4)


def test_narrowing():
    v = Vec4u(2, 4, 6, 2)
    assert v.xyz() == Vec3u(2, 4, 6)
    assert v.xy() == Vec2u(2, 4)
    assert Vec3u.from_homogeneous_point(v) == Vec3u(1, 2, 3)
    assert Vec3u.from_homogeneous_vector(v) == Vec3u(2, 4, 6)


def test_round_trip_through_vec3():
    v = Vec3i(-5, 6, -7)
    assert v.into_homogeneous_point().xyz() == v


def test_component_utilities():
    v = Vec4i(4, -8, 15, 16)
    assert v.component_max() == 16
    assert v.component_min() == -8
    assert v.map(lambda c: c // 2) == Vec4i(2, -4, 7, 8)
    assert v.clamped(Vec4i.broadcast(0), Vec4i.broadcast(10)) == Vec4i(4, 0, 10, 10)
    assert v.mul_add(Vec4i.one(), Vec4i.unit_w()) == Vec4i(4, -8, 15, 17)


def test_indexing():
    v = Vec4i(1, 2, 3, 4)
    assert [v[i] for i in range(4)] == [1, 2, 3, 4]
    v[3] = -1
    assert v.w == -1
    for bad in (4, 5, 100, -1):
        with pytest.raises(ComponentIndexError):
            v[bad]


def test_str_and_repr():
    assert str(Vec4u(1, 2, 3, 4)) == "<1, 2, 3, 4>"
    assert repr(Vec4i(1, 2, 3, -4)) == "Vec4i(x=1, y=2, z=3, w=-4)"
