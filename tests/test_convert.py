import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from intvec import (
    ElementKind, Vec2i, Vec2u, Vec3i, Vec3u, Vec4i, Vec4u,
    convert, family, narrow, resize, widen,
)


def test_family():
    assert family(ElementKind.U32) == (Vec2u, Vec3u, Vec4u)
    assert family(ElementKind.I32) == (Vec2i, Vec3i, Vec4i)


def test_narrow_truncates():
    assert narrow(Vec3u(1, 2, 3)) == Vec2u(1, 2)
    assert narrow(Vec4i(1, -2, 3, -4)) == Vec3i(1, -2, 3)
    with pytest.raises(TypeError):
        narrow(Vec2u(1, 2))


def test_widen_zero_fills():
    assert widen(Vec2i(-1, 2)) == Vec3i(-1, 2, 0)
    assert widen(Vec3u(1, 2, 3)) == Vec4u(1, 2, 3, 0)
    with pytest.raises(TypeError):
        widen(Vec4u.one())


def test_resize_any_dimension():
    assert resize(Vec4u(1, 2, 3, 4), 2) == Vec2u(1, 2)
    assert resize(Vec2i(5, 6), 4) == Vec4i(5, 6, 0, 0)
    assert resize(Vec3i(1, 2, 3), 3) == Vec3i(1, 2, 3)
    with pytest.raises(TypeError):
        resize((1, 2), 3)


def test_narrow_is_not_homogeneous_divide():
    v = Vec4i(2, 4, 6, 2)
    assert narrow(v) == Vec3i(2, 4, 6)
    assert Vec3i.from_homogeneous_point(v) == Vec3i(1, 2, 3)


def test_convert_to_target_class():
    assert convert(Vec3i(1, 2, 3), Vec2i) == Vec2i(1, 2)
    assert convert(Vec2u(1, 2), Vec4u) == Vec4u(1, 2, 0, 0)


def test_convert_never_mixes_kinds():
    with pytest.raises(TypeError):
        convert(Vec3i(1, 2, 3), Vec3u)
    with pytest.raises(TypeError):
        convert(Vec3i(1, 2, 3), int)
