import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from intvec.errors import ComponentRangeError
from intvec.types.enums import ElementKind
from intvec.utils.helpers import INT32_MAX, INT32_MIN, UINT32_MAX, clamp, trunc_div

U32 = ElementKind.U32
I32 = ElementKind.I32


def test_kind_properties():
    assert U32.size == 4 and I32.size == 4
    assert U32.code == "I" and I32.code == "i"
    assert not U32.signed and I32.signed
    assert (U32.min_value, U32.max_value) == (0, UINT32_MAX)
    assert (I32.min_value, I32.max_value) == (INT32_MIN, INT32_MAX)


def test_wrap_reduces_into_range():
    assert U32.wrap(-1) == UINT32_MAX
    assert U32.wrap(1 << 32) == 0
    assert I32.wrap(INT32_MAX + 1) == INT32_MIN
    assert I32.wrap(UINT32_MAX) == -1
    assert I32.wrap(-5) == -5


def test_wrap_rejects_floats():
    with pytest.raises(TypeError):
        U32.wrap(1.5)


def test_check_rejects_out_of_range():
    assert U32.check(7) == 7
    with pytest.raises(ComponentRangeError):
        U32.check(-1)
    with pytest.raises(ValueError):
        I32.check(INT32_MAX + 1)


def test_mul_add_exact_for_small_values():
    assert I32.mul_add(3, 4, 5) == 17
    assert I32.mul_add(-3, 4, 5) == -7
    assert U32.mul_add(6, 7, 0) == 42


def test_mul_add_wraps_like_multiply_then_add():
    assert U32.mul_add(UINT32_MAX, 2, 3) == 1
    assert I32.mul_add(INT32_MAX, 2, 2) == 0
    for kind in (U32, I32):
        for a, b, c in [(123456, 78901, 5), (INT32_MAX, INT32_MAX, -1), (-40000, 70000, 99)]:
            a, b, c = kind.wrap(a), kind.wrap(b), kind.wrap(c)
            assert kind.mul_add(a, b, c) == kind.wrap(kind.mul(a, b) + c)


def test_div_truncates_toward_zero():
    assert I32.div(-7, 2) == -3
    assert I32.div(7, -2) == -3
    assert I32.div(-7, -2) == 3
    assert U32.div(7, 2) == 3


def test_div_min_by_minus_one_wraps():
    assert I32.div(INT32_MIN, -1) == INT32_MIN


def test_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        U32.div(1, 0)


def test_neg_wraps_for_unsigned():
    assert U32.neg(1) == UINT32_MAX
    assert U32.neg(0) == 0
    assert I32.neg(5) == -5


def test_pack_unpack():
    data = I32.pack([1, -2, 3])
    assert len(data) == 12
    assert I32.unpack(data, 3) == (1, -2, 3)
    with pytest.raises(ValueError):
        I32.unpack(data, 4)


def test_helpers():
    assert trunc_div(-9, 4) == -2
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    # crossed bounds: the upper bound wins
    assert clamp(1, 4, 2) == 2
