"""
Tests for swizzling.
"""

import pytest

from pygfxmath import (
    SWIZZLE_A,
    SWIZZLE_ONE,
    SWIZZLE_X,
    SWIZZLE_Y,
    SWIZZLE_Z,
    SWIZZLE_ZERO,
    DimensionError,
    ValidationError,
    Vector,
    Vector2,
    Vector3,
    Vector4,
)
from pygfxmath.vector.swizzle import resolve_selectors


class TestSwizzle:

    def test_reorder(self):
        assert Vector2(2, 3).swizzle(SWIZZLE_Y, SWIZZLE_X) == Vector2(3, 2)

    def test_constants_extend_length(self):
        v = Vector2(2, 3).swizzle(SWIZZLE_ZERO, SWIZZLE_ONE, SWIZZLE_X, SWIZZLE_Y)
        assert v == Vector4(0, 1, 2, 3)

    def test_letters(self):
        assert Vector3(1, 2, 3).swizzle("zyx") == Vector3(3, 2, 1)
        assert Vector3(1, 2, 3).swizzle("xy1") == Vector3(1, 2, 1)

    def test_colour_letters(self):
        assert Vector4(1, 2, 3, 4).swizzle("abgr") == Vector4(4, 3, 2, 1)

    def test_repeat_and_shrink(self):
        assert Vector3(1, 2, 3).swizzle("xx") == Vector2(1, 1)

    def test_keeps_scalar_type(self):
        v = Vector[2, "float32"](1, 2)
        assert v.swizzle("yx").dtype == v.dtype

    def test_component_past_end(self):
        with pytest.raises(DimensionError, match="'z'"):
            Vector2(1, 2).swizzle(SWIZZLE_Z)

    def test_alpha_on_vector3(self):
        with pytest.raises(DimensionError):
            Vector3(1, 2, 3).swizzle(SWIZZLE_A)

    def test_no_selectors(self):
        with pytest.raises(DimensionError):
            Vector2(1, 2).swizzle()


class TestResolveSelectors:

    def test_mixed(self):
        assert resolve_selectors((SWIZZLE_X, "y0")) == (SWIZZLE_X, SWIZZLE_Y, SWIZZLE_ZERO)

    def test_uppercase_letters(self):
        assert resolve_selectors(("XY",)) == (SWIZZLE_X, SWIZZLE_Y)

    def test_unknown_letter(self):
        with pytest.raises(ValidationError, match="'q'"):
            resolve_selectors(("xq",))

    def test_unknown_type(self):
        with pytest.raises(ValidationError):
            resolve_selectors((0,))
