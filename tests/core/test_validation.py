"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - is_scalar: real numbers only, bool excluded
    - check_array: conversion, optional cast, object rejection
    - check_finite / check_shape
    - check_index: integer type and [0, bound) range
    - check_positive / check_distinct
"""

import numpy as np
import pytest

from pygfxmath.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)
from pygfxmath.core.validation import (
    check_array,
    check_distinct,
    check_finite,
    check_index,
    check_positive,
    check_shape,
    is_scalar,
)


# ═══════════════════════════════════════════════════════════════════════
# is_scalar
# ═══════════════════════════════════════════════════════════════════════


class TestIsScalar:

    @pytest.mark.parametrize("value", [1, 1.5, np.float32(2), np.int64(3)])
    def test_numbers(self, value):
        assert is_scalar(value)

    @pytest.mark.parametrize("value", [True, np.bool_(False), "1", [1], np.array([1.0]), None])
    def test_non_scalars(self, value):
        assert not is_scalar(value)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_array(self):
        result = check_array([1, 2, 3], "values")
        assert isinstance(result, np.ndarray)
        np.testing.assert_array_equal(result, [1, 2, 3])

    def test_cast_to_requested_dtype(self):
        result = check_array([1, 2, 3], "values", dtype=np.float32)
        assert result.dtype == np.float32

    def test_nested_list_to_2d(self):
        assert check_array([[1, 2], [3, 4]], "values").shape == (2, 2)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "values")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "values")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="position"):
            check_array(["a"], "position")


# ═══════════════════════════════════════════════════════════════════════
# check_finite / check_shape
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "values")

    def test_counts_nan_and_inf(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 2 Inf"):
            check_finite(np.array([np.nan, np.inf, -np.inf]), "values")


class TestCheckShape:

    def test_matching_shape(self):
        check_shape(np.zeros((2, 3)), (2, 3), "values")

    def test_mismatch(self):
        with pytest.raises(DimensionError, match=r"expected shape \(3,\)"):
            check_shape(np.zeros(4), (3,), "values")


# ═══════════════════════════════════════════════════════════════════════
# check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_returns_python_int(self):
        result = check_index(np.int64(2), 3, "index")
        assert result == 2
        assert type(result) is int

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_out_of_range(self, index):
        with pytest.raises(IndexOutOfRangeError) as info:
            check_index(index, 3, "index")
        assert info.value.index == index
        assert info.value.bounds == (3,)

    @pytest.mark.parametrize("index", [1.0, True, "0"])
    def test_non_integer(self, index):
        with pytest.raises(IndexOutOfRangeError, match="must be an integer"):
            check_index(index, 3, "index")


# ═══════════════════════════════════════════════════════════════════════
# check_positive / check_distinct
# ═══════════════════════════════════════════════════════════════════════


class TestCheckPositive:

    def test_positive(self):
        check_positive(0.5, "aspect_ratio")

    @pytest.mark.parametrize("value", [0.0, -1.0])
    def test_non_positive(self, value):
        with pytest.raises(ValidationError, match="aspect_ratio must be positive"):
            check_positive(value, "aspect_ratio")

    def test_nan(self):
        with pytest.raises(ValidationError, match="NaN/Inf"):
            check_positive(float("nan"), "aspect_ratio")


class TestCheckDistinct:

    def test_distinct(self):
        check_distinct(0.1, 100.0, ("near_z", "far_z"))

    def test_equal(self):
        with pytest.raises(ValidationError, match="near_z and far_z must differ"):
            check_distinct(1.0, 1.0, ("near_z", "far_z"))
