"""
Tests for shape specialization and the immutable value base.

Exercised through Vector and Matrix, the public families.
"""

import copy
import pickle

import numpy as np
import pytest

from pygfxmath import DimensionError, Matrix, ValidationError, Vector, Vector3


# ═══════════════════════════════════════════════════════════════════════
# Specialization
# ═══════════════════════════════════════════════════════════════════════


class TestSpecialization:

    def test_cached(self):
        assert Vector[3] is Vector[3]
        assert Vector[3] is Vector3
        assert Matrix[2, 3] is Matrix[2, 3]

    def test_distinct_shapes_are_distinct_types(self):
        assert Vector[3] is not Vector[4]
        assert Vector[3] is not Vector[3, np.float32]
        assert issubclass(Vector[3], Vector)

    def test_names(self):
        assert Vector[3].__name__ == "Vector[3]"
        assert Vector[3, np.float32].__name__ == "Vector[3, float32]"
        assert Matrix[4, 4].__name__ == "Matrix[4, 4]"

    def test_class_attributes(self):
        assert Vector[3].shape == (3,)
        assert Vector[3].dtype == np.float64
        assert Matrix[2, 3].rows == 2
        assert Matrix[2, 3].columns == 3
        assert Matrix[2, 3].size == 6

    @pytest.mark.parametrize("params", [0, -1, 2.5, True])
    def test_rejects_bad_dimensions(self, params):
        with pytest.raises(DimensionError):
            Vector[params]

    def test_rejects_wrong_parameter_count(self):
        with pytest.raises(TypeError):
            Matrix[3]
        with pytest.raises(TypeError):
            Vector[1, 2, 3]

    def test_rejects_non_numeric_dtype(self):
        with pytest.raises(ValidationError, match="numeric"):
            Vector[3, np.str_]

    def test_cannot_respecialize(self):
        with pytest.raises(TypeError, match="already specialized"):
            Vector[3][2]

    def test_shape_only_members(self):
        assert hasattr(Vector[3], "z")
        assert not hasattr(Vector[2], "z")
        assert hasattr(Matrix[3, 3], "determinant")
        assert not hasattr(Matrix[2, 3], "determinant")
        assert hasattr(Matrix[4, 4], "perspective")
        assert not hasattr(Matrix[3, 3], "perspective")
        assert hasattr(Matrix[3, 3], "rotate")
        assert not hasattr(Matrix[2, 2], "translate")


# ═══════════════════════════════════════════════════════════════════════
# Immutability and value semantics
# ═══════════════════════════════════════════════════════════════════════


class TestValueSemantics:

    def test_attributes_are_read_only(self):
        v = Vector(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0
        with pytest.raises(AttributeError):
            v._data = np.zeros(3)

    def test_storage_is_read_only(self):
        v = Vector(1.0, 2.0, 3.0)
        with pytest.raises(ValueError):
            v.data[0] = 5.0

    def test_construction_copies_input(self):
        source = np.array([1.0, 2.0, 3.0])
        v = Vector[3](source)
        source[0] = 99.0
        assert v.x == 1.0

    def test_to_numpy_is_writable_copy(self):
        v = Vector(1.0, 2.0)
        array = v.to_numpy()
        array[0] = 7.0
        assert v.x == 1.0

    def test_numpy_interop(self):
        v = Vector(1.0, 2.0, 3.0)
        np.testing.assert_array_equal(np.asarray(v), [1.0, 2.0, 3.0])
        assert np.asarray(v, dtype=np.float32).dtype == np.float32

    def test_equality_and_hash(self):
        a = Vector(1.0, 2.0)
        b = Vector[2](1, 2)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Vector(1.0, 2.0, 0.0)
        assert len({a, b}) == 1

    def test_different_families_never_equal(self):
        assert Vector(1.0, 2.0, 3.0, 4.0) != Matrix[2, 2](1.0, 2.0, 3.0, 4.0)

    def test_copy_returns_self(self):
        m = Matrix[2, 2].identity()
        assert copy.copy(m) is m
        assert copy.deepcopy(m) is m

    def test_pickle_round_trip(self):
        m = Matrix[2, 3, np.float32](1, 2, 3, 4, 5, 6)
        restored = pickle.loads(pickle.dumps(m))
        assert type(restored) is type(m)
        assert restored == m


class TestIsClose:

    def test_within_tier(self):
        assert Vector(1.0, 2.0).isclose(Vector(1.0, 2.0 + 1e-13))

    def test_outside_tier(self):
        assert not Vector(1.0, 2.0).isclose(Vector(1.0, 2.001))

    def test_explicit_tolerance(self):
        assert Vector(1.0, 2.0).isclose(Vector(1.0, 2.001), atol=1e-2)

    def test_float32_tier_is_looser(self):
        a = Vector[2, np.float32](1.0, 2.0)
        assert a.isclose(Vector[2, np.float32](1.0, 2.000001))

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError):
            Vector(1.0, 2.0).isclose(Vector(1.0, 2.0, 3.0))
