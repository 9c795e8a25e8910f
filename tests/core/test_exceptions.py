"""
Tests for the pygfxmath exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyGfxMathError)
    - Builtin compatibility (IndexError, TypeError) where documented
    - Diagnostic attributes and their None defaults
"""

import pytest

from pygfxmath.core.exceptions import (
    DegenerateGeometryError,
    DimensionError,
    IndexOutOfRangeError,
    NumericalError,
    PyGfxMathError,
    SingularMatrixError,
    UnitMismatchError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyGfxMathError."""

    @pytest.mark.parametrize("exc_type", [
        ValidationError,
        DimensionError,
        IndexOutOfRangeError,
        UnitMismatchError,
        NumericalError,
        SingularMatrixError,
        DegenerateGeometryError,
    ])
    def test_catchable_as_base(self, exc_type):
        with pytest.raises(PyGfxMathError):
            raise exc_type("failed")

    def test_dimension_error_is_validation_error(self):
        assert issubclass(DimensionError, ValidationError)

    def test_index_error_compatibility(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("out of range")

    def test_unit_mismatch_is_type_error(self):
        with pytest.raises(TypeError):
            raise UnitMismatchError("radians vs degrees")

    def test_numerical_errors_are_not_validation_errors(self):
        assert not issubclass(SingularMatrixError, ValidationError)
        assert not issubclass(DegenerateGeometryError, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_singular_matrix_attributes(self):
        err = SingularMatrixError("singular", matrix_name="Matrix[3, 3]",
                                  determinant=0.0, threshold=1e-12)
        assert err.matrix_name == "Matrix[3, 3]"
        assert err.determinant == 0.0
        assert err.threshold == 1e-12
        assert str(err) == "singular"

    def test_singular_matrix_defaults(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.determinant is None
        assert err.threshold is None

    def test_index_out_of_range_attributes(self):
        err = IndexOutOfRangeError("bad", index=5, bounds=(3,))
        assert err.index == 5
        assert err.bounds == (3,)

    def test_unit_mismatch_attributes(self):
        err = UnitMismatchError("mixed", left_unit="radians", right_unit="degrees")
        assert err.left_unit == "radians"
        assert err.right_unit == "degrees"

    def test_degenerate_geometry_reason(self):
        err = DegenerateGeometryError("parallel", reason="parallel_up_vector")
        assert err.reason == "parallel_up_vector"
        assert DegenerateGeometryError("x").reason is None
