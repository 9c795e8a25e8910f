"""
Tests for diagnostic text rendering.
"""

import numpy as np

from pygfxmath import ColorRGB, Matrix, Vector
from pygfxmath.core.formatting import format_scalar


class TestFormatScalar:

    def test_integral_float_drops_decimals(self):
        assert format_scalar(1.0) == "1"

    def test_fraction(self):
        assert format_scalar(0.25) == "0.25"

    def test_integer_types(self):
        assert format_scalar(np.uint8(255)) == "255"


class TestStr:

    def test_vector(self):
        assert str(Vector(1.0, 2.0, 3.0)) == "vec3(1, 2, 3)"

    def test_colour(self):
        assert str(ColorRGB(255, 128, 0)) == "vec3(255, 128, 0)"

    def test_square_matrix(self):
        assert str(Matrix[2, 2].identity()) == "mat2((1, 0), (0, 1))"

    def test_rectangular_matrix(self):
        m = Matrix[3, 2](1, 2, 3, 4, 5, 6)
        assert str(m) == "mat3x2((1, 2), (3, 4), (5, 6))"


class TestRepr:

    def test_vector_repr_names_the_type(self):
        assert repr(Vector(1.0, 2.0)) == "Vector[2](1.0, 2.0)"

    def test_matrix_repr(self):
        assert repr(Matrix[2, 2](1, 2, 3, 4)) == "Matrix[2, 2]([[1.0, 2.0], [3.0, 4.0]])"
