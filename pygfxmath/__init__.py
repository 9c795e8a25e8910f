"""
pygfxmath: fixed-size linear algebra for 2D/3D graphics.

Shape-typed vectors and matrices, unit-tagged angles, and the transform
and projection factories a renderer needs.

Example:
    >>> from pygfxmath import Matrix4, Vector4, Vector3
    >>> m = Matrix4.translate(Vector3(-16, -16, 0))
    >>> m * Vector4(0, 32, 0, 1)
    Vector[4](-16.0, 16.0, 0.0, 1.0)
"""

__version__ = "0.1.0"

from pygfxmath.core.exceptions import (
    PyGfxMathError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    UnitMismatchError,
    NumericalError,
    SingularMatrixError,
    DegenerateGeometryError,
)
from pygfxmath.angle import Angle, AngleUnit, Degrees, Radians, convert_angle
from pygfxmath.vector import (
    Vector,
    Vector2,
    Vector3,
    Vector4,
    Vector2f,
    Vector3f,
    Vector4f,
    Vector2i,
    Vector3i,
    Vector4i,
    ColorRGB,
    ColorRGBA,
    ColorfRGB,
    ColorfRGBA,
    Swizzle,
    SWIZZLE_X,
    SWIZZLE_Y,
    SWIZZLE_Z,
    SWIZZLE_W,
    SWIZZLE_R,
    SWIZZLE_G,
    SWIZZLE_B,
    SWIZZLE_A,
    SWIZZLE_ZERO,
    SWIZZLE_ONE,
)
from pygfxmath.geometry import Point, Size, Rectangle
from pygfxmath.matrix import (
    Matrix,
    Matrix2,
    Matrix3,
    Matrix4,
    Matrix2f,
    Matrix3f,
    Matrix4f,
)

__all__ = [
    "__version__",
    # Exceptions
    "PyGfxMathError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "UnitMismatchError",
    "NumericalError",
    "SingularMatrixError",
    "DegenerateGeometryError",
    # Angles
    "Angle",
    "AngleUnit",
    "Degrees",
    "Radians",
    "convert_angle",
    # Vectors
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "Vector2f",
    "Vector3f",
    "Vector4f",
    "Vector2i",
    "Vector3i",
    "Vector4i",
    "ColorRGB",
    "ColorRGBA",
    "ColorfRGB",
    "ColorfRGBA",
    "Swizzle",
    "SWIZZLE_X",
    "SWIZZLE_Y",
    "SWIZZLE_Z",
    "SWIZZLE_W",
    "SWIZZLE_R",
    "SWIZZLE_G",
    "SWIZZLE_B",
    "SWIZZLE_A",
    "SWIZZLE_ZERO",
    "SWIZZLE_ONE",
    # Geometry
    "Point",
    "Size",
    "Rectangle",
    # Matrices
    "Matrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "Matrix2f",
    "Matrix3f",
    "Matrix4f",
]
