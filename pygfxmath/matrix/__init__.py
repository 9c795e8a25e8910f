"""
Matrix module.

Fixed-size row-major matrices, square-matrix algebra (determinant,
minors, cofactors, adjugate, inverse) and 2D/3D transform factories.

Public API:
    Matrix          - Shape-parametric matrix type (Matrix[R, C])
    Matrix2/3/4     - Square float64 aliases (f: float32)

Transform convention: column vectors, M * v, translation in the last
column; see pygfxmath.matrix.transforms.
"""

from pygfxmath.matrix.matrix import (
    Matrix,
    Matrix2,
    Matrix3,
    Matrix4,
    Matrix2f,
    Matrix3f,
    Matrix4f,
)

__all__ = [
    "Matrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "Matrix2f",
    "Matrix3f",
    "Matrix4f",
]
