"""
Geometry helpers.

Plain coordinate containers consumed by the matrix transform factories.

Public API:
    Point       - N-dimensional position (Point[N])
    Size        - N-dimensional extent (Size[N])
    Rectangle   - (top, left, bottom, right) rectangle
"""

from pygfxmath.geometry.point import (
    Point,
    Point2,
    Point3,
    Point4,
    Point2f,
    Point2i,
    Point3f,
)
from pygfxmath.geometry.size import Size, Size2, Size3, Size2f, Size2i
from pygfxmath.geometry.rectangle import Rectangle

__all__ = [
    "Point",
    "Point2",
    "Point3",
    "Point4",
    "Point2f",
    "Point2i",
    "Point3f",
    "Size",
    "Size2",
    "Size3",
    "Size2f",
    "Size2i",
    "Rectangle",
]
