"""
Axis-aligned rectangles in screen orientation (y grows downwards).
"""

from __future__ import annotations

from dataclasses import dataclass

from pygfxmath.core.exceptions import DimensionError, ValidationError
from pygfxmath.core.validation import is_scalar
from pygfxmath.geometry.point import Point
from pygfxmath.geometry.size import Size


def _edges(args: tuple, name: str) -> tuple[float, float, float, float]:
    """Read (top, left, bottom, right) from four scalars or one Size[2]."""
    if len(args) == 1 and isinstance(args[0], Size):
        size = args[0]
        if size.shape != (2,):
            raise DimensionError(f"{name}: expected a Size[2], got {type(size).__name__}")
        return (size.height, size.width, size.height, size.width)
    if len(args) == 4 and all(is_scalar(a) for a in args):
        return tuple(args)
    raise ValidationError(
        f"{name}: expected a Size[2] or four scalars (top, left, bottom, right)"
    )


@dataclass(frozen=True)
class Rectangle:
    """
    Immutable rectangle stored as (top, left, bottom, right).

    A rectangle is valid when both its width and height are positive.
    Operations that move or resize it return a new rectangle.

    Construction:
        Rectangle(top, left, bottom, right)
        Rectangle.from_point_size(Point(x, y), Size(width, height))
    """
    top: float = 0
    left: float = 0
    bottom: float = 0
    right: float = 0

    @classmethod
    def from_point_size(cls, top_left: Point, size: Size) -> Rectangle:
        if top_left.shape != (2,) or size.shape != (2,):
            raise DimensionError(
                f"from_point_size: expected Point[2] and Size[2], got "
                f"{type(top_left).__name__} and {type(size).__name__}"
            )
        return cls(
            top_left.y,
            top_left.x,
            top_left.y + size.height,
            top_left.x + size.width,
        )

    @property
    def width(self):
        return self.right - self.left

    @property
    def height(self):
        return self.bottom - self.top

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def valid(self) -> bool:
        return self.width > 0 and self.height > 0

    def offset(self, size: Size) -> Rectangle:
        """Move by size.width horizontally and size.height vertically."""
        return Rectangle(
            self.top + size.height,
            self.left + size.width,
            self.bottom + size.height,
            self.right + size.width,
        )

    def inset(self, *args) -> Rectangle:
        """
        Shrink each edge towards the centre.

        Accepts one Size[2] (height applied to top/bottom, width to
        left/right) or four scalars (top, left, bottom, right).
        """
        top, left, bottom, right = _edges(args, 'inset')
        return Rectangle(
            self.top + top,
            self.left + left,
            self.bottom - bottom,
            self.right - right,
        )

    def pad(self, *args) -> Rectangle:
        """Grow each edge outwards; the inverse of inset()."""
        top, left, bottom, right = _edges(args, 'pad')
        return self.inset(-top, -left, -bottom, -right)

    def intersection(self, other: Rectangle) -> Rectangle:
        """Overlap of two rectangles; invalid when they do not overlap."""
        return Rectangle(
            max(self.top, other.top),
            max(self.left, other.left),
            min(self.bottom, other.bottom),
            min(self.right, other.right),
        )

    def intersects(self, other: Rectangle) -> bool:
        return self.intersection(other).valid
