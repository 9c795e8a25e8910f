"""Positions in N-dimensional space."""

from __future__ import annotations

import numpy as np

from pygfxmath.core.shaped import component
from pygfxmath.geometry._coordinates import Coordinates
from pygfxmath.geometry.size import Size
from pygfxmath.vector import Vector


class _Position1:
    __slots__ = ()
    x = component(0)


class _Position2(_Position1):
    __slots__ = ()
    y = component(1)


class _Position3(_Position2):
    __slots__ = ()
    z = component(2)


class Point(Coordinates, family=True):
    """
    Immutable N-dimensional position.

    A point moves by a Size or another Point (p + s, p - s) and converts
    to a Vector with to_vector(); Vector[N](point) works as well.
    """

    __slots__ = ()

    @classmethod
    def _specialization_bases(cls, shape):
        (n,) = shape
        return ({1: _Position1, 2: _Position2}.get(n, _Position3),)

    def _offset_operand(self, other, op):
        rhs = self._coordinates_of(other, Point, op)
        if rhs is None:
            rhs = self._coordinates_of(other, Size, op)
        return rhs

    def __add__(self, other):
        rhs = self._offset_operand(other, '+')
        if rhs is None:
            return NotImplemented
        return self._wrap(self._data + rhs)

    def __sub__(self, other):
        rhs = self._offset_operand(other, '-')
        if rhs is None:
            return NotImplemented
        return self._wrap(self._data - rhs)

    def to_vector(self) -> Vector:
        return Vector._specialize(self.shape, self.dtype)._wrap(self._data)

    def vector_to(self, other: Point) -> Vector:
        """Displacement self - other, as a vector."""
        return (self - other).to_vector()


Point2 = Point[2]
Point3 = Point[3]
Point4 = Point[4]
Point2f = Point[2, np.float32]
Point2i = Point[2, np.int64]
Point3f = Point[3, np.float32]
