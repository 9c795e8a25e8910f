"""Extents: width, height and (for Size[3]) depth."""

from __future__ import annotations

import numpy as np

from pygfxmath.core.shaped import component
from pygfxmath.geometry._coordinates import Coordinates


class _Extent1:
    __slots__ = ()
    width = component(0)


class _Extent2(_Extent1):
    __slots__ = ()
    height = component(1)


class _Extent3(_Extent2):
    __slots__ = ()
    depth = component(2)


class Size(Coordinates, family=True):
    """
    Immutable N-dimensional extent.

    Supports size +/- size and scaling by a scalar.
    """

    __slots__ = ()

    @classmethod
    def _specialization_bases(cls, shape):
        (n,) = shape
        return ({1: _Extent1, 2: _Extent2}.get(n, _Extent3),)

    def __add__(self, other):
        rhs = self._coordinates_of(other, Size, '+')
        if rhs is None:
            return NotImplemented
        return self._wrap(self._data + rhs)

    def __sub__(self, other):
        rhs = self._coordinates_of(other, Size, '-')
        if rhs is None:
            return NotImplemented
        return self._wrap(self._data - rhs)


Size2 = Size[2]
Size3 = Size[3]
Size2f = Size[2, np.float32]
Size2i = Size[2, np.int64]
