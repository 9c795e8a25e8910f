"""
Shared behaviour of Point and Size: construction from N scalars (or an
aggregate), indexed access, and scalar scaling.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pygfxmath.core.exceptions import DimensionError
from pygfxmath.core.formatting import format_row
from pygfxmath.core.shaped import ShapedValue
from pygfxmath.core.validation import check_array, check_index, is_scalar


class Coordinates(ShapedValue):
    __slots__ = ()
    _ndim = 1

    @classmethod
    def _infer_shape(cls, args):
        if not args:
            raise DimensionError(
                f"cannot infer {cls.__name__} dimensions from no arguments; "
                f"use {cls.__name__}[N]()"
            )
        if len(args) == 1 and not is_scalar(args[0]):
            values = check_array(args[0], 'values')
            if values.ndim != 1:
                raise DimensionError(f"values: expected 1D data, got shape {values.shape}")
            return values.shape
        return (len(args),)

    @classmethod
    def _coerce(cls, args):
        (n,) = cls.shape
        if not args:
            return np.zeros(n, dtype=cls.dtype)
        if len(args) == 1 and not is_scalar(args[0]):
            values = check_array(args[0], 'values', dtype=cls.dtype)
        elif len(args) == n:
            values = check_array(list(args), 'values', dtype=cls.dtype)
        else:
            raise DimensionError(
                f"{cls.__name__} takes 0 or {n} values, got {len(args)}"
            )
        if values.shape != (n,):
            raise DimensionError(
                f"{cls.__name__}: expected {n} values, got shape {values.shape}"
            )
        return values

    def __len__(self) -> int:
        return self.shape[0]

    def __iter__(self):
        return iter(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def at(self, index: int) -> Any:
        """Bounds-checked access; raises IndexOutOfRangeError."""
        return self._data[check_index(index, self.shape[0], 'index')]

    def __mul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._wrap(self._data * other)

    def __truediv__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._wrap(self._data / other)

    def _coordinates_of(self, other: Any, family: type, op: str) -> Any:
        if not isinstance(other, family):
            return None
        if other.shape != self.shape:
            raise DimensionError(
                f"'{op}' between {type(self).__name__} and {type(other).__name__}"
            )
        return other._data

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self._data.tolist())
        return f"{type(self).__name__}({values})"

    def __str__(self) -> str:
        return self._family.__name__.lower() + format_row(self._data)
