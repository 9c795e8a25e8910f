"""
Fixed-length vectors.

``Vector[N]`` is an immutable tuple of exactly N scalars (float64 unless a
scalar type is given: ``Vector[3, np.float32]``). Named accessors exist
only up to the vector's length, and the cross product only on lengths 2
and 3, so ``Vector[2](1, 2).z`` is an AttributeError rather than a silent
out-of-bounds read.

Operators:
    v + w, v - w      element-wise (w may also be a scalar)
    v * s, s * v      scale by a scalar
    v * w             dot product (scalar result)
    v / s, v / w      element-wise division
    v ^ w             cross product (N = 2 or 3 only)
    v * m, m * v      transform by a matrix, see pygfxmath.matrix
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pygfxmath.angle import Angle, Radians
from pygfxmath.core.exceptions import DimensionError
from pygfxmath.core.formatting import format_vector
from pygfxmath.core.shaped import ShapedValue, component
from pygfxmath.core.validation import check_array, check_index, is_scalar
from pygfxmath.vector.swizzle import Swizzle, resolve_selectors


class _Components1:
    __slots__ = ()
    x = component(0, "First component.")
    r = component(0, "First component (colour alias).")


class _Components2(_Components1):
    __slots__ = ()
    y = component(1, "Second component.")
    g = component(1, "Second component (colour alias).")


class _Components3(_Components2):
    __slots__ = ()
    z = component(2, "Third component.")
    b = component(2, "Third component (colour alias).")


class _Components4(_Components3):
    __slots__ = ()
    w = component(3, "Fourth component.")
    a = component(3, "Fourth component (colour alias).")


_COMPONENTS = {1: _Components1, 2: _Components2, 3: _Components3}


class _Cross2:
    __slots__ = ()

    def cross(self, other: Vector) -> Any:
        """
        Z component of the 3D cross product of two planar vectors.

        Positive when other lies counter-clockwise of self.
        """
        rhs = self._vector_operand(other, '^')
        return self._data[0] * rhs[1] - self._data[1] * rhs[0]

    def __xor__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.cross(other)


class _Cross3:
    __slots__ = ()

    def cross(self, other: Vector) -> Vector:
        """Vector perpendicular to both operands (right-handed)."""
        rhs = self._vector_operand(other, '^')
        x1, y1, z1 = self._data
        x2, y2, z2 = rhs
        return self._wrap((
            y1 * z2 - z1 * y2,
            z1 * x2 - x1 * z2,
            x1 * y2 - y1 * x2,
        ))

    def __xor__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.cross(other)


class Vector(ShapedValue, family=True):
    """
    Immutable fixed-length numeric vector.

    Construction:
        Vector[3]()                  # zeros
        Vector[3](2.0)               # every component 2.0
        Vector[3](1, 2, 3)           # explicit components
        Vector[3]([1, 2, 3])         # any aggregate of 3 scalars (or a Point)
        Vector[3](Vector[2](1, 2), 3)
        Vector(1, 2, 3)              # length inferred -> Vector[3]
    """

    __slots__ = ()
    _ndim = 1

    @classmethod
    def _specialization_bases(cls, shape):
        (n,) = shape
        bases = [_COMPONENTS.get(n, _Components4)]
        if n == 2:
            bases.insert(0, _Cross2)
        elif n == 3:
            bases.insert(0, _Cross3)
        return tuple(bases)

    @classmethod
    def _infer_shape(cls, args):
        if not args:
            raise DimensionError(
                "cannot infer a vector length from no arguments; use Vector[N]()"
            )
        if len(args) == 1 and not is_scalar(args[0]):
            values = check_array(args[0], 'values')
            if values.ndim != 1:
                raise DimensionError(f"values: expected 1D data, got shape {values.shape}")
            return values.shape
        if len(args) == 2 and isinstance(args[0], Vector) and is_scalar(args[1]):
            return (args[0].shape[0] + 1,)
        return (len(args),)

    @classmethod
    def _coerce(cls, args):
        (n,) = cls.shape
        if not args:
            return np.zeros(n, dtype=cls.dtype)
        if len(args) == 1:
            value = args[0]
            if is_scalar(value):
                return np.full(n, value, dtype=cls.dtype)
            values = check_array(value, 'values', dtype=cls.dtype)
            if values.shape != (n,):
                raise DimensionError(
                    f"{cls.__name__}: expected {n} components, got shape {values.shape}"
                )
            return values
        if len(args) == 2 and isinstance(args[0], Vector) and is_scalar(args[1]):
            head, tail = args
            if head.shape != (n - 1,):
                raise DimensionError(
                    f"{cls.__name__}: extension needs a vector of length {n - 1}, "
                    f"got {type(head).__name__}"
                )
            return np.append(head._data, tail).astype(cls.dtype)
        if len(args) != n:
            raise DimensionError(
                f"{cls.__name__} takes 0, 1 or {n} components, got {len(args)}"
            )
        return check_array(list(args), 'components', dtype=cls.dtype)

    # Properties

    @classmethod
    def dimensions(cls) -> int:
        return cls.shape[0]

    def __len__(self) -> int:
        return self.shape[0]

    def __iter__(self):
        return iter(self._data)

    def __getitem__(self, index):
        """Unchecked fast path (numpy indexing semantics)."""
        return self._data[index]

    def at(self, index: int) -> Any:
        """
        Bounds-checked component access.

        Raises:
            IndexOutOfRangeError: If index is outside [0, N)
        """
        return self._data[check_index(index, self.shape[0], 'index')]

    @property
    def data(self) -> NDArray[Any]:
        """Read-only view of the storage."""
        return self._data

    # Methods

    def sum(self) -> Any:
        return self._data.sum()

    def mean(self) -> Any:
        return self._data.sum() / self.shape[0]

    def dot(self, other: Vector) -> Any:
        """Sum of element-wise products."""
        return np.dot(self._data, self._vector_operand(other, 'dot'))

    def length_squared(self) -> Any:
        return np.dot(self._data, self._data)

    def length(self) -> Any:
        return np.sqrt(self.length_squared())

    def normalized(self) -> Vector:
        """
        Unit vector in the same direction.

        A zero-length vector normalizes to the zero vector instead of
        propagating NaN.
        """
        length = self.length()
        if length == 0:
            return type(self)()
        return self._wrap(self._data / length)

    def angle(self, other: Vector) -> Angle:
        """
        Unsigned angle between two vectors, in radians.

        NaN when either vector has zero length.
        """
        dot = np.float64(self.dot(other))
        with np.errstate(divide='ignore', invalid='ignore'):
            cosine = dot / np.sqrt(np.float64(self.length_squared()) * np.float64(other.length_squared()))
        return Radians.acos(np.clip(cosine, -1.0, 1.0))

    def swizzle(self, *selectors: Swizzle | str) -> Vector:
        """
        Build a new vector by picking components and/or constants.

        Examples:
            >>> Vector(2.0, 3.0).swizzle(SWIZZLE_Y, SWIZZLE_X)
            Vector[2](3.0, 2.0)
            >>> Vector(2.0, 3.0).swizzle("01xy")
            Vector[4](0.0, 1.0, 2.0, 3.0)

        Raises:
            DimensionError: If a selector indexes past the end of this vector,
                or no selector is given
        """
        resolved = resolve_selectors(selectors)
        if not resolved:
            raise DimensionError("swizzle needs at least one selector")
        (n,) = self.shape
        for selector in resolved:
            if not selector.is_constant and selector.index >= n:
                raise DimensionError(
                    f"swizzle selector '{selector.name}' indexes component "
                    f"{selector.index} of a {n}-component vector"
                )
        values = [
            selector.constant if selector.is_constant else self._data[selector.index]
            for selector in resolved
        ]
        return Vector._specialize((len(values),), self.dtype)._wrap(values)

    # Operators

    def _vector_operand(self, other: Any, op: str) -> NDArray[Any]:
        if not isinstance(other, Vector):
            raise DimensionError(
                f"'{op}' needs a {type(self).__name__}, got {type(other).__name__}"
            )
        if other.shape != self.shape:
            raise DimensionError(
                f"'{op}' between {type(self).__name__} and {type(other).__name__}: "
                f"lengths {self.shape[0]} and {other.shape[0]} differ"
            )
        return other._data

    def _operand(self, other: Any, op: str) -> Any:
        if isinstance(other, Vector):
            return self._vector_operand(other, op)
        if is_scalar(other):
            return other
        return None

    def __add__(self, other):
        rhs = self._operand(other, '+')
        if rhs is None:
            return NotImplemented
        return self._wrap(self._data + rhs)

    def __radd__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._wrap(other + self._data)

    def __sub__(self, other):
        rhs = self._operand(other, '-')
        if rhs is None:
            return NotImplemented
        return self._wrap(self._data - rhs)

    def __rsub__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._wrap(other - self._data)

    def __mul__(self, other):
        if isinstance(other, Vector):
            return self.dot(other)
        if is_scalar(other):
            return self._wrap(self._data * other)
        # Vector * Matrix is resolved by Matrix.__rmul__
        return NotImplemented

    def __rmul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._wrap(other * self._data)

    def __truediv__(self, other):
        rhs = self._operand(other, '/')
        if rhs is None:
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            return self._wrap(self._data / rhs)

    def __neg__(self):
        return self._wrap(-self._data)

    def __pos__(self):
        return self

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self._data.tolist())
        return f"{type(self).__name__}({values})"

    def __str__(self) -> str:
        return format_vector(self._data)


Vector2 = Vector[2]
Vector3 = Vector[3]
Vector4 = Vector[4]
Vector2f = Vector[2, np.float32]
Vector3f = Vector[3, np.float32]
Vector4f = Vector[4, np.float32]
Vector2i = Vector[2, np.int64]
Vector3i = Vector[3, np.int64]
Vector4i = Vector[4, np.int64]
ColorRGB = Vector[3, np.uint8]
ColorRGBA = Vector[4, np.uint8]
ColorfRGB = Vector3f
ColorfRGBA = Vector4f
