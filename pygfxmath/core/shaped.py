"""
Shape-specialized immutable value base.

Every concrete value type in pygfxmath (vectors, points, sizes, matrices)
carries its shape as part of its *type*: ``Vector[3]`` and ``Vector[4]`` are
distinct classes, created on first use and cached. Members that only make
sense for some shapes (a ``z`` accessor, a cross product, a determinant)
are attached only to the specializations that support them, so using them
on the wrong shape fails at attribute lookup rather than mid-computation.

Design decisions:
    - Storage is a private read-only numpy array
    - Values are immutable; operators always return new values
    - The unsubscripted family class infers the shape from its arguments
"""

from __future__ import annotations

from typing import Any, ClassVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pygfxmath.core.exceptions import DimensionError, ValidationError
from pygfxmath.core.precision import is_close
from pygfxmath.core.tolerances import select_tolerance

_SPECIALIZATIONS: dict[tuple[type, tuple[int, ...], np.dtype], type] = {}


def _parse_dtype(value: Any) -> np.dtype:
    try:
        dtype = np.dtype(value)
    except TypeError as e:
        raise ValidationError(f"invalid scalar type {value!r}: {e}") from e
    if not np.issubdtype(dtype, np.number):
        raise ValidationError(f"scalar type must be numeric, got {dtype}")
    return dtype


class ShapedValue:
    """
    Base class for immutable, shape-typed numeric values.

    Subclasses declare themselves as a *family* (``class Vector(ShapedValue,
    family=True)``) and implement the hooks below; users then subscript the
    family to obtain concrete classes.

    Family hooks:
        _ndim: number of shape parameters taken by ``Family[...]``
        _specialization_bases(shape): mixins for a given shape
        _specialization_attributes(shape): extra class attributes for a shape
        _specialization_name(shape, dtype): class name for a given shape
        _infer_shape(args): shape implied by unsubscripted construction
        _coerce(args): storage array built from constructor arguments
    """

    __slots__ = ('_data',)

    _family: ClassVar[type]
    _ndim: ClassVar[int] = 1
    shape: ClassVar[tuple[int, ...] | None] = None
    dtype: ClassVar[np.dtype] = np.dtype(np.float64)

    def __init_subclass__(cls, family: bool = False, **kwargs):
        super().__init_subclass__(**kwargs)
        if family:
            cls._family = cls

    def __class_getitem__(cls, params):
        family = cls._family
        if cls.shape is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        if not isinstance(params, tuple):
            params = (params,)
        if len(params) not in (family._ndim, family._ndim + 1):
            raise TypeError(
                f"{family.__name__}[...] takes {family._ndim} dimension(s) "
                f"and an optional scalar type, got {len(params)} parameter(s)"
            )
        dims = params[:family._ndim]
        for dim in dims:
            if isinstance(dim, bool) or not isinstance(dim, (int, np.integer)) or dim < 1:
                raise DimensionError(
                    f"{family.__name__} dimensions must be positive integers, got {dims}"
                )
        dtype = _parse_dtype(params[family._ndim]) if len(params) > family._ndim else np.dtype(np.float64)
        return family._specialize(tuple(int(d) for d in dims), dtype)

    @classmethod
    def _specialize(cls, shape: tuple[int, ...], dtype: np.dtype) -> type:
        family = cls._family
        key = (family, shape, dtype)
        specialized = _SPECIALIZATIONS.get(key)
        if specialized is None:
            name = family._specialization_name(shape, dtype)
            namespace = {
                '__slots__': (),
                '__module__': family.__module__,
                '__qualname__': name,
                'shape': shape,
                'dtype': dtype,
            }
            namespace.update(family._specialization_attributes(shape))
            bases = tuple(family._specialization_bases(shape)) + (family,)
            specialized = type(name, bases, namespace)
            _SPECIALIZATIONS[key] = specialized
        return specialized

    @classmethod
    def _specialization_bases(cls, shape: tuple[int, ...]) -> tuple[type, ...]:
        return ()

    @classmethod
    def _specialization_attributes(cls, shape: tuple[int, ...]) -> dict[str, Any]:
        return {}

    @classmethod
    def _specialization_name(cls, shape: tuple[int, ...], dtype: np.dtype) -> str:
        dims = ", ".join(str(d) for d in shape)
        if dtype == np.float64:
            return f"{cls.__name__}[{dims}]"
        return f"{cls.__name__}[{dims}, {dtype.name}]"

    @classmethod
    def _infer_shape(cls, args: tuple[Any, ...]) -> tuple[int, ...]:
        raise NotImplementedError

    @classmethod
    def _coerce(cls, args: tuple[Any, ...]) -> NDArray[Any]:
        raise NotImplementedError

    def __new__(cls, *args):
        if cls.shape is None:
            cls = cls._specialize(cls._infer_shape(args), cls.dtype)
        return cls._wrap(cls._coerce(args))

    @classmethod
    def _wrap(cls, data: ArrayLike) -> ShapedValue:
        """Build an instance from storage-shaped data without re-validating."""
        self = object.__new__(cls)
        array = np.array(data, dtype=cls.dtype)
        array.setflags(write=False)
        object.__setattr__(self, '_data', array)
        return self

    # Immutability

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} values are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} values are immutable")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_rebuild, (self._family, self.shape, self.dtype.str, self._data.tolist()))

    # Interop

    # numpy defers binary operators to our reflected methods
    __array_ufunc__ = None

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def to_numpy(self) -> NDArray[Any]:
        """Return a writable copy of the underlying storage."""
        return self._data.copy()

    # Comparison

    def _same_shape(self, other: Any) -> bool:
        return (
            isinstance(other, ShapedValue)
            and other._family is self._family
            and other.shape == self.shape
        )

    def __eq__(self, other):
        if not isinstance(other, ShapedValue) or other._family is not self._family:
            return NotImplemented
        return other.shape == self.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self):
        return hash((self._family.__name__, self.shape, tuple(self._data.ravel().tolist())))

    def isclose(self, other: ShapedValue, rtol: float | None = None, atol: float | None = None) -> bool:
        """
        Compare against a same-shaped value within floating tolerance.

        Defaults come from the tolerance tier of this value's scalar type.

        Raises:
            DimensionError: If the shapes differ
        """
        if not self._same_shape(other):
            raise DimensionError(
                f"cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        tier = select_tolerance(self.dtype)
        return is_close(
            self._data,
            other._data,
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        )


def _rebuild(family: type, shape: tuple[int, ...], dtype: str, values: list) -> ShapedValue:
    return family._specialize(shape, np.dtype(dtype))._wrap(values)


def component(index: int, doc: str | None = None) -> property:
    """Read-only property exposing one element of a 1D value."""

    def getter(self):
        return self._data[index]

    return property(getter, doc=doc)
