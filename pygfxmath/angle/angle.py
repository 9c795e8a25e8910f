"""
Unit-tagged angles.

An Angle is one scalar tagged with a unit. The unit is part of the type:
``Radians`` and ``Degrees`` are the two specializations of ``Angle``, and the
only place a value crosses between them is ``convert_angle``.

Design decisions:
    - Immutable (frozen=True); normalize()/wrap() return new angles
    - Arithmetic never promotes units: mixing them raises UnitMismatchError
    - Comparison converts the right-hand side to the left-hand side's unit
    - Division and modulo by zero follow IEEE (inf/nan), without warnings
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

import numpy as np

from pygfxmath.core.exceptions import UnitMismatchError, ValidationError
from pygfxmath.core.precision import DEG_TO_RAD, HALF_PI, PI, RAD_TO_DEG, TWO_PI
from pygfxmath.core.validation import is_scalar


class AngleUnit(str, Enum):
    """Unit tag carried by every Angle type."""
    RADIANS = 'radians'
    DEGREES = 'degrees'

    @property
    def period(self) -> float:
        """Length of one full turn in this unit."""
        return TWO_PI if self is AngleUnit.RADIANS else 360.0


def convert_angle(value: float, from_unit: AngleUnit, to_unit: AngleUnit) -> float:
    """
    Convert a raw angle value between units.

    This is the single conversion point of the library: every cross-unit
    construction and comparison goes through it.

    Args:
        value: Angle magnitude expressed in from_unit
        from_unit: Unit of value
        to_unit: Desired unit

    Returns:
        The same angle expressed in to_unit
    """
    from_unit = AngleUnit(from_unit)
    to_unit = AngleUnit(to_unit)
    if from_unit is to_unit:
        return float(value)
    if to_unit is AngleUnit.RADIANS:
        return float(value) * DEG_TO_RAD
    return float(value) * RAD_TO_DEG


_UNIT_TYPES: dict[AngleUnit, type] = {}


def _angle_type(unit: AngleUnit) -> type:
    unit = AngleUnit(unit)
    specialized = _UNIT_TYPES.get(unit)
    if specialized is None:
        name = unit.value.capitalize()
        specialized = type(name, (Angle,), {
            '__module__': __name__,
            '__qualname__': name,
            'unit': unit,
        })
        _UNIT_TYPES[unit] = specialized
    return specialized


@dataclass(frozen=True, eq=False, repr=False)
class Angle:
    """
    Scalar angle tagged with a unit.

    ``Angle[AngleUnit.DEGREES]`` (alias ``Degrees``) and
    ``Angle[AngleUnit.RADIANS]`` (alias ``Radians``) are the concrete types;
    a bare ``Angle(x)`` is read as radians.

    Construction:
        Radians(math.pi)          # raw value in the type's unit
        Radians(Degrees(180))     # converted once, via convert_angle
        Radians.asin(0.5)         # inverse-trig factories (always radians)

    Attributes:
        value: Magnitude expressed in the type's unit
    """
    value: float = 0.0

    unit: ClassVar[AngleUnit | None] = None

    def __class_getitem__(cls, unit: AngleUnit) -> type:
        if cls.unit is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        return _angle_type(unit)

    def __new__(cls, value: Any = 0.0):
        if cls.unit is None:
            cls = _angle_type(AngleUnit.RADIANS)
        return object.__new__(cls)

    def __post_init__(self):
        value = self.value
        if isinstance(value, Angle):
            value = convert_angle(value.value, value.unit, self.unit)
        elif not is_scalar(value):
            raise ValidationError(
                f"{type(self).__name__}: expected a real number or an Angle, "
                f"got {type(value).__name__}"
            )
        object.__setattr__(self, 'value', float(value))

    def __reduce__(self):
        return (_rebuild_angle, (self.unit.value, self.value))

    # Factories

    @classmethod
    def pi(cls) -> Angle:
        return _angle_type(AngleUnit.RADIANS)(PI)

    @classmethod
    def half_pi(cls) -> Angle:
        return _angle_type(AngleUnit.RADIANS)(HALF_PI)

    @classmethod
    def two_pi(cls) -> Angle:
        return _angle_type(AngleUnit.RADIANS)(TWO_PI)

    @classmethod
    def asin(cls, value: float) -> Angle:
        """Arc sine, as a Radians value."""
        return _angle_type(AngleUnit.RADIANS)(np.arcsin(value))

    @classmethod
    def acos(cls, value: float) -> Angle:
        """Arc cosine, as a Radians value."""
        return _angle_type(AngleUnit.RADIANS)(np.arccos(value))

    @classmethod
    def atan(cls, value: float) -> Angle:
        """Arc tangent, as a Radians value."""
        return _angle_type(AngleUnit.RADIANS)(np.arctan(value))

    @classmethod
    def atanh(cls, value: float) -> Angle:
        """Inverse hyperbolic tangent, wrapped as a Radians value."""
        return _angle_type(AngleUnit.RADIANS)(np.arctanh(value))

    @classmethod
    def atan2(cls, y: float, x: float) -> Angle:
        """Quadrant-aware arc tangent of y/x, as a Radians value."""
        return _angle_type(AngleUnit.RADIANS)(np.arctan2(y, x))

    # Conversion

    def to(self, unit: AngleUnit) -> Angle:
        """Return this angle expressed in another unit."""
        return _angle_type(unit)(self)

    @property
    def radians(self) -> float:
        return convert_angle(self.value, self.unit, AngleUnit.RADIANS)

    @property
    def degrees(self) -> float:
        return convert_angle(self.value, self.unit, AngleUnit.DEGREES)

    def __float__(self) -> float:
        return self.value

    def normalize(self) -> Angle:
        """
        Reduce the angle by whole turns using floating remainder.

        The result keeps the sign of the input (``fmod`` semantics):
        ``Degrees(370)`` becomes ``Degrees(10)`` and ``Degrees(-370)``
        becomes ``Degrees(-10)``. Use wrap() for a non-negative result.
        """
        return type(self)(math.fmod(self.value, self.unit.period))

    def wrap(self) -> Angle:
        """Reduce the angle into [0, period): [0, 2π) or [0, 360)."""
        period = self.unit.period
        wrapped = math.fmod(self.value, period)
        if wrapped < 0.0:
            wrapped += period
        # -tiny + period rounds to exactly period
        if wrapped >= period:
            wrapped = 0.0
        return type(self)(wrapped)

    # Trigonometry (always evaluated in radians)

    def sin(self) -> float:
        return math.sin(self.radians)

    def cos(self) -> float:
        return math.cos(self.radians)

    def tan(self) -> float:
        return math.tan(self.radians)

    # Arithmetic

    def _same_unit(self, other: Angle, op: str) -> None:
        if other.unit is not self.unit:
            raise UnitMismatchError(
                f"cannot apply '{op}' to {type(self).__name__} and "
                f"{type(other).__name__}; convert one operand first",
                left_unit=self.unit.value,
                right_unit=other.unit.value,
            )

    def __add__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        self._same_unit(other, '+')
        return type(self)(self.value + other.value)

    def __sub__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        self._same_unit(other, '-')
        return type(self)(self.value - other.value)

    def __mul__(self, other):
        if isinstance(other, Angle):
            self._same_unit(other, '*')
            return type(self)(self.value * other.value)
        if is_scalar(other):
            return type(self)(self.value * float(other))
        return NotImplemented

    def __rmul__(self, other):
        if is_scalar(other):
            return type(self)(float(other) * self.value)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Angle):
            self._same_unit(other, '/')
            divisor = other.value
        elif is_scalar(other):
            divisor = float(other)
        else:
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            return type(self)(np.divide(np.float64(self.value), divisor))

    def __mod__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        self._same_unit(other, '%')
        with np.errstate(divide='ignore', invalid='ignore'):
            return type(self)(np.fmod(np.float64(self.value), other.value))

    def __neg__(self):
        return type(self)(-self.value)

    def __pos__(self):
        return self

    # Comparison

    def _operand(self, other: Any) -> float | None:
        if isinstance(other, Angle):
            return convert_angle(other.value, other.unit, self.unit)
        if is_scalar(other):
            return float(other)
        return None

    def __eq__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.value == rhs

    def __lt__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.value < rhs

    def __le__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.value <= rhs

    def __gt__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.value > rhs

    def __ge__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return self.value >= rhs

    def __hash__(self):
        # equal angles of different units must share a hash
        return hash(self.radians)

    def isclose(self, other: Angle | float, rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
        """Tolerance comparison after converting other to this unit."""
        rhs = self._operand(other)
        if rhs is None:
            raise ValidationError(f"cannot compare an angle with {type(other).__name__}")
        return math.isclose(self.value, rhs, rel_tol=rel_tol, abs_tol=abs_tol)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __str__(self) -> str:
        if self.unit is AngleUnit.DEGREES:
            return f"{self.value:g}°"
        return f"{self.value:g} rad"


Radians = Angle[AngleUnit.RADIANS]
Degrees = Angle[AngleUnit.DEGREES]


def as_radians(value: Angle | float) -> float:
    """Read an Angle of any unit, or a raw number taken as radians."""
    if isinstance(value, Angle):
        return value.radians
    if is_scalar(value):
        return float(value)
    raise ValidationError(
        f"expected an Angle or a number of radians, got {type(value).__name__}"
    )


def _rebuild_angle(unit: str, value: float) -> Angle:
    return _angle_type(AngleUnit(unit))(value)
