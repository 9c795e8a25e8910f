"""
Core infrastructure for pygfxmath.

This module provides shared abstractions and utilities used by the
angle, vector, matrix and geometry modules.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Machine epsilon, constants and closeness helpers
    tolerances: Tolerance tiers per scalar type
    shaped: Shape-specialized immutable value base
"""

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
from pygfxmath.core.tolerances import ToleranceTier, select_tolerance
from pygfxmath.core.shaped import ShapedValue

__all__ = [
    # Exceptions
    "PyGfxMathError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "UnitMismatchError",
    "NumericalError",
    "SingularMatrixError",
    "DegenerateGeometryError",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
    # Base
    "ShapedValue",
]
