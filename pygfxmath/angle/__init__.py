"""
Angle module.

Unit-tagged scalar angles with explicit, single-point unit conversion.

Public API:
    Angle          - Unit-parametric angle type (Angle[AngleUnit.DEGREES])
    Radians        - Angle measured in radians
    Degrees        - Angle measured in degrees
    AngleUnit      - Unit tags
    convert_angle  - The raw-value conversion used by every cross-unit path
    as_radians     - Read an Angle or raw number as radians
"""

from pygfxmath.angle.angle import (
    Angle,
    AngleUnit,
    Degrees,
    Radians,
    as_radians,
    convert_angle,
)

__all__ = [
    "Angle",
    "AngleUnit",
    "Degrees",
    "Radians",
    "as_radians",
    "convert_angle",
]
