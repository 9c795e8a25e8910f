"""
Vector module.

Fixed-length vectors with algebraic operators, geometric helpers
(dot, cross, length, normalize, angle between) and swizzling.

Public API:
    Vector                 - Length-parametric vector type (Vector[N])
    Vector2/3/4            - float64 aliases (f: float32, i: int64)
    ColorRGB/ColorRGBA     - uint8 colour vectors
    SWIZZLE_*              - Swizzle selectors
"""

from pygfxmath.vector.swizzle import (
    Swizzle,
    SWIZZLE_X,
    SWIZZLE_Y,
    SWIZZLE_Z,
    SWIZZLE_W,
    SWIZZLE_R,
    SWIZZLE_G,
    SWIZZLE_B,
    SWIZZLE_A,
    SWIZZLE_ZERO,
    SWIZZLE_ONE,
)
from pygfxmath.vector.vector import (
    Vector,
    Vector2,
    Vector3,
    Vector4,
    Vector2f,
    Vector3f,
    Vector4f,
    Vector2i,
    Vector3i,
    Vector4i,
    ColorRGB,
    ColorRGBA,
    ColorfRGB,
    ColorfRGBA,
)

__all__ = [
    # Types
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "Vector2f",
    "Vector3f",
    "Vector4f",
    "Vector2i",
    "Vector3i",
    "Vector4i",
    "ColorRGB",
    "ColorRGBA",
    "ColorfRGB",
    "ColorfRGBA",
    # Swizzle
    "Swizzle",
    "SWIZZLE_X",
    "SWIZZLE_Y",
    "SWIZZLE_Z",
    "SWIZZLE_W",
    "SWIZZLE_R",
    "SWIZZLE_G",
    "SWIZZLE_B",
    "SWIZZLE_A",
    "SWIZZLE_ZERO",
    "SWIZZLE_ONE",
]
