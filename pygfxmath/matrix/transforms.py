"""
Transform factories.

Mixed into Matrix[3, 3] (2D homogeneous transforms) and Matrix[4, 4]
(3D homogeneous and projective transforms). Only those two shapes gain
these classmethods.

Convention:
    Vectors are columns and are transformed as ``M * v`` (``v * M`` is
    the same product). Translations therefore live in the last column,
    and composites read right to left: in ``projection * view * model``
    the model transform is applied first.

    Projections are right-handed and OpenGL-style: the camera looks down
    -z and clip-space z spans [-1, 1].
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from pygfxmath.angle import Angle, as_radians
from pygfxmath.core.exceptions import (
    DegenerateGeometryError,
    DimensionError,
    ValidationError,
)
from pygfxmath.core.shaped import ShapedValue
from pygfxmath.core.tolerances import select_tolerance
from pygfxmath.core.validation import (
    check_array,
    check_distinct,
    check_finite,
    check_positive,
    check_shape,
)
from pygfxmath.geometry import Rectangle
from pygfxmath.vector import Vector


def _components(value: Any, n: int, name: str) -> tuple[Any, ...]:
    """Read n finite coordinates from a Vector, Point, Size or plain sequence."""
    if isinstance(value, ShapedValue):
        if value.shape != (n,):
            raise DimensionError(
                f"{name}: expected {n} components, got {type(value).__name__}"
            )
        values = value.to_numpy()
    else:
        values = check_array(value, name)
        check_shape(values, (n,), name)
    check_finite(values, name)
    return tuple(values)


def _field_of_view(value: Angle | float, name: str) -> float:
    radians = as_radians(value)
    check_positive(radians, name)
    if radians >= math.pi:
        raise ValidationError(f"{name} must be below 180 degrees, got {radians} rad")
    return radians


class _Transform2D:
    """Factories for 3x3 homogeneous 2D transforms."""

    __slots__ = ()

    @classmethod
    def translate(cls, position):
        """Move by (x, y); accepts a Vector[2], Point[2] or pair."""
        x, y = _components(position, 2, 'position')
        return cls(
            1, 0, x,
            0, 1, y,
            0, 0, 1,
        )

    @classmethod
    def scale(cls, value):
        """Scale by (width, height); accepts a Size[2], Vector[2] or pair."""
        sx, sy = _components(value, 2, 'value')
        return cls(
            sx, 0, 0,
            0, sy, 0,
            0, 0, 1,
        )

    @classmethod
    def rotate(cls, value: Angle | float):
        """
        Counter-clockwise rotation about the origin, [[c, -s], [s, c]].

        Same handedness as Matrix[4, 4].rotate_z; this is not the clockwise
        [[c, s], [-s, c]] form some 2D libraries use.
        """
        theta = as_radians(value)
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            c, -s, 0,
            s, c, 0,
            0, 0, 1,
        )

    @classmethod
    def shear(cls, value):
        """x' = x + value.x * y, y' = value.y * x + y."""
        kx, ky = _components(value, 2, 'value')
        return cls(
            1, kx, 0,
            ky, 1, 0,
            0, 0, 1,
        )


class _Transform3D:
    """Factories for 4x4 homogeneous 3D transforms and projections."""

    __slots__ = ()

    @classmethod
    def translate(cls, position):
        x, y, z = _components(position, 3, 'position')
        return cls(
            1, 0, 0, x,
            0, 1, 0, y,
            0, 0, 1, z,
            0, 0, 0, 1,
        )

    @classmethod
    def scale(cls, value):
        sx, sy, sz = _components(value, 3, 'value')
        return cls(
            sx, 0, 0, 0,
            0, sy, 0, 0,
            0, 0, sz, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def rotate_x(cls, value: Angle | float):
        theta = as_radians(value)
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            1, 0, 0, 0,
            0, c, -s, 0,
            0, s, c, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def rotate_y(cls, value: Angle | float):
        theta = as_radians(value)
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            c, 0, s, 0,
            0, 1, 0, 0,
            -s, 0, c, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def rotate_z(cls, value: Angle | float):
        theta = as_radians(value)
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            c, -s, 0, 0,
            s, c, 0, 0,
            0, 0, 1, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def perspective(cls, horizontal_fov: Angle | float, aspect_ratio: float, near_z: float, far_z: float):
        """
        Perspective projection from a horizontal field of view.

        The vertical field of view is derived as
        2 * atan(tan(horizontal_fov / 2) / aspect_ratio).
        """
        hfov = _field_of_view(horizontal_fov, 'horizontal_fov')
        check_positive(aspect_ratio, 'aspect_ratio')
        vertical_fov = 2.0 * math.atan(math.tan(hfov / 2.0) / aspect_ratio)
        return cls.perspective_v(vertical_fov, aspect_ratio, near_z, far_z)

    @classmethod
    def perspective_v(cls, vertical_fov: Angle | float, aspect_ratio: float, near_z: float, far_z: float):
        """
        Perspective projection from a vertical field of view.

        Args:
            vertical_fov: Full vertical opening angle (Angle or radians)
            aspect_ratio: Viewport width / height
            near_z: Distance to the near clipping plane
            far_z: Distance to the far clipping plane

        Returns:
            Projection mapping the view frustum onto the [-1, 1] clip cube

        Raises:
            ValidationError: On a non-positive aspect ratio or field of view,
                or coinciding clipping planes
        """
        vfov = _field_of_view(vertical_fov, 'vertical_fov')
        check_positive(aspect_ratio, 'aspect_ratio')
        check_distinct(near_z, far_z, ('near_z', 'far_z'))
        tan_half_angle = math.tan(vfov / 2.0)
        negative_range = near_z - far_z
        return cls(
            1.0 / (aspect_ratio * tan_half_angle), 0, 0, 0,
            0, 1.0 / tan_half_angle, 0, 0,
            0, 0, (far_z + near_z) / negative_range, (2.0 * far_z * near_z) / negative_range,
            0, 0, -1, 0,
        )

    @classmethod
    def lookat(cls, target, at, up):
        """
        View matrix for an eye placed at ``target`` looking towards ``at``.

        Builds an orthonormal right-handed basis: z points from ``at`` back
        to the eye, x = up ^ z, y = z ^ x.

        Raises:
            DegenerateGeometryError: If the eye and ``at`` coincide, or
                ``up`` is parallel to the viewing direction
        """
        vector3 = Vector._specialize((3,), np.dtype(np.float64))
        eye = vector3(_components(target, 3, 'target'))
        center = vector3(_components(at, 3, 'at'))
        up = vector3(_components(up, 3, 'up'))

        forward = eye - center
        if forward.length_squared() == 0:
            raise DegenerateGeometryError(
                "lookat: eye and target positions coincide",
                reason='coincident_points',
            )
        z_axis = forward.normalized()

        side = up ^ z_axis
        tier = select_tolerance(np.float64)
        if side.length() <= tier.atol * max(float(up.length()), 1.0):
            raise DegenerateGeometryError(
                "lookat: up vector is zero or parallel to the viewing direction",
                reason='parallel_up_vector',
            )
        x_axis = side.normalized()
        y_axis = z_axis ^ x_axis

        return cls(
            x_axis.x, x_axis.y, x_axis.z, -(x_axis * eye),
            y_axis.x, y_axis.y, y_axis.z, -(y_axis * eye),
            z_axis.x, z_axis.y, z_axis.z, -(z_axis * eye),
            0, 0, 0, 1,
        )

    @classmethod
    def orthographic(cls, rect: Rectangle, z_near: float, z_far: float):
        """
        Orthographic projection of a screen rectangle.

        Screen y grows downwards (top < bottom), so the projection flips y
        to land in y-up clip space.

        Raises:
            ValidationError: On a zero-width or zero-height rectangle, or
                coinciding clipping planes
        """
        if not isinstance(rect, Rectangle):
            raise ValidationError(f"rect: expected a Rectangle, got {type(rect).__name__}")
        check_distinct(rect.left, rect.right, ('rect.left', 'rect.right'))
        check_distinct(rect.top, rect.bottom, ('rect.top', 'rect.bottom'))
        check_distinct(z_near, z_far, ('z_near', 'z_far'))
        width = rect.right - rect.left
        height = rect.top - rect.bottom
        depth = z_far - z_near
        return cls(
            2.0 / width, 0, 0, -((rect.right + rect.left) / width),
            0, 2.0 / height, 0, -((rect.top + rect.bottom) / height),
            0, 0, -2.0 / depth, -((z_far + z_near) / depth),
            0, 0, 0, 1,
        )
