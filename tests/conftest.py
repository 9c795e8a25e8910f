"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pygfxmath import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def matrix_123():
    """The 3x3 matrix 1..9 in row-major order (singular)."""
    return Matrix[3, 3](1, 2, 3, 4, 5, 6, 7, 8, 9)


@pytest.fixture
def invertible_3x3():
    """Integer matrix with determinant 1 and an integer inverse."""
    return Matrix[3, 3]([[1, 2, 3], [0, 1, 4], [5, 6, 0]])


@pytest.fixture
def random_rotation(rng):
    """Orthonormal 4x4 rotation built from a random axis and angle."""
    axis = rng.standard_normal(3)
    axis /= np.linalg.norm(axis)
    theta = rng.uniform(-np.pi, np.pi)
    x, y, z = axis
    c, s, t = np.cos(theta), np.sin(theta), 1.0 - np.cos(theta)
    rotation = np.eye(4)
    rotation[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return Matrix[4, 4](rotation)
