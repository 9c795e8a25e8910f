"""
Tolerance tiers for numerical comparison.

Defines precision expectations per scalar type:
- FP64: double precision, near machine epsilon
- FP32: relaxed for single-precision arithmetic
- INTEGER: exact arithmetic, zero tolerance

Used by isclose() on vectors and matrices, by the singularity check in
Matrix.inverse(), and by the test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, near machine epsilon',
)

FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='Single precision, transform-chain accuracy',
)

# Integer storage is exact; only identical values compare equal.
INTEGER = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='integer',
    description='Integer storage, exact comparison',
)

# Hadamard ratio |det(A)| / prod(||row_i||) below which an invertible
# matrix is reported as ill-conditioned. The ratio is 1 for orthogonal
# rows and shrinks towards 0 as rows become parallel.
ILL_CONDITIONED_RATIO = 1e-8


def select_tolerance(dtype: np.dtype | type) -> ToleranceTier:
    """Select appropriate tolerance tier for a given scalar type."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer) or dtype == np.bool_:
        return INTEGER
    if dtype.itemsize <= 4:
        return FP32
    return FP64
