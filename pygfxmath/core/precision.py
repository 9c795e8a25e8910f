"""
Numerical precision constants and utilities.

Default comparison tolerances, angle constants and is_close.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14

PI: float = float(np.pi)
HALF_PI: float = PI / 2.0
TWO_PI: float = PI * 2.0
DEG_TO_RAD: float = PI / 180.0
RAD_TO_DEG: float = 180.0 / PI


def is_close(
    a: float | NDArray[Any],
    b: float | NDArray[Any],
    rtol: float = DEFAULT_RTOL,
    atol: float = DEFAULT_ATOL
) -> bool:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|, over every element
    when arrays are given.

    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        True when every element pair is close
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return bool(np.all(np.abs(a - b) <= atol + rtol * np.abs(b)))
