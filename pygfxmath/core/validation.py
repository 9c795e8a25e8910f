"""
Input validation utilities for pygfxmath.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pygfxmath.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)


def is_scalar(value: Any) -> bool:
    """True for Python/numpy real numbers (bool excluded)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (numbers.Real, np.number)) and np.ndim(value) == 0


def check_array(
    array: ArrayLike,
    name: str,
    dtype: np.dtype | type | None = None,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Target scalar type; the array is cast when given

    Returns:
        numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if dtype is not None and result.dtype != np.dtype(dtype):
        result = result.astype(dtype)

    return result


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_shape(array: NDArray[Any], shape: tuple[int, ...], name: str) -> None:
    """
    Verify array has exactly the given shape.

    Args:
        array: Array to check
        shape: Required shape
        name: Parameter name for error messages

    Raises:
        DimensionError: If shapes differ
    """
    if array.shape != tuple(shape):
        raise DimensionError(
            f"{name}: expected shape {tuple(shape)}, got {array.shape}"
        )


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify an index lies in [0, bound).

    Negative indices are rejected; bounds-checked access does not wrap.

    Args:
        index: Index to check
        bound: Exclusive upper bound
        name: Parameter name for error messages

    Returns:
        The index as a Python int

    Raises:
        IndexOutOfRangeError: If index is not an integer in range
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (numbers.Integral, np.integer)):
        raise IndexOutOfRangeError(
            f"{name}: index must be an integer, got {type(index).__name__}",
            index=index,
            bounds=(bound,),
        )
    index = int(index)
    if not 0 <= index < bound:
        raise IndexOutOfRangeError(
            f"{name}: index {index} out of range [0, {bound})",
            index=index,
            bounds=(bound,),
        )
    return index


def check_positive(value: float, name: str) -> None:
    """
    Verify a scalar is finite and strictly positive.

    Raises:
        ValidationError: If value is NaN/Inf or <= 0
    """
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be a valid float (not NaN/Inf), got {value}")
    if value <= 0:
        raise ValidationError(f"{name} must be positive, got {value}")


def check_distinct(a: float, b: float, names: tuple[str, str]) -> None:
    """
    Verify two scalars differ (e.g. near and far clipping planes).

    Raises:
        ValidationError: If a == b
    """
    if a == b:
        raise ValidationError(
            f"{names[0]} and {names[1]} must differ, both are {a}"
        )
